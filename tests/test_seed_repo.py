"""Tests for reading the seed dataset file."""

from __future__ import annotations

from pathlib import Path

import pytest
from booktoggle.exceptions.exceptions import InvalidSeedError, SeedReadError
from booktoggle.repositories.seed_repo import SeedFileSource

from tests.seed_data import SEED_RECORDS


class TestSeedFileSource:
    def test_reads_json_array(self, seed_path: Path) -> None:
        assert SeedFileSource(str(seed_path)).read() == SEED_RECORDS

    def test_returns_non_array_content_unvalidated(self, tmp_path: Path) -> None:
        path = tmp_path / 'seed.json'
        path.write_text('{"title": "Dune"}', encoding='utf-8')
        assert SeedFileSource(str(path)).read() == {'title': 'Dune'}

    def test_invalid_json_is_invalid_seed(self, tmp_path: Path) -> None:
        path = tmp_path / 'seed.json'
        path.write_text('[{"title": ', encoding='utf-8')
        with pytest.raises(InvalidSeedError):
            SeedFileSource(str(path)).read()

    def test_missing_file_is_read_error(self, tmp_path: Path) -> None:
        with pytest.raises(SeedReadError, match='Could not read seed file'):
            SeedFileSource(str(tmp_path / 'missing.json')).read()
