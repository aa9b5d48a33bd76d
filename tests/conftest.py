from __future__ import annotations

from pathlib import Path

import pytest
from booktoggle.config.settings import ToggleSettings
from booktoggle.repositories.collection_repo import BookCollectionRepo
from booktoggle.repositories.seed_repo import SeedFileSource
from booktoggle.services.toggle_controller import ToggleController

from tests.fake_store import FakeCollection
from tests.seed_data import SEED_RECORDS, write_seed


@pytest.fixture
def seed_path(tmp_path: Path) -> Path:
    return write_seed(tmp_path / 'test.books.json', SEED_RECORDS)


@pytest.fixture
def fake_collection() -> FakeCollection:
    return FakeCollection()


@pytest.fixture
def repo(fake_collection: FakeCollection) -> BookCollectionRepo:
    return BookCollectionRepo(fake_collection)


@pytest.fixture
def controller(repo: BookCollectionRepo, seed_path: Path) -> ToggleController:
    return ToggleController(repo, SeedFileSource(str(seed_path)))


@pytest.fixture
def settings(seed_path: Path) -> ToggleSettings:
    return ToggleSettings(
        mongo_uri='mongodb://localhost:27017',
        db_name='hello',
        collection_name='books',
        host='127.0.0.1',
        port=3000,
        port_retry_attempts=5,
        seed_file=str(seed_path),
    )
