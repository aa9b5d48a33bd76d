"""Seed dataset source - reads the fixed JSON file used by the "on" toggle"""
import json
from typing import Any
from booktoggle.exceptions.exceptions import InvalidSeedError, SeedReadError

class SeedFileSource:
    def __init__(self, path: str):
        self.path = path

    def read(self) -> Any:
        """Parsed file content, unvalidated"""
        try:
            with open(self.path, 'r', encoding='utf-8') as seed_file:
                return json.load(seed_file)
        except ValueError as e:
            raise InvalidSeedError(f"{self.path} is not valid JSON: {e}") from e
        except OSError as e:
            raise SeedReadError(f"Could not read seed file {self.path}: {e.strerror or e}") from e
