"""Seed records shared by the test modules."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

SEED_RECORDS: list[dict[str, Any]] = [
    {
        '_id': {'$oid': '507f1f77bcf86cd799439011'},
        'title': 'Dune',
        'createdAt': {'$date': '2021-01-01T00:00:00Z'},
    },
    {
        '_id': {'$oid': '507f1f77bcf86cd799439012'},
        'title': 'Hyperion',
        'createdAt': {'$date': '2021-01-02T00:00:00Z'},
    },
    {
        '_id': {'$oid': '507f1f77bcf86cd799439013'},
        'title': 'Solaris',
    },
]

SEED_IDS = [record['_id']['$oid'] for record in SEED_RECORDS]


def write_seed(path: Path, content: Any) -> Path:
    path.write_text(json.dumps(content), encoding='utf-8')
    return path
