"""
Pytest fixtures for magicquery tests.
"""

from datetime import datetime
from typing import Any, Dict, List

import pytest

from magicquery.query.cache import clear_caches


@pytest.fixture(autouse=True)
def fresh_caches():
    """Start every test with empty path and regex caches."""
    clear_caches()
    yield
    clear_caches()


@pytest.fixture
def users() -> List[Dict[str, Any]]:
    """A small set of user records with nested profiles."""
    return [
        {
            "id": 1,
            "name": "Alice",
            "role": "admin",
            "active": True,
            "tags": ["ops", "Python"],
            "profile": {"age": 34, "city": "Berlin", "joined": datetime(2021, 3, 1)},
        },
        {
            "id": 2,
            "name": "bob",
            "role": "user",
            "active": False,
            "tags": [],
            "profile": {"age": 17, "city": "Paris", "joined": datetime(2023, 7, 15)},
        },
        {
            "id": 3,
            "name": "Carol",
            "role": "user",
            "active": True,
            "tags": ["dev"],
            "profile": {"age": 45, "city": None, "joined": datetime(2019, 1, 20)},
        },
        {
            "id": 4,
            "name": "Dave",
            "role": "guest",
            "active": True,
            "profile": None,
        },
    ]


@pytest.fixture
def orders() -> List[Dict[str, Any]]:
    """Order records with line items for $elemMatch and $all tests."""
    return [
        {
            "id": "o1",
            "status": "shipped",
            "total": 120.5,
            "items": [
                {"sku": "A1", "qty": 2, "price": 10.0},
                {"sku": "B2", "qty": 1, "price": 100.5},
            ],
            "labels": ["gift", "express"],
        },
        {
            "id": "o2",
            "status": "pending",
            "total": 15.0,
            "items": [{"sku": "A1", "qty": 1, "price": 15.0}],
            "labels": ["express"],
        },
        {
            "id": "o3",
            "status": "cancelled",
            "total": 0,
            "items": [],
            "labels": [],
        },
    ]
