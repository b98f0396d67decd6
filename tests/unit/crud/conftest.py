"""Shared fixtures for crud unit tests"""

from datetime import datetime, timedelta

import pytest

from docstore.crud.memory_repo import MemoryRepo
from docstore.models import Author, Document


T0 = datetime(2024, 1, 1, 12, 0, 0)


@pytest.fixture(name="store")
def store_fixture():
    """Empty in-memory store."""
    return MemoryRepo()


@pytest.fixture(name="reports")
def reports_fixture(store):
    """Two saved reports one second apart, by authors a1 and a2."""
    first = store.save(Document(
        id="r1", title="Report A", content="quarterly numbers",
        author=Author(id="a1", name="Ann"), created=T0,
    ))
    second = store.save(Document(
        id="r2", title="Report B", content="annual summary",
        author=Author(id="a2", name="Bob"), created=T0 + timedelta(seconds=1),
    ))
    return first, second
