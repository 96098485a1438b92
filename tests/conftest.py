import pytest

from merkle_fixtures.config import MEMBERS


@pytest.fixture
def members():
    return list(MEMBERS)
