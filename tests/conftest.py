import pytest

from argline import Shell


@pytest.fixture
def replies():
    return []


@pytest.fixture
def shell(replies):
    return Shell("!bot", transport=replies.append)
