import pytest

from library import Library
from repository import InMemoryBookRepository, InMemoryMemberRepository
from utils.ui_helpers import OUTPUT_MODE_ENV

@pytest.fixture
def book_repo():
    return InMemoryBookRepository()

@pytest.fixture
def member_repo():
    return InMemoryMemberRepository()

@pytest.fixture
def lib(book_repo, member_repo):
    # Fresh in-memory repositories for every test
    return Library(book_repo, member_repo)

@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # Keep the CLI output mode from leaking between tests
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")
