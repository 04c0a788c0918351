"""Test fixtures for dismax_dsl tests."""

import os

# Set ENVIRONMENT before importing any modules that read configuration
os.environ.setdefault("ENVIRONMENT", "test")

import pytest

from dismax_dsl.dsl.fulltext import FulltextBuilder
from dismax_dsl.query.dismax import DismaxQuery


class RecordingTarget:
    """Query target that logs every call it receives."""

    def __init__(self):
        self.calls = []
        self.highlight = None
        self.restrictions = {}
        self.parents = []

    def add_fulltext_field(self, field_name, boost=None):
        self.calls.append(("fulltext", field_name, boost))

    def add_phrase_field(self, field_name, boost=None):
        self.calls.append(("phrase", field_name, boost))

    def set_highlight(self, options):
        self.highlight = options

    def set_minimum_match(self, minimum_match):
        self.calls.append(("mm", minimum_match))

    def set_tie(self, tie):
        self.calls.append(("tie", tie))

    def set_phrase_slop(self, slop):
        self.calls.append(("ps", slop))

    def set_query_phrase_slop(self, slop):
        self.calls.append(("qs", slop))

    def create_boost_query(self, factor, parent=-1):
        handle = len(self.parents)
        self.parents.append(parent)
        self.restrictions[handle] = []
        self.calls.append(("boost", factor, parent))
        return handle

    def add_boost_restriction(self, handle, restriction):
        self.restrictions[handle].append(restriction)


@pytest.fixture
def clean_env(monkeypatch):
    """Clean environment variables for testing."""
    env_vars = [
        "DISMAX_DEF_TYPE",
        "DISMAX_HIGHLIGHT_FIELDS",
        "DISMAX_HIGHLIGHT_PRE",
        "DISMAX_HIGHLIGHT_POST",
        "DISMAX_BOOST_PRECISION",
    ]
    for var in env_vars:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def target():
    """Provide a recording query target."""
    return RecordingTarget()


@pytest.fixture
def query():
    """Provide an empty dismax query."""
    return DismaxQuery("search is cool")


@pytest.fixture
def builder(query):
    """Provide a builder writing into the dismax query fixture."""
    return FulltextBuilder(query)
