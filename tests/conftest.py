"""Shared test fixtures."""

import pytest
from requests import Session
from requests.auth import HTTPBasicAuth

from coolover.config import Config
from coolover.output import set_json_mode


@pytest.fixture
def base_url():
    return "https://jira.example.com"


@pytest.fixture
def config(base_url):
    return Config(url=base_url, credentials=("alice", "secret"))


@pytest.fixture
def mock_session():
    """Authenticated requests.Session for testing."""
    s = Session()
    s.auth = HTTPBasicAuth("alice", "secret")
    s.headers.update({"Accept": "application/json"})
    return s


@pytest.fixture(autouse=True)
def _text_mode():
    set_json_mode(False)
    yield
    set_json_mode(False)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run from an empty directory with no COOLOVER_* variables set."""
    monkeypatch.chdir(tmp_path)
    for name in ("URL", "USER", "PASSWORD", "CONFIG"):
        monkeypatch.delenv(f"COOLOVER_{name}", raising=False)
    return tmp_path
