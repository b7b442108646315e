"""Pytest fixtures for the Dairycart client tests."""

import os

import pytest
import requests_mock

from dairyclient.api.client import ApiClient
from tests.utils import EXAMPLE_COOKIE, STORE_URL


@pytest.fixture
def client():
    """Client built from an existing session cookie, no login round trip."""
    with ApiClient.from_credential(STORE_URL, EXAMPLE_COOKIE) as c:
        yield c


@pytest.fixture
def req_mock():
    with requests_mock.Mocker() as m:
        yield m


def _dairycart_vars():
    return [name for name in os.environ if name.startswith("DAIRYCART_")]


@pytest.fixture
def isolated_env(monkeypatch):
    """Environment without DAIRYCART_* settings; values a .env file loads are dropped afterwards."""
    for name in _dairycart_vars():
        monkeypatch.delenv(name)
    yield monkeypatch
    # load_dotenv writes os.environ directly, outside monkeypatch's bookkeeping
    for name in _dairycart_vars():
        os.environ.pop(name)
