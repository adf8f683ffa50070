"""Shared fixtures for the Aura data layer tests."""
import json

import httpx
import pytest

from aura.schemas import AccountApiResponse
from aura.services.account_client import AccountClient
from mock_servers.aura_server import main as aura_server


def make_wire_account(id: str = "1", is_main: bool = True, balance: float = 100.0) -> AccountApiResponse:
    """Helper to create a decoded wire account."""
    return AccountApiResponse(id=id, is_main=is_main, balance=balance)


@pytest.fixture
def stub_dir(tmp_path, monkeypatch):
    """Point the mock Aura server at an empty stub directory."""
    monkeypatch.setattr(aura_server, "DATA_DIR", tmp_path)
    return tmp_path


@pytest.fixture
def write_stub(stub_dir):
    """Write an accounts stub file for a user."""
    def _write(user_id: str, payload) -> None:
        (stub_dir / f"accounts_{user_id}.json").write_text(json.dumps(payload))
    return _write


@pytest.fixture
def server_client(stub_dir):
    """AccountClient routed in-process to the mock Aura server."""
    return AccountClient(
        base_url="http://testserver",
        transport=httpx.ASGITransport(app=aura_server.app),
    )
