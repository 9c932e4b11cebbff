"""Tests for loading stored user credentials."""

import json
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from edgeapp.cli.auth import load_api_key_credentials, load_credentials


@pytest.fixture
def credentials_file(tmp_path):
    path = tmp_path / "credentials.json"
    with patch("edgeapp.cli.auth.main.DEFAULT_CREDENTIALS_PATH", str(path)):
        yield path


def _write(path, **data):
    path.write_text(json.dumps(data), encoding="utf-8")


def test_load_credentials(credentials_file):
    _write(credentials_file, api_key="stored-key", username="dev", email="dev@example.com")

    credentials = load_credentials()

    assert credentials is not None
    assert credentials.api_key == "stored-key"
    assert credentials.username == "dev"
    assert not credentials.is_token_expired
    assert load_api_key_credentials() == "stored-key"


def test_api_key_not_leaked_in_repr(credentials_file):
    _write(credentials_file, api_key="stored-key")

    assert "stored-key" not in repr(load_credentials())


def test_missing_credentials_file(credentials_file):
    assert load_credentials() is None
    assert load_api_key_credentials() is None


def test_corrupt_credentials_file(credentials_file):
    credentials_file.write_text("{not json", encoding="utf-8")

    assert load_credentials() is None


def test_credentials_without_api_key(credentials_file):
    _write(credentials_file, username="dev")

    assert load_credentials() is None


def test_expired_credentials(credentials_file):
    expired = datetime.now(timezone.utc) - timedelta(hours=1)
    _write(credentials_file, api_key="stored-key", token_expires_at=expired.isoformat())

    credentials = load_credentials()

    assert credentials is not None
    assert credentials.is_token_expired
    assert load_api_key_credentials() is None


def test_unexpired_credentials(credentials_file):
    expires = datetime.now(timezone.utc) + timedelta(days=1)
    _write(credentials_file, api_key="stored-key", token_expires_at=expires.isoformat())

    assert load_api_key_credentials() == "stored-key"
