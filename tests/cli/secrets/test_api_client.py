"""Tests for AppSecretsClient API client."""

import httpx
import pytest

from edgeapp.cli.secrets.api_client import AppSecretsClient, Secret

from ..fixtures.api_responses import TEST_API_URL, make_response, patch_async_client

DB_PASSWORD_ID = "appsec_11111111-1111-1111-1111-111111111111"
API_KEY_ID = "appsec_22222222-2222-2222-2222-222222222222"
TOKEN_ID = "appsec_33333333-3333-3333-3333-333333333333"


@pytest.fixture
def mock_httpx_client():
    patcher, mock_instance = patch_async_client()
    yield mock_instance
    patcher.stop()


@pytest.fixture
def secrets_client():
    return AppSecretsClient(api_url=TEST_API_URL, api_key="test-token")


@pytest.mark.asyncio
async def test_get_secret_value_by_name(secrets_client, mock_httpx_client):
    mock_httpx_client.post.side_effect = [
        make_response(json={"secret": {"secretId": DB_PASSWORD_ID, "name": "DB_PASSWORD"}}),
        make_response(json={"value": "s3cr3t"}),
    ]

    value = await secrets_client.get_secret_value_by_name("app_123", "DB_PASSWORD")

    assert value == "s3cr3t"
    first, second = mock_httpx_client.post.call_args_list
    assert first.args[0] == f"{TEST_API_URL}/app_secrets/get_secret_by_name"
    assert first.kwargs["json"] == {"appId": "app_123", "name": "DB_PASSWORD"}
    assert second.args[0] == f"{TEST_API_URL}/app_secrets/get_secret_value"
    assert second.kwargs["json"] == {"secretId": DB_PASSWORD_ID}


@pytest.mark.asyncio
async def test_get_secret_by_name_not_found(secrets_client, mock_httpx_client):
    mock_httpx_client.post.return_value = make_response(404, json={"error": "not found"})

    assert await secrets_client.get_secret_by_name("app_123", "MISSING") is None
    assert await secrets_client.get_secret_value_by_name("app_123", "MISSING") is None


@pytest.mark.asyncio
async def test_get_secret_by_name_empty_payload(secrets_client, mock_httpx_client):
    mock_httpx_client.post.return_value = make_response(json={"secret": None})

    assert await secrets_client.get_secret_by_name("app_123", "MISSING") is None


@pytest.mark.asyncio
async def test_get_secret_by_name_server_error(secrets_client, mock_httpx_client):
    mock_httpx_client.post.return_value = make_response(500, json={"error": "boom"})

    with pytest.raises(httpx.HTTPStatusError):
        await secrets_client.get_secret_by_name("app_123", "DB_PASSWORD")


@pytest.mark.asyncio
async def test_get_secret_value_invalid_id(secrets_client, mock_httpx_client):
    with pytest.raises(ValueError):
        await secrets_client.get_secret_value("not-a-secret-id")

    mock_httpx_client.post.assert_not_called()


@pytest.mark.asyncio
async def test_get_secret_value_missing_value(secrets_client, mock_httpx_client):
    mock_httpx_client.post.return_value = make_response(json={})

    with pytest.raises(ValueError):
        await secrets_client.get_secret_value(DB_PASSWORD_ID)


@pytest.mark.asyncio
async def test_list_all_app_secrets_follows_pages(secrets_client, mock_httpx_client):
    mock_httpx_client.post.side_effect = [
        make_response(
            json={
                "secrets": [{"secretId": API_KEY_ID, "name": "API_KEY"}],
                "nextPageToken": "page-2",
            }
        ),
        make_response(json={"secrets": [{"secretId": TOKEN_ID, "name": "TOKEN"}]}),
    ]

    secrets = await secrets_client.list_all_app_secrets("app_123")

    assert [secret.name for secret in secrets] == ["API_KEY", "TOKEN"]
    first, second = mock_httpx_client.post.call_args_list
    assert first.args[0] == f"{TEST_API_URL}/app_secrets/list"
    assert "pageToken" not in first.kwargs["json"]
    assert second.kwargs["json"]["pageToken"] == "page-2"


@pytest.mark.asyncio
async def test_reveal_secrets_keeps_listing_order(secrets_client, mock_httpx_client):
    mock_httpx_client.post.side_effect = [
        make_response(
            json={
                "secrets": [
                    {"secretId": TOKEN_ID, "name": "TOKEN"},
                    {"secretId": API_KEY_ID, "name": "API_KEY"},
                ]
            }
        ),
        make_response(json={"value": "xyz"}),
        make_response(json={"value": 'a"b'}),
    ]

    secrets = await secrets_client.reveal_secrets("app_123")

    assert secrets == [
        Secret(name="TOKEN", value="xyz"),
        Secret(name="API_KEY", value='a"b'),
    ]
    value_requests = [call.kwargs["json"] for call in mock_httpx_client.post.call_args_list[1:]]
    assert value_requests == [{"secretId": TOKEN_ID}, {"secretId": API_KEY_ID}]


@pytest.mark.asyncio
async def test_reveal_secrets_empty(secrets_client, mock_httpx_client):
    mock_httpx_client.post.return_value = make_response(json={})

    assert await secrets_client.reveal_secrets("app_123") == []
    mock_httpx_client.post.assert_called_once()
