"""Shared pytest fixtures for Apigee backup tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest

from utils.apigee import ApigeeClient
from utils.schemas import ApigeeApp, ApigeeAppRef, ApigeeDeveloper


def build_app_payload(**overrides: Any) -> dict[str, Any]:
    """Create an app detail payload shaped like the Apigee API response."""
    base: dict[str, Any] = {
        "appId": "app-123",
        "name": "billing-app",
        "developerId": "dev-uuid-1",
        "status": "approved",
        "appFamily": "default",
        "createdAt": "1699999000000",
        "lastModifiedAt": "1700000500000",
        "callbackUrl": "https://example.com/callback",
        "attributes": [
            {"name": "DisplayName", "value": "Billing"},
            {"name": "Notes", "value": "internal"},
        ],
        "credentials": [
            {
                "consumerKey": "K",
                "consumerSecret": "S",
                "status": "approved",
                "issuedAt": "1700000000000",
                "expiresAt": "1700003600000",
                "apiProducts": [{"apiproduct": "default", "status": "approved"}],
                "scopes": [],
            }
        ],
    }
    base.update(overrides)
    return base


@pytest.fixture
def app_payload_factory() -> Callable[..., dict[str, Any]]:
    """Return a factory to build app detail payloads with overrides."""
    return build_app_payload


@pytest.fixture
def app_payload(app_payload_factory: Callable[..., dict[str, Any]]) -> dict[str, Any]:
    return app_payload_factory()


@pytest.fixture
def fake_client() -> Callable[..., MagicMock]:
    """
    Return a factory for a mocked ApigeeClient.

    The factory takes a mapping of developer email -> app IDs; get_app
    returns a detail payload for the requested app ID.
    """

    def factory(apps_by_developer: dict[str, list[str]]) -> MagicMock:
        client = MagicMock(spec=ApigeeClient)
        client.list_developers.side_effect = lambda org: iter(
            [ApigeeDeveloper(email=email, developerId=f"id-{email}") for email in apps_by_developer]
        )
        client.list_apps.side_effect = lambda org, email: [
            ApigeeAppRef(appId=app_id) for app_id in apps_by_developer[email]
        ]
        client.get_app.side_effect = lambda org, email, app_id: ApigeeApp(
            **build_app_payload(appId=app_id, developerId=f"id-{email}")
        )
        return client

    return factory
