"""
Apigee Management API Client

Loads service account credentials and issues authorized, blocking requests
against the Apigee management API. Only the developer and developer app
endpoints needed by the backup are covered.

Usage:
    from utils.apigee import ApigeeClient, load_credentials

    credentials = load_credentials("service-account.json")
    client = ApigeeClient(credentials)
    for developer in client.list_developers("my-org"):
        apps = client.list_apps("my-org", developer.email)
"""

import logging
from pathlib import Path
from typing import Any, Iterator

import requests
from google.auth.credentials import Credentials
from google.auth.transport.requests import AuthorizedSession
from google.oauth2 import service_account

from utils.config import settings
from utils.schemas import ApigeeApp, ApigeeAppRef, ApigeeDeveloper

logger = logging.getLogger(__name__)


def load_credentials(
    service_account_file: str, scopes: list[str] | None = None
) -> service_account.Credentials:
    """
    Load service account credentials from a JSON key file.

    Args:
        service_account_file: Path to the service account JSON key
        scopes: OAuth scopes, defaults to settings.APIGEE_SCOPES

    Returns:
        Scoped service account credentials (not yet refreshed)

    Raises:
        FileNotFoundError: If the key file doesn't exist
        ValueError: If the key file is not a valid service account key
    """
    key_path = Path(service_account_file)
    if not key_path.is_file():
        raise FileNotFoundError(f"Service account file not found: {service_account_file}")

    try:
        credentials = service_account.Credentials.from_service_account_file(
            str(key_path),
            scopes=scopes or settings.APIGEE_SCOPES,
        )
    except (ValueError, KeyError) as e:
        raise ValueError(f"Invalid service account file {service_account_file}: {e}") from e

    logger.info("Loaded service account credentials: %s", credentials.service_account_email)
    return credentials


class ApigeeClient:
    """Blocking client for the Apigee developer and developer app endpoints."""

    def __init__(
        self,
        credentials: Credentials,
        base_url: str | None = None,
        timeout: float | None = None,
        page_size: int | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """
        Initialize client.

        Args:
            credentials: google-auth credentials used to authorize requests
            base_url: API root, defaults to settings.APIGEE_API_BASE
            timeout: Per-request timeout in seconds, defaults to settings.API_TIMEOUT
            page_size: Developers per list page, defaults to settings.DEVELOPERS_PAGE_SIZE
            session: Pre-built session (an AuthorizedSession is created otherwise)
        """
        self.base_url = (base_url or settings.APIGEE_API_BASE).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.API_TIMEOUT
        self.page_size = page_size or settings.DEVELOPERS_PAGE_SIZE
        self.session = session or AuthorizedSession(credentials)

    def _get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        GET a management API resource and decode its JSON body.

        Raises:
            IOError: On transport errors, non-2xx statuses, non-JSON or non-object bodies
        """
        url = f"{self.base_url}/{path}"

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise IOError(f"GET {url} failed: {e}") from e

        if not response.ok:
            raise IOError(
                f"GET {url} failed: status={response.status_code}, body={response.text[:500]}"
            )

        if not response.content:
            return {}

        try:
            payload = response.json()
        except ValueError as e:
            raise IOError(f"GET {url} returned invalid JSON: {e}") from e

        if not isinstance(payload, dict):
            raise IOError(f"GET {url} returned a non-object body: {type(payload).__name__}")

        return payload

    def list_developers(self, org: str) -> Iterator[ApigeeDeveloper]:
        """
        List every developer of an organization, following startKey pagination.

        A follow-up page starts with the developer named by startKey, which
        was already yielded as the last item of the previous page.

        Args:
            org: Apigee organization

        Yields:
            Developers in API order

        Raises:
            IOError: If any page request fails
        """
        path = f"organizations/{org}/developers"
        start_key: str | None = None

        while True:
            params: dict[str, Any] = {"count": self.page_size}
            if start_key:
                params["startKey"] = start_key

            payload = self._get(path, params=params)
            raw_page = payload.get("developer") or []
            page = [ApigeeDeveloper(**item) for item in raw_page]

            if start_key and page and page[0].email == start_key:
                page = page[1:]

            logger.debug("Developer page fetched: org=%s, start_key=%s, size=%d", org, start_key, len(page))

            yield from page

            if len(raw_page) < self.page_size or not page:
                return

            start_key = page[-1].email

    def list_apps(self, org: str, developer_email: str) -> list[ApigeeAppRef]:
        """
        List the apps owned by a developer.

        Args:
            org: Apigee organization
            developer_email: Developer email

        Returns:
            App references (appId only)

        Raises:
            IOError: If the request fails
        """
        payload = self._get(f"organizations/{org}/developers/{developer_email}/apps")
        return [ApigeeAppRef(**item) for item in payload.get("app") or []]

    def get_app(self, org: str, developer_email: str, app_id: str) -> ApigeeApp:
        """
        Fetch the full detail of a developer app.

        Args:
            org: Apigee organization
            developer_email: Owning developer email
            app_id: App ID

        Returns:
            App detail with attributes and credentials

        Raises:
            IOError: If the request fails
            pydantic.ValidationError: If the payload has malformed fields
        """
        payload = self._get(f"organizations/{org}/developers/{developer_email}/apps/{app_id}")
        return ApigeeApp.model_validate(payload)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()
