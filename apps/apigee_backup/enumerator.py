"""
App Enumerator

Walks the two-level developer -> app listing of an organization and yields
one reference per app. Failures of either list call propagate to the caller.
"""

import logging
from typing import Iterator

from utils.apigee import ApigeeClient
from utils.schemas import ApigeeDeveloper, AppReference

logger = logging.getLogger(__name__)


def iter_app_references(
    client: ApigeeClient, org: str
) -> Iterator[tuple[ApigeeDeveloper, AppReference]]:
    """
    Lazily enumerate every app of every developer in an organization.

    Args:
        client: Apigee management API client
        org: Apigee organization

    Yields:
        (developer, app reference) pairs, developers in API order

    Raises:
        IOError: If listing developers or a developer's apps fails
    """
    for developer in client.list_developers(org):
        apps = client.list_apps(org, developer.email)
        logger.info("Developer %s owns %d app(s)", developer.email, len(apps))

        for app in apps:
            yield developer, AppReference(
                appId=app.appId,
                developerEmail=developer.email,
                organization=org,
            )
