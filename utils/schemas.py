"""
Pydantic Schemas - Data Models

Defines the pydantic models used throughout the backup pipeline:
- Apigee management API responses (developers, app lists, app details)
- Ephemeral app references produced by enumeration
- Backup records persisted as one JSON file per app

Field names are the JSON keys, so declaration order is serialization order.

Usage:
    from utils.schemas import ApigeeApp

    detail = ApigeeApp.model_validate(response.json())
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator


# ---------------------------------------------------------------------------
# Apigee API responses
# ---------------------------------------------------------------------------


class ApigeeModel(BaseModel):
    """Base for Apigee payloads. JSON nulls fall back to the field default."""

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class ApigeeDeveloper(ApigeeModel):
    """Developer entry from GET /organizations/{org}/developers."""

    email: str = Field(default="", description="Developer email, used in resource paths")
    developerId: str = Field(default="", description="Developer ID")


class ApigeeAppRef(ApigeeModel):
    """App entry from a non-expanded developer app list."""

    appId: str = Field(default="", description="App ID")


class ApigeeAttribute(ApigeeModel):
    name: str = ""
    value: str = ""


class ApigeeApiProductRef(ApigeeModel):
    """API product binding of a credential with its approval status."""

    apiproduct: str = ""
    status: str = ""


class ApigeeCredential(ApigeeModel):
    """Credential of a developer app.

    Apigee sends int64 values as JSON strings; they are coerced to int.
    """

    consumerKey: str = ""
    consumerSecret: str = ""
    status: str = ""
    issuedAt: int = 0
    expiresAt: int = 0
    apiProducts: list[ApigeeApiProductRef] = Field(default_factory=list)
    attributes: list[ApigeeAttribute] = Field(default_factory=list)
    scopes: list[str] = Field(default_factory=list)


class ApigeeApp(ApigeeModel):
    """Developer app detail from GET .../developers/{email}/apps/{appId}."""

    appId: str = ""
    name: str = ""
    developerId: str = ""
    status: str = ""
    appFamily: str = ""
    createdAt: int = 0
    lastModifiedAt: int = 0
    attributes: list[ApigeeAttribute] = Field(default_factory=list)
    credentials: list[ApigeeCredential] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Backup pipeline
# ---------------------------------------------------------------------------


class AppReference(BaseModel):
    """Identifies one app within the scope of its developer and organization."""

    appId: str = Field(..., description="App ID")
    developerEmail: str = Field(..., description="Owning developer email")
    organization: str = Field(..., description="Apigee organization")


class Attribute(BaseModel):
    name: str = ""
    value: str = ""


class ApiProductStatus(BaseModel):
    apiproduct: str = ""
    status: str = ""


class CredentialBackup(BaseModel):
    """Credential as persisted in a backup record.

    Timestamps are decimal strings of epoch milliseconds.
    """

    apiProducts: list[ApiProductStatus] = Field(default_factory=list)
    consumerKey: str = ""
    consumerSecret: str = ""
    expiresAt: str = ""
    issuedAt: str = ""
    status: str = ""


class AppBackup(BaseModel):
    """Backup record for one app, written to <appId>.json."""

    appId: str = ""
    attributes: list[Attribute] = Field(default_factory=list)
    createdAt: int = 0
    credentials: list[CredentialBackup] = Field(default_factory=list)
    developerId: str = ""
    lastModifiedAt: int = 0
    name: str = ""
    status: str = ""
    appFamily: str = ""
