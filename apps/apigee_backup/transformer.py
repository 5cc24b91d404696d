"""
Record Transformer

Maps an Apigee app detail into the backup record schema. No validation is
performed: missing fields carry their empty defaults into the record.
"""

from utils.schemas import (
    ApiProductStatus,
    ApigeeApp,
    ApigeeCredential,
    AppBackup,
    Attribute,
    CredentialBackup,
)


def epoch_to_str(value: int) -> str:
    """Render epoch milliseconds as a base-10 string, sign preserved."""
    return str(int(value))


def to_credential_backup(credential: ApigeeCredential) -> CredentialBackup:
    """Copy one credential, rendering its timestamps as decimal strings."""
    return CredentialBackup(
        apiProducts=[
            ApiProductStatus(apiproduct=product.apiproduct, status=product.status)
            for product in credential.apiProducts
        ],
        consumerKey=credential.consumerKey,
        consumerSecret=credential.consumerSecret,
        expiresAt=epoch_to_str(credential.expiresAt),
        issuedAt=epoch_to_str(credential.issuedAt),
        status=credential.status,
    )


def to_backup_record(detail: ApigeeApp) -> AppBackup:
    """
    Build the backup record of one app.

    Attributes, credentials and per-credential API products keep their
    order. Credential timestamps become decimal strings.

    Args:
        detail: App detail as returned by the management API

    Returns:
        Backup record ready for serialization
    """
    return AppBackup(
        appId=detail.appId,
        attributes=[Attribute(name=attr.name, value=attr.value) for attr in detail.attributes],
        createdAt=detail.createdAt,
        credentials=[to_credential_backup(cred) for cred in detail.credentials],
        developerId=detail.developerId,
        lastModifiedAt=detail.lastModifiedAt,
        name=detail.name,
        status=detail.status,
        appFamily=detail.appFamily,
    )
