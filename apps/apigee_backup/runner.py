"""
Backup Runner - Command Line Entry Point

Bootstraps an Apigee session from a service account key and backs up every
developer app of an organization, one JSON file per app.

Errors are handled in two tiers:
- Fatal (exit 1): backup directory creation, credential loading, client
  construction, developer listing, app listing of any developer
- Recoverable (logged, app skipped): app detail fetch, serialization, file write

Usage:
    python -m apps.apigee_backup <serviceAccountFile> <organization> <backupDir>
"""

import sys
from typing import NoReturn

import orjson
from pydantic import BaseModel, ValidationError

from apps.apigee_backup.enumerator import iter_app_references
from apps.apigee_backup.transformer import to_backup_record
from apps.apigee_backup.writer import create_backup_dir, write_record
from utils.apigee import ApigeeClient, load_credentials
from utils.config import settings
from utils.logging import get_logger, setup_logging
from utils.schemas import AppReference

logger = get_logger(__name__)

PROGRAM_NAME = "apigee-app-backup"

USAGE = f"""Usage: {PROGRAM_NAME} <serviceAccountFile> <organization> <backupDir>

Description: Este programa faz backup de todos os Apps do Apigee.

- Options: <serviceAccountFile> - Arquivo json do service account
- Options: <organization> - Organizacao Apigee
- Options: <backupDir> - Diretorio que deseja criar. OBS: O script cria no final do diretorio _timestamp

Ex: {PROGRAM_NAME} service-account.json my-org backups"""


class BackupResult(BaseModel):
    """Counts of a finished backup run."""

    written: int = 0
    skipped: int = 0


class BackupJob:
    """
    Sequential backup of all developer apps of one organization.

    Handles:
    - Developer and app enumeration (failures abort the run)
    - Per-app detail fetch, transformation and write (failures skip the app)
    """

    def __init__(self, client: ApigeeClient, organization: str, backup_dir: str) -> None:
        """
        Initialize backup job.

        Args:
            client: Authorized Apigee client
            organization: Apigee organization
            backup_dir: Existing directory receiving the JSON files
        """
        self.client = client
        self.organization = organization
        self.backup_dir = backup_dir

    def backup_app(self, ref: AppReference) -> bool:
        """
        Fetch, transform and write one app.

        Args:
            ref: App to back up

        Returns:
            True if the backup file was written, False if the app was skipped
        """
        try:
            detail = self.client.get_app(ref.organization, ref.developerEmail, ref.appId)
        except (IOError, ValidationError) as e:
            logger.warning(
                "Failed to fetch app detail, skipping: app_id=%s, developer=%s, error=%s",
                ref.appId, ref.developerEmail, e,
            )
            return False

        record = to_backup_record(detail)

        try:
            write_record(self.backup_dir, record)
        except orjson.JSONEncodeError as e:
            logger.error("Failed to serialize app to JSON: app_id=%s, error=%s", ref.appId, e)
            return False
        except OSError as e:
            logger.error("Failed to save JSON file: app_id=%s, error=%s", ref.appId, e)
            return False

        return True

    def run(self) -> BackupResult:
        """
        Back up every app of every developer.

        Returns:
            Written and skipped app counts

        Raises:
            IOError: If listing developers or apps fails
        """
        logger.info(
            "Starting backup: org=%s, backup_dir=%s", self.organization, self.backup_dir
        )
        result = BackupResult()

        for _developer, ref in iter_app_references(self.client, self.organization):
            if self.backup_app(ref):
                result.written += 1
            else:
                result.skipped += 1

        logger.info(
            "Backup complete: org=%s, written=%d, skipped=%d",
            self.organization, result.written, result.skipped,
        )
        return result


def fatal(message: str, *args: object) -> NoReturn:
    """Log a fatal error and exit with status 1."""
    logger.critical(message, *args)
    sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the backup command."""
    if argv is None:
        argv = sys.argv[1:]

    if len(argv) < 3:
        print(USAGE)
        return

    service_account_file, organization, backup_base = argv[0], argv[1], argv[2]

    setup_logging(settings.LOG_LEVEL)

    try:
        backup_dir = create_backup_dir(backup_base)
    except OSError as e:
        fatal("Failed to create backup directory: %s", e)

    try:
        credentials = load_credentials(service_account_file)
    except (OSError, ValueError) as e:
        fatal("Failed to load service account credentials: %s", e)

    try:
        client = ApigeeClient(credentials)
    except Exception as e:
        fatal("Failed to create Apigee client: %s", e)

    try:
        BackupJob(client, organization, backup_dir).run()
    except (IOError, ValidationError) as e:
        fatal("Backup aborted, failed to list developers or apps: %s", e)
    finally:
        client.close()


if __name__ == "__main__":
    main()
