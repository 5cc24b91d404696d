"""
Backup Writer

Creates the timestamped backup directory and writes one JSON file per app.

Files are written with truncate-create-write semantics, without fsync or
rename, so an interrupted write can leave a truncated file behind. App IDs
are used as file names verbatim.
"""

import logging
import os
import time

import orjson

from utils.config import settings
from utils.schemas import AppBackup

logger = logging.getLogger(__name__)


def backup_dir_name(base: str, timestamp: int) -> str:
    """Return <base>_<timestamp>."""
    return f"{base}_{timestamp}"


def create_backup_dir(base: str, timestamp: int | None = None, mode: int | None = None) -> str:
    """
    Create the backup directory for this run.

    The parent directory must exist and the target must not.

    Args:
        base: Directory prefix given on the command line
        timestamp: Unix seconds suffix, defaults to now
        mode: Permission bits, defaults to settings.BACKUP_DIR_MODE

    Returns:
        Path of the created directory

    Raises:
        OSError: If the directory cannot be created
    """
    if timestamp is None:
        timestamp = int(time.time())

    path = backup_dir_name(base, timestamp)
    os.mkdir(path, settings.BACKUP_DIR_MODE if mode is None else mode)

    logger.info("Backup directory created: %s", path)
    return path


def serialize_record(record: AppBackup) -> bytes:
    """Serialize a record as UTF-8 JSON indented with two spaces."""
    return orjson.dumps(record.model_dump(), option=orjson.OPT_INDENT_2)


def write_record(directory: str, record: AppBackup) -> str:
    """
    Write a backup record to <directory>/<appId>.json, replacing any existing file.

    Args:
        directory: Backup directory of this run
        record: Backup record

    Returns:
        Path of the written file

    Raises:
        orjson.JSONEncodeError: If the record cannot be serialized
        OSError: If the file cannot be opened or written
    """
    data = serialize_record(record)
    filename = f"{directory}/{record.appId}.json"

    with open(filename, "wb") as f:
        f.write(data)

    logger.info("Backup written: %s", filename)
    return filename
