"""
Apigee Backup App - Developer App Export

Responsibilities:
- Authenticate against the Apigee management API with a service account key
- Enumerate every developer of an organization and the apps each one owns
- Fetch the full detail of every app (attributes, credentials, status)
- Reshape each detail into a flat backup record
- Write one indented JSON file per app into a timestamped directory

Output:
- <backupDir>_<unixTimestamp>/<appId>.json

Usage:
    python -m apps.apigee_backup <serviceAccountFile> <organization> <backupDir>
"""
