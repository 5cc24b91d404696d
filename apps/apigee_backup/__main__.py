"""
Apigee Backup Module Entry Point

Allows execution via: python -m apps.apigee_backup
"""

from apps.apigee_backup.runner import main

if __name__ == "__main__":
    main()
