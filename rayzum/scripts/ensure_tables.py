"""
Create any missing tables for the sql storage backend.
Usage: python -m rayzum.scripts.ensure_tables
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from rayzum.config import settings
from rayzum.database import ensure_tables_exist


def main():
    if settings.storage_backend.lower() != "sql":
        print(f"STORAGE_BACKEND={settings.storage_backend}; no tables to create.")
        return
    created = ensure_tables_exist()
    if created:
        print(f"Created tables: {', '.join(created)}")
    else:
        print("All tables already exist.")


if __name__ == "__main__":
    main()
