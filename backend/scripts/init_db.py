#!/usr/bin/env python3
"""
Create the workforce tables using DATABASE_URL from config.
No psql needed. From backend/: python scripts/init_db.py
"""
from __future__ import annotations

import os
import sys

_script_dir = os.path.dirname(os.path.abspath(__file__))
_backend = os.path.dirname(_script_dir)
if _backend not in sys.path:
    sys.path.insert(0, _backend)

from workforce.core.config import get_settings
from workforce.db.session import Base, create_schema


def main() -> int:
    settings = get_settings()
    create_schema()
    for name in sorted(Base.metadata.tables):
        print(f"OK: {name}")
    if settings.is_sqlite() and settings.database_url in ("sqlite://", "sqlite:///:memory:"):
        print("Note: in-memory SQLite; tables vanish when this process exits", file=sys.stderr)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        print(f"FAIL: {e}", file=sys.stderr)
        sys.exit(1)
