#!/usr/bin/env python3
"""
Create an account directly in the database.

Usage:
  python scripts/add_user.py --email dev@example.com [--username dev] [--permission admin]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Make the barkeep package importable when run from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from barkeep.domain.accounts import PERMISSIONS, PERMISSION_NORMAL  # noqa: E402
from barkeep.repositories.sql_repository import SQLRepository  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Create a Barkeep account")
    ap.add_argument("--email", required=True, help="Account email (unique)")
    ap.add_argument("--username", help="Display name")
    ap.add_argument("--permission", choices=PERMISSIONS, default=PERMISSION_NORMAL)
    args = ap.parse_args()

    repo = SQLRepository()
    email = (args.email or "").strip().lower()
    if not email or "@" not in email:
        raise SystemExit("Invalid email")
    if repo.get_user_by_email(email):
        raise SystemExit(f"User '{email}' already exists")

    user = repo.create_user(email, username=args.username, permission=args.permission)
    print("OK: user created")
    print(f"  id: {user.id}")
    print(f"  email: {user.email}")
    print(f"  permission: {user.permission}")
    print(f"  api_key: {user.api_key}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
