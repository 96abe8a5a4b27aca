"""
Mint a bearer token for an owner id.
Usage: python -m rayzum.scripts.issue_token <owner_id> [expires_minutes]
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from rayzum.core.security import create_access_token


def main():
    if len(sys.argv) < 2:
        print("Usage: python -m rayzum.scripts.issue_token <owner_id> [expires_minutes]")
        sys.exit(1)
    owner_id = sys.argv[1].strip()
    expires = int(sys.argv[2]) if len(sys.argv) > 2 else None
    print(create_access_token(owner_id, expires_minutes=expires))


if __name__ == "__main__":
    main()
