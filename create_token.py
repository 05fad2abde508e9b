"""Print a long-lived bearer token for the seeded admin account.

Handy for calling admin-only routes with curl while developing.  The
token is signed with ``SECRET_KEY`` from the environment, so the server
must run with the same value.

Usage:
    python create_token.py [username] [role] [user_id]
"""
import sys

from race_event_api.app.core.security import create_access_token


def main(argv: list) -> None:
    username = argv[1] if len(argv) > 1 else "admin"
    role = argv[2] if len(argv) > 2 else "admin"
    user_id = int(argv[3]) if len(argv) > 3 else 1
    # 365 days, in seconds
    token = create_access_token({"id": user_id, "username": username, "role": role}, expires_delta=365 * 24 * 60 * 60)
    print(token)


if __name__ == "__main__":
    main(sys.argv)
