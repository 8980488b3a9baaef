# scripts/seed_admin.py
"""
Write the admin credential document with a bcrypt hash.

    python -m scripts.seed_admin --username admin
"""
import argparse
import getpass
import sys
from datetime import datetime
from core.security import ADMIN_DOCUMENT
from settings.config import settings
from utils.documents import save_data
from utils.hash import hash_password

def seed(username: str, password: str) -> bool:
    credentials = {
        "username": username,
        "password_hash": hash_password(password),
        "updatedAt": datetime.utcnow().isoformat(),
    }
    return save_data(ADMIN_DOCUMENT, credentials)

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Set the admin dashboard credentials")
    parser.add_argument("--username", default="admin")
    parser.add_argument("--password", help="prompted for when omitted")
    args = parser.parse_args(argv)

    password = args.password or getpass.getpass("Admin password: ")
    if not password:
        print("Password must not be empty")
        return 1
    if not seed(args.username, password):
        print("Could not write admin credentials, see log")
        return 1
    print(f"Admin credentials written for {args.username} in {settings.DATA_DIR}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
