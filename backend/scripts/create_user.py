"""
Create the tables and a back-office login

Usage:
    python scripts/create_user.py --email admin@catalog.io --password StrongPass123 --name "Admin"
"""
import sys
import os
import argparse

# Add the backend directory to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from catalog_admin.database import SessionLocal, init_db
from catalog_admin.core.security import hash_password
from catalog_admin.models.user import User


def create_user(email: str, password: str, name: str) -> bool:
    """Returns False when the email is already registered"""
    db = SessionLocal()
    try:
        email = email.strip().lower()
        if db.query(User).filter(User.email == email).first():
            print(f"[!] A user with email {email} already exists")
            return False

        user = User(name=name, email=email, password_hash=hash_password(password), is_active=True)
        db.add(user)
        db.commit()
        print(f"[+] User {email} created with ID: {user.id}")
        return True
    finally:
        db.close()


def main():
    parser = argparse.ArgumentParser(description="Create a back-office user")
    parser.add_argument("--email", required=True, help="Login email")
    parser.add_argument("--password", required=True, help="Password (at least 8 characters)")
    parser.add_argument("--name", default="Administrator", help="Display name")

    args = parser.parse_args()

    if len(args.password) < 8:
        print("[X] The password must have at least 8 characters")
        sys.exit(1)

    print("[*] Creating tables...")
    init_db()

    if not create_user(args.email, args.password, args.name):
        sys.exit(1)


if __name__ == "__main__":
    main()
