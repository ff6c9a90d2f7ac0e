"""
Create a user directly in the database (e.g. the first admin; there is no
role-change endpoint). Run from project root:
  python -m nids_dashboard.scripts.create_user EMAIL PASSWORD [role]
Example:
  python -m nids_dashboard.scripts.create_user admin@example.com your-secure-password admin
"""
import argparse
import sys

from nids_dashboard import create_app
from nids_dashboard.core.database import ROLE_ADMIN, ROLE_VIEWER
from nids_dashboard.services.auth_service import AuthService


def main(argv=None, app=None) -> int:
    parser = argparse.ArgumentParser(description="Create a NIDS dashboard user.")
    parser.add_argument("email", help="Email address used to log in")
    parser.add_argument("password", help="Password")
    parser.add_argument("role", nargs="?", default=ROLE_VIEWER, choices=[ROLE_VIEWER, ROLE_ADMIN])
    args = parser.parse_args(argv)

    email = args.email.strip()
    if not email:
        print("Email must not be empty.", file=sys.stderr)
        return 1
    if not args.password:
        print("Password must not be empty.", file=sys.stderr)
        return 1

    app = app or create_app()
    with app.app_context():
        service = AuthService()
        if service.user_repository.get_user_by_email(email):
            print(f"User '{email}' already exists.", file=sys.stderr)
            return 1
        service.user_repository.create_user(email, service.hash_password(args.password), args.role)
        print(f"Created user '{email}' with role '{args.role}'.")
        return 0


if __name__ == "__main__":
    sys.exit(main())
