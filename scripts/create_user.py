"""Create a user who can sign in to the catalog."""
import getpass
import sys

from catalog.database import Base, SessionLocal, engine
from catalog.services.auth import create_user, find_user_by_email


def main():
    """Main function to parse arguments and create the user."""
    if len(sys.argv) < 3:
        print("Usage: python -m scripts.create_user <name> <email>")
        print("Example: python -m scripts.create_user 'Ada Lovelace' ada@example.com")
        sys.exit(1)

    name, email = sys.argv[1], sys.argv[2]
    password = getpass.getpass("Password: ")
    if not password:
        print("Password must not be empty")
        sys.exit(1)

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if find_user_by_email(db, email) is not None:
            print(f"User with email '{email}' already exists")
            sys.exit(1)
        user = create_user(db, name, email, password)
    finally:
        db.close()

    print(f"Created user {user.id} ({user.email})")


if __name__ == "__main__":
    main()
