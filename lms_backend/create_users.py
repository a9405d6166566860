"""Seed one sample account per LMS role.

Usage:
    python -m lms_backend.create_users
"""
import logging
import sys

from lms_backend.auth.passwords import hash_password
from lms_backend.core.logging_config import configure_logging
from lms_backend.store import AccountRecord, AccountStore, StoreError, open_account_store

logger = logging.getLogger(__name__)

DEFAULT_USERS = [
    {'email': 'admin@example.com', 'password': 'admin123', 'name': 'System Admin', 'role': 'ADMIN'},
    {'email': 'teacher@example.com', 'password': 'teacher123', 'name': 'John Teacher', 'role': 'TEACHER'},
    {'email': 'head@example.com', 'password': 'head123', 'name': 'Sarah Head', 'role': 'HEAD'},
    {'email': 'manager@example.com', 'password': 'manager123', 'name': 'Mike Manager', 'role': 'MANAGEMENT'},
    {'email': 'student@example.com', 'password': 'student123', 'name': 'Jane Student', 'role': 'STUDENT'},
]


def create_user(store: AccountStore, email: str, password: str, name: str, role: str = 'STUDENT') -> AccountRecord:
    try:
        user = store.create_account({
            'email': email,
            'hashed_password': hash_password(password),
            'name': name,
            'role': role.upper(),
        })
    except StoreError:
        logger.exception('Error creating user %s', email)
        raise

    logger.info('User created successfully: %s <%s> - %s', user.name, user.email, user.role.value)
    return user


def seed_default_users(store: AccountStore) -> list[AccountRecord]:
    created = []
    for entry in DEFAULT_USERS:
        if store.find_unique_by_email(entry['email']) is not None:
            logger.info('User %s already exists. Skipping...', entry['email'])
            continue
        created.append(create_user(store, **entry))
    return created


def main() -> None:
    configure_logging()
    store = open_account_store()
    try:
        created = seed_default_users(store)
    except StoreError:
        sys.exit(1)
    finally:
        store.close()

    print(f'Created {len(created)} user(s).')


if __name__ == "__main__":
    main()
