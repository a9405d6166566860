import pytest

from lms_backend.auth.passwords import verify_password
from lms_backend.create_users import DEFAULT_USERS, create_user, seed_default_users
from lms_backend.models.user import Role, User
from lms_backend.store import AccountStore, ConflictError


def test_create_user_hashes_password_and_uppercases_role(db) -> None:
    store = AccountStore(db)

    record = create_user(store, 'head@example.com', 'head123', 'Sarah Head', role='head')

    assert record.role is Role.HEAD
    user = store.find_unique_by_email('head@example.com')
    assert verify_password('head123', user.hashed_password)


def test_create_user_defaults_to_student(db) -> None:
    record = create_user(AccountStore(db), 'student@example.com', 'student123', 'Jane Student')

    assert record.role is Role.STUDENT


def test_create_user_reraises_store_errors(db) -> None:
    store = AccountStore(db)
    create_user(store, 'admin@example.com', 'admin123', 'System Admin', 'ADMIN')

    with pytest.raises(ConflictError):
        create_user(store, 'admin@example.com', 'other', 'Other Admin', 'ADMIN')


def test_seed_default_users_creates_one_account_per_role(db) -> None:
    created = seed_default_users(AccountStore(db))

    assert {record.role for record in created} == set(Role)
    assert db.query(User).count() == len(DEFAULT_USERS)


def test_seed_default_users_skips_existing_accounts(db) -> None:
    store = AccountStore(db)
    seed_default_users(store)

    assert seed_default_users(store) == []
    assert db.query(User).count() == len(DEFAULT_USERS)
