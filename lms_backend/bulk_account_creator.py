"""Create many LMS accounts in one interactive session.

Usage:
    python -m lms_backend.bulk_account_creator

The operator enters a comma-separated list of email addresses, picks a role
for each one and confirms. Every new account gets a random password which is
shown once in the summary and can optionally be written to
``lms_accounts_<date>.txt``. That export is plain text; treat it as a secret
and delete it once the credentials have been handed out.
"""
import logging
import re
import sys
from datetime import date
from pathlib import Path
from typing import Callable

from pydantic import BaseModel

from lms_backend.auth.passwords import generate_password, hash_password
from lms_backend.core.logging_config import configure_logging
from lms_backend.models.user import Role
from lms_backend.store import AccountRecord, AccountStore, StoreError, open_account_store

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
ROLES = [role.value for role in Role]
DEFAULT_ROLE = Role.STUDENT
AFFIRMATIVE_ANSWERS = {'y', 'yes'}
CREATED_AT_FORMAT = '%Y-%m-%d %H:%M:%S'

Ask = Callable[[str], str]
Echo = Callable[[str], None]


class InputError(Exception):
    pass


class AccountRequest(BaseModel):
    email: str
    name: str
    role: Role


class CreatedAccount(AccountRecord):
    password: str


def parse_emails(raw: str) -> list[str]:
    return [email.strip() for email in raw.split(',') if email.strip()]


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.match(email) is not None


def extract_name_from_email(email: str) -> str:
    local_part = email.split('@', 1)[0]
    clean_name = re.sub(r'[^a-zA-Z0-9]', ' ', local_part).strip()
    words = [word for word in re.split(r'[\s_.]+', clean_name) if word]
    return ' '.join(word[0].upper() + word[1:].lower() for word in words)


def display_name_for(email: str) -> str:
    # Local parts made only of symbols would otherwise persist an empty name.
    return extract_name_from_email(email) or email.split('@', 1)[0]


def parse_role(token: str) -> Role | None:
    # Surrounding whitespace is ignored, so " admin" resolves to ADMIN.
    try:
        return Role(token.strip().upper())
    except ValueError:
        return None


def resolve_role(token: str) -> Role:
    return parse_role(token) or DEFAULT_ROLE


def is_affirmative(answer: str) -> bool:
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS


def collect_emails(ask: Ask) -> list[str]:
    emails = parse_emails(ask('Enter email addresses (comma-separated): '))

    if not emails:
        raise InputError('No emails provided. Exiting...')

    invalid_emails = [email for email in emails if not is_valid_email(email)]
    if invalid_emails:
        raise InputError(f"Invalid email formats: {', '.join(invalid_emails)}")

    return emails


def assign_roles(emails: list[str], ask: Ask, echo: Echo) -> list[AccountRequest]:
    requests = []

    for index, email in enumerate(emails, start=1):
        name = display_name_for(email)
        echo(f'\nAccount {index}: {email}')
        echo(f'Extracted name: "{name}"')

        role = parse_role(ask(f"Select role for {email} ({'/'.join(ROLES)}): "))
        if role is None:
            echo(f'Invalid role. Using {DEFAULT_ROLE.value} as default.')
            role = DEFAULT_ROLE

        requests.append(AccountRequest(email=email, name=name, role=role))

    return requests


def confirm_creation(requests: list[AccountRequest], ask: Ask, echo: Echo) -> bool:
    echo('\nAccounts to be created:')
    for index, request in enumerate(requests, start=1):
        echo(f'{index}. {request.name} <{request.email}> - {request.role.value}')

    return is_affirmative(ask('\nProceed with account creation? (y/N): '))


def create_accounts(
    store: AccountStore,
    requests: list[AccountRequest],
    echo: Echo = print,
    password_factory: Callable[[], str] | None = None,
    hasher: Callable[[str], str] | None = None,
) -> list[CreatedAccount]:
    password_factory = password_factory or generate_password
    hasher = hasher or hash_password
    created_accounts: list[CreatedAccount] = []

    for request in requests:
        try:
            if store.find_unique_by_email(request.email) is not None:
                logger.warning('User %s already exists. Skipping...', request.email)
                continue

            password = password_factory()
            record = store.create_account({
                'email': request.email,
                'hashed_password': hasher(password),
                'name': request.name,
                'role': request.role,
            })
        except StoreError as exc:
            logger.error('Failed to create account for %s: %s', request.email, exc)
            continue
        except Exception:
            logger.exception('Failed to create account for %s', request.email)
            continue

        created_accounts.append(CreatedAccount(**record.model_dump(), password=password))
        echo(f'Created: {request.name} <{request.email}> - {request.role.value}')

    return created_accounts


def format_account_block(index: int, account: CreatedAccount, indent: str = '') -> str:
    lines = [
        f'Name: {account.name}',
        f'Email: {account.email}',
        f'Role: {account.role.value}',
        f'Password: {account.password}',
        f'Created: {account.created_at.strftime(CREATED_AT_FORMAT)}',
    ]
    return '\n'.join([f'Account {index}:'] + [f'{indent}{line}' for line in lines]) + '\n'


def format_export(accounts: list[CreatedAccount]) -> str:
    return ''.join(
        format_account_block(index, account) + '\n'
        for index, account in enumerate(accounts, start=1)
    )


def export_filename(today: date) -> str:
    return f'lms_accounts_{today.isoformat()}.txt'


def save_accounts(accounts: list[CreatedAccount], directory: Path | None = None, today: date | None = None) -> Path:
    path = (directory or Path.cwd()) / export_filename(today or date.today())
    path.write_text(format_export(accounts), encoding='utf-8')
    return path


def report(accounts: list[CreatedAccount], ask: Ask, echo: Echo, today: date | None = None) -> Path | None:
    if not accounts:
        return None

    echo('\nAccount Creation Summary')
    echo('========================\n')
    for index, account in enumerate(accounts, start=1):
        echo(format_account_block(index, account, indent='   '))

    if not is_affirmative(ask('Save credentials to file? (y/N): ')):
        return None

    path = save_accounts(accounts, today=today)
    echo(f'Credentials saved to: {path.name}')
    return path


def run_session(store: AccountStore, ask: Ask, echo: Echo, today: date | None = None) -> int:
    emails = collect_emails(ask)
    echo(f'\nFound {len(emails)} email(s) to process')

    requests = assign_roles(emails, ask, echo)

    if not confirm_creation(requests, ask, echo):
        echo('Account creation cancelled.')
        return 0

    echo('\nCreating accounts...\n')
    created_accounts = create_accounts(store, requests, echo=echo)

    report(created_accounts, ask, echo, today=today)
    echo(f'\nProcess completed! Created {len(created_accounts)} account(s).')
    return 0


def run(
    store_factory: Callable[[], AccountStore] = open_account_store,
    ask: Ask = input,
    echo: Echo = print,
    today: date | None = None,
) -> int:
    echo('LMS Bulk Account Creator')
    echo('========================\n')

    store = None
    try:
        store = store_factory()
        return run_session(store, ask, echo, today=today)
    except InputError as exc:
        echo(str(exc))
        return 1
    except (KeyboardInterrupt, EOFError):
        echo('\n\nProcess interrupted. Cleaning up...')
        return 0
    except Exception:
        logger.exception('Bulk account creation failed')
        return 1
    finally:
        if store is not None:
            store.close()


def main() -> None:
    configure_logging()
    sys.exit(run())


if __name__ == "__main__":
    main()
