import logging
from datetime import datetime

from pydantic import BaseModel, ValidationError, field_validator
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from lms_backend.database import SessionLocal, init_db
from lms_backend.models.user import Role, User

logger = logging.getLogger(__name__)


class StoreError(Exception):
    pass


class ConflictError(StoreError):
    pass


class AccountValidationError(StoreError):
    pass


class NewAccount(BaseModel):
    email: str
    hashed_password: str
    name: str
    role: Role

    @field_validator('email')
    @classmethod
    def validate_email(cls, value: str) -> str:
        normalized = value.strip()

        if not normalized or '@' not in normalized:
            raise ValueError('A valid email address is required.')

        return normalized

    @field_validator('hashed_password', 'name')
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError('Value must not be blank.')

        return value


class AccountRecord(BaseModel):
    id: int
    email: str
    name: str | None = None
    role: Role
    created_at: datetime

    class Config:
        from_attributes = True


class AccountStore:
    """Account persistence handle wrapping a single database session."""

    def __init__(self, session: Session):
        self.session = session

    def find_unique_by_email(self, email: str) -> User | None:
        try:
            return self.session.query(User).filter(User.email == email).first()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreError(f'Lookup failed for {email}') from exc

    def create_account(self, data: dict) -> AccountRecord:
        try:
            account = NewAccount(**data)
        except ValidationError as exc:
            raise AccountValidationError(str(exc)) from exc

        user = User(
            email=account.email,
            hashed_password=account.hashed_password,
            name=account.name,
            role=account.role.value,
        )

        try:
            self.session.add(user)
            self.session.commit()
            self.session.refresh(user)
        except IntegrityError as exc:
            self.session.rollback()
            raise ConflictError(f'User {account.email} already exists.') from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreError(f'Could not create {account.email}') from exc

        return AccountRecord.model_validate(user)

    def close(self) -> None:
        self.session.close()


def open_account_store() -> AccountStore:
    init_db()
    logger.debug('Opened account store session')
    return AccountStore(SessionLocal())
