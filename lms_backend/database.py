from sqlalchemy import create_engine, inspect, text
from sqlalchemy.orm import declarative_base, sessionmaker

from lms_backend.core import config


engine = create_engine(config.DATABASE_URL, echo=config.SQL_ECHO)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

Base = declarative_base()


def ensure_user_schema(bind=None) -> None:
    bind = bind or engine
    inspector = inspect(bind)

    if 'users' not in inspector.get_table_names():
        return

    existing_columns = {column['name'] for column in inspector.get_columns('users')}
    migration_steps = [
        ('name', 'ALTER TABLE users ADD COLUMN name VARCHAR'),
        ('created_at', 'ALTER TABLE users ADD COLUMN created_at DATETIME'),
    ]

    with bind.begin() as connection:
        for column_name, statement in migration_steps:
            if column_name not in existing_columns:
                connection.execute(text(statement))
        connection.execute(
            text('CREATE INDEX IF NOT EXISTS idx_users_role ON users(role)')
        )


def init_db(bind=None) -> None:
    # Register every model on Base.metadata before create_all.
    from lms_backend.models import activity, course, enrollment, meeting, notice, user  # noqa: F401

    if bind is None:
        config.validate_runtime_config()
        bind = engine
    Base.metadata.create_all(bind=bind)
    ensure_user_schema(bind)
