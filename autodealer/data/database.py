# autodealer/data/database.py
from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base, sessionmaker

from autodealer.utils.settings import DATABASE_URL
from autodealer.utils.retry import db_retry
from autodealer.utils.logging import get_logger

logger = get_logger(__name__)

engine = create_engine(
    DATABASE_URL,
    pool_pre_ping=True,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """
    FastAPI dependency, one session per request.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def ping_db() -> bool:
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    return True


@db_retry()
def wait_for_db() -> bool:
    """Startup only, the database container may still be booting."""
    return ping_db()


def init_db() -> None:
    """
    Creates the tables straight from the models. Only for local runs,
    the real schema is applied by the alembic migrations.
    """
    #models must be imported so they are registered in Base.metadata
    import autodealer.data.models  # noqa: F401

    wait_for_db()
    logger.info(f"Models registered in Base.metadata: {list(Base.metadata.tables.keys())}")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")
