from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from agroconnect.core.config import settings
from agroconnect.core.errors import StorageError
from agroconnect.core.logger import logger

DATABASE_URL = settings.DATABASE_URL

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
Base = declarative_base()


# Dependency for FastAPI
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def commit(db: Session, *instances) -> None:
    """Commit the session and refresh ``instances``; storage failures roll back."""
    try:
        db.commit()
        for instance in instances:
            db.refresh(instance)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Commit failed: %s", exc)
        raise StorageError("Error saving changes", error=exc.__class__.__name__) from exc
