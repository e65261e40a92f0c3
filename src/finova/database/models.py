"""SQLAlchemy models for finova database."""

from datetime import datetime, UTC
from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Integer,
    Numeric,
    String,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class Transaction(Base):
    """Journal transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner = Column(String, nullable=False, index=True)
    date = Column(Date, nullable=False)
    debit = Column(String, nullable=False)
    credit = Column(String, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    narration = Column(String, nullable=False, default="")
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )

    __table_args__ = (
        CheckConstraint("debit <> credit", name="ck_debit_not_credit"),
        CheckConstraint("amount > 0", name="ck_amount_positive"),
    )


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
