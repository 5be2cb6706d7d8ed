"""SQLAlchemy models for fintrack database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Date,
    Numeric,
    CheckConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from fintrack.domain.entities import AMOUNT_PRECISION, AMOUNT_SCALE, TransactionType

Base = declarative_base()

TYPE_VALUES = ", ".join(f"'{t.value}'" for t in TransactionType)


class Transaction(Base):
    """Transaction model.

    ``type`` is a plain string column so a row written outside the closed set
    (by an older schema or by hand) still loads and is reported by the mapper
    instead of failing inside the ORM.
    """

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    description = Column(String, nullable=True)
    amount = Column(Numeric(AMOUNT_PRECISION, AMOUNT_SCALE), nullable=False)
    date = Column(Date, nullable=False)
    type = Column(String(16), nullable=False)
    category = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_amount_non_negative"),
        CheckConstraint(f"type IN ({TYPE_VALUES})", name="ck_type_closed_set"),
    )


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
