"""SQLAlchemy models for paytrack database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Boolean,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

from paytrack.domain.entities import DEFAULT_CATEGORY_COLOR

Base = declarative_base()


class PaySettings(Base):
    """Pay schedule model. Only the newest row is in effect."""

    __tablename__ = "pay_settings"

    id = Column(Integer, primary_key=True)
    last_pay_date = Column(Date, nullable=False)
    frequency = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class BudgetCategory(Base):
    """Budget category model with a monthly allocation."""

    __tablename__ = "budget_categories"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    allocated_amount = Column(Numeric(10, 2), nullable=True)
    color = Column(String, nullable=False, default=DEFAULT_CATEGORY_COLOR)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    transactions = relationship("Transaction", back_populates="category")


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    date = Column(Date, nullable=False)
    category_id = Column(
        Integer, ForeignKey("budget_categories.id", ondelete="SET NULL"), nullable=True
    )
    name = Column(String, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    notes = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    category = relationship("BudgetCategory", back_populates="transactions")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
