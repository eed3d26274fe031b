"""SQLAlchemy models for gstledger database."""

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

Base = declarative_base()


class Account(Base):
    """Chart of accounts model."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    code = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    category = Column(String, nullable=False)
    tax_applicable = Column(Boolean, default=False, nullable=False)
    tax_treatment = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class JournalEntry(Base):
    """General journal entry model.

    ``position`` preserves the in-memory order of the journal, which is sorted
    by date at save time.
    """

    __tablename__ = "journal_entries"

    id = Column(Integer, primary_key=True)
    entry_id = Column(String, unique=True, nullable=False)
    position = Column(Integer, nullable=False)
    date = Column(Date, nullable=False)
    description = Column(String, nullable=False)
    bank_balance = Column(Numeric(14, 2), nullable=False)
    notes = Column(String, nullable=False, default="")

    # Relationships
    lines = relationship(
        "JournalLine",
        back_populates="entry",
        cascade="all, delete-orphan",
        order_by="JournalLine.position",
    )


class JournalLine(Base):
    """Debit or credit split line of a journal entry."""

    __tablename__ = "journal_lines"

    id = Column(Integer, primary_key=True)
    journal_entry_id = Column(Integer, ForeignKey("journal_entries.id"), nullable=False)
    side = Column(String, nullable=False)
    position = Column(Integer, nullable=False)
    account_code = Column(String, nullable=False)
    # Sub-cent precision keeps GST splits unrounded.
    amount = Column(Numeric(24, 10), nullable=False)

    # Relationships
    entry = relationship("JournalEntry", back_populates="lines")


DEBIT = "debit"
CREDIT = "credit"


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
