"""SQLAlchemy models for ledgerbook database."""

from datetime import datetime, UTC
from decimal import Decimal
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    TypeDecorator,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Money(TypeDecorator):
    """Exact decimal amount stored as text.

    Values round-trip without rounding, whatever their scale.
    """

    impl = String
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if not isinstance(value, Decimal):
            value = Decimal(str(value))
        return str(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)


def _now() -> datetime:
    return datetime.now(UTC)


class AccountBook(Base):
    """Account book model."""

    __tablename__ = "account_books"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    created_at = Column(DateTime, default=_now, nullable=False)
    updated_at = Column(DateTime, default=_now, onupdate=_now, nullable=False)

    # Relationships
    accounts = relationship("Account", back_populates="account_book", cascade="all, delete-orphan")
    transactions = relationship(
        "Transaction", back_populates="account_book", cascade="all, delete-orphan"
    )
    category_rules = relationship(
        "CategoryRule",
        back_populates="account_book",
        cascade="all, delete-orphan",
        order_by="CategoryRule.id",
    )


class Account(Base):
    """Account model with derived current-month totals."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    account_book_id = Column(Integer, ForeignKey("account_books.id"), nullable=False)
    total_monthly_balance = Column(Money, default=0, nullable=False)
    total_monthly_debits = Column(Money, default=0, nullable=False)
    total_monthly_credits = Column(Money, default=0, nullable=False)
    created_at = Column(DateTime, default=_now, nullable=False)
    updated_at = Column(DateTime, default=_now, nullable=False)

    # Relationships
    account_book = relationship("AccountBook", back_populates="accounts")
    transactions = relationship("Transaction", back_populates="account", cascade="all, delete-orphan")
    monthly_balances = relationship(
        "AccountMonthlyBalance",
        back_populates="account",
        cascade="all, delete-orphan",
        order_by="AccountMonthlyBalance.month",
    )


class AccountMonthlyBalance(Base):
    """One entry of an account's historical balance series."""

    __tablename__ = "account_monthly_balances"

    id = Column(Integer, primary_key=True)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    month = Column(String(7), nullable=False)
    debits = Column(Money, nullable=False)
    credits = Column(Money, nullable=False)
    balance = Column(Money, nullable=False)

    __table_args__ = (UniqueConstraint("account_id", "month", name="uq_account_month"),)

    # Relationships
    account = relationship("Account", back_populates="monthly_balances")


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    account_book_id = Column(Integer, ForeignKey("account_books.id"), nullable=False)
    transaction_date = Column(Date, nullable=False)
    description = Column(String, nullable=False)
    category = Column(String, nullable=False)
    sub_category = Column(String, default="", nullable=False)
    debit_amount = Column(Money, default=0, nullable=False)
    credit_amount = Column(Money, default=0, nullable=False)
    linked_transaction_id = Column(Integer, nullable=True)
    created_at = Column(DateTime, default=_now, nullable=False)
    updated_at = Column(DateTime, default=_now, onupdate=_now, nullable=False)

    # Relationships
    account = relationship("Account", back_populates="transactions")
    account_book = relationship("AccountBook", back_populates="transactions")


class CategoryRule(Base):
    """Keyword categorization rule. Evaluated in id (creation) order."""

    __tablename__ = "category_rules"

    id = Column(Integer, primary_key=True)
    account_book_id = Column(Integer, ForeignKey("account_books.id"), nullable=False)
    keyword = Column(String, nullable=False)
    category = Column(String, nullable=False)
    sub_category = Column(String, default="", nullable=False)
    created_at = Column(DateTime, default=_now, nullable=False)
    updated_at = Column(DateTime, default=_now, onupdate=_now, nullable=False)

    # Relationships
    account_book = relationship("AccountBook", back_populates="category_rules")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
