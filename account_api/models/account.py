"""
Account model: a bank account and its current balance.

Each account has:
  - A positive integer id assigned by the database
  - An owner name
  - A balance in integer minor units (cents for USD), signed
  - A currency code (ISO 4217)

This service only reads accounts. Creation and balance changes belong
to other flows (account opening, transfers) that write the same table.

Why integer cents?
  Floating-point numbers introduce rounding errors in financial
  calculations (0.1 + 0.2 != 0.3 in IEEE 754). Integer minor units keep
  all arithmetic exact, and the JSON body carries them as plain integers.
"""

from sqlalchemy import BigInteger, CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from account_api.database import Base


class Account(Base):
    __tablename__ = "accounts"

    __table_args__ = (
        CheckConstraint("id > 0", name="ck_accounts_positive_id"),
    )

    # 64-bit on PostgreSQL; SQLite only autoincrements an INTEGER primary key
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )

    owner: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )

    # Signed: overdrafts are recorded as negative balances
    balance: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        default=0,
    )

    # ISO 4217 currency code
    currency: Mapped[str] = mapped_column(
        String(3),
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"Account(id={self.id!r}, owner={self.owner!r}, "
            f"balance={self.balance!r}, currency={self.currency!r})"
        )
