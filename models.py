# models.py
from sqlalchemy import (
    Column, Integer, String, Date, ForeignKey, DateTime
)
from sqlalchemy.orm import relationship, declarative_base
import enum
import datetime

Base = declarative_base()


class AssetType(enum.Enum):
    BANK = "BANK"
    CASH = "CASH"
    GOLD = "GOLD"
    CAR = "CAR"
    REAL_ESTATE = "REAL_ESTATE"
    OTHER = "OTHER"


class RepaymentMethod(enum.Enum):
    INSTALLMENT = "INSTALLMENT"
    LUMP_SUM = "LUMP_SUM"


class InstallmentStatus(enum.Enum):
    PENDING = "PENDING"
    PAID = "PAID"


class Member(Base):
    __tablename__ = "members"
    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    relation = Column(String)

    assets = relationship("Asset", back_populates="member", cascade="all, delete-orphan")
    debts = relationship("Debt", back_populates="member", cascade="all, delete-orphan")
    incomes = relationship("RecurringIncome", back_populates="member", cascade="all, delete-orphan")


class Asset(Base):
    __tablename__ = "assets"
    id = Column(Integer, primary_key=True)
    member_id = Column(Integer, ForeignKey("members.id"))
    name = Column(String, nullable=False)
    type = Column(String, default=AssetType.OTHER.value)
    amount = Column(Integer, default=0)
    description = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.datetime.utcnow)

    member = relationship("Member", back_populates="assets")


class Debt(Base):
    __tablename__ = "debts"
    id = Column(Integer, primary_key=True)
    member_id = Column(Integer, ForeignKey("members.id"))
    name = Column(String, nullable=False)
    total_amount = Column(Integer, default=0)
    repayment_method = Column(String, default=RepaymentMethod.LUMP_SUM.value)
    amount_basis = Column(String, default="TOTAL")
    start_date = Column(Date)  # stored as Gregorian date
    description = Column(String, nullable=True)

    created_at = Column(DateTime, default=datetime.datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.datetime.utcnow, onupdate=datetime.datetime.utcnow)

    member = relationship("Member", back_populates="debts")
    installments = relationship(
        "Installment",
        back_populates="debt",
        cascade="all, delete-orphan",
        order_by="Installment.sequence_number",
    )


class Installment(Base):
    __tablename__ = "installments"
    id = Column(Integer, primary_key=True)
    debt_id = Column(Integer, ForeignKey("debts.id"))
    sequence_number = Column(Integer)
    amount = Column(Integer, default=0)
    due_date = Column(Date)  # stored as Gregorian date
    status = Column(String, default=InstallmentStatus.PENDING.value)
    paid_at = Column(DateTime, nullable=True)

    debt = relationship("Debt", back_populates="installments")

    @property
    def is_paid(self):
        return self.status == InstallmentStatus.PAID.value

    @property
    def debt_name(self):
        return self.debt.name if self.debt is not None else None


class RecurringIncome(Base):
    __tablename__ = "incomes"
    id = Column(Integer, primary_key=True)
    member_id = Column(Integer, ForeignKey("members.id"))
    name = Column(String, nullable=False)
    amount = Column(Integer, default=0)
    day_of_month = Column(Integer, default=1)
    description = Column(String, nullable=True)

    member = relationship("Member", back_populates="incomes")
