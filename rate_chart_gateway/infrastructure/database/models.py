"""SQLAlchemy ORM models for the rate chart slab tables"""

from sqlalchemy import Boolean, Column, BigInteger, ForeignKey, Integer, Numeric, SmallInteger, String
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


class CurrencyRecord(Base):
    """Currency reference data"""

    __tablename__ = "m_currency"

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    code = Column(String(3), nullable=False, unique=True)
    decimal_places = Column(SmallInteger, nullable=False)
    currency_multiplesof = Column(SmallInteger, nullable=True)
    display_symbol = Column(String(10), nullable=True)
    name = Column(String(50), nullable=False)
    internationalized_name_code = Column(String(50), nullable=False)


class InterestRateSlabRecord(Base):
    """Banded slab of an interest rate chart"""

    __tablename__ = "m_interest_rate_slab"

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    interest_rate_chart_id = Column(BigInteger, nullable=False, index=True)
    description = Column(String(200), nullable=True)
    period_type_enum = Column(SmallInteger, nullable=True)
    from_period = Column(Integer, nullable=True)
    to_period = Column(Integer, nullable=True)
    amount_range_from = Column(Numeric(19, 6), nullable=True)
    amount_range_to = Column(Numeric(19, 6), nullable=True)
    annual_interest_rate = Column(Numeric(19, 6), nullable=False)
    currency_code = Column(String(3), nullable=False)

    incentives = relationship("InterestIncentiveRecord", back_populates="slab", cascade="all, delete-orphan")


class InterestIncentiveRecord(Base):
    """Incentive attached to a slab"""

    __tablename__ = "m_interest_incentives"

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    interest_rate_slab_id = Column(
        BigInteger, ForeignKey("m_interest_rate_slab.id", ondelete="CASCADE"), nullable=False
    )
    # Column name spelling matches the deployed schema
    entiry_type = Column(SmallInteger, nullable=False)
    attribute_name = Column(SmallInteger, nullable=False)
    condition_type = Column(SmallInteger, nullable=False)
    attribute_value = Column(String(50), nullable=False)
    incentive_type = Column(SmallInteger, nullable=False)
    amount = Column(Numeric(19, 6), nullable=False)

    slab = relationship("InterestRateSlabRecord", back_populates="incentives")


class CodeRecord(Base):
    """Named code list (Gender, ClientType, ...)"""

    __tablename__ = "m_code"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code_name = Column(String(100), nullable=False, unique=True)
    is_system_defined = Column(Boolean, nullable=False, default=False)

    values = relationship("CodeValueRecord", back_populates="code", cascade="all, delete-orphan")


class CodeValueRecord(Base):
    """Single entry of a code list"""

    __tablename__ = "m_code_value"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code_id = Column(Integer, ForeignKey("m_code.id", ondelete="CASCADE"), nullable=False)
    code_value = Column(String(100), nullable=True)
    code_description = Column(String(500), nullable=True)
    order_position = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    is_mandatory = Column(Boolean, nullable=False, default=False)

    code = relationship("CodeRecord", back_populates="values")
