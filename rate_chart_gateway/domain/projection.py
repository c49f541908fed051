"""Row projection - map one joined slab/incentive row onto domain objects"""

from decimal import Decimal
from typing import Any, Mapping, Optional

from rate_chart_gateway.domain import enumerations
from rate_chart_gateway.domain.enumerations import AttributeName
from rate_chart_gateway.domain.models import Currency, Incentive, RateSlab

Row = Mapping[str, Any]

SLAB_ID_COLUMN = "ircdId"
INCENTIVE_ID_COLUMN = "iriId"


def identity(row: Row, column: str) -> Optional[int]:
    """
    Read an identity column, treating null and zero alike.

    The outer join yields a row with null child columns when a slab has no
    incentives; some drivers report that as 0 instead of None.
    """
    value = row.get(column)
    if value is None:
        return None
    value = int(value)
    return value or None


def _integer(row: Row, column: str) -> Optional[int]:
    value = row.get(column)
    return None if value is None else int(value)


def _decimal(row: Row, column: str) -> Optional[Decimal]:
    value = row.get(column)
    if value is None or isinstance(value, Decimal):
        return value
    # str() keeps float columns (SQLite) from carrying binary noise
    return Decimal(str(value))


def _string(row: Row, column: str) -> Optional[str]:
    value = row.get(column)
    return None if value is None else str(value)


def project_slab(row: Row) -> Optional[RateSlab]:
    """Build the slab head (no incentives yet) or None for a sentinel row"""
    slab_id = identity(row, SLAB_ID_COLUMN)
    if slab_id is None:
        return None

    currency = Currency(
        code=row.get("currencyCode"),
        name=row.get("currencyName"),
        name_code=row.get("currencyNameCode"),
        display_symbol=row.get("currencyDisplaySymbol"),
        decimal_digits=_integer(row, "currencyDigits"),
        in_multiples_of=_integer(row, "inMultiplesOf"),
    )

    return RateSlab(
        id=slab_id,
        description=row.get("ircdDescription"),
        period_type=enumerations.period_type(_integer(row, "ircdPeriodTypeId")),
        from_period=_integer(row, "ircdFromPeriod"),
        to_period=_integer(row, "ircdToPeriod"),
        amount_range_from=_decimal(row, "ircdAmountRangeFrom"),
        amount_range_to=_decimal(row, "ircdAmountRangeTo"),
        annual_interest_rate=_decimal(row, "ircdAnnualInterestRate"),
        currency=currency,
    )


def project_incentive(row: Row) -> Optional[Incentive]:
    """Build the incentive carried by a row, or None when the row has no incentive"""
    incentive_id = identity(row, INCENTIVE_ID_COLUMN)
    if incentive_id is None:
        return None

    attribute = AttributeName.from_int(_integer(row, "attributeName"))
    attribute_value_desc = None
    if attribute.is_code_value_attribute():
        attribute_value_desc = _string(row, "attributeValueDesc")

    return Incentive(
        id=incentive_id,
        entity_type=enumerations.entity_type(_integer(row, "entityType")),
        attribute_name=enumerations.attribute_name(attribute),
        condition_type=enumerations.condition_type(_integer(row, "conditionType")),
        attribute_value=_string(row, "attributeValue"),
        attribute_value_desc=attribute_value_desc,
        incentive_type=enumerations.incentive_type(_integer(row, "incentiveType")),
        amount=_decimal(row, "amount"),
    )
