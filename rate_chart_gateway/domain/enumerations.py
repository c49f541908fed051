"""Decoding of integer-coded rate chart and incentive enumerations"""

import logging
from enum import IntEnum
from typing import Optional

from rate_chart_gateway.domain.models import EnumOption

logger = logging.getLogger(__name__)


class _CodedEnum(IntEnum):
    """Integer enumeration with a stable code, a label and an INVALID fallback"""

    def __new__(cls, value: int, code: str, label: str):
        member = int.__new__(cls, value)
        member._value_ = value
        member.code = code
        member.label = label
        return member

    @classmethod
    def from_int(cls, raw: Optional[int]) -> "_CodedEnum":
        """Map a raw column value to a member; null and unknown values give INVALID"""
        if raw is None:
            return cls.INVALID
        try:
            return cls(int(raw))
        except ValueError:
            logger.warning("Unrecognized %s code: %s", cls.__name__, raw)
            return cls.INVALID


class PeriodType(_CodedEnum):
    DAYS = 0, "periodType.days", "Days"
    WEEKS = 1, "periodType.weeks", "Weeks"
    MONTHS = 2, "periodType.months", "Months"
    YEARS = 3, "periodType.years", "Years"
    INVALID = 4, "periodType.invalid", "Invalid"


class EntityType(_CodedEnum):
    INVALID = 1, "InterestIncentiveEntityType.invalid", "Invalid"
    CUSTOMER = 2, "InterestIncentiveEntityType.customer", "Customer"
    ACCOUNT = 3, "InterestIncentiveEntityType.account", "Account"


class AttributeName(_CodedEnum):
    INVALID = 1, "InterestIncentiveAttributeName.invalid", "Invalid"
    GENDER = 2, "InterestIncentiveAttributeName.gender", "Gender"
    AGE = 3, "InterestIncentiveAttributeName.age", "Age"
    CLIENT_TYPE = 4, "InterestIncentiveAttributeName.clientType", "Client Type"
    CLIENT_CLASSIFICATION = (
        5,
        "InterestIncentiveAttributeName.clientClassification",
        "Client Classification",
    )

    def is_code_value_attribute(self) -> bool:
        """True when the attribute value is an id into the shared code-value table"""
        return self in _CODE_VALUE_ATTRIBUTES


_CODE_VALUE_ATTRIBUTES = frozenset(
    {AttributeName.GENDER, AttributeName.CLIENT_TYPE, AttributeName.CLIENT_CLASSIFICATION}
)


class ConditionType(_CodedEnum):
    INVALID = 0, "invalid", "Invalid"
    LESS_THAN = 1, "lessthan", "less than"
    EQUAL = 2, "equal", "equal to"
    GREATER_THAN = 3, "greaterthan", "greater than"
    NOT_EQUAL = 4, "notequal", "not equal to"


class IncentiveType(_CodedEnum):
    INVALID = 1, "InterestIncentiveType.invalid", "Invalid"
    FIXED = 2, "InterestIncentiveType.fixed", "Fixed"
    INCENTIVE = 3, "InterestIncentiveType.incentive", "Incentive"


def _option(member: _CodedEnum, code_prefix: str = "") -> EnumOption:
    return EnumOption(id=member.value, code=code_prefix + member.code, label=member.label)


def period_type(raw: Optional[int]) -> EnumOption:
    return _option(PeriodType.from_int(raw))


def entity_type(raw: Optional[int]) -> EnumOption:
    return _option(EntityType.from_int(raw))


def attribute_name(raw: Optional[int]) -> EnumOption:
    return _option(AttributeName.from_int(raw))


def condition_type(raw: Optional[int], code_prefix: str = "incentive") -> EnumOption:
    """Condition codes are namespaced by their owner, e.g. ``incentive.lessthan``"""
    return _option(ConditionType.from_int(raw), f"{code_prefix}.")


def incentive_type(raw: Optional[int]) -> EnumOption:
    return _option(IncentiveType.from_int(raw))
