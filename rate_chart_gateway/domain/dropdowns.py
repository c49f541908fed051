"""Static option lists for the rate chart slab and incentive forms"""

from typing import List

from rate_chart_gateway.domain import enumerations
from rate_chart_gateway.domain.enumerations import (
    AttributeName,
    ConditionType,
    EntityType,
    IncentiveType,
    PeriodType,
)
from rate_chart_gateway.domain.models import EnumOption


class ChartDropdownService:
    """Options for the slab fields themselves"""

    def retrieve_period_type_options(self) -> List[EnumOption]:
        return [
            enumerations.period_type(member)
            for member in (PeriodType.DAYS, PeriodType.WEEKS, PeriodType.MONTHS, PeriodType.YEARS)
        ]


class IncentiveDropdownService:
    """Options for incentive rows; INVALID members are never offered"""

    def retrieve_entity_type_options(self) -> List[EnumOption]:
        return [
            enumerations.entity_type(member)
            for member in (EntityType.CUSTOMER, EntityType.ACCOUNT)
        ]

    def retrieve_attribute_name_options(self) -> List[EnumOption]:
        return [
            enumerations.attribute_name(member)
            for member in (
                AttributeName.GENDER,
                AttributeName.AGE,
                AttributeName.CLIENT_TYPE,
                AttributeName.CLIENT_CLASSIFICATION,
            )
        ]

    def retrieve_condition_type_options(self) -> List[EnumOption]:
        return [
            enumerations.condition_type(member)
            for member in (
                ConditionType.LESS_THAN,
                ConditionType.EQUAL,
                ConditionType.GREATER_THAN,
                ConditionType.NOT_EQUAL,
            )
        ]

    def retrieve_incentive_type_options(self) -> List[EnumOption]:
        return [
            enumerations.incentive_type(member)
            for member in (IncentiveType.FIXED, IncentiveType.INCENTIVE)
        ]
