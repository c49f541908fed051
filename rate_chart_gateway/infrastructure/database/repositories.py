"""Data access layer for rate chart slabs and code values"""

from typing import Any, List, Mapping, Optional
from sqlalchemy import String, cast, select
from sqlalchemy.orm import Session
from rate_chart_gateway.infrastructure.database.models import (
    CodeRecord,
    CodeValueRecord,
    CurrencyRecord,
    InterestIncentiveRecord,
    InterestRateSlabRecord,
)
from rate_chart_gateway.domain.models import CodeValue


def slab_join_query():
    """
    Slab rows left-joined with incentives, code value descriptions and currency.

    One row per (slab, incentive) pair; a slab without incentives yields a single
    row whose incentive columns are null. Ordered so rows of a slab are contiguous.
    """
    slab = InterestRateSlabRecord
    incentive = InterestIncentiveRecord
    return (
        select(
            slab.id.label("ircdId"),
            slab.description.label("ircdDescription"),
            slab.period_type_enum.label("ircdPeriodTypeId"),
            slab.from_period.label("ircdFromPeriod"),
            slab.to_period.label("ircdToPeriod"),
            slab.amount_range_from.label("ircdAmountRangeFrom"),
            slab.amount_range_to.label("ircdAmountRangeTo"),
            slab.annual_interest_rate.label("ircdAnnualInterestRate"),
            CurrencyRecord.code.label("currencyCode"),
            CurrencyRecord.name.label("currencyName"),
            CurrencyRecord.internationalized_name_code.label("currencyNameCode"),
            CurrencyRecord.display_symbol.label("currencyDisplaySymbol"),
            CurrencyRecord.decimal_places.label("currencyDigits"),
            CurrencyRecord.currency_multiplesof.label("inMultiplesOf"),
            incentive.id.label("iriId"),
            incentive.entiry_type.label("entityType"),
            incentive.attribute_name.label("attributeName"),
            incentive.condition_type.label("conditionType"),
            incentive.attribute_value.label("attributeValue"),
            incentive.incentive_type.label("incentiveType"),
            incentive.amount.label("amount"),
            CodeValueRecord.code_value.label("attributeValueDesc"),
        )
        .select_from(slab)
        .outerjoin(incentive, incentive.interest_rate_slab_id == slab.id)
        # attribute_value is free text; only code-value attributes hold a code value id
        .outerjoin(CodeValueRecord, cast(CodeValueRecord.id, String) == incentive.attribute_value)
        .outerjoin(CurrencyRecord, slab.currency_code == CurrencyRecord.code)
        .order_by(slab.id, incentive.id)
    )


class SlabRowRepository:
    """Repository producing the flattened slab/incentive join rows"""

    def __init__(self, db: Session):
        self.db = db

    def fetch_joined_rows(self, chart_id: int, slab_id: Optional[int] = None) -> List[Mapping[str, Any]]:
        """Fetch join rows for every slab of a chart, or for a single slab of that chart"""
        query = slab_join_query().where(InterestRateSlabRecord.interest_rate_chart_id == chart_id)
        if slab_id is not None:
            query = query.where(InterestRateSlabRecord.id == slab_id)
        return list(self.db.execute(query).mappings().all())


class CodeValueRepository:
    """Repository for code list entries"""

    def __init__(self, db: Session):
        self.db = db

    def retrieve_code_values_by_code(self, code_name: str) -> List[CodeValue]:
        """Fetch all values of a named code list in display order"""
        records = (
            self.db.query(CodeValueRecord)
            .join(CodeRecord, CodeValueRecord.code_id == CodeRecord.id)
            .filter(CodeRecord.code_name == code_name)
            .order_by(CodeValueRecord.order_position, CodeValueRecord.id)
            .all()
        )
        return [
            CodeValue(
                id=record.id,
                name=record.code_value,
                position=record.order_position,
                description=record.code_description,
                active=record.is_active,
                mandatory=record.is_mandatory,
            )
            for record in records
        ]
