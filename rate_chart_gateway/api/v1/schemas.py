"""Pydantic schemas for API responses"""

from decimal import Decimal
from typing import List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ResponseModel(BaseModel):
    """Base for responses: built from domain dataclasses, serialized in camelCase"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class EnumOptionSchema(ResponseModel):
    id: int
    code: str
    value: str = Field(validation_alias=AliasChoices("label", "value"), serialization_alias="value")


class CodeValueSchema(ResponseModel):
    id: int
    name: Optional[str] = None
    position: Optional[int] = None
    description: Optional[str] = None
    active: bool = True
    mandatory: bool = False


class CurrencySchema(ResponseModel):
    code: Optional[str] = None
    name: Optional[str] = None
    name_code: Optional[str] = None
    display_symbol: Optional[str] = None
    decimal_places: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("decimal_digits", "decimalPlaces")
    )
    in_multiples_of: Optional[int] = None


class IncentiveSchema(ResponseModel):
    """Single incentive of a slab"""

    id: int
    entity_type: EnumOptionSchema
    attribute_name: EnumOptionSchema
    condition_type: EnumOptionSchema
    attribute_value: Optional[str] = None
    attribute_value_desc: Optional[str] = None
    incentive_type: EnumOptionSchema
    amount: Optional[Decimal] = None


class RateSlabSchema(ResponseModel):
    """Response for GET /v1/interestratecharts/{chart_id}/chartslabs/{slab_id}"""

    id: int
    description: Optional[str] = None
    period_type: EnumOptionSchema
    from_period: Optional[int] = None
    to_period: Optional[int] = None
    amount_range_from: Optional[Decimal] = None
    amount_range_to: Optional[Decimal] = None
    annual_interest_rate: Optional[Decimal] = None
    currency: CurrencySchema
    incentives: List[IncentiveSchema] = []


class SlabTemplateResponse(ResponseModel):
    """Slab (absent for new forms) plus the option lists of the slab form"""

    slab: Optional[RateSlabSchema] = None
    period_types: List[EnumOptionSchema] = []
    entity_type_options: List[EnumOptionSchema] = []
    attribute_name_options: List[EnumOptionSchema] = []
    condition_type_options: List[EnumOptionSchema] = []
    incentive_type_options: List[EnumOptionSchema] = []
    gender_options: List[CodeValueSchema] = []
    client_type_options: List[CodeValueSchema] = []
    client_classification_options: List[CodeValueSchema] = []
