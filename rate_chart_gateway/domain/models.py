"""Domain models - pure Python dataclasses representing rate chart entities"""

from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Iterable, Optional, Tuple


@dataclass(frozen=True)
class EnumOption:
    """Decoded small-integer enumeration value"""

    id: int
    code: str
    label: str


@dataclass(frozen=True)
class Currency:
    """Currency embedded by value into a slab"""

    code: Optional[str]
    name: Optional[str]
    name_code: Optional[str]
    display_symbol: Optional[str]
    decimal_digits: Optional[int]
    in_multiples_of: Optional[int]


@dataclass(frozen=True)
class Incentive:
    """Conditional adjustment to a slab's rate based on a client attribute"""

    id: int
    entity_type: EnumOption
    attribute_name: EnumOption
    condition_type: EnumOption
    attribute_value: Optional[str]
    attribute_value_desc: Optional[str]  # only set for code-value backed attributes
    incentive_type: EnumOption
    amount: Optional[Decimal]


@dataclass(frozen=True)
class RateSlab:
    """Banded sub-range of an interest rate chart with its incentives"""

    id: int
    description: Optional[str]
    period_type: EnumOption
    from_period: Optional[int]
    to_period: Optional[int]
    amount_range_from: Optional[Decimal]
    amount_range_to: Optional[Decimal]
    annual_interest_rate: Optional[Decimal]
    currency: Currency
    incentives: Tuple[Incentive, ...] = ()

    def with_incentives(self, incentives: Iterable[Incentive]) -> "RateSlab":
        """Return a copy of this slab carrying the given incentives in order"""
        return replace(self, incentives=tuple(incentives))


@dataclass(frozen=True)
class CodeValue:
    """Entry of a configurable code list (gender, client type, ...)"""

    id: int
    name: str
    position: Optional[int] = None
    description: Optional[str] = None
    active: bool = True
    mandatory: bool = False


@dataclass(frozen=True)
class TemplateOptions:
    """Option collections a slab form needs to render"""

    period_type_options: Tuple[EnumOption, ...] = ()
    entity_type_options: Tuple[EnumOption, ...] = ()
    attribute_name_options: Tuple[EnumOption, ...] = ()
    condition_type_options: Tuple[EnumOption, ...] = ()
    incentive_type_options: Tuple[EnumOption, ...] = ()
    gender_options: Tuple[CodeValue, ...] = ()
    client_type_options: Tuple[CodeValue, ...] = ()
    client_classification_options: Tuple[CodeValue, ...] = ()


@dataclass(frozen=True)
class SlabTemplate:
    """Zero-or-one slab bundled with the option lists for viewing or editing it"""

    slab: Optional[RateSlab]
    options: TemplateOptions = field(default_factory=TemplateOptions)
