"""Unit tests for row projection and join aggregation"""

from decimal import Decimal
from rate_chart_gateway.domain.aggregation import aggregate_slabs
from rate_chart_gateway.domain.projection import project_incentive, project_slab

from row_factory import make_row


def shape(slabs):
    return [(slab.id, [incentive.id for incentive in slab.incentives]) for slab in slabs]


# Projection


def test_project_slab_fields():
    """Test slab head carries decoded period type and embedded currency"""
    slab = project_slab(make_row(7, ircdAmountRangeFrom=100, ircdAmountRangeTo="250.75"))

    assert slab.id == 7
    assert slab.period_type.label == "Months"
    assert slab.annual_interest_rate == Decimal("5.5")
    assert slab.amount_range_from == Decimal("100")
    assert slab.amount_range_to == Decimal("250.75")
    assert slab.currency.code == "USD"
    assert slab.currency.decimal_digits == 2
    assert slab.incentives == ()


def test_project_slab_sentinel():
    """Test null and zero slab ids project to nothing"""
    assert project_slab(make_row(None)) is None
    assert project_slab(make_row(0)) is None


def test_project_incentive_sentinel_ignores_other_columns():
    """Test a null/zero incentive id never yields an incentive, even with populated columns"""
    assert project_incentive(make_row(1, None)) is None
    assert project_incentive(make_row(1, 0, entityType=2, attributeName=2, amount=Decimal("1"))) is None


def test_project_incentive_code_value_description():
    """Test description is kept for code-value attributes"""
    incentive = project_incentive(make_row(1, 10))

    assert incentive.id == 10
    assert incentive.attribute_name.label == "Gender"
    assert incentive.attribute_value == "21"
    assert incentive.attribute_value_desc == "Female"
    assert incentive.condition_type.code == "incentive.equal"
    assert incentive.incentive_type.label == "Incentive"


def test_project_incentive_drops_description_for_plain_attributes():
    """Test description is dropped for attributes not backed by a code list"""
    incentive = project_incentive(make_row(1, 10, attributeName=3, attributeValueDesc="Female"))

    assert incentive.attribute_name.label == "Age"
    assert incentive.attribute_value_desc is None


# Aggregation


def test_aggregate_empty():
    """Test no rows gives no slabs"""
    assert aggregate_slabs([]) == []


def test_aggregate_mixed_groups():
    """Test sentinel children are dropped and groups split on slab id change"""
    rows = [make_row(1, None), make_row(1, 10), make_row(1, 11), make_row(2, None)]

    assert shape(aggregate_slabs(rows)) == [(1, [10, 11]), (2, [])]


def test_aggregate_single_slab_without_incentives():
    """Test a lone sentinel child row gives one slab with no incentives"""
    slabs = aggregate_slabs([make_row(5, None)])

    assert len(slabs) == 1
    assert slabs[0].incentives == ()


def test_aggregate_preserves_row_order_of_incentives():
    """Test incentives keep row order, not id order"""
    rows = [make_row(1, 30), make_row(1, 10), make_row(1, 20), make_row(2, 5), make_row(3, None)]

    assert shape(aggregate_slabs(rows)) == [(1, [30, 10, 20]), (2, [5]), (3, [])]


def test_aggregate_skips_slab_sentinel_rows():
    """Test rows without a slab are skipped and do not leak incentives"""
    rows = [make_row(None, 99), make_row(1, 10), make_row(0, 98), make_row(1, 11)]

    assert shape(aggregate_slabs(rows)) == [(1, [10, 11])]


def test_aggregate_is_repeatable():
    """Test aggregating the same rows twice gives equal results"""
    rows = [make_row(1, 10), make_row(1, 11), make_row(2, 12)]

    assert aggregate_slabs(rows) == aggregate_slabs(rows)


def test_aggregate_non_contiguous_rows_warns(caplog):
    """Test a slab id re-appearing after its group closed is reported"""
    rows = [make_row(1, 10), make_row(2, 20), make_row(1, 11)]

    with caplog.at_level("WARNING"):
        slabs = aggregate_slabs(rows)

    assert shape(slabs) == [(1, [10]), (2, [20]), (1, [11])]
    assert "not contiguous" in caplog.text


def test_aggregate_unsorted_rows_grouped_when_not_presorted():
    """Test presorted=False groups rows by slab id first, keeping row order within a slab"""
    rows = [make_row(2, 20), make_row(1, 10), make_row(2, 21), make_row(1, 11)]

    assert shape(aggregate_slabs(rows, presorted=False)) == [(1, [10, 11]), (2, [20, 21])]


def test_aggregate_unsorted_rows_skip_missing_slabs():
    """Test rows without a slab sort first and are dropped when not presorted"""
    rows = [make_row(2, 20), make_row(None, 99), make_row(1, 10), make_row(0, 98)]

    assert shape(aggregate_slabs(rows, presorted=False)) == [(1, [10]), (2, [20])]
