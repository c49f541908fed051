"""Read-only query facade for interest rate chart slabs"""

import logging
from typing import Any, List, Mapping, Optional, Protocol

from rate_chart_gateway.config import settings
from rate_chart_gateway.domain.aggregation import aggregate_slabs
from rate_chart_gateway.domain.exceptions import AuthenticationError, SlabNotFoundError
from rate_chart_gateway.domain.models import CodeValue, EnumOption, RateSlab, SlabTemplate, TemplateOptions
from rate_chart_gateway.domain.templates import assemble_template
from rate_chart_gateway.infrastructure.observability.metrics import record_query, rows_aggregated_histogram

logger = logging.getLogger(__name__)


class SecurityContext(Protocol):
    def authenticated_user(self) -> str:
        """Return the caller's identity or raise AuthenticationError"""
        ...


class SlabRowSource(Protocol):
    def fetch_joined_rows(self, chart_id: int, slab_id: Optional[int] = None) -> List[Mapping[str, Any]]:
        ...


class ChartDropdowns(Protocol):
    def retrieve_period_type_options(self) -> List[EnumOption]:
        ...


class IncentiveDropdowns(Protocol):
    def retrieve_entity_type_options(self) -> List[EnumOption]:
        ...

    def retrieve_attribute_name_options(self) -> List[EnumOption]:
        ...

    def retrieve_condition_type_options(self) -> List[EnumOption]:
        ...

    def retrieve_incentive_type_options(self) -> List[EnumOption]:
        ...


class CodeValueSource(Protocol):
    def retrieve_code_values_by_code(self, code_name: str) -> List[CodeValue]:
        ...


class SlabReadService:
    """
    Retrieves slabs and slab form templates.

    Every operation checks the caller's session before touching any collaborator.
    """

    def __init__(
        self,
        security_context: SecurityContext,
        row_source: SlabRowSource,
        chart_dropdowns: ChartDropdowns,
        incentive_dropdowns: IncentiveDropdowns,
        code_values: CodeValueSource,
        gender_code_name: Optional[str] = None,
        client_type_code_name: Optional[str] = None,
        client_classification_code_name: Optional[str] = None,
    ):
        self.security_context = security_context
        self.row_source = row_source
        self.chart_dropdowns = chart_dropdowns
        self.incentive_dropdowns = incentive_dropdowns
        self.code_values = code_values
        self.gender_code_name = gender_code_name or settings.gender_code_name
        self.client_type_code_name = client_type_code_name or settings.client_type_code_name
        self.client_classification_code_name = (
            client_classification_code_name or settings.client_classification_code_name
        )

    def retrieve_all(self, chart_id: int) -> List[RateSlab]:
        """All slabs of a chart in slab id order; an empty list is a valid result"""
        self._authenticate("retrieve_all")
        slabs = self._aggregate(self.row_source.fetch_joined_rows(chart_id))
        record_query("retrieve_all", "ok")
        return slabs

    def retrieve_one(self, chart_id: int, slab_id: int) -> RateSlab:
        """
        Single slab of a chart.

        Raises:
            SlabNotFoundError: No slab with this id belongs to the chart
        """
        self._authenticate("retrieve_one")
        slabs = self._aggregate(self.row_source.fetch_joined_rows(chart_id, slab_id))
        if not slabs:
            record_query("retrieve_one", "not_found")
            raise SlabNotFoundError(chart_id, slab_id)

        record_query("retrieve_one", "ok")
        return slabs[0]

    def retrieve_template(self) -> SlabTemplate:
        """Option lists for a new slab form"""
        self._authenticate("retrieve_template")
        template = assemble_template(None, self._options())
        record_query("retrieve_template", "ok")
        return template

    def retrieve_with_template(self, slab: RateSlab) -> SlabTemplate:
        """An existing slab together with the option lists for editing it"""
        self._authenticate("retrieve_with_template")
        template = assemble_template(slab, self._options())
        record_query("retrieve_with_template", "ok")
        return template

    def _authenticate(self, operation: str) -> str:
        try:
            return self.security_context.authenticated_user()
        except AuthenticationError:
            record_query(operation, "unauthenticated")
            raise

    def _aggregate(self, rows: List[Mapping[str, Any]]) -> List[RateSlab]:
        rows_aggregated_histogram.observe(len(rows))
        slabs = aggregate_slabs(rows)
        logger.debug("Aggregated %d rows into %d slabs", len(rows), len(slabs))
        return slabs

    def _options(self) -> TemplateOptions:
        return TemplateOptions(
            period_type_options=tuple(self.chart_dropdowns.retrieve_period_type_options()),
            entity_type_options=tuple(self.incentive_dropdowns.retrieve_entity_type_options()),
            attribute_name_options=tuple(self.incentive_dropdowns.retrieve_attribute_name_options()),
            condition_type_options=tuple(self.incentive_dropdowns.retrieve_condition_type_options()),
            incentive_type_options=tuple(self.incentive_dropdowns.retrieve_incentive_type_options()),
            gender_options=tuple(self.code_values.retrieve_code_values_by_code(self.gender_code_name)),
            client_type_options=tuple(
                self.code_values.retrieve_code_values_by_code(self.client_type_code_name)
            ),
            client_classification_options=tuple(
                self.code_values.retrieve_code_values_by_code(self.client_classification_code_name)
            ),
        )
