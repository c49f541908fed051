"""Join aggregation - rebuild slabs and their incentives from flattened join rows"""

import logging
from typing import Iterable, List, Optional, Set

from rate_chart_gateway.domain.models import Incentive, RateSlab
from rate_chart_gateway.domain.projection import (
    SLAB_ID_COLUMN,
    Row,
    identity,
    project_incentive,
    project_slab,
)

logger = logging.getLogger(__name__)


class _SlabBuilder:
    """Scratch state for the slab group currently being read"""

    def __init__(self, key: int, head: RateSlab):
        self.key = key
        self.head = head
        self.incentives: List[Incentive] = []

    def build(self) -> RateSlab:
        return self.head.with_incentives(self.incentives)


def aggregate_slabs(rows: Iterable[Row], presorted: bool = True) -> List[RateSlab]:
    """
    Group joined slab/incentive rows into slabs in a single forward pass.

    Rows sharing a slab id must be contiguous; the slab query orders by slab id
    to guarantee it. Pass presorted=False when the source cannot promise that
    ordering and the rows are stably sorted by slab id first.

    Rules:
    - A change of slab id opens a new group, unless the row has no slab
      (null/zero id), in which case the row is skipped entirely
    - Rows with the same slab id as the open group only contribute incentives
    - Rows with no incentive (null/zero incentive id) contribute nothing

    Returns:
        Slabs in order of first appearance, each with its incentives in row order
    """
    if not presorted:
        # Null and zero slab ids sort first as 0; those rows are skipped below
        rows = sorted(rows, key=lambda row: identity(row, SLAB_ID_COLUMN) or 0)

    slabs: List[RateSlab] = []
    closed_keys: Set[int] = set()
    builder: Optional[_SlabBuilder] = None

    for row in rows:
        key = identity(row, SLAB_ID_COLUMN)

        if builder is None or key != builder.key:
            head = project_slab(row)
            if head is None:
                continue

            if builder is not None:
                slabs.append(builder.build())
                closed_keys.add(builder.key)
            if key in closed_keys:
                logger.warning(
                    "Slab rows are not contiguous, slab %s appears in more than one group", key
                )
            builder = _SlabBuilder(key, head)

        incentive = project_incentive(row)
        if incentive is not None:
            builder.incentives.append(incentive)

    if builder is not None:
        slabs.append(builder.build())

    return slabs
