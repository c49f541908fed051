"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class AuthenticationError(DomainException):
    """Caller has no valid session"""

    pass


class SlabNotFoundError(DomainException):
    """No interest rate chart slab matched the requested chart and slab ids"""

    def __init__(self, chart_id: int, slab_id: int):
        self.chart_id = chart_id
        self.slab_id = slab_id
        super().__init__(
            f"Interest rate chart slab with identifier {slab_id} does not exist for chart {chart_id}"
        )
