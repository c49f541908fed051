"""Dependency injection for FastAPI endpoints"""

from typing import Optional
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from rate_chart_gateway.config import settings
from rate_chart_gateway.domain.dropdowns import ChartDropdownService, IncentiveDropdownService
from rate_chart_gateway.domain.exceptions import AuthenticationError
from rate_chart_gateway.infrastructure.database.repositories import CodeValueRepository, SlabRowRepository
from rate_chart_gateway.infrastructure.database.session import get_db
from rate_chart_gateway.services.slab_reader import SlabReadService


class RequestSecurityContext:
    """Session check backed by the identity header set by the auth proxy"""

    def __init__(self, user_id: Optional[str]):
        self.user_id = user_id

    def authenticated_user(self) -> str:
        if not self.user_id:
            raise AuthenticationError("Unauthenticated request")
        return self.user_id


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_security_context(request: Request) -> RequestSecurityContext:
    """Provide the caller's security context"""
    return RequestSecurityContext(request.headers.get(settings.user_header))


def get_slab_service(
    security_context: RequestSecurityContext = Depends(get_security_context),
    db: Session = Depends(get_db),
) -> SlabReadService:
    """Provide slab read service bound to the request session"""
    return SlabReadService(
        security_context=security_context,
        row_source=SlabRowRepository(db),
        chart_dropdowns=ChartDropdownService(),
        incentive_dropdowns=IncentiveDropdownService(),
        code_values=CodeValueRepository(db),
    )
