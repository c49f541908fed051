"""GET /v1/interestratecharts/{chart_id}/chartslabs - Interest rate chart slab reads"""

import time
import logging
from typing import List, Union
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from rate_chart_gateway.api.v1.schemas import RateSlabSchema, SlabTemplateResponse
from rate_chart_gateway.api.dependencies import get_request_id, get_slab_service
from rate_chart_gateway.domain.exceptions import AuthenticationError, SlabNotFoundError
from rate_chart_gateway.domain.models import SlabTemplate
from rate_chart_gateway.infrastructure.observability.logging import log_slab_query
from rate_chart_gateway.services.slab_reader import SlabReadService

router = APIRouter()


def to_template_response(template: SlabTemplate) -> SlabTemplateResponse:
    """Flatten a slab template into its response shape"""
    options = template.options
    return SlabTemplateResponse.model_validate(
        {
            "slab": template.slab,
            "period_types": options.period_type_options,
            "entity_type_options": options.entity_type_options,
            "attribute_name_options": options.attribute_name_options,
            "condition_type_options": options.condition_type_options,
            "incentive_type_options": options.incentive_type_options,
            "gender_options": options.gender_options,
            "client_type_options": options.client_type_options,
            "client_classification_options": options.client_classification_options,
        }
    )


@router.get("/interestratecharts/{chart_id}/chartslabs", response_model=List[RateSlabSchema])
def list_slabs(
    chart_id: int,
    request: Request,
    service: SlabReadService = Depends(get_slab_service),
):
    """
    Retrieve every slab of a chart with its incentives.

    Returns:
        Slabs ordered by id; empty when the chart has none
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        slabs = service.retrieve_all(chart_id)
    except AuthenticationError as e:
        logging.warning(f"Authentication failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=401, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    log_slab_query(request_id, "retrieve_all", chart_id, len(slabs), duration_ms)

    return [RateSlabSchema.model_validate(slab) for slab in slabs]


@router.get("/interestratecharts/{chart_id}/chartslabs/template", response_model=SlabTemplateResponse)
def get_slab_template(
    chart_id: int,
    request: Request,
    service: SlabReadService = Depends(get_slab_service),
):
    """Retrieve the option lists needed to create a new slab"""
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        template = service.retrieve_template()
    except AuthenticationError as e:
        logging.warning(f"Authentication failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=401, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    log_slab_query(request_id, "retrieve_template", chart_id, 0, duration_ms)

    return to_template_response(template)


@router.get(
    "/interestratecharts/{chart_id}/chartslabs/{slab_id}",
    response_model=None,
)
def get_slab(
    chart_id: int,
    slab_id: int,
    request: Request,
    template: bool = Query(False, description="Include the option lists for editing"),
    service: SlabReadService = Depends(get_slab_service),
) -> Union[SlabTemplateResponse, RateSlabSchema]:
    """
    Retrieve a single slab of a chart.

    Flow:
    1. Aggregate the slab and its incentives
    2. Bundle it with the form option lists when template=true
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        slab = service.retrieve_one(chart_id, slab_id)
        slab_template = service.retrieve_with_template(slab) if template else None

    except AuthenticationError as e:
        logging.warning(f"Authentication failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=401, detail=str(e))

    except SlabNotFoundError as e:
        logging.info(f"Slab not found: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    log_slab_query(request_id, "retrieve_one", chart_id, 1, duration_ms)

    if slab_template is not None:
        return to_template_response(slab_template)
    return RateSlabSchema.model_validate(slab)
