import logging
from typing import Callable
from fastapi import APIRouter, Depends, HTTPException

from places_brief.core.config import settings
from places_brief.core.errors import ConfigurationError, PlacesAPIError
from places_brief.core.logger import logs
from places_brief.models.base_model import SearchRequest, SearchResult
from places_brief.services.search_service import SearchService, build_search_service

router = APIRouter()

def get_service_builder() -> Callable[[bool], SearchService]:
    return lambda summarize: build_search_service(settings, summarize=summarize)

@router.post("/places/search", response_model=SearchResult)
async def search_places_endpoint(
    payload: SearchRequest,
    build_service: Callable[[bool], SearchService] = Depends(get_service_builder)
):
    try:
        service = build_service(payload.summarize)
    except ConfigurationError as e:
        logs.log(logging.ERROR, str(e))
        raise HTTPException(status_code=503, detail=str(e))

    try:
        return await service.search(
            payload.query,
            payload.location_bias,
            payload.max_results,
            payload.summarize
        )
    except PlacesAPIError as e:
        raise HTTPException(status_code=502, detail=str(e))
