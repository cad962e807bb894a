"""
Error catalog REST API endpoints.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from bluescreen.api.dependencies import get_selector, track_api_call
from bluescreen.models.api_response import CodeList, DataResponse, ErrorCodeNotFound, StyleList
from bluescreen.models.error import ErrorRecord
from bluescreen.models.style import DEFAULT_STYLE, Style
from bluescreen.services.selector import ErrorSelector
from bluescreen.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["errors"], dependencies=[Depends(track_api_call)])


@router.get("/error", response_model=DataResponse[ErrorRecord])
async def get_random_error(selector: ErrorSelector = Depends(get_selector)) -> DataResponse[ErrorRecord]:
    """Get a random error record."""
    return DataResponse[ErrorRecord](data=selector.select_random())


@router.get(
    "/error/{code}",
    response_model=DataResponse[ErrorRecord],
    responses={404: {"model": ErrorCodeNotFound}},
)
async def get_error_by_code(code: str, selector: ErrorSelector = Depends(get_selector)):
    """
    Get an error record for a specific stop-code.

    Unlike the page, the API does not fall back to a random record: unknown
    codes answer 404 with the list of valid codes.

    Args:
        code: Stop-code, case-insensitive, ``-`` or ``_`` separated
    """
    record = selector.select_by_code(code)
    if record is None:
        logger.info(f"Error code not found: {code}")
        not_found = ErrorCodeNotFound(available_codes=list(selector.catalog.stop_codes))
        return JSONResponse(status_code=404, content=not_found.model_dump(by_alias=True))

    return DataResponse[ErrorRecord](data=record)


@router.get("/codes", response_model=DataResponse[CodeList])
async def list_codes(selector: ErrorSelector = Depends(get_selector)) -> DataResponse[CodeList]:
    """List all available stop-codes."""
    codes = list(selector.catalog.stop_codes)
    return DataResponse[CodeList](data=CodeList(codes=codes, count=len(codes)))


@router.get("/styles", response_model=DataResponse[StyleList])
async def list_styles() -> DataResponse[StyleList]:
    """List all available page styles."""
    return DataResponse[StyleList](data=StyleList(styles=list(Style), default=DEFAULT_STYLE))
