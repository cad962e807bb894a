"""
Failure page endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from bluescreen.api.dependencies import (
    get_analytics,
    get_code_generator,
    get_selector,
    get_settings,
)
from bluescreen.config import Settings
from bluescreen.models.error import Override
from bluescreen.models.style import Style, resolve_style
from bluescreen.rendering import render_page
from bluescreen.services.analytics import AnalyticsAggregator
from bluescreen.services.overrides import apply_overrides
from bluescreen.services.scan_code import ScanCodeGenerator
from bluescreen.services.selector import ErrorSelector
from bluescreen.utils.logging import get_logger, log_error_with_context

logger = get_logger(__name__)

router = APIRouter(tags=["pages"])

RENDER_FAILURE_MESSAGE = "An error occurred while generating your blue screen. How ironic."


@router.get("/", response_class=HTMLResponse)
async def show_bsod(
    request: Request,
    style: Optional[str] = None,
    code: Optional[str] = None,
    message: Optional[str] = None,
    technical: Optional[str] = None,
    percentage: Optional[str] = None,
    qr: Optional[str] = None,
    lang: str = "en",
    settings: Settings = Depends(get_settings),
    selector: ErrorSelector = Depends(get_selector),
    code_generator: ScanCodeGenerator = Depends(get_code_generator),
    analytics: AnalyticsAggregator = Depends(get_analytics),
):
    """
    Render a failure page.

    Query parameters:
        style: win10, win11, win7 or winxp (default: win10)
        code: Stop-code to show; unknown codes fall back to a random one
        message: Custom description
        technical: Custom technical detail
        percentage: Completion percentage, clamped to 0-100
        qr: URL for the scannable code (default: configured URL)
        lang: Document language attribute
    """
    request_logger = logger.with_context(request_id=getattr(request.state, "request_id", None))
    try:
        page_style = resolve_style(style)
        override = Override(description=message, technical_detail=technical, percentage=percentage)

        record = apply_overrides(selector.select(code), override)
        qr_code = code_generator.encode(qr or settings.default_qr_url)

        analytics.track_visit(page_style.value, record.stop_code, override.is_custom)

        html = render_page(
            page_style,
            record,
            qr_code=qr_code,
            lang=lang,
            app_name=settings.app_name,
            app_url=settings.app_url,
        )
        return HTMLResponse(content=html)

    except Exception as e:
        log_error_with_context(request_logger, "Error rendering BSOD", e, requested_style=style)
        return PlainTextResponse(RENDER_FAILURE_MESSAGE, status_code=500)


@router.get("/random")
async def random_style(selector: ErrorSelector = Depends(get_selector)) -> RedirectResponse:
    """Redirect to a page with a randomly chosen style."""
    chosen = selector.choice(list(Style))
    return RedirectResponse(url=f"/?style={chosen.value}", status_code=302)
