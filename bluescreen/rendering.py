"""
HTML rendering of failure pages.

Each style has its own template under ``bluescreen/templates``; all of them
extend ``base.html``. Autoescaping is on, so caller-supplied overrides are
rendered as text.
"""

from typing import Optional

from jinja2 import Environment, PackageLoader, select_autoescape

from bluescreen.models.error import ErrorRecord
from bluescreen.models.style import Style

env = Environment(
    loader=PackageLoader("bluescreen", "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def template_name(style: Style) -> str:
    return f"bsod-{style.value}.html"


def render_page(
    style: Style,
    record: ErrorRecord,
    qr_code: Optional[str] = None,
    lang: str = "en",
    app_name: str = "Blue Screen of App",
    app_url: str = "",
) -> str:
    """
    Render a failure page.

    Args:
        style: Page style
        record: Error record to show
        qr_code: Data URI of the scannable code; the image is left out when None
        lang: Value of the document's ``lang`` attribute
        app_name: Application name used in the page title
        app_url: Public URL of the application

    Returns:
        HTML document
    """
    template = env.get_template(template_name(style))
    return template.render(
        style=style.value,
        stop_code=record.stop_code,
        description=record.description,
        technical_detail=record.technical_detail,
        scan_prompt=record.scan_prompt,
        percentage=record.percentage,
        qr_code=qr_code,
        lang=lang or "en",
        app_name=app_name,
        app_url=app_url,
    )
