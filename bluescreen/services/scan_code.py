"""
Scannable code generation for failure pages.

Encodes a URL as a QR code and returns it as a self-contained
``data:image/svg+xml`` URI that can be dropped into an ``<img>`` tag.
"""

import base64
from io import BytesIO
from typing import Optional

import qrcode
from qrcode.constants import ERROR_CORRECT_M
from qrcode.image.svg import SvgPathImage

from bluescreen.utils.logging import get_logger

logger = get_logger(__name__)

DATA_URI_PREFIX = "data:image/svg+xml;base64,"


class ScanCodeGenerator:
    """
    Turns target URLs into embeddable QR code images.

    Encoding failures (oversized input and the like) are logged and reported
    as a missing payload; callers omit the image in that case.
    """

    def __init__(self, enabled: bool = True, box_size: int = 10, border: int = 1):
        """
        Initialize generator.

        Args:
            enabled: When False, ``encode`` always returns None
            box_size: Size of one module in the SVG image
            border: Quiet zone width in modules
        """
        self.enabled = enabled
        self.box_size = box_size
        self.border = border

    def build(self, target_url: str) -> qrcode.QRCode:
        """
        Build the QR code for ``target_url``, fitting the smallest version.

        Raises:
            qrcode.exceptions.DataOverflowError: If the data does not fit any version
        """
        code = qrcode.QRCode(
            version=None,
            error_correction=ERROR_CORRECT_M,
            box_size=self.box_size,
            border=self.border,
            image_factory=SvgPathImage,
        )
        code.add_data(target_url)
        code.make(fit=True)
        return code

    def encode(self, target_url: str) -> Optional[str]:
        """
        Encode ``target_url`` as a data URI.

        The string is not validated as a URL; whatever is given is encoded.

        Args:
            target_url: Text the scanned code should yield

        Returns:
            ``data:`` URI of an SVG image, or None if disabled or encoding failed
        """
        if not self.enabled:
            return None

        try:
            image = self.build(target_url).make_image()
            buffer = BytesIO()
            image.save(buffer)
        except Exception as e:
            logger.warning(
                f"QR code generation failed: {e}",
                extra={"target_length": len(target_url)},
            )
            return None

        return DATA_URI_PREFIX + base64.b64encode(buffer.getvalue()).decode("ascii")
