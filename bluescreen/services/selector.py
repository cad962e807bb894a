"""
Error selection: random records, lookups by stop-code, and page fallback.
"""

import random
from typing import Optional

from bluescreen.models.error import ErrorRecord
from bluescreen.services.catalog import DEFAULT_CATALOG, ErrorCatalog
from bluescreen.utils.logging import get_logger

logger = get_logger(__name__)


class ErrorSelector:
    """
    Draws error records from a catalog.

    The random source is injectable; anything exposing ``choice`` and
    ``randint`` with the semantics of ``random.Random`` works, which lets
    tests pin the draws.
    """

    def __init__(self, catalog: ErrorCatalog = DEFAULT_CATALOG, rng: Optional[random.Random] = None):
        """
        Initialize selector.

        Args:
            catalog: Catalog to draw from
            rng: Random source. If None, a fresh ``random.Random`` is used.
        """
        self.catalog = catalog
        self._rng = rng if rng is not None else random.Random()

    def _build(self, stop_code: str) -> ErrorRecord:
        return ErrorRecord(
            stop_code=stop_code,
            description=self.catalog.describe(stop_code),
            technical_detail=self._rng.choice(self.catalog.technical_details),
            scan_prompt=self._rng.choice(self.catalog.scan_prompts),
            percentage=self._rng.randint(0, 100),
        )

    def select_random(self) -> ErrorRecord:
        """Draw a stop-code, detail, scan prompt and percentage uniformly at random."""
        return self._build(self._rng.choice(self.catalog.stop_codes))

    def select_by_code(self, raw: str) -> Optional[ErrorRecord]:
        """
        Build a record for a specific stop-code.

        Only the stop-code (and so the description) is fixed; the technical
        detail, scan prompt and percentage are still drawn at random.

        Args:
            raw: Stop-code in any case, with ``-`` or ``_`` separators

        Returns:
            The record, or None if the code is not in the catalog
        """
        stop_code = self.catalog.lookup(raw)
        if stop_code is None:
            return None
        return self._build(stop_code)

    def select(self, raw: Optional[str] = None) -> ErrorRecord:
        """
        Select a record for a page, never failing on unknown codes.

        Args:
            raw: Optional stop-code; unknown codes fall back to a random record

        Returns:
            Error record
        """
        if raw:
            record = self.select_by_code(raw)
            if record is not None:
                return record
            logger.info(
                "Unknown stop-code requested, using a random one",
                extra={"requested_code": raw},
            )
        return self.select_random()

    def choice(self, options):
        """Pick one of ``options`` with the selector's random source."""
        return self._rng.choice(options)
