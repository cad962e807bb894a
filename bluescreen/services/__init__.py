"""Business logic services package."""

from bluescreen.services.analytics import (
    AnalyticsAggregator,
    AnalyticsState,
)
from bluescreen.services.catalog import (
    DEFAULT_CATALOG,
    CatalogError,
    ErrorCatalog,
    normalize_code,
)
from bluescreen.services.overrides import (
    apply_overrides,
    coerce_percentage,
)
from bluescreen.services.scan_code import ScanCodeGenerator
from bluescreen.services.selector import ErrorSelector

__all__ = [
    'AnalyticsAggregator',
    'AnalyticsState',
    'DEFAULT_CATALOG',
    'CatalogError',
    'ErrorCatalog',
    'normalize_code',
    'apply_overrides',
    'coerce_percentage',
    'ScanCodeGenerator',
    'ErrorSelector',
]
