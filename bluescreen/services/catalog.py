"""
Static catalog of stop-codes, descriptions and flavor text.

The catalog is immutable reference data, built once at import time and shared
by every request.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Sequence, Tuple


class CatalogError(ValueError):
    """Raised when catalog data is inconsistent."""
    pass


def normalize_code(raw: str) -> str:
    """Canonical form of a stop-code: upper case with underscores."""
    return raw.upper().replace("-", "_")


@dataclass(frozen=True)
class ErrorCatalog:
    """
    Immutable set of stop-codes and the text pools records are drawn from.

    Attributes:
        stop_codes: Ordered, unique stop-code identifiers
        descriptions: Stop-code to description; codes without an entry use
            the description of ``fallback_code``
        technical_details: Pool of technical detail lines
        scan_prompts: Pool of prompts shown next to the scannable code
        fallback_code: Stop-code whose description is the default
    """

    stop_codes: Tuple[str, ...]
    descriptions: Mapping[str, str]
    technical_details: Tuple[str, ...]
    scan_prompts: Tuple[str, ...]
    fallback_code: str = "CRITICAL_PROCESS_DIED"
    _index: Mapping[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        codes = tuple(self.stop_codes)
        if not codes:
            raise CatalogError("Catalog must define at least one stop-code")
        if len(set(codes)) != len(codes):
            raise CatalogError("Catalog stop-codes must be unique")
        if not self.technical_details:
            raise CatalogError("Catalog needs at least one technical detail")
        if not self.scan_prompts:
            raise CatalogError("Catalog needs at least one scan prompt")
        if not self.descriptions.get(self.fallback_code):
            raise CatalogError(
                f"Fallback description for {self.fallback_code} is missing or empty"
            )

        index = {normalize_code(code): code for code in codes}
        if len(index) != len(codes):
            raise CatalogError("Catalog stop-codes collide after normalization")

        object.__setattr__(self, "stop_codes", codes)
        object.__setattr__(self, "descriptions", MappingProxyType(dict(self.descriptions)))
        object.__setattr__(self, "technical_details", tuple(self.technical_details))
        object.__setattr__(self, "scan_prompts", tuple(self.scan_prompts))
        object.__setattr__(self, "_index", MappingProxyType(index))

    def __len__(self) -> int:
        return len(self.stop_codes)

    def __iter__(self) -> Iterator[str]:
        return iter(self.stop_codes)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.lookup(code) is not None

    def lookup(self, raw: str) -> Optional[str]:
        """
        Resolve a caller-supplied identifier to a catalog stop-code.

        Matching ignores case and treats ``-`` and ``_`` as the same character.

        Args:
            raw: Identifier as supplied by the caller

        Returns:
            The catalog's stop-code, or None if nothing matches
        """
        return self._index.get(normalize_code(raw))

    def describe(self, stop_code: str) -> str:
        """Description for a stop-code, or the fallback description."""
        return self.descriptions.get(stop_code) or self.descriptions[self.fallback_code]


STOP_CODES: Sequence[str] = (
    "CRITICAL_PROCESS_DIED",
    "SYSTEM_SERVICE_EXCEPTION",
    "PAGE_FAULT_IN_NONPAGED_AREA",
    "IRQL_NOT_LESS_OR_EQUAL",
    "DPC_WATCHDOG_VIOLATION",
    "KERNEL_SECURITY_CHECK_FAILURE",
    "UNEXPECTED_STORE_EXCEPTION",
    "SYSTEM_THREAD_EXCEPTION_NOT_HANDLED",
    # Humorous ones
    "EXCESSIVE_MEME_EXPOSURE",
    "COFFEE_NOT_FOUND",
    "KEYBOARD_NOT_COFFEE_PROOF",
    "USER_PRESSED_ANY_KEY",
    "MONDAY_MORNING_EXCEPTION",
    "INSUFFICIENT_RAM_DOWNLOADED",
    "MOTIVATION_NOT_FOUND",
    "STACKOVERFLOW_COPY_PASTE_ERROR",
    "GIT_COMMIT_WITHOUT_MESSAGE",
    "PRODUCTION_DEPLOYMENT_ON_FRIDAY",
    "NPM_INSTALL_TIMEOUT",
    "DEPENDENCY_HELL_DETECTED",
    "MERGE_CONFLICT_ANXIETY",
    "SEMICOLON_MISSING",
    "UNDEFINED_IS_NOT_A_FUNCTION",
    "CANNOT_READ_PROPERTY_OF_NULL",
    "CIRCULAR_DEPENDENCY_LOOP",
    "REGEX_PARSER_GAVE_UP",
)

DESCRIPTIONS: Mapping[str, str] = {
    "CRITICAL_PROCESS_DIED": (
        "Your PC ran into a problem and needs to restart. We're just collecting "
        "some error info, and then we'll restart for you."
    ),
    "EXCESSIVE_MEME_EXPOSURE": (
        "Your system has been exposed to an unsafe level of dank memes. "
        "Please close all meme applications and restart."
    ),
    "COFFEE_NOT_FOUND": (
        "Critical system resource COFFEE.SYS not found. "
        "Please insert coffee and press any key to continue."
    ),
    "KEYBOARD_NOT_COFFEE_PROOF": (
        "Liquid detected in keyboard driver. This is why we can't have nice things."
    ),
    "USER_PRESSED_ANY_KEY": (
        "Fatal error: User actually pressed the ANY key. "
        "System does not know how to handle this."
    ),
    "MONDAY_MORNING_EXCEPTION": (
        "System attempted to function on Monday morning without sufficient caffeine. "
        "This is not supported."
    ),
    "INSUFFICIENT_RAM_DOWNLOADED": (
        "You need to download more RAM to continue. "
        "Visit downloadmoreram.com for instructions."
    ),
    "MOTIVATION_NOT_FOUND": (
        "The system could not locate MOTIVATION.DLL. Try again after the weekend."
    ),
    "STACKOVERFLOW_COPY_PASTE_ERROR": (
        "Code copied from StackOverflow contained malicious solutions. "
        "Surprising absolutely no one."
    ),
    "GIT_COMMIT_WITHOUT_MESSAGE": (
        'Attempted to commit changes with message "fix stuff". This is a federal crime.'
    ),
    "PRODUCTION_DEPLOYMENT_ON_FRIDAY": (
        "CRITICAL ERROR: Someone tried to deploy to production on Friday at 4:45 PM."
    ),
    "NPM_INSTALL_TIMEOUT": (
        "npm install has been running for 3 hours. "
        "Heat death of universe expected before completion."
    ),
    "DEPENDENCY_HELL_DETECTED": (
        "Your node_modules folder achieved sentience and is demanding rights."
    ),
    "MERGE_CONFLICT_ANXIETY": (
        "Unresolved merge conflicts detected. Developer anxiety levels critical."
    ),
    "SEMICOLON_MISSING": (
        "JavaScript executed without semicolons. Code quality standards violated."
    ),
    "UNDEFINED_IS_NOT_A_FUNCTION": (
        "TypeError: undefined is not a function. But then again, what even is?"
    ),
    "CANNOT_READ_PROPERTY_OF_NULL": (
        "Cannot read property of null. Have you tried asking it nicely?"
    ),
    "CIRCULAR_DEPENDENCY_LOOP": (
        "Circular dependency detected. Like your thoughts at 3 AM."
    ),
    "REGEX_PARSER_GAVE_UP": (
        "Regular expression too complex. "
        "Even the parser doesn't know what you're trying to match."
    ),
}

TECHNICAL_DETAILS: Sequence[str] = (
    "Failed driver: SARCASM.SYS",
    "Failed driver: PROCRASTINATION.DLL",
    "Failed driver: MONDAY.SYS",
    "Failed driver: CAFFEINE.DLL",
    "Failed driver: COMMON_SENSE.SYS",
    "Memory dump: 0xC0FFEE",
    "Memory dump: 0xDEADBEEF",
    "Memory dump: 0xBADC0DE",
    "Memory dump: 0x8BADF00D",
    "Error code: 418 (I'm a teapot)",
    "Error code: 404 (Motivation not found)",
    "Error code: 500 (Internal existential crisis)",
)

SCAN_PROMPTS: Sequence[str] = (
    "Scan for totally legitimate Windows support",
    "Scan for cat pictures",
    "Scan for more information (it won't help)",
    "Scan to restart your computer (just kidding)",
    "Scan for emotional support",
    "Scan to file a complaint",
    "Scan for the meaning of life",
)


DEFAULT_CATALOG = ErrorCatalog(
    stop_codes=tuple(STOP_CODES),
    descriptions=DESCRIPTIONS,
    technical_details=tuple(TECHNICAL_DETAILS),
    scan_prompts=tuple(SCAN_PROMPTS),
)
