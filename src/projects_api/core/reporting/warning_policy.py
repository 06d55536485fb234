"""Promotion of recoverable warnings to exceptions.

Warnings in ``PROMOTED_WARNINGS`` are turned into exceptions at the point they
are issued, so they travel up to the fault boundary with their full traceback.
Compile- and import-time categories (``SyntaxWarning``, ``ImportWarning``) are
never promoted: they surface before a request is running. Deprecation
categories are not reported at all.
"""

import warnings
from typing import Final

PROMOTED_WARNINGS: Final[tuple[type[Warning], ...]] = (
    UserWarning,
    RuntimeWarning,
    BytesWarning,
    UnicodeWarning,
)


def install_warning_policy() -> None:
    """Install "error" filters for the promoted categories.

    Filters are process-wide. Call inside ``warnings.catch_warnings()`` to scope
    them (tests do this).
    """
    for category in PROMOTED_WARNINGS:
        warnings.filterwarnings("error", category=category)
