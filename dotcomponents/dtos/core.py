"""
Core DTO Types

Version constant for the external data model.

VERSIONING REQUIREMENT:
=======================
The rendering client receives an integer version with every document.
Any breaking change to field names, types or presence rules MUST
increment DATA_MODEL_VERSION.
"""

from __future__ import annotations
from typing import Final


# =============================================================================
# VERSION CONSTANTS
# =============================================================================

DATA_MODEL_VERSION: Final[int] = 2


def current_version() -> int:
    return DATA_MODEL_VERSION
