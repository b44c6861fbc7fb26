"""
Collaborator Contracts

Callables the assembler invokes but does not implement: navigation,
reader-revenue URL building, page-element conversion and date display.

Collaborators are treated as synchronous pure functions of their
arguments. Whatever they raise propagates unchanged.
"""

from __future__ import annotations
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Protocol, Tuple

from .sources import RequestContext


# =============================================================================
# READER REVENUE MATRIX (Closed world)
# =============================================================================

class Placement(Enum):
    """UI location that gets its own monetization link set."""
    HEADER = "header"
    FOOTER = "footer"
    SIDE_MENU = "side-menu"


class Action(Enum):
    """Monetization intent."""
    CONTRIBUTE = "contribute"
    SUBSCRIBE = "subscribe"
    SUPPORT = "support"


# Fixed and exhaustive. Changing either tuple is a breaking change.
PLACEMENTS: Tuple[Placement, ...] = (Placement.HEADER, Placement.FOOTER, Placement.SIDE_MENU)
ACTIONS: Tuple[Action, ...] = (Action.CONTRIBUTE, Action.SUBSCRIBE, Action.SUPPORT)


# =============================================================================
# COLLABORATOR PROTOCOLS
# =============================================================================

class NavigationBuilder(Protocol):
    def __call__(self, request: RequestContext) -> Any:
        """Return a JSON-ready navigation menu for the request's edition."""
        ...


class ReaderRevenueUrlBuilder(Protocol):
    def __call__(self, action: Action, placement: Placement, request: RequestContext) -> str:
        ...


class PageElementConverter(Protocol):
    def __call__(self, element: object) -> Mapping[str, Any]:
        """Convert one platform rich element into a typed page element."""
        ...


class DateFormatter(Protocol):
    def __call__(self, instant: datetime, request: RequestContext) -> str:
        ...
