"""
Reader-Revenue Link Normalizer

Resolves the fixed placement x action matrix through the injected URL
builder: 3 placements x 3 actions = 9 URLs, always.
"""

from __future__ import annotations

from ..contracts.base import ContractViolation, ErrorCode
from ..contracts.collaborators import (
    Action, Placement, ReaderRevenueUrlBuilder, PLACEMENTS, ACTIONS,
)
from ..contracts.sources import RequestContext
from ..dtos.model import ReaderRevenueLink, ReaderRevenueLinks


def _resolve(
    url_builder: ReaderRevenueUrlBuilder,
    action: Action,
    placement: Placement,
    request: RequestContext,
) -> str:
    url = url_builder(action, placement, request)
    if not isinstance(url, str) or not url:
        raise ContractViolation(
            ErrorCode.INVALID_REVENUE_URL,
            "reader revenue URL builder must return a non-empty string",
            (("action", action.value), ("placement", placement.value)),
        )
    return url


def build_reader_revenue_link(
    url_builder: ReaderRevenueUrlBuilder,
    placement: Placement,
    request: RequestContext,
) -> ReaderRevenueLink:
    return ReaderRevenueLink(
        contribute=_resolve(url_builder, Action.CONTRIBUTE, placement, request),
        subscribe=_resolve(url_builder, Action.SUBSCRIBE, placement, request),
        support=_resolve(url_builder, Action.SUPPORT, placement, request),
    )


def build_reader_revenue_links(
    url_builder: ReaderRevenueUrlBuilder,
    request: RequestContext,
) -> ReaderRevenueLinks:
    """Builder exceptions propagate unchanged; there is no fallback URL."""
    links = {
        placement: build_reader_revenue_link(url_builder, placement, request)
        for placement in PLACEMENTS
    }
    return ReaderRevenueLinks(
        header=links[Placement.HEADER],
        footer=links[Placement.FOOTER],
        side_menu=links[Placement.SIDE_MENU],
    )


def reader_revenue_urls(links: ReaderRevenueLinks):
    """Flatten to (placement, action, url) triples in matrix order."""
    by_placement = {
        Placement.HEADER: links.header,
        Placement.FOOTER: links.footer,
        Placement.SIDE_MENU: links.side_menu,
    }
    for placement in PLACEMENTS:
        link = by_placement[placement]
        for action in ACTIONS:
            yield placement, action, getattr(link, action.value)
