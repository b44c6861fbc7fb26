"""
Dotcomponents Data Model

Read-only representation of one article page for the rendering client.

DECOUPLING:
===========
These types are owned by the external contract, not by the content
platform. Internal refactors change the mapper, never these shapes.

THREE TIERS:
============
- DCContent: depends on the page being shown
- DCSite:    required for the site, independent of the page
- DCConfig:  infrastructure and application settings
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from ..contracts.base import ContractViolation, ErrorCode
from .core import DATA_MODEL_VERSION


PageElement = Mapping[str, Any]


# =============================================================================
# TAGS
# =============================================================================

@dataclass(frozen=True)
class TagProperties:
    id: str
    tag_type: str
    web_title: str
    twitter_handle: Optional[str]

    def __post_init__(self):
        if not self.id or not self.tag_type:
            raise ContractViolation(
                ErrorCode.MISSING_REQUIRED_FIELD,
                "tag id and type are required",
                (("id", self.id or ""), ("tag_type", self.tag_type or "")),
            )


@dataclass(frozen=True)
class Tag:
    properties: TagProperties


@dataclass(frozen=True)
class Tags:
    """
    Tag data for the page.

    The four id strings are comma-joined passthrough values from the page
    configuration. They are NOT derived from `all`.
    """
    author_ids: Optional[str]
    tone_ids: Optional[str]
    keyword_ids: Optional[str]
    commissioning_desks: Optional[str]
    all: Tuple[Tag, ...]


# =============================================================================
# BLOCKS
# =============================================================================

@dataclass(frozen=True)
class Block:
    body_html: str
    elements: Tuple[PageElement, ...]


@dataclass(frozen=True)
class Blocks:
    main: Optional[Block]
    body: Tuple[Block, ...]


# =============================================================================
# READER REVENUE
# =============================================================================

@dataclass(frozen=True)
class ReaderRevenueLink:
    contribute: str
    subscribe: str
    support: str


@dataclass(frozen=True)
class ReaderRevenueLinks:
    header: ReaderRevenueLink
    footer: ReaderRevenueLink
    side_menu: ReaderRevenueLink


# =============================================================================
# CONTENT
# =============================================================================

@dataclass(frozen=True)
class Meta:
    is_immersive: bool
    is_hosted: bool
    should_hide_ads: bool
    has_story_package: bool
    has_related: bool


@dataclass(frozen=True)
class SubMetaLink:
    link: str
    text: str
    data_link_name: str


@dataclass(frozen=True)
class SubMetaLinks:
    section_labels: Tuple[SubMetaLink, ...]
    keywords: Tuple[SubMetaLink, ...]


@dataclass(frozen=True)
class DCContent:
    """
    PAGE LEVEL data.

    web_publication_date (epoch millis) and web_publication_date_display
    are always derived from the same instant.

    byline is None when the article carries none. It is rendered as null,
    never as an empty string, so a missing byline stays distinguishable
    from an empty one.
    """
    standfirst: Optional[str]
    main: str
    body: str
    blocks: Blocks
    tags: Tags
    author: str
    page_id: str
    pillar: Optional[str]
    web_publication_date: int
    web_publication_date_display: str
    section: Optional[str]
    headline: str
    web_title: str
    byline: Optional[str]
    content_id: Optional[str]
    series_id: Optional[str]
    edition_id: str
    edition: str
    content_type: Optional[str]
    sub_meta_links: SubMetaLinks
    web_url: str
    meta: Meta


# =============================================================================
# SITE & CONFIG
# =============================================================================

@dataclass(frozen=True)
class DCSite:
    """SITE LEVEL data: the same for every page within one edition."""
    nav: Any
    reader_revenue_links: ReaderRevenueLinks


@dataclass(frozen=True)
class DCConfig:
    """APPLICATION LEVEL config. `switches` holds client-exposed switches only."""
    ajax_url: str
    guardian_base_url: str
    sentry_host: Optional[str]
    sentry_public_api_key: Optional[str]
    switches: Mapping[str, bool]
    beacon_url: str


# =============================================================================
# ROOT
# =============================================================================

@dataclass(frozen=True)
class DotcomponentsDataModel:
    content: DCContent
    site: DCSite
    config: DCConfig
    version: int = DATA_MODEL_VERSION

    def __post_init__(self):
        """Validate model version."""
        if self.version != DATA_MODEL_VERSION:
            raise ContractViolation(
                ErrorCode.UNKNOWN_MODEL_VERSION,
                f"Unknown data model version: {self.version}. "
                f"Expected: {DATA_MODEL_VERSION}",
            )
