"""
Source Contracts

The shapes this package READS from its upstream collaborators:
the article, the request context, the edition table and the switch registry.

READ-ONLY INPUTS:
=================
These types describe what the assembler consumes. They are not the
output contract and may evolve with the content platform; only
dotcomponents.dtos is versioned for external clients.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Mapping, Optional, Tuple
from types import MappingProxyType

from .base import ContractViolation, ErrorCode


CONTRIBUTOR_TAG_TYPE = "Contributor"


# =============================================================================
# EDITIONS
# =============================================================================

@dataclass(frozen=True)
class Edition:
    """A locale/region variant of the site."""
    id: str
    display_name: str
    timezone: str


UK = Edition(id="UK", display_name="UK edition", timezone="Europe/London")
US = Edition(id="US", display_name="US edition", timezone="America/New_York")
AU = Edition(id="AU", display_name="Australia edition", timezone="Australia/Sydney")
INTERNATIONAL = Edition(id="INT", display_name="International edition", timezone="Europe/London")

EDITIONS: Tuple[Edition, ...] = (UK, US, AU, INTERNATIONAL)
DEFAULT_EDITION = UK


def edition_by_id(edition_id: Optional[str]) -> Optional[Edition]:
    """Resolve an edition id (case-insensitive). Unknown ids are None."""
    if not edition_id:
        return None
    wanted = edition_id.upper()
    for edition in EDITIONS:
        if edition.id == wanted:
            return edition
    return None


# =============================================================================
# REQUEST CONTEXT
# =============================================================================

@dataclass(frozen=True)
class RequestContext:
    """
    Per-request HTTP context, already resolved.

    Edition resolution happens upstream; this carries the result.
    """
    path: str
    edition: Edition = DEFAULT_EDITION
    query: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))


# =============================================================================
# ARTICLE
# =============================================================================

@dataclass(frozen=True)
class ArticleTag:
    """One classification tag as held by the content platform."""
    id: str
    tag_type: str
    web_title: str
    twitter_handle: Optional[str] = None

    @property
    def is_contributor(self) -> bool:
        return self.tag_type == CONTRIBUTOR_TAG_TYPE


@dataclass(frozen=True)
class ArticleBlock:
    """
    One body unit. `elements` are rich elements in the platform's own
    vocabulary; conversion is delegated to the page-element converter.
    """
    body_html: str
    elements: Tuple[object, ...] = ()


@dataclass(frozen=True)
class ArticleBlocks:
    main: Optional[ArticleBlock] = None
    body: Tuple[ArticleBlock, ...] = ()


@dataclass(frozen=True)
class ArticleFields:
    main: str
    body: str
    standfirst: Optional[str] = None


@dataclass(frozen=True)
class ArticleTrail:
    headline: str
    web_publication_date: datetime
    byline: Optional[str] = None

    def __post_init__(self):
        if self.web_publication_date.tzinfo is None:
            raise ContractViolation(
                ErrorCode.NAIVE_TIMESTAMP,
                "web_publication_date must be timezone-aware",
                (("headline", self.headline),),
            )


@dataclass(frozen=True)
class ArticleMetadata:
    id: str
    web_title: str
    web_url: str
    section: Optional[str] = None
    pillar: Optional[str] = None
    is_hosted: bool = False


@dataclass(frozen=True)
class ArticleSubMetaLink:
    link: str
    text: str
    data_link_name: str


@dataclass(frozen=True)
class ArticleSubMetaLinks:
    section_labels: Tuple[ArticleSubMetaLink, ...] = ()
    keywords: Tuple[ArticleSubMetaLink, ...] = ()


@dataclass(frozen=True)
class ArticleContentFlags:
    should_hide_adverts: bool = False
    has_story_package: bool = False
    show_in_related: bool = False


@dataclass(frozen=True)
class Article:
    """
    The internal article as the assembler sees it.

    `javascript_config` is the page-level JavaScript configuration bag
    (authorIds, toneIds, contentId, ...). Values are strings or absent.
    """
    fields: ArticleFields
    trail: ArticleTrail
    metadata: ArticleMetadata
    tags: Tuple[ArticleTag, ...] = ()
    blocks: Optional[ArticleBlocks] = None
    flags: ArticleContentFlags = field(default_factory=ArticleContentFlags)
    submeta_links: ArticleSubMetaLinks = field(default_factory=ArticleSubMetaLinks)
    is_immersive: bool = False
    javascript_config: Mapping[str, object] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def contributors(self) -> Tuple[ArticleTag, ...]:
        return tuple(t for t in self.tags if t.is_contributor)


# =============================================================================
# FEATURE SWITCHES
# =============================================================================

@dataclass(frozen=True)
class Switch:
    """
    One feature switch as read from the registry at call time.

    `name` is the hyphenated external name, e.g. "feature-x".
    """
    name: str
    expose_client_side: bool
    is_switched_on: bool
