"""
Data Model Serialization

One encoding function per entity, each driven by an explicit field table
(JSON key, attribute, encoder, absence rule). The wire contract is visible
here and nowhere else.

RULES:
1. Absent optional values are emitted as null unless the field is marked
   omit-if-absent.
2. Lists are always lists, never null.
3. Key order follows the field tables; the switches map is sorted by key.
4. Opaque collaborator values (navigation, page elements) are converted to
   plain JSON types: enums use .value, dates are ISO 8601, sets are sorted,
   map keys must be strings and are emitted sorted.
"""

from __future__ import annotations
import json
from dataclasses import asdict, dataclass, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Tuple

from .dtos import (
    Block, Blocks, DCConfig, DCContent, DCSite, DotcomponentsDataModel, Meta,
    ReaderRevenueLink, ReaderRevenueLinks, SubMetaLink, SubMetaLinks,
    Tag, TagProperties, Tags,
)


Encoder = Callable[[Any], Any]


def _identity(value: Any) -> Any:
    return value


@dataclass(frozen=True)
class FieldSpec:
    key: str
    attribute: str
    encode: Encoder = _identity
    omit_if_absent: bool = False


def encode_fields(table: Tuple[FieldSpec, ...], obj: Any) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for spec in table:
        value = getattr(obj, spec.attribute)
        if value is None:
            if not spec.omit_if_absent:
                out[spec.key] = None
            continue
        out[spec.key] = spec.encode(value)
    return out


def _list_of(encode: Encoder) -> Encoder:
    return lambda values: [encode(v) for v in values]


def to_plain(value: Any) -> Any:
    """Convert an opaque collaborator value into plain JSON types."""
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, Enum):
        return to_plain(value.value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Mapping):
        for key in value:
            if not isinstance(key, str):
                raise TypeError(f"Map key {key!r} of type {type(key).__name__} is not a string")
        return {key: to_plain(value[key]) for key in sorted(value)}
    if isinstance(value, (set, frozenset)):
        return sorted(to_plain(v) for v in value)
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    if hasattr(value, "to_dict"):
        return to_plain(value.to_dict())
    if is_dataclass(value) and not isinstance(value, type):
        return to_plain(asdict(value))
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


# =============================================================================
# FIELD TABLES (bottom-up)
# =============================================================================

TAG_PROPERTIES_FIELDS = (
    FieldSpec("id", "id"),
    FieldSpec("tagType", "tag_type"),
    FieldSpec("webTitle", "web_title"),
    FieldSpec("twitterHandle", "twitter_handle", omit_if_absent=True),
)


def encode_tag_properties(properties: TagProperties) -> Dict[str, Any]:
    return encode_fields(TAG_PROPERTIES_FIELDS, properties)


TAG_FIELDS = (
    FieldSpec("properties", "properties", encode_tag_properties),
)


def encode_tag(tag: Tag) -> Dict[str, Any]:
    return encode_fields(TAG_FIELDS, tag)


TAGS_FIELDS = (
    FieldSpec("authorIds", "author_ids"),
    FieldSpec("toneIds", "tone_ids"),
    FieldSpec("keywordIds", "keyword_ids"),
    FieldSpec("commissioningDesks", "commissioning_desks"),
    FieldSpec("all", "all", _list_of(encode_tag)),
)


def encode_tags(tags: Tags) -> Dict[str, Any]:
    return encode_fields(TAGS_FIELDS, tags)


BLOCK_FIELDS = (
    FieldSpec("bodyHtml", "body_html"),
    FieldSpec("elements", "elements", _list_of(to_plain)),
)


def encode_block(block: Block) -> Dict[str, Any]:
    return encode_fields(BLOCK_FIELDS, block)


BLOCKS_FIELDS = (
    FieldSpec("main", "main", encode_block),
    FieldSpec("body", "body", _list_of(encode_block)),
)


def encode_blocks(blocks: Blocks) -> Dict[str, Any]:
    return encode_fields(BLOCKS_FIELDS, blocks)


READER_REVENUE_LINK_FIELDS = (
    FieldSpec("contribute", "contribute"),
    FieldSpec("subscribe", "subscribe"),
    FieldSpec("support", "support"),
)


def encode_reader_revenue_link(link: ReaderRevenueLink) -> Dict[str, Any]:
    return encode_fields(READER_REVENUE_LINK_FIELDS, link)


READER_REVENUE_LINKS_FIELDS = (
    FieldSpec("header", "header", encode_reader_revenue_link),
    FieldSpec("footer", "footer", encode_reader_revenue_link),
    FieldSpec("sideMenu", "side_menu", encode_reader_revenue_link),
)


def encode_reader_revenue_links(links: ReaderRevenueLinks) -> Dict[str, Any]:
    return encode_fields(READER_REVENUE_LINKS_FIELDS, links)


META_FIELDS = (
    FieldSpec("isImmersive", "is_immersive"),
    FieldSpec("isHosted", "is_hosted"),
    FieldSpec("shouldHideAds", "should_hide_ads"),
    FieldSpec("hasStoryPackage", "has_story_package"),
    FieldSpec("hasRelated", "has_related"),
)


def encode_meta(meta: Meta) -> Dict[str, Any]:
    return encode_fields(META_FIELDS, meta)


SUB_META_LINK_FIELDS = (
    FieldSpec("link", "link"),
    FieldSpec("text", "text"),
    FieldSpec("dataLinkName", "data_link_name"),
)


def encode_sub_meta_link(link: SubMetaLink) -> Dict[str, Any]:
    return encode_fields(SUB_META_LINK_FIELDS, link)


SUB_META_LINKS_FIELDS = (
    FieldSpec("sectionLabels", "section_labels", _list_of(encode_sub_meta_link)),
    FieldSpec("keywords", "keywords", _list_of(encode_sub_meta_link)),
)


def encode_sub_meta_links(links: SubMetaLinks) -> Dict[str, Any]:
    return encode_fields(SUB_META_LINKS_FIELDS, links)


CONTENT_FIELDS = (
    FieldSpec("standfirst", "standfirst"),
    FieldSpec("main", "main"),
    FieldSpec("body", "body"),
    FieldSpec("blocks", "blocks", encode_blocks),
    FieldSpec("tags", "tags", encode_tags),
    FieldSpec("author", "author"),
    FieldSpec("pageId", "page_id"),
    FieldSpec("pillar", "pillar"),
    FieldSpec("webPublicationDate", "web_publication_date"),
    FieldSpec("webPublicationDateDisplay", "web_publication_date_display"),
    FieldSpec("section", "section"),
    FieldSpec("headline", "headline"),
    FieldSpec("webTitle", "web_title"),
    FieldSpec("byline", "byline"),
    FieldSpec("contentId", "content_id"),
    FieldSpec("seriesId", "series_id"),
    FieldSpec("editionId", "edition_id"),
    FieldSpec("edition", "edition"),
    FieldSpec("contentType", "content_type"),
    FieldSpec("subMetaLinks", "sub_meta_links", encode_sub_meta_links),
    FieldSpec("webURL", "web_url"),
    FieldSpec("meta", "meta", encode_meta),
)


def encode_content(content: DCContent) -> Dict[str, Any]:
    return encode_fields(CONTENT_FIELDS, content)


SITE_FIELDS = (
    FieldSpec("nav", "nav", to_plain),
    FieldSpec("readerRevenueLinks", "reader_revenue_links", encode_reader_revenue_links),
)


def encode_site(site: DCSite) -> Dict[str, Any]:
    return encode_fields(SITE_FIELDS, site)


def _encode_switches(switches: Mapping[str, bool]) -> Dict[str, bool]:
    return {key: bool(switches[key]) for key in sorted(switches)}


CONFIG_FIELDS = (
    FieldSpec("ajaxUrl", "ajax_url"),
    FieldSpec("guardianBaseURL", "guardian_base_url"),
    FieldSpec("sentryHost", "sentry_host"),
    FieldSpec("sentryPublicApiKey", "sentry_public_api_key"),
    FieldSpec("switches", "switches", _encode_switches),
    FieldSpec("beaconUrl", "beacon_url"),
)


def encode_config(config: DCConfig) -> Dict[str, Any]:
    return encode_fields(CONFIG_FIELDS, config)


MODEL_FIELDS = (
    FieldSpec("content", "content", encode_content),
    FieldSpec("site", "site", encode_site),
    FieldSpec("config", "config", encode_config),
    FieldSpec("version", "version"),
)


# =============================================================================
# ENTRY POINTS
# =============================================================================

def to_dict(model: DotcomponentsDataModel) -> Dict[str, Any]:
    return encode_fields(MODEL_FIELDS, model)


def to_json(model: DotcomponentsDataModel) -> str:
    """Canonical compact document. Byte-stable for identical models."""
    return json.dumps(
        to_dict(model),
        ensure_ascii=False,
        allow_nan=False,
        separators=(",", ":"),
    )


def to_json_string(model: DotcomponentsDataModel) -> str:
    """Indented rendering for debugging. Same content as to_json."""
    return json.dumps(to_dict(model), ensure_ascii=False, allow_nan=False, indent=2)
