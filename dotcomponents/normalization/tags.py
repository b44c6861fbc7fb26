"""
Tag Normalizer

Article tags -> output Tag records. Source order is preserved,
one output per input, no dedup and no filtering.
"""

from __future__ import annotations
from typing import Iterable, Mapping, Tuple

from ..contracts.base import lookup_string
from ..contracts.sources import ArticleTag
from ..dtos.model import Tag, TagProperties, Tags


# Page-config keys, in output field order
AUTHOR_IDS_KEY = "authorIds"
TONE_IDS_KEY = "toneIds"
KEYWORD_IDS_KEY = "keywordIds"
COMMISSIONING_DESKS_KEY = "commissioningDesks"


def normalize_tag(tag: ArticleTag) -> Tag:
    return Tag(
        properties=TagProperties(
            id=tag.id,
            tag_type=tag.tag_type,
            web_title=tag.web_title,
            twitter_handle=tag.twitter_handle,
        )
    )


def normalize_tags(tags: Iterable[ArticleTag]) -> Tuple[Tag, ...]:
    return tuple(normalize_tag(t) for t in tags)


def build_tags(tags: Iterable[ArticleTag], page_config: Mapping[str, object]) -> Tags:
    """
    Combine the full tag list with the passthrough id strings.

    Each id string is read under its own key; a missing key is None.
    """
    return Tags(
        author_ids=lookup_string(page_config, AUTHOR_IDS_KEY).or_none(),
        tone_ids=lookup_string(page_config, TONE_IDS_KEY).or_none(),
        keyword_ids=lookup_string(page_config, KEYWORD_IDS_KEY).or_none(),
        commissioning_desks=lookup_string(page_config, COMMISSIONING_DESKS_KEY).or_none(),
        all=normalize_tags(tags),
    )


def author_names(contributors: Iterable[ArticleTag]) -> str:
    """Comma-joined contributor names in tag order ("" when there are none)."""
    return ",".join(c.web_title for c in contributors)
