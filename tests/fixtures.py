"""
Test Fixtures

Explicit, deterministic articles, switches and collaborators.
No random generation here; property tests build their own inputs.
"""

from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from dotcomponents.config import SiteConfiguration
from dotcomponents.contracts import (
    Action,
    Article,
    ArticleBlock,
    ArticleBlocks,
    ArticleContentFlags,
    ArticleFields,
    ArticleMetadata,
    ArticleSubMetaLink,
    ArticleSubMetaLinks,
    ArticleTag,
    ArticleTrail,
    Placement,
    RequestContext,
    Switch,
)
from dotcomponents.contracts.sources import UK, US
from dotcomponents.mapper import Collaborators, DataModelAssembler


# =============================================================================
# FIXED TIMESTAMPS (deterministic)
# =============================================================================

PUBLISHED = datetime(2018, 10, 16, 13, 30, 0, tzinfo=timezone.utc)
PUBLISHED_MILLIS = 1539696600000
PUBLISHED_DISPLAY_UK = "Tue 16 Oct 2018 14.30 BST"
PUBLISHED_DISPLAY_US = "Tue 16 Oct 2018 09.30 EDT"


# =============================================================================
# COLLABORATORS
# =============================================================================

def fake_reader_revenue_url(action: Action, placement: Placement, request: RequestContext) -> str:
    return (
        f"https://support.example.com/{action.value}"
        f"?INTCMP={placement.value}_{request.edition.id}"
    )


def fake_navigation(request: RequestContext) -> Dict[str, Any]:
    return {
        "edition": request.edition.id,
        "pillars": [{"title": "News", "url": "/"}],
    }


def fake_page_element(element: object) -> Mapping[str, Any]:
    kind, html = element
    return {"_type": f"model.dotcomrendering.pageElements.{kind}", "html": html}


class RecordingUrlBuilder:
    """URL builder that records every call it receives."""

    def __init__(self):
        self.calls: List[Tuple[Action, Placement, str]] = []

    def __call__(self, action: Action, placement: Placement, request: RequestContext) -> str:
        self.calls.append((action, placement, request.path))
        return fake_reader_revenue_url(action, placement, request)


def make_collaborators(**overrides) -> Collaborators:
    values = dict(
        navigation=fake_navigation,
        reader_revenue_url=fake_reader_revenue_url,
        page_element=fake_page_element,
    )
    values.update(overrides)
    return Collaborators(**values)


# =============================================================================
# CONFIGURATION & SWITCHES
# =============================================================================

SITE_CONFIGURATION = SiteConfiguration(
    ajax_url="https://api.example.com",
    site_host="https://www.example.com",
    beacon_url="//beacon.example.com",
    page_data=MappingProxyType({
        "guardian.page.sentry-host": "sentry.example.com/1",
        "guardian.page.sentry-public-api-key": "public-key",
        "guardian.page.unrelated-setting": "ignored",
    }),
)

EMPTY_SITE_CONFIGURATION = SiteConfiguration(
    ajax_url="https://api.example.com",
    site_host="https://www.example.com",
    beacon_url="//beacon.example.com",
)

SWITCHES: Tuple[Switch, ...] = (
    Switch(name="feature-x", expose_client_side=True, is_switched_on=True),
    Switch(name="feature-y", expose_client_side=False, is_switched_on=True),
    Switch(name="ab-test-header", expose_client_side=True, is_switched_on=False),
)


def make_assembler(configuration: SiteConfiguration = SITE_CONFIGURATION, **overrides) -> DataModelAssembler:
    return DataModelAssembler(configuration, make_collaborators(**overrides))


# =============================================================================
# REQUESTS
# =============================================================================

UK_REQUEST = RequestContext(path="/world/2018/oct/16/example", edition=UK)
US_REQUEST = RequestContext(path="/world/2018/oct/16/example", edition=US)


# =============================================================================
# ARTICLES
# =============================================================================

CONTRIBUTOR = ArticleTag(
    id="profile/jane-doe",
    tag_type="Contributor",
    web_title="Jane Doe",
    twitter_handle="janedoe",
)
KEYWORD = ArticleTag(id="world/europe", tag_type="Keyword", web_title="Europe")
TONE = ArticleTag(id="tone/news", tag_type="Tone", web_title="News")


def make_full_article() -> Article:
    return Article(
        fields=ArticleFields(
            main="<figure>main</figure>",
            body="<p>First</p><p>Second</p>",
            standfirst="<p>Standfirst</p>",
        ),
        trail=ArticleTrail(
            headline="Example headline",
            web_publication_date=PUBLISHED,
            byline="Jane Doe",
        ),
        metadata=ArticleMetadata(
            id="world/2018/oct/16/example",
            web_title="Example headline | World news",
            web_url="https://www.example.com/world/2018/oct/16/example",
            section="world",
            pillar="news",
            is_hosted=False,
        ),
        tags=(CONTRIBUTOR, KEYWORD, TONE),
        blocks=ArticleBlocks(
            main=ArticleBlock(
                body_html="<figure>main</figure>",
                elements=(("ImageBlockElement", "<img>"),),
            ),
            body=(
                ArticleBlock(body_html="<p>First</p>", elements=(("TextBlockElement", "<p>First</p>"),)),
                ArticleBlock(body_html="<p>Second</p>", elements=()),
            ),
        ),
        flags=ArticleContentFlags(
            should_hide_adverts=False,
            has_story_package=True,
            show_in_related=True,
        ),
        submeta_links=ArticleSubMetaLinks(
            section_labels=(ArticleSubMetaLink("/world", "World news", "article section"),),
            keywords=(ArticleSubMetaLink("/world/europe", "Europe", "keyword: world/europe"),),
        ),
        is_immersive=False,
        javascript_config=MappingProxyType({
            "authorIds": "profile/jane-doe",
            "toneIds": "tone/news",
            "keywordIds": "world/europe",
            "commissioningDesks": "uk-foreign",
            "contentId": "world/2018/oct/16/example",
            "seriesId": "world/series/dispatches",
            "contentType": "Article",
        }),
    )


def make_bare_article() -> Article:
    """No tags, no blocks, no pillar, no optional page config."""
    return Article(
        fields=ArticleFields(main="", body="<p>Legacy body</p>"),
        trail=ArticleTrail(headline="Legacy piece", web_publication_date=PUBLISHED),
        metadata=ArticleMetadata(
            id="legacy/2001/jan/01/piece",
            web_title="Legacy piece",
            web_url="https://www.example.com/legacy/2001/jan/01/piece",
        ),
    )
