"""
Article to Data Model Mapper

Converts an article plus its request context into the versioned
DotcomponentsDataModel.

MAPPING BOUNDARY:
=================
This is the ONLY place where article internals become DTOs.
All conversion happens here, nowhere else.

MAPPING RULES:
==============
1. Never expose internal article structure
2. Absent upstream values stay absent (None), never ""
3. Preserve source ordering (tags, blocks, elements)
4. No I/O: every value comes from an already-resolved collaborator call
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Tuple

from .config import SiteConfiguration
from .contracts.base import lookup_string
from .contracts.collaborators import (
    DateFormatter, NavigationBuilder, PageElementConverter, ReaderRevenueUrlBuilder,
)
from .contracts.sources import Article, ArticleSubMetaLinks, RequestContext, Switch
from .dtos import (
    DATA_MODEL_VERSION,
    DCConfig, DCContent, DCSite, DotcomponentsDataModel, Meta,
    SubMetaLink, SubMetaLinks,
)
from .normalization import (
    ErrorReportingSettings,
    author_names,
    build_reader_revenue_links,
    build_tags,
    format_date_for_display,
    normalize_blocks,
    normalize_switches,
    publication_date,
)


logger = logging.getLogger(__name__)


# Page-config keys read straight into DCContent
CONTENT_ID_KEY = "contentId"
SERIES_ID_KEY = "seriesId"
CONTENT_TYPE_KEY = "contentType"


@dataclass(frozen=True)
class Collaborators:
    """External functions the assembler calls. All are injected."""
    navigation: NavigationBuilder
    reader_revenue_url: ReaderRevenueUrlBuilder
    page_element: PageElementConverter
    date_display: DateFormatter = format_date_for_display


class DataModelAssembler:
    """
    Assembles DotcomponentsDataModel instances.

    Holds only immutable configuration and collaborator references, so one
    instance may serve concurrent requests.
    """

    def __init__(self, configuration: SiteConfiguration, collaborators: Collaborators):
        self._configuration = configuration
        self._collaborators = collaborators

    @property
    def configuration(self) -> SiteConfiguration:
        return self._configuration

    def assemble(
        self,
        article: Article,
        request: RequestContext,
        switches: Iterable[Switch],
    ) -> DotcomponentsDataModel:
        # Capture switch state once for the whole call
        switch_snapshot: Tuple[Switch, ...] = tuple(switches)

        content = self.map_content(article, request)
        site = self.map_site(request)
        config = self.map_config(switch_snapshot)

        logger.debug(
            "Assembled data model v%d for %s (%s edition)",
            DATA_MODEL_VERSION, article.metadata.id, request.edition.id,
        )
        return DotcomponentsDataModel(
            content=content,
            site=site,
            config=config,
            version=DATA_MODEL_VERSION,
        )

    # =========================================================================
    # CONTENT
    # =========================================================================

    def map_content(self, article: Article, request: RequestContext) -> DCContent:
        page_config = article.javascript_config
        published_millis, published_display = publication_date(
            article.trail.web_publication_date,
            request,
            self._collaborators.date_display,
        )

        return DCContent(
            standfirst=article.fields.standfirst,
            main=article.fields.main,
            body=article.fields.body,
            blocks=normalize_blocks(article.blocks, self._collaborators.page_element),
            tags=build_tags(article.tags, page_config),
            author=author_names(article.contributors),
            page_id=article.metadata.id,
            pillar=article.metadata.pillar,
            web_publication_date=published_millis,
            web_publication_date_display=published_display,
            section=article.metadata.section,
            headline=article.trail.headline,
            web_title=article.metadata.web_title,
            byline=article.trail.byline,
            content_id=lookup_string(page_config, CONTENT_ID_KEY).or_none(),
            series_id=lookup_string(page_config, SERIES_ID_KEY).or_none(),
            edition_id=request.edition.id,
            edition=request.edition.display_name,
            content_type=lookup_string(page_config, CONTENT_TYPE_KEY).or_none(),
            sub_meta_links=self._map_sub_meta_links(article.submeta_links),
            web_url=article.metadata.web_url,
            meta=Meta(
                is_immersive=article.is_immersive,
                is_hosted=article.metadata.is_hosted,
                should_hide_ads=article.flags.should_hide_adverts,
                has_story_package=article.flags.has_story_package,
                has_related=article.flags.show_in_related,
            ),
        )

    # =========================================================================
    # SITE
    # =========================================================================

    def map_site(self, request: RequestContext) -> DCSite:
        return DCSite(
            nav=self._collaborators.navigation(request),
            reader_revenue_links=build_reader_revenue_links(
                self._collaborators.reader_revenue_url, request
            ),
        )

    # =========================================================================
    # CONFIG
    # =========================================================================

    def map_config(self, switches: Iterable[Switch]) -> DCConfig:
        error_reporting = ErrorReportingSettings.from_page_data(self._configuration.page_data)

        return DCConfig(
            ajax_url=self._configuration.ajax_url,
            guardian_base_url=self._configuration.site_host,
            sentry_host=error_reporting.sentry_host.or_none(),
            sentry_public_api_key=error_reporting.sentry_public_api_key.or_none(),
            switches=MappingProxyType(normalize_switches(switches)),
            beacon_url=self._configuration.beacon_url,
        )

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _map_sub_meta_links(self, links: ArticleSubMetaLinks) -> SubMetaLinks:
        return SubMetaLinks(
            section_labels=tuple(
                SubMetaLink(link.link, link.text, link.data_link_name) for link in links.section_labels
            ),
            keywords=tuple(
                SubMetaLink(link.link, link.text, link.data_link_name) for link in links.keywords
            ),
        )


def from_article(
    article: Article,
    request: RequestContext,
    switches: Iterable[Switch],
    configuration: SiteConfiguration,
    collaborators: Collaborators,
) -> DotcomponentsDataModel:
    """Functional form of DataModelAssembler.assemble."""
    return DataModelAssembler(configuration, collaborators).assemble(article, request, switches)
