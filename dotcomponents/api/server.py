"""
Dotcomponents API
=================

Read-only HTTP surface returning the data model for one article.

Endpoints:
- GET /health                 -> status and data model version
- GET /dotcomponents/{path}   -> canonical data model JSON
                                 (?pretty=true for the indented rendering,
                                  ?edition=US to pick an edition)

The app is built around injected sources; it never fetches content itself.

Usage:
    app = create_app(assembler, article_source=store.get, switch_source=registry.snapshot)
"""

import logging
from typing import Callable, Iterable, Mapping, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import Response
from pydantic import BaseModel

from ..contracts.base import DotcomponentsError
from ..contracts.sources import Article, DEFAULT_EDITION, RequestContext, Switch, edition_by_id
from ..dtos import DATA_MODEL_VERSION
from ..mapper import DataModelAssembler
from ..serialization import to_json, to_json_string


logger = logging.getLogger(__name__)

ArticleSource = Callable[[str], Optional[Article]]
SwitchSource = Callable[[], Iterable[Switch]]


class HealthResponse(BaseModel):
    status: str
    version: int


class InMemoryArticleSource:
    """Dict-backed article source keyed by page path (no leading slash)."""

    def __init__(self, articles: Optional[Mapping[str, Article]] = None):
        self._articles = dict(articles or {})

    def __call__(self, path: str) -> Optional[Article]:
        return self._articles.get(path.strip("/"))


def create_app(
    assembler: DataModelAssembler,
    article_source: ArticleSource,
    switch_source: SwitchSource,
) -> FastAPI:
    app = FastAPI(
        title="Dotcomponents Data Model API",
        version=str(DATA_MODEL_VERSION),
        description="Versioned article data model for the rendering client",
    )

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """System status."""
        return HealthResponse(status="online", version=DATA_MODEL_VERSION)

    @app.get("/dotcomponents/{path:path}")
    def get_data_model(
        path: str,
        edition: Optional[str] = Query(None),
        pretty: bool = Query(False),
    ):
        """
        Assemble and serialize the data model for `path`.
        Collaborator failures are not caught here.
        """
        resolved_edition = DEFAULT_EDITION
        if edition is not None:
            resolved_edition = edition_by_id(edition)
            if resolved_edition is None:
                raise HTTPException(400, detail=f"Unknown edition: {edition}")

        article = article_source(path)
        if article is None:
            raise HTTPException(404, detail=f"No article at {path}")

        request = RequestContext(path=f"/{path.strip('/')}", edition=resolved_edition)
        try:
            model = assembler.assemble(article, request, switch_source())
        except DotcomponentsError as e:
            logger.error("Failed to assemble data model for %s: %s", path, e)
            raise HTTPException(500, detail={"code": e.code.name, "message": e.message})

        body = to_json_string(model) if pretty else to_json(model)
        return Response(content=body, media_type="application/json")

    return app
