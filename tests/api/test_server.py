"""
API Tests

Read-only HTTP surface over the assembler, exercised with TestClient.
"""

import json

import pytest
from fastapi.testclient import TestClient

from dotcomponents.api import InMemoryArticleSource, create_app
from dotcomponents.contracts import Switch
from dotcomponents.dtos import DATA_MODEL_VERSION

from ..fixtures import SWITCHES, make_assembler, make_full_article


ARTICLE_PATH = "world/2018/oct/16/example"


@pytest.fixture
def client():
    app = create_app(
        make_assembler(),
        article_source=InMemoryArticleSource({ARTICLE_PATH: make_full_article()}),
        switch_source=lambda: SWITCHES,
    )
    return TestClient(app)


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "online", "version": DATA_MODEL_VERSION}


class TestDataModelEndpoint:

    def test_returns_canonical_json(self, client):
        response = client.get(f"/dotcomponents/{ARTICLE_PATH}")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        doc = response.json()
        assert doc["version"] == 2
        assert doc["content"]["pageId"] == ARTICLE_PATH
        assert doc["config"]["switches"] == {"abTestHeader": False, "featureX": True}
        assert "\n" not in response.text

    def test_pretty_rendering(self, client):
        compact = client.get(f"/dotcomponents/{ARTICLE_PATH}")
        pretty = client.get(f"/dotcomponents/{ARTICLE_PATH}", params={"pretty": "true"})

        assert pretty.status_code == 200
        assert pretty.text.startswith('{\n  "content"')
        assert json.loads(pretty.text) == compact.json()

    def test_edition_parameter(self, client):
        response = client.get(f"/dotcomponents/{ARTICLE_PATH}", params={"edition": "us"})

        content = response.json()["content"]
        assert content["editionId"] == "US"
        assert content["webPublicationDateDisplay"] == "Tue 16 Oct 2018 09.30 EDT"

    def test_unknown_edition(self, client):
        response = client.get(f"/dotcomponents/{ARTICLE_PATH}", params={"edition": "mars"})
        assert response.status_code == 400

    def test_unknown_article(self, client):
        response = client.get("/dotcomponents/no/such/page")
        assert response.status_code == 404

    def test_configuration_defect_is_reported_with_code(self):
        colliding = [
            Switch("a-b", expose_client_side=True, is_switched_on=True),
            Switch("a--b", expose_client_side=True, is_switched_on=True),
        ]
        app = create_app(
            make_assembler(),
            article_source=InMemoryArticleSource({ARTICLE_PATH: make_full_article()}),
            switch_source=lambda: colliding,
        )

        response = TestClient(app).get(f"/dotcomponents/{ARTICLE_PATH}")

        assert response.status_code == 500
        assert response.json()["detail"]["code"] == "SWITCH_KEY_COLLISION"
