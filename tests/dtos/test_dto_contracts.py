"""
DTO Contract Tests

Tests that enforce the external data model contract.

TEST CATEGORIES:
================
1. Immutability - DTOs cannot be mutated
2. Versioning - the version constant is pinned; unknown versions fail fast
3. Shape - the field set of each tier is fixed
"""

import pytest
from dataclasses import fields, FrozenInstanceError

from dotcomponents.contracts import ContractViolation, ErrorCode
from dotcomponents.dtos import (
    DATA_MODEL_VERSION, DCConfig, DCContent, DCSite, DotcomponentsDataModel,
    Meta, ReaderRevenueLinks, Tags, current_version,
)

from ..fixtures import UK_REQUEST, SWITCHES, make_assembler, make_full_article


# Bump together with DATA_MODEL_VERSION, never on its own
PINNED_VERSION = 2


@pytest.fixture
def model():
    return make_assembler().assemble(make_full_article(), UK_REQUEST, SWITCHES)


# =============================================================================
# IMMUTABILITY TESTS
# =============================================================================

class TestDTOImmutability:
    """All DTOs MUST be frozen (immutable)."""

    def test_root_is_frozen(self, model):
        with pytest.raises(FrozenInstanceError):
            model.version = 3

    def test_content_is_frozen(self, model):
        with pytest.raises(FrozenInstanceError):
            model.content.headline = "modified"

    def test_nested_records_are_frozen(self, model):
        with pytest.raises(FrozenInstanceError):
            model.content.meta.is_hosted = True
        with pytest.raises(FrozenInstanceError):
            model.site.reader_revenue_links.header = None

    def test_switches_map_is_read_only(self, model):
        with pytest.raises(TypeError):
            model.config.switches["featureY"] = True

    def test_lists_are_tuples(self, model):
        assert isinstance(model.content.blocks.body, tuple)
        assert isinstance(model.content.tags.all, tuple)


# =============================================================================
# VERSION VALIDATION TESTS
# =============================================================================

class TestVersionValidation:

    def test_version_constant_is_pinned(self):
        assert DATA_MODEL_VERSION == PINNED_VERSION
        assert current_version() == PINNED_VERSION

    def test_assembled_model_carries_version(self, model):
        assert model.version == PINNED_VERSION

    def test_unknown_version_rejected(self, model):
        with pytest.raises(ContractViolation) as exc:
            DotcomponentsDataModel(
                content=model.content,
                site=model.site,
                config=model.config,
                version=DATA_MODEL_VERSION + 1,
            )
        assert exc.value.code == ErrorCode.UNKNOWN_MODEL_VERSION


# =============================================================================
# SHAPE TESTS
# =============================================================================

class TestShape:
    """Changing any of these field sets requires a version bump."""

    def _names(self, cls):
        return [f.name for f in fields(cls)]

    def test_root_fields(self):
        assert self._names(DotcomponentsDataModel) == ["content", "site", "config", "version"]

    def test_site_fields(self):
        assert self._names(DCSite) == ["nav", "reader_revenue_links"]

    def test_exactly_three_placements(self):
        assert self._names(ReaderRevenueLinks) == ["header", "footer", "side_menu"]

    def test_config_fields(self):
        assert self._names(DCConfig) == [
            "ajax_url", "guardian_base_url", "sentry_host",
            "sentry_public_api_key", "switches", "beacon_url",
        ]

    def test_meta_fields_are_flags(self):
        assert self._names(Meta) == [
            "is_immersive", "is_hosted", "should_hide_ads",
            "has_story_package", "has_related",
        ]

    def test_tags_fields(self):
        assert self._names(Tags) == [
            "author_ids", "tone_ids", "keyword_ids", "commissioning_desks", "all",
        ]

    def test_content_field_count(self):
        assert len(fields(DCContent)) == 22
