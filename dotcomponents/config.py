"""
Site Configuration

Scalar application settings plus the flat page-data registry.
"""

from __future__ import annotations
import json
import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from .contracts.base import ContractViolation, ErrorCode


ENV_PREFIX = "DOTCOMPONENTS_"

DEFAULT_AJAX_URL = "https://api.nextgen.guardianapps.co.uk"
DEFAULT_SITE_HOST = "https://www.theguardian.com"
DEFAULT_BEACON_URL = "//phar.gu-web.net"


@dataclass(frozen=True)
class SiteConfiguration:
    """
    Global configuration registry as seen by the assembler.

    `page_data` keys are dot-and-hyphen delimited,
    e.g. "guardian.page.sentry-host".
    """
    ajax_url: str = DEFAULT_AJAX_URL
    site_host: str = DEFAULT_SITE_HOST
    beacon_url: str = DEFAULT_BEACON_URL
    page_data: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @staticmethod
    def from_environ(environ: Optional[Mapping[str, str]] = None) -> SiteConfiguration:
        """
        Build from DOTCOMPONENTS_* variables. Unset variables use defaults.

        DOTCOMPONENTS_PAGE_DATA must be a JSON object of string values.
        """
        env = os.environ if environ is None else environ

        page_data = {}
        raw_page_data = env.get(f"{ENV_PREFIX}PAGE_DATA")
        if raw_page_data:
            try:
                page_data = json.loads(raw_page_data)
            except ValueError as e:
                raise ContractViolation(
                    ErrorCode.MALFORMED_CONFIGURATION,
                    f"{ENV_PREFIX}PAGE_DATA is not valid JSON: {e}",
                ) from e
            if not isinstance(page_data, dict):
                raise ContractViolation(
                    ErrorCode.MALFORMED_CONFIGURATION,
                    f"{ENV_PREFIX}PAGE_DATA must be a JSON object",
                )

        return SiteConfiguration(
            ajax_url=env.get(f"{ENV_PREFIX}AJAX_URL", DEFAULT_AJAX_URL),
            site_host=env.get(f"{ENV_PREFIX}SITE_HOST", DEFAULT_SITE_HOST),
            beacon_url=env.get(f"{ENV_PREFIX}BEACON_URL", DEFAULT_BEACON_URL),
            page_data=MappingProxyType(dict(page_data)),
        )
