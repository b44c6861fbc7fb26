"""
Normalization Layer

Pure functions converting raw source values into the output vocabulary.

WHAT THIS LAYER MUST NOT DO:
============================
- Perform I/O
- Call back into the assembler
- Substitute a well-typed default for an absent value
"""

from .casing import camel_case_from_hyphenated, last_dot_segment
from .tags import normalize_tag, normalize_tags, build_tags, author_names
from .blocks import normalize_block, normalize_blocks
from .links import build_reader_revenue_link, build_reader_revenue_links, reader_revenue_urls
from .switches import normalize_switches, validate_switch_registry
from .config_keys import (
    ErrorReportingSettings,
    normalize_config_key,
    normalize_page_data_keys,
)
from .dates import to_epoch_millis, format_date_for_display, publication_date

__all__ = [
    'camel_case_from_hyphenated',
    'last_dot_segment',
    'normalize_tag',
    'normalize_tags',
    'build_tags',
    'author_names',
    'normalize_block',
    'normalize_blocks',
    'build_reader_revenue_link',
    'build_reader_revenue_links',
    'reader_revenue_urls',
    'normalize_switches',
    'validate_switch_registry',
    'ErrorReportingSettings',
    'normalize_config_key',
    'normalize_page_data_keys',
    'to_epoch_millis',
    'format_date_for_display',
    'publication_date',
]
