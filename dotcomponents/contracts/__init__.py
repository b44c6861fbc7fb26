"""
Contracts Module

Inputs this package reads (article, request, switches, collaborators)
and the error taxonomy shared by every layer.

DESIGN PRINCIPLES:
==================
1. All contract types are immutable (frozen dataclasses)
2. Absent optional data is explicit (None / Lookup.missing), never ""
3. Configuration defects fail fast with an ErrorCode
4. Collaborator failures propagate unchanged
"""

from .base import (
    ErrorCode,
    DotcomponentsError,
    ContractViolation,
    SwitchCollisionError,
    ConfigKeyCollisionError,
    Lookup,
    lookup_string,
)
from .sources import (
    Edition,
    EDITIONS,
    DEFAULT_EDITION,
    edition_by_id,
    RequestContext,
    Article,
    ArticleTag,
    ArticleBlock,
    ArticleBlocks,
    ArticleFields,
    ArticleTrail,
    ArticleMetadata,
    ArticleSubMetaLink,
    ArticleSubMetaLinks,
    ArticleContentFlags,
    Switch,
)
from .collaborators import (
    Placement,
    Action,
    PLACEMENTS,
    ACTIONS,
    NavigationBuilder,
    ReaderRevenueUrlBuilder,
    PageElementConverter,
    DateFormatter,
)

__all__ = [
    # Errors
    'ErrorCode',
    'DotcomponentsError',
    'ContractViolation',
    'SwitchCollisionError',
    'ConfigKeyCollisionError',
    'Lookup',
    'lookup_string',
    # Sources
    'Edition',
    'EDITIONS',
    'DEFAULT_EDITION',
    'edition_by_id',
    'RequestContext',
    'Article',
    'ArticleTag',
    'ArticleBlock',
    'ArticleBlocks',
    'ArticleFields',
    'ArticleTrail',
    'ArticleMetadata',
    'ArticleSubMetaLink',
    'ArticleSubMetaLinks',
    'ArticleContentFlags',
    'Switch',
    # Collaborators
    'Placement',
    'Action',
    'PLACEMENTS',
    'ACTIONS',
    'NavigationBuilder',
    'ReaderRevenueUrlBuilder',
    'PageElementConverter',
    'DateFormatter',
]
