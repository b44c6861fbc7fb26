"""
Dotcomponents DTO Package

Read-only, immutable types sent to the rendering client.

CONTRACT ENFORCEMENT:
=====================
1. All DTOs are frozen (immutable)
2. The root model is versioned
3. The client receives ONLY these types, never article internals
4. Missing data is EXPLICIT (None), never an empty stand-in
"""

from .core import DATA_MODEL_VERSION, current_version
from .model import (
    PageElement,
    TagProperties,
    Tag,
    Tags,
    Block,
    Blocks,
    ReaderRevenueLink,
    ReaderRevenueLinks,
    Meta,
    SubMetaLink,
    SubMetaLinks,
    DCContent,
    DCSite,
    DCConfig,
    DotcomponentsDataModel,
)

__all__ = [
    'DATA_MODEL_VERSION',
    'current_version',
    'PageElement',
    'TagProperties',
    'Tag',
    'Tags',
    'Block',
    'Blocks',
    'ReaderRevenueLink',
    'ReaderRevenueLinks',
    'Meta',
    'SubMetaLink',
    'SubMetaLinks',
    'DCContent',
    'DCSite',
    'DCConfig',
    'DotcomponentsDataModel',
]
