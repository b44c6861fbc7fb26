"""
Dotcomponents Data Model

Assembles one versioned, serializable description of an article page for
an external rendering client.

LAYER FLOW:
===========
1. Contracts:     article, request, switches, collaborators (read only)
2. Normalization: casing, tags, blocks, links, switches, config keys, dates
3. Mapper:        DataModelAssembler -> DotcomponentsDataModel
4. Serialization: to_json / to_json_string
"""

from .config import SiteConfiguration
from .dtos import DATA_MODEL_VERSION, DotcomponentsDataModel
from .mapper import Collaborators, DataModelAssembler, from_article
from .serialization import to_dict, to_json, to_json_string

__all__ = [
    'SiteConfiguration',
    'DATA_MODEL_VERSION',
    'DotcomponentsDataModel',
    'Collaborators',
    'DataModelAssembler',
    'from_article',
    'to_dict',
    'to_json',
    'to_json_string',
]
