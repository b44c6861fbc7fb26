"""
Block Normalizer

Article blocks -> output Blocks. Raw HTML is copied as-is; rich elements
go through the injected page-element converter.

Content without structured blocks (legacy content) is a normal state:
main is None and body is empty.
"""

from __future__ import annotations
from typing import Optional

from ..contracts.collaborators import PageElementConverter
from ..contracts.sources import ArticleBlock, ArticleBlocks
from ..dtos.model import Block, Blocks


def normalize_block(block: ArticleBlock, element_converter: PageElementConverter) -> Block:
    return Block(
        body_html=block.body_html,
        elements=tuple(element_converter(e) for e in block.elements),
    )


def normalize_blocks(
    blocks: Optional[ArticleBlocks],
    element_converter: PageElementConverter,
) -> Blocks:
    if blocks is None:
        return Blocks(main=None, body=())

    main = None
    if blocks.main is not None:
        main = normalize_block(blocks.main, element_converter)

    return Blocks(
        main=main,
        body=tuple(normalize_block(b, element_converter) for b in blocks.body),
    )
