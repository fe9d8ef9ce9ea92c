# hastdeco/pipeline.py

from __future__ import annotations

import logging
from typing import Optional, Sequence

from .config import load_decorations
from .hast import Element, find_code, tokens_to_hast
from .models import DecorationItem
from .positions import line_endings
from .tokens import tokenize_source
from .transformer import DecorationsTransformer, HighlightContext, HighlightMeta

logger = logging.getLogger(__name__)

_default_transformer = DecorationsTransformer()


def decorate_code(
    code: str,
    decorations: Sequence[DecorationItem] = (),
    meta: Optional[HighlightMeta] = None,
    transformer: Optional[DecorationsTransformer] = None,
) -> Element:
    """
    Tokenize `code`, render it to a pre > code tree and apply decorations.

    Decorations are resolved and validated before tokens are split, so an
    invalid set raises before any tree exists.
    """
    if transformer is None:
        transformer = _default_transformer
    if meta is None:
        meta = HighlightMeta()
    hl = HighlightContext(source=code, decorations=list(decorations), meta=meta)

    lines = tokenize_source(code)
    lines = transformer.tokens(hl, lines)

    root = tokens_to_hast(lines, line_endings(code))
    transformer.code(hl, find_code(root))

    logger.debug("Decorated %d lines with %d decorations", len(lines), len(hl.decorations))
    return root


def decorate_from_config(code: str, config_path: str = "configs/decorations.yaml") -> Element:
    return decorate_code(code, load_decorations(config_path))
