"""Lark-based parser turning CSS selector text back into a SelectorBuilder."""

from __future__ import annotations

import logging
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from objtasks.errors import ParseError
from objtasks.selector.builder import SelectorBuilder
from objtasks.selector.model import Combinator

__all__ = ["parse_selector"]

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


class _Compound:
    """Ordered (token type, value) parts of one compound selector."""

    def __init__(self, parts: list[tuple[str, str]]):
        self.parts = parts


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into compounds and combinators.

    Builder calls happen after the transform so that selector errors are not
    wrapped in Lark's ``VisitError``.
    """

    def compound(self, items: list[Token]) -> _Compound:
        return _Compound([(token.type, str(token)) for token in items])

    def start(self, items: list[object]) -> list[object]:
        return list(items)


def _strip_prefix(token_type: str, raw: str) -> str:
    if token_type in ("ID", "CLASS", "PSEUDO_CLASS"):
        return raw[1:]
    if token_type == "ATTRIBUTE":
        return raw[1:-1]
    if token_type == "PSEUDO_ELEMENT":
        return raw[2:]
    return raw


def _build_compound(compound: _Compound) -> SelectorBuilder:
    """Replay the parts of *compound* through a new builder."""
    builder = SelectorBuilder()
    steps = {
        "ELEMENT": builder.element,
        "ID": builder.id,
        "CLASS": builder.class_,
        "ATTRIBUTE": builder.attr,
        "PSEUDO_CLASS": builder.pseudo_class,
        "PSEUDO_ELEMENT": builder.pseudo_element,
    }
    for token_type, raw in compound.parts:
        steps[token_type](_strip_prefix(token_type, raw))
    return builder


def _normalize_combinator(raw: str) -> str:
    return raw.strip() or Combinator.DESCENDANT.value


def _assemble(items: list[object]) -> SelectorBuilder:
    """Fold ``compound (combinator compound)*`` right-associatively."""
    result = _build_compound(items[-1])  # type: ignore[arg-type]
    for index in range(len(items) - 3, -1, -2):
        left = _build_compound(items[index])  # type: ignore[arg-type]
        combinator = _normalize_combinator(str(items[index + 1]))
        result = SelectorBuilder().combine(left, combinator, result)
    return result


def parse_selector(source: str) -> SelectorBuilder:
    """Parse CSS selector text into a builder.

    The result re-applies the builder's ordering and duplicate rules, so
    ``"#a#b"`` raises :class:`DuplicateSelectorError` and ``".a#b"`` raises
    :class:`OrderError`. Malformed text raises :class:`ParseError`.
    """
    parser = Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
    )
    try:
        tree = parser.parse(source.strip())
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        logger.debug("Rejected selector %r: %s", source, e)
        raise ParseError(f"Invalid selector {source!r}: {e}", line=line, column=column) from e
    items = SelectorTransformer().transform(tree)
    return _assemble(items)
