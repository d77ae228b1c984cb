"""Parse JavaScript data literals (styling blocks, story args) without evaluating them."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from variantkit.extract.errors import LiteralParseError

__all__ = ["parse_literal"]

GRAMMAR_PATH = Path(__file__).parent / "literal.lark"

_AS_CONST_RE = re.compile(r"\s*as\s+const\s*;?\s*$")
_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "b": "\b", "f": "\f", "v": "\v", "0": "\0"}

_parser = Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def _unescape(body: str) -> str:
    return _ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), body)


class LiteralTransformer(Transformer):  # type: ignore[type-arg]
    """Turn the parse tree into plain Python values."""

    # ---- scalars ----

    def string(self, items: list[Token]) -> str:
        return _unescape(str(items[0])[1:-1])

    def number(self, items: list[Token]) -> int | float:
        raw = str(items[0])
        try:
            return int(raw)
        except ValueError:
            return float(raw)

    def true(self, items: list[Any]) -> bool:
        return True

    def false(self, items: list[Any]) -> bool:
        return False

    def null(self, items: list[Any]) -> None:
        return None

    # ---- keys ----

    def bare_key(self, items: list[Token]) -> str:
        return str(items[0])

    def number_key(self, items: list[Token]) -> str:
        return str(items[0])

    # ---- containers ----

    def pair(self, items: list[Any]) -> tuple[str, Any]:
        return (str(items[0]), items[1])

    def object(self, items: list[tuple[str, Any]]) -> dict[str, Any]:
        return dict(items)

    def array(self, items: list[Any]) -> list[Any]:
        return list(items)


def parse_literal(text: str) -> Any:
    """Parse *text* as a data-only JavaScript literal.

    A trailing ``as const`` is allowed. Raises LiteralParseError for anything
    else the grammar does not cover (identifiers, calls, spreads, JSX).
    """
    source = _AS_CONST_RE.sub("", text)
    try:
        tree = _parser.parse(source)
        return LiteralTransformer().transform(tree)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise LiteralParseError(str(e), line=line, column=column) from e
