"""Token rename map and utility-class migration.

Tokens whose ``newName`` is set are scheduled for a rename. The migration
rewrites ``bg-primary`` to ``bg-kumo-brand`` (and so on for every color
utility prefix) while keeping variant prefixes and ``/NN`` opacity suffixes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from variantkit.theme.model import Theme

__all__ = ["LineChange", "TokenRenameMap", "migrate_content", "token_rename_map"]

COLOR_PREFIXES = [
    "bg", "border", "border-t", "border-r", "border-b", "border-l", "border-x",
    "border-y", "ring", "ring-offset", "outline", "divide", "shadow", "accent",
    "caret", "fill", "stroke", "decoration", "from", "via", "to",
]
TEXT_PREFIXES = ["text"]

_VARIANTS = r"(?:[a-z0-9\[\]=&:_-]+:)*"
_OPACITY = r"(?:/(?:\d+|\[[.\d]+\]))?"
_END = r"(?=\s|\"|'|`|$|\))"


@dataclass(frozen=True)
class TokenRenameMap:
    """Old token name -> new token name, split by token table."""

    text: dict[str, str] = field(default_factory=dict)
    color: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {"text": dict(self.text), "color": dict(self.color)}

    def __bool__(self) -> bool:
        return bool(self.text or self.color)


@dataclass(frozen=True)
class LineChange:
    """One rewritten source line (1-based line number)."""

    line: int
    before: str
    after: str


def token_rename_map(theme: Theme) -> TokenRenameMap:
    """Collect every token with a planned rename."""
    return TokenRenameMap(
        text={name: t.new_name for name, t in sorted(theme.text.items()) if t.new_name},
        color={name: t.new_name for name, t in sorted(theme.colors.items()) if t.new_name},
    )


def _patterns(rename_map: TokenRenameMap) -> list[tuple[re.Pattern[str], str]]:
    patterns: list[tuple[re.Pattern[str], str]] = []
    tables = [(rename_map.text, TEXT_PREFIXES), (rename_map.color, COLOR_PREFIXES)]
    for renames, prefixes in tables:
        for old, new in renames.items():
            for prefix in prefixes:
                pattern = re.compile(
                    rf"(?<![\w:/-])({_VARIANTS})({re.escape(prefix)}-{re.escape(old)})({_OPACITY}){_END}"
                )
                patterns.append((pattern, rf"\g<1>{prefix}-{new}\g<3>"))
    return patterns


def migrate_content(content: str, rename_map: TokenRenameMap) -> tuple[str, list[LineChange]]:
    """Rewrite renamed utility classes in *content*.

    Returns the new content and the list of changed lines.
    """
    patterns = _patterns(rename_map)
    changes: list[LineChange] = []
    out: list[str] = []
    for index, line in enumerate(content.split("\n"), start=1):
        updated = line
        for pattern, replacement in patterns:
            updated = pattern.sub(replacement, updated)
        if updated != line:
            changes.append(LineChange(line=index, before=line.strip(), after=updated.strip()))
        out.append(updated)
    return "\n".join(out), changes
