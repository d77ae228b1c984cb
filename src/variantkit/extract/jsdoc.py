"""Component descriptions from the JSDoc block above an export."""

from __future__ import annotations

import re

__all__ = ["extract_description"]


def extract_description(source: str, name: str) -> str:
    """First paragraph of the ``/** ... */`` block directly above ``export ... <name>``.

    Returns an empty string when there is none.
    """
    pattern = re.compile(
        rf"/\*\*(?P<body>(?:(?!\*/).)*)\*/\s*"
        rf"export\s+(?:default\s+)?(?:const|function|class)\s+{re.escape(name)}\b",
        re.DOTALL,
    )
    match = pattern.search(source)
    if not match:
        return ""
    paragraph: list[str] = []
    for raw in match.group("body").splitlines():
        line = raw.strip().lstrip("*").strip()
        if line.startswith("@"):
            break
        if not line:
            if paragraph:
                break
            continue
        paragraph.append(line)
    return " ".join(paragraph)
