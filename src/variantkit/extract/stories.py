"""Usage examples mined from a component's story file.

Each exported story's ``args`` literal is rendered as a JSX usage example.
Examples are then cleaned, filtered and de-duplicated by the set of props
they demonstrate.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from variantkit.extract.errors import LiteralParseError
from variantkit.extract.literal import parse_literal
from variantkit.extract.scanner import extract_balanced_braces

__all__ = [
    "cleanup_example",
    "example_signature",
    "extract_story_examples",
    "render_example",
    "should_include_example",
]

logger = logging.getLogger(__name__)

_STORY_RE = re.compile(r"export\s+const\s+(?P<name>[A-Z]\w*)\s*(?::[^=]*)?=\s*(?=\{)")
_ARGS_RE = re.compile(r"\bargs\s*:\s*(?=\{)")
_PROP_NAME_RE = re.compile(r"(\w+)=[\"'{]")

# Stories that exist to exercise props interactively, not to show usage.
_SKIPPED_STORY_MARKERS = ("PropTester", "Playground")

UNDEFINED_COMPONENTS = ["RefreshButton", "LinkButton", "DefaultMenuBar", "ToastTriggerButton"]
UNDEFINED_VARS = ["args.placeholder", "args.inputSide", "botList", "INITIAL_BOT_LIST"]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def _attribute(key: str, value: Any) -> str | None:
    if value is None:
        return None
    if value is True:
        return key
    if isinstance(value, str) and '"' not in value:
        return f'{key}="{value}"'
    return f"{key}={{{json.dumps(value)}}}"


def render_example(component: str, args: dict[str, Any]) -> str:
    """``{"variant": "primary", "children": "Save"}`` -> ``<Button variant="primary">Save</Button>``."""
    children = args.get("children")
    attributes = [
        attr
        for key, value in args.items()
        if key != "children" and (attr := _attribute(key, value)) is not None
    ]
    opening = " ".join([component, *attributes])
    if isinstance(children, str) and children:
        return f"<{opening}>{children}</{component}>"
    return f"<{opening} />"


# ---------------------------------------------------------------------------
# Cleanup and filtering
# ---------------------------------------------------------------------------


def cleanup_example(example: str) -> str:
    """Repair artifacts that come from stringified story values.

    - ``prop="() => {}"`` becomes ``prop={() => {}}``
    - ``prop={`[...]`}`` becomes ``prop={[...]}``
    - escaped and doubled backticks are unescaped
    - ``label={Checked}`` becomes ``label="Checked"``
    """
    cleaned = re.sub(r'(\w+)="(\(\)\s*=>\s*\{[^}]*\})"', r"\1={\2}", example)
    cleaned = re.sub(r"(\w+)=\{`(\[[\s\S]*?\])`\}", r"\1={\2}", cleaned)
    cleaned = cleaned.replace("\\`", "`")
    cleaned = cleaned.replace("{``", "{`").replace("``}", "`}")
    cleaned = re.sub(r"(label)=\{([A-Z][a-z]+)\}(?![\w.])", r'\1="\2"', cleaned)
    return cleaned


def should_include_example(example: str, component: str) -> bool:
    """False for examples that would not run standalone or show nothing."""
    if any(f"<{name}" in example for name in UNDEFINED_COMPONENTS):
        return False
    stripped = example.strip()
    if len(stripped) < 10:
        return False
    if re.fullmatch(rf"<{re.escape(component)}\s*/>", stripped):
        return False
    return not any(var in example for var in UNDEFINED_VARS)


def example_signature(example: str) -> str:
    """Sorted, comma-joined names of the props an example sets."""
    return ",".join(sorted(_PROP_NAME_RE.findall(example)))


# ---------------------------------------------------------------------------
# Story files
# ---------------------------------------------------------------------------


def _story_args(story_block: str) -> dict[str, Any] | None:
    match = _ARGS_RE.search(story_block)
    if not match:
        return None
    block = extract_balanced_braces(story_block, match.end())
    if block is None:
        return None
    try:
        args = parse_literal(block)
    except LiteralParseError as e:
        logger.debug("Skipping story args that are not a data literal: %s", e)
        return None
    return args if isinstance(args, dict) else None


def extract_story_examples(story_source: str, component: str) -> list[str]:
    """Usage examples for *component* from its story file, in story order."""
    examples: list[str] = []
    seen: set[str] = set()
    for match in _STORY_RE.finditer(story_source):
        if any(marker in match.group("name") for marker in _SKIPPED_STORY_MARKERS):
            continue
        story = extract_balanced_braces(story_source, match.end())
        if story is None:
            continue
        args = _story_args(story)
        if args is None:
            continue
        example = cleanup_example(render_example(component, args))
        if not should_include_example(example, component):
            continue
        signature = example_signature(example)
        if signature in seen:
            continue
        seen.add(signature)
        examples.append(example)
    return examples
