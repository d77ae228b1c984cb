"""Variant tables, defaults, base styles and styling metadata from component source.

A component file exports conventionally named constants::

    export const KUMO_BUTTON_VARIANTS = {
      variant: {
        primary: { classes: "bg-kumo-brand text-white hover:bg-kumo-brand-hover", description: "..." },
        secondary: { classes: "bg-kumo-control", description: "..." },
      },
    } as const;

    export const KUMO_BUTTON_DEFAULT_VARIANTS = { variant: "primary" } as const;

The tables are located with the brace scanner and read by pattern, never by
evaluating the file.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from variantkit.extract.errors import LiteralParseError
from variantkit.extract.literal import parse_literal
from variantkit.extract.scanner import extract_balanced_braces, find_exported_constants
from variantkit.model import PropSchema
from variantkit.style.states import split_variant_prefix, state_for_prefix

__all__ = [
    "ExtractedVariants",
    "VariantOption",
    "extract",
    "extract_file",
    "extract_state_classes",
    "parse_defaults_object",
    "parse_variants_object",
]

logger = logging.getLogger(__name__)

# key: {   with bare, double- or single-quoted keys
_OBJECT_KEY_RE = re.compile(
    r"""(?:"(?P<double>[^"]+)"|'(?P<single>[^']+)'|(?P<bare>[\w-]+))\s*:\s*(?=[{\[])"""
)
_ARRAY_RE = re.compile(r"\[[^\]]*\]")
_DEFAULT_RE = re.compile(
    r"""(?:"(?P<double>[^"]+)"|'(?P<single>[^']+)'|(?P<bare>[\w-]+))\s*:\s*["'](?P<value>[^"']*)["']"""
)
_RESERVED_KEYS = {"classes", "description"}


def _string_field(block: str, name: str) -> str | None:
    match = re.search(
        rf"""\b{name}\s*:\s*(?P<quote>["'`])(?P<body>.*?)(?<!\\)(?P=quote)""", block, re.DOTALL
    )
    return match.group("body") if match else None


def _object_entries(block: str) -> list[tuple[str, str]]:
    """``(key, {...})`` and ``(key, [...])`` pairs for the members directly inside *block*."""
    body = block[1:-1]
    entries: list[tuple[str, str]] = []
    pos = 0
    while True:
        match = _OBJECT_KEY_RE.search(body, pos)
        if not match:
            break
        if body[match.end()] == "[":
            array = _ARRAY_RE.match(body, match.end())
            value = array.group(0) if array else None
        else:
            value = extract_balanced_braces(body, match.end())
        if value is None:
            break
        key = match.group("double") or match.group("single") or match.group("bare")
        entries.append((key, value))
        pos = match.end() + len(value)
    return entries


@dataclass(frozen=True)
class VariantOption:
    """One value of a variant dimension."""

    classes: str = ""
    description: str = ""
    state_classes: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ExtractedVariants:
    """Everything read from one component's exported constants."""

    variants: dict[str, dict[str, VariantOption]]
    defaults: dict[str, str]
    base_styles: str | None = None
    styling: dict[str, Any] | None = None

    def props(self) -> dict[str, PropSchema]:
        """Variant dimensions as enum props, in declaration order."""
        props: dict[str, PropSchema] = {}
        for prop_name, options in self.variants.items():
            props[prop_name] = PropSchema(
                type="enum",
                default=self.defaults.get(prop_name),
                values=list(options),
                descriptions={v: o.description for v, o in options.items() if o.description},
                classes={v: o.classes for v, o in options.items()},
                state_classes={v: o.state_classes for v, o in options.items() if o.state_classes},
            )
        return props


def extract_state_classes(classes: str) -> dict[str, str]:
    """Group the state-prefixed tokens of *classes* by state, raw tokens space-joined."""
    buckets: dict[str, list[str]] = {}
    for token in classes.split():
        parts = split_variant_prefix(token.lstrip("!"))
        if parts is None:
            continue
        state = state_for_prefix(parts[0])
        if state is not None:
            buckets.setdefault(state, []).append(token)
    return {state: " ".join(tokens) for state, tokens in buckets.items()}


def parse_variants_object(block: str) -> dict[str, dict[str, VariantOption]]:
    """Read ``{prop: {value: {classes, description}}}`` from a variants block.

    A prop may also list bare values (``variant: ["a", "b"]``); those
    options carry no classes.
    """
    variants: dict[str, dict[str, VariantOption]] = {}
    for prop_name, prop_block in _object_entries(block):
        if prop_name in _RESERVED_KEYS:
            continue
        if prop_block.startswith("["):
            values = re.findall(r"""["']([^"']+)["']""", prop_block)
            variants[prop_name] = {value: VariantOption() for value in values}
            continue
        options: dict[str, VariantOption] = {}
        for value, value_block in _object_entries(prop_block):
            classes = " ".join((_string_field(value_block, "classes") or "").split())
            options[value] = VariantOption(
                classes=classes,
                description=_string_field(value_block, "description") or "",
                state_classes=extract_state_classes(classes),
            )
        variants[prop_name] = options
    return variants


def parse_defaults_object(block: str) -> dict[str, str]:
    """Read ``{prop: "value"}`` pairs from a default-variants block; keys may be quoted."""
    return {
        m.group("double") or m.group("single") or m.group("bare"): m.group("value")
        for m in _DEFAULT_RE.finditer(block)
    }


def _parse_styling(block: str | None) -> dict[str, Any] | None:
    if block is None:
        return None
    try:
        styling = parse_literal(block)
    except LiteralParseError as e:
        logger.debug("Ignoring styling block that is not a data literal: %s", e)
        return None
    return styling if isinstance(styling, dict) else None


def extract(source: str) -> ExtractedVariants | None:
    """Extract variant metadata from *source*.

    Returns None unless both the variants and the default-variants tables
    are present. An empty variants table is fine.
    """
    constants = find_exported_constants(source)
    if constants.variants is None or constants.defaults is None:
        return None
    return ExtractedVariants(
        variants=parse_variants_object(constants.variants),
        defaults=parse_defaults_object(constants.defaults),
        base_styles=constants.base_styles or None,
        styling=_parse_styling(constants.styling),
    )


def extract_file(path: Path) -> ExtractedVariants | None:
    """Like :func:`extract`, treating unreadable files as a miss."""
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Cannot read %s: %s", path, e)
        return None
    return extract(source)
