"""Prop discovery from TypeScript interfaces, with inherited DOM props filtered out."""

from __future__ import annotations

import re

from variantkit.extract.scanner import extract_balanced_braces
from variantkit.model import PropSchema

__all__ = [
    "ALWAYS_SKIP_PROPS",
    "KEEP_PROPS",
    "INHERITED_HTML_PROPS",
    "extract_props_from_block",
    "extract_props_from_interface",
    "should_skip_prop",
]

ALWAYS_SKIP_PROPS = {"key", "ref", "style", "dangerouslySetInnerHTML"}

SKIP_PROP_PREFIXES = ("aria-", "data-", "on")

KEEP_PROPS = {
    "children", "className", "disabled", "name", "value", "checked", "required",
    "placeholder", "readOnly", "type", "label", "href", "lang",
}

# Common HTML attributes that every DOM-backed component inherits.
INHERITED_HTML_PROPS = {
    "accessKey", "autoCapitalize", "autoFocus", "contentEditable", "dir",
    "draggable", "hidden", "spellCheck", "tabIndex", "translate", "autocomplete",
    "autofocus", "form", "formAction", "formEncType", "formMethod",
    "formNoValidate", "formTarget", "max", "maxLength", "min", "minLength",
    "multiple", "pattern", "step", "accept", "capture", "crossOrigin", "loop",
    "muted", "preload", "poster", "src", "srcSet",
    "suppressContentEditableWarning", "suppressHydrationWarning",
    "defaultChecked", "defaultValue", "about", "content", "datatype", "inlist",
    "prefix", "property", "rel", "resource", "rev", "typeof", "vocab", "itemID",
    "itemProp", "itemRef", "itemScope", "itemType", "autoCorrect", "autoSave",
    "color", "results", "security", "unselectable", "popover", "popoverTarget",
    "popoverTargetAction", "is", "slot", "part", "exportparts", "contextMenu",
    "enterKeyHint", "inputMode", "inert", "nonce", "radioGroup", "role",
}

# [/** doc */] name?: Type   /   name: Type
_PROP_RE = re.compile(
    r"""
    (?:/\*\*(?P<doc>(?:(?!\*/).)*?)\*/\s*)?
    (?P<name>\w+)(?P<optional>\?)?:\s*
    (?P<type>[^;,\n}]+)
    """,
    re.VERBOSE | re.DOTALL,
)
_PLAIN_COMMENT_RE = re.compile(r"//[^\n]*|/\*(?!\*)(?:(?!\*/).)*\*/", re.DOTALL)


def _doc_text(raw: str | None) -> str:
    if not raw:
        return ""
    lines = [line.strip().lstrip("*").strip() for line in raw.splitlines()]
    return " ".join(line for line in lines if line and not line.startswith("@"))


def should_skip_prop(name: str) -> bool:
    """True for React internals, handlers, ARIA/data attributes and inherited HTML props."""
    if name in KEEP_PROPS:
        return False
    if name in ALWAYS_SKIP_PROPS:
        return True
    if name.startswith(SKIP_PROP_PREFIXES):
        return True
    return name in INHERITED_HTML_PROPS


def extract_props_from_block(block: str) -> dict[str, PropSchema]:
    """Parse ``name?: Type`` members of an inline type or interface body."""
    props: dict[str, PropSchema] = {}
    for match in _PROP_RE.finditer(_PLAIN_COMMENT_RE.sub("", block)):
        name = match.group("name")
        if should_skip_prop(name):
            continue
        prop_type = match.group("type").strip().rstrip(",;").strip()
        props[name] = PropSchema(
            type=prop_type,
            required=match.group("optional") != "?",
            description=_doc_text(match.group("doc")),
        )
    return props


def extract_props_from_interface(source: str, interface_name: str) -> dict[str, PropSchema]:
    """Props declared by ``interface <interface_name> { ... }`` in *source*."""
    pattern = re.compile(rf"interface\s+{re.escape(interface_name)}\b\s*(?:<[^>]*>)?\s*(?:extends[^{{]*)?(?=\{{)")
    match = pattern.search(source)
    if not match:
        return {}
    block = extract_balanced_braces(source, match.end())
    if block is None:
        return {}
    return extract_props_from_block(block[1:-1])
