"""Compound component detection (``Dialog.Root``, ``Breadcrumb.Link`` ...)."""

from __future__ import annotations

import re

from variantkit.extract.props import extract_props_from_block, extract_props_from_interface
from variantkit.extract.scanner import extract_balanced_braces
from variantkit.model import PropSchema, SubComponentSchema

__all__ = ["detect_sub_components", "extract_sub_component_props"]

# Object.assign(Base, {  /  Object.assign(Some.Root, {
_OBJECT_ASSIGN_RE = re.compile(r"Object\.assign\s*\(\s*[\w.]+\s*,\s*(?=\{)")
_ASSIGN_KEY_RE = re.compile(r"^\s*(\w+)\s*[,:]", re.MULTILINE)
# Breadcrumb.Link = Link;  at module level
_DIRECT_ASSIGN_RE = re.compile(r"^([A-Z]\w+)\.([A-Z]\w+)\s*=\s*(\w+)\s*;", re.MULTILINE)

_NOT_COMPONENTS = {"classes", "const", "let", "var", "function", "description"}


def _function_props_type(source: str, function_name: str) -> str | None:
    pattern = re.compile(
        rf"function\s+{re.escape(function_name)}\s*(?:<[^>]*>)?\s*\([^)]*:\s*(\w+Props)"
    )
    match = pattern.search(source)
    return match.group(1) if match else None


def detect_sub_components(source: str) -> list[SubComponentSchema]:
    """Find sub-components attached via ``Object.assign`` or ``Parent.Sub = X;``.

    Values with a dot (``DialogBase.Root``) are pass-throughs to a base
    library component. Props are filled in for local implementations only.
    """
    found: dict[str, SubComponentSchema] = {}

    for start in _OBJECT_ASSIGN_RE.finditer(source):
        block = extract_balanced_braces(source, start.end())
        if block is None:
            continue
        for key in _ASSIGN_KEY_RE.finditer(block[1:-1]):
            sub_name = key.group(1)
            if sub_name in _NOT_COMPONENTS or not sub_name[0].isupper() or sub_name in found:
                continue
            value_match = re.search(rf"\b{sub_name}\s*:\s*(\w+(?:\.\w+)?)", block)
            value = value_match.group(1) if value_match else sub_name
            is_pass_through = "." in value
            if is_pass_through:
                description = f"{sub_name} sub-component (wraps {value.split('.')[0]})"
            else:
                description = f"{sub_name} sub-component"
            sub = SubComponentSchema(
                name=sub_name,
                description=description,
                is_pass_through=is_pass_through,
                base_component=value if is_pass_through else None,
            )
            found[sub_name] = _with_props(sub, source, value)

    for match in _DIRECT_ASSIGN_RE.finditer(source):
        sub_name, value = match.group(2), match.group(3)
        if sub_name == "displayName" or sub_name in found:
            continue
        sub = SubComponentSchema(name=sub_name, description=f"{sub_name} sub-component")
        found[sub_name] = _with_props(sub, source, value)

    return list(found.values())


def _with_props(sub: SubComponentSchema, source: str, implementation: str) -> SubComponentSchema:
    if sub.is_pass_through:
        return sub
    props = extract_sub_component_props(source, implementation)
    if not props:
        return sub
    return SubComponentSchema(
        name=sub.name,
        description=sub.description,
        props=props,
        is_pass_through=sub.is_pass_through,
        base_component=sub.base_component,
    )


def extract_sub_component_props(source: str, function_name: str) -> dict[str, PropSchema]:
    """Props of a local sub-component implementation.

    Tries, in order: an inline object type in the signature (optionally
    wrapped in ``PropsWithChildren<...>``), a named props interface in the
    signature, and finally ``function X(...: XProps)``.
    """
    name = re.escape(function_name)
    signature = re.compile(
        rf"(?:function\s+{name}\s*(?:<[^>]*>)?|const\s+{name}\s*=\s*(?:\w+\()?)\s*\((?P<params>[^)]*)\)"
    ).search(source)
    if signature:
        params = signature.group("params")
        inline = re.search(r":\s*(?:PropsWithChildren<)?\s*(?=\{)", params)
        if inline:
            block = extract_balanced_braces(params, inline.end())
            if block is not None:
                props = extract_props_from_block(block[1:-1])
                if props:
                    return props
        named = re.search(r":\s*(?:PropsWithChildren<)?\s*(\w+)\s*>?\s*$", params.strip())
        if named:
            props = extract_props_from_interface(source, named.group(1))
            if props:
                return props

    props_type = _function_props_type(source, function_name)
    if props_type:
        return extract_props_from_interface(source, props_type)
    return {}
