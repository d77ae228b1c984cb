"""Registry document model: props, components, blocks and the registry itself.

Python attributes are snake_case; ``to_dict`` produces the camelCase JSON
shape consumed by documentation tooling and the variant-set generator.
Optional fields are omitted from the JSON form when empty.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ComponentType(str, Enum):
    """Where a registry entry comes from."""

    COMPONENT = "component"
    BLOCK = "block"


@dataclass(frozen=True)
class PropSchema:
    """One documented prop.

    Variant props carry ``values`` plus per-value ``descriptions``,
    ``classes`` and ``state_classes`` (value -> state -> raw class string).
    """

    type: str
    required: bool = False
    default: str | None = None
    description: str = ""
    values: list[str] = field(default_factory=list)
    descriptions: dict[str, str] = field(default_factory=dict)
    classes: dict[str, str] = field(default_factory=dict)
    state_classes: dict[str, dict[str, str]] = field(default_factory=dict)

    @property
    def is_variant(self) -> bool:
        return bool(self.values)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type}
        if self.required:
            data["required"] = True
        else:
            data["optional"] = True
        if self.default is not None:
            data["default"] = self.default
        if self.description:
            data["description"] = self.description
        if self.values:
            data["values"] = list(self.values)
        if self.descriptions:
            data["descriptions"] = dict(self.descriptions)
        if self.classes:
            data["classes"] = dict(self.classes)
        if self.state_classes:
            data["stateClasses"] = {k: dict(v) for k, v in self.state_classes.items()}
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PropSchema:
        return cls(
            type=data.get("type", "unknown"),
            required=bool(data.get("required", False)),
            default=data.get("default"),
            description=data.get("description", ""),
            values=list(data.get("values", [])),
            descriptions=dict(data.get("descriptions", {})),
            classes=dict(data.get("classes", {})),
            state_classes={k: dict(v) for k, v in data.get("stateClasses", {}).items()},
        )


def _props_to_dict(props: dict[str, PropSchema]) -> dict[str, Any]:
    return {name: prop.to_dict() for name, prop in props.items()}


def _props_from_dict(data: dict[str, Any]) -> dict[str, PropSchema]:
    return {name: PropSchema.from_dict(prop) for name, prop in data.items()}


@dataclass(frozen=True)
class SubComponentSchema:
    """A member of a compound component, e.g. ``Dialog.Trigger``."""

    name: str
    description: str
    props: dict[str, PropSchema] = field(default_factory=dict)
    is_pass_through: bool = False
    base_component: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "props": _props_to_dict(self.props),
        }
        if self.is_pass_through:
            data["isPassThrough"] = True
        if self.base_component:
            data["baseComponent"] = self.base_component
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SubComponentSchema:
        return cls(
            name=data["name"],
            description=data.get("description", ""),
            props=_props_from_dict(data.get("props", {})),
            is_pass_through=bool(data.get("isPassThrough", False)),
            base_component=data.get("baseComponent"),
        )


@dataclass(frozen=True)
class ComponentSchema:
    """Everything the registry records about one component."""

    name: str
    type: ComponentType = ComponentType.COMPONENT
    description: str = ""
    import_path: str = ""
    category: str = "Other"
    props: dict[str, PropSchema] = field(default_factory=dict)
    examples: list[str] = field(default_factory=list)
    colors: list[str] = field(default_factory=list)
    base_styles: str | None = None
    styling: dict[str, Any] | None = None
    sub_components: dict[str, SubComponentSchema] = field(default_factory=dict)

    @property
    def variant_props(self) -> dict[str, PropSchema]:
        """Props with an enumerated value set and per-value classes."""
        return {name: prop for name, prop in self.props.items() if prop.values and any(prop.classes.values())}

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "type": self.type.value,
            "description": self.description,
            "importPath": self.import_path,
            "category": self.category,
            "props": _props_to_dict(self.props),
            "examples": list(self.examples),
            "colors": list(self.colors),
        }
        if self.base_styles:
            data["baseStyles"] = self.base_styles
        if self.sub_components:
            data["subComponents"] = {k: v.to_dict() for k, v in self.sub_components.items()}
        if self.styling is not None:
            data["styling"] = self.styling
        return data

    @classmethod
    def _common_fields(cls, data: dict[str, Any]) -> dict[str, Any]:
        return {
            "name": data["name"],
            "type": ComponentType(data.get("type", "component")),
            "description": data.get("description", ""),
            "import_path": data.get("importPath", ""),
            "category": data.get("category", "Other"),
            "props": _props_from_dict(data.get("props", {})),
            "examples": list(data.get("examples", [])),
            "colors": list(data.get("colors", [])),
            "base_styles": data.get("baseStyles"),
            "styling": data.get("styling"),
            "sub_components": {
                k: SubComponentSchema.from_dict(v) for k, v in data.get("subComponents", {}).items()
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ComponentSchema:
        return cls(**cls._common_fields(data))


@dataclass(frozen=True)
class BlockSchema(ComponentSchema):
    """A composite component installed by copying its files."""

    type: ComponentType = ComponentType.BLOCK
    files: list[str] = field(default_factory=list)
    dependencies: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["files"] = list(self.files)
        data["dependencies"] = list(self.dependencies)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BlockSchema:
        return cls(
            **cls._common_fields(data),
            files=list(data.get("files", [])),
            dependencies=list(data.get("dependencies", [])),
        )


def schema_from_dict(data: dict[str, Any]) -> ComponentSchema:
    """Rebuild a component or block schema from its JSON form."""
    if data.get("type") == ComponentType.BLOCK.value:
        return BlockSchema.from_dict(data)
    return ComponentSchema.from_dict(data)


@dataclass(frozen=True)
class SearchIndex:
    """Lookup tables derived from the component set."""

    by_category: dict[str, list[str]] = field(default_factory=dict)
    by_name: list[str] = field(default_factory=list)
    by_type: dict[str, list[str]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "byCategory": {k: list(v) for k, v in self.by_category.items()},
            "byName": list(self.by_name),
            "byType": {k: list(v) for k, v in self.by_type.items()},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SearchIndex:
        return cls(
            by_category={k: list(v) for k, v in data.get("byCategory", {}).items()},
            by_name=list(data.get("byName", [])),
            by_type={k: list(v) for k, v in data.get("byType", {}).items()},
        )


@dataclass(frozen=True)
class ComponentRegistry:
    """The versioned registry document."""

    version: str
    components: dict[str, ComponentSchema] = field(default_factory=dict)
    blocks: dict[str, BlockSchema] = field(default_factory=dict)
    search: SearchIndex = field(default_factory=SearchIndex)

    def get(self, name: str) -> ComponentSchema | None:
        """Look a component or block up by name."""
        return self.components.get(name) or self.blocks.get(name)

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "components": {k: v.to_dict() for k, v in self.components.items()},
            "blocks": {k: v.to_dict() for k, v in self.blocks.items()},
            "search": self.search.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ComponentRegistry:
        return cls(
            version=str(data.get("version", "")),
            components={k: ComponentSchema.from_dict(v) for k, v in data.get("components", {}).items()},
            blocks={k: BlockSchema.from_dict(v) for k, v in data.get("blocks", {}).items()},
            search=SearchIndex.from_dict(data.get("search", {})),
        )
