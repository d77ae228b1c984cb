from variantkit.model.schema import (
    BlockSchema,
    ComponentRegistry,
    ComponentSchema,
    ComponentType,
    PropSchema,
    SearchIndex,
    SubComponentSchema,
    schema_from_dict,
)

__all__ = [
    "BlockSchema",
    "ComponentRegistry",
    "ComponentSchema",
    "ComponentType",
    "PropSchema",
    "SearchIndex",
    "SubComponentSchema",
    "schema_from_dict",
]
