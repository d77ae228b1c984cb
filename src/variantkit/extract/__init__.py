from variantkit.extract.blocks import block_files, extract_block_dependencies
from variantkit.extract.colors import COLOR_UTILITY_PREFIXES, extract_semantic_colors
from variantkit.extract.errors import LiteralParseError
from variantkit.extract.jsdoc import extract_description
from variantkit.extract.literal import parse_literal
from variantkit.extract.naming import to_pascal_case, to_screaming_snake_case
from variantkit.extract.props import extract_props_from_interface, should_skip_prop
from variantkit.extract.scanner import (
    ExportedConstants,
    extract_balanced_braces,
    find_exported_constants,
)
from variantkit.extract.stories import (
    cleanup_example,
    example_signature,
    extract_story_examples,
    should_include_example,
)
from variantkit.extract.subcomponents import detect_sub_components
from variantkit.extract.variants import (
    ExtractedVariants,
    VariantOption,
    extract,
    extract_file,
    extract_state_classes,
)

__all__ = [
    "COLOR_UTILITY_PREFIXES",
    "ExportedConstants",
    "ExtractedVariants",
    "LiteralParseError",
    "VariantOption",
    "block_files",
    "cleanup_example",
    "detect_sub_components",
    "example_signature",
    "extract",
    "extract_balanced_braces",
    "extract_block_dependencies",
    "extract_description",
    "extract_file",
    "extract_props_from_interface",
    "extract_semantic_colors",
    "extract_state_classes",
    "extract_story_examples",
    "find_exported_constants",
    "parse_literal",
    "should_include_example",
    "should_skip_prop",
    "to_pascal_case",
    "to_screaming_snake_case",
]
