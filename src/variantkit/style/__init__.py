from variantkit.style.descriptor import PROPERTY_NAMES, UNSET, StyleDescriptor
from variantkit.style.resolver import Outcome, classify, resolve, unrecognized_tokens
from variantkit.style.states import STATE_NAMES, split_variant_prefix, state_for_prefix

__all__ = [
    "PROPERTY_NAMES",
    "STATE_NAMES",
    "UNSET",
    "Outcome",
    "StyleDescriptor",
    "classify",
    "resolve",
    "split_variant_prefix",
    "state_for_prefix",
    "unrecognized_tokens",
]
