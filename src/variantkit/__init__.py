"""variantkit: utility-class styles to component registries and design-tool variants."""

__version__ = "0.4.0"
