"""Turn a theme into the variables pushed to the design tool.

Color variables carry light/dark values from the base theme. Every other
theme becomes an extension mode that overrides tokens with its light
value. Opacity modifiers listed in the theme become extra ``color-x/NN``
variables with the alpha baked in, matching the variable names the style
resolver binds for ``bg-x/NN`` utilities.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from variantkit.theme import RGBA, ColorToken, Theme, parse_color, parse_length

__all__ = [
    "ColorVariable",
    "ExtensionMode",
    "FloatVariable",
    "VariablePlan",
    "build_plan",
    "color_variables",
    "extension_modes",
    "opacity_variants",
    "typography_variables",
]


@dataclass(frozen=True)
class ColorVariable:
    name: str
    light: RGBA
    dark: RGBA


@dataclass(frozen=True)
class FloatVariable:
    name: str
    value: float


@dataclass(frozen=True)
class ExtensionMode:
    """A non-base theme: token name -> color used for both light and dark."""

    name: str
    overrides: dict[str, RGBA] = field(default_factory=dict)


@dataclass(frozen=True)
class VariablePlan:
    """Everything one sync creates."""

    colors: list[ColorVariable]
    extensions: list[ExtensionMode]
    typography: list[FloatVariable]

    @property
    def total(self) -> int:
        return len(self.colors) + len(self.typography)


def _sections(theme: Theme) -> list[tuple[str, dict[str, ColorToken]]]:
    return [("text-color-", theme.text), ("color-", theme.colors)]


def color_variables(theme: Theme) -> list[ColorVariable]:
    """Base-theme variables: text tokens first, then fill tokens."""
    variables = []
    for prefix, tokens in _sections(theme):
        for name, token in tokens.items():
            mode = token.themes[theme.base_theme]
            variables.append(
                ColorVariable(
                    name=f"{prefix}{name}",
                    light=parse_color(mode.light),
                    dark=parse_color(mode.dark),
                )
            )
    return variables


def opacity_variants(variables: list[ColorVariable], modifiers: dict[str, list[int]]) -> list[ColorVariable]:
    variants = []
    for variable in variables:
        if not variable.name.startswith("color-"):
            continue
        for level in modifiers.get(variable.name[len("color-") :], []):
            alpha = level / 100
            variants.append(
                ColorVariable(
                    name=f"{variable.name}/{level}",
                    light=variable.light.with_alpha(alpha),
                    dark=variable.dark.with_alpha(alpha),
                )
            )
    return variants


def extension_modes(theme: Theme) -> list[ExtensionMode]:
    """One mode per non-base theme that overrides at least one token."""
    modes = []
    for theme_name in theme.theme_names[1:]:
        overrides: dict[str, RGBA] = {}
        for prefix, tokens in _sections(theme):
            for name, token in tokens.items():
                if theme_name in token.themes:
                    overrides[f"{prefix}{name}"] = parse_color(token.themes[theme_name].light)
        if overrides:
            modes.append(ExtensionMode(name=theme_name, overrides=overrides))
    return modes


def typography_variables(theme: Theme) -> list[FloatVariable]:
    return [
        FloatVariable(name=name, value=parse_length(token.themes[theme.base_theme]))
        for name, token in theme.typography.items()
    ]


def build_plan(theme: Theme) -> VariablePlan:
    colors = color_variables(theme)
    return VariablePlan(
        colors=[*colors, *opacity_variants(colors, theme.opacity_modifiers)],
        extensions=extension_modes(theme),
        typography=typography_variables(theme),
    )
