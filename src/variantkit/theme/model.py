"""Theme model: semantic color tokens, typography tokens and numeric scales."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ColorMode:
    """Light and dark values for one token in one theme."""

    light: str
    dark: str


@dataclass(frozen=True)
class ColorToken:
    """A semantic color token.

    Attributes:
        name: Token name as used in utility classes (``kumo-brand``).
        themes: Theme name -> light/dark values. The base theme is always present.
        new_name: Planned replacement name, empty when no migration is planned.
        description: Free-form documentation text.
    """

    name: str
    themes: dict[str, ColorMode]
    new_name: str = ""
    description: str = ""


@dataclass(frozen=True)
class TypographyToken:
    """A font size or line height token with a raw CSS value per theme."""

    name: str
    themes: dict[str, str]
    new_name: str = ""
    description: str = ""


@dataclass(frozen=True)
class Theme:
    """Read-only lookup tables consumed by the style resolver and the variable sync.

    ``colors`` backs ``bg-*``, ``border-*`` and ``ring-*`` utilities, ``text``
    backs ``text-*`` color utilities. Scales are in pixels.
    """

    base_theme: str
    colors: dict[str, ColorToken]
    text: dict[str, ColorToken]
    typography: dict[str, TypographyToken] = field(default_factory=dict)
    spacing_unit_px: float = 4
    spacing_scale: dict[str, float] = field(default_factory=dict)
    radius_scale: dict[str, float] = field(default_factory=dict)
    font_size_scale: dict[str, float] = field(default_factory=dict)
    font_weight_scale: dict[str, int] = field(default_factory=dict)
    opacity_modifiers: dict[str, list[int]] = field(default_factory=dict)

    # --- name lookups ---------------------------------------------------------

    @property
    def color_names(self) -> list[str]:
        return sorted(self.colors)

    @property
    def text_color_names(self) -> list[str]:
        return sorted(self.text)

    @property
    def semantic_names(self) -> list[str]:
        """Every semantic name usable after a color utility prefix."""
        return sorted(set(self.colors) | set(self.text))

    @property
    def theme_names(self) -> list[str]:
        """All theme names, base theme first."""
        names: set[str] = set()
        for token in [*self.colors.values(), *self.text.values()]:
            names.update(token.themes)
        names.discard(self.base_theme)
        return [self.base_theme, *sorted(names)]

    def fill_variable(self, name: str) -> str | None:
        """Variable name bound by ``bg-{name}`` / ``border-{name}``, or None if unknown."""
        if name in self.colors:
            return f"color-{name}"
        return None

    def text_variable(self, name: str) -> str | None:
        """Variable name bound by ``text-{name}``, or None if unknown."""
        if name in self.text:
            return f"text-color-{name}"
        if name in self.colors:
            return f"color-{name}"
        return None
