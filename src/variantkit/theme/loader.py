"""Theme file loading and the process-wide theme.

The theme is read once, lazily, on the first call to :func:`get_theme` and is
never reloaded within a run. Tests call :func:`reset_theme` between cases.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from variantkit.theme.colors import parse_color
from variantkit.theme.errors import ThemeError
from variantkit.theme.model import ColorMode, ColorToken, Theme, TypographyToken
from variantkit.theme.units import as_number, parse_length

__all__ = [
    "DEFAULT_THEME_PATH",
    "THEME_ENV_VAR",
    "configure_theme",
    "get_theme",
    "load_theme",
    "reset_theme",
    "theme_from_dict",
]

logger = logging.getLogger(__name__)

DEFAULT_THEME_PATH = Path(__file__).parent / "default_theme.json"
THEME_ENV_VAR = "VARIANTKIT_THEME"

# Standard spacing keys; "6.5" is a library-specific addition.
SPACING_KEYS = [
    "0.5", "1", "1.5", "2", "2.5", "3", "3.5", "4", "5", "6", "6.5", "7", "8",
    "9", "10", "11", "12", "14", "16", "20", "24", "28", "32", "36", "40",
    "44", "48", "52", "56", "60", "64", "72", "80", "96",
]

DEFAULT_RADIUS: dict[str, float] = {
    "xs": 2, "sm": 4, "md": 6, "lg": 8, "xl": 12, "2xl": 16, "3xl": 24, "4xl": 32,
}

DEFAULT_FONT_SIZE: dict[str, float] = {
    "xs": 12, "sm": 14, "base": 16, "lg": 18, "xl": 20, "2xl": 24, "3xl": 30,
    "4xl": 36, "5xl": 48, "6xl": 60, "7xl": 72, "8xl": 96, "9xl": 128,
}

DEFAULT_FONT_WEIGHT: dict[str, int] = {
    "thin": 100, "extralight": 200, "light": 300, "normal": 400, "medium": 500,
    "semibold": 600, "bold": 700, "extrabold": 800, "black": 900,
}

_theme: Theme | None = None
_theme_path: Path | None = None


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _length(raw: Any, where: str) -> int | float:
    try:
        return parse_length(raw)
    except (TypeError, ValueError) as exc:
        raise ThemeError(f"{where}: {exc}") from exc


def _color_tokens(raw: Any, section: str, base_theme: str) -> dict[str, ColorToken]:
    if not isinstance(raw, dict):
        raise ThemeError(f"'{section}' must be an object")
    tokens: dict[str, ColorToken] = {}
    for name, definition in raw.items():
        where = f"{section}.{name}"
        if not isinstance(definition, dict) or not isinstance(definition.get("theme"), dict):
            raise ThemeError(f"{where}: expected an object with a 'theme' table")
        themes: dict[str, ColorMode] = {}
        for theme_name, values in definition["theme"].items():
            if not isinstance(values, dict) or "light" not in values:
                raise ThemeError(f"{where}.{theme_name}: expected light/dark values")
            light = str(values["light"])
            dark = str(values.get("dark", light))
            for mode_value in (light, dark):
                try:
                    parse_color(mode_value)
                except ValueError as exc:
                    raise ThemeError(f"{where}.{theme_name}: {exc}") from exc
            themes[theme_name] = ColorMode(light=light, dark=dark)
        if base_theme not in themes:
            raise ThemeError(f"{where}: missing base theme '{base_theme}'")
        tokens[name] = ColorToken(
            name=name,
            themes=themes,
            new_name=str(definition.get("newName", "")),
            description=str(definition.get("description", "")),
        )
    return tokens


def _typography_tokens(raw: Any, base_theme: str) -> dict[str, TypographyToken]:
    if not isinstance(raw, dict):
        raise ThemeError("'typography' must be an object")
    tokens: dict[str, TypographyToken] = {}
    for name, definition in raw.items():
        where = f"typography.{name}"
        if not isinstance(definition, dict) or not isinstance(definition.get("theme"), dict):
            raise ThemeError(f"{where}: expected an object with a 'theme' table")
        themes = {k: str(v) for k, v in definition["theme"].items()}
        if base_theme not in themes:
            raise ThemeError(f"{where}: missing base theme '{base_theme}'")
        for theme_name, value in themes.items():
            _length(value, f"{where}.{theme_name}")
        tokens[name] = TypographyToken(
            name=name,
            themes=themes,
            new_name=str(definition.get("newName", "")),
            description=str(definition.get("description", "")),
        )
    return tokens


def _table(parent: dict[str, Any], key: str) -> dict[str, Any]:
    value = parent.get(key, {})
    if not isinstance(value, dict):
        raise ThemeError(f"'{key}' must be an object")
    return value


def _spacing_scale(unit_px: float) -> dict[str, float]:
    scale: dict[str, float] = {"0": 0, "px": 1}
    for key in SPACING_KEYS:
        scale[key] = as_number(float(key) * unit_px)
    return scale


def theme_from_dict(data: Any) -> Theme:
    """Build a Theme from decoded theme-file JSON, validating as it goes."""
    if not isinstance(data, dict):
        raise ThemeError("theme file must contain a JSON object")

    base_theme = str(data.get("baseTheme", "kumo"))
    colors = _color_tokens(data.get("color", {}), "color", base_theme)
    text = _color_tokens(data.get("text", {}), "text", base_theme)
    typography = _typography_tokens(data.get("typography", {}), base_theme)

    scales = data.get("scales", {})
    if not isinstance(scales, dict):
        raise ThemeError("'scales' must be an object")

    spacing_unit = _length(scales.get("spacing", "0.25rem"), "scales.spacing")

    radius = dict(DEFAULT_RADIUS)
    for key, value in _table(scales, "radius").items():
        radius[key] = _length(value, f"scales.radius.{key}")

    font_size = dict(DEFAULT_FONT_SIZE)
    for token in typography.values():
        size = token.name.removeprefix("text-")
        if token.name.startswith("text-") and "--" not in size:
            font_size[size] = parse_length(token.themes[base_theme])
    for key, value in _table(scales, "fontSize").items():
        font_size[key] = _length(value, f"scales.fontSize.{key}")

    font_weight = dict(DEFAULT_FONT_WEIGHT)
    for key, value in _table(scales, "fontWeight").items():
        if not isinstance(value, int) or isinstance(value, bool):
            raise ThemeError(f"scales.fontWeight.{key}: expected an integer")
        font_weight[key] = value

    opacity_modifiers: dict[str, list[int]] = {}
    for name, levels in _table(data, "opacityModifiers").items():
        if not isinstance(levels, list) or not all(
            isinstance(level, int) and 0 <= level <= 100 for level in levels
        ):
            raise ThemeError(f"opacityModifiers.{name}: expected integers 0-100")
        opacity_modifiers[name] = list(levels)

    return Theme(
        base_theme=base_theme,
        colors=colors,
        text=text,
        typography=typography,
        spacing_unit_px=spacing_unit,
        spacing_scale=_spacing_scale(spacing_unit),
        radius_scale=radius,
        font_size_scale=font_size,
        font_weight_scale=font_weight,
        opacity_modifiers=opacity_modifiers,
    )


def load_theme(path: Path | str) -> Theme:
    """Read and validate the theme file at *path*."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ThemeError(f"cannot read theme file: {exc}", path=str(path)) from exc
    except json.JSONDecodeError as exc:
        raise ThemeError(f"invalid JSON: {exc}", path=str(path)) from exc
    try:
        return theme_from_dict(data)
    except ThemeError as exc:
        raise ThemeError(str(exc), path=str(path)) from exc


# ---------------------------------------------------------------------------
# Process-wide theme
# ---------------------------------------------------------------------------


def configure_theme(path: Path | str | None) -> None:
    """Point the process-wide theme at *path*; takes effect on the next get_theme()."""
    global _theme, _theme_path
    _theme_path = Path(path) if path is not None else None
    _theme = None


def get_theme() -> Theme:
    """Return the process-wide theme, loading it on first use."""
    global _theme
    if _theme is None:
        path = _theme_path
        if path is None:
            env_path = os.environ.get(THEME_ENV_VAR)
            path = Path(env_path) if env_path else DEFAULT_THEME_PATH
        _theme = load_theme(path)
        logger.debug(
            "Loaded theme %s: %d color, %d text tokens",
            path,
            len(_theme.colors),
            len(_theme.text),
        )
    return _theme


def reset_theme() -> None:
    """Forget the loaded theme and any configured path."""
    configure_theme(None)
