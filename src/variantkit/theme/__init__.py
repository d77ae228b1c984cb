from variantkit.theme.colors import RGBA, parse_color
from variantkit.theme.errors import ThemeError
from variantkit.theme.loader import (
    DEFAULT_THEME_PATH,
    THEME_ENV_VAR,
    configure_theme,
    get_theme,
    load_theme,
    reset_theme,
    theme_from_dict,
)
from variantkit.theme.migrate import LineChange, TokenRenameMap, migrate_content, token_rename_map
from variantkit.theme.model import ColorMode, ColorToken, Theme, TypographyToken
from variantkit.theme.units import as_number, parse_length

__all__ = [
    "DEFAULT_THEME_PATH",
    "THEME_ENV_VAR",
    "RGBA",
    "ColorMode",
    "ColorToken",
    "LineChange",
    "Theme",
    "ThemeError",
    "TokenRenameMap",
    "TypographyToken",
    "as_number",
    "configure_theme",
    "get_theme",
    "load_theme",
    "migrate_content",
    "parse_color",
    "parse_length",
    "reset_theme",
    "theme_from_dict",
    "token_rename_map",
]
