"""Tests for theme loading, color parsing and length parsing."""

import json

import pytest

from variantkit.theme import (
    RGBA,
    THEME_ENV_VAR,
    ThemeError,
    configure_theme,
    get_theme,
    load_theme,
    parse_color,
    parse_length,
    theme_from_dict,
)


def _minimal(**extra) -> dict:
    data = {
        "baseTheme": "kumo",
        "color": {
            "kumo-brand": {"newName": "", "theme": {"kumo": {"light": "#0051c3", "dark": "#1d6fe5"}}},
        },
        "text": {
            "kumo-default": {"newName": "", "theme": {"kumo": {"light": "#000", "dark": "#fff"}}},
        },
    }
    data.update(extra)
    return data


# ---------------------------------------------------------------------------
# Color parsing
# ---------------------------------------------------------------------------


class TestParseColor:
    def test_six_digit_hex(self):
        assert parse_color("#ff0000") == RGBA(1.0, 0.0, 0.0, 1.0)

    def test_three_digit_hex(self):
        assert parse_color("#fff") == RGBA(1.0, 1.0, 1.0, 1.0)

    def test_eight_digit_hex_alpha(self):
        color = parse_color("#00000080")
        assert color.a == pytest.approx(128 / 255)

    def test_rgb_commas(self):
        assert parse_color("rgb(255, 0, 0)") == RGBA(1.0, 0.0, 0.0, 1.0)

    def test_rgb_slash_alpha_percent(self):
        color = parse_color("rgb(0 0 0 / 40%)")
        assert color.a == pytest.approx(0.4)

    def test_rgba(self):
        assert parse_color("rgba(0, 0, 255, 0.5)").a == pytest.approx(0.5)

    def test_oklch_white(self):
        color = parse_color("oklch(100% 0 0)")
        assert color.r == pytest.approx(1.0, abs=1e-3)
        assert color.g == pytest.approx(1.0, abs=1e-3)
        assert color.b == pytest.approx(1.0, abs=1e-3)

    def test_oklch_black(self):
        color = parse_color("oklch(0% 0 0)")
        assert (color.r, color.g, color.b) == (0.0, 0.0, 0.0)

    def test_var_uses_fallback(self):
        assert parse_color("var(--color-x, #000000)") == RGBA(0.0, 0.0, 0.0, 1.0)

    def test_named(self):
        assert parse_color("transparent").a == 0.0

    def test_unsupported_raises(self):
        with pytest.raises(ValueError):
            parse_color("hsl(0 100% 50%)")


# ---------------------------------------------------------------------------
# Length parsing
# ---------------------------------------------------------------------------


class TestParseLength:
    def test_px(self):
        assert parse_length("13px") == 13

    def test_rem(self):
        assert parse_length("0.875rem") == 14

    def test_plain_number(self):
        assert parse_length(12) == 12

    def test_calc_division(self):
        assert parse_length("calc(1.5 / 1)") == 1.5

    def test_calc_with_units(self):
        assert parse_length("calc(1rem + 2px)") == 18

    def test_integral_results_are_ints(self):
        assert isinstance(parse_length("1rem"), int)

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_length("large")

    def test_division_by_zero(self):
        with pytest.raises(ValueError):
            parse_length("calc(1 / 0)")


# ---------------------------------------------------------------------------
# Theme documents
# ---------------------------------------------------------------------------


class TestThemeFromDict:
    def test_minimal(self):
        theme = theme_from_dict(_minimal())
        assert theme.color_names == ["kumo-brand"]
        assert theme.text_color_names == ["kumo-default"]
        assert theme.spacing_unit_px == 4

    def test_dark_defaults_to_light(self):
        data = _minimal()
        data["color"]["kumo-brand"]["theme"]["kumo"] = {"light": "#123456"}
        theme = theme_from_dict(data)
        assert theme.colors["kumo-brand"].themes["kumo"].dark == "#123456"

    def test_invalid_color_value(self):
        data = _minimal()
        data["color"]["kumo-brand"]["theme"]["kumo"]["light"] = "not-a-color"
        with pytest.raises(ThemeError, match="color.kumo-brand.kumo"):
            theme_from_dict(data)

    def test_missing_base_theme(self):
        data = _minimal()
        data["color"]["kumo-brand"]["theme"] = {"other": {"light": "#000"}}
        with pytest.raises(ThemeError, match="missing base theme"):
            theme_from_dict(data)

    def test_not_an_object(self):
        with pytest.raises(ThemeError):
            theme_from_dict([1, 2])

    def test_typography_overrides_font_scale(self):
        data = _minimal(
            typography={
                "text-sm": {"newName": "", "theme": {"kumo": "13px"}},
                "text-sm--line-height": {"newName": "", "theme": {"kumo": "calc(1.25 / 0.8125)"}},
            }
        )
        theme = theme_from_dict(data)
        assert theme.font_size_scale["sm"] == 13
        assert "sm--line-height" not in theme.font_size_scale
        assert theme.font_size_scale["xl"] == 20

    def test_scale_overrides(self):
        data = _minimal(scales={"spacing": "2px", "radius": {"sm": "0.5rem"}, "fontWeight": {"medium": 550}})
        theme = theme_from_dict(data)
        assert theme.spacing_unit_px == 2
        assert theme.spacing_scale["4"] == 8
        assert theme.radius_scale["sm"] == 8
        assert theme.font_weight_scale["medium"] == 550

    def test_bad_font_weight(self):
        with pytest.raises(ThemeError, match="fontWeight"):
            theme_from_dict(_minimal(scales={"fontWeight": {"medium": "heavy"}}))

    def test_opacity_modifiers_validated(self):
        with pytest.raises(ThemeError, match="opacityModifiers"):
            theme_from_dict(_minimal(opacityModifiers={"kumo-brand": [150]}))

    def test_theme_names_base_first(self):
        data = _minimal()
        data["color"]["kumo-brand"]["theme"]["fedramp"] = {"light": "#000", "dark": "#111"}
        assert theme_from_dict(data).theme_names == ["kumo", "fedramp"]


class TestVariableNames:
    @pytest.fixture()
    def theme(self):
        return theme_from_dict(_minimal())

    def test_fill_variable(self, theme):
        assert theme.fill_variable("kumo-brand") == "color-kumo-brand"
        assert theme.fill_variable("kumo-default") is None

    def test_text_variable_prefers_text_table(self, theme):
        assert theme.text_variable("kumo-default") == "text-color-kumo-default"

    def test_text_variable_falls_back_to_colors(self, theme):
        assert theme.text_variable("kumo-brand") == "color-kumo-brand"

    def test_text_variable_unknown(self, theme):
        assert theme.text_variable("nope") is None


# ---------------------------------------------------------------------------
# Loading and the process-wide theme
# ---------------------------------------------------------------------------


class TestLoadTheme:
    def test_missing_file(self, tmp_path):
        with pytest.raises(ThemeError, match="cannot read"):
            load_theme(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "theme.json"
        path.write_text("{nope")
        with pytest.raises(ThemeError, match="invalid JSON"):
            load_theme(path)

    def test_error_carries_path(self, tmp_path):
        path = tmp_path / "theme.json"
        path.write_text(json.dumps({"color": "oops"}))
        with pytest.raises(ThemeError) as exc_info:
            load_theme(path)
        assert exc_info.value.path == str(path)
        assert str(path) in str(exc_info.value)


class TestGetTheme:
    def test_default_theme(self):
        theme = get_theme()
        assert "kumo-brand" in theme.colors
        assert theme.font_size_scale["base"] == 14
        assert theme.font_size_scale["lg"] == 16

    def test_default_theme_status_text_tokens(self):
        theme = get_theme()
        for name in ("kumo-warning", "kumo-success", "kumo-info", "kumo-danger"):
            assert theme.text_variable(name) == f"text-color-{name}"

    def test_memoized(self):
        assert get_theme() is get_theme()

    def test_configure_theme(self, tmp_path):
        path = tmp_path / "theme.json"
        path.write_text(json.dumps(_minimal()))
        configure_theme(path)
        assert get_theme().color_names == ["kumo-brand"]

    def test_environment_variable(self, tmp_path, monkeypatch):
        path = tmp_path / "theme.json"
        path.write_text(json.dumps(_minimal()))
        monkeypatch.setenv(THEME_ENV_VAR, str(path))
        assert get_theme().color_names == ["kumo-brand"]
