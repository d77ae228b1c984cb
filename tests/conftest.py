from __future__ import annotations

import pytest

from variantkit.theme import THEME_ENV_VAR, reset_theme


@pytest.fixture(autouse=True)
def _fresh_theme(monkeypatch):
    """Every test starts from the bundled default theme."""
    monkeypatch.delenv(THEME_ENV_VAR, raising=False)
    reset_theme()
    yield
    reset_theme()
