from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

FIGMA_API_BASE = "https://api.figma.com/v1"


@dataclass(frozen=True)
class RegistryConfig:
    components_dir: Path = Path("src/components")
    blocks_dir: Path | None = None
    output_path: Path = Path("ai/component-registry.json")
    cache_path: Path = Path(".cache/component-registry-cache.json")
    markdown_path: Path | None = None
    overrides_path: Path | None = None
    import_path: str = "@cloudflare/kumo"
    version: str = "0.0.0"
    no_cache: bool = False


@dataclass(frozen=True)
class RemoteConfig:
    token: str
    file_key: str
    base_url: str = FIGMA_API_BASE
    timeout: float = 30.0
