"""Block metadata: component dependencies and installable files."""

from __future__ import annotations

import re
from pathlib import Path

__all__ = ["block_files", "extract_block_dependencies"]

# import { Tabs, type TabsProps } from "../../components/tabs"
_IMPORT_RE = re.compile(
    r"""import\s+(?:type\s+)?\{(?P<names>[^}]+)\}\s+from\s+["']\.\./\.\./(?:components|blocks)/[^"']+["']"""
)
_IMPORT_NAME_RE = re.compile(r"^(\w+)(?:\s+as\s+\w+)?")


def extract_block_dependencies(source: str) -> list[str]:
    """Names a block imports from sibling components or blocks, sorted."""
    dependencies: set[str] = set()
    for match in _IMPORT_RE.finditer(source):
        if match.group(0).startswith("import type"):
            continue
        for item in match.group("names").split(","):
            item = item.strip()
            if not item or item.startswith("type "):
                continue
            name = _IMPORT_NAME_RE.match(item)
            if name:
                dependencies.add(name.group(1))
    return sorted(dependencies)


def block_files(blocks_dir: Path, dir_name: str) -> list[str]:
    """Files to install for a block, relative to *blocks_dir*."""
    files = [f"{dir_name}/{dir_name}.tsx"]
    for suffix in (".stories.tsx", ".test.tsx"):
        if (blocks_dir / dir_name / f"{dir_name}{suffix}").is_file():
            files.append(f"{dir_name}/{dir_name}{suffix}")
    return files
