"""Client for the design tool's local variables API.

Sync is one-way and destructive: every existing variable and collection in
the file is deleted, then the collections are recreated from a
:class:`~variantkit.remote.tokens.VariablePlan`. Payload ids are temporary
ids the API swaps for real ones (``tempIdToRealId`` in the response).
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any

import httpx

from variantkit.config import RemoteConfig
from variantkit.remote._http import HttpClient
from variantkit.remote.errors import ResponseFormatError
from variantkit.remote.tokens import ColorVariable, FloatVariable, VariablePlan

__all__ = [
    "COLOR_COLLECTION",
    "COLOR_COLLECTION_ID",
    "TYPOGRAPHY_COLLECTION",
    "TYPOGRAPHY_COLLECTION_ID",
    "TYPOGRAPHY_MODE",
    "LocalVariables",
    "RemoteCollection",
    "RemoteVariable",
    "SyncResult",
    "VariablesClient",
    "build_purge_payload",
    "build_sync_payload",
    "mode_id",
    "variable_id",
]

logger = logging.getLogger(__name__)

COLOR_COLLECTION = "kumo-colors"
COLOR_COLLECTION_ID = "kumo_collection"
TYPOGRAPHY_COLLECTION = "kumo-typography"
TYPOGRAPHY_COLLECTION_ID = "typography_collection"
TYPOGRAPHY_MODE = "Desktop"

_WHITESPACE_RE = re.compile(r"\s+")


def variable_id(name: str) -> str:
    """Stable temporary id for a variable: ``color-kumo-brand`` -> ``var_color_kumo_brand``."""
    return "var_" + name.replace("-", "_")


def mode_id(name: str) -> str:
    return "mode_" + _WHITESPACE_RE.sub("_", name.lower())


# ---------------------------------------------------------------------------
# Remote state
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RemoteVariable:
    id: str
    name: str
    collection_id: str
    resolved_type: str = ""


@dataclass(frozen=True)
class RemoteCollection:
    id: str
    name: str
    modes: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class LocalVariables:
    """Variables and collections currently in a file."""

    variables: dict[str, RemoteVariable] = field(default_factory=dict)
    collections: dict[str, RemoteCollection] = field(default_factory=dict)

    def in_collection(self, collection_id: str) -> list[RemoteVariable]:
        return [v for v in self.variables.values() if v.collection_id == collection_id]

    def is_empty(self) -> bool:
        return not self.variables and not self.collections

    @classmethod
    def from_meta(cls, meta: dict[str, Any]) -> LocalVariables:
        variables = {
            key: RemoteVariable(
                id=str(raw.get("id", key)),
                name=str(raw.get("name", "")),
                collection_id=str(raw.get("variableCollectionId", "")),
                resolved_type=str(raw.get("resolvedType", "")),
            )
            for key, raw in (meta.get("variables") or {}).items()
        }
        collections = {
            key: RemoteCollection(
                id=str(raw.get("id", key)),
                name=str(raw.get("name", "")),
                modes=[str(m.get("name", "")) for m in raw.get("modes", [])],
            )
            for key, raw in (meta.get("variableCollections") or {}).items()
        }
        return cls(variables=variables, collections=collections)


@dataclass(frozen=True)
class SyncResult:
    purged_variables: int
    purged_collections: int
    created_variables: int
    temp_id_to_real_id: dict[str, str] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Payloads
# ---------------------------------------------------------------------------


def build_purge_payload(existing: LocalVariables) -> dict[str, Any]:
    """Delete every variable, then every collection."""
    return {
        "variables": [{"action": "DELETE", "id": key} for key in existing.variables],
        "variableCollections": [{"action": "DELETE", "id": key} for key in existing.collections],
    }


def _color_values(variable: ColorVariable, light_mode: str, dark_mode: str) -> list[dict[str, Any]]:
    return [
        {"variableId": variable_id(variable.name), "modeId": light_mode, "value": variable.light.to_dict()},
        {"variableId": variable_id(variable.name), "modeId": dark_mode, "value": variable.dark.to_dict()},
    ]


def _typography_part(
    tokens: list[FloatVariable], collection_name: str, mode_name: str
) -> tuple[dict[str, Any], dict[str, Any], list[dict[str, Any]], list[dict[str, Any]]]:
    desktop = mode_id(mode_name)
    collection = {
        "action": "CREATE",
        "id": TYPOGRAPHY_COLLECTION_ID,
        "name": collection_name,
        "initialModeId": desktop,
    }
    # The initial mode already exists; UPDATE only renames it.
    mode = {"action": "UPDATE", "id": desktop, "name": mode_name, "variableCollectionId": TYPOGRAPHY_COLLECTION_ID}
    variables = []
    values = []
    for token in tokens:
        var_id = variable_id(f"typography_{token.name}")
        variables.append(
            {
                "action": "CREATE",
                "id": var_id,
                "name": token.name,
                "variableCollectionId": TYPOGRAPHY_COLLECTION_ID,
                "resolvedType": "FLOAT",
            }
        )
        values.append({"variableId": var_id, "modeId": desktop, "value": token.value})
    return collection, mode, variables, values


def build_sync_payload(
    plan: VariablePlan,
    *,
    color_collection: str = COLOR_COLLECTION,
    typography_collection: str = TYPOGRAPHY_COLLECTION,
    typography_mode: str = TYPOGRAPHY_MODE,
) -> dict[str, Any]:
    """The single create payload for the color, extension and typography collections."""
    light = mode_id("Light")
    dark = mode_id("Dark")

    collections: list[dict[str, Any]] = [
        {"action": "CREATE", "id": COLOR_COLLECTION_ID, "name": color_collection, "initialModeId": light}
    ]
    modes: list[dict[str, Any]] = [
        {"action": "UPDATE", "id": light, "name": "Light", "variableCollectionId": COLOR_COLLECTION_ID},
        {"action": "CREATE", "id": dark, "name": "Dark", "variableCollectionId": COLOR_COLLECTION_ID},
    ]
    variables: list[dict[str, Any]] = [
        {
            "action": "CREATE",
            "id": variable_id(v.name),
            "name": v.name,
            "variableCollectionId": COLOR_COLLECTION_ID,
            "resolvedType": "COLOR",
        }
        for v in plan.colors
    ]
    values: list[dict[str, Any]] = []
    for variable in plan.colors:
        values.extend(_color_values(variable, light, dark))

    for extension in plan.extensions:
        ext_id = f"ext_{extension.name.lower()}"
        ext_light = f"{ext_id}_light"
        ext_dark = f"{ext_id}_dark"
        collections.append(
            {
                "action": "CREATE",
                "id": ext_id,
                "name": extension.name,
                "parentVariableCollectionId": COLOR_COLLECTION_ID,
                "initialModeIdToInitialParentModeIdMap": {ext_light: light, ext_dark: dark},
            }
        )
        for variable in plan.colors:
            override = extension.overrides.get(variable.name)
            if override is None:
                continue
            # Extension themes use the same value in both modes.
            values.append({"variableId": variable_id(variable.name), "modeId": ext_light, "value": override.to_dict()})
            values.append({"variableId": variable_id(variable.name), "modeId": ext_dark, "value": override.to_dict()})

    if plan.typography:
        collection, mode, typo_variables, typo_values = _typography_part(
            plan.typography, typography_collection, typography_mode
        )
        collections.append(collection)
        modes.append(mode)
        variables.extend(typo_variables)
        values.extend(typo_values)

    return {
        "variableCollections": collections,
        "variableModes": modes,
        "variables": variables,
        "variableModeValues": values,
    }


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------


class VariablesClient:
    """Reads and replaces the variables of one design file."""

    def __init__(self, config: RemoteConfig, transport: httpx.BaseTransport | None = None) -> None:
        self.config = config
        self._http = HttpClient(config.base_url, config.token, timeout=config.timeout, transport=transport)

    @property
    def _path(self) -> str:
        return f"/files/{self.config.file_key}/variables"

    def get_local_variables(self) -> LocalVariables:
        resp = self._http.get(f"{self._path}/local")
        meta = resp.body.get("meta")
        if meta is None:
            return LocalVariables()
        if not isinstance(meta, dict):
            raise ResponseFormatError(f"Unexpected 'meta' in response: {resp.raw_text}")
        return LocalVariables.from_meta(meta)

    def _post(self, payload: dict[str, Any]) -> dict[str, str]:
        resp = self._http.post(self._path, json=payload)
        meta = resp.body.get("meta")
        if isinstance(meta, dict):
            return dict(meta.get("tempIdToRealId") or {})
        return {}

    def purge_all(self) -> tuple[int, int]:
        """Delete every variable and collection. Returns the deleted counts."""
        existing = self.get_local_variables()
        if existing.is_empty():
            logger.debug("Nothing to purge in %s", self.config.file_key)
            return 0, 0
        self._post(build_purge_payload(existing))
        logger.info(
            "Purged %d variable(s) and %d collection(s)", len(existing.variables), len(existing.collections)
        )
        return len(existing.variables), len(existing.collections)

    def sync(self, plan: VariablePlan) -> SyncResult:
        """Purge the file, then create every collection in *plan*.

        Raises ValueError for an empty plan before touching the file.
        """
        if not plan.colors and not plan.typography:
            raise ValueError("No tokens to sync")
        purged_variables, purged_collections = self.purge_all()
        id_map = self._post(build_sync_payload(plan))
        logger.info("Created %d variable(s)", plan.total)
        return SyncResult(
            purged_variables=purged_variables,
            purged_collections=purged_collections,
            created_variables=plan.total,
            temp_id_to_real_id=id_map,
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> VariablesClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
