from variantkit.remote.errors import (
    AccessDeniedError,
    AuthenticationError,
    InvalidRequestError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    RemoteAPIError,
    RemoteError,
    RequestTimeoutError,
    ResponseFormatError,
    ServerError,
    error_from_status_code,
)
from variantkit.remote.tokens import (
    ColorVariable,
    ExtensionMode,
    FloatVariable,
    VariablePlan,
    build_plan,
    color_variables,
    extension_modes,
    opacity_variants,
    typography_variables,
)
from variantkit.remote.variables import (
    COLOR_COLLECTION,
    TYPOGRAPHY_COLLECTION,
    TYPOGRAPHY_MODE,
    LocalVariables,
    RemoteCollection,
    RemoteVariable,
    SyncResult,
    VariablesClient,
    build_purge_payload,
    build_sync_payload,
    mode_id,
    variable_id,
)

__all__ = [
    "COLOR_COLLECTION",
    "TYPOGRAPHY_COLLECTION",
    "TYPOGRAPHY_MODE",
    "AccessDeniedError",
    "AuthenticationError",
    "ColorVariable",
    "ExtensionMode",
    "FloatVariable",
    "InvalidRequestError",
    "LocalVariables",
    "NetworkError",
    "NotFoundError",
    "RateLimitError",
    "RemoteAPIError",
    "RemoteCollection",
    "RemoteError",
    "RemoteVariable",
    "RequestTimeoutError",
    "ResponseFormatError",
    "ServerError",
    "SyncResult",
    "VariablePlan",
    "VariablesClient",
    "build_plan",
    "build_purge_payload",
    "build_sync_payload",
    "color_variables",
    "error_from_status_code",
    "extension_modes",
    "mode_id",
    "opacity_variants",
    "typography_variables",
    "variable_id",
]
