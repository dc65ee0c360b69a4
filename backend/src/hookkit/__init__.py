"""hookkit — guard and adapter hooks for CRUD service pipelines."""

from hookkit.config import HooksConfig
from hookkit.core.paths import MISSING, deep_equal, resolve_path
from hookkit.errors import ForbiddenFieldChange, HookError, HookUsageError, SnapshotNotFound
from hookkit.hooks import HookContext, HookPhase, Method, debug, prevent_update_changes
from hookkit.promisify import future_to_callback

__all__ = [
    "MISSING",
    "ForbiddenFieldChange",
    "HookContext",
    "HookError",
    "HookPhase",
    "HookUsageError",
    "HooksConfig",
    "Method",
    "SnapshotNotFound",
    "debug",
    "deep_equal",
    "future_to_callback",
    "prevent_update_changes",
    "resolve_path",
]
