"""hookkit service hooks.

Hooks are async functions the pipeline awaits with a HookContext before or
after a service method runs. A hook aborts the method by raising.

- prevent_update_changes: before update, rejects changes to a protected field
- debug: any phase, logs the context

Usage:
    from hookkit.hooks import HookContext, HookPhase, Method, prevent_update_changes

    guard = prevent_update_changes(None, "owner.id")
    await guard(HookContext(HookPhase.BEFORE, Method.UPDATE, data=payload, id=1, service=svc))
"""

from hookkit.hooks.debug import debug
from hookkit.hooks.guards import prevent_update_changes
from hookkit.hooks.snapshot import resolve_snapshot, select_record
from hookkit.hooks.types import (
    DataService,
    HookContext,
    HookFn,
    HookPhase,
    Method,
    SnapshotGetter,
)

__all__ = [
    "DataService",
    "HookContext",
    "HookFn",
    "HookPhase",
    "Method",
    "SnapshotGetter",
    "debug",
    "prevent_update_changes",
    "resolve_snapshot",
    "select_record",
]
