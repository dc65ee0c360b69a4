"""Hook system types for hookkit.

Defines the data structures shared by the built-in hooks:
- HookPhase / Method: where in the pipeline a hook is running
- HookContext: runtime state passed to hook functions by the pipeline
- DataService: the data access capability hooks may read through
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, runtime_checkable


class HookPhase(Enum):
    """Interceptor timing relative to the underlying operation."""

    BEFORE = "before"
    AFTER = "after"


class Method(Enum):
    """The service method being intercepted."""

    FIND = "find"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    PATCH = "patch"
    REMOVE = "remove"


@runtime_checkable
class DataService(Protocol):
    """Protocol for the service a hook is attached to.

    Either method may return its value directly or an awaitable of it.
    ``find`` returns a list of records or a paginated mapping whose
    ``data`` key holds that list.
    """

    def get(self, id: Any, params: dict[str, Any] | None = None) -> Any: ...

    def find(self, params: dict[str, Any] | None = None) -> Any: ...


@dataclass
class HookContext:
    """Runtime context passed to every hook function.

    The pipeline owns the context; hooks only read it.

    Attributes:
        phase: BEFORE or AFTER the service method runs
        method: The intercepted service method
        data: Payload being written (create, update, patch)
        id: Record key for single-record methods, None otherwise
        service: Data service the hook is attached to
        params: Call parameters (``provider``, ``query``, ...)
        result: Method result, populated in the AFTER phase
    """

    phase: HookPhase
    method: Method
    data: dict[str, Any] | None = None
    id: Any = None
    service: DataService | None = None
    params: dict[str, Any] = field(default_factory=dict)
    result: Any = None


# Hook function signature: async (HookContext) -> None
HookFn = Callable[[HookContext], Awaitable[None]]

# Snapshot getter: (HookContext) -> record | awaitable of record
SnapshotGetter = Callable[[HookContext], Any]
