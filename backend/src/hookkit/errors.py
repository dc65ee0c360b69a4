"""Error hierarchy for hookkit.

Error kinds:
- HookError: Base class for all errors raised by hookkit hooks
- HookUsageError: A hook was registered on the wrong phase/method (integration bug)
- ForbiddenFieldChange: An update tried to change a protected field (aborts the write)
- SnapshotNotFound: The default snapshot getter could not find the previous record

Errors raised by the data service while fetching a snapshot are never
wrapped; they reach the pipeline exactly as the service raised them.
"""


class HookError(Exception):
    """Base class for all hookkit errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


class HookUsageError(HookError):
    """Hook invoked on a phase/method it does not support."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="HOOK_USAGE")


class ForbiddenFieldChange(HookError):
    """An update payload changes a field that must stay as it is."""

    def __init__(self, field_path: str, message: str | None = None) -> None:
        self.field_path = field_path
        super().__init__(
            message or f"Field {field_path} may not be changed. (preventUpdateChanges)",
            code="FORBIDDEN_FIELD_CHANGE",
        )


class SnapshotNotFound(HookError):
    """No previous record could be located for the update."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="SNAPSHOT_NOT_FOUND")
