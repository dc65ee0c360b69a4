"""Guards that stop an update from changing protected fields."""

import logging

from hookkit.config import HooksConfig
from hookkit.core.paths import deep_equal, resolve_path, split_path
from hookkit.errors import ForbiddenFieldChange, HookUsageError
from hookkit.hooks.snapshot import resolve_snapshot
from hookkit.hooks.types import HookContext, HookFn, HookPhase, Method, SnapshotGetter

logger = logging.getLogger(__name__)


def _id_field(context: HookContext, config: HooksConfig) -> str:
    service_id = getattr(context.service, "id", None)
    if isinstance(service_id, str) and service_id:
        return service_id
    return config.id_field


def prevent_update_changes(
    get_snapshot: SnapshotGetter | None,
    field_path: str,
    config: HooksConfig | None = None,
) -> HookFn:
    """Build a before-update hook that rejects changes to ``field_path``.

    The value at ``field_path`` in the incoming payload is compared with the
    value in the previous record. Missing keys and ``None`` count as the same
    absent value; everything else is compared structurally.

    The hook is a coroutine function: calling it on the wrong phase or method
    returns a coroutine, and HookUsageError is raised only once that coroutine
    is awaited. Pipelines must await every hook to see usage faults.

    Args:
        get_snapshot: Returns the previous record (or an awaitable of it).
            When None, the record is fetched through ``context.service``.
        field_path: Dot-delimited path of the protected field (e.g. "a.c.d.e")
        config: Hook settings; read from the environment when omitted

    Returns:
        Async hook function

    Raises:
        ValueError: If field_path is empty or malformed

    Usage:
        hook_fn = prevent_update_changes(None, "owner.id")
        await hook_fn(ctx)  # raises ForbiddenFieldChange if owner.id changed
    """
    split_path(field_path)
    settings = config or HooksConfig.from_env()

    async def prevent_update_changes_hook(context: HookContext) -> None:
        if context.phase != HookPhase.BEFORE or context.method != Method.UPDATE:
            raise HookUsageError(
                "preventUpdateChanges can only be used as a before update hook, "
                f"not {context.phase.value} {context.method.value}"
            )

        snapshot = await resolve_snapshot(
            context, get_snapshot, _id_field(context, settings)
        )

        previous = resolve_path(snapshot, field_path)
        current = resolve_path(context.data, field_path)

        if not deep_equal(previous, current):
            logger.debug("Rejecting update: %s changed", field_path)
            raise ForbiddenFieldChange(field_path)

        logger.debug("Field %s unchanged, allowing update", field_path)

    return prevent_update_changes_hook
