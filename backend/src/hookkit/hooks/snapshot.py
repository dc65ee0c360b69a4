"""Snapshot resolution for update hooks.

The record as it was before an update can come from four places:

- a caller-supplied getter (the record is already in hand)
- ``service.get(id)`` when the context carries an id
- ``service.find(params)`` returning a bare list of records
- ``service.find(params)`` returning a paginated ``{"data": [...]}`` page

``resolve_snapshot`` normalizes all of them to a single record.
"""

import inspect
import logging
from collections.abc import Mapping
from typing import Any

from hookkit.errors import SnapshotNotFound
from hookkit.hooks.types import HookContext, SnapshotGetter

logger = logging.getLogger(__name__)


async def _resolve(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


def _page_records(result: Any) -> list[Any]:
    """Extract the record list from a bare or paginated find result."""
    if isinstance(result, Mapping):
        if "data" not in result:
            raise SnapshotNotFound("find() returned a mapping without a 'data' list")
        result = result["data"]
    if result is None:
        return []
    return list(result)


def select_record(records: list[Any], data: Mapping[str, Any] | None, id_field: str) -> Any:
    """Pick the record being updated out of a find() result.

    Returns the first record whose ``id_field`` matches the payload's,
    falling back to the first record when the payload carries no id or
    nothing matches.
    """
    if not records:
        raise SnapshotNotFound("find() returned no records to compare against")

    target = data.get(id_field) if data else None
    if target is not None:
        for record in records:
            if isinstance(record, Mapping) and record.get(id_field) == target:
                return record
        logger.debug(
            "No record with %s=%r in find() result, using the first record",
            id_field,
            target,
        )
    return records[0]


async def resolve_snapshot(
    context: HookContext,
    get_snapshot: SnapshotGetter | None,
    id_field: str,
) -> Any:
    """Return the previous version of the record being updated.

    Args:
        context: The hook context for a before-update call
        get_snapshot: Optional getter; when given, its result is used as is
        id_field: Primary-key field used to match find() results

    Returns:
        The previous record

    Raises:
        SnapshotNotFound: If the default getter has no service or finds nothing.
            Errors raised by the service itself propagate unchanged.
    """
    if get_snapshot is not None:
        logger.debug("Resolving snapshot from caller-supplied getter")
        return await _resolve(get_snapshot(context))

    service = context.service
    if service is None:
        raise SnapshotNotFound("No service available to fetch the previous record")

    if context.id is not None:
        logger.debug("Resolving snapshot with get(%r)", context.id)
        record = await _resolve(service.get(context.id, context.params))
        if record is None:
            raise SnapshotNotFound(f"No record found with id {context.id!r}")
        return record

    logger.debug("Resolving snapshot with find()")
    result = await _resolve(service.find(context.params))
    return select_record(_page_records(result), context.data, id_field)
