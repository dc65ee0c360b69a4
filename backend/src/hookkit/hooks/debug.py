"""Diagnostic hook that logs the hook context."""

import logging

from hookkit.config import HooksConfig
from hookkit.hooks.types import HookContext, HookFn

logger = logging.getLogger(__name__)


def debug(message: str = "", config: HooksConfig | None = None) -> HookFn:
    """Build a hook that logs the phase, method, payload, params and result.

    Usable on any phase and method. Never modifies the context.
    """
    level = (config or HooksConfig.from_env()).debug_level_number

    async def debug_hook(context: HookContext) -> None:
        if not logger.isEnabledFor(level):
            return
        logger.log(level, "* %s", message)
        logger.log(
            level,
            "type: %s, method: %s",
            context.phase.value,
            context.method.value,
        )
        if context.data:
            logger.log(level, "data: %r", context.data)
        if context.params:
            logger.log(level, "params: %r", context.params)
        if context.result is not None:
            logger.log(level, "result: %r", context.result)

    return debug_hook
