"""Record path utilities shared by hookkit hooks."""

from hookkit.core.paths import MISSING, deep_equal, is_absent, resolve_path, split_path

__all__ = [
    "MISSING",
    "deep_equal",
    "is_absent",
    "resolve_path",
    "split_path",
]
