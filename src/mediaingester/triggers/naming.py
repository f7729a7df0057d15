"""Execution name derivation.

Execution names must be unique for the state machine's retention window and
may only use a restricted character set.
"""

from __future__ import annotations

import posixpath
import time

from mediaingester.core.constants import MAX_WORKFLOW_NAME_LENGTH

DISALLOWED_NAME_CHARS = frozenset(' <>{}[]?*"#%\\^|~`$&,;:/')


def _allowed(char: str) -> bool:
    return char not in DISALLOWED_NAME_CHARS and char.isprintable()


def make_workflow_name(object_key: str, now_ns: int | None = None) -> str:
    """Base file name of the key, scrubbed, plus a nanosecond timestamp suffix.

    The file name part is shortened rather than the suffix, so the result
    always ends in digits and is at most 80 characters long.
    """
    suffix = str(now_ns if now_ns is not None else time.time_ns())
    cleaned = "".join(char for char in posixpath.basename(object_key) if _allowed(char))
    return cleaned[:MAX_WORKFLOW_NAME_LENGTH - len(suffix)] + suffix
