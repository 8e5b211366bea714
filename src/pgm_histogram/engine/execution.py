"""Execution policy and executor selection utilities."""

import logging
import os
import sys
import threading
from typing import TypeAlias

logger = logging.getLogger(__name__)

ExecutorClass: TypeAlias = type[threading.Thread] | None

# Environment variable to override executor selection.
HISTO_EXECUTOR_ENV = "HISTO_EXECUTOR"


def is_gil_enabled() -> bool:
    """Check if GIL is enabled."""
    try:
        return sys._is_gil_enabled()
    except AttributeError:
        return True


def get_executor_class() -> ExecutorClass:
    """
    Select the appropriate executor class.

    HISTO_EXECUTOR may be "threads" (default) or "serial". Workers share the
    global histogram in memory, so every policy stays in-process. "threads"
    starts one dedicated thread per span; there is no pool to reuse threads.

    "serial" mode runs in the main thread - useful for debugging with breakpoints.
    """
    executor_override = os.environ.get(HISTO_EXECUTOR_ENV, "").lower()

    if executor_override == "serial":
        return None
    if executor_override not in ("", "threads"):
        logger.warning(
            "Unknown %s=%r, falling back to threads", HISTO_EXECUTOR_ENV, executor_override
        )
    return threading.Thread


def describe_executor(executor_class: ExecutorClass) -> str:
    """Convert an executor class into a readable policy name."""
    if executor_class is None:
        return "serial"
    return "threads"
