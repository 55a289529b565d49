"""
Opt-in logging for the diagram engine.

The scanner and friends run on every debounced keystroke of an editor
preview, so they stay silent unless the caller asks otherwise:

    from diagramforge._logging import resolve_logger

    def scan_something(document, *, logger=None, log: bool = False):
        log = resolve_logger(logger=logger, enabled=log, name=__name__)
        log.debug("scanning %d chars", len(document))

- No stdout/stderr prints in library code.
- Passing a logger wins; `log=True` builds a named one; otherwise calls are dropped.
- Importing this module never configures global logging.
"""
from __future__ import annotations

import logging

DEFAULT_LOGGER_NAME = "diagramforge"


class NoopLogger:
    """Stand-in that accepts the logging.Logger call surface and discards it."""

    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug

    def isEnabledFor(self, level: int) -> bool:  # noqa: N802 - mirrors logging.Logger
        return False


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.INFO,
) -> logging.Logger | NoopLogger:
    """
    Pick the logger a public operation should write to.

    - `logger` given: returned as-is (duck-typed, anything with .debug works).
    - `enabled` True: the stdlib logger called `name` (or "diagramforge"),
      set to `level` and left propagating so pytest's caplog sees it.
    - Otherwise a NoopLogger.
    """
    if logger is not None:
        return logger
    if enabled:
        lg = logging.getLogger(name or DEFAULT_LOGGER_NAME)
        lg.setLevel(level)
        lg.propagate = True
        return lg
    return NoopLogger()
