"""Per-probe resource scope.

Each probe action runs inside its own ``contextlib.ExitStack``. Actions
reach it through ``probe_scope()`` and register anything that must be
released afterwards::

    def action() -> None:
        scope = probe_scope()
        handle = scope.enter_context(open(path, "rb"))
        scope.callback(listener.unregister)
        ...

The runner closes the stack on every exit path. The active stack lives in a
``ContextVar`` so concurrently running probes never see each other's scope.
"""

from __future__ import annotations

from contextlib import ExitStack, contextmanager
from contextvars import ContextVar
from typing import Iterator

_ACTIVE_SCOPE: ContextVar[ExitStack | None] = ContextVar("compatprobe_scope", default=None)


def probe_scope() -> ExitStack:
    """Return the resource scope of the probe currently executing.

    Raises:
        RuntimeError: If called outside a running probe.
    """
    scope = _ACTIVE_SCOPE.get()
    if scope is None:
        raise RuntimeError("probe_scope() called outside a running probe")
    return scope


@contextmanager
def activate_scope(scope: ExitStack) -> Iterator[ExitStack]:
    """Make *scope* the active probe scope for the duration of the block."""
    token = _ACTIVE_SCOPE.set(scope)
    try:
        yield scope
    finally:
        _ACTIVE_SCOPE.reset(token)
