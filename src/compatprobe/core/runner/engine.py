"""Sequential, failure-isolating probe runner.

``ProbeRunner.run()`` executes every probe of a registry once, in
registration order. Each execution is a self-contained unit:

1. A fresh resource scope is opened and made available to the action.
2. The action is called. Anything it raises is captured and converted into
   a failure ``Outcome``; nothing propagates to the next probe.
3. The scope is closed, releasing whatever the action registered.
4. The outcome is classified and packaged into a ``ProbeResult``.

Only ``KeyboardInterrupt`` (and other non-``Exception`` signals besides
``SystemExit``) escape.
"""

from __future__ import annotations

import logging
from contextlib import ExitStack

from compatprobe.core.classification import classify, explain
from compatprobe.core.environment import EnvironmentContext
from compatprobe.core.probes import FailureCategory, Outcome, Probe, ProbeRegistry
from compatprobe.core.runner.models import ProbeResult
from compatprobe.core.runner.scope import activate_scope
from compatprobe.exceptions import ProbeFailure

logger = logging.getLogger(__name__)

# Checked in order; the first matching exception type decides the category.
_CATEGORY_BY_EXCEPTION: tuple[tuple[type[BaseException], FailureCategory], ...] = (
    (ImportError, FailureCategory.CLASS_NOT_AVAILABLE),
    (AttributeError, FailureCategory.METHOD_NOT_AVAILABLE),
    (NotImplementedError, FailureCategory.METHOD_NOT_AVAILABLE),
    (PermissionError, FailureCategory.PERMISSION_DENIED),
    (SystemExit, FailureCategory.UNKNOWN),
)

_MAX_CAUSES = 8


def categorize(exc: BaseException) -> FailureCategory:
    """Map a captured exception onto a FailureCategory."""
    if isinstance(exc, ProbeFailure):
        return exc.category
    for exc_type, category in _CATEGORY_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return category
    return FailureCategory.RUNTIME_FAILURE


def _describe(exc: BaseException) -> str:
    text = str(exc)
    return f"{type(exc).__name__}: {text}" if text else type(exc).__name__


def _underlying(exc: BaseException) -> BaseException | None:
    # Honour ``raise ... from None``.
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__suppress_context__:
        return None
    return exc.__context__


def cause_chain(exc: BaseException) -> tuple[str, ...]:
    """Render the chain of underlying causes below *exc*, outermost first."""
    causes: list[str] = []
    seen = {id(exc)}
    current = _underlying(exc)
    while current is not None and id(current) not in seen and len(causes) < _MAX_CAUSES:
        seen.add(id(current))
        causes.append(_describe(current))
        current = _underlying(current)
    return tuple(causes)


def outcome_from_exception(exc: BaseException) -> Outcome:
    """Convert a captured exception into a structured failure Outcome."""
    if isinstance(exc, ProbeFailure):
        message = exc.message
    elif isinstance(exc, SystemExit):
        message = f"probe attempted to exit (code {exc.code!r})"
    else:
        message = _describe(exc)
    return Outcome.failure(categorize(exc), message, cause_chain(exc))


class ProbeRunner:
    """Execute probes one at a time and classify each outcome.

    The runner holds no state between runs; ``run()`` may be called any
    number of times and each call returns a new list of results.

    Usage::

        runner = ProbeRunner()
        results = runner.run(registry, context)
    """

    def run(self, registry: ProbeRegistry, context: EnvironmentContext) -> list[ProbeResult]:
        """Run every registered probe once, in registration order.

        Args:
            registry: The probes to execute.
            context: The run's environment context, shared read-only.

        Returns:
            One ``ProbeResult`` per registered probe, in registration order.
        """
        results: list[ProbeResult] = []
        for probe in registry.all():
            results.append(self.run_probe(probe, context))
        return results

    def run_probe(self, probe: Probe, context: EnvironmentContext) -> ProbeResult:
        """Execute and classify a single probe."""
        logger.debug("Running probe: %s", probe.name)
        outcome = self._execute(probe)
        verdict = classify(outcome, context, probe)
        logger.info("Probe %s: %s", probe.name, verdict.value)
        return ProbeResult(
            probe_name=probe.name,
            outcome=outcome,
            verdict=verdict,
            explanation=explain(outcome, verdict, context, probe),
        )

    def _execute(self, probe: Probe) -> Outcome:
        outcome: Outcome | None = None
        scope = ExitStack()
        try:
            with activate_scope(scope):
                probe.action()
            outcome = Outcome.success()
        except (Exception, SystemExit) as exc:
            logger.debug("Probe %s failed", probe.name, exc_info=True)
            outcome = outcome_from_exception(exc)
        finally:
            try:
                scope.close()
            except (Exception, SystemExit) as exc:
                logger.warning("Cleanup failed for probe: %s", probe.name, exc_info=True)
                if outcome is not None and outcome.is_success:
                    outcome = Outcome.failure(
                        FailureCategory.RUNTIME_FAILURE,
                        f"resource cleanup failed: {_describe(exc)}",
                        cause_chain(exc),
                    )
        return outcome
