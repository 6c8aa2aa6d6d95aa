"""Append-only, ordered registry of probes.

The ``ProbeRegistry`` keeps probes in registration order and rejects a
second probe under an existing name. There is no removal
operation: once a run's registry is populated it is only read.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from compatprobe.core.probes.models import Probe
from compatprobe.exceptions import DuplicateProbeError, UnknownProbeError


class ProbeRegistry:
    """Ordered collection of probes, deduplicated by name.

    Usage::

        registry = ProbeRegistry()
        registry.register(make_probe("kcms", action, min_version_for_removal=9))
        for probe in registry.all():
            ...
    """

    def __init__(self, probes: Iterable[Probe] = ()) -> None:
        self._probes: dict[str, Probe] = {}
        for probe in probes:
            self.register(probe)

    def register(self, probe: Probe) -> None:
        """Add a probe to the registry.

        Raises:
            DuplicateProbeError: If a probe with the same name exists.
        """
        if probe.name in self._probes:
            raise DuplicateProbeError(probe.name)
        self._probes[probe.name] = probe

    def all(self) -> list[Probe]:
        """Return the probes in registration order.

        A fresh list is returned on every call, so callers may not mutate
        the registry through it.
        """
        return list(self._probes.values())

    def names(self) -> list[str]:
        return list(self._probes)

    def get(self, name: str) -> Probe:
        try:
            return self._probes[name]
        except KeyError:
            raise UnknownProbeError([name]) from None

    def select(self, names: Iterable[str]) -> ProbeRegistry:
        """Return a new registry holding only the named probes.

        Registration order is preserved regardless of the order of *names*.

        Raises:
            UnknownProbeError: If any name is not registered.
        """
        wanted = list(dict.fromkeys(names))
        missing = [n for n in wanted if n not in self._probes]
        if missing:
            raise UnknownProbeError(missing)
        keep = set(wanted)
        return ProbeRegistry(p for p in self._probes.values() if p.name in keep)

    def __len__(self) -> int:
        return len(self._probes)

    def __contains__(self, name: object) -> bool:
        return name in self._probes

    def __iter__(self) -> Iterator[Probe]:
        return iter(self.all())
