"""
Signal registry: the fixed catalog of weighted risk signals.

Each signal has a stable id, a display label and a signed integer weight
(positive raises risk, negative mitigates it). The catalog is built once at
import and has no mutation API. Lookups are tolerant: an unknown id has
weight 0 and is labelled with the raw id, so legacy or malformed ids degrade
in display instead of breaking scoring.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from signal_graph.core.exceptions import UnknownSignalReference


@dataclass(frozen=True)
class Signal:
    id: str
    label: str
    weight: int


class SignalRegistry:
    """Read-only, ordered lookup table of signals keyed by id."""

    def __init__(self, signals: Iterable[Signal]):
        ordered = tuple(signals)
        by_id: dict[str, Signal] = {}
        for signal in ordered:
            if signal.id in by_id:
                raise ValueError(f"Duplicate signal id in registry: {signal.id!r}")
            by_id[signal.id] = signal
        self._signals = ordered
        self._by_id: Mapping[str, Signal] = MappingProxyType(by_id)
        self._order: Mapping[str, int] = MappingProxyType(
            {signal.id: i for i, signal in enumerate(ordered)}
        )

    def __contains__(self, signal_id: object) -> bool:
        return signal_id in self._by_id

    def __iter__(self) -> Iterator[Signal]:
        return iter(self._signals)

    def __len__(self) -> int:
        return len(self._signals)

    def all(self) -> tuple[Signal, ...]:
        """All signals in catalog order."""
        return self._signals

    def ids(self) -> tuple[str, ...]:
        return tuple(signal.id for signal in self._signals)

    def lookup(self, signal_id: str) -> Signal | None:
        return self._by_id.get(signal_id)

    def require(self, signal_id: str) -> Signal:
        """Strict lookup for outer surfaces; raises UnknownSignalReference."""
        signal = self._by_id.get(signal_id)
        if signal is None:
            raise UnknownSignalReference(signal_id)
        return signal

    def weight_of(self, signal_id: str) -> int:
        signal = self._by_id.get(signal_id)
        return signal.weight if signal is not None else 0

    def label_of(self, signal_id: str) -> str:
        signal = self._by_id.get(signal_id)
        return signal.label if signal is not None else signal_id

    def index_of(self, signal_id: str) -> int | None:
        """Catalog position of signal_id, or None when unknown."""
        return self._order.get(signal_id)

    def order(self, signal_ids: Iterable[str]) -> list[str]:
        """
        Deduplicate and sort ids into catalog order.

        Ids missing from the catalog keep no position of their own, so they
        follow the known ones in sorted order. Output is reproducible for any
        input order.
        """
        unique = set(signal_ids)
        known = sorted((i for i in unique if i in self._order), key=self._order.__getitem__)
        unknown = sorted(i for i in unique if i not in self._order)
        return known + unknown


SIGNALS: tuple[Signal, ...] = (
    Signal("criminal_felony_recent", "Recent Felony", 8),
    Signal("criminal_felony_old", "Old Felony", 4),
    Signal("criminal_misdemeanor", "Misdemeanor", 3),
    Signal("alias_mismatch", "Alias Mismatch", 5),
    Signal("employment_gap", "Employment Gap", 4),
    Signal("education_unverified", "Education Unverified", 6),
    Signal("address_instability", "Address Instability", 3),
    Signal("ssn_mismatch", "SSN Mismatch", 7),
    Signal("jurisdiction_delay", "Jurisdiction Delay", 2),
    Signal("multiple_employers", "Multiple Employers", 2),
    Signal("pattern_reform", "Pattern of Reform", -5),
)

SIGNAL_REGISTRY = SignalRegistry(SIGNALS)


def lookup(signal_id: str) -> Signal | None:
    return SIGNAL_REGISTRY.lookup(signal_id)


def weight_of(signal_id: str) -> int:
    """Weight of signal_id; 0 for ids not in the catalog."""
    return SIGNAL_REGISTRY.weight_of(signal_id)


def label_of(signal_id: str) -> str:
    return SIGNAL_REGISTRY.label_of(signal_id)
