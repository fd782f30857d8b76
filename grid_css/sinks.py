"""Style sinks — where set_* operations write their computed declarations.

A sink is anything with apply_style(element_id, property, value). The
generator only ever passes values that have already been validated and
formatted; a sink does no validation of its own.

RecordingSink keeps styles in memory. It stands in for a live UI in tests
and headless use:

    sink = RecordingSink()
    GridGenerator(sink).set_rows(['1fr', '2fr'], '#app')
    sink.styles['#app']  # {'grid-template-rows': '1fr 2fr'}
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@runtime_checkable
class StyleSink(Protocol):
    def apply_style(self, element_id: str, property: str, value: str) -> None: ...


@dataclass
class RecordingSink:
    """In-memory sink: element id -> {property: value}, last write wins.

    If elements is given, only those ids resolve; writes to any other id
    are dropped, like a selector that matches nothing.
    """

    elements: set[str] | None = None
    styles: dict[str, dict[str, str]] = field(default_factory=dict)
    calls: list[tuple[str, str, str]] = field(default_factory=list)  # every write that landed

    @classmethod
    def with_elements(cls, element_ids: Iterable[str]) -> RecordingSink:
        return cls(elements=set(element_ids))

    def resolves(self, element_id: str) -> bool:
        return self.elements is None or element_id in self.elements

    def apply_style(self, element_id: str, property: str, value: str) -> None:
        if not self.resolves(element_id):
            return
        self.styles.setdefault(element_id, {})[property] = value
        self.calls.append((element_id, property, value))

    def style_of(self, element_id: str) -> dict[str, str]:
        return dict(self.styles.get(element_id, {}))
