"""Values - Textual payloads carried by graph edges.

This module provides the value layer of the pom graph:
- Text: Immutable string wrapper
- TextReference: Shared mutable cell holding one Text
- Textual / Composite: The two payload shapes an edge may carry
- GraphValue: Union of the payload shapes
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Union


@dataclass(frozen=True)
class Text:
    """Immutable textual value stored inside the pom graph."""

    value: str = ""

    def __post_init__(self) -> None:
        if self.value is None:
            raise ValueError("Text requires a value; omit absent text instead")

    def __str__(self) -> str:
        return self.value


class TextReference:
    """Mutable handle that lets several edges share one Text.

    Every edge holding the same reference observes updates made through
    any of them. The id is assigned by the owning graph and stays stable
    while the wrapped text changes.
    """

    __slots__ = ("_id", "_value")

    def __init__(self, ref_id: str, value: Text) -> None:
        if ref_id is None:
            raise ValueError("TextReference requires an id")
        if value is None:
            raise ValueError("TextReference requires a value")
        self._id = ref_id
        self._value = value

    @property
    def id(self) -> str:
        """Identifier assigned by the owning graph."""
        return self._id

    @property
    def value(self) -> Text:
        """Current text stored in the reference."""
        return self._value

    @property
    def text(self) -> str:
        """Shortcut for the raw string of the current value."""
        return self._value.value

    def update(self, new_value: Text | str) -> None:
        """Replace the stored text.

        Args:
            new_value: Text (or raw string) visible to every holder of
                this reference afterwards.
        """
        if new_value is None:
            raise ValueError("TextReference.update requires a value")
        if not isinstance(new_value, Text):
            new_value = Text(new_value)
        self._value = new_value

    def __repr__(self) -> str:
        return f"TextReference(id={self._id!r}, value={self._value.value!r})"


@dataclass(frozen=True)
class Textual:
    """Payload wrapping exactly one TextReference.

    The reference is stored as-is, so updates remain visible to every
    edge that carries it.
    """

    reference: TextReference

    def __post_init__(self) -> None:
        if self.reference is None:
            raise ValueError("Textual payload requires a reference")

    def text(self) -> TextReference | None:
        return self.reference

    def children(self) -> Mapping[str, GraphValue]:
        return MappingProxyType({})


@dataclass(frozen=True, eq=False)
class Composite:
    """Payload holding an ordered mapping of named child values.

    Names are trimmed; entries with a blank name or a None value are
    dropped. The stored mapping is read-only.
    """

    entries: Mapping[str, GraphValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        cleaned: dict[str, GraphValue] = {}
        for name, value in (self.entries or {}).items():
            key = (name or "").strip()
            if not key or value is None:
                continue
            cleaned[key] = value
        object.__setattr__(self, "entries", MappingProxyType(cleaned))

    def text(self) -> TextReference | None:
        return None

    def children(self) -> Mapping[str, GraphValue]:
        return self.entries

    def child_text(self, name: str) -> str:
        """Return the text of a textual child, or "" when absent."""
        child = self.entries.get(name)
        if child is None:
            return ""
        reference = child.text()
        return reference.text if reference is not None else ""


GraphValue = Union[Textual, Composite]


def text_value(reference: TextReference) -> Textual:
    """Create a payload backed by a shared TextReference."""
    return Textual(reference)


def composite_value(entries: Mapping[str, GraphValue]) -> Composite:
    """Create a hierarchical payload from named child values."""
    return Composite(dict(entries))
