"""
Form field values.

Every field holds exactly one of Text, Flag, Number, FileRef or Empty, so
validators and submit handlers check the variant instead of probing types.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class Flag:
    value: bool


@dataclass(frozen=True)
class Number:
    value: int | float


@dataclass(frozen=True)
class FileRef:
    """Opaque handle to a selected file (path, open file or (name, bytes) tuple)."""

    handle: Any

    @property
    def name(self) -> str:
        if isinstance(self.handle, (str, Path)):
            return Path(self.handle).name
        if isinstance(self.handle, tuple) and self.handle:
            return str(self.handle[0])
        return str(getattr(self.handle, "name", "file"))


@dataclass(frozen=True)
class Empty:
    pass


FieldValue = Union[Text, Flag, Number, FileRef, Empty]

EMPTY = Empty()


def field_value(raw: Any) -> FieldValue:
    """Wrap a plain Python value in its field variant."""
    if isinstance(raw, (Text, Flag, Number, FileRef, Empty)):
        return raw
    if raw is None:
        return EMPTY
    # bool before int: bool is an int subclass
    if isinstance(raw, bool):
        return Flag(raw)
    if isinstance(raw, (int, float)):
        return Number(raw)
    if isinstance(raw, str):
        return Text(raw)
    return FileRef(raw)


def raw_value(value: FieldValue) -> Any:
    """Inverse of field_value."""
    if isinstance(value, (Text, Flag, Number)):
        return value.value
    if isinstance(value, FileRef):
        return value.handle
    return None


def is_blank(value: FieldValue) -> bool:
    """True for an empty field: Empty, empty text, or an unchecked flag."""
    if isinstance(value, Empty):
        return True
    if isinstance(value, Text):
        return value.value == ""
    if isinstance(value, Flag):
        return not value.value
    return False


def text_of(value: FieldValue) -> str:
    """Text content of a field, '' for non-text variants."""
    if isinstance(value, Text):
        return value.value
    if isinstance(value, Number):
        return str(value.value)
    return ""


def wrap_values(raw: dict[str, Any]) -> dict[str, FieldValue]:
    return {name: field_value(v) for name, v in raw.items()}


def to_plain(values: dict[str, FieldValue]) -> dict[str, Any]:
    return {name: raw_value(v) for name, v in values.items()}
