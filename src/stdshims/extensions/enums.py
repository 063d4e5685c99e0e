"""Attributes attached to enum members.

Enum members cannot carry per-member metadata syntactically, so markers
are attached with the :func:`member_attributes` class decorator and read
back with :func:`get_value_attributes`::

    @member_attributes(
        READY=[Description("Ready to run"), DisplayName("Ready")],
    )
    class State(Enum):
        READY = 1
        DONE = 2

    get_description(State.READY)  # "Ready to run"
    get_description(State.DONE)   # ""
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from stdshims.errors import require_not_none

_ATTRIBUTES_KEY = "__member_attributes__"

_E = TypeVar("_E", bound=type[Enum])
_A = TypeVar("_A", bound="MemberAttribute")


class MemberAttribute:
    """Base class for markers attached to enum members."""


@dataclass(frozen=True)
class Description(MemberAttribute):
    """Human-readable description of a member."""

    text: str


@dataclass(frozen=True)
class DisplayName(MemberAttribute):
    """Short name shown to users instead of the member name."""

    name: str


def member_attributes(**by_name: Iterable[MemberAttribute]) -> Callable[[_E], _E]:
    """Class decorator attaching marker attributes to enum members by name.

    Raises:
        TypeError: The decorated class is not an Enum.
        ValueError: A keyword does not name a member of the enum.
    """

    def decorate(enum_cls: _E) -> _E:
        if not (isinstance(enum_cls, type) and issubclass(enum_cls, Enum)):
            raise TypeError(f"member_attributes can only decorate Enum classes, got {enum_cls!r}")

        unknown = sorted(set(by_name) - set(enum_cls.__members__))
        if unknown:
            raise ValueError(f"{enum_cls.__name__} has no members named {', '.join(unknown)}")

        table: dict[str, tuple[MemberAttribute, ...]] = dict(
            getattr(enum_cls, _ATTRIBUTES_KEY, {})
        )
        for name, attributes in by_name.items():
            canonical = enum_cls.__members__[name].name
            table[canonical] = table.get(canonical, ()) + tuple(attributes)
        setattr(enum_cls, _ATTRIBUTES_KEY, table)
        return enum_cls

    return decorate


def get_value_attributes(member: Enum, attribute_type: type[_A]) -> list[_A]:
    """Return the markers of *attribute_type* attached to *member*."""
    require_not_none(member, "member")
    table: dict[str, tuple[MemberAttribute, ...]] = getattr(type(member), _ATTRIBUTES_KEY, {})
    return [a for a in table.get(member.name, ()) if isinstance(a, attribute_type)]


def get_descriptions(member: Enum) -> list[str]:
    return [a.text for a in get_value_attributes(member, Description)]


def get_description(member: Enum) -> str:
    """All descriptions of *member* joined by newlines, or ``""``."""
    return "\n".join(get_descriptions(member))


def get_display_names(member: Enum) -> list[str]:
    return [a.name for a in get_value_attributes(member, DisplayName)]


def get_display_name(member: Enum) -> str:
    """All display names of *member* joined by newlines, or ``""``."""
    return "\n".join(get_display_names(member))
