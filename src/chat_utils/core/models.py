"""Domain models for chat-utils.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They mirror only the handful of fields
the helpers read from the messaging domain model; everything else on
an incoming record is ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Union

Scalar = Union[str, int, float, bool]
"""A single custom-attribute or variable value."""

VariableMap = dict[str, Union[Scalar, None]]
"""Flat dotted-key mapping; ``None`` marks an undefined variable."""


def _empty_attributes() -> Mapping[str, Scalar | None]:
    return MappingProxyType({})


# ---------------------------------------------------------------------------
# People
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Person:
    """A conversation participant (the contact sender or the agent)."""

    name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    id: int | str | None = None


# ---------------------------------------------------------------------------
# Conversation / contact
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ConversationMeta:
    """Participants attached to a conversation."""

    sender: Person | None = None
    assignee: Person | None = None
    """``None`` while the conversation is unassigned."""


@dataclass(frozen=True, slots=True)
class Conversation:
    id: int | str | None = None
    meta: ConversationMeta = field(default_factory=ConversationMeta)
    custom_attributes: Mapping[str, Scalar | None] = field(
        default_factory=_empty_attributes,
    )


@dataclass(frozen=True, slots=True)
class Contact:
    custom_attributes: Mapping[str, Scalar | None] = field(
        default_factory=_empty_attributes,
    )


# ---------------------------------------------------------------------------
# Duration conversion result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TimeUnit:
    """A duration expressed in a single display unit.

    ``time`` is ``None`` when there is no duration to show (zero or
    missing seconds); ``unit`` is always the caller-supplied label.
    """

    time: float | None
    unit: str
