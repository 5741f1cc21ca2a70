"""Tolerant parsers from plain mappings to :mod:`chat_utils.core.models`.

Conversations and contacts arrive from the messaging backend as plain
JSON-like dicts.  These parsers read only the fields the helpers need
and never raise: missing or malformed sections become ``None`` or an
empty attribute mapping.  Model instances are passed through as-is.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from chat_utils.core.models import Contact, Conversation, ConversationMeta, Person, Scalar


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)


def _optional_id(value: object) -> int | str | None:
    if value is None or isinstance(value, (int, str)):
        return value
    return str(value)


def parse_attributes(raw: object) -> Mapping[str, Scalar | None]:
    """Return a read-only copy of a custom-attribute mapping.

    Anything that is not a mapping (``None``, a list, a string) yields
    an empty mapping.
    """
    if not isinstance(raw, Mapping):
        return MappingProxyType({})
    return MappingProxyType({str(key): value for key, value in raw.items()})


def parse_person(raw: Person | Mapping[str, Any] | None) -> Person | None:
    if raw is None or isinstance(raw, Person):
        return raw
    if not isinstance(raw, Mapping):
        return None
    return Person(
        name=_optional_str(raw.get("name")),
        email=_optional_str(raw.get("email")),
        phone_number=_optional_str(raw.get("phone_number")),
        id=_optional_id(raw.get("id")),
    )


def parse_conversation(
    raw: Conversation | Mapping[str, Any] | None,
) -> Conversation:
    """Convert a raw conversation dict into a :class:`Conversation`.

    ``None`` produces an empty conversation (no id, no participants).
    """
    if isinstance(raw, Conversation):
        return raw
    if not isinstance(raw, Mapping):
        return Conversation()

    meta_raw = raw.get("meta")
    if not isinstance(meta_raw, Mapping):
        meta_raw = {}

    return Conversation(
        id=_optional_id(raw.get("id")),
        meta=ConversationMeta(
            sender=parse_person(meta_raw.get("sender")),
            assignee=parse_person(meta_raw.get("assignee")),
        ),
        custom_attributes=parse_attributes(raw.get("custom_attributes")),
    )


def parse_contact(raw: Contact | Mapping[str, Any] | None) -> Contact:
    if isinstance(raw, Contact):
        return raw
    if not isinstance(raw, Mapping):
        return Contact()
    return Contact(custom_attributes=parse_attributes(raw.get("custom_attributes")))
