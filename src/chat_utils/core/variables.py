"""Message-template variables: build, substitute, and validate.

Templates reference variables with ``{{name}}`` placeholders.  Names are
flat dotted keys such as ``contact.first_name`` or
``conversation.custom_attribute.plan``.

Two predicates are kept apart:

* **substitution** (:func:`replace_variables`) only inserts *truthy*
  values: ``0``, ``""`` and ``False`` render as an empty string;
* **validation** (:func:`find_undefined_variables`) only reports
  *undefined* names, i.e. a missing key or a ``None`` value.  ``0`` and
  ``""`` count as defined.

Placeholders inside fenced code blocks (```` ``` ... ``` ````) are
literals and are skipped by validation.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from chat_utils.core.models import Contact, Conversation, Person, Scalar, VariableMap
from chat_utils.core.records import parse_contact, parse_conversation

logger = logging.getLogger(__name__)

VARIABLE_PATTERN: re.Pattern[str] = re.compile(r"\{\{(.*?)\}\}", re.DOTALL)
"""Non-greedy: the first ``}}`` after an opening ``{{`` closes the match."""

CODE_BLOCK_PATTERN: re.Pattern[str] = re.compile(r"```.+?```", re.DOTALL)

_WORD_START = re.compile(r"\b(\w)")


# ---------------------------------------------------------------------------
# Name helpers
# ---------------------------------------------------------------------------

def capitalize_name(name: str | None) -> str:
    """Uppercase the first character of every word, leave the rest alone.

    ``"jane mcDonald"`` becomes ``"Jane McDonald"``; this is not
    :meth:`str.title`, which would also lowercase ``D``.
    """
    return _WORD_START.sub(lambda match: match.group(1).upper(), name or "")


def get_first_name(user: Person | None) -> str:
    if user is None or not user.name:
        return ""
    tokens = user.name.split()
    return capitalize_name(tokens[0]) if tokens else ""


def get_last_name(user: Person | None) -> str:
    """Return the capitalised last token, or ``""`` for single-word names."""
    if user is None or not user.name:
        return ""
    tokens = user.name.split()
    if len(tokens) > 1:
        return capitalize_name(tokens[-1])
    return ""


# ---------------------------------------------------------------------------
# Building the variable map
# ---------------------------------------------------------------------------

def _prefixed(prefix: str, attributes: Mapping[str, Scalar | None]) -> VariableMap:
    return {f"{prefix}{key}": value for key, value in attributes.items()}


def build_variable_map(
    conversation: Conversation | Mapping[str, Any] | None,
    contact: Contact | Mapping[str, Any] | None = None,
) -> VariableMap:
    """Derive every template variable available for *conversation*.

    Standard variables come first, then conversation custom attributes,
    then contact custom attributes; on identical keys the later source
    wins.  Missing participants never raise: names degrade to ``""``
    and contact fields to ``None``.  ``agent.email`` defaults to ``""``
    rather than ``None``.
    """
    parsed = parse_conversation(conversation)
    parsed_contact = parse_contact(contact)
    sender = parsed.meta.sender
    assignee = parsed.meta.assignee

    standard: VariableMap = {
        "contact.name": capitalize_name(sender.name if sender else None),
        "contact.first_name": get_first_name(sender),
        "contact.last_name": get_last_name(sender),
        "contact.email": sender.email if sender else None,
        "contact.phone": sender.phone_number if sender else None,
        "contact.id": sender.id if sender else None,
        "conversation.id": parsed.id,
        "agent.name": capitalize_name(assignee.name if assignee else None),
        "agent.first_name": get_first_name(assignee),
        "agent.last_name": get_last_name(assignee),
        "agent.email": (assignee.email if assignee else None) or "",
    }

    return {
        **standard,
        **_prefixed("conversation.custom_attribute.", parsed.custom_attributes),
        **_prefixed("contact.custom_attribute.", parsed_contact.custom_attributes),
    }


# ---------------------------------------------------------------------------
# Substitution
# ---------------------------------------------------------------------------

def _render(value: Scalar | None) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def replace_variables(
    message: str | None,
    variables: Mapping[str, Scalar | None],
) -> str | None:
    """Substitute every ``{{name}}`` placeholder in *message*.

    Names are stripped and looked up lower-cased, so ``{{ CONTACT.NAME }}``
    resolves ``contact.name``.  A placeholder whose value is falsy
    (missing, ``None``, ``0``, ``""``, ``False``) is replaced with an
    empty string.  A name that is only defined in mixed case renders as
    ``""`` because the lower-cased key is what gets inserted.

    ``None`` is returned unchanged.
    """
    if message is None:
        return None

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1).strip()
        key = name.lower()
        if variables.get(name) or variables.get(key):
            return _render(variables.get(key))
        return ""

    return VARIABLE_PATTERN.sub(_substitute, message)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def skip_code_blocks(message: str) -> str:
    """Remove fenced code blocks, backticks included."""
    return CODE_BLOCK_PATTERN.sub("", message)


def extract_variable_names(message: str) -> list[str]:
    """Return every stripped placeholder name outside code blocks.

    Order of appearance is kept and duplicates are preserved.
    """
    return [
        match.group(1).strip()
        for match in VARIABLE_PATTERN.finditer(skip_code_blocks(message))
    ]


def find_undefined_variables(
    message: str,
    variables: Mapping[str, Scalar | None],
) -> list[str]:
    """List placeholder names in *message* with no value in *variables*.

    A name is undefined when it is missing or maps to ``None``; the
    lookup is exact (no lower-casing).
    """
    undefined = [
        name for name in extract_variable_names(message)
        if variables.get(name) is None
    ]
    if undefined:
        logger.debug("Undefined template variables: %s", ", ".join(undefined))
    return undefined
