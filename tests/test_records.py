"""Tests for domain models (core/models.py) and their parsers (core/records.py).

Models are frozen dataclasses; parsers turn loose backend dicts into
them without ever raising.
"""

from __future__ import annotations

import pytest

from chat_utils.core.models import Contact, Conversation, ConversationMeta, Person
from chat_utils.core.records import (
    parse_attributes,
    parse_contact,
    parse_conversation,
    parse_person,
)


class TestModels:
    def test_person_defaults(self) -> None:
        person = Person()
        assert (person.name, person.email, person.phone_number, person.id) == (None, None, None, None)

    def test_person_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Person(name="a").name = "b"  # type: ignore[misc]

    def test_conversation_defaults(self) -> None:
        conversation = Conversation()
        assert conversation.id is None
        assert conversation.meta == ConversationMeta()
        assert dict(conversation.custom_attributes) == {}

    def test_equality(self) -> None:
        assert Contact(custom_attributes={"a": 1}) == Contact(custom_attributes={"a": 1})


class TestParsePerson:
    def test_full_record(self) -> None:
        person = parse_person(
            {"name": "Ann", "email": "a@x.io", "phone_number": "+1", "id": 3, "extra": "ignored"},
        )
        assert person == Person(name="Ann", email="a@x.io", phone_number="+1", id=3)

    def test_none(self) -> None:
        assert parse_person(None) is None

    def test_not_a_mapping(self) -> None:
        assert parse_person("Ann") is None  # type: ignore[arg-type]

    def test_model_passthrough(self) -> None:
        person = Person(name="Ann")
        assert parse_person(person) is person


class TestParseConversation:
    def test_full_record(self) -> None:
        conversation = parse_conversation(
            {
                "id": 9,
                "meta": {"sender": {"name": "Ann"}, "assignee": None},
                "custom_attributes": {"tier": "gold"},
            },
        )
        assert conversation.id == 9
        assert conversation.meta.sender == Person(name="Ann")
        assert conversation.meta.assignee is None
        assert conversation.custom_attributes["tier"] == "gold"

    def test_missing_meta(self) -> None:
        conversation = parse_conversation({"id": 1})
        assert conversation.meta == ConversationMeta()

    def test_none(self) -> None:
        assert parse_conversation(None) == Conversation()

    def test_attributes_are_read_only_copy(self) -> None:
        raw_attributes = {"tier": "gold"}
        conversation = parse_conversation({"custom_attributes": raw_attributes})
        raw_attributes["tier"] = "silver"
        assert conversation.custom_attributes["tier"] == "gold"
        with pytest.raises(TypeError):
            conversation.custom_attributes["tier"] = "bronze"  # type: ignore[index]


class TestParseContact:
    def test_attributes(self) -> None:
        assert dict(parse_contact({"custom_attributes": {"city": "Oslo"}}).custom_attributes) == {
            "city": "Oslo",
        }

    def test_missing_attributes(self) -> None:
        assert dict(parse_contact({}).custom_attributes) == {}

    def test_none(self) -> None:
        assert parse_contact(None) == Contact()


class TestParseAttributes:
    @pytest.mark.parametrize("raw", [None, [], "text", 5])
    def test_non_mapping_is_empty(self, raw: object) -> None:
        assert dict(parse_attributes(raw)) == {}

    def test_keys_become_strings(self) -> None:
        assert dict(parse_attributes({1: "one"})) == {"1": "one"}
