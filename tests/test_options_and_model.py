from __future__ import annotations

import json

import pytest

from slashbot.commands.errors import ArgumentError
from slashbot.discord.callbacks import make_basic_response, pong
from slashbot.discord.errors import MalformedInteraction
from slashbot.discord.model import as_interaction, parse_interaction
from slashbot.discord.options import convert_options
from slashbot.discord.resources import InteractionCallbackType, InteractionType, MessageFlags
from slashbot.discord.schema import SchemaRegistry


def command_interaction(options: list[dict] | None = None) -> dict:
    data: dict = {"id": "1", "name": "random"}
    if options is not None:
        data["options"] = options
    return {"id": "10", "application_id": "20", "type": 2, "data": data, "token": "tok", "version": 1}


def test_parse_handshake():
    interaction = parse_interaction(b'{"type": 1}', SchemaRegistry())
    assert interaction.type == InteractionType.PING
    assert interaction.command_name is None
    assert interaction.options is None


def test_parse_command_interaction_exposes_fields():
    raw = command_interaction([{"name": "rolls", "type": 4, "value": 3}])
    interaction = parse_interaction(json.dumps(raw).encode("utf-8"), SchemaRegistry())
    assert interaction.type == InteractionType.APPLICATION_COMMAND
    assert interaction.command_name == "random"
    assert interaction.id == "10"
    assert interaction.token == "tok"
    assert interaction.version == 1
    assert interaction.application_id == "20"
    assert [(o.name, o.type, o.value) for o in interaction.options] == [("rolls", 4, 3)]


@pytest.mark.parametrize(
    "body",
    [
        b"not json",
        b"[1, 2]",
        b'{"no_type": true}',
        b'{"type": 9}',
        b'{"type": 2, "data": {"name": "random", "options": [{"name": "x"}]}}',
        b"\xff\xfe",
    ],
)
def test_parse_rejects_malformed_bodies(body: bytes):
    with pytest.raises(MalformedInteraction):
        parse_interaction(body, SchemaRegistry())


def test_convert_options_maps_names_and_last_write_wins():
    interaction = as_interaction(
        command_interaction(
            [
                {"name": "min", "type": 4, "value": 1},
                {"name": "max", "type": 4, "value": 9},
                {"name": "min", "type": 4, "value": 2},
            ]
        )
    )
    options = convert_options(interaction.options)
    assert set(options) == {"min", "max"}
    assert options["min"].value == 2
    assert options["max"].value == 9


def test_convert_options_keeps_nested_options():
    interaction = as_interaction(
        command_interaction([{"name": "group", "type": 1, "options": [{"name": "leaf", "type": 3, "value": "x"}]}])
    )
    group = convert_options(interaction.options)["group"]
    assert group.value is None
    assert convert_options(group.options)["leaf"].value == "x"


def test_convert_options_requires_a_list():
    with pytest.raises(ArgumentError):
        convert_options(None)
    assert convert_options([]) == {}


def test_response_builders():
    assert pong().to_dict() == {"type": 1}
    visible = make_basic_response("hi", hidden=False).to_dict()
    assert visible == {"type": InteractionCallbackType.CHANNEL_MESSAGE_WITH_SOURCE, "data": {"content": "hi", "flags": 0}}
    hidden = make_basic_response("hi", hidden=True).to_dict()
    assert hidden["data"]["flags"] == MessageFlags.EPHEMERAL == 64


def test_parse_rejects_deeply_nested_json():
    body = b"[" * 100000 + b"]" * 100000
    with pytest.raises(MalformedInteraction):
        parse_interaction(body, SchemaRegistry())


def test_schema_validation_rejects_deeply_nested_options():
    option: dict = {"name": "leaf", "type": 3, "value": "x"}
    for _ in range(5000):
        option = {"name": "group", "type": 2, "options": [option]}
    with pytest.raises(MalformedInteraction):
        SchemaRegistry().validate(
            {"type": 2, "data": {"name": "random", "options": [option]}},
            "interaction.schema.json",
            error=MalformedInteraction,
        )
