from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from .errors import MalformedInteraction
from .schema import SchemaRegistry

INTERACTION_SCHEMA = "interaction.schema.json"


@dataclass(frozen=True)
class InteractionOption:
    raw: dict

    @property
    def name(self) -> str:
        return str(self.raw["name"])

    @property
    def type(self) -> int:
        return int(self.raw["type"])

    @property
    def value(self) -> Any:
        return self.raw.get("value")

    @property
    def options(self) -> list[InteractionOption] | None:
        return _as_options(self.raw.get("options"))


@dataclass(frozen=True)
class Interaction:
    raw: dict

    @property
    def type(self) -> int:
        return int(self.raw["type"])

    @property
    def id(self) -> str | None:
        return self.raw.get("id")

    @property
    def application_id(self) -> str | None:
        return self.raw.get("application_id")

    @property
    def token(self) -> str | None:
        return self.raw.get("token")

    @property
    def version(self) -> int | None:
        return self.raw.get("version")

    @property
    def command_name(self) -> str | None:
        data = self.raw.get("data") or {}
        name = data.get("name")
        return name if isinstance(name, str) and name else None

    @property
    def options(self) -> list[InteractionOption] | None:
        data = self.raw.get("data") or {}
        return _as_options(data.get("options"))


def _as_options(raw: list[dict] | None) -> list[InteractionOption] | None:
    if raw is None:
        return None
    return [InteractionOption(raw=o) for o in raw]


def as_interaction(obj: dict) -> Interaction:
    return Interaction(raw=obj)


def parse_interaction(body: bytes, schemas: SchemaRegistry) -> Interaction:
    try:
        obj = json.loads(body)
    except (ValueError, RecursionError) as e:
        raise MalformedInteraction(code="INVALID_JSON", message=str(e)) from e
    if not isinstance(obj, dict):
        raise MalformedInteraction(code="INVALID_JSON", message="interaction must be a JSON object")
    schemas.validate(obj, INTERACTION_SCHEMA, error=MalformedInteraction)
    return as_interaction(obj)
