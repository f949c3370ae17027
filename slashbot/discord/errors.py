from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DiscordError(Exception):
    code: str
    message: str

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class MalformedInteraction(DiscordError):
    pass


class SchemaInvalid(DiscordError):
    pass
