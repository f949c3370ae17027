from __future__ import annotations

import random
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable

from slashbot.discord.resources import ApplicationCommandOptionType

from .handlers import CommandHandler


@dataclass(frozen=True)
class CommandOption:
    name: str
    description: str
    type: ApplicationCommandOptionType
    required: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "type": int(self.type),
            "required": self.required,
        }


@dataclass(frozen=True)
class CommandDescriptor:
    name: str
    description: str
    options: tuple[CommandOption, ...] = ()
    default_permission: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "options": [o.to_dict() for o in self.options],
            "default_permission": self.default_permission,
        }


@dataclass(frozen=True)
class CommandEntry:
    descriptor: CommandDescriptor
    handler: CommandHandler

    @property
    def name(self) -> str:
        return self.descriptor.name


class CommandRegistry:
    """Read-only mapping from command name to its descriptor and handler."""

    def __init__(self, entries: Iterable[CommandEntry]) -> None:
        table: dict[str, CommandEntry] = {}
        for entry in entries:
            if entry.name in table:
                raise ValueError(f"duplicate command name: {entry.name}")
            table[entry.name] = entry
        self._entries = MappingProxyType(table)

    def lookup(self, name: str | None) -> CommandEntry | None:
        if name is None:
            return None
        return self._entries.get(name)

    def names(self) -> list[str]:
        return sorted(self._entries)

    def descriptors(self) -> list[CommandDescriptor]:
        return [self._entries[n].descriptor for n in self.names()]

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def build_registry(*, rng: random.Random | None = None) -> CommandRegistry:
    # Add new commands here.
    from .random_command import RandomCommand

    return CommandRegistry([RandomCommand(rng=rng).entry()])
