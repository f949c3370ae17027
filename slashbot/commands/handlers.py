from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from slashbot.discord.callbacks import InteractionResponse, make_basic_response
from slashbot.discord.model import Interaction

from .errors import ArgumentError, ServerError

if TYPE_CHECKING:
    from .registry import CommandEntry

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "the server encountered an error"


class CommandHandler(Protocol):
    def handle(self, interaction: Interaction) -> InteractionResponse: ...


@dataclass(frozen=True)
class CommandResult:
    response: InteractionResponse | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def invoke_command(entry: CommandEntry, interaction: Interaction) -> CommandResult:
    try:
        return CommandResult(response=entry.handler.handle(interaction))
    except Exception as e:
        return CommandResult(error=e)


def render_error(command_name: str, error: Exception) -> InteractionResponse:
    """Turn a failed command into a reply only the invoking user can see.

    The platform does not show HTTP error bodies to users, so every failure
    is reported in-band with a 200.
    """
    if isinstance(error, ServerError):
        logger.error("command %s failed: %s", command_name, error, exc_info=error)
        return make_basic_response(f"Error: {SERVER_ERROR_MESSAGE}", hidden=True)
    if isinstance(error, ArgumentError):
        return make_basic_response(f"Error: {error.message}", hidden=True)
    logger.debug("command %s raised %s: %s", command_name, type(error).__name__, error)
    return make_basic_response(f"Error: {error}", hidden=True)
