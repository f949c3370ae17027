"""Request handling for the interactions endpoint.

    POST only (405) -> body present (400) -> signature (401) -> parse (400)
      -> PING: reply PONG
      -> known command (400 otherwise) -> run handler -> 200 with the reply

Command failures never change the status code: the reply carries the
error message and is hidden from everyone but the invoking user.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from slashbot.commands.errors import ServerError
from slashbot.commands.handlers import invoke_command, render_error
from slashbot.commands.registry import CommandRegistry
from slashbot.discord.callbacks import pong
from slashbot.discord.errors import MalformedInteraction
from slashbot.discord.model import parse_interaction
from slashbot.discord.resources import SIGNATURE_HEADER, TIMESTAMP_HEADER, InteractionType
from slashbot.discord.schema import SchemaRegistry
from slashbot.discord.signature import verify_request

from .config import BotConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DispatchContext:
    config: BotConfig
    registry: CommandRegistry
    schemas: SchemaRegistry = field(default_factory=SchemaRegistry)


@dataclass(frozen=True)
class DispatchResult:
    status_code: int
    payload: dict[str, Any] | None = None


def _header(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is None:
        value = headers.get(name.lower())
    return value


def dispatch(
    ctx: DispatchContext,
    *,
    method: str,
    headers: Mapping[str, str],
    body: bytes | None,
) -> DispatchResult:
    if method.upper() != "POST":
        return DispatchResult(status_code=405)
    if not body:
        return DispatchResult(status_code=400)
    if not verify_request(
        body,
        timestamp=_header(headers, TIMESTAMP_HEADER),
        signature=_header(headers, SIGNATURE_HEADER),
        public_key=ctx.config.public_key,
    ):
        logger.info("rejected interaction with invalid signature")
        return DispatchResult(status_code=401)

    try:
        interaction = parse_interaction(body, ctx.schemas)
    except MalformedInteraction as e:
        logger.info("rejected malformed interaction: %s", e)
        return DispatchResult(status_code=400)

    if interaction.type == InteractionType.PING:
        return DispatchResult(status_code=200, payload=pong().to_dict())

    entry = ctx.registry.lookup(interaction.command_name)
    if entry is None:
        # Only happens when registered commands and the deployed registry disagree.
        logger.warning("no handler for interaction type=%s command=%r", interaction.type, interaction.command_name)
        return DispatchResult(status_code=400)

    result = invoke_command(entry, interaction)
    if result.error is None and result.response is not None:
        return DispatchResult(status_code=200, payload=result.response.to_dict())
    error = result.error or ServerError(f"handler for {entry.name} returned no response")
    return DispatchResult(status_code=200, payload=render_error(entry.name, error).to_dict())
