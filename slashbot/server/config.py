from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from slashbot.discord.schema import SchemaRegistry

DEFAULT_INTERACTIONS_PATH = "/api/interactions"

ENV_PUBLIC_KEY = "DISCORD_PUBLIC_KEY"
ENV_APPLICATION_ID = "DISCORD_APPLICATION_ID"
ENV_BOT_TOKEN = "DISCORD_BOT_TOKEN"
ENV_INTERACTIONS_PATH = "SLASHBOT_INTERACTIONS_PATH"


@dataclass(frozen=True)
class BotConfig:
    public_key: str | None = None
    application_id: str | None = None
    bot_token: str | None = None
    interactions_path: str = DEFAULT_INTERACTIONS_PATH

    def __repr__(self) -> str:
        token = None if self.bot_token is None else "***"
        return (
            f"BotConfig(public_key={self.public_key!r}, application_id={self.application_id!r}, "
            f"bot_token={token!r}, interactions_path={self.interactions_path!r})"
        )


def load_config(
    config_path: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    schema_registry: SchemaRegistry | None = None,
) -> BotConfig:
    """Build the bot configuration.

    Values come from an optional JSON file (validated against
    bot_config.schema.json); environment variables take precedence.
    """
    environ = os.environ if environ is None else environ
    raw: dict = {}
    if config_path is not None:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
        (schema_registry or SchemaRegistry()).validate(raw, "bot_config.schema.json")

    def pick(env_key: str, file_key: str) -> str | None:
        value = environ.get(env_key)
        if value:
            return value
        value = raw.get(file_key)
        return value if isinstance(value, str) and value else None

    return BotConfig(
        public_key=pick(ENV_PUBLIC_KEY, "public_key"),
        application_id=pick(ENV_APPLICATION_ID, "application_id"),
        bot_token=pick(ENV_BOT_TOKEN, "bot_token"),
        interactions_path=pick(ENV_INTERACTIONS_PATH, "interactions_path") or DEFAULT_INTERACTIONS_PATH,
    )
