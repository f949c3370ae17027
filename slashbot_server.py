from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

import uvicorn

from slashbot.commands.registry import build_registry
from slashbot.discord.resources import application_commands_url
from slashbot.server.app import create_app
from slashbot.server.config import load_config


def dump_commands(config_path: Path | None = None) -> str:
    config = load_config(config_path)
    registry = build_registry()
    doc = {
        "url": application_commands_url(config.application_id) if config.application_id else None,
        "commands": [d.to_dict() for d in registry.descriptors()],
    }
    return json.dumps(doc, indent=2)


def main(argv: list[str] | None = None, *, runner=uvicorn.run) -> None:
    p = argparse.ArgumentParser(description="Slashbot interactions webhook")
    p.add_argument("--config", default=None, type=Path, help="Path to a bot config JSON file")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", default=8000, type=int)
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--dump-commands", action="store_true", help="Print command registration JSON and exit")
    args = p.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))
    if args.dump_commands:
        print(dump_commands(args.config))
        return

    config = load_config(args.config)
    if config.public_key is None:
        logging.getLogger(__name__).warning("no public key configured; every interaction will be rejected")
    app = create_app(config=config)
    runner(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
