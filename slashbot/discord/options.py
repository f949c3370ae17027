from __future__ import annotations

from slashbot.commands.errors import ArgumentError

from .model import InteractionOption


def convert_options(options: list[InteractionOption] | None) -> dict[str, InteractionOption]:
    """Map option names to the options the user supplied.

    Raises ArgumentError when the interaction carried no option list at all.
    """
    if options is None:
        raise ArgumentError("no options were supplied")
    return {o.name: o for o in options}
