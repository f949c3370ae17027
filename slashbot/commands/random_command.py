from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any

from slashbot.discord.callbacks import InteractionResponse, make_basic_response
from slashbot.discord.model import Interaction, InteractionOption
from slashbot.discord.options import convert_options
from slashbot.discord.resources import ApplicationCommandOptionType

from .errors import ArgumentError
from .numbers import UniformNumberGenerator, generate_numbers
from .registry import CommandDescriptor, CommandEntry, CommandOption

MAX_ROLLS = 100

DESCRIPTOR = CommandDescriptor(
    name="random",
    description="Gives random numbers in the specified range.",
    options=(
        CommandOption(
            name="min",
            description="The lower bound of the range, inclusive. Default: 0",
            type=ApplicationCommandOptionType.INTEGER,
        ),
        CommandOption(
            name="max",
            description="The upper bound of the range, exclusive. Default: min + 6",
            type=ApplicationCommandOptionType.INTEGER,
        ),
        CommandOption(
            name="rolls",
            description=f"Number of random numbers to generate (1-{MAX_ROLLS}). Default: 1",
            type=ApplicationCommandOptionType.INTEGER,
        ),
        CommandOption(
            name="hidden",
            description="If true, the results will be hidden. Default: false",
            type=ApplicationCommandOptionType.BOOLEAN,
        ),
    ),
)


def _value(options: dict[str, InteractionOption], name: str, default: Any) -> Any:
    opt = options.get(name)
    if opt is None or opt.value is None:
        return default
    return opt.value


def format_rolls(numbers: list[int]) -> str:
    if len(numbers) == 1:
        return f"You rolled a {numbers[0]}."
    return "Here are your numbers!\n" + ", ".join(str(n) for n in numbers)


@dataclass(frozen=True)
class RandomCommand:
    rng: random.Random | None = None

    def entry(self) -> CommandEntry:
        return CommandEntry(descriptor=DESCRIPTOR, handler=self)

    def handle(self, interaction: Interaction) -> InteractionResponse:
        options = convert_options(interaction.options)
        lo = _value(options, "min", 0)
        hi = _value(options, "max", None)
        rolls = _value(options, "rolls", 1)
        hidden = _value(options, "hidden", False)

        if isinstance(rolls, bool) or not isinstance(rolls, int) or not 1 <= rolls <= MAX_ROLLS:
            raise ArgumentError(f"rolls must be between 1 and {MAX_ROLLS}")
        if not isinstance(hidden, bool):
            raise ArgumentError("hidden must be a boolean")

        # max is exclusive here; NumberGenerator defaults it to min + 6.
        generator = UniformNumberGenerator(lo, hi, rng=self.rng)
        numbers = generate_numbers(rolls, generator)
        return make_basic_response(format_rolls(numbers), hidden=hidden)
