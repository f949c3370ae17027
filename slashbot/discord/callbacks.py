from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .resources import InteractionCallbackType, MessageFlags


@dataclass(frozen=True)
class InteractionResponse:
    type: InteractionCallbackType
    data: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": int(self.type)}
        if self.data is not None:
            out["data"] = dict(self.data)
        return out


def pong() -> InteractionResponse:
    return InteractionResponse(type=InteractionCallbackType.PONG)


def make_basic_response(content: str, hidden: bool = False) -> InteractionResponse:
    flags = MessageFlags.EPHEMERAL if hidden else 0
    return InteractionResponse(
        type=InteractionCallbackType.CHANNEL_MESSAGE_WITH_SOURCE,
        data={"content": content, "flags": int(flags)},
    )
