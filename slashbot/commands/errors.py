from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class BotError(Exception):
    code: str
    message: str

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class ArgumentError(BotError):
    def __init__(self, message: str, code: str = "INVALID_ARGUMENT") -> None:
        super().__init__(code=code, message=message)


class ServerError(BotError):
    def __init__(self, message: str, code: str = "SERVER_ERROR") -> None:
        super().__init__(code=code, message=message)
