"""Default dialog and UI factories producing plain control descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class DialogKind(Enum):
    MESSAGE = auto()
    CONFIRMATION = auto()
    ERROR = auto()


@dataclass(frozen=True)
class DialogSpec:
    kind: DialogKind
    text: str
    buttons: tuple[str, ...] = ("OK",)


@dataclass(frozen=True)
class TextSpec:
    message: str
    size: float = 18.0


@dataclass(frozen=True)
class ButtonSpec:
    text: str


@dataclass(frozen=True)
class DefaultDialogFactory:
    def message(self, text: str) -> DialogSpec:
        return DialogSpec(kind=DialogKind.MESSAGE, text=text)

    def confirmation(self, text: str) -> DialogSpec:
        return DialogSpec(kind=DialogKind.CONFIRMATION, text=text, buttons=("Yes", "No"))

    def error(self, exc: BaseException) -> DialogSpec:
        return DialogSpec(kind=DialogKind.ERROR, text=f"{type(exc).__name__}: {exc}")


@dataclass(frozen=True)
class DefaultUIFactory:
    def new_text(self, message: str, size: float = 18.0) -> TextSpec:
        return TextSpec(message=message, size=size)

    def new_button(self, text: str) -> ButtonSpec:
        return ButtonSpec(text=text)
