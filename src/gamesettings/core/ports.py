"""Core ports (capability interfaces) held by the settings.

Settings only store these capabilities and hand them to the subsystems
that use them. A capability placed in `GameSettings` is shared by reference
with every snapshot produced by `freeze()`, and a snapshot may be read from
any thread. Implementations must therefore be stateless or internally
synchronised for the lifetime of the application.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .settings import ReadOnlyGameSettings


@runtime_checkable
class SceneFactory(Protocol):
    """Creates the built-in scenes of the application."""

    def new_intro(self, settings: "ReadOnlyGameSettings") -> Any:
        """Return the intro scene played before the main menu."""

    def new_main_menu(self, settings: "ReadOnlyGameSettings") -> Any:
        """Return the main menu scene."""

    def new_game_menu(self, settings: "ReadOnlyGameSettings") -> Any:
        """Return the in-game menu scene toggled by the menu key."""

    def new_loading_scene(self, settings: "ReadOnlyGameSettings") -> Any:
        """Return the scene shown while the game loads."""


@runtime_checkable
class DialogFactory(Protocol):
    """Creates modal dialogs."""

    def message(self, text: str) -> Any:
        """Return an informational dialog."""

    def confirmation(self, text: str) -> Any:
        """Return a yes/no dialog."""

    def error(self, exc: BaseException) -> Any:
        """Return a dialog describing an error."""


@runtime_checkable
class UIFactory(Protocol):
    """Creates basic UI controls."""

    def new_text(self, message: str, size: float = 18.0) -> Any:
        """Return a text control."""

    def new_button(self, text: str) -> Any:
        """Return a button control."""


@runtime_checkable
class NotificationService(Protocol):
    """User-visible, non-blocking notifications."""

    def push(self, text: str) -> None:
        """Display a notification."""


@runtime_checkable
class ExceptionHandler(Protocol):
    """Receives exceptions raised inside the application."""

    def handle(self, exc: BaseException) -> None:
        """Report a recoverable exception."""

    def handle_fatal(self, exc: BaseException) -> None:
        """Report an exception the application cannot recover from."""
