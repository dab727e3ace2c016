"""Game settings: a mutable builder and the read-only snapshot it freezes into.

`GameSettings` is filled in before the application starts. `freeze()` turns
it into a `ReadOnlyGameSettings`, which is the only form handed to the
window, menu, dialog, notification and exception subsystems. Changing the
builder after freezing has no effect on snapshots already produced.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from ..adapters.exceptions import LoggingExceptionHandler
from ..adapters.notifications import DesktopNotificationService
from ..adapters.scenes import DefaultSceneFactory
from ..adapters.ui import DefaultDialogFactory, DefaultUIFactory
from .application_mode import ApplicationMode
from .credits import Credits
from .keys import KeyCode
from .menu_item import MenuItem, all_menu_items
from .ports import DialogFactory, ExceptionHandler, NotificationService, SceneFactory, UIFactory

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled Application"
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
DEFAULT_VERSION = "0.0"
DEFAULT_MENU_KEY = KeyCode.ESCAPE


@dataclass(frozen=True)
class ReadOnlyGameSettings:
    """Immutable settings snapshot produced by `GameSettings.freeze()`.

    Safe to share between threads, provided the capability objects honour
    the sharing contract documented in `core.ports`.
    """

    title: str
    width: int
    height: int
    version: str
    intro_enabled: bool
    menu_enabled: bool
    full_screen: bool
    profiling_enabled: bool
    close_confirmation: bool
    application_mode: ApplicationMode
    menu_key: KeyCode
    credits: Credits
    enabled_menu_items: frozenset[MenuItem]
    scene_factory: SceneFactory
    dialog_factory: DialogFactory
    ui_factory: UIFactory
    notification_service: NotificationService
    exception_handler: ExceptionHandler

    def summary(self) -> dict[str, object]:
        """Plain mapping of the scalar fields, for diagnostics."""
        return {
            "title": self.title,
            "version": self.version,
            "size": f"{self.width}x{self.height}",
            "full_screen": self.full_screen,
            "mode": self.application_mode.name,
            "intro_enabled": self.intro_enabled,
            "menu_enabled": self.menu_enabled,
            "menu_key": self.menu_key.name,
            "menu_items": sorted(item.name for item in self.enabled_menu_items),
            "profiling_enabled": self.profiling_enabled,
            "close_confirmation": self.close_confirmation,
        }


class GameSettings:
    """Mutable settings filled in before the application starts.

    Every field is a plain attribute and starts at its default. Values are
    not range-checked: a zero width is accepted and left for the consumer
    to judge.

    Attributes:
        title: Window header when not in full screen
        width: Target logical width in px
        height: Target logical height in px
        version: Free-form version string
        intro_enabled: Play the intro before the main menu
        menu_enabled: Enable the main and in-game menus
        full_screen: Start in full screen
        profiling_enabled: Report performance while running and on exit
        close_confirmation: Ask for confirmation on exit
        application_mode: Run mode, drives diagnostic verbosity
        menu_key: Key toggling the in-game menu
        credits: Extra credits
        enabled_menu_items: Optional menu entries to show
        scene_factory, dialog_factory, ui_factory, notification_service,
        exception_handler: Pluggable capabilities, see `core.ports`
    """

    def __init__(self) -> None:
        self.title: str = DEFAULT_TITLE
        self.width: int = DEFAULT_WIDTH
        self.height: int = DEFAULT_HEIGHT
        self.version: str = DEFAULT_VERSION
        self.intro_enabled: bool = True
        self.menu_enabled: bool = True
        self.full_screen: bool = False
        self.profiling_enabled: bool = True
        self.close_confirmation: bool = True
        self.application_mode: ApplicationMode = ApplicationMode.DEVELOPER
        self.menu_key: KeyCode = DEFAULT_MENU_KEY
        self.credits: Credits = Credits()
        self._enabled_menu_items: set[MenuItem] = all_menu_items()
        self.scene_factory: SceneFactory = DefaultSceneFactory()
        self.dialog_factory: DialogFactory = DefaultDialogFactory()
        self.ui_factory: UIFactory = DefaultUIFactory()
        self.notification_service: NotificationService = DesktopNotificationService()
        self.exception_handler: ExceptionHandler = LoggingExceptionHandler()

    @property
    def enabled_menu_items(self) -> frozenset[MenuItem]:
        # Read-only view; change the items by assigning a new set
        return frozenset(self._enabled_menu_items)

    @enabled_menu_items.setter
    def enabled_menu_items(self, items: Iterable[MenuItem]) -> None:
        # Replaces the whole set, never a union
        new_items = set(items)
        for item in new_items:
            if not isinstance(item, MenuItem):
                raise TypeError(f"enabled_menu_items accepts MenuItem values only: got={item!r}")
        self._enabled_menu_items = new_items

    def freeze(self) -> ReadOnlyGameSettings:
        """Return a read-only snapshot of the current values.

        Can be called any number of times; every call returns a new,
        independent snapshot. Capabilities are shared by reference.
        """
        logger.debug(
            "Freezing settings: title=%r mode=%s", self.title, self.application_mode.name
        )
        return ReadOnlyGameSettings(
            title=self.title,
            width=self.width,
            height=self.height,
            version=self.version,
            intro_enabled=self.intro_enabled,
            menu_enabled=self.menu_enabled,
            full_screen=self.full_screen,
            profiling_enabled=self.profiling_enabled,
            close_confirmation=self.close_confirmation,
            application_mode=self.application_mode,
            menu_key=self.menu_key,
            credits=self.credits,
            enabled_menu_items=frozenset(self._enabled_menu_items),
            scene_factory=self.scene_factory,
            dialog_factory=self.dialog_factory,
            ui_factory=self.ui_factory,
            notification_service=self.notification_service,
            exception_handler=self.exception_handler,
        )
