"""Default scene factory producing plain scene descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from ..core.menu_item import MenuItem

if TYPE_CHECKING:
    from ..core.settings import ReadOnlyGameSettings


class SceneKind(Enum):
    INTRO = auto()
    MAIN_MENU = auto()
    GAME_MENU = auto()
    LOADING = auto()


@dataclass(frozen=True)
class SceneSpec:
    """Description of a built-in scene for the scene-graph builder.

    Attributes:
        kind: Which built-in scene this is
        title: Header text
        width: Target width in px
        height: Target height in px
        menu_items: Optional entries shown by a menu scene
    """

    kind: SceneKind
    title: str
    width: int
    height: int
    menu_items: frozenset[MenuItem] = frozenset()


@dataclass(frozen=True)
class DefaultSceneFactory:
    def new_intro(self, settings: "ReadOnlyGameSettings") -> SceneSpec:
        return self._scene(SceneKind.INTRO, settings)

    def new_main_menu(self, settings: "ReadOnlyGameSettings") -> SceneSpec:
        return self._scene(SceneKind.MAIN_MENU, settings, with_menu=True)

    def new_game_menu(self, settings: "ReadOnlyGameSettings") -> SceneSpec:
        return self._scene(SceneKind.GAME_MENU, settings, with_menu=True)

    def new_loading_scene(self, settings: "ReadOnlyGameSettings") -> SceneSpec:
        return self._scene(SceneKind.LOADING, settings)

    @staticmethod
    def _scene(
        kind: SceneKind, settings: "ReadOnlyGameSettings", with_menu: bool = False
    ) -> SceneSpec:
        items = frozenset()
        if with_menu and settings.menu_enabled:
            items = settings.enabled_menu_items
        return SceneSpec(
            kind=kind,
            title=settings.title,
            width=settings.width,
            height=settings.height,
            menu_items=items,
        )
