import dataclasses

import pytest

from gamesettings.core.application_mode import ApplicationMode
from gamesettings.core.credits import Credits
from gamesettings.core.keys import KeyCode
from gamesettings.core.menu_item import MenuItem
from gamesettings.core.ports import (
    DialogFactory,
    ExceptionHandler,
    NotificationService,
    SceneFactory,
    UIFactory,
)
from gamesettings.core.settings import GameSettings, ReadOnlyGameSettings


class _Notifications(NotificationService):
    def __init__(self):
        self.calls = []

    def push(self, text: str) -> None:
        self.calls.append(text)


class _Scenes(SceneFactory):
    def new_intro(self, settings):
        return "intro"

    def new_main_menu(self, settings):
        return "main"

    def new_game_menu(self, settings):
        return "game"

    def new_loading_scene(self, settings):
        return "loading"


class _Dialogs(DialogFactory):
    def message(self, text):
        return text

    def confirmation(self, text):
        return text

    def error(self, exc):
        return str(exc)


class _UI(UIFactory):
    def new_text(self, message, size=18.0):
        return message

    def new_button(self, text):
        return text


class _Errors(ExceptionHandler):
    def handle(self, exc):
        pass

    def handle_fatal(self, exc):
        raise exc


FIELD_CHANGES = [
    ("title", "Snake"),
    ("width", 1920),
    ("height", 1080),
    ("version", "3.1"),
    ("intro_enabled", False),
    ("menu_enabled", False),
    ("full_screen", True),
    ("profiling_enabled", False),
    ("close_confirmation", False),
    ("application_mode", ApplicationMode.DEBUG),
    ("menu_key", KeyCode.F10),
    ("credits", Credits.of("Design: Lee")),
    ("enabled_menu_items", frozenset({MenuItem.EXTRA})),
    ("scene_factory", _Scenes()),
    ("dialog_factory", _Dialogs()),
    ("ui_factory", _UI()),
    ("notification_service", _Notifications()),
    ("exception_handler", _Errors()),
]


def test_defaults_when_frozen_without_changes():
    frozen = GameSettings().freeze()

    assert isinstance(frozen, ReadOnlyGameSettings)
    assert frozen.title == "Untitled Application"
    assert frozen.width == 800
    assert frozen.height == 600
    assert frozen.version == "0.0"
    assert frozen.intro_enabled is True
    assert frozen.menu_enabled is True
    assert frozen.full_screen is False
    assert frozen.profiling_enabled is True
    assert frozen.close_confirmation is True
    assert frozen.application_mode == ApplicationMode.DEVELOPER
    assert frozen.menu_key == KeyCode.ESCAPE
    assert frozen.credits == Credits()
    assert frozen.enabled_menu_items == frozenset(MenuItem)


def test_default_capabilities_are_populated():
    frozen = GameSettings().freeze()

    for name in (
        "scene_factory",
        "dialog_factory",
        "ui_factory",
        "notification_service",
        "exception_handler",
    ):
        assert getattr(frozen, name) is not None


def test_builders_do_not_share_menu_item_sets():
    first = GameSettings()
    second = GameSettings()

    first.enabled_menu_items = first.enabled_menu_items - {MenuItem.ONLINE}

    assert MenuItem.ONLINE in second.enabled_menu_items


def test_mutation_after_freeze_is_not_visible():
    settings = GameSettings()
    settings.width = 1024
    frozen = settings.freeze()

    settings.width = 500

    assert frozen.width == 1024
    assert settings.width == 500


def test_menu_items_view_cannot_be_changed_in_place():
    settings = GameSettings()

    with pytest.raises(AttributeError):
        settings.enabled_menu_items.add("ONLINE")

    frozen = settings.freeze()
    assert frozen.enabled_menu_items == frozenset(MenuItem)
    assert frozen.summary()["menu_items"] == ["EXTRA", "ONLINE", "SAVE_LOAD"]


def test_menu_items_reassigned_after_freeze_are_not_visible():
    settings = GameSettings()
    frozen = settings.freeze()

    settings.enabled_menu_items = set()

    assert frozen.enabled_menu_items == frozenset(MenuItem)


def test_capability_reassigned_after_freeze_is_not_visible():
    settings = GameSettings()
    original = settings.notification_service
    frozen = settings.freeze()

    settings.notification_service = _Notifications()

    assert frozen.notification_service is original


def test_multiple_freezes_are_equal_and_independent():
    settings = GameSettings()
    settings.title = "Pong"

    first = settings.freeze()
    second = settings.freeze()

    assert first == second
    assert first is not second

    settings.title = "Breakout"
    settings.enabled_menu_items = {MenuItem.EXTRA}

    assert first.title == "Pong"
    assert second.title == "Pong"
    assert first.enabled_menu_items == frozenset(MenuItem)
    assert second.enabled_menu_items == frozenset(MenuItem)


def test_enabled_menu_items_replaces_whole_set():
    settings = GameSettings()
    settings.enabled_menu_items = {MenuItem.SAVE_LOAD, MenuItem.EXTRA}
    settings.enabled_menu_items = {MenuItem.ONLINE}

    assert settings.freeze().enabled_menu_items == frozenset({MenuItem.ONLINE})


def test_enabled_menu_items_collapses_duplicates():
    settings = GameSettings()
    settings.enabled_menu_items = [MenuItem.EXTRA, MenuItem.EXTRA]

    assert settings.enabled_menu_items == {MenuItem.EXTRA}


def test_enabled_menu_items_copies_assigned_set():
    items = {MenuItem.EXTRA}
    settings = GameSettings()
    settings.enabled_menu_items = items

    items.add(MenuItem.ONLINE)

    assert settings.enabled_menu_items == {MenuItem.EXTRA}


def test_enabled_menu_items_rejects_foreign_values():
    settings = GameSettings()

    with pytest.raises(TypeError):
        settings.enabled_menu_items = {MenuItem.EXTRA, "ONLINE"}

    assert settings.enabled_menu_items == set(MenuItem)


def test_field_changes_cover_every_field():
    names = {field.name for field in dataclasses.fields(ReadOnlyGameSettings)}

    assert {name for name, _ in FIELD_CHANGES} == names


@pytest.mark.parametrize("name, value", FIELD_CHANGES)
def test_setting_same_value_twice_equals_setting_once(name, value):
    once = GameSettings()
    setattr(once, name, value)

    twice = GameSettings()
    setattr(twice, name, value)
    setattr(twice, name, value)

    assert once.freeze() == twice.freeze()


@pytest.mark.parametrize("name, value", FIELD_CHANGES)
def test_setting_one_field_does_not_touch_other_fields(name, value):
    settings = GameSettings()
    before = settings.freeze()

    setattr(settings, name, value)
    after = settings.freeze()

    assert getattr(after, name) == value
    for field in dataclasses.fields(ReadOnlyGameSettings):
        if field.name != name:
            assert getattr(after, field.name) == getattr(before, field.name)


def test_default_snapshots_do_not_depend_on_environment(monkeypatch):
    monkeypatch.setenv("GAMESETTINGS_NOTIFICATION_TIMEOUT", "fast")
    first = GameSettings().freeze()

    monkeypatch.setenv("GAMESETTINGS_NOTIFICATIONS", "false")
    second = GameSettings().freeze()

    assert first == second


def test_values_are_not_range_checked():
    settings = GameSettings()
    settings.width = 0
    settings.height = -1

    frozen = settings.freeze()
    assert (frozen.width, frozen.height) == (0, -1)


def test_frozen_settings_reject_assignment():
    frozen = GameSettings().freeze()

    with pytest.raises(dataclasses.FrozenInstanceError):
        frozen.width = 1024

    assert not hasattr(frozen, "freeze")


def test_all_fields_round_trip_through_freeze():
    notifications = _Notifications()
    settings = GameSettings()
    settings.title = "Space Rocks"
    settings.width = 1280
    settings.height = 720
    settings.version = "1.2"
    settings.intro_enabled = False
    settings.menu_enabled = False
    settings.full_screen = True
    settings.profiling_enabled = False
    settings.close_confirmation = False
    settings.application_mode = ApplicationMode.RELEASE
    settings.menu_key = KeyCode.P
    settings.credits = Credits.of("Art: Jo")
    settings.enabled_menu_items = set()
    settings.notification_service = notifications

    frozen = settings.freeze()

    assert frozen.summary() == {
        "title": "Space Rocks",
        "version": "1.2",
        "size": "1280x720",
        "full_screen": True,
        "mode": "RELEASE",
        "intro_enabled": False,
        "menu_enabled": False,
        "menu_key": "P",
        "menu_items": [],
        "profiling_enabled": False,
        "close_confirmation": False,
    }
    assert frozen.credits.lines == ("Art: Jo",)
    frozen.notification_service.push("saved")
    assert notifications.calls == ["saved"]


def test_freeze_logs_at_debug(caplog):
    settings = GameSettings()
    settings.title = "Tetris"

    with caplog.at_level("DEBUG", logger="gamesettings.core.settings"):
        settings.freeze()

    assert any("Tetris" in record.getMessage() for record in caplog.records)


def test_package_exports_lazily():
    import gamesettings

    assert gamesettings.GameSettings is GameSettings
    assert gamesettings.ReadOnlyGameSettings is ReadOnlyGameSettings
    with pytest.raises(AttributeError):
        gamesettings.Missing
