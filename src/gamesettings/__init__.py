"""gamesettings - Mutable game settings that freeze into a read-only snapshot"""

__version__ = "1.0.0"
__description__ = "Mutable game settings that freeze into a read-only snapshot"

__all__ = [
    "ApplicationMode",
    "Credits",
    "GameSettings",
    "KeyCode",
    "MenuItem",
    "ReadOnlyGameSettings",
    "__version__",
]

_EXPORTS = {
    "ApplicationMode": ".core.application_mode",
    "Credits": ".core.credits",
    "GameSettings": ".core.settings",
    "KeyCode": ".core.keys",
    "MenuItem": ".core.menu_item",
    "ReadOnlyGameSettings": ".core.settings",
}


def __getattr__(name: str):
    """Lazy import so that `gamesettings.config` can be imported on its own
    without loading the default adapters (and reading the environment).
    """
    module_name = _EXPORTS.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    from importlib import import_module

    return getattr(import_module(module_name, __name__), name)
