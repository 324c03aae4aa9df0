# (c) 2025 Ricci Adams
# MIT License (or) 1-clause BSD License

from __future__ import annotations

from typing import Any, Callable, Optional

from .status import WarningSearch


SettingsName = "BuryCompilation.sublime-settings"

NumberType = object()
StringList = object()

DefaultSettings = {
    "enabled":                    True,
    "save_windows_on_next_start": True,
    "warning_search":             WarningSearch.POINT,
    "success_message":            "Compilation successful.",
    "output_panel":               "exec",
    "build_commands":             StringList,
    "poll_interval":              NumberType,
    "start_timeout":              NumberType,
    "build_timeout":              NumberType,
    "debug":                      False
}

DefaultValues = {
    "build_commands": [ "build" ],
    "poll_interval":  100,
    "start_timeout":  30,
    "build_timeout":  3600
}


class GuardSettings(dict):

    def __init__(self, source: Any, callback: Optional[Callable[[], None]] = None) -> None:
        self.source = source
        self.callback = callback
        self.reload()


    def reload(self) -> None:
        for key, default_value in DefaultSettings.items():
            value = self.source.get(key)

            if default_value is NumberType:
                check = lambda: (isinstance(value, int) or isinstance(value, float)) and not isinstance(value, bool) and value > 0
                default_value = DefaultValues[key]

            elif default_value is StringList:
                check = lambda: isinstance(value, list) and all(isinstance(s, str) for s in value)
                default_value = list(DefaultValues[key])

            else:
                check = lambda: type(value) == type(default_value)

            if not check():
                value = default_value

            if key == "warning_search" and value not in WarningSearch.ALL:
                value = WarningSearch.POINT

            self[key] = value


    def handle_change(self) -> None:
        self.reload()
        if self.callback: self.callback()
