# (c) 2025 Ricci Adams
# MIT License (or) 1-clause BSD License

from .hooks import CompilationHooks
from .layout_guard import InvalidSnapshot, LayoutGuard, LayoutGuardState, WindowSystem
from .settings import DefaultSettings, GuardSettings, SettingsName
from .status import (
    CompilationOutput,
    WarningSearch,
    find_finish_line,
    has_warning,
    is_success,
    status_from_finish_line,
)
from .watcher import BuildWatcher, starts_build
from .window import SublimeWindowSystem, WindowController, WindowSnapshot

__all__ = [
    "CompilationHooks",
    "CompilationOutput",
    "DefaultSettings",
    "GuardSettings",
    "InvalidSnapshot",
    "LayoutGuard",
    "LayoutGuardState",
    "SettingsName",
    "WarningSearch",
    "BuildWatcher",
    "SublimeWindowSystem",
    "WindowController",
    "WindowSnapshot",
    "WindowSystem",
    "find_finish_line",
    "has_warning",
    "is_success",
    "status_from_finish_line",
    "starts_build",
]
