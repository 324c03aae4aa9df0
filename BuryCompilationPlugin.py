# (c) 2025 Ricci Adams
# MIT License (or) 1-clause BSD License

# Don't evaluate type annotations at runtime
from __future__ import annotations

import sublime
import sublime_plugin
import traceback
import weakref
from typing import Any, Callable, Optional

from .bury_compilation import (
    GuardSettings,
    SettingsName,
    WindowController,
    starts_build,
)


sBuryCompilationPlugin = None
sTimeouts = set()


def plugin_loaded():
    global sBuryCompilationPlugin
    sBuryCompilationPlugin = BuryCompilationPlugin()


def plugin_unloaded():
    cleanup_plugin()


def cleanup_plugin():
    global sBuryCompilationPlugin

    for weak_timeout in sTimeouts.copy():
        timeout = weak_timeout()
        if timeout: timeout.cancel()

    if sBuryCompilationPlugin:
        sBuryCompilationPlugin.destroy()
        sBuryCompilationPlugin = None


# Wraps sublime.set_timeout and provides a cancel() method
class Timeout:
    def __init__(self, callback: Callable, delay: int = 0) -> None:
        self.callback = callback
        sublime.set_timeout(self.__call, delay)

        self.weak_self = weakref.ref(self)
        sTimeouts.add(self.weak_self)

    def cancel(self):
        self.callback = None
        sTimeouts.discard(self.weak_self)

    def __call(self):
        if self.callback:
            self.callback()
        self.cancel()


class OutputPanel:

    def __init__(self, view: sublime.View) -> None:
        self.view = view


    def identity(self) -> tuple:
        return (self.view.id(), self.view.change_count())


    def tail_text(self) -> str:
        view = self.view
        size = view.size()
        if size == 0: return ""

        # Two lines, in case the finish line is followed by a newline
        last_line = view.line(size - 1)
        start = view.line(max(0, last_line.a - 1)).a

        return view.substr(sublime.Region(start, size))


    def text(self) -> str:
        return self.view.substr(sublime.Region(0, self.view.size()))


    def caret(self) -> int:
        selection = self.view.sel()
        return selection[0].b if len(selection) > 0 else 0


    def is_compilation(self) -> bool:
        return self.view.settings().has("result_file_regex")


def find_output_panel(window: sublime.Window, panel_name: str) -> Optional[OutputPanel]:
    if not window.is_valid(): return None

    view = window.find_output_panel(panel_name)
    return OutputPanel(view) if view else None



class Listener(sublime_plugin.EventListener):

    def on_window_command(self, window: sublime.Window, command_name: str, args: Any):
        # The layout must be captured before the build command runs
        if sBuryCompilationPlugin:
            sBuryCompilationPlugin.handle_window_command(window, command_name, args)

        return None

    def on_pre_close_window(self, window: sublime.Window):
        Timeout(lambda: sBuryCompilationPlugin and sBuryCompilationPlugin.handle_close_window(window))

    def on_exit(self):
        cleanup_plugin()



class ToggleBuryCompilationCommand(sublime_plugin.ApplicationCommand):

    def run(self):
        source = sublime.load_settings(SettingsName)
        source.set("enabled", not source.get("enabled", True))
        sublime.save_settings(SettingsName)

    def is_checked(self):
        return bool(sBuryCompilationPlugin and sBuryCompilationPlugin.settings["enabled"])



class BuryCompilationPlugin():

    def __init__(self) -> None:
        self.window_to_controller_map = { }

        self.source = sublime.load_settings(SettingsName)
        self.settings = GuardSettings(self.source, lambda: self.handle_settings_changed())
        self.source.add_on_change("BuryCompilation", self.settings.handle_change)

        for window in sublime.windows():
            self.get_window_controller(window)


    def handle_settings_changed(self) -> None:
        for controller in self.window_to_controller_map.values():
            controller.handle_settings_changed(self.settings)


    def get_window_controller(self, window: sublime.Window) -> WindowController:
        controller = self.window_to_controller_map.get(window)

        if not controller:
            controller = WindowController(window, self.settings, find_output_panel, Timeout)
            self.window_to_controller_map[window] = controller

        return controller


    def handle_window_command(self, window: sublime.Window, command_name: str, args: Any) -> None:
        if not starts_build(command_name, args, self.settings["build_commands"]): return

        try:
            self.get_window_controller(window).handle_build_started()
        except Exception:
            traceback.print_exc()


    def handle_close_window(self, window: sublime.Window) -> None:
        controller = self.window_to_controller_map.pop(window, None)
        if controller: controller.destroy()


    def destroy(self) -> None:
        self.source.clear_on_change("BuryCompilation")

        for controller in self.window_to_controller_map.values():
            controller.destroy()

        self.window_to_controller_map = { }
