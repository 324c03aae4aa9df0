# (c) 2025 Ricci Adams
# MIT License (or) 1-clause BSD License

from __future__ import annotations

from typing import Any, Callable, Optional

from .hooks import CompilationHooks
from .layout_guard import InvalidSnapshot, LayoutGuard, WindowSystem
from .watcher import BuildWatcher, Scheduler


class WindowSnapshot:

    def __init__(
        self,
        layout:       dict,
        active_panel: Optional[str],
        active_group: int,
        group_views:  list
    ) -> None:
        self.layout       = layout
        self.active_panel = active_panel
        self.active_group = active_group
        self.group_views  = group_views



class SublimeWindowSystem(WindowSystem):

    def __init__(self, window: Any, panel_name: str) -> None:
        self.window = window
        self.panel_name = panel_name


    def get_output_panel_id(self) -> str:
        return f"output.{self.panel_name}"


    def capture_layout(self) -> WindowSnapshot:
        window = self.window

        group_views = [ ]
        for group in range(window.num_groups()):
            group_views.append(window.active_view_in_group(group))

        return WindowSnapshot(
            window.get_layout(),
            window.active_panel(),
            window.active_group(),
            group_views
        )


    def restore_layout(self, snapshot: WindowSnapshot) -> None:
        window = self.window

        if not isinstance(snapshot, WindowSnapshot) or not window.is_valid():
            raise InvalidSnapshot()

        if window.get_layout() != snapshot.layout:
            window.set_layout(snapshot.layout)

        # A panel that was open before the build, the output panel included, stays open
        if snapshot.active_panel:
            window.run_command("show_panel", { "panel": snapshot.active_panel })
        else:
            window.run_command("hide_panel", { "panel": self.get_output_panel_id() })

        for view in snapshot.group_views:
            if view and view.is_valid():
                window.focus_view(view)

        if snapshot.active_group < window.num_groups():
            window.focus_group(snapshot.active_group)


    def is_output_visible(self) -> bool:
        return self.window.is_valid() and self.window.active_panel() == self.get_output_panel_id()


    def notify_user(self, message: str) -> None:
        self.window.status_message(message)



class WindowController:

    def __init__(
        self,
        window:     Any,
        settings:   dict,
        find_panel: Callable[[Any, str], Any],
        schedule:   Scheduler
    ) -> None:
        self.window = window
        self.panel_name = settings["output_panel"]

        self.hooks = CompilationHooks()
        self.window_system = SublimeWindowSystem(window, self.panel_name)
        self.watcher = BuildWatcher(lambda: find_panel(self.window, self.panel_name), self.hooks, schedule)
        self.guard = LayoutGuard(self.hooks, self.window_system, settings)

        self.handle_settings_changed(settings)


    def handle_settings_changed(self, settings: dict) -> None:
        self.panel_name = settings["output_panel"]
        self.window_system.panel_name = self.panel_name

        self.watcher.interval      = settings["poll_interval"]
        self.watcher.start_timeout = settings["start_timeout"] * 1000
        self.watcher.build_timeout = settings["build_timeout"] * 1000

        self.guard.apply_settings(settings)

        enabled = settings["enabled"]
        if enabled and not self.guard.state.enabled:
            self.guard.enable()
        elif not enabled and self.guard.state.enabled:
            self.watcher.cancel()
            self.guard.disable()


    def handle_build_started(self) -> None:
        if not self.guard.state.enabled: return

        self.hooks.run_before_compile()
        self.watcher.start()


    def destroy(self) -> None:
        self.watcher.cancel()
        self.guard.disable()
        self.hooks.clear()
