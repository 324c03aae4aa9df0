# (c) 2025 Ricci Adams
# MIT License (or) 1-clause BSD License

from __future__ import annotations

import traceback
from typing import Any, Optional

from .hooks import CompilationHooks
from .status import CompilationOutput, WarningSearch, has_warning, is_success


class InvalidSnapshot(Exception):
    pass


# Outbound calls a host must provide:
#
#   capture_layout()          -> snapshot
#   restore_layout(snapshot)  may raise InvalidSnapshot
#   is_output_visible()       -> bool
#   notify_user(message)
#
class WindowSystem:

    def capture_layout(self) -> Any:
        raise NotImplementedError()

    def restore_layout(self, snapshot: Any) -> None:
        raise NotImplementedError()

    def is_output_visible(self) -> bool:
        raise NotImplementedError()

    def notify_user(self, message: str) -> None:
        raise NotImplementedError()



class LayoutGuardState:

    def __init__(self, armed_for_capture: bool = True) -> None:
        self.armed_for_capture = armed_for_capture
        self.saved_layout = None
        self.last_outcome_was_clean = None
        self.enabled = False


    def is_pending(self) -> bool:
        return not self.armed_for_capture


    def __repr__(self) -> str:
        return (
            f"LayoutGuardState(armed_for_capture={self.armed_for_capture}, "
            f"saved_layout={'set' if self.saved_layout is not None else 'empty'}, "
            f"last_outcome_was_clean={self.last_outcome_was_clean}, "
            f"enabled={self.enabled})"
        )



class LayoutGuard:

    def __init__(
        self,
        hooks: CompilationHooks,
        window_system: WindowSystem,
        settings: Optional[dict] = None
    ) -> None:
        self.hooks = hooks
        self.window_system = window_system

        self.success_message = "Compilation successful."
        self.warning_search  = WarningSearch.POINT
        self.debug = False
        self._save_windows_setting = True

        if settings is not None:
            self._save_windows_setting = settings.get("save_windows_on_next_start", True)

        self.state = LayoutGuardState(self._save_windows_setting)

        if settings is not None:
            self.apply_settings(settings)


    def log(self, message: str) -> None:
        if self.debug:
            print("BuryCompilation:", message, self.state)


    def apply_settings(self, settings: dict) -> None:
        self.success_message = settings.get("success_message", self.success_message)
        self.warning_search  = settings.get("warning_search", self.warning_search)
        self.debug = settings.get("debug", self.debug)

        save_windows = settings.get("save_windows_on_next_start", self._save_windows_setting)
        if save_windows != self._save_windows_setting:
            self._save_windows_setting = save_windows
            self.state.armed_for_capture = save_windows
            self.log("save_windows_on_next_start changed")


    def enable(self) -> None:
        self.hooks.register_before_compile(self.on_compilation_start)
        self.hooks.register_on_finish(self.on_compilation_finish)

        self.state.enabled = True
        self.log("enabled")


    def disable(self) -> None:
        self.hooks.unregister_before_compile(self.on_compilation_start)
        self.hooks.unregister_on_finish(self.on_compilation_finish)

        # armed_for_capture is left alone so a later enable() resumes
        self.state.saved_layout = None
        self.state.enabled = False
        self.log("disabled")


    def on_compilation_start(self) -> None:
        state = self.state
        if state.is_pending():
            self.log("pending, keeping saved layout")
            return

        state.saved_layout = self.window_system.capture_layout()
        self.log("captured layout")


    def should_restore(self, status_text: str, output: Optional[CompilationOutput]) -> bool:
        if output is not None and not output.is_compilation:
            return False

        if not is_success(status_text):
            return False

        return not has_warning(status_text, output, self.warning_search)


    def on_compilation_finish(self, status_text: str, output: Optional[CompilationOutput] = None) -> None:
        state = self.state

        if not self.window_system.is_output_visible():
            state.saved_layout = None
            state.armed_for_capture = True
            self.log("output not visible, discarded layout")
            return

        clean = self.should_restore(status_text, output)

        state.last_outcome_was_clean = clean
        state.armed_for_capture = clean

        if not clean:
            self.log("unclean finish, leaving output visible")
            return

        self.restore()
        self.window_system.notify_user(self.success_message)


    def restore(self) -> None:
        snapshot = self.state.saved_layout
        self.state.saved_layout = None

        if snapshot is None:
            self.log("nothing to restore")
            return

        try:
            self.window_system.restore_layout(snapshot)
            self.log("restored layout")
        except Exception:
            if self.debug: traceback.print_exc()
