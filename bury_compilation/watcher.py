# (c) 2025 Ricci Adams
# MIT License (or) 1-clause BSD License

from __future__ import annotations

from typing import Any, Callable

from .hooks import CompilationHooks
from .status import CompilationOutput, find_finish_line, status_from_finish_line


# An output panel as seen by BuildWatcher:
#
#   identity()        -> hashable, changes whenever the panel is edited or replaced
#   tail_text()       -> the last two lines of the panel
#   text()            -> the whole panel
#   caret()           -> int
#   is_compilation()  -> bool
#
PanelFinder = Callable[[], Any]

# schedule(callback, delay_ms) -> object with cancel()
Scheduler = Callable[[Callable[[], None], float], Any]


def starts_build(command_name: str, args: Any, build_commands: list) -> bool:
    if command_name not in build_commands: return False
    if isinstance(args, dict) and args.get("kill"): return False
    return True


class BuildWatcher:

    def __init__(self, find_panel: PanelFinder, hooks: CompilationHooks, schedule: Scheduler) -> None:
        self.find_panel = find_panel
        self.hooks = hooks
        self.schedule = schedule

        self.interval = 100
        self.start_timeout = 30000
        self.build_timeout = 3600000

        self.timeout = None
        self.baseline = None
        self.started = False
        self.elapsed = 0


    def start(self) -> None:
        self.cancel()

        panel = self.find_panel()
        self.baseline = panel.identity() if panel else None
        self.started = False
        self.elapsed = 0

        self._schedule()


    def cancel(self) -> None:
        if self.timeout:
            self.timeout.cancel()
            self.timeout = None


    def _schedule(self) -> None:
        self.timeout = self.schedule(lambda: self._poll(), self.interval)


    def _poll(self) -> None:
        self.timeout = None
        self.elapsed += self.interval

        panel = self.find_panel()

        if not panel or panel.identity() == self.baseline:
            # Build never wrote to the panel, e.g. a dismissed build variant picker
            if not self.started and self.elapsed >= self.start_timeout:
                return

            if self.started and self.elapsed >= self.build_timeout:
                return

            self._schedule()
            return

        self.started = True
        self.baseline = panel.identity()

        finish_line = find_finish_line(panel.tail_text())

        if finish_line is None:
            # Quiet builds never print a finish line
            if self.elapsed < self.build_timeout:
                self._schedule()
            return

        output = CompilationOutput(panel.text(), panel.caret(), panel.is_compilation())
        self.hooks.run_on_finish(status_from_finish_line(finish_line), output)
