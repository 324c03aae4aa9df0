# (c) 2025 Ricci Adams
# MIT License (or) 1-clause BSD License

from __future__ import annotations

import traceback
from typing import Callable, Optional

from .status import CompilationOutput


StartCallback  = Callable[[], None]
FinishCallback = Callable[[str, Optional[CompilationOutput]], None]


class CompilationHooks:

    def __init__(self) -> None:
        self.before_compile = [ ]
        self.on_finish = [ ]


    def register_before_compile(self, callback: StartCallback) -> None:
        if callback not in self.before_compile:
            self.before_compile.append(callback)


    def register_on_finish(self, callback: FinishCallback) -> None:
        if callback not in self.on_finish:
            self.on_finish.append(callback)


    def unregister_before_compile(self, callback: StartCallback) -> None:
        if callback in self.before_compile:
            self.before_compile.remove(callback)


    def unregister_on_finish(self, callback: FinishCallback) -> None:
        if callback in self.on_finish:
            self.on_finish.remove(callback)


    def is_empty(self) -> bool:
        return not self.before_compile and not self.on_finish


    def clear(self) -> None:
        self.before_compile = [ ]
        self.on_finish = [ ]


    def run_before_compile(self) -> None:
        for callback in list(self.before_compile):
            try:
                callback()
            except Exception:
                traceback.print_exc()


    def run_on_finish(self, status_text: str, output: Optional[CompilationOutput] = None) -> None:
        for callback in list(self.on_finish):
            try:
                callback(status_text, output)
            except Exception:
                traceback.print_exc()
