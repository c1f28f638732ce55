"""A timer-driven thread that runs its registered modules every cycle."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .module import Module
    from .timer import PruTimer


class PruThread:
    """Runs modules, then post-stage modules, on each timer tick."""

    def __init__(self, name: str):
        self.name = name
        self.timer: PruTimer | None = None
        self._running = False
        self._paused = False
        self._modules: list[Module] = []
        self._modules_post: list[Module] = []

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def modules(self) -> tuple[Module, ...]:
        return tuple(self._modules)

    @property
    def modules_post(self) -> tuple[Module, ...]:
        return tuple(self._modules_post)

    @property
    def frequency(self) -> int:
        """Frequency of the attached timer, or 0 without one."""
        return self.timer.frequency if self.timer is not None else 0

    def set_timer(self, timer: PruTimer) -> None:
        """Attach a timer and make this thread its owner."""
        self.timer = timer
        timer.set_owner(self)

    def register_module(self, module: Module) -> None:
        """Add a module to the per-cycle list."""
        if module is None:
            raise ValueError("cannot register a missing module")
        self._modules.append(module)

    def register_module_post(self, module: Module) -> None:
        """Add a module to the post-stage list."""
        if module is None:
            raise ValueError("cannot register a missing module")
        self._modules_post.append(module)

    def unregister_module(self, module: Module) -> None:
        """Remove every registration of a module from both lists."""
        if module is None:
            raise ValueError("cannot unregister a missing module")
        self._modules = [m for m in self._modules if m is not module]
        self._modules_post = [m for m in self._modules_post if m is not module]

    def start(self) -> None:
        """Configure and start the timer; does nothing if already running."""
        if self._running:
            return
        if self.timer is None:
            raise RuntimeError(f"thread {self.name!r} has no timer")
        self._running = True
        self._paused = False
        self.timer.config_timer()
        self.timer.start_timer()

    def stop(self) -> None:
        """Stop the thread and its timer."""
        if self.timer is None:
            raise RuntimeError(f"thread {self.name!r} has no timer")
        self._running = False
        self._paused = False
        self.timer.stop_timer()

    def update(self) -> None:
        """Run one cycle of all modules unless stopped or paused."""
        if not self._running or self._paused:
            return
        for module in self._modules:
            module.run_module()
        for module in self._modules_post:
            module.run_module_post()

    def pause(self) -> None:
        self._paused = True

    def resume(self) -> None:
        self._paused = False