"""Timers that drive threads, and the interrupt hook that ticks them."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .thread import PruThread


class PruTimer:
    """A software timer; each tick runs its owning thread while started.

    Hardware timers subclass this and program real peripherals in
    ``config_timer``, ``start_timer`` and ``stop_timer``.
    """

    def __init__(self, frequency: int = 0):
        if frequency < 0:
            raise ValueError("frequency must not be negative")
        self._frequency = frequency
        self.owner: PruThread | None = None
        self.running = False
        self.configured = False
        self.interrupt: TimerInterrupt | None = None

    def set_owner(self, owner: PruThread | None) -> None:
        """Attach the thread this timer drives."""
        self.owner = owner

    @property
    def frequency(self) -> int:
        return self._frequency

    @frequency.setter
    def frequency(self, value: int) -> None:
        if value < 0:
            raise ValueError("frequency must not be negative")
        if self.running:
            self.stop_timer()
            self._frequency = value
            self.config_timer()
            self.start_timer()
        else:
            self._frequency = value

    def config_timer(self) -> None:
        """Prepare the timer for the current frequency."""
        self.configured = True

    def start_timer(self) -> None:
        """Start ticking."""
        self.running = True

    def stop_timer(self) -> None:
        """Stop ticking."""
        self.running = False

    def timer_tick(self) -> None:
        """Run the owning thread once if the timer is started."""
        if self.running and self.owner is not None:
            self.owner.update()


class TimerInterrupt:
    """Binds an interrupt number to a timer and forwards the interrupt to it."""

    def __init__(self, interrupt_number: int, owner: PruTimer):
        self.interrupt_number = interrupt_number
        self.owner = owner

    def isr_handler(self) -> None:
        """Handle the interrupt by ticking the owning timer."""
        self.owner.timer_tick()