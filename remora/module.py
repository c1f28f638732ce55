"""Base class for modules run by threads, and the pin abstraction they drive."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum

log = logging.getLogger(__name__)


class PinMode(IntEnum):
    """Direction of a GPIO pin."""

    INPUT = 0
    OUTPUT = 1


@dataclass
class Pin:
    """A GPIO pin kept in memory; hardware back-ends subclass it."""

    name: str
    mode: PinMode = PinMode.INPUT
    modifier: int = 0
    state: bool = False

    def get(self) -> bool:
        """Read the pin level."""
        return self.state

    def set(self, state: bool) -> None:
        """Drive the pin level."""
        self.state = bool(state)


class Module:
    """A unit of work run by a thread at the thread's frequency.

    ``update`` runs on every cycle; ``slow_update`` runs once every
    ``thread_freq // slow_update_freq`` cycles, or every cycle when no
    frequencies are given.
    """

    uses_module_post: bool = False

    def __init__(self, thread_freq: int | None = None, slow_update_freq: int | None = None):
        if thread_freq is None and slow_update_freq is None:
            self.thread_freq = None
            self.slow_update_freq = None
            self.update_count = 1
            log.debug("creating a standard module")
        elif thread_freq is None or slow_update_freq is None:
            raise TypeError("thread_freq and slow_update_freq must be given together")
        else:
            if slow_update_freq <= 0:
                raise ValueError("slow_update_freq must be positive")
            if thread_freq < 0:
                raise ValueError("thread_freq must not be negative")
            self.thread_freq = thread_freq
            self.slow_update_freq = slow_update_freq
            self.update_count = thread_freq // slow_update_freq
            log.debug("creating a slower module, updating every %d thread cycles", self.update_count)
        self.counter = 0

    def run_module(self) -> None:
        """Run one thread cycle, including the slow update when it falls due."""
        self.counter += 1
        if self.counter >= self.update_count:
            self.slow_update()
            self.counter = 0
        self.update()

    def run_module_post(self) -> None:
        """Run the post-update stage of a thread cycle."""
        self.update_post()

    def update(self) -> None:
        """Per-cycle work; the base module does nothing."""

    def update_post(self) -> None:
        """Post-cycle work; the base module does nothing."""

    def slow_update(self) -> None:
        """Slow-rate work; the base module does nothing."""

    def configure(self) -> None:
        """One-off configuration; the base module does nothing."""