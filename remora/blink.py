"""Module that toggles an output pin at a fixed frequency."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .module import Module, Pin, PinMode

log = logging.getLogger(__name__)


def _as_pin(pin: Pin | str, mode: PinMode) -> Pin:
    return pin if isinstance(pin, Pin) else Pin(pin, mode)


class Blink(Module):
    """Toggles a pin so that it completes ``freq`` on/off cycles per second."""

    def __init__(self, pin: Pin | str, thread_freq: int, freq: int):
        super().__init__()
        if freq <= 0:
            raise ValueError("blink frequency must be positive")
        self.state = False
        self.period_count = thread_freq // freq
        self.blink_count = 0
        self.pin = _as_pin(pin, PinMode.OUTPUT)
        self.pin.set(self.state)

    @classmethod
    def create(cls, config: Mapping[str, Any], instance: Any) -> Blink:
        """Build a blink module from its configuration entry."""
        pin_name = config["Pin"]
        frequency = int(config["Frequency"])
        thread_freq = int(config["ThreadFreq"])
        log.info("creating Blink module on pin %s with frequency %d Hz", pin_name, frequency)
        return cls(instance.pin_factory(pin_name, PinMode.OUTPUT), thread_freq, frequency)

    def update(self) -> None:
        self.blink_count += 1
        if self.blink_count >= self.period_count // 2:
            self.state = not self.state
            self.pin.set(self.state)
            self.blink_count = 0