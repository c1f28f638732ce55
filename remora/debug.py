"""Module that holds a pin at a fixed level every cycle, for timing probes."""

from __future__ import annotations

from .module import Module, Pin, PinMode


class Debug(Module):
    """Drives a pin to a fixed state on every update."""

    def __init__(self, pin: Pin | str, state: bool):
        super().__init__()
        self.state = bool(state)
        self.pin = pin if isinstance(pin, Pin) else Pin(pin, PinMode.OUTPUT)

    def update(self) -> None:
        self.pin.set(self.state)