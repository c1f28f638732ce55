"""Module mapping one GPIO pin to one bit of the input or output word."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import IntEnum
from typing import Any

from .module import Module, Pin, PinMode

log = logging.getLogger(__name__)

_WORD_MASK = 0xFFFF


class PinModifier(IntEnum):
    """Electrical configuration of a pin."""

    NONE = 0
    OPEN_DRAIN = 1
    PULL_UP = 2
    PULL_DOWN = 3
    PULL_NONE = 4

    @classmethod
    def from_name(cls, name: str) -> PinModifier:
        """Map a configuration name; unknown names give NONE."""
        return _MODIFIER_NAMES.get(name, cls.NONE)


_MODIFIER_NAMES = {
    "Open Drain": PinModifier.OPEN_DRAIN,
    "Pull Up": PinModifier.PULL_UP,
    "Pull Down": PinModifier.PULL_DOWN,
    "Pull None": PinModifier.PULL_NONE,
}


class DigitalPin(Module):
    """Copies a pin into ``inputs`` (input mode) or a bit of ``outputs`` to a pin."""

    def __init__(self, data: Any, mode: PinMode, pin: Pin | str, bit_number: int, invert: bool = False):
        super().__init__()
        if not 0 <= bit_number < 16:
            raise ValueError("bit_number must be between 0 and 15")
        self.data = data
        self.mode = PinMode(mode)
        self.pin = pin if isinstance(pin, Pin) else Pin(pin, self.mode)
        self.bit_number = bit_number
        self.invert = bool(invert)
        self.mask = 1 << bit_number
        self._field = "outputs" if self.mode == PinMode.OUTPUT else "inputs"

    @classmethod
    def create(cls, config: Mapping[str, Any], instance: Any) -> DigitalPin:
        """Build a digital pin module from its configuration entry."""
        pin_name = config["Pin"]
        mode_name = config["Mode"]
        invert = config["Invert"] == "True"
        modifier = PinModifier.from_name(config["Modifier"])
        bit_number = int(config["Data Bit"])

        if mode_name == "Output":
            mode, data = PinMode.OUTPUT, instance.rx_data
        else:
            mode, data = PinMode.INPUT, instance.tx_data

        log.info("creating DigitalPin module: mode=%s, pin=%s", mode_name, pin_name)
        pin = instance.pin_factory(pin_name, mode, modifier)
        return cls(data, mode, pin, bit_number, invert)

    def update(self) -> None:
        word = getattr(self.data, self._field)
        if self.mode == PinMode.INPUT:
            state = self.pin.get() != self.invert
            word = word | self.mask if state else word & ~self.mask
            setattr(self.data, self._field, word & _WORD_MASK)
        else:
            state = bool(word & self.mask) != self.invert
            self.pin.set(state)