"""Step generator: turns a joint frequency command into step and direction pulses."""

from __future__ import annotations

import logging
import struct
from collections.abc import Mapping
from typing import Any

from .data import STEP_BIT
from .module import Module, Pin, PinMode

log = logging.getLogger(__name__)

_FLOAT32 = struct.Struct("<f")


def _f32(value: float) -> float:
    """Round a value to single precision, as the accumulator arithmetic does."""
    return _FLOAT32.unpack(_FLOAT32.pack(value))[0]


def _wrap32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    return (value + 0x8000_0000) % 0x1_0000_0000 - 0x8000_0000


def _as_pin(pin: Pin | str) -> Pin:
    return pin if isinstance(pin, Pin) else Pin(pin, PinMode.OUTPUT)


class Stepgen(Module):
    """Direct digital synthesis step generator for one joint.

    Each update adds the scaled frequency command to an accumulator; a step
    pulse is issued whenever the accumulator's step bit changes. The post
    stage drops the step pin again.
    """

    def __init__(
        self,
        thread_freq: int,
        joint_number: int,
        enable_pin: Pin | str,
        step_pin: Pin | str,
        direction_pin: Pin | str,
        step_bit: int,
        rx_data: Any,
        tx_data: Any,
        uses_module_post: bool = True,
    ):
        super().__init__()
        if thread_freq <= 0:
            raise ValueError("thread_freq must be positive")
        if not 0 <= step_bit < 31:
            raise ValueError("step_bit must be between 0 and 30")
        if not 0 <= joint_number < len(rx_data.joint_freq_cmd):
            raise ValueError(f"joint_number {joint_number} is out of range")
        self.joint_number = joint_number
        self.step_bit = step_bit
        self.rx_data = rx_data
        self.tx_data = tx_data
        self.enable_pin = _as_pin(enable_pin)
        self.step_pin = _as_pin(step_pin)
        self.direction_pin = _as_pin(direction_pin)
        self.raw_count = 0
        self.accumulator = 0
        self.frequency_scale = _f32(float(1 << step_bit) / thread_freq)
        self.frequency_command = 0
        self.add_value = 0
        self.mask = 1 << joint_number
        self.is_enabled = False
        self.is_forward = False
        self.is_stepping = False
        self.uses_module_post = bool(uses_module_post)

    @classmethod
    def create(cls, config: Mapping[str, Any], instance: Any) -> Stepgen:
        """Build a step generator from its configuration entry."""
        comment = config.get("Comment")
        if comment:
            log.info("%s", comment)
        thread_freq = int(config["ThreadFreq"])
        joint = int(config["Joint Number"])
        pins = [
            instance.pin_factory(config[key], PinMode.OUTPUT)
            for key in ("Enable Pin", "Step Pin", "Direction Pin")
        ]
        return cls(
            thread_freq,
            joint,
            *pins,
            STEP_BIT,
            instance.rx_data,
            instance.tx_data,
            True,
        )

    def update(self) -> None:
        self._make_pulses()

    def update_post(self) -> None:
        self._stop_pulses()

    def set_enabled(self, state: bool) -> None:
        self.is_enabled = bool(state)

    def _make_pulses(self) -> None:
        self.is_enabled = (self.rx_data.joint_enable & self.mask) != 0
        if not self.is_enabled:
            self.enable_pin.set(True)
            return

        self.enable_pin.set(False)

        self.frequency_command = _wrap32(int(self.rx_data.joint_freq_cmd[self.joint_number]))
        product = _f32(_f32(float(self.frequency_command)) * self.frequency_scale)
        self.add_value = _wrap32(int(product))

        previous = self.accumulator
        self.accumulator = _wrap32(self.accumulator + self.add_value)
        step_now = (previous ^ self.accumulator) & (1 << self.step_bit)

        self.is_forward = self.add_value > 0

        if step_now:
            self.direction_pin.set(self.is_forward)
            self.step_pin.set(True)
            self.raw_count = _wrap32(self.raw_count + (1 if self.is_forward else -1))
            self.tx_data.joint_feedback[self.joint_number] = self.raw_count
            self.is_stepping = True

    def _stop_pulses(self) -> None:
        self.step_pin.set(False)
        self.is_stepping = False