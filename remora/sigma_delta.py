"""Sigma-delta modulated output driven by a percentage set point."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

from .module import Module, Pin, PinMode

log = logging.getLogger(__name__)

PID_SD_MAX = 256


def _confine(value: int, low: int, high: int) -> int:
    return low if value < low else high if value > high else value


class SigmaDelta(Module):
    """Drives a pin with a duty cycle set by ``rx_data.set_point[index]`` (0-100%)."""

    def __init__(self, pin: Pin | str, rx_data: Any, index: int, sd_max: int | None = None):
        super().__init__()
        self.pin = pin if isinstance(pin, Pin) else Pin(pin, PinMode.OUTPUT)
        self.rx_data = rx_data
        self.index = index
        self.sd_max = PID_SD_MAX - 1 if sd_max is None else _confine(sd_max, 0, PID_SD_MAX - 1)
        self.set_point = 0
        self.accumulator = 0
        self.direction = False

    @classmethod
    def create(cls, config: Mapping[str, Any], instance: Any) -> SigmaDelta:
        """Build a sigma-delta module from its configuration entry."""
        comment = config.get("Comment")
        if comment:
            log.info("%s", comment)
        index = int(config["SP[i]"])
        pin_name = config["SD Pin"]
        log.info("creating SigmaDelta module: pin=%s, SP index=%d", pin_name, index)
        sd_max = config.get("SD Max")
        if isinstance(sd_max, int) and not isinstance(sd_max, bool):
            log.info("using SD Max=%d", sd_max)
        else:
            log.info("using default SD Max")
            sd_max = None
        pin = instance.pin_factory(pin_name, PinMode.OUTPUT)
        return cls(pin, instance.rx_data, index, sd_max)

    def set_max_sd(self, sd_max: int) -> None:
        self.sd_max = _confine(sd_max, 0, PID_SD_MAX - 1)

    def set_sd_setpoint(self, percent: int) -> None:
        """Set the output directly as a percentage, scaled to the full range."""
        percent = _confine(percent, 0, 100)
        self.set_point = percent * (PID_SD_MAX - 1) // 100

    def _scaled_set_point(self) -> int:
        scaled = float(self.rx_data.set_point[self.index]) / 100.0 * self.sd_max
        if math.isnan(scaled):
            return 0
        return int(max(-1.0, min(scaled, self.sd_max + 1.0)))

    def update(self) -> None:
        scaled = self._scaled_set_point()
        if scaled != self.set_point:
            self.set_point = _confine(scaled, 0, self.sd_max)

        if self.set_point <= 0:
            self.pin.set(False)
            return
        if self.set_point >= self.sd_max:
            self.pin.set(True)
            return

        self.accumulator = _confine(self.accumulator, -self.sd_max, self.sd_max << 1)

        if not self.direction:
            self.accumulator += self.set_point
            if self.accumulator >= self.sd_max >> 1:
                self.direction = True
        else:
            self.accumulator -= self.sd_max - self.set_point
            if self.accumulator <= 0:
                self.direction = False

        self.pin.set(self.direction)