"""Temperature sensors, including a beta-model thermistor read through an ADC."""

from __future__ import annotations

import math
from typing import Protocol

KELVIN_OFFSET = 273.15
ADC_FULL_SCALE = 65536.0


class AnalogInput(Protocol):
    """Anything that returns a 16-bit ADC reading."""

    def read(self) -> int: ...


class TempSensor:
    """Base temperature sensor; reports -1 when it has no reading."""

    def get_temperature(self) -> float:
        """Temperature in degrees Celsius."""
        return -1.0


class Thermistor(TempSensor):
    """NTC thermistor in a divider with a 4.7 kΩ resistor, using the beta equation."""

    def __init__(self, pin: str, beta: float, r0: float, t0: float, adc: AnalogInput):
        self.pin = pin
        self.beta = beta
        self.r0 = r0
        self.t0 = t0
        self.j = 1.0 / beta
        self.k = 1.0 / (t0 + KELVIN_OFFSET)
        self.adc = adc
        self.r1 = 0
        self.r2 = 4700

    def read_adc(self) -> int:
        """Take a raw ADC reading."""
        return int(self.adc.read())

    def _resistance(self, adc_value: float) -> float:
        divisor = math.inf if adc_value == 0 else ADC_FULL_SCALE / adc_value - 1.0
        resistance = math.inf if divisor == 0 else self.r2 / divisor
        if self.r1 > 0:
            resistance = (self.r1 * resistance) / (self.r1 - resistance)
        return resistance

    def adc_value_to_temperature(self) -> float:
        """Read the ADC and convert the reading to degrees Celsius."""
        ratio = self._resistance(float(self.read_adc())) / self.r0
        if math.isnan(ratio) or ratio < 0:
            return math.nan
        if ratio == 0:
            log_ratio = -math.inf
        elif math.isinf(ratio):
            log_ratio = math.inf
        else:
            log_ratio = math.log(ratio)
        denominator = self.k + self.j * log_ratio
        if denominator == 0:
            return math.inf
        return 1.0 / denominator - KELVIN_OFFSET

    def get_temperature(self) -> float:
        return self.adc_value_to_temperature()