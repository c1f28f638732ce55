"""Module that reads a temperature sensor at a slow rate into a process variable."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .module import Module
from .thermistor import TempSensor, Thermistor

log = logging.getLogger(__name__)

SENSOR_ERROR_VALUE = 999.0
THERMISTOR_UPDATE_HZ = 1


class Temperature(Module):
    """Copies a sensor's reading into ``tx_data.process_variable[index]``.

    A reading that is not above zero is taken as a disconnected sensor and
    reported as 999.
    """

    def __init__(
        self,
        tx_data: Any,
        index: int,
        thread_freq: int,
        slow_update_freq: int,
        sensor: TempSensor,
    ):
        super().__init__(thread_freq, slow_update_freq)
        if not 0 <= index < len(tx_data.process_variable):
            raise ValueError(f"process variable index {index} is out of range")
        self.tx_data = tx_data
        self.index = index
        self.sensor = sensor
        self.temperature = 0.0
        # A couple of readings settle the ADC before the module goes live.
        self.slow_update()
        self.slow_update()

    @classmethod
    def create(cls, config: Mapping[str, Any], instance: Any) -> Temperature | None:
        """Build a temperature module; returns None for unsupported sensor types."""
        comment = config.get("Comment")
        if comment:
            log.info("%s", comment)
        thread_freq = int(config["ThreadFreq"])
        index = int(config["PV[i]"])
        sensor_type = config["Sensor"]

        if sensor_type != "Thermistor":
            return None

        settings = config["Thermistor"]
        pin_name = settings["Pin"]
        log.info("creating thermistor temperature measurement at pin %s", pin_name)
        sensor = Thermistor(
            pin_name,
            float(settings["beta"]),
            int(settings["r0"]),
            int(settings["t0"]),
            instance.analog_factory(pin_name),
        )
        return cls(instance.tx_data, index, thread_freq, THERMISTOR_UPDATE_HZ, sensor)

    def update(self) -> None:
        """Nothing runs at the thread rate."""

    def slow_update(self) -> None:
        self.temperature = self.sensor.get_temperature()
        if self.temperature > 0:
            self.tx_data.process_variable[self.index] = self.temperature
        else:
            log.warning(
                "temperature sensor error, pin %s reading = %f",
                getattr(self.sensor, "pin", "?"),
                self.temperature,
            )
            self.tx_data.process_variable[self.index] = SENSOR_ERROR_VALUE