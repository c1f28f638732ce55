"""Module that copies an input pin into the controller's reset request flag."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .module import Module, Pin, PinMode

log = logging.getLogger(__name__)


class ResetPin(Module):
    """Sets ``target.reset`` to the level of an input pin every cycle."""

    def __init__(self, target: Any, pin: Pin | str):
        super().__init__()
        self.target = target
        self.pin = pin if isinstance(pin, Pin) else Pin(pin, PinMode.INPUT)

    @classmethod
    def create(cls, config: Mapping[str, Any], instance: Any) -> ResetPin:
        """Build a reset pin module whose target is the controller instance."""
        comment = config.get("Comment")
        if comment:
            log.info("%s", comment)
        pin_name = config["Pin"]
        log.info("making reset pin at pin %s", pin_name)
        return cls(instance, instance.pin_factory(pin_name, PinMode.INPUT))

    def update(self) -> None:
        self.target.reset = self.pin.get()