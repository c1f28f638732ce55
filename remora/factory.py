"""Creates modules from configuration entries by thread and module type."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .blink import Blink
from .digital_pin import DigitalPin
from .module import Module
from .reset_pin import ResetPin
from .sigma_delta import SigmaDelta
from .stepgen import Stepgen
from .temperature import Temperature

log = logging.getLogger(__name__)

_BUILDERS: dict[str, dict[str, Any]] = {
    "Base": {
        "Stepgen": Stepgen.create,
    },
    "Servo": {
        "Blink": Blink.create,
        "Reset Pin": ResetPin.create,
        "Digital Pin": DigitalPin.create,
        "Sigma Delta": SigmaDelta.create,
        "Temperature": Temperature.create,
    },
    "On load": {},
}


def create_module(
    thread_name: str, module_type: str, config: Mapping[str, Any], instance: Any
) -> Module | None:
    """Create the module for a thread and type.

    Returns None when the combination is unknown or the module declines the
    configuration, so the caller can skip it.
    """
    builders = _BUILDERS.get(thread_name)
    if builders is None:
        log.error("unknown thread type %r or module type %r", thread_name, module_type)
        return None
    builder = builders.get(module_type)
    if builder is None:
        return None
    return builder(config, instance)