"""The controller: owns the data frames and threads, loads modules and runs the state machine."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from enum import IntEnum
from typing import Any

from .comms_handler import CommsHandler
from .data import PRU_DATA, RxData, TxData
from .factory import create_module
from .module import Module, Pin, PinMode
from .status import is_fatal
from .thread import PruThread
from .thermistor import AnalogInput
from .timer import PruTimer

log = logging.getLogger(__name__)

MAJOR_VERSION = 2
MINOR_VERSION = 0
PATCH = 0

_STATE_LABELS = ("Setup", "Start", "Idle", "Running", "Stop", "Reset", "System Reset")


class State(IntEnum):
    """States of the controller's main loop."""

    SETUP = 0
    START = 1
    IDLE = 2
    RUNNING = 3
    STOP = 4
    RESET = 5
    SYSRESET = 6

    @property
    def label(self) -> str:
        return _STATE_LABELS[self]


class SystemResetRequested(Exception):
    """Raised when the controller asks for a full system reset."""


def _default_pin_factory(name: str, mode: PinMode = PinMode.INPUT, modifier: int = 0) -> Pin:
    return Pin(name, mode, modifier)


def _no_analog_factory(name: str) -> AnalogInput:
    raise RuntimeError(f"no analog input factory configured for pin {name!r}")


class Remora:
    """Runs the setup, start, idle, running and reset cycle around a comms link."""

    def __init__(
        self,
        comms: CommsHandler,
        base_timer: PruTimer,
        servo_timer: PruTimer,
        serial_timer: PruTimer | None = None,
        modules_config: Iterable[Mapping[str, Any]] | None = None,
        pin_factory: Callable[..., Pin] | None = None,
        analog_factory: Callable[[str], AnalogInput] | None = None,
    ):
        self.current_state = State.SETUP
        self.prev_state = State.SETUP
        self.tx_data = TxData()
        self.rx_data = RxData()
        self.reset = False
        self.status = 0
        self.fatal_error_handled = False
        self.threads_running = False
        self.modules_config = [dict(entry) for entry in (modules_config or [])]
        self.pin_factory = pin_factory or _default_pin_factory
        self.analog_factory = analog_factory or _no_analog_factory
        self.comms = comms
        self.on_load: list[Module] = []

        self.base_freq = base_timer.frequency
        self.servo_freq = servo_timer.frequency
        self.serial_freq = serial_timer.frequency if serial_timer is not None else 0

        self.update_header()

        self.comms.init()
        self.comms.start()

        self.base_thread = PruThread("BaseThread")
        self.base_thread.set_timer(base_timer)

        self.servo_thread = PruThread("ServoThread")
        self.servo_thread.set_timer(servo_timer)

        self.serial_thread: PruThread | None = None
        if serial_timer is not None:
            self.serial_thread = PruThread("SerialThread")
            self.serial_thread.set_timer(serial_timer)

        self.servo_thread.register_module(self.comms)

    def update_header(self) -> None:
        """Write the data header combined with the current status byte."""
        self.tx_data.header = PRU_DATA | self.status

    def _transition_to(self, new_state: State) -> None:
        if self.current_state != new_state:
            log.info("transitioning to %s state", new_state.label)
            self.prev_state = self.current_state
            self.current_state = new_state

    def _start_thread(self, thread: PruThread, name: str) -> None:
        log.info("starting the %s thread", name)
        thread.start()

    def load_modules(self) -> None:
        """Create every configured module and register it with its thread."""
        threads = {"Servo": self.servo_thread, "Base": self.base_thread}
        frequencies = {"Servo": self.servo_freq, "Base": self.base_freq}

        for entry in self.modules_config:
            thread_name = entry.get("Thread")
            module_type = entry.get("Type")
            if not isinstance(thread_name, str) or not isinstance(module_type, str):
                continue

            config = dict(entry, ThreadFreq=frequencies.get(thread_name, 0))
            module = create_module(thread_name, module_type, config, self)
            if module is None:
                log.error(
                    "failed to create module of type %r for thread %r; skipping registration",
                    module_type,
                    thread_name,
                )
                continue

            thread = threads.get(thread_name)
            if thread is None:
                self.on_load.append(module)
                continue
            thread.register_module(module)
            if module.uses_module_post:
                thread.register_module_post(module)

    def _handle_setup(self) -> None:
        self.load_modules()
        self._transition_to(State.START)

    def _handle_start(self) -> None:
        for module in self.on_load:
            module.configure()
        if not self.threads_running:
            self._start_thread(self.servo_thread, "Servo")
            self._start_thread(self.base_thread, "Base")
            self.threads_running = True
        self._transition_to(State.IDLE)

    def _handle_idle(self) -> None:
        if self.comms.status:
            self._transition_to(State.RUNNING)

    def _handle_running(self) -> None:
        if not self.comms.status:
            self._transition_to(State.RESET)
        if self.reset:
            self._transition_to(State.SYSRESET)

    def _handle_reset(self) -> None:
        log.info("resetting rx buffer")
        self.rx_data.clear()
        self._transition_to(State.IDLE)

    def _handle_sysreset(self) -> None:
        raise SystemResetRequested("system reset requested")

    def step(self) -> None:
        """Run one pass of the main loop."""
        self.update_header()

        if is_fatal(self.status):
            if not self.fatal_error_handled:
                log.error("fatal error detected; halting the state machine")
                self.fatal_error_handled = True
            self.comms.tasks()
            return

        handlers = {
            State.SETUP: self._handle_setup,
            State.START: self._handle_start,
            State.IDLE: self._handle_idle,
            State.RUNNING: self._handle_running,
            State.RESET: self._handle_reset,
            State.SYSRESET: self._handle_sysreset,
        }
        handler = handlers.get(self.current_state)
        if handler is None:
            log.error("invalid state %s", self.current_state.name)
        else:
            handler()
        self.comms.tasks()

    def run(self) -> None:
        """Run the main loop until a system reset is requested."""
        while True:
            self.step()