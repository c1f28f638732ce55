# remora

The core of a motion-control controller board as a Python package: the
64-byte data frames exchanged with a host, timer-driven threads that run
modules at fixed rates, the I/O modules themselves, and a state machine
that loads modules from configuration entries and watches the host link.

Hardware is injected. Pins are `remora.module.Pin` objects (kept in
memory unless you subclass them), ADC inputs are any object with a
`read()` method, timers are `remora.timer.PruTimer` objects, and the
communications transport is an object you supply. The package therefore
runs and tests on any machine.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Data frames

`remora.data` holds the fixed configuration (`JOINTS = 8`, `VARIABLES = 6`,
`STEP_BIT = 22`, `DATA_BUFF_SIZE = 64`, `DATA_ERR_MAX = 100`, the header
words `PRU_DATA`, `PRU_READ`, `PRU_WRITE` and others) and two dataclasses:

- `RxData`, received from the host: `header`, `joint_freq_cmd`,
  `set_point`, `joint_enable`, `outputs`, `spare0`.
- `TxData`, sent to the host: `header`, `joint_feedback`,
  `process_variable`, `inputs`.

Both pack to and from their little-endian 64-byte wire form with
`to_bytes()` and `from_bytes()`, and `clear()` zeroes them in place.
Wrong lengths or out-of-range values raise `ValueError`.

## Status byte

`remora.status.make_status(source, code, fatal=False)` packs an
`ErrorSource` (bits 6-4) and an `ErrorCode` (bits 3-0) into one byte, with
bit 7 as the fatal flag; `is_fatal(status)` tests that flag.

## Threads, timers and modules

Every module derives from `remora.module.Module`. `run_module()` calls
`update()` every cycle and `slow_update()` once every
`thread_freq // slow_update_freq` cycles (every cycle when no frequencies
are given); `run_module_post()` calls `update_post()`.

`remora.thread.PruThread` keeps a list of modules and a list of post-stage
modules. After `set_timer()` and `start()`, each `update()` runs all
modules, then all post-stage modules, unless the thread is stopped or
paused (`pause()`, `resume()`, `stop()`).

`remora.timer.PruTimer` drives its owning thread: `timer_tick()` calls the
thread's `update()` while the timer is started. Changing `frequency` on a
running timer stops, reconfigures and restarts it.
`remora.timer.TimerInterrupt` forwards `isr_handler()` to a timer's
`timer_tick()`.

## Modules

| Class | Module | What it does |
|-------|--------|--------------|
| `Stepgen` | `remora.stepgen` | Adds the scaled frequency command to an accumulator each cycle and pulses the step pin when the step bit changes; writes the step count to `joint_feedback`. The post stage drops the step pin. |
| `DigitalPin` | `remora.digital_pin` | Copies an input pin into a bit of `inputs`, or a bit of `outputs` to an output pin, optionally inverted. |
| `SigmaDelta` | `remora.sigma_delta` | Sigma-delta modulates a pin from a 0-100 % set point in `set_point[index]`. |
| `Temperature` | `remora.temperature` | Reads a sensor once a second into `process_variable[index]`; readings not above zero are reported as 999. |
| `Thermistor` | `remora.thermistor` | Beta-equation NTC thermistor read through a 16-bit ADC with a 4.7 kΩ divider resistor. |
| `Blink` | `remora.blink` | Toggles a pin at a given frequency. |
| `ResetPin` | `remora.reset_pin` | Copies an input pin into the controller's `reset` flag. |
| `Debug` | `remora.debug` | Drives a pin to a fixed level every cycle. |
| `CommsHandler` | `remora.comms_handler` | Marks the link up when data arrives and down after more than `DATA_ERR_MAX` empty cycles. |

## Modules from configuration

`remora.factory.create_module(thread_name, module_type, config, instance)`
builds a module from one configuration entry, or returns `None` when the
thread and type are unknown:

| Thread  | Type          | Keys used |
|---------|---------------|-----------|
| `Base`  | `Stepgen`     | `Joint Number`, `Enable Pin`, `Step Pin`, `Direction Pin` |
| `Servo` | `Blink`       | `Pin`, `Frequency` |
| `Servo` | `Reset Pin`   | `Pin` |
| `Servo` | `Digital Pin` | `Pin`, `Mode` (`Output` or input), `Invert` (`"True"`), `Modifier`, `Data Bit` |
| `Servo` | `Sigma Delta` | `SD Pin`, `SP[i]`, optional `SD Max` |
| `Servo` | `Temperature` | `PV[i]`, `Sensor` (`Thermistor`), `Thermistor` with `Pin`, `beta`, `r0`, `t0` |

`ThreadFreq` is filled in by the controller; `Comment` is logged when
present.

## The controller

`remora.core.Remora(comms, base_timer, servo_timer, serial_timer=None,
modules_config=None, pin_factory=None, analog_factory=None)` owns the
`rx_data` and `tx_data` frames and the `base_thread`, `servo_thread` and
optional `serial_thread`. `pin_factory(name, mode, modifier)` makes pins
(in-memory `Pin` by default); `analog_factory(name)` makes ADC inputs and
must be given for `Temperature` modules.

`step()` runs one pass of the state machine (`State`): Setup loads the
modules, Start configures them and starts the servo and base threads,
Idle waits for the link, Running drops to Reset when the link is lost
(Reset clears `rx_data`) and raises `SystemResetRequested` when `reset`
is set. A fatal `status` halts the state machine while the transport's
tasks keep running. `run()` calls `step()` until an exception stops it.

```python
from remora.comms_handler import CommsHandler
from remora.core import Remora, State
from remora.timer import PruTimer


class LoopbackInterface:
    def set_data_callback(self, callback):
        self.callback = callback

    def init(self):
        pass

    def start(self):
        pass

    def tasks(self):
        pass


link = LoopbackInterface()
controller = Remora(
    CommsHandler(link),
    PruTimer(40_000),
    PruTimer(1_000),
    modules_config=[{"Thread": "Servo", "Type": "Blink", "Pin": "PA_0", "Frequency": 2}],
)
controller.step()          # Setup -> Start
controller.step()          # Start -> Idle, threads started
link.callback(True)        # a packet arrived
controller.servo_thread.timer.timer_tick()
controller.step()          # Idle -> Running
assert controller.current_state is State.RUNNING
```

## What this package does not do

- It has no command-line program; it is used as a library.
- It contains no communications transport. Supply an object with
  `set_data_callback`, `init`, `start` and `tasks`.
- It drives no real hardware: `Pin` only stores a level and `PruTimer`
  only ticks when `timer_tick()` is called. Subclass them to reach real
  devices.
- The `On load` thread is accepted by the factory but has no module
  types, so no stepper-driver configuration modules are available.