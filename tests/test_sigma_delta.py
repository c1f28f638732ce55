from types import SimpleNamespace

import pytest

from remora.data import RxData
from remora.module import Pin, PinMode
from remora.sigma_delta import PID_SD_MAX, SigmaDelta


def run_cycles(module, count):
    highs = 0
    for _ in range(count):
        module.update()
        highs += module.pin.get()
    return highs / count


def test_default_max():
    module = SigmaDelta("PA_8", RxData(), 0)
    assert module.sd_max == PID_SD_MAX - 1


@pytest.mark.parametrize("value, expected", [(1000, PID_SD_MAX - 1), (-3, 0), (100, 100)])
def test_max_is_confined(value, expected):
    module = SigmaDelta("PA_8", RxData(), 0, value)
    assert module.sd_max == expected
    module.set_max_sd(value)
    assert module.sd_max == expected


def test_setpoint_percentage_confined():
    module = SigmaDelta("PA_8", RxData(), 0)
    module.set_sd_setpoint(150)
    assert module.set_point == PID_SD_MAX - 1
    module.set_sd_setpoint(-5)
    assert module.set_point == 0
    module.set_sd_setpoint(50)
    assert module.set_point == 127


def test_zero_and_full_scale():
    rx = RxData()
    module = SigmaDelta("PA_8", rx, 2)
    rx.set_point[2] = 0.0
    assert run_cycles(module, 50) == 0.0
    rx.set_point[2] = 100.0
    assert run_cycles(module, 50) == 1.0
    rx.set_point[2] = 250.0
    assert run_cycles(module, 50) == 1.0


@pytest.mark.parametrize("percent", [10.0, 25.0, 50.0, 75.0])
def test_duty_cycle_tracks_setpoint(percent):
    rx = RxData()
    rx.set_point[1] = percent
    module = SigmaDelta(Pin("PA_8", PinMode.OUTPUT), rx, 1)
    duty = run_cycles(module, 5000)
    assert duty == pytest.approx(percent / 100.0, abs=0.02)


def test_create_with_and_without_max():
    instance = SimpleNamespace(pin_factory=Pin, rx_data=RxData())
    module = SigmaDelta.create({"SP[i]": 3, "SD Pin": "PB_5", "SD Max": 100}, instance)
    assert module.sd_max == 100
    assert module.index == 3
    assert module.rx_data is instance.rx_data
    default = SigmaDelta.create({"SP[i]": 0, "SD Pin": "PB_6"}, instance)
    assert default.sd_max == PID_SD_MAX - 1
    assert default.pin.name == "PB_6"