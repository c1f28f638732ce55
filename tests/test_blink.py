from types import SimpleNamespace

import pytest

from remora.blink import Blink
from remora.module import Pin, PinMode


def test_pin_starts_low():
    pin = Pin("PA_1", PinMode.OUTPUT, state=True)
    Blink(pin, 1000, 10)
    assert pin.get() is False


def test_toggles_every_half_period():
    pin = Pin("PA_1", PinMode.OUTPUT)
    blink = Blink(pin, 1000, 10)
    half = blink.period_count // 2
    for _ in range(half - 1):
        blink.update()
    assert pin.get() is False
    blink.update()
    assert pin.get() is True
    for _ in range(half):
        blink.update()
    assert pin.get() is False


def test_accepts_pin_name():
    blink = Blink("PB_0", 1000, 1)
    assert blink.pin.name == "PB_0"
    assert blink.pin.mode == PinMode.OUTPUT


def test_zero_frequency_rejected():
    with pytest.raises(ValueError):
        Blink("PB_0", 1000, 0)


def test_create_from_config():
    instance = SimpleNamespace(pin_factory=Pin)
    blink = Blink.create({"Pin": "PC_13", "Frequency": 4, "ThreadFreq": 1000}, instance)
    assert blink.pin.name == "PC_13"
    assert blink.period_count == 1000 // 4


def test_create_missing_pin():
    instance = SimpleNamespace(pin_factory=Pin)
    with pytest.raises(KeyError):
        Blink.create({"Frequency": 4, "ThreadFreq": 1000}, instance)