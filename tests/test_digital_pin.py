from types import SimpleNamespace

import pytest

from remora.data import RxData, TxData
from remora.digital_pin import DigitalPin, PinModifier
from remora.module import Pin, PinMode


def make_instance():
    return SimpleNamespace(pin_factory=Pin, rx_data=RxData(), tx_data=TxData())


def test_output_follows_bit():
    rx = RxData()
    pin = Pin("PA_0", PinMode.OUTPUT)
    module = DigitalPin(rx, PinMode.OUTPUT, pin, 3)
    rx.outputs = 1 << 3
    module.update()
    assert pin.get() is True
    rx.outputs = 1 << 2
    module.update()
    assert pin.get() is False


def test_output_inverted():
    rx = RxData()
    pin = Pin("PA_0", PinMode.OUTPUT)
    module = DigitalPin(rx, PinMode.OUTPUT, pin, 0, invert=True)
    module.update()
    assert pin.get() is True


def test_input_sets_and_clears_bit_only():
    tx = TxData(inputs=1 << 1)
    pin = Pin("PB_1", PinMode.INPUT, state=True)
    module = DigitalPin(tx, PinMode.INPUT, pin, 5)
    module.update()
    assert tx.inputs == (1 << 1) | (1 << 5)
    pin.set(False)
    module.update()
    assert tx.inputs == 1 << 1


def test_input_inverted():
    tx = TxData()
    pin = Pin("PB_1", PinMode.INPUT, state=False)
    module = DigitalPin(tx, PinMode.INPUT, pin, 15, invert=True)
    module.update()
    assert tx.inputs == 1 << 15


def test_bad_bit_number():
    with pytest.raises(ValueError):
        DigitalPin(TxData(), PinMode.INPUT, "PB_1", 16)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Open Drain", PinModifier.OPEN_DRAIN),
        ("Pull Up", PinModifier.PULL_UP),
        ("Pull Down", PinModifier.PULL_DOWN),
        ("Pull None", PinModifier.PULL_NONE),
        ("Something", PinModifier.NONE),
    ],
)
def test_modifier_names(name, expected):
    assert PinModifier.from_name(name) is expected


def test_create_output_uses_rx_outputs():
    instance = make_instance()
    config = {"Pin": "PC_1", "Mode": "Output", "Invert": "False", "Modifier": "Pull Up", "Data Bit": 2}
    module = DigitalPin.create(config, instance)
    assert module.data is instance.rx_data
    assert module.pin.modifier == PinModifier.PULL_UP
    assert module.pin.mode == PinMode.OUTPUT
    instance.rx_data.outputs = 1 << 2
    module.update()
    assert module.pin.get() is True


def test_create_input_uses_tx_inputs():
    instance = make_instance()
    config = {"Pin": "PC_2", "Mode": "Input", "Invert": "True", "Modifier": "None", "Data Bit": 0}
    module = DigitalPin.create(config, instance)
    assert module.data is instance.tx_data
    assert module.invert is True
    module.update()
    assert instance.tx_data.inputs == 1