import pytest

from remora.module import Module, Pin, PinMode


class Recorder(Module):
    def __init__(self, *args):
        super().__init__(*args)
        self.calls = []

    def update(self):
        self.calls.append("update")

    def update_post(self):
        self.calls.append("post")

    def slow_update(self):
        self.calls.append("slow")

    def configure(self):
        self.calls.append("configure")


def test_pin_set_and_get():
    pin = Pin("PA_1", PinMode.OUTPUT)
    assert pin.get() is False
    pin.set(1)
    assert pin.get() is True
    pin.set(0)
    assert pin.get() is False


def test_default_module_slow_updates_every_cycle():
    module = Recorder()
    Module.run_module(module)
    Module.run_module(module)
    assert module.calls == ["slow", "update", "slow", "update"]


def test_slow_module_update_count():
    module = Recorder(1000, 1)
    assert module.update_count == 1000
    for _ in range(999):
        Module.run_module(module)
    assert module.calls.count("slow") == 0
    assert module.calls.count("update") == 999
    Module.run_module(module)
    assert module.calls.count("slow") == 1
    assert module.counter == 0


def test_slow_update_precedes_update_in_cycle():
    module = Recorder(2, 1)
    Module.run_module(module)
    Module.run_module(module)
    assert module.calls == ["update", "slow", "update"]


def test_run_module_post_calls_update_post():
    module = Recorder()
    Module.run_module_post(module)
    assert module.calls == ["post"]


def test_zero_slow_frequency_rejected():
    with pytest.raises(ValueError):
        Module(1000, 0)


def test_half_given_frequencies_rejected():
    with pytest.raises(TypeError):
        Module(1000)


def test_post_flag_defaults_off():
    assert Module().uses_module_post is False