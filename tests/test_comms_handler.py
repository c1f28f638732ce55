from remora.comms_handler import CommsHandler
from remora.data import DATA_ERR_MAX


class FakeInterface:
    def __init__(self):
        self.calls = []
        self.callback = None

    def set_data_callback(self, callback):
        self.callback = callback

    def init(self):
        self.calls.append("init")

    def start(self):
        self.calls.append("start")

    def tasks(self):
        self.calls.append("tasks")


def test_init_start_tasks_forwarded():
    iface = FakeInterface()
    handler = CommsHandler(iface)
    handler.init()
    handler.start()
    handler.tasks()
    assert iface.calls == ["init", "start", "tasks"]
    assert iface.callback is not None


def test_callback_sets_data_and_status():
    iface = FakeInterface()
    handler = CommsHandler(iface)
    handler.init()
    iface.callback(True)
    assert handler.data is True
    handler.update()
    assert handler.status is True
    assert handler.data is False
    assert handler.no_data_count == 0


def test_status_drops_after_too_many_empty_cycles():
    handler = CommsHandler(FakeInterface())
    handler.data = True
    handler.update()
    for _ in range(DATA_ERR_MAX):
        handler.update()
    assert handler.status is True
    assert handler.no_data_count == DATA_ERR_MAX
    handler.update()
    assert handler.status is False
    assert handler.no_data_count == 0


def test_runs_as_module():
    handler = CommsHandler(FakeInterface())
    handler.data = True
    handler.run_module()
    assert handler.status is True