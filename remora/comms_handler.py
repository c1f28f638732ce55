"""Module that watches the communications link and reports whether it is alive."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from .data import DATA_ERR_MAX
from .module import Module


class CommsInterface(Protocol):
    """A transport that reports received packets through a callback."""

    def set_data_callback(self, callback: Callable[[bool], None]) -> None: ...

    def init(self) -> None: ...

    def start(self) -> None: ...

    def tasks(self) -> None: ...


class CommsHandler(Module):
    """Tracks packet arrival; the link is down after too many empty cycles."""

    def __init__(self, interface: CommsInterface):
        super().__init__()
        self.interface = interface
        self.data = False
        self.no_data_count = 0
        self.status = False

    def _on_data(self, received: bool) -> None:
        self.data = received

    def init(self) -> None:
        """Hook the data callback into the interface and initialise it."""
        self.interface.set_data_callback(self._on_data)
        self.interface.init()

    def start(self) -> None:
        self.interface.start()

    def tasks(self) -> None:
        """Run the interface's polling work from the main loop."""
        self.interface.tasks()

    def update(self) -> None:
        """Run from the servo thread to refresh the link status."""
        if self.data:
            self.no_data_count = 0
            self.status = True
        else:
            self.no_data_count += 1

        if self.no_data_count > DATA_ERR_MAX:
            self.no_data_count = 0
            self.status = False

        self.data = False