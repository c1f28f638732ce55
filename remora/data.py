"""Fixed configuration and the data frames exchanged with the host controller."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

PRU_BASE_FREQ = 40_000
PRU_SERVO_FREQ = 1_000
OVERSAMPLE = 3
SW_BAUD_RATE = 19_200
PRU_SERIAL_FREQ = SW_BAUD_RATE * OVERSAMPLE

STEP_BIT = 22
STEP_MASK = 1 << STEP_BIT

JOINTS = 8
VARIABLES = 6

PRU_DATA = 0x64617400
PRU_READ = 0x72656164
PRU_WRITE = 0x77726974
PRU_ESTOP = 0x65737470
PRU_ACKNOWLEDGE = 0x61636B6E
PRU_ERR = 0x6572726F

BASE_THREAD_IRQ_PRIORITY = 1
SERVO_THREAD_IRQ_PRIORITY = 2
SERIAL_THREAD_IRQ_PRIORITY = 3
SPI_DMA_TX_IRQ_PRIORITY = 4
SPI_DMA_RX_IRQ_PRIORITY = 5
SPI_NSS_IRQ_PRIORITY = 6

PC_BAUD = 115_200
DATA_ERR_MAX = 100
DATA_BUFF_SIZE = 64

_RX_LAYOUT = struct.Struct(f"<i{JOINTS}i{VARIABLES}fBHB")
_TX_LAYOUT = struct.Struct(f"<i{JOINTS}i{VARIABLES}fH")


def _check_lengths(**sequences: tuple[list, int]) -> None:
    for name, (values, expected) in sequences.items():
        if len(values) != expected:
            raise ValueError(f"{name} must hold {expected} values, not {len(values)}")


def _check_size(data: bytes) -> None:
    if len(data) != DATA_BUFF_SIZE:
        raise ValueError(f"frame must be {DATA_BUFF_SIZE} bytes, not {len(data)}")


@dataclass
class RxData:
    """Frame received from the host: motion commands, set points and outputs."""

    header: int = 0
    joint_freq_cmd: list[int] = field(default_factory=lambda: [0] * JOINTS)
    set_point: list[float] = field(default_factory=lambda: [0.0] * VARIABLES)
    joint_enable: int = 0
    outputs: int = 0
    spare0: int = 0

    def to_bytes(self) -> bytes:
        """Serialise the frame into its packed little-endian wire form."""
        _check_lengths(
            joint_freq_cmd=(self.joint_freq_cmd, JOINTS),
            set_point=(self.set_point, VARIABLES),
        )
        try:
            return _RX_LAYOUT.pack(
                self.header,
                *self.joint_freq_cmd,
                *self.set_point,
                self.joint_enable,
                self.outputs,
                self.spare0,
            )
        except struct.error as exc:
            raise ValueError(str(exc)) from exc

    @classmethod
    def from_bytes(cls, data: bytes) -> RxData:
        """Decode a frame from its wire form."""
        _check_size(data)
        values = _RX_LAYOUT.unpack(bytes(data))
        return cls(
            header=values[0],
            joint_freq_cmd=list(values[1 : 1 + JOINTS]),
            set_point=list(values[1 + JOINTS : 1 + JOINTS + VARIABLES]),
            joint_enable=values[-3],
            outputs=values[-2],
            spare0=values[-1],
        )

    def clear(self) -> None:
        """Zero every field in place, keeping the list objects."""
        self.header = 0
        self.joint_freq_cmd[:] = [0] * JOINTS
        self.set_point[:] = [0.0] * VARIABLES
        self.joint_enable = 0
        self.outputs = 0
        self.spare0 = 0


@dataclass
class TxData:
    """Frame sent to the host: joint feedback, process variables and inputs."""

    header: int = 0
    joint_feedback: list[int] = field(default_factory=lambda: [0] * JOINTS)
    process_variable: list[float] = field(default_factory=lambda: [0.0] * VARIABLES)
    inputs: int = 0

    def to_bytes(self) -> bytes:
        """Serialise the frame, padded with zeros to the buffer size."""
        _check_lengths(
            joint_feedback=(self.joint_feedback, JOINTS),
            process_variable=(self.process_variable, VARIABLES),
        )
        try:
            packed = _TX_LAYOUT.pack(
                self.header, *self.joint_feedback, *self.process_variable, self.inputs
            )
        except struct.error as exc:
            raise ValueError(str(exc)) from exc
        return packed.ljust(DATA_BUFF_SIZE, b"\x00")

    @classmethod
    def from_bytes(cls, data: bytes) -> TxData:
        """Decode a frame from its wire form."""
        _check_size(data)
        values = _TX_LAYOUT.unpack_from(bytes(data))
        return cls(
            header=values[0],
            joint_feedback=list(values[1 : 1 + JOINTS]),
            process_variable=list(values[1 + JOINTS : 1 + JOINTS + VARIABLES]),
            inputs=values[-1],
        )

    def clear(self) -> None:
        """Zero every field in place, keeping the list objects."""
        self.header = 0
        self.joint_feedback[:] = [0] * JOINTS
        self.process_variable[:] = [0.0] * VARIABLES
        self.inputs = 0