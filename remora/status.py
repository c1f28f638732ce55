"""Status byte: bit 7 is the fatal flag, bits 6-4 the source, bits 3-0 the code."""

from __future__ import annotations

from enum import IntEnum

FATAL_FLAG = 0x80
SOURCE_MASK = 0x70
CODE_MASK = 0x0F


class ErrorSource(IntEnum):
    """Subsystem that raised an error."""

    NO_ERROR = 0x00
    CORE = 0x10
    JSON_CONFIG = 0x20
    MODULE_LOADER = 0x30
    TMC_DRIVER = 0x40


class ErrorCode(IntEnum):
    """Error code, meaningful together with its source."""

    NO_ERROR = 0x00

    REMORA_CORE_ERROR = 0x01

    SD_MOUNT_FAILED = 0x01
    CONFIG_FILE_OPEN_FAILED = 0x02
    CONFIG_FILE_READ_FAILED = 0x03
    CONFIG_INVALID_INPUT = 0x04
    CONFIG_NO_MEMORY = 0x05
    CONFIG_PARSE_FAILED = 0x06

    MODULE_CREATE_FAILED = 0x01

    TMC_DRIVER_ERROR = 0x01


def make_status(source: int, code: int, fatal: bool = False) -> int:
    """Build a status byte from a source, a code and the fatal flag."""
    status = (int(source) & SOURCE_MASK) | (int(code) & CODE_MASK)
    if fatal:
        status |= FATAL_FLAG
    return status


def is_fatal(status: int) -> bool:
    """Whether the status byte carries the fatal flag."""
    return bool(status & FATAL_FLAG)