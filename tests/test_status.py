from remora.status import (
    CODE_MASK,
    SOURCE_MASK,
    ErrorCode,
    ErrorSource,
    is_fatal,
    make_status,
)


def test_fatal_tmc_status_byte():
    status = make_status(ErrorSource.TMC_DRIVER, ErrorCode.TMC_DRIVER_ERROR, True)
    assert status == 0xC1
    assert is_fatal(status)


def test_non_fatal_status_fields():
    status = make_status(ErrorSource.JSON_CONFIG, ErrorCode.CONFIG_PARSE_FAILED)
    assert not is_fatal(status)
    assert status & SOURCE_MASK == ErrorSource.JSON_CONFIG
    assert status & CODE_MASK == ErrorCode.CONFIG_PARSE_FAILED


def test_no_error_is_zero():
    assert make_status(ErrorSource.NO_ERROR, ErrorCode.NO_ERROR) == 0


def test_out_of_field_bits_are_masked():
    assert make_status(0xFF, 0xFF) == 0x7F


def test_shared_code_values_are_aliases():
    assert ErrorCode.SD_MOUNT_FAILED is ErrorCode.REMORA_CORE_ERROR
    core = make_status(ErrorSource.CORE, ErrorCode.REMORA_CORE_ERROR)
    mount = make_status(ErrorSource.CORE, ErrorCode.SD_MOUNT_FAILED)
    assert core == mount == 0x11
    tmc = make_status(ErrorSource.TMC_DRIVER, ErrorCode.TMC_DRIVER_ERROR)
    loader = make_status(ErrorSource.TMC_DRIVER, ErrorCode.MODULE_CREATE_FAILED)
    assert tmc == loader == 0x41