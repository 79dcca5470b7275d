import pytest

from teacipher.bytewriter import ByteWriter


def test_write_int32_big_endian():
    buf = bytearray(4)
    writer = ByteWriter(buf)
    assert writer.write_int32(0x01020304) == 4
    assert bytes(buf) == b"\x01\x02\x03\x04"
    assert writer.bytes_written() == 4
    assert writer.is_end()


def test_write_int32_negative():
    buf = bytearray(4)
    ByteWriter(buf).write_int32(-1)
    assert bytes(buf) == b"\xff\xff\xff\xff"


def test_write_int16_and_byte():
    buf = bytearray(3)
    writer = ByteWriter(buf)
    assert writer.write_int16(0x0A0B) == 2
    assert writer.write_byte(-1) == 1
    assert bytes(buf) == b"\x0a\x0b\xff"


def test_write_long_is_four_bytes():
    buf = bytearray(4)
    writer = ByteWriter(buf)
    assert writer.write_long(0x11223344) == 4
    assert bytes(buf) == b"\x11\x22\x33\x44"


def test_write_uint64():
    buf = bytearray(8)
    writer = ByteWriter(buf)
    assert writer.write_uint64(0x0102030405060708) == 8
    assert bytes(buf) == b"\x01\x02\x03\x04\x05\x06\x07\x08"


def test_write_bytes_and_remaining():
    buf = bytearray(10)
    writer = ByteWriter(buf)
    assert writer.write_bytes(b"abc") == 3
    assert writer.remaining() == 7
    assert not writer.is_end()
    assert bytes(buf[:3]) == b"abc"


def test_skip_moves_position():
    buf = bytearray(6)
    writer = ByteWriter(buf)
    assert writer.skip(2) == 2
    writer.write_int32(0x7F000001)
    assert bytes(buf) == b"\x00\x00\x7f\x00\x00\x01"
    assert writer.remaining() == 0


def test_overflow_raises():
    writer = ByteWriter(bytearray(3))
    with pytest.raises(IndexError):
        writer.write_int32(1)
    assert writer.bytes_written() == 0


def test_readonly_buffer_rejected():
    with pytest.raises(TypeError):
        ByteWriter(b"\x00\x00")


def test_attach_resets_state():
    writer = ByteWriter(bytearray(4))
    writer.write_int16(1)
    second = bytearray(2)
    writer.attach(second)
    assert writer.bytes_written() == 0
    assert writer.remaining() == 2
    writer.write_int16(0x0102)
    assert bytes(second) == b"\x01\x02"


def test_detach_then_write_fails():
    writer = ByteWriter(bytearray(4))
    writer.write_byte(1)
    writer.detach()
    assert writer.bytes_written() == 0
    assert writer.remaining() == 0
    assert writer.is_end()
    with pytest.raises(IndexError):
        writer.write_byte(1)


def test_writes_through_memoryview():
    buf = bytearray(4)
    writer = ByteWriter(memoryview(buf))
    writer.write_int32(0x0A0B0C0D)
    assert bytes(buf) == b"\x0a\x0b\x0c\x0d"