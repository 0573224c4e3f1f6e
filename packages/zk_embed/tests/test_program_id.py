import pytest

from zk_embed.errors import FileAccessError, HexDecodeError, UsageError
from zk_embed.program_id import decode_hex_id, load_program_id_bytes, read_vk_file


def test_string_source():
    assert load_program_id_bytes(text="démo") == "démo".encode("utf-8")


def test_empty_string_is_a_valid_id():
    assert load_program_id_bytes(text="") == b""


@pytest.mark.parametrize("raw", ["deadBEEF", "0xdeadbeef", "0XDEADBEEF", "  0xdeadbeef\n"])
def test_hex_source(raw):
    assert load_program_id_bytes(hex_str=raw) == b"\xde\xad\xbe\xef"


@pytest.mark.parametrize("raw", ["abc", "zz", "0xgg", "de ad"])
def test_bad_hex(raw):
    with pytest.raises(HexDecodeError) as excinfo:
        decode_hex_id(raw)
    assert str(excinfo.value).startswith("program-id-hex:")


def test_file_source(tmp_path):
    p = tmp_path / "pid.bin"
    p.write_bytes(b"\x00\x01\xff")
    assert load_program_id_bytes(path=p) == b"\x00\x01\xff"


def test_missing_file(tmp_path):
    p = tmp_path / "nope.bin"
    with pytest.raises(FileAccessError) as excinfo:
        load_program_id_bytes(path=p)
    assert str(p) in str(excinfo.value)
    assert excinfo.value.path == p
    assert not isinstance(excinfo.value, OSError)


def test_missing_vk_file(tmp_path):
    with pytest.raises(FileAccessError) as excinfo:
        read_vk_file(tmp_path / "vk.bin")
    assert str(excinfo.value).startswith("read verifying key ")


@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"text": "a", "hex_str": "00"},
        {"text": "a", "path": "x"},
        {"text": "a", "hex_str": "00", "path": "x"},
    ],
)
def test_exactly_one_source(kwargs):
    with pytest.raises(UsageError):
        load_program_id_bytes(**kwargs)
