# packages/zk_embed/program_id.py
import binascii
from pathlib import Path
from typing import Optional

from .errors import HexDecodeError, FileAccessError, UsageError


def decode_hex_id(hex_str: str) -> bytes:
    h = hex_str.strip()
    if h[:2] in ("0x", "0X"):
        h = h[2:]
    try:
        return binascii.unhexlify(h)
    except (binascii.Error, ValueError) as exc:
        raise HexDecodeError(f"program-id-hex: {exc}") from exc


def read_bytes(path: Path, what: str) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise FileAccessError(f"read {what}", path, exc) from exc


def load_program_id_bytes(
    text: Optional[str] = None,
    hex_str: Optional[str] = None,
    path: Optional[Path] = None,
) -> bytes:
    """Resolve exactly one program id source to raw bytes."""
    given = [src for src in (text, hex_str, path) if src is not None]
    if len(given) != 1:
        raise UsageError("provide exactly one of --program-id-str | --program-id-hex | --program-id-file")
    if text is not None:
        return text.encode("utf-8")
    if hex_str is not None:
        return decode_hex_id(hex_str)
    return read_bytes(path, "program-id-file")


def read_vk_file(path: Path) -> bytes:
    return read_bytes(path, "verifying key")
