# packages/zk_embed/vk.py
"""Groth16 verifying keys over BLS12-381.

The byte layout is the one arkworks writes for ``VerifyingKey<Bls12_381>``:
alpha_g1, beta_g2, gamma_g2, delta_g2, then gamma_abc_g1 as a little-endian
u64 count followed by the points. Points use the ZCash encoding: big-endian
coordinates (G2 writes c1 before c0) with the compression, infinity and sign
flags in the top three bits of the first byte.

Every decoded point is checked to be on the curve and in the prime-order
subgroup before a key is handed out.
"""

import struct
from dataclasses import dataclass

from py_ecc.bls.point_compression import (
    compress_G1,
    compress_G2,
    decompress_G1,
    decompress_G2,
)
from py_ecc.optimized_bls12_381 import (
    FQ,
    FQ2,
    Z1,
    Z2,
    b,
    b2,
    curve_order,
    field_modulus,
    is_inf,
    is_on_curve,
    multiply,
    normalize,
)

from .errors import EmptyInputError, SerializationFaultError, UnrecognizedKeyFormatError

FQ_BYTES = 48
G1_COMPRESSED_SIZE = FQ_BYTES
G2_COMPRESSED_SIZE = 2 * FQ_BYTES

COMPRESSION_FLAG = 0x80
INFINITY_FLAG = 0x40
SORT_FLAG = 0x20
FLAGS_MASK = COMPRESSION_FLAG | INFINITY_FLAG | SORT_FLAG

COMPRESSED = "compressed"
UNCOMPRESSED = "uncompressed"


def _g1_size(compressed: bool) -> int:
    return G1_COMPRESSED_SIZE if compressed else 2 * G1_COMPRESSED_SIZE


def _g2_size(compressed: bool) -> int:
    return G2_COMPRESSED_SIZE if compressed else 2 * G2_COMPRESSED_SIZE


def _read_fq(chunk: bytes) -> int:
    n = int.from_bytes(chunk, "big")
    if n >= field_modulus:
        raise ValueError("coordinate is not below the field modulus")
    return n


def _split_flags(data: bytes) -> tuple[int, bytes]:
    return data[0] & FLAGS_MASK, bytes([data[0] & ~FLAGS_MASK]) + data[1:]


def _check_uncompressed_flags(flags: int, body: bytes) -> bool:
    """Return True when the encoding is the point at infinity."""
    if flags & (COMPRESSION_FLAG | SORT_FLAG):
        raise ValueError("unexpected flags for uncompressed point")
    if flags & INFINITY_FLAG:
        if any(body):
            raise ValueError("point at infinity with non-zero coordinates")
        return True
    return False


def in_subgroup(pt) -> bool:
    return is_inf(multiply(pt, curve_order))


def decode_g1(data: bytes, compressed: bool = True):
    if len(data) != _g1_size(compressed):
        raise ValueError("bad G1 length")
    if compressed:
        return decompress_G1(int.from_bytes(data, "big"))
    flags, body = _split_flags(data)
    if _check_uncompressed_flags(flags, body):
        return Z1
    x = _read_fq(body[:FQ_BYTES])
    y = _read_fq(body[FQ_BYTES:])
    pt = (FQ(x), FQ(y), FQ.one())
    if not is_on_curve(pt, b):
        raise ValueError("G1 point is not on the curve")
    return pt


def decode_g2(data: bytes, compressed: bool = True):
    if len(data) != _g2_size(compressed):
        raise ValueError("bad G2 length")
    if compressed:
        z1 = int.from_bytes(data[:FQ_BYTES], "big")
        z2 = int.from_bytes(data[FQ_BYTES:], "big")
        if z2 >= field_modulus:
            raise ValueError("coordinate is not below the field modulus")
        return decompress_G2((z1, z2))
    flags, body = _split_flags(data)
    if _check_uncompressed_flags(flags, body):
        return Z2
    x_c1, x_c0, y_c1, y_c0 = (_read_fq(body[i:i + FQ_BYTES]) for i in range(0, 4 * FQ_BYTES, FQ_BYTES))
    pt = (FQ2([x_c0, x_c1]), FQ2([y_c0, y_c1]), FQ2.one())
    if not is_on_curve(pt, b2):
        raise ValueError("G2 point is not on the curve")
    return pt


def encode_g1(pt, compressed: bool = True) -> bytes:
    if compressed:
        return compress_G1(pt).to_bytes(FQ_BYTES, "big")
    if is_inf(pt):
        return bytes([INFINITY_FLAG]) + bytes(2 * FQ_BYTES - 1)
    x, y = normalize(pt)
    return x.n.to_bytes(FQ_BYTES, "big") + y.n.to_bytes(FQ_BYTES, "big")


def encode_g2(pt, compressed: bool = True) -> bytes:
    if compressed:
        z1, z2 = compress_G2(pt)
        return z1.to_bytes(FQ_BYTES, "big") + z2.to_bytes(FQ_BYTES, "big")
    if is_inf(pt):
        return bytes([INFINITY_FLAG]) + bytes(4 * FQ_BYTES - 1)
    x, y = normalize(pt)
    x_c0, x_c1 = x.coeffs
    y_c0, y_c1 = y.coeffs
    return b"".join(int(c).to_bytes(FQ_BYTES, "big") for c in (x_c1, x_c0, y_c1, y_c0))


class _Reader:
    def __init__(self, data: bytes):
        self.data = data
        self.pos = 0

    def remaining(self) -> int:
        return len(self.data) - self.pos

    def take(self, n: int) -> bytes:
        if n > self.remaining():
            raise ValueError("truncated verifying key")
        chunk = self.data[self.pos:self.pos + n]
        self.pos += n
        return chunk

    def u64(self) -> int:
        return struct.unpack("<Q", self.take(8))[0]

    def g1(self, compressed: bool):
        pt = decode_g1(self.take(_g1_size(compressed)), compressed)
        if not in_subgroup(pt):
            raise ValueError("G1 point is not in the prime-order subgroup")
        return pt

    def g2(self, compressed: bool):
        pt = decode_g2(self.take(_g2_size(compressed)), compressed)
        if not in_subgroup(pt):
            raise ValueError("G2 point is not in the prime-order subgroup")
        return pt

    def finish(self) -> None:
        if self.remaining():
            raise ValueError("trailing bytes after verifying key")


@dataclass(frozen=True, eq=False)
class VerifyingKey:
    alpha_g1: tuple
    beta_g2: tuple
    gamma_g2: tuple
    delta_g2: tuple
    gamma_abc_g1: tuple

    @classmethod
    def from_bytes(cls, data: bytes, compressed: bool = True) -> "VerifyingKey":
        """Decode and fully validate one wire form. Raises ValueError."""
        r = _Reader(bytes(data))
        alpha_g1 = r.g1(compressed)
        beta_g2 = r.g2(compressed)
        gamma_g2 = r.g2(compressed)
        delta_g2 = r.g2(compressed)
        count = r.u64()
        if count > r.remaining() // _g1_size(compressed):
            raise ValueError("gamma_abc_g1 length exceeds input")
        gamma_abc_g1 = tuple(r.g1(compressed) for _ in range(count))
        r.finish()
        return cls(alpha_g1, beta_g2, gamma_g2, delta_g2, gamma_abc_g1)

    def to_bytes(self, compressed: bool = True) -> bytes:
        out = bytearray()
        out += encode_g1(self.alpha_g1, compressed)
        for pt in (self.beta_g2, self.gamma_g2, self.delta_g2):
            out += encode_g2(pt, compressed)
        out += struct.pack("<Q", len(self.gamma_abc_g1))
        for pt in self.gamma_abc_g1:
            out += encode_g1(pt, compressed)
        return bytes(out)


def load_vk(raw: bytes) -> tuple[VerifyingKey, str]:
    """Decode raw key bytes, compressed first, then uncompressed.

    Returns the key and the form that was accepted.
    """
    if not raw:
        raise EmptyInputError("verifying key file is empty")
    try:
        return VerifyingKey.from_bytes(raw, compressed=True), COMPRESSED
    except ValueError:
        pass
    try:
        return VerifyingKey.from_bytes(raw, compressed=False), UNCOMPRESSED
    except ValueError:
        raise UnrecognizedKeyFormatError(
            "failed to deserialize verifying key (neither compressed nor uncompressed)"
        ) from None


def canonical_bytes(vk: VerifyingKey) -> bytes:
    try:
        return vk.to_bytes(compressed=True)
    except (ValueError, ArithmeticError) as exc:
        raise SerializationFaultError("failed to serialize VK in compressed canonical form") from exc


def normalize_vk(raw: bytes) -> bytes:
    """Canonical compressed encoding of a verifying key given in either form."""
    vk, _ = load_vk(raw)
    return canonical_bytes(vk)
