# packages/zk_embed/snippet.py
"""Rust snippet carrying PROGRAM_HASH and the canonical VK bytes.

The generated ``program_vk_lookup`` compares hashes with ``ct_eq32``, which the
target crate must provide as a constant-time 32-byte comparison.
"""

from .config import CONST_PREFIX_DEFAULT
from .program_hash import PROGRAM_HASH_LEN

BYTES_PER_ROW = 16


def sanitize_ident(s: str) -> str:
    """Uppercase ASCII alphanumerics, replace everything else with '_'."""
    if not any(ch.isascii() and ch.isalnum() for ch in s):
        return CONST_PREFIX_DEFAULT
    return "".join(ch.upper() if ch.isascii() and ch.isalnum() else "_" for ch in s)


def format_byte_rows(data: bytes) -> str:
    rows = []
    for i in range(0, len(data), BYTES_PER_ROW):
        row = ", ".join(f"0x{byte:02x}" for byte in data[i:i + BYTES_PER_ROW])
        rows.append(f"    {row}")
    return ",\n".join(rows) + "\n" if rows else ""


def build_snippet(prefix: str, ds_program: str, program_hash: bytes, vk_bytes: bytes) -> str:
    if len(program_hash) != PROGRAM_HASH_LEN:
        raise ValueError(f"program hash must be {PROGRAM_HASH_LEN} bytes, got {len(program_hash)}")
    hash_const = f"PROGRAM_HASH_{prefix}"
    vk_const = f"VK_{prefix}_BLS12_381_GROTH16"

    out = []
    out.append("// --- paste into src/zk/zkverify.rs ---\n")
    out.append(f"// DS: {ds_program}\n\n")

    out.append(f"pub const {hash_const}: [u8; {PROGRAM_HASH_LEN}] = [\n")
    out.append(format_byte_rows(program_hash))
    out.append("];\n\n")

    out.append(f"pub const {vk_const}: &[u8] = &[\n")
    out.append(format_byte_rows(vk_bytes))
    out.append("];\n\n")

    # ct_eq32 must stay constant-time in the consuming crate
    out.append('#[cfg(feature = "zk-groth16")]\n')
    out.append("fn program_vk_lookup(program_hash: &[u8; 32]) -> Option<&'static [u8]> {\n")
    out.append(f"    if ct_eq32(program_hash, &{hash_const}) {{\n")
    out.append(f"        return Some({vk_const});\n")
    out.append("    }\n")
    out.append("    None\n")
    out.append("}\n")

    out.append("\n// done.\n")
    return "".join(out)
