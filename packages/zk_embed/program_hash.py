# packages/zk_embed/program_hash.py
from blake3 import blake3

PROGRAM_HASH_LEN = 32


def derive_program_hash(ds_program: str, program_id: bytes) -> bytes:
    """BLAKE3 derive-key of the program id under the domain separator."""
    hasher = blake3(derive_key_context=ds_program)
    hasher.update(program_id)
    return hasher.digest(length=PROGRAM_HASH_LEN)
