from blake3 import blake3

from zk_embed.config import DS_PROGRAM_DEFAULT
from zk_embed.program_hash import derive_program_hash


def test_derive_is_deterministic():
    a = derive_program_hash(DS_PROGRAM_DEFAULT, b"demo")
    b = derive_program_hash(DS_PROGRAM_DEFAULT, b"demo")
    assert a == b
    assert len(a) == 32


def test_matches_blake3_derive_key():
    expected = blake3(b"demo", derive_key_context="NONOS:ZK:PROGRAM:v1").digest()
    assert derive_program_hash("NONOS:ZK:PROGRAM:v1", b"demo") == expected


def test_empty_program_id():
    h = derive_program_hash(DS_PROGRAM_DEFAULT, b"")
    assert len(h) == 32
    assert h != derive_program_hash(DS_PROGRAM_DEFAULT, b"\x00")


def test_domain_separation():
    pid = b"attest-v1"
    hashes = {
        derive_program_hash(ds, pid)
        for ds in ("NONOS:ZK:PROGRAM:v1", "NONOS:ZK:PROGRAM:v2", "", "nonos:zk:program:v1")
    }
    assert len(hashes) == 4


def test_not_plain_blake3():
    assert derive_program_hash(DS_PROGRAM_DEFAULT, b"demo") != blake3(b"demo").digest()


def test_demo_reference_digest():
    assert derive_program_hash("NONOS:ZK:PROGRAM:v1", b"demo").hex() == (
        "a4540319e4fd0b12fe980abedeecbc24064b413c4c8f6ae29eef31ed314c1373"
    )
