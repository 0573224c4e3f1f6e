# packages/zk_embed/cli.py
from pathlib import Path
from typing import Optional

import typer

from . import __version__, config
from .errors import FileAccessError, SerializationFaultError, UsageError, ZkEmbedError
from .log import logger, setup_logging
from .program_hash import derive_program_hash
from .program_id import load_program_id_bytes, read_vk_file
from .snippet import build_snippet, sanitize_ident
from .vk import canonical_bytes, load_vk

app = typer.Typer(
    add_completion=False,
    help="NONOS zk-embed: derive PROGRAM_HASH and emit Groth16 VK bytes",
)


def _version_callback(value: bool):
    if value:
        typer.echo(f"zk-embed {__version__}")
        raise typer.Exit()


def generate(
    program_id: bytes,
    vk_raw: bytes,
    const_prefix: str = config.CONST_PREFIX_DEFAULT,
    ds_program: str = config.DS_PROGRAM_DEFAULT,
) -> str:
    """Hash the program id, normalize the key and render the snippet."""
    program_hash = derive_program_hash(ds_program, program_id)
    logger.info("derived program hash", extra={"program_id_len": len(program_id), "program_hash": program_hash.hex()})

    vk, form = load_vk(vk_raw)
    vk_bytes = canonical_bytes(vk)
    logger.info("verifying key accepted", extra={"form": form, "input_len": len(vk_raw), "canonical_len": len(vk_bytes)})

    return build_snippet(sanitize_ident(const_prefix), ds_program, program_hash, vk_bytes)


@app.command()
def embed(
    program_id_str: Optional[str] = typer.Option(None, "--program-id-str", metavar="STR", help="Program/circuit ID as UTF-8 string"),
    program_id_hex: Optional[str] = typer.Option(None, "--program-id-hex", metavar="HEX", help="Program/circuit ID as hex (0x optional)"),
    program_id_file: Optional[Path] = typer.Option(None, "--program-id-file", metavar="PATH", help="Program/circuit ID from raw bytes file"),
    vk_path: Optional[Path] = typer.Option(None, "--vk", metavar="PATH", help="Verifying key file (compressed or uncompressed)"),
    const_prefix: str = typer.Option(config.CONST_PREFIX, "--const-prefix", metavar="NAME", help="Prefix for generated const names (e.g. ATTEST_V1)"),
    ds_program: str = typer.Option(config.DS_PROGRAM, "--ds-program", metavar="STR", help="Domain separator for PROGRAM_HASH"),
    out: Optional[Path] = typer.Option(None, "--out", metavar="PATH", help="Write the snippet here instead of stdout"),
    version: Optional[bool] = typer.Option(None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"),
):
    """Emit a Rust snippet with PROGRAM_HASH and the canonical VK bytes."""
    try:
        setup_logging()
        if vk_path is None:
            raise UsageError("--vk is required")
        pid_bytes = load_program_id_bytes(program_id_str, program_id_hex, program_id_file)
        snippet = generate(pid_bytes, read_vk_file(vk_path), const_prefix, ds_program)
        if out is not None:
            try:
                out.write_text(snippet, encoding="utf-8")
            except OSError as exc:
                raise FileAccessError("write", out, exc) from exc
        else:
            typer.echo(snippet, nl=False)
    except SerializationFaultError as exc:
        typer.echo(f"[x] internal error: {exc}", err=True)
        raise typer.Exit(code=1)
    except ZkEmbedError as exc:
        typer.echo(f"[x] {exc}", err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
