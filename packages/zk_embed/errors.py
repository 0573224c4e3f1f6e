# packages/zk_embed/errors.py


class ZkEmbedError(Exception):
    """Base class for every failure reported by the CLI."""


class UsageError(ZkEmbedError):
    pass


class FileAccessError(ZkEmbedError):
    def __init__(self, action: str, path, exc: OSError):
        self.path = path
        super().__init__(f"{action} {path}: {exc.strerror or exc}")


class HexDecodeError(ZkEmbedError):
    pass


class EmptyInputError(ZkEmbedError):
    pass


class UnrecognizedKeyFormatError(ZkEmbedError):
    pass


class SerializationFaultError(ZkEmbedError):
    """Re-encoding a validated key failed. This is a bug, not bad input."""


class ConfigError(ZkEmbedError):
    pass
