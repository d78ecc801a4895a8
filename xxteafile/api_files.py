"""File-oriented convenience wrappers."""

from .main import RunConfig, xxteafile


def encrypt_file(
    input_path: str,
    output_path: str,
    key_path: str,
    batch_blocks: int | None = None,
    silent: bool = True,
):
    return xxteafile.encrypt_file(
        input_path,
        output_path,
        key_path,
        batch_blocks=batch_blocks,
        silent=silent,
    )


def decrypt_file(
    input_path: str,
    output_path: str,
    key_path: str,
    batch_blocks: int | None = None,
    silent: bool = True,
):
    return xxteafile.decrypt_file(
        input_path,
        output_path,
        key_path,
        batch_blocks=batch_blocks,
        silent=silent,
    )


def generate_key_file(path: str, overwrite: bool = False):
    return xxteafile.generate_key_file(path, overwrite=overwrite)


def run(config: RunConfig):
    return xxteafile.run(config)


__all__ = [
    "decrypt_file",
    "encrypt_file",
    "generate_key_file",
    "run",
]
