# XXTEAFILE BLOCK CIPHER ENGINE ->

import os as _os_module
import re as _re_module
from dataclasses import dataclass


class XXTEAFileError(Exception):
    """Base class for every failure raised by xxteafile."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class MissingKeyFileError(XXTEAFileError, FileNotFoundError):
    def __init__(self, path):
        super().__init__(f"No key file '{path}' found.", path)


class InvalidKeyFormatError(XXTEAFileError, ValueError):
    def __init__(self, path=None, reason: str = ""):
        where = f"Key file '{path}'" if path is not None else "Key"
        message = f"{where} is not a valid key."
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, path)
        self.reason = reason


class MissingInputFileError(XXTEAFileError, FileNotFoundError):
    def __init__(self, path):
        super().__init__(f"No input file '{path}' found.", path)


class OutputCreateError(XXTEAFileError, OSError):
    def __init__(self, path):
        super().__init__(f"Output file '{path}' can't be created.", path)


class PartialWriteError(XXTEAFileError, OSError):
    def __init__(self, path, written: int, expected: int):
        target = f"'{path}'" if path is not None else "output stream"
        super().__init__(f"Error while writing into {target}.", path)
        self.written = written
        self.expected = expected


@dataclass(frozen=True)
class StreamStats:
    blocks: int = 0
    bytes_in: int = 0
    bytes_out: int = 0
    padded: int = 0
    discarded: int = 0


@dataclass(frozen=True)
class RunConfig:
    """One CLI invocation, built once and handed to `xxteafile.run`."""

    operation: str
    key_path: str
    input_path: str | None = None
    output_path: str | None = None
    batch_blocks: int | None = None
    silent: bool = True
    overwrite: bool = False


class xxteafile:
    import sys
    import secrets
    import pathlib
    import typing
    import struct
    import shutil
    import time
    from io import BytesIO
    import numpy as np
    import colorama
    re = _re_module

    @staticmethod
    def _env_int(name: str) -> "xxteafile.typing.Optional[int]":
        value = _os_module.getenv(name)
        if not value:
            return None
        try:
            parsed = int(value)
        except (TypeError, ValueError):
            return None
        if parsed <= 0:
            return None
        return parsed

    ENGINE_VERSION = "1.0.0"
    DELTA = 0x9E3779B9
    MASK = 0xFFFFFFFF
    KEY_WORDS = 4
    KEY_HEX_LEN = 32
    KEY_PART_LEN = 8
    BLOCK_SIZE = 512
    BLOCK_WORDS = BLOCK_SIZE // 4
    PAD_BYTE = b"0"
    WORD_DTYPE = np.dtype("<u4")  # little-endian words are part of the file format
    PROGRESS_BAR_WIDTH = 30
    DEFAULT_BATCH_BLOCKS = 256
    BATCH_BLOCKS = _env_int("XXTEAFILE_BATCH_BLOCKS") or DEFAULT_BATCH_BLOCKS
    _KEY_RE = re.compile(r"[0-9A-Fa-f]{32}")

    class _ProgressReporter:
        """Single-line textual progress bar for one file transform."""

        def __init__(self, total_bytes: int, label: str, stream=None, min_interval: float = 0.1):
            self.total = max(int(total_bytes), 1)
            self.label = label
            self.stream = stream or xxteafile.sys.stderr
            self._min_interval = max(0.0, float(min_interval))
            self._is_tty = bool(getattr(self.stream, "isatty", lambda: False)())
            self._last_render = 0.0
            self._printed = False
            self._term_width = xxteafile.shutil.get_terminal_size().columns
            self._green = xxteafile.colorama.Fore.GREEN if self._is_tty else ""
            self._reset = xxteafile.colorama.Fore.RESET if self._is_tty else ""

        def _render_bar(self, fraction: float, width: int | None = None) -> str:
            width = width or xxteafile.PROGRESS_BAR_WIDTH
            fraction = max(0.0, min(1.0, fraction))
            filled = int(fraction * width)
            if filled >= width:
                return f"({self._green}{'❚' * width}{self._reset})"
            return f"({'❚' * filled}{' ' * (width - filled)})"

        def update(self, done: int, *, force: bool = False) -> None:
            now = xxteafile.time.monotonic()
            if not force and self._printed and (now - self._last_render) < self._min_interval:
                return
            fraction = min(1.0, done / self.total)
            line = (
                f"{self.label} {self._render_bar(fraction)} {fraction * 100:3.0f}% "
                f"{xxteafile._human_readable_size(done)} / {xxteafile._human_readable_size(self.total)}"
            )
            line = line[: max(10, self._term_width - 1)]
            if self._is_tty:
                self.stream.write("\r\x1b[2K" + line)
            elif not self._printed or force:
                # Non-TTY: first and final states only
                self.stream.write(line + "\n")
            self.stream.flush()
            self._printed = True
            self._last_render = now

        def finish(self, done: int) -> None:
            self.update(done, force=True)
            if self._is_tty:
                self.stream.write("\n")
                self.stream.flush()
            self._printed = False

    @staticmethod
    def _human_readable_size(num_bytes: int) -> str:
        units = ["B", "KiB", "MiB", "GiB"]
        value = float(num_bytes)
        for unit in units:
            if value < 1024.0 or unit == units[-1]:
                return f"{value:.2f} {unit}"
            value /= 1024.0
        return f"{value:.2f} TiB"

    @staticmethod
    def _normalize_path(path_like) -> "xxteafile.pathlib.Path":
        if isinstance(path_like, xxteafile.pathlib.Path):
            path = path_like
        else:
            path = xxteafile.pathlib.Path(str(path_like))
        return path.expanduser()

    # ------------------------------------------------------------------
    # Key loader
    # ------------------------------------------------------------------

    @staticmethod
    def parse_key(text, *, path=None) -> "xxteafile.typing.Tuple[int, int, int, int]":
        """
        Parse a 32-digit hexadecimal key into four 32-bit words.

        Only the first line counts; a trailing LF or CRLF is not part of the
        32 characters. Digits are grouped by 8, most-significant group first.
        """
        if isinstance(text, (bytes, bytearray, memoryview)):
            first = bytes(text).split(b"\n", 1)[0]
            try:
                text = first.decode("ascii")
            except UnicodeDecodeError:
                raise InvalidKeyFormatError(path, "key must be ASCII hex digits") from None
        if not isinstance(text, str):
            raise TypeError(f"Unsupported key type: {type(text)!r}")
        line = text.split("\n", 1)[0]
        if line.endswith("\r"):
            line = line[:-1]
        if len(line) != xxteafile.KEY_HEX_LEN:
            raise InvalidKeyFormatError(path, f"expected {xxteafile.KEY_HEX_LEN} characters, got {len(line)}")
        if not xxteafile._KEY_RE.fullmatch(line):
            raise InvalidKeyFormatError(path, "non-hexadecimal character")
        step = xxteafile.KEY_PART_LEN
        return tuple(int(line[i:i + step], 16) for i in range(0, xxteafile.KEY_HEX_LEN, step))

    @staticmethod
    def load_key(path) -> "xxteafile.typing.Tuple[int, int, int, int]":
        key_path = xxteafile._normalize_path(path)
        try:
            handle = open(key_path, "rb")
        except OSError as exc:
            raise MissingKeyFileError(path) from exc
        with handle:
            # 32 digits plus at most a CRLF terminator
            raw = handle.read(xxteafile.KEY_HEX_LEN + 2)
        return xxteafile.parse_key(raw, path=path)

    @staticmethod
    def key_to_hex(key) -> str:
        words = xxteafile._key_words(key)
        return "".join(f"{word:08x}" for word in words)

    @staticmethod
    def generate_key_file(path, *, overwrite: bool = False) -> "xxteafile.typing.Tuple[int, int, int, int]":
        key_path = xxteafile._normalize_path(path)
        key = xxteafile.struct.unpack(">4I", xxteafile.secrets.token_bytes(16))
        mode = "w" if overwrite else "x"
        with open(key_path, mode, encoding="ascii", newline="\n") as handle:
            handle.write(xxteafile.key_to_hex(key) + "\n")
        return key

    @staticmethod
    def _key_words(key) -> "xxteafile.typing.Tuple[int, int, int, int]":
        words = tuple(key)
        if len(words) != xxteafile.KEY_WORDS:
            raise ValueError(f"Key must contain exactly {xxteafile.KEY_WORDS} words")
        for word in words:
            if not 0 <= int(word) <= xxteafile.MASK:
                raise ValueError("Key words must be unsigned 32-bit integers")
        return tuple(int(word) for word in words)

    # ------------------------------------------------------------------
    # Block cipher engine
    # ------------------------------------------------------------------

    @staticmethod
    def rounds_for(n: int) -> int:
        if n < 1:
            raise ValueError("Block must contain at least one word")
        return 6 + 52 // n

    @staticmethod
    def _mx(total, y, z, k):
        # Works on Python ints (caller masks) and on uint32 arrays (wraps natively).
        return (((z >> 5) ^ (y << 2)) + ((y >> 3) ^ (z << 4))) ^ ((total ^ y) + (k ^ z))

    @staticmethod
    def encrypt_block(block, key):
        """Encrypt one block of 32-bit words in place and return it."""
        if isinstance(block, xxteafile.np.ndarray):
            return xxteafile.encrypt_blocks(block, key)
        n = len(block)
        rounds = xxteafile.rounds_for(n)
        k = xxteafile._key_words(key)
        mask = xxteafile.MASK
        mx = xxteafile._mx
        total = 0
        z = block[n - 1]
        for _ in range(rounds):
            total = (total + xxteafile.DELTA) & mask
            e = (total >> 2) & 3
            for p in range(n - 1):
                y = block[p + 1]
                block[p] = z = (block[p] + mx(total, y, z, k[(p & 3) ^ e])) & mask
            p = n - 1
            y = block[0]
            block[p] = z = (block[p] + mx(total, y, z, k[(p & 3) ^ e])) & mask
        return block

    @staticmethod
    def decrypt_block(block, key):
        """Decrypt one block of 32-bit words in place and return it."""
        if isinstance(block, xxteafile.np.ndarray):
            return xxteafile.decrypt_blocks(block, key)
        n = len(block)
        rounds = xxteafile.rounds_for(n)
        k = xxteafile._key_words(key)
        mask = xxteafile.MASK
        mx = xxteafile._mx
        total = (rounds * xxteafile.DELTA) & mask
        y = block[0]
        while total != 0:
            e = (total >> 2) & 3
            for p in range(n - 1, 0, -1):
                z = block[p - 1]
                block[p] = y = (block[p] - mx(total, y, z, k[(p & 3) ^ e])) & mask
            z = block[n - 1]
            block[0] = y = (block[0] - mx(total, y, z, k[e])) & mask
            total = (total - xxteafile.DELTA) & mask
        return block

    @staticmethod
    def _working_rows(blocks) -> "xxteafile.np.ndarray":
        np = xxteafile.np
        if not isinstance(blocks, np.ndarray):
            raise TypeError("Expected a numpy array of uint32 words")
        if blocks.dtype.kind != "u" or blocks.dtype.itemsize != 4:
            raise TypeError(f"Expected uint32 words, got {blocks.dtype}")
        if blocks.ndim not in (1, 2):
            raise ValueError("Expected a 1-D block or a 2-D array of blocks")
        grid = blocks.reshape(1, -1) if blocks.ndim == 1 else blocks
        xxteafile.rounds_for(grid.shape[1])
        # Word-major copy so every column step touches contiguous memory
        return np.ascontiguousarray(grid.T, dtype=np.uint32)

    @staticmethod
    def encrypt_blocks(blocks, key):
        """
        Encrypt every row of a (blocks, words) uint32 array in place.

        Rows are independent cipher instances, so the word loop runs once for
        the whole batch and numpy applies each step to all rows together.
        """
        np = xxteafile.np
        work = xxteafile._working_rows(blocks)
        n = work.shape[0]
        kw = tuple(np.uint32(word) for word in xxteafile._key_words(key))
        mx = xxteafile._mx
        total = 0
        z = work[n - 1]
        for _ in range(xxteafile.rounds_for(n)):
            total = (total + xxteafile.DELTA) & xxteafile.MASK
            e = (total >> 2) & 3
            s = np.uint32(total)
            for p in range(n - 1):
                work[p] += mx(s, work[p + 1], z, kw[(p & 3) ^ e])
                z = work[p]
            p = n - 1
            work[p] += mx(s, work[0], z, kw[(p & 3) ^ e])
            z = work[p]
        xxteafile._store_rows(blocks, work)
        return blocks

    @staticmethod
    def decrypt_blocks(blocks, key):
        """Inverse of `encrypt_blocks`, in place."""
        np = xxteafile.np
        work = xxteafile._working_rows(blocks)
        n = work.shape[0]
        kw = tuple(np.uint32(word) for word in xxteafile._key_words(key))
        mx = xxteafile._mx
        total = (xxteafile.rounds_for(n) * xxteafile.DELTA) & xxteafile.MASK
        y = work[0]
        while total != 0:
            e = (total >> 2) & 3
            s = np.uint32(total)
            for p in range(n - 1, 0, -1):
                work[p] -= mx(s, y, work[p - 1], kw[(p & 3) ^ e])
                y = work[p]
            work[0] -= mx(s, y, work[n - 1], kw[e])
            y = work[0]
            total = (total - xxteafile.DELTA) & xxteafile.MASK
        xxteafile._store_rows(blocks, work)
        return blocks

    @staticmethod
    def _store_rows(blocks, work) -> None:
        if blocks.ndim == 1:
            blocks[...] = work[:, 0]
        else:
            blocks[...] = work.T

    # ------------------------------------------------------------------
    # Streaming pipeline
    # ------------------------------------------------------------------

    @staticmethod
    def _batch_blocks(batch_blocks) -> int:
        if batch_blocks is None:
            return xxteafile.BATCH_BLOCKS
        value = int(batch_blocks)
        if value <= 0:
            raise ValueError("batch_blocks must be positive")
        return value

    @staticmethod
    def _read_full(source, size: int) -> bytes:
        buf = bytearray()
        while len(buf) < size:
            chunk = source.read(size - len(buf))
            if not chunk:
                break
            buf += chunk
        return bytes(buf)

    @staticmethod
    def _write_checked(dest, data: bytes) -> int:
        try:
            written = dest.write(data)
        except OSError as exc:
            done = getattr(exc, "characters_written", 0)
            raise PartialWriteError(getattr(dest, "name", None), done, len(data)) from exc
        if written is None or written < len(data):
            raise PartialWriteError(getattr(dest, "name", None), written or 0, len(data))
        return written

    @staticmethod
    def _transform_units(data: bytes, key, *, encrypt: bool) -> bytes:
        np = xxteafile.np
        words = np.frombuffer(data, dtype=xxteafile.WORD_DTYPE).astype(np.uint32)
        grid = words.reshape(-1, xxteafile.BLOCK_WORDS)
        if encrypt:
            xxteafile.encrypt_blocks(grid, key)
        else:
            xxteafile.decrypt_blocks(grid, key)
        return grid.astype(xxteafile.WORD_DTYPE).tobytes()

    @staticmethod
    def encrypt_stream(source, dest, key, *, batch_blocks: int | None = None, progress=None) -> StreamStats:
        """
        Encrypt `source` into `dest` as independent 512-byte units.

        A short final unit is padded with ASCII '0' and reading stops there.
        """
        key = xxteafile._key_words(key)
        want = xxteafile._batch_blocks(batch_blocks) * xxteafile.BLOCK_SIZE
        blocks = bytes_in = bytes_out = padded = 0
        while True:
            buf = xxteafile._read_full(source, want)
            if not buf:
                break
            bytes_in += len(buf)
            last = len(buf) < want
            short = len(buf) % xxteafile.BLOCK_SIZE
            if short:
                padded = xxteafile.BLOCK_SIZE - short
                buf += xxteafile.PAD_BYTE * padded
            out = xxteafile._transform_units(buf, key, encrypt=True)
            bytes_out += xxteafile._write_checked(dest, out)
            blocks += len(out) // xxteafile.BLOCK_SIZE
            if progress is not None:
                progress(bytes_in)
            if last:
                break
        return StreamStats(blocks=blocks, bytes_in=bytes_in, bytes_out=bytes_out, padded=padded)

    @staticmethod
    def decrypt_stream(source, dest, key, *, batch_blocks: int | None = None, progress=None) -> StreamStats:
        """
        Decrypt every full 512-byte unit of `source` into `dest`.

        A trailing partial unit is dropped and padding is left in place, so the
        output is always a whole number of units.
        """
        key = xxteafile._key_words(key)
        want = xxteafile._batch_blocks(batch_blocks) * xxteafile.BLOCK_SIZE
        blocks = bytes_in = bytes_out = discarded = 0
        while True:
            buf = xxteafile._read_full(source, want)
            if not buf:
                break
            bytes_in += len(buf)
            last = len(buf) < want
            discarded = len(buf) % xxteafile.BLOCK_SIZE
            if discarded:
                buf = buf[:-discarded]
            if buf:
                out = xxteafile._transform_units(buf, key, encrypt=False)
                bytes_out += xxteafile._write_checked(dest, out)
                blocks += len(out) // xxteafile.BLOCK_SIZE
            if progress is not None:
                progress(bytes_in)
            if last:
                break
        return StreamStats(blocks=blocks, bytes_in=bytes_in, bytes_out=bytes_out, discarded=discarded)

    @staticmethod
    def encrypt_bytes(data: bytes, key) -> bytes:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("encrypt_bytes expects bytes")
        sink = xxteafile.BytesIO()
        xxteafile.encrypt_stream(xxteafile.BytesIO(bytes(data)), sink, key)
        return sink.getvalue()

    @staticmethod
    def decrypt_bytes(blob: bytes, key) -> bytes:
        if not isinstance(blob, (bytes, bytearray, memoryview)):
            raise TypeError("decrypt_bytes expects bytes")
        sink = xxteafile.BytesIO()
        xxteafile.decrypt_stream(xxteafile.BytesIO(bytes(blob)), sink, key)
        return sink.getvalue()

    @staticmethod
    def _process_file(input_path, output_path, key_path, *, encrypt: bool,
                      batch_blocks: int | None = None, silent: bool = True) -> StreamStats:
        # Key first: a bad key must fail before the input is touched
        key = xxteafile.load_key(key_path)
        in_path = xxteafile._normalize_path(input_path)
        out_path = xxteafile._normalize_path(output_path)
        try:
            source = open(in_path, "rb")
        except OSError as exc:
            raise MissingInputFileError(input_path) from exc
        with source:
            try:
                dest = open(out_path, "wb")
            except OSError as exc:
                raise OutputCreateError(output_path) from exc
            with dest:
                reporter = None
                if not silent:
                    total = _os_module.fstat(source.fileno()).st_size
                    label = "Encrypting" if encrypt else "Decrypting"
                    reporter = xxteafile._ProgressReporter(total, f"{label} {in_path.name}")
                stream_fn = xxteafile.encrypt_stream if encrypt else xxteafile.decrypt_stream
                try:
                    stats = stream_fn(
                        source,
                        dest,
                        key,
                        batch_blocks=batch_blocks,
                        progress=reporter.update if reporter else None,
                    )
                except PartialWriteError as exc:
                    raise PartialWriteError(output_path, exc.written, exc.expected) from exc
                # Buffered bytes only hit the disk here
                try:
                    dest.close()
                except OSError as exc:
                    raise PartialWriteError(output_path, 0, stats.bytes_out) from exc
                if reporter is not None:
                    reporter.finish(stats.bytes_in)
                return stats

    @staticmethod
    def encrypt_file(input_path, output_path, key_path, *, batch_blocks: int | None = None,
                     silent: bool = True) -> StreamStats:
        return xxteafile._process_file(
            input_path,
            output_path,
            key_path,
            encrypt=True,
            batch_blocks=batch_blocks,
            silent=silent,
        )

    @staticmethod
    def decrypt_file(input_path, output_path, key_path, *, batch_blocks: int | None = None,
                     silent: bool = True) -> StreamStats:
        return xxteafile._process_file(
            input_path,
            output_path,
            key_path,
            encrypt=False,
            batch_blocks=batch_blocks,
            silent=silent,
        )

    @staticmethod
    def run(config: RunConfig):
        if config.operation == "genkey":
            return xxteafile.generate_key_file(config.key_path, overwrite=config.overwrite)
        if config.operation == "encrypt":
            handler = xxteafile.encrypt_file
        elif config.operation == "decrypt":
            handler = xxteafile.decrypt_file
        else:
            raise ValueError(f"Unsupported operation '{config.operation}'")
        return handler(
            config.input_path,
            config.output_path,
            config.key_path,
            batch_blocks=config.batch_blocks,
            silent=config.silent,
        )


def cli(argv=None) -> int:
    import argparse

    def _cli_plain_mode() -> bool:
        if _os_module.getenv("XXTEAFILE_CLI_PLAIN"):
            return True
        if _os_module.getenv("NO_COLOR"):
            return True
        style = (_os_module.getenv("XXTEAFILE_CLI_STYLE") or "").strip().lower()
        if style in {"plain", "boring", "0", "false", "off"}:
            return True
        return False

    class _CliTheme:
        def __init__(self, plain: bool):
            colors = xxteafile.colorama
            self.plain = plain
            if not plain:
                colors.just_fix_windows_console()
            self.reset = "" if self.plain else colors.Style.RESET_ALL
            self.bold = "" if self.plain else colors.Style.BRIGHT
            self.red = "" if self.plain else colors.Fore.RED
            self.green = "" if self.plain else colors.Fore.GREEN
            self.yellow = "" if self.plain else colors.Fore.YELLOW

        def _wrap(self, msg: str, color: str, emoji: str | None = None) -> str:
            if self.plain:
                return msg
            prefix = f"{emoji} " if emoji else ""
            return f"{self.bold}{color}{prefix}{msg}{self.reset}"

        def ok(self, msg: str) -> str:
            return self._wrap(msg, self.green, "✅")

        def warn(self, msg: str) -> str:
            return self._wrap(msg, self.yellow, "⚠️")

        def err(self, msg: str) -> str:
            return self._wrap(msg, self.red, "❌")

    theme = _CliTheme(_cli_plain_mode())

    parser = argparse.ArgumentParser(
        prog="xxteafile",
        description=(
            "Crypt and decrypt file by XXTEA cipher. Input file is padded to 512B boundary. "
            "Key file must contain exactly 32 hexadecimal characters."
        ),
        epilog=(
            "examples:\n"
            "  xxteafile -c -i in.bin -o out.bin -k key.txt\n"
            "  xxteafile -d -i in.bin -o out.bin -k key.txt\n"
            "  xxteafile -g -k key.txt"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    action = parser.add_mutually_exclusive_group(required=True)
    action.add_argument("-c", "--crypt", dest="operation", action="store_const", const="encrypt",
                        help="Encrypt the input file")
    action.add_argument("-d", "--decrypt", dest="operation", action="store_const", const="decrypt",
                        help="Decrypt the input file")
    action.add_argument("-g", "--genkey", dest="operation", action="store_const", const="genkey",
                        help="Write a new random key to the key file")
    parser.add_argument("-i", "--input", default=None, help="Input file path")
    parser.add_argument("-o", "--output", default=None, help="Output file path")
    parser.add_argument("-k", "--key", default=None, help="Key file path (32 hex characters)")
    parser.add_argument(
        "--batch-blocks",
        type=int,
        default=None,
        help="512-byte units transformed per batch (default: XXTEAFILE_BATCH_BLOCKS or 256)",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress progress and summary output")
    parser.add_argument("--force", action="store_true", help="Overwrite an existing key file with -g")
    parser.add_argument("--version", action="version", version=f"%(prog)s {xxteafile.ENGINE_VERSION}")
    args = parser.parse_args(argv)

    if not args.key:
        parser.error("Key file must be specified.")
    if args.operation != "genkey":
        if not args.input:
            parser.error("Input file must be specified.")
        if not args.output:
            parser.error("Output file must be specified.")
    if args.batch_blocks is not None and args.batch_blocks <= 0:
        parser.error("--batch-blocks must be positive")

    config = RunConfig(
        operation=args.operation,
        key_path=args.key,
        input_path=args.input,
        output_path=args.output,
        batch_blocks=args.batch_blocks,
        silent=args.quiet,
        overwrite=args.force,
    )

    try:
        result = xxteafile.run(config)
    except XXTEAFileError as exc:
        print(theme.err(str(exc)), file=xxteafile.sys.stderr)
        return 1
    except FileExistsError:
        print(theme.err(f"Key file '{config.key_path}' already exists; use --force to replace it."),
              file=xxteafile.sys.stderr)
        return 1
    except OSError as exc:
        print(theme.err(f"{config.operation} failed: {exc}"), file=xxteafile.sys.stderr)
        return 1

    if config.silent:
        return 0
    if config.operation == "genkey":
        print(theme.ok(f"Wrote key {config.key_path}"))
        return 0
    summary = f"{config.output_path}: {result.blocks} block(s), {result.bytes_out} bytes"
    if result.padded:
        summary += f", {result.padded} padding byte(s)"
    print(theme.ok(summary))
    if result.discarded:
        print(theme.warn(f"Discarded {result.discarded} trailing byte(s) that did not fill a 512-byte block"))
    return 0


def main(argv=None) -> int:
    try:
        return cli(argv)
    except KeyboardInterrupt:
        print("Exiting...")
        return 130


__all__ = [
    "InvalidKeyFormatError",
    "MissingInputFileError",
    "MissingKeyFileError",
    "OutputCreateError",
    "PartialWriteError",
    "RunConfig",
    "StreamStats",
    "XXTEAFileError",
    "cli",
    "main",
    "xxteafile",
]


if __name__ == "__main__":
    raise SystemExit(main())
