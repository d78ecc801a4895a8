import io
import os
import subprocess
import sys
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from tempfile import TemporaryDirectory

REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from xxteafile.main import main, xxteafile


KEY_HEX = "0123456789abcdeffedcba9876543210"


class XXTEACliTests(unittest.TestCase):
    """CLI smokes: option validation, exit statuses, messages, round trips."""

    def setUp(self) -> None:
        self.tmpdir = TemporaryDirectory()
        self.tmp_path = Path(self.tmpdir.name)
        self.key_path = self.tmp_path / "key.txt"
        self.key_path.write_text(KEY_HEX + "\n", encoding="ascii")
        self.old_plain = os.environ.get("XXTEAFILE_CLI_PLAIN")
        os.environ["XXTEAFILE_CLI_PLAIN"] = "1"

    def tearDown(self) -> None:
        if self.old_plain is not None:
            os.environ["XXTEAFILE_CLI_PLAIN"] = self.old_plain
        else:
            os.environ.pop("XXTEAFILE_CLI_PLAIN", None)
        self.tmpdir.cleanup()

    def _run_cli(self, *args: str) -> subprocess.CompletedProcess:
        env = os.environ.copy()
        env["PYTHONPATH"] = os.pathsep.join(
            filter(None, [str(REPO_ROOT), env.get("PYTHONPATH")])
        )
        return subprocess.run(
            [sys.executable, "-m", "xxteafile", *args],
            cwd=REPO_ROOT,
            capture_output=True,
            text=True,
            env=env,
        )

    def _main(self, *args: str):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(list(args))
        return code, out.getvalue(), err.getvalue()

    def test_cli_round_trip(self):
        src = self.tmp_path / "doc.txt"
        src.write_bytes(b"cli-power" * 100)
        enc = self.tmp_path / "doc.xxt"
        dec = self.tmp_path / "doc.out"
        result = self._run_cli("-c", "-i", str(src), "-o", str(enc), "-k", str(self.key_path), "-q")
        self.assertEqual(result.returncode, 0, msg=result.stderr + result.stdout)
        self.assertEqual(enc.stat().st_size, 1024)
        result = self._run_cli("--decrypt", "--input", str(enc), "--output", str(dec), "--key", str(self.key_path), "-q")
        self.assertEqual(result.returncode, 0, msg=result.stderr + result.stdout)
        self.assertEqual(dec.read_bytes(), b"cli-power" * 100 + b"0" * 124)

    def test_cli_summary_lines(self):
        src = self.tmp_path / "doc.txt"
        src.write_bytes(b"a" * 500)
        enc = self.tmp_path / "doc.xxt"
        code, out, _ = self._main("-c", "-i", str(src), "-o", str(enc), "-k", str(self.key_path))
        self.assertEqual(code, 0)
        self.assertIn("1 block(s), 512 bytes, 12 padding byte(s)", out)

        enc.write_bytes(enc.read_bytes() + b"tail")
        code, out, _ = self._main("-d", "-i", str(enc), "-o", str(self.tmp_path / "x"), "-k", str(self.key_path))
        self.assertEqual(code, 0)
        self.assertIn("Discarded 4 trailing byte(s)", out)

    def test_cli_genkey(self):
        new_key = self.tmp_path / "new.key"
        code, out, _ = self._main("-g", "-k", str(new_key))
        self.assertEqual(code, 0)
        self.assertIn("Wrote key", out)
        key = xxteafile.load_key(new_key)
        code, _, err = self._main("-g", "-k", str(new_key))
        self.assertEqual(code, 1)
        self.assertIn("already exists", err)
        self.assertEqual(xxteafile.load_key(new_key), key)
        code, _, _ = self._main("-g", "-k", str(new_key), "--force", "-q")
        self.assertEqual(code, 0)

    def test_cli_invalid_key(self):
        bad = self.tmp_path / "bad.txt"
        bad.write_text(KEY_HEX + "0\n", encoding="ascii")
        src = self.tmp_path / "doc.txt"
        src.write_bytes(b"x")
        out_path = self.tmp_path / "out.bin"
        code, _, err = self._main("-c", "-i", str(src), "-o", str(out_path), "-k", str(bad))
        self.assertEqual(code, 1)
        self.assertIn(f"Key file '{bad}' is not a valid key.", err)
        self.assertFalse(out_path.exists())

    def test_cli_missing_files(self):
        code, _, err = self._main("-c", "-i", "nope.bin", "-o", str(self.tmp_path / "o"), "-k", str(self.key_path))
        self.assertEqual(code, 1)
        self.assertIn("No input file 'nope.bin' found.", err)
        code, _, err = self._main("-d", "-i", "nope.bin", "-o", "o", "-k", str(self.tmp_path / "k"))
        self.assertEqual(code, 1)
        self.assertIn("No key file", err)

    @unittest.skipUnless(os.path.exists("/dev/full"), "needs /dev/full")
    def test_cli_disk_full(self):
        src = self.tmp_path / "doc.txt"
        src.write_bytes(b"z" * 3000)
        code, _, err = self._main("-c", "-i", str(src), "-o", "/dev/full", "-k", str(self.key_path), "-q")
        self.assertEqual(code, 1)
        self.assertIn("Error while writing into '/dev/full'.", err)
        self.assertNotIn("encrypt failed", err)

    def test_cli_option_errors(self):
        result = self._run_cli("-c", "-d", "-i", "a", "-o", "b", "-k", "c")
        self.assertEqual(result.returncode, 2)
        result = self._run_cli("-i", "a", "-o", "b", "-k", "c")
        self.assertEqual(result.returncode, 2)
        result = self._run_cli("-c", "-o", "b", "-k", str(self.key_path))
        self.assertEqual(result.returncode, 2)
        self.assertIn("Input file must be specified.", result.stderr)
        result = self._run_cli("-c", "-i", "a", "-o", "b")
        self.assertEqual(result.returncode, 2)
        self.assertIn("Key file must be specified.", result.stderr)
        result = self._run_cli("-c", "-i", "a", "-o", "b", "-k", "c", "--batch-blocks", "0")
        self.assertEqual(result.returncode, 2)

    def test_cli_version(self):
        result = self._run_cli("--version")
        self.assertEqual(result.returncode, 0)
        self.assertIn(xxteafile.ENGINE_VERSION, result.stdout)


if __name__ == "__main__":
    unittest.main()
