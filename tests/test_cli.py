import os
import subprocess
import sys

from brainfuck import USAGE, main
from tests.conftest import HELLO_WORLD, ROOT

SCRIPT = os.path.join(ROOT, "brainfuck.py")


def run_cli(*args, stdin=b""):
    return subprocess.run(
        [sys.executable, SCRIPT, *args],
        input=stdin,
        capture_output=True,
        cwd=ROOT,
        timeout=60,
    )


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err.strip() == USAGE


def test_too_many_arguments_prints_usage(capsys):
    assert main(["a.bf", "b.bf"]) == 1
    assert capsys.readouterr().err.strip() == USAGE


def test_option_counts_as_argument(capsys):
    assert main(["a.bf", "--verbose"]) == 1
    assert USAGE in capsys.readouterr().err


def test_usage_exit_status():
    proc = run_cli()
    assert proc.returncode == 1
    assert USAGE.encode() in proc.stderr
    assert proc.stdout == b""


def test_hello_world(tmp_path):
    path = tmp_path / "hello.bf"
    path.write_text(HELLO_WORLD)
    proc = run_cli(str(path))
    assert proc.returncode == 0
    assert proc.stdout == b"Hello World!\n"
    assert proc.stderr == b""


def test_echo_stdin(tmp_path):
    path = tmp_path / "echo.bf"
    path.write_text(",.,.")
    proc = run_cli(str(path), stdin=b"A")
    assert proc.returncode == 0
    assert proc.stdout == b"A\x00"


def test_missing_file_runs_nothing(tmp_path):
    missing = str(tmp_path / "missing.bf")
    proc = run_cli(missing)
    assert proc.returncode == 0
    assert proc.stdout == b""
    assert f"Could not read file at path: {missing}".encode() in proc.stderr


def test_unmatched_bracket_is_not_fatal(tmp_path):
    path = tmp_path / "open.bf"
    path.write_text("[")
    proc = run_cli(str(path))
    assert proc.returncode == 0
    assert proc.stdout == b""
    assert b"Could not find loop end" in proc.stderr


def test_double_dash_counts_as_argument(tmp_path, capsys):
    path = tmp_path / "prog.bf"
    path.write_text("+.")
    assert main(["--", str(path)]) == 1
    assert capsys.readouterr().err.strip() == USAGE


def test_double_dash_alone_is_a_path():
    # A lone "--" is taken as the (missing) program file
    proc = run_cli("--")
    assert proc.returncode == 0
    err = proc.stderr.decode()
    assert "Could not read file at path: --" in err
    assert USAGE not in err


def test_high_cells_written_as_raw_bytes(tmp_path):
    path = tmp_path / "ff.bf"
    path.write_text("-.")
    proc = run_cli(str(path))
    assert proc.returncode == 0
    assert proc.stdout == b"\xff"
