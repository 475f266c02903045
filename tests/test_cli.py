from __future__ import annotations

import gzip
import os
import zlib
from pathlib import Path

import pytest
from click.testing import CliRunner

from zopfli_tool import __version__
from zopfli_tool.cli import cli
from tests.conftest import TEST_DATA


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_compress_to_default_format(runner: CliRunner, input_file: Path) -> None:
    result = runner.invoke(cli, ["-i", "10", str(input_file)])

    assert result.exit_code == 0, result.output
    output = Path(f"{input_file}.gz")
    assert f"Saving to: {output}" in result.output
    assert "Original Size: 1.06 KiB, Compressed: " in result.output
    assert "% Removed" in result.output
    assert gzip.decompress(output.read_bytes()) == TEST_DATA
    assert input_file.exists()


@pytest.mark.parametrize("name", ["zlib", "ZLIB", "Zlib"])
def test_format_is_case_insensitive(runner: CliRunner, input_file: Path, name: str) -> None:
    result = runner.invoke(cli, ["-i", "1", "--format", name, str(input_file)])

    assert result.exit_code == 0, result.output
    assert zlib.decompress(Path(f"{input_file}.zlib").read_bytes()) == TEST_DATA


def test_compress_to_deflate(runner: CliRunner, input_file: Path) -> None:
    result = runner.invoke(cli, ["-i", "1", "--format", "deflate", str(input_file)])

    assert result.exit_code == 0, result.output
    decompressor = zlib.decompressobj(-zlib.MAX_WBITS)
    raw = Path(f"{input_file}.deflate").read_bytes()
    assert decompressor.decompress(raw) + decompressor.flush() == TEST_DATA


def test_invalid_format(runner: CliRunner, input_file: Path) -> None:
    result = runner.invoke(cli, ["--format", "zstd", str(input_file)])

    assert result.exit_code == 2
    assert not Path(f"{input_file}.zstd").exists()


@pytest.mark.parametrize("value", ["0", "-1", "a"])
def test_invalid_iterations(runner: CliRunner, input_file: Path, value: str) -> None:
    result = runner.invoke(cli, ["-i", value, str(input_file)])

    assert result.exit_code == 2
    assert not Path(f"{input_file}.gz").exists()


@pytest.mark.parametrize("args", [["-c"], ["-f"], ["-c", "-"], ["-f", "-"]])
def test_compress_from_stdin(runner: CliRunner, tmp_path: Path,
                             monkeypatch: pytest.MonkeyPatch, args) -> None:
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(cli, ["--log-level", "OFF", "-i", "1", *args], input=TEST_DATA)

    assert result.exit_code == 0
    assert gzip.decompress(result.stdout_bytes) == TEST_DATA
    assert os.listdir(tmp_path) == []


def test_write_to_stdout(runner: CliRunner, input_file: Path) -> None:
    result = runner.invoke(cli, ["--log-level", "OFF", "-i", "1", "-c", str(input_file)])

    assert result.exit_code == 0
    assert gzip.decompress(result.stdout_bytes) == TEST_DATA
    assert not Path(f"{input_file}.gz").exists()
    assert input_file.exists()


@pytest.mark.parametrize(
    ("args", "message"),
    [
        (["-c", "--rm"], "--stdout cannot be used with --rm"),
        (["-c", "-S", ".gzip"], "--stdout cannot be used with --suffix"),
        (["-k", "--rm"], "--keep cannot be used with --rm"),
    ],
)
def test_conflicting_options(runner: CliRunner, input_file: Path, args, message: str) -> None:
    result = runner.invoke(cli, [*args, str(input_file)])

    assert result.exit_code == 2
    assert message in result.output
    assert input_file.read_bytes() == TEST_DATA
    assert not Path(f"{input_file}.gz").exists()
    assert not Path(f"{input_file}.gzip").exists()


def test_suffix_with_path_separator(runner: CliRunner, input_file: Path) -> None:
    result = runner.invoke(cli, ["-S", f"foo{os.sep}bar", str(input_file)])

    assert result.exit_code == 2
    assert "path separator" in result.output


def test_existing_output_without_force(runner: CliRunner, input_file: Path) -> None:
    output = Path(f"{input_file}.gz")
    output.write_bytes(b"")

    result = runner.invoke(cli, [str(input_file)])

    assert result.exit_code == 73
    assert f"could not open {output}" in result.output
    assert "File exists" in result.output
    assert output.read_bytes() == b""


def test_existing_output_with_force(runner: CliRunner, input_file: Path) -> None:
    output = Path(f"{input_file}.gz")
    output.write_bytes(b"")

    result = runner.invoke(cli, ["-i", "1", "-f", str(input_file)])

    assert result.exit_code == 0, result.output
    assert gzip.decompress(output.read_bytes()) == TEST_DATA


def test_keep(runner: CliRunner, input_file: Path) -> None:
    result = runner.invoke(cli, ["-i", "1", "-k", str(input_file)])

    assert result.exit_code == 0, result.output
    assert input_file.exists()
    assert Path(f"{input_file}.gz").exists()


def test_remove(runner: CliRunner, input_file: Path) -> None:
    result = runner.invoke(cli, ["-i", "1", "--rm", str(input_file)])

    assert result.exit_code == 0, result.output
    assert f"{input_file} has been removed" in result.output
    assert not input_file.exists()
    assert gzip.decompress(Path(f"{input_file}.gz").read_bytes()) == TEST_DATA


def test_suffix(runner: CliRunner, input_file: Path) -> None:
    result = runner.invoke(cli, ["-i", "1", "-S", ".gzip", str(input_file)])

    assert result.exit_code == 0, result.output
    assert gzip.decompress(Path(f"{input_file}.gzip").read_bytes()) == TEST_DATA


def test_empty_suffix_is_warned_then_fails_on_existing_input(runner: CliRunner,
                                                             input_file: Path) -> None:
    # An empty suffix is accepted rather than rejected; the exclusive
    # create then refuses to clobber the input.
    result = runner.invoke(cli, ["-S", "", str(input_file)])

    assert result.exit_code == 73
    assert "the suffix is an empty string" in result.output
    assert f"could not open {input_file}" in result.output
    assert input_file.read_bytes() == TEST_DATA


def test_empty_suffix_with_force_overwrites_input(runner: CliRunner, input_file: Path) -> None:
    result = runner.invoke(cli, ["-i", "1", "-f", "-S", "", str(input_file)])

    assert result.exit_code == 0, result.output
    assert "the suffix is an empty string" in result.output
    assert gzip.decompress(input_file.read_bytes()) == b""


def test_suffix_without_leading_dot_is_warned(runner: CliRunner, input_file: Path) -> None:
    result = runner.invoke(cli, ["-i", "1", "-S", "gz", str(input_file)])

    assert result.exit_code == 0, result.output
    assert "the suffix does not start with `.`" in result.output
    assert gzip.decompress(Path(f"{input_file}gz").read_bytes()) == TEST_DATA


def test_missing_input(runner: CliRunner, tmp_path: Path) -> None:
    missing = tmp_path / "missing.txt"

    result = runner.invoke(cli, [str(missing)])

    assert result.exit_code == 66
    assert f"could not open {missing}" in result.output
    assert "Caused by:" in result.output


def test_first_failure_aborts_remaining_inputs(runner: CliRunner, tmp_path: Path,
                                               input_file: Path) -> None:
    result = runner.invoke(cli, ["-i", "1", str(tmp_path / "missing.txt"), str(input_file)])

    assert result.exit_code == 66
    assert not Path(f"{input_file}.gz").exists()


def test_multiple_inputs(runner: CliRunner, tmp_path: Path) -> None:
    paths = [tmp_path / "a.txt", tmp_path / "b.txt"]
    for path in paths:
        path.write_bytes(TEST_DATA)

    result = runner.invoke(cli, ["-i", "1", *map(str, paths)])

    assert result.exit_code == 0, result.output
    for path in paths:
        assert gzip.decompress(Path(f"{path}.gz").read_bytes()) == TEST_DATA


def test_already_compressed_warning(runner: CliRunner, tmp_path: Path) -> None:
    path = tmp_path / "foo.txt"
    path.write_bytes(gzip.compress(b"Hello, world!\n"))

    result = runner.invoke(cli, ["-i", "1", str(path)])

    assert result.exit_code == 0, result.output
    assert "input data is already compressed" in result.output
    assert f"Saving to: {path}.gz" in result.output


@pytest.mark.parametrize("level", ["OFF", "off", "ERROR"])
def test_quiet_log_levels(runner: CliRunner, input_file: Path, level: str) -> None:
    result = runner.invoke(cli, ["-i", "1", "--log-level", level, str(input_file)])

    assert result.exit_code == 0
    assert "Saving to" not in result.output
    assert "Original Size" not in result.output


def test_warn_log_level_shows_warnings_only(runner: CliRunner, tmp_path: Path) -> None:
    path = tmp_path / "foo.txt"
    path.write_bytes(gzip.compress(b"Hello, world!\n"))

    result = runner.invoke(cli, ["-i", "1", "--log-level", "WARN", str(path)])

    assert result.exit_code == 0
    assert "input data is already compressed" in result.output
    assert "Saving to" not in result.output


@pytest.mark.parametrize("level", ["INFO", "DEBUG", "TRACE"])
def test_verbose_log_levels(runner: CliRunner, input_file: Path, level: str) -> None:
    result = runner.invoke(cli, ["-i", "1", "--log-level", level, str(input_file)])

    assert result.exit_code == 0
    assert "Saving to" in result.output
    assert "Original Size" in result.output


def test_trace_log_level_shows_reads(runner: CliRunner, input_file: Path) -> None:
    result = runner.invoke(cli, ["-i", "1", "--log-level", "TRACE", str(input_file)])

    assert result.exit_code == 0
    assert "[TRACE] Read 1083 bytes" in result.output


def test_invalid_log_level(runner: CliRunner, input_file: Path) -> None:
    result = runner.invoke(cli, ["--log-level", "a", str(input_file)])

    assert result.exit_code == 2
    assert not Path(f"{input_file}.gz").exists()


@pytest.mark.parametrize("shell", ["zsh", "fish"])
def test_generate_completion(runner: CliRunner, shell: str) -> None:
    result = runner.invoke(cli, ["--generate-completion", shell])

    assert result.exit_code == 0
    assert "_ZOPFLI_TOOL_COMPLETE" in result.output
    assert "zopfli-tool" in result.output


def test_generate_completion_rejects_unknown_shell(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--generate-completion", "tcsh"])

    assert result.exit_code == 2


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert f"zopfli-tool {__version__}" in result.output
    assert "MIT License" in result.output


def test_main_exits_with_error_code(tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
                                    capsys: pytest.CaptureFixture) -> None:
    from zopfli_tool.cli import main

    missing = tmp_path / "missing.txt"
    monkeypatch.setattr("sys.argv", ["zopfli-tool", str(missing)])

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 66
    assert f"could not open {missing}" in capsys.readouterr().err


def test_main_reports_usage_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    from zopfli_tool.cli import main

    monkeypatch.setattr("sys.argv", ["zopfli-tool", "-c", "--rm"])

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 2
