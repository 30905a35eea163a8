"""End-to-end tests for the json-harness command."""

from click.testing import CliRunner

from json_harness.adapters import ADAPTERS
from json_harness.cli import main


def test_list_libraries():
    result = CliRunner().invoke(main, ["--list-libraries"])
    assert result.exit_code == 0
    assert result.output.split() == list(ADAPTERS)


def test_no_files():
    result = CliRunner().invoke(main, [])
    assert result.exit_code == 0
    assert "File" not in result.output


def test_missing_file_aborts(tmp_path, json_file):
    result = CliRunner().invoke(main, [str(json_file), str(tmp_path / "missing.json")])

    assert result.exit_code != 0
    assert isinstance(result.exception, OSError)
    assert "Parse File" not in result.output


def test_unknown_library(json_file):
    result = CliRunner().invoke(main, ["-l", "simdjson", str(json_file)])
    assert result.exit_code == 2


def test_parse_run(json_file):
    result = CliRunner().invoke(main, ["-l", "json", "-l", "orjson", str(json_file)])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == f"Parse File 1 {json_file} (100 bytes)"
    assert [line.split(":")[0] for line in lines[1:]] == [" json"] * 3 + [" orjson"] * 3


def test_serialize_run(json_file):
    result = CliRunner().invoke(main, ["--mode", "serialize", "-l", "msgspec", str(json_file)])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == f"Serialize File 1 {json_file} (100 bytes)"
    assert len(lines) == 4
    assert all(line.startswith(" msgspec: ") and line.endswith("ms") for line in lines[1:])


def test_all_modes_two_files(tmp_path, json_100_bytes):
    first = tmp_path / "a.json"
    second = tmp_path / "b.json"
    first.write_bytes(json_100_bytes)
    second.write_bytes(b'{"k": [1, 2, 3]}')

    result = CliRunner().invoke(main, ["-m", "all", "-l", "ujson", str(first), str(second)])

    assert result.exit_code == 0, result.output
    headers = [line for line in result.output.splitlines() if not line.startswith(" ")]
    assert headers == [
        f"Parse File 1 {first} (100 bytes)",
        f"Parse File 2 {second} (16 bytes)",
        f"Serialize File 1 {first} (100 bytes)",
        f"Serialize File 2 {second} (16 bytes)",
    ]
