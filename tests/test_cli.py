import json
import logging

from click.testing import CliRunner

from primeshare import reconstruct_secret
from primeshare.audit import AuditTrail
from primeshare.cli import cli
from primeshare.shares_io import parse_share


def _generate(runner, *args):
    result = runner.invoke(cli, ["generate", *args])
    assert result.exit_code == 0, result.output
    return result.output.splitlines()


def test_generate_prints_one_line_per_share():
    lines = _generate(CliRunner(), "AB", "5", "3")
    assert len(lines) == 5
    assert [int(line.split()[0]) for line in lines] == [1, 2, 3, 4, 5]


def test_generate_then_reconstruct():
    runner = CliRunner()
    lines = _generate(runner, "AB", "5", "3")
    picked = "\n".join([lines[4], lines[0], lines[2]]) + "\n"

    result = runner.invoke(cli, ["reconstruct", "3"], input=picked)
    assert result.exit_code == 0, result.output
    assert result.output == "AB\n"


def test_reconstruct_from_file(tmp_path):
    runner = CliRunner()
    lines = _generate(runner, "Hi", "4", "2")
    share_file = tmp_path / "shares.txt"
    share_file.write_text("\n".join(lines[2:]) + "\n")

    result = runner.invoke(cli, ["reconstruct", "2", "--input", str(share_file)])
    assert result.exit_code == 0, result.output
    assert result.output == "Hi\n"


def test_threshold_above_share_count_fails():
    result = CliRunner().invoke(cli, ["generate", "AB", "3", "4"])
    assert result.exit_code != 0
    assert "1 <= k <= n" in result.output


def test_strict_rejects_long_secret():
    result = CliRunner().invoke(cli, ["generate", "--strict", "too long", "3", "2"])
    assert result.exit_code != 0
    assert "exceeds the field capacity" in result.output


def test_max_shares_from_environment(monkeypatch):
    monkeypatch.setenv("PRIMESHARE_MAX_SHARES", "4")
    result = CliRunner().invoke(cli, ["generate", "AB", "5", "3"])
    assert result.exit_code != 0
    assert "At most 4 shares" in result.output


def test_malformed_share_line_is_reported():
    result = CliRunner().invoke(cli, ["reconstruct", "2"], input="1 123\nnot a share\n")
    assert result.exit_code != 0
    assert "line 2" in result.output


def test_missing_shares_are_reported():
    result = CliRunner().invoke(cli, ["reconstruct", "3"], input="1 123\n2 456\n")
    assert result.exit_code != 0
    assert "expected 3 shares, found 2" in result.output


def test_duplicate_index_is_reported():
    result = CliRunner().invoke(cli, ["reconstruct", "2"], input="1 123\n1 456\n")
    assert result.exit_code != 0
    assert "Duplicate share index: 1" in result.output


def test_audit_records_parameters_only(tmp_path):
    runner = CliRunner()
    audit_dir = tmp_path / "audit"
    result = runner.invoke(cli, ["--audit-dir", str(audit_dir), "generate", "AB", "5", "3"])
    assert result.exit_code == 0, result.output

    records = list(audit_dir.glob("audit_*.json"))
    assert len(records) == 1
    text = records[0].read_text()
    entry = json.loads(text)
    assert entry["payload"]["event"] == "shares.generated"
    assert entry["payload"]["details"] == {"n": 5, "k": 3}
    assert "AB" not in text


def test_non_utf8_secret_is_shared_as_raw_bytes():
    runner = CliRunner()
    lines = _generate(runner, "\udcff", "3", "2")
    assert len(lines) == 3

    shares = [parse_share(line) for line in lines[1:]]
    assert reconstruct_secret(shares, 2) == b"\xff"


def test_undecodable_share_input_is_reported():
    result = CliRunner().invoke(cli, ["reconstruct", "2"], input=b"1 5\n\xff\xfe 7\n")
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Error" in result.output
    assert "line" in result.output


def test_lenient_long_secret_is_shared_with_warning(caplog):
    runner = CliRunner()
    with caplog.at_level(logging.WARNING):
        lines = _generate(runner, "--lenient", "too long", "3", "2")
    assert len(lines) == 3
    assert "exceeds the field capacity" in caplog.text
    assert "too long" not in caplog.text


def test_empty_secret_through_cli():
    runner = CliRunner()
    lines = _generate(runner, "", "3", "2")
    assert len(lines) == 3

    result = runner.invoke(cli, ["reconstruct", "2"], input="\n".join(lines[:2]) + "\n")
    assert result.exit_code == 0, result.output
    assert result.output == "\n"


def test_unknown_log_level_in_environment_is_ignored(monkeypatch):
    monkeypatch.setenv("PRIMESHARE_LOG_LEVEL", "BASIC_FORMAT")
    lines = _generate(CliRunner(), "AB", "3", "2")
    assert len(lines) == 3


def test_audit_chain_spans_commands(tmp_path):
    runner = CliRunner()
    audit_dir = tmp_path / "audit"
    generated = runner.invoke(cli, ["--audit-dir", str(audit_dir), "generate", "Hi", "4", "2"])
    assert generated.exit_code == 0, generated.output

    picked = "\n".join(generated.output.splitlines()[1:3]) + "\n"
    result = runner.invoke(cli, ["--audit-dir", str(audit_dir), "reconstruct", "2"], input=picked)
    assert result.exit_code == 0, result.output
    assert result.output == "Hi\n"

    assert len(list(audit_dir.glob("audit_*.json"))) == 2
    assert AuditTrail(audit_dir).verify_chain()
