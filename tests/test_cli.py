import json

import pytest
from click.testing import CliRunner

from entpass.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, *args):
    return runner.invoke(cli, ["--quiet", *args], obj={})


def test_single_password_has_no_newline(runner):
    result = invoke(runner, "generate", "-e", "0")
    assert result.exit_code == 0, result.output
    assert len(result.stdout) == 17
    assert "\n" not in result.stdout


def test_several_passwords_one_per_line(runner):
    result = invoke(runner, "generate", "-e", "0", "-q", "4", "-l", "20")
    assert result.exit_code == 0, result.output
    lines = result.stdout.splitlines()
    assert len(lines) == 4
    assert len(set(lines)) == 4
    assert all(len(line) == 20 for line in lines)


def test_character_class_flags(runner):
    result = invoke(runner, "generate", "-e", "0", "-l", "40", "-U", "-S", "-E", "aeiou")
    assert result.exit_code == 0, result.output
    assert not set(result.stdout) & set("ABCDEFGHIJKLMNOPQRSTUVWXYZaeiou!@#")


def test_json_list(runner):
    result = invoke(runner, "--output", "json", "generate", "-e", "0", "-q", "3")
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert isinstance(data, list)
    assert len(data) == 3
    assert all(item["length"] == 17 for item in data)


def test_json_single_with_average(runner):
    result = invoke(runner, "--output", "json", "generate", "-k", "200", "-c", "2")
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert isinstance(data, dict)
    assert data["sample"]["limit"] == 200
    assert data["entropy"]["score"] >= float(f"{data['sample']['average']:.3f}")


def test_output_file(runner, tmp_path):
    target = tmp_path / "out" / "passwords.txt"
    result = invoke(runner, "-o", str(target), "generate", "-e", "0", "-q", "2")
    assert result.exit_code == 0, result.output
    assert result.stdout == ""
    assert len(target.read_text(encoding="utf-8").splitlines()) == 2


def test_report_json(runner):
    result = invoke(runner, "--output", "json", "report", "-k", "400", "-c", "3")
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert "value" not in data
    stats = data["sample"]
    assert stats["limit"] == 400
    assert stats["min"] <= stats["average"] <= stats["max"]


def test_report_text_file(runner, tmp_path):
    target = tmp_path / "report.txt"
    result = invoke(runner, "-o", str(target), "report", "-k", "100", "-N")
    assert result.exit_code == 0, result.output
    text = target.read_text(encoding="utf-8")
    assert text.startswith("Entropy Report: \n")
    assert "  Samples: 100\n" in text
    assert "  Digits: false\n" in text
    assert "  Use Words: false\n" in text


@pytest.mark.parametrize(
    "args",
    [
        ["generate", "-l", "2"],
        ["generate", "-e", "abc"],
        ["generate", "-e", "e8"],
        ["generate", "-q", "500", "-e", "0"],
        ["generate", "-U", "-L", "-N", "-S"],
        ["report", "-k", "0"],
    ],
)
def test_errors_exit_with_status_one(runner, args):
    result = invoke(runner, *args)
    assert result.exit_code == 1
    assert result.stdout == ""


def test_word_mode_with_wordlist(runner, word_file, words):
    result = invoke(
        runner, "generate", "-w", "-e", "0", "-l", "3", "--wordlist", str(word_file)
    )
    assert result.exit_code == 0, result.output
    assert sum(word in result.stdout for word in words) >= 1


def test_config_file_sets_defaults(runner, tmp_path):
    path = tmp_path / "entpass.toml"
    path.write_text('[generator]\nlength = 24\nmin_entropy = "0"\n', encoding="utf-8")
    result = invoke(runner, "--config", str(path), "generate")
    assert result.exit_code == 0, result.output
    assert len(result.stdout) == 24

    result = invoke(runner, "--config", str(path), "generate", "-l", "9")
    assert len(result.stdout) == 9


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "1.0.0" in result.output


def test_config_value_of_wrong_type(runner, tmp_path):
    path = tmp_path / "entpass.toml"
    path.write_text('[generator]\nquantity = "many"\n', encoding="utf-8")
    result = invoke(runner, "--config", str(path), "generate", "-e", "0")
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "quantity" in result.stderr
    assert result.stdout == ""


def test_error_is_shown_once(runner):
    result = invoke(runner, "generate", "-e", "abc")
    assert result.exit_code == 1
    assert result.stderr.count("Invalid entropy value: abc") == 1


def test_errors_reach_the_configured_log_file(runner, tmp_path):
    log_path = tmp_path / "logs" / "entpass.log"
    path = tmp_path / "entpass.toml"
    path.write_text(f"[global]\nlog_file = '{log_path}'\n", encoding="utf-8")
    result = invoke(runner, "--config", str(path), "generate", "-e", "abc")
    assert result.exit_code == 1
    assert "Invalid entropy value: abc" in log_path.read_text(encoding="utf-8")


@pytest.mark.parametrize("workers", ["--workers=0", "--workers=-1"])
def test_non_positive_workers_use_every_cpu(runner, workers):
    result = invoke(runner, "--output", "json", "report", "-k", "50", workers)
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["sample"]["limit"] == 50
