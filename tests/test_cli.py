import json
from pathlib import Path

from typer.testing import CliRunner

from segbench.cli import app
from tests.utils import write_dictionary_file

runner = CliRunner()


def test_cli_normalize_writes_clean_file(tmp_path: Path):
    """normalize command splits entries and reports the unique word count."""
    source = write_dictionary_file(tmp_path / "raw.txt", ["ab cd", "cd", "ef"])
    target = tmp_path / "clean.txt"
    result = runner.invoke(
        app, ["normalize", "--source", str(source), "--target", str(target)]
    )
    assert result.exit_code == 0
    assert "3 unique words" in result.stdout
    assert sorted(target.read_text(encoding="utf-8").splitlines()) == ["ab", "cd", "ef"]


def test_cli_run_prints_trials_and_average(tmp_path: Path):
    """run command reports each trial and writes a JSON report."""
    source = write_dictionary_file(tmp_path / "raw.txt", ["ab cd ef gh"])
    report_path = tmp_path / "out" / "report.json"
    result = runner.invoke(
        app,
        [
            "run",
            "--source",
            str(source),
            "--target",
            str(tmp_path / "clean.txt"),
            "--sampling-size",
            "4",
            "--trials",
            "2",
            "--holdout-ratio",
            "0",
            "--seed",
            "7",
            "--json-output",
            str(report_path),
        ],
    )
    assert result.exit_code == 0
    assert "Trial 0 engine build time" in result.stdout
    assert "Trial 1 F1 score = 1.0" in result.stdout
    assert "Average F1 score = 1.0" in result.stdout
    payload = json.loads(report_path.read_text(encoding="utf-8"))
    assert len(payload["trials"]) == 2
    assert payload["trials"][0]["test_cases"] == 24
    assert payload["mean_f1"] == 1.0


def test_cli_run_uses_config_file(tmp_path: Path):
    source = write_dictionary_file(tmp_path / "raw.txt", ["ab cd ef"])
    config_path = tmp_path / "bench.yaml"
    config_path.write_text(
        f"source_dict_path: {source.as_posix()}\n"
        f"clean_dict_path: {(tmp_path / 'clean.txt').as_posix()}\n"
        "sampling_size: 3\nmontecarlo_times: 1\nholdout_ratio: 0.0\n",
        encoding="utf-8",
    )
    result = runner.invoke(app, ["run", "--config", str(config_path)])
    assert result.exit_code == 0
    assert "Trial 0 F1 score = 1.0" in result.stdout
    assert "Trial 1" not in result.stdout


def test_cli_run_rejects_oversized_sample(tmp_path: Path):
    source = write_dictionary_file(tmp_path / "raw.txt", ["ab cd"])
    result = runner.invoke(
        app,
        [
            "run",
            "--source",
            str(source),
            "--target",
            str(tmp_path / "clean.txt"),
            "--sampling-size",
            "5",
        ],
    )
    assert result.exit_code == 1
    assert "Trial 0" not in result.stdout


def test_cli_run_missing_dictionary(tmp_path: Path):
    result = runner.invoke(
        app,
        [
            "run",
            "--source",
            str(tmp_path / "missing.txt"),
            "--target",
            str(tmp_path / "clean.txt"),
        ],
    )
    assert result.exit_code == 1


def test_cli_run_rejects_unknown_engine(tmp_path: Path):
    source = write_dictionary_file(tmp_path / "raw.txt", ["ab cd ef"])
    result = runner.invoke(
        app, ["run", "--source", str(source), "--engine", "nonsense"]
    )
    assert result.exit_code != 0


def test_cli_run_rejects_non_mapping_config(tmp_path: Path):
    """A config file that is not a YAML mapping is reported as a bad --config value."""
    config_path = tmp_path / "bench.yaml"
    config_path.write_text("- 1\n- 2\n", encoding="utf-8")
    result = runner.invoke(app, ["run", "--config", str(config_path)])
    assert result.exit_code == 2
    assert not isinstance(result.exception, ValueError)


def test_cli_normalize_rejects_missing_config(tmp_path: Path):
    result = runner.invoke(
        app, ["normalize", "--config", str(tmp_path / "missing.yaml")]
    )
    assert result.exit_code == 2
    assert not isinstance(result.exception, OSError)


def test_cli_print_config():
    """print-config command dumps the current configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "sampling_size" in result.stdout
