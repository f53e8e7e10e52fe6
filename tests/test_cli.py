from unittest.mock import MagicMock

import pytest

from writebench import cli
from writebench.batches import BATCH_DEFINITIONS
from writebench.runner import BenchmarkRunner

from conftest import write_batch_dir


@pytest.fixture
def no_backends(monkeypatch):
    runner = MagicMock(name="BenchmarkRunner")
    loader = MagicMock(name="load_batches", return_value=[])
    monkeypatch.setattr(cli, "BenchmarkRunner", runner)
    monkeypatch.setattr(cli, "load_batches", loader)
    return runner, loader


@pytest.mark.parametrize("argv", [[], ["ak"], ["ak", "sk", "true", "extra"]])
def test_wrong_argument_count_is_fatal(argv, no_backends, capsys):
    runner, loader = no_backends

    with pytest.raises(SystemExit) as exc_info:
        cli.main(argv)

    assert exc_info.value.code == 2
    assert "usage: writebench" in capsys.readouterr().err
    runner.assert_not_called()
    loader.assert_not_called()


@pytest.mark.parametrize("argv, debug", [
    (["ak", "sk"], False),
    (["ak", "sk", "true"], True),
    (["ak", "sk", "no"], False),
])
def test_runs_with_parsed_config(argv, debug, no_backends):
    runner, loader = no_backends

    assert cli.main(argv) == 0

    config = runner.call_args.args[0]
    assert config.access_key == "ak"
    assert config.secret_key == "sk"
    assert config.debug is debug
    loader.assert_called_once_with(config.batches_root)
    runner.return_value.__enter__.return_value.run.assert_called_once_with([])


def test_missing_batches_exit_before_any_client(monkeypatch, tmp_path, capsys):
    runner = MagicMock(name="BenchmarkRunner")
    monkeypatch.setattr(cli, "BenchmarkRunner", runner)
    monkeypatch.setenv("WRITEBENCH_BATCHES_ROOT", str(tmp_path / "missing"))

    assert cli.main(["ak", "sk"]) == 1

    runner.assert_not_called()
    assert "75-files mixed-batch" in capsys.readouterr().out


@pytest.fixture
def full_setup(monkeypatch, tmp_path):
    root = tmp_path / "batches"
    for _, dirname in BATCH_DEFINITIONS:
        write_batch_dir(root, dirname, 1)
    mount = tmp_path / "efs"
    monkeypatch.setenv("WRITEBENCH_BATCHES_ROOT", str(root))
    monkeypatch.setenv("WRITEBENCH_MOUNT_POINT", str(mount))

    def fake_runner(config, log):
        return BenchmarkRunner(config, s3_client=MagicMock(), transfer_manager=MagicMock(), log=log)

    monkeypatch.setattr(cli, "BenchmarkRunner", fake_runner)
    return mount


def test_console_output_without_debug(full_setup, capsys):
    assert cli.main(["ak", "sk"]) == 0

    out = capsys.readouterr().out
    assert "Starting BenchmarkRunner tests" in out
    assert "Serial S3 Test 75-files mixed-batch took" in out
    assert "Serial EFS Test 100-files 50-paragraph took" in out
    assert "Writing " not in out


def test_console_output_with_debug(full_setup, capsys):
    assert cli.main(["ak", "sk", "TRUE"]) == 0

    out = capsys.readouterr().out
    assert "Writing test-serial/75-mixed/f00.txt to S3 took" in out
    assert "Writing test-serial-tm/75-mixed/f00.txt to S3 took" in out
    assert "to EFS took" in out
    assert "Serial S3 TransferManager-ed Test 100-files 5-paragraph took" in out
    assert (full_setup / "test-serial" / "300-mixed" / "f00.txt").exists()
