import pytest

from fish_river_simulator import cli


def test_bench_default_layout(capsys):
    assert cli.Bench(default_only=True, trials=200, seed=1)() == 0

    out = capsys.readouterr().out
    assert "Layouts: 1" in out
    assert "0000003100000 | B:" in out


def test_bench_reads_config(tmp_path, capsys):
    path = tmp_path / "bench.toml"
    path.write_text("trials_per_layout = 20\nseed = 2\nmin_slot = 10\nmax_slot = 11\n")

    assert cli.Bench(config=path)() == 0

    out = capsys.readouterr().out
    assert "Layouts: 5" in out
    assert "Trials per layout: 20" in out
    assert len([line for line in out.splitlines() if " | B:" in line]) == 5


def test_bench_missing_config(tmp_path, capsys):
    assert cli.Bench(config=tmp_path / "missing.toml")() == 1
    assert "Config file not found" in capsys.readouterr().err


def test_watch_plays_to_the_end(monkeypatch, capsys):
    monkeypatch.setattr(cli, "configure_logging", lambda: None)

    assert cli.Watch(seed=4, delay=0)() == 0
    assert "Winner: " in capsys.readouterr().out


@pytest.mark.parametrize(
    "overrides",
    [{"trials": -5}, {"trials": 0}, {"workers": 0}, {"workers": -2}],
)
def test_bench_rejects_invalid_overrides(overrides, capsys):
    assert cli.Bench(default_only=True, **overrides)() == 1

    captured = capsys.readouterr()
    assert "Invalid configuration" in captured.err
    assert " | B:" not in captured.out
