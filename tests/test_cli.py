"""Tests for the command-line entry point."""

import logging
import pytest
from termlife import cli
from termlife.cli import build_parser, config_from_args, main


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    """Keep CLI runs from sleeping between frames."""
    monkeypatch.setattr(cli.SleepPacer, "pause", lambda self: None)


class TestArgumentParsing:

    def test_defaults(self):
        config = config_from_args(build_parser().parse_args([]))
        assert config.grid_size == 20
        assert config.frame_interval == 0.4
        assert config.seed_file is None
        assert config.pattern is None
        assert config.max_generations is None
        assert config.use_color is True

    def test_options(self):
        args = build_parser().parse_args([
            "--size", "30", "--interval", "0.1", "--density", "0.25", "--seed", "5",
            "--pattern", "glider", "--generations", "12", "--stop-when-static",
            "--vectorized", "--no-color",
        ])
        config = config_from_args(args)
        assert config.grid_size == 30
        assert config.frame_interval == 0.1
        assert config.density == 0.25
        assert config.random_seed == 5
        assert config.pattern == "glider"
        assert config.max_generations == 12
        assert config.stop_when_static
        assert config.vectorized
        assert not config.use_color

    def test_seed_file_and_pattern_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--seed-file", "a.txt", "--pattern", "block"])

    def test_unknown_pattern(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--pattern", "spaceship"])


class TestMain:

    def test_runs_limited_generations(self, capsys):
        assert main(["--pattern", "blinker", "--generations", "3", "--no-color"]) == 0
        out = capsys.readouterr().out
        assert "Generation 0 | Population 3" in out
        assert "Generation 2 | Population 3" in out
        assert "Generation 3 " not in out

    def test_seed_file(self, tmp_path, capsys):
        path = tmp_path / "seed.txt"
        path.write_text("5 4\n5 5\n5 6\n")
        assert main(["--seed-file", str(path), "--generations", "1", "--no-color"]) == 0
        assert "Population 3" in capsys.readouterr().out

    def test_bad_seed_file_exits_1(self, tmp_path, caplog):
        path = tmp_path / "seed.txt"
        path.write_text("5 4\nfive 5\n")

        with caplog.at_level(logging.ERROR):
            assert main(["--seed-file", str(path), "--generations", "1"]) == 1

        assert f"{path}:2" in caplog.text

    def test_missing_seed_file_exits_1(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR):
            assert main(["--seed-file", str(tmp_path / "missing.txt")]) == 1
        assert "cannot read seed file" in caplog.text

    def test_invalid_size_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--size", "0"])
        assert excinfo.value.code == 2
        assert "Grid size" in capsys.readouterr().err

    def test_pattern_larger_than_grid_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--pattern", "beacon", "--size", "3", "--generations", "1", "--no-color"])
        assert excinfo.value.code == 2
        assert "does not fit in 3x3 grid" in capsys.readouterr().err

    def test_keyboard_interrupt_exits_cleanly(self, monkeypatch, capsys):
        def interrupt(self):
            raise KeyboardInterrupt

        monkeypatch.setattr(cli.SleepPacer, "pause", interrupt)
        assert main(["--pattern", "block", "--interval", "0.4"]) == 0
        assert capsys.readouterr().out.endswith("\033[0m")
