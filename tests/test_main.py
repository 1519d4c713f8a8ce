"""Test the command line entry point in headless mode."""
import json
import pytest

from pyroshow.main import main, build_parser, parse_click, HEADLESS_DEFAULT_TICKS


class TestParser:
    """Tests for argument parsing."""

    def test_parse_click(self):
        assert parse_click("400,100") == (400.0, 100.0)

    @pytest.mark.parametrize("value", ["400", "a,b", "1,2,3"])
    def test_bad_click(self, value):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--click", value])

    def test_clicks_accumulate(self):
        args = build_parser().parse_args(["--click", "1,2", "--click", "3,4"])
        assert args.click == [(1.0, 2.0), (3.0, 4.0)]


class TestHeadlessRun:
    """Integration tests running the real loop on a RecordingCanvas."""

    def test_click_explodes(self, capsys):
        assert main(["--headless", "--ticks", "200", "--seed", "7", "--click", "400,0"]) == 0
        out = capsys.readouterr().out
        assert "Rockets launched: 1, exploded: 1, particles spawned: 60" in out
        assert "Active at exit: 0 rockets, 60 particles" in out

    def test_verbose(self, capsys):
        main(["--headless", "--ticks", "10", "--click", "400,594", "--verbose"])
        out = capsys.readouterr().out
        assert "[LAUNCH] Rocket from (400, 600) to (400, 594)" in out
        assert "[EXPLODE] 60 particles" in out

    def test_default_tick_budget(self, capsys):
        main(["--headless", "--click", "400,300"])
        out = capsys.readouterr().out
        # 100 ticks of flight plus at most 334 of fading
        assert HEADLESS_DEFAULT_TICKS > 434
        assert "Active at exit: 0 rockets, 0 particles" in out

    def test_size_flags_move_origin(self, capsys):
        main(["--headless", "--ticks", "1", "--width", "200", "--height", "100",
              "--click", "100,97", "--verbose"])
        out = capsys.readouterr().out
        assert "[LAUNCH] Rocket from (100, 100) to (100, 97)" in out

    def test_config_file(self, tmp_path, capsys):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"width": 300, "height": 200}))
        main(["--headless", "--ticks", "1", "--config", str(path), "--click", "0,0", "--verbose"])
        out = capsys.readouterr().out
        assert "from (150, 200)" in out

    def test_bad_config_is_usage_error(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"colour": "red"}))
        with pytest.raises(SystemExit) as exc:
            main(["--headless", "--config", str(path)])
        assert exc.value.code == 2

    def test_missing_config_is_usage_error(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["--headless", "--config", str(tmp_path / "nope.json")])
        assert exc.value.code == 2

    def test_bad_size_flag(self):
        with pytest.raises(SystemExit) as exc:
            main(["--headless", "--width", "0"])
        assert exc.value.code == 2
