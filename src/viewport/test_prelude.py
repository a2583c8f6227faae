# file: test_prelude.py

import logging
from pathlib import Path

import pytest
from hypothesis import example, given
from hypothesis import strategies as st

from viewport import prelude
from viewport.prelude import (
    CAPTION,
    DIMENSIONS,
    PAN_STEP,
    SCROLL_SENSITIVITY,
    UserConfig,
    clamp,
    setup_logging,
)


REPO_CONFIG_PATH = Path(__file__).parent.parent / "config"


class TestConstants:
    def test_constants(self):
        assert SCROLL_SENSITIVITY == 0.02
        assert PAN_STEP == 20.0
        assert CAPTION == "Doug CAD"
        assert DIMENSIONS == (1920, 1080)
        assert 0 < prelude.MIN_SCALE <= prelude.DEFAULT_SCALE <= prelude.MAX_SCALE


@given(st.floats(allow_nan=False), st.floats(-1e6, 0), st.floats(0, 1e6))
@example(float("inf"), 3, 11)
def test_clamp_in_range(value, lo, hi):
    assert lo <= clamp(value, lo, hi) <= hi


class TestUserConfig:
    def test_user_config_defaults(self):
        cfg = UserConfig.from_dict({})
        assert (cfg.window_width, cfg.window_height) == DIMENSIONS
        assert cfg.vsync is True
        assert cfg.fps_cap == 60
        assert cfg.scroll_sensitivity == 0.02
        assert cfg.pan_step == 20.0
        assert (cfg.min_scale, cfg.max_scale) == (0.01, 100.0)

    def test_user_config_from_dict(self):
        cfg = UserConfig.from_dict(
            {"window_width": "640", "window_height": "480", "vsync": "False", "pan_step": "2.5", "max_scale": "8"}
        )
        assert (cfg.window_width, cfg.window_height) == (640, 480)
        assert cfg.vsync is False
        assert cfg.pan_step == 2.5
        assert cfg.max_scale == 8.0

    @pytest.mark.parametrize(
        "config_dict",
        [
            {"window_width": "wide"},
            {"min_scale": "0"},
            {"min_scale": "-1"},
            {"min_scale": "5", "max_scale": "1"},
            {"max_scale": "inf"},
        ],
    )
    def test_user_config_invalid_values(self, config_dict):
        with pytest.raises(ValueError):
            UserConfig.from_dict(config_dict)

    def test_read_user_config(self, tmp_path: Path):
        path = tmp_path / "config"
        path.write_text("# comment\n\nwindow_width 800\n  pan_step   4.0  \n")
        assert UserConfig.read_user_config(path) == {"window_width": "800", "pan_step": "4.0"}

    def test_read_user_config_key_without_value(self, tmp_path: Path):
        path = tmp_path / "config"
        path.write_text("window_width 800\nvsync\n")
        with pytest.raises(ValueError, match=r"config:2: .*'vsync'"):
            UserConfig.read_user_config(path)

    def test_read_user_config_missing_file(self, tmp_path: Path, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.ERROR):
            assert UserConfig.read_user_config(tmp_path / "nope") is None
        assert "error while locating file" in caplog.text

    def test_repo_config_matches_defaults(self):
        config = UserConfig.read_user_config(REPO_CONFIG_PATH)
        assert config
        assert UserConfig.from_dict(config) == UserConfig.from_dict({})


def test_setup_logging_levels(monkeypatch: pytest.MonkeyPatch):
    calls: list[int] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw["level"]))
    setup_logging(debug=False)
    setup_logging(debug=True)
    assert calls == [logging.WARNING, logging.DEBUG]
