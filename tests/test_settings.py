import pytest
from pydantic import ValidationError

from launchtree.config.settings import BUNDLED_CONFIG, LaunchSettings, load_settings

def test_no_file_gives_defaults():
    assert load_settings(None).track_path is True

def test_bundled_config_matches_defaults():
    assert load_settings(BUNDLED_CONFIG).model_dump() == LaunchSettings().model_dump()

def test_track_path_can_be_turned_off(tmp_path):
    cfg = tmp_path / "launch.yaml"
    cfg.write_text("track_path: false\n")
    assert load_settings(cfg).track_path is False

def test_empty_file_gives_defaults(tmp_path):
    cfg = tmp_path / "empty.yaml"
    cfg.write_text("")
    assert load_settings(cfg).model_dump() == LaunchSettings().model_dump()

@pytest.mark.parametrize(
    "body",
    [
        "terminal_values:\n  failed: .nan\n",
        "terminal_values:\n  no-testing-successful: -10\n",
        "terminal_values:\n  positive-successful: 1\n",
    ],
)
def test_terminal_values_cannot_be_overridden(tmp_path, body):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text(body)
    with pytest.raises(ValidationError):
        load_settings(cfg)

def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "nope.yaml")
