import json

import pytest

from shared.config import GeneratorConfig, PwGuardConfig, StrengthConfig
from shared.logger import PwGuardLogger


def test_defaults():
    config = PwGuardConfig()
    assert config.strength == StrengthConfig(1e3, 1e11, 1e13)
    assert config.generator == GeneratorConfig(12, 5, 4)
    assert config.global_settings.log_level == "INFO"


def test_load_ignores_unknown_keys(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        "[global]\n"
        'log_level = "DEBUG"\n'
        "colour = true\n"
        "[strength]\n"
        "offline_rate = 5e9\n"
        "[unknown]\n"
        "x = 1\n",
        encoding="utf-8",
    )
    config = PwGuardConfig.load(path)
    assert config.global_settings.log_level == "DEBUG"
    assert config.strength.offline_rate == 5e9
    assert config.strength.online_rate == 1e3
    assert config.generator.strong_candidates == 5


def test_explicit_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        PwGuardConfig.load(tmp_path / "missing.toml")


def test_to_dict():
    data = PwGuardConfig().to_dict()
    assert set(data) == {"global_settings", "strength", "generator"}


def test_json_file_logging(tmp_path):
    log_file = tmp_path / "logs" / "pwguard.log"
    log = PwGuardLogger("test.file", log_file=log_file, json_logs=True, console_output=False)
    with log.operation("check"):
        log.info("Strength computed", length=12)
    for handler in log.underlying.handlers:
        handler.flush()

    entry = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
    assert entry["logger"] == "pwguard.test.file"
    assert entry["operation"] == "check"
    assert entry["extra"] == {"length": 12}


def test_get_config_is_cached(tmp_path):
    from shared.config import get_config

    path = tmp_path / "pwguard.toml"
    path.write_text("[generator]\ndefault_length = 24\n", encoding="utf-8")
    first = get_config(path)
    assert first.generator.default_length == 24
    assert get_config() is first


def test_text_file_logging_with_timing(tmp_path):
    log_file = tmp_path / "pwguard.log"
    log = PwGuardLogger("test.text", log_level="DEBUG", log_file=log_file, console_output=False)
    with log.operation("generate"), log.timed("draw"):
        pass
    log.info("outside")
    for handler in log.underlying.handlers:
        handler.flush()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert "| generate | Completed: draw (" in lines[0]
    assert "| - | outside" in lines[1]
