import json
import re

import pytest

from pwguard.core.engine import PwGuardEngine, mask_password
from pwguard.core.errors import InvalidLengthError
from pwguard.core.models import GeneratePasswordOptions, GenerationStrategy
from pwguard.output.report import PwGuardReportGenerator
from shared.config import GeneratorConfig, PwGuardConfig
from shared.models import Severity


@pytest.fixture
def engine(quiet_logger):
    return PwGuardEngine(logger=quiet_logger)


@pytest.mark.parametrize(
    "password, masked",
    [("", "[empty]"), ("a", "*"), ("ab", "**"), ("abc", "a*c"), ("hunter22", "h******2")],
)
def test_mask_password(password, masked):
    assert mask_password(password) == masked


class TestAnalyze:
    def test_common_password(self, engine):
        result = engine.analyze_password("password")
        assert result.target == "p******d"
        assert result.highest_severity is Severity.CRITICAL
        assert result.findings[0].title == "Password Strength: Weak"
        assert result.findings[0].severity is Severity.HIGH
        assert result.metadata["strength"]["score"] == 0
        assert result.end_time is not None

    def test_pattern_and_suggestion_findings(self, engine):
        result = engine.analyze_password("mary-1990")
        titles = [f.title for f in result.findings]
        assert "Pattern Detected: Date Pattern" in titles
        assert "Pattern Detected: First Name" in titles
        assert "Password Improvement Suggestion" in titles

    def test_password_never_in_result(self, engine):
        secret = "Zebra#Quartz42"
        result = engine.analyze_password(secret)
        assert secret not in result.model_dump_json()
        assert secret not in PwGuardReportGenerator().render_json(result)

    @pytest.mark.parametrize("secret, fragment", [("microsoft!", "microsoft"), ("johnblue77", "john")])
    def test_matched_words_not_echoed(self, engine, secret, fragment):
        result = engine.analyze_password(secret)
        assert "dictionary_words" not in result.metadata["keyspace"]
        assert fragment not in PwGuardReportGenerator().render_json(result)
        assert fragment not in " ".join(f.description for f in result.findings)

    def test_strong_password(self, engine):
        result = engine.analyze_password("Xk9#mQ2$vL7!pR4&")
        assert result.findings[0].severity is Severity.INFO
        assert result.metadata["strength"]["verdict"].value == "very_strong"


class TestGenerate:
    def test_default_random(self, engine):
        result = engine.generate()
        password = result.metadata["password"]
        assert len(password) == 12
        assert result.metadata["strategy"] == "random"
        assert result.finding_count == 1
        assert result.findings[0].severity is Severity.INFO

    def test_default_length_from_config(self, quiet_logger):
        config = PwGuardConfig(generator=GeneratorConfig(default_length=20))
        engine = PwGuardEngine(config, logger=quiet_logger)
        assert len(engine.generate().metadata["password"]) == 20

    def test_strong(self, engine):
        result = engine.generate(GeneratePasswordOptions(length=16), GenerationStrategy.STRONG)
        assert len(result.metadata["password"]) == 16

    def test_memorable(self, engine):
        result = engine.generate(
            GeneratePasswordOptions(numbers=False, symbols=False),
            GenerationStrategy.MEMORABLE,
            word_count=2,
        )
        assert re.fullmatch(r"[A-Z][a-z]+-[A-Z][a-z]+", result.metadata["password"])

    def test_invalid_options_raise(self, engine):
        with pytest.raises(InvalidLengthError):
            engine.generate(GeneratePasswordOptions(length=3))


def test_json_report(engine, tmp_path):
    result = engine.analyze_password("password")
    path = PwGuardReportGenerator(version="9.9.9").generate_json(
        result, tmp_path / "out" / "report.json"
    )
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["report_metadata"]["version"] == "9.9.9"
    assert data["report_metadata"]["tool"] == "pwguard"
    assert data["summary"]["total_findings"] == len(result.findings)
    assert data["summary"]["highest_severity"] == "CRITICAL"
    assert data["metadata"]["strength"]["verdict"] == "weak"


def test_check_returns_plain_result(engine):
    result = engine.check("correct-Horse-battery-9")
    assert result == engine.checker.check("correct-Horse-battery-9")
    assert result.pwned_check is None


def test_json_report_with_saturated_keyspace(engine):
    result = engine.analyze_password("Aa1!" * 100)
    text = PwGuardReportGenerator().render_json(result)
    assert "Infinity" not in text
    data = json.loads(text)
    assert data["metadata"]["keyspace"]["keyspace"] == "inf"
    assert data["metadata"]["strength"]["crack_time"]["offline"]["human_readable"] == "forever"
