"""
PwGuard Configuration Management
=================================

Centralized configuration for the PwGuard toolkit using Python
dataclasses and TOML-based persistence.

Architecture follows the Twelve-Factor App methodology for configuration
management (Wiggins, 2011), separating config from code.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - PEP 681 -- Data Class Transforms (2022).
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]


# ---------------------------------------------------------------------------
# Default configuration file path relative to the PwGuard root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class StrengthConfig:
    """Configuration for the strength-estimation engine.

    Attack rates are expressed in guesses per second and drive the
    crack-time projection for each attacker profile.

    Reference:
        Bonneau, J. (2012). The Science of Guessing: Analyzing an
        Anonymized Corpus of 70 Million Passwords. IEEE S&P.
    """

    online_rate: float = 1e3
    offline_rate: float = 1e11
    offline_fast_rate: float = 1e13


@dataclass(frozen=False, slots=True)
class GeneratorConfig:
    """Configuration for the password generators."""

    default_length: int = 12
    strong_candidates: int = 5
    memorable_word_count: int = 4


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings shared across all PwGuard modules.

    Controls logging verbosity, output directories and general
    operational parameters.
    """

    log_level: str = "INFO"
    log_file: str = ""
    log_json: bool = False
    output_dir: str = "output"
    debug: bool = False
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class PwGuardConfig:
    """Master configuration aggregating all tool-specific and global settings.

    Usage:
        >>> config = PwGuardConfig.load()                  # from default path
        >>> config = PwGuardConfig.load("custom.toml")     # from custom path
        >>> print(config.strength.online_rate)
        1000.0
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    strength: StrengthConfig = field(default_factory=StrengthConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> PwGuardConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys gracefully fall back to dataclass
        defaults -- no ``KeyError`` is raised.

        Args:
            path: Filesystem path to a TOML configuration file.
                  Defaults to ``<project_root>/config.toml``.

        Returns:
            A fully-populated :class:`PwGuardConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            strength=cls._build_section(StrengthConfig, raw.get("strength", {})),
            generator=cls._build_section(GeneratorConfig, raw.get("generator", {})),
        )

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are silently ignored so that
        forward-compatible config files do not break older code.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> PwGuardConfig:
    """Module-level convenience wrapper around :meth:`PwGuardConfig.load`.

    Caches the result so that repeated imports share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = PwGuardConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
