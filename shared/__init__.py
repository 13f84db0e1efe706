"""
PwGuard Shared Module
=====================

Common utilities, models, and configuration management shared across
the PwGuard toolkit (strength estimation, generation, CLI).
"""

from shared.config import PwGuardConfig, get_config

__all__ = ["PwGuardConfig", "get_config"]
