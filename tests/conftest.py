import sys
from pathlib import Path

import pytest

# Make the repository root importable so tests run without installation.
repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def quiet_logger():
    from shared.logger import PwGuardLogger

    return PwGuardLogger("test", console_output=False)
