import sys
from datetime import date
from pathlib import Path

import pytest

# Put the project root on sys.path so `import services`, `import models`, etc. resolve without installing.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def today() -> date:
    """Fixed 'today' for clock-dependent history and planning tests."""
    return date(2026, 10, 18)
