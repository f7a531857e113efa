import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# packages (e.g. `infrastructure.configuration`) works during pytest
# collection regardless of the invocation directory.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest
import structlog


@pytest.fixture(autouse=True)
def isolated_log_context():
    """Keep structlog context variables from leaking between tests."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
