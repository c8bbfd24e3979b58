# Path: typed_string/tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for typed_string

Provides common test fixtures used across all test modules.
"""

import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

# Add repository root to path so the package imports without installation
REPO_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(REPO_ROOT))


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars(temp_dir):
    """Provide mock environment variables for testing."""
    env_vars = {
        'TYPED_STRING_ENVIRONMENT': 'test',
        'TYPED_STRING_DEBUG': 'false',
        'TYPED_STRING_LOG_LEVEL': 'DEBUG',
        'TYPED_STRING_LOG_CONSOLE': 'false',
        'TYPED_STRING_LOG_DIR': str(temp_dir / 'logs'),
        'TYPED_STRING_PATTERN_LIBRARY_DIR': str(temp_dir / 'patterns'),
        'TYPED_STRING_DEFAULT_OUTPUT_MODE': 'values',
        'TYPED_STRING_MAX_INPUT_LENGTH': '64',
        'TYPED_STRING_OUTPUT_FORMAT': 'text',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ==============================================================================
# PATTERN FIXTURES
# ==============================================================================

SAMPLE_LIBRARY = """\
patterns:
  - name: route
    template: "route/{integer}/end"
    output: validate
    description: Numeric route id
    examples:
      - route/3/end
  - name: pair
    template: "{integer}-{integer}"
    examples:
      - 1-2
      - x-y
"""

SINGLE_PATTERN = """\
name: flag
template: "{text}={bool}"
"""


@pytest.fixture
def pattern_library(temp_dir):
    """Create a pattern library directory with sample YAML files."""
    library = temp_dir / 'patterns'
    library.mkdir()
    (library / 'sample.yaml').write_text(SAMPLE_LIBRARY, encoding='utf-8')
    nested = library / 'extra'
    nested.mkdir()
    (nested / 'flag.yml').write_text(SINGLE_PATTERN, encoding='utf-8')
    return library


# ==============================================================================
# UTILITY FIXTURES
# ==============================================================================

@pytest.fixture
def capture_logs():
    """Capture log output for testing."""
    import logging
    from io import StringIO

    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)

    root_logger = logging.getLogger()
    previous_level = root_logger.level
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(handler)

    yield log_capture

    root_logger.removeHandler(handler)
    root_logger.setLevel(previous_level)


@pytest.fixture
def reset_singletons():
    """Reset singleton instances between tests."""
    from typed_string.config_loader import ConfigLoader

    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False


@pytest.fixture
def reset_logging():
    """Restore root logger handlers after tests that configure logging."""
    import logging

    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level

    yield

    for handler in root_logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)
