# Path: typed_string/tests/unit/test_logger.py
"""
Unit Tests for IPO Logging

Tests layer loggers and file handler setup.
"""

import logging

from typed_string.core.logger import (
    IPOFilter,
    get_input_logger,
    get_output_logger,
    get_process_logger,
    setup_ipo_logging,
)


class TestLayerLoggers:
    """Logger naming per IPO layer."""

    def test_names(self):
        assert get_input_logger('cli').name == 'input.cli'
        assert get_process_logger('matcher.engine').name == 'process.matcher.engine'
        assert get_output_logger('diagnostics').name == 'output.diagnostics'

    def test_filter(self):
        layer_filter = IPOFilter('process')
        record = logging.LogRecord('process.x', logging.INFO, __file__, 1, 'm', None, None)
        other = logging.LogRecord('input.x', logging.INFO, __file__, 1, 'm', None, None)

        assert layer_filter.filter(record)
        assert not layer_filter.filter(other)


class TestSetup:
    """setup_ipo_logging()."""

    def test_file_logging(self, temp_dir, reset_logging):
        log_dir = temp_dir / 'logs'

        setup_ipo_logging(log_dir=log_dir, log_level='DEBUG', console_output=False)
        get_process_logger('test').info('process message')
        get_input_logger('test').info('input message')
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert 'process message' in (log_dir / 'process_activity.log').read_text()
        assert 'process message' not in (log_dir / 'input_activity.log').read_text()
        full = (log_dir / 'full_activity.log').read_text()
        assert 'process message' in full
        assert 'input message' in full

    def test_console_only(self, reset_logging):
        setup_ipo_logging(log_level='WARNING', console_output=True)

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_no_handlers(self, reset_logging):
        setup_ipo_logging(console_output=False)

        assert logging.getLogger().handlers == []
