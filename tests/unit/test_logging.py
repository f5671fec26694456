"""Unit tests for logging configuration."""

import os
import tempfile
from campus_noc.utils.logging import (
    configure_logging,
    get_logger,
    log_fetch_call,
    log_fetch_result,
)
from loguru import logger
from pathlib import Path
from unittest.mock import patch


class TestLoggingConfiguration:
    """Test logging configuration."""

    def teardown_method(self):
        """Release file sinks before the temp directories are removed."""
        logger.remove()

    def test_configure_logging_default(self):
        """Test default logging configuration."""
        with tempfile.TemporaryDirectory() as temp_dir:
            log_file = Path(temp_dir) / 'test.log'

            configure_logging(str(log_file))
            get_logger('test-id').info('Test message')
            logger.remove()

            assert log_file.exists()
            assert 'Test message' in log_file.read_text()

    def test_configure_logging_with_console(self):
        """Test logging configuration with console output."""
        with tempfile.TemporaryDirectory() as temp_dir:
            log_file = Path(temp_dir) / 'test.log'

            configure_logging(str(log_file), include_console=True)
            get_logger('test-id').info('Test console message')
            logger.remove()

    def test_correlation_id_is_serialized(self):
        """Test that the bound correlation id lands in the JSON record."""
        with tempfile.TemporaryDirectory() as temp_dir:
            log_file = Path(temp_dir) / 'test.log'

            configure_logging(str(log_file))
            get_logger('refresh-123').info('Refresh started')
            logger.remove()

            assert 'refresh-123' in log_file.read_text()

    def test_log_level_filters_debug(self):
        """Test that debug records are dropped at INFO level."""
        with tempfile.TemporaryDirectory() as temp_dir:
            log_file = Path(temp_dir) / 'test.log'

            configure_logging(str(log_file), log_level='INFO')
            log_fetch_call('devices', {'range_days': 7})
            logger.remove()

            assert 'Fetch started' not in log_file.read_text()

    def test_log_fetch_call(self):
        """Test fetch call logging."""
        with tempfile.TemporaryDirectory() as temp_dir:
            log_file = Path(temp_dir) / 'test.log'

            configure_logging(str(log_file), log_level='DEBUG')
            log_fetch_call('alerts', {'range_days': 30}, 'test-correlation')
            logger.remove()

            log_content = log_file.read_text()
            assert 'Fetch started' in log_content
            assert 'alerts' in log_content

    def test_log_fetch_result_success(self):
        """Test successful fetch result logging."""
        with tempfile.TemporaryDirectory() as temp_dir:
            log_file = Path(temp_dir) / 'test.log'

            configure_logging(str(log_file), log_level='DEBUG')
            log_fetch_result('devices', success=True, result=[], correlation_id='test-correlation')
            logger.remove()

            assert 'Fetch completed' in log_file.read_text()

    def test_log_fetch_result_failure(self):
        """Test failed fetch result logging."""
        with tempfile.TemporaryDirectory() as temp_dir:
            log_file = Path(temp_dir) / 'test.log'

            configure_logging(str(log_file))
            log_fetch_result('trends', success=False, error='connection refused')
            logger.remove()

            log_content = log_file.read_text()
            assert 'Fetch failed' in log_content
            assert 'connection refused' in log_content

    def test_debug_env_adds_console_sink(self):
        """Test CAMPUS_NOC_DEBUG enables console output without errors."""
        with tempfile.TemporaryDirectory() as temp_dir:
            log_file = Path(temp_dir) / 'test.log'

            with patch.dict(os.environ, {'CAMPUS_NOC_DEBUG': '1'}):
                configure_logging(str(log_file))
            get_logger().info('Debug console message')
            logger.remove()

            assert 'Debug console message' in log_file.read_text()
