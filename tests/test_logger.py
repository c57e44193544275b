"""
Tests for the logging setup.
"""

import logging

from invaders.utils import logger as logger_module
from invaders.utils.logger import setup_logging, get_logger, get_log_path, log_run_summary, LogLevel


class TestLogger:

    def teardown_method(self):
        setup_logging(file_output=False, force=True)

    def test_names_are_namespaced(self):
        assert get_logger('main').name == 'invaders.main'
        assert get_logger('invaders.game.simulation').name == 'invaders.game.simulation'

    def test_file_output(self, tmp_path):
        setup_logging(log_dir=str(tmp_path), file_output=True, log_filename='run.log', force=True)
        log_run_summary(score=40, level=2, high_score=90, reason='quit')

        path = get_log_path()
        assert path == tmp_path / 'run.log'
        logger_module._file_handler.flush()
        text = path.read_text()
        assert 'reason=quit | score=40 | level=2 | high_score=90' in text

    def test_console_only_has_no_log_file(self, tmp_path):
        setup_logging(log_dir=str(tmp_path / 'logs'), file_output=False, force=True)
        assert get_log_path() is None
        assert not (tmp_path / 'logs').exists()

    def test_level_applied(self):
        setup_logging(level=LogLevel.WARNING, file_output=False, force=True)
        assert logging.getLogger('invaders').level == logging.WARNING

    def test_setup_without_force_is_noop(self):
        setup_logging(level=LogLevel.ERROR, file_output=False, force=True)
        setup_logging(level=LogLevel.DEBUG, file_output=False)
        assert logging.getLogger('invaders').level == logging.ERROR
