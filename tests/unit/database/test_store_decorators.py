"""Tests for store decorators."""
import pytest
from unittest.mock import MagicMock

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from tankacho.core.exceptions import PersistenceError
from tankacho.core.logging_manager import TankaLogger
from tankacho.database.decorators import handle_store_errors, log_store_operation


class _Service:
    def __init__(self, logger=None):
        self.logger = logger

    @log_store_operation("work")
    def work(self, value):
        return value * 2

    @log_store_operation("fail")
    def fail(self):
        raise ValueError("nope")


class TestLogStoreOperation:
    """Tests for log_store_operation."""

    def test_success_logged(self):
        logger = MagicMock(spec=TankaLogger)
        assert _Service(logger).work(2) == 4
        logger.log_debug.assert_called_once()
        assert "Starting work" in logger.log_debug.call_args[0][0]
        name, details = logger.log_operation.call_args[0]
        assert name == "work_completed"
        assert details["success"] is True

    def test_error_logged_and_reraised(self):
        logger = MagicMock(spec=TankaLogger)
        with pytest.raises(ValueError):
            _Service(logger).fail()
        logger.log_error.assert_called_once()
        assert logger.log_error.call_args[0][1]["operation"] == "fail"
        logger.log_operation.assert_not_called()

    def test_works_without_logger(self):
        assert _Service().work(3) == 6

    def test_preserves_name(self):
        assert _Service.work.__name__ == "work"


class TestHandleStoreErrors:
    """Tests for handle_store_errors."""

    def test_integrity_error(self):
        @handle_store_errors
        def op():
            raise IntegrityError("statement", {}, Exception("duplicate"))

        with pytest.raises(PersistenceError) as exc_info:
            op()
        assert "Data integrity violation" in str(exc_info.value)

    def test_sqlalchemy_error(self):
        @handle_store_errors
        def op():
            raise SQLAlchemyError("connection failed")

        with pytest.raises(PersistenceError) as exc_info:
            op()
        assert "Blob store operation failed" in str(exc_info.value)

    def test_other_exceptions_propagate(self):
        @handle_store_errors
        def op():
            raise KeyError("k")

        with pytest.raises(KeyError):
            op()

    def test_passes_result_through(self):
        @handle_store_errors
        def op(x):
            return x + 1

        assert op(1) == 2
