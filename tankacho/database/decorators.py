#!/usr/bin/env python3
"""
decorators.py
--------------------
Shared decorators for store and blob store operations.
"""
from functools import wraps
from datetime import datetime
from typing import Callable

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from tankacho.core.exceptions import PersistenceError
from tankacho.core.logging_manager import safe_logger


def log_store_operation(operation_name: str):
    """
    Decorator to log store operations with timing.

    The decorated method's instance must have a ``logger`` attribute
    (a TankaLogger or None).

    Args:
        operation_name: Name of the operation being logged
    """

    def decorator(function: Callable) -> Callable:
        @wraps(function)
        def wrapper(self, *args, **kwargs):
            start_time = datetime.now()
            logger = safe_logger(getattr(self, "logger", None))
            logger.log_debug(
                f"Starting {operation_name}",
                {"args_count": len(args), "kwargs_keys": list(kwargs.keys())},
            )

            try:
                result = function(self, *args, **kwargs)
            except Exception as e:
                logger.log_error(
                    e,
                    {
                        "operation": operation_name,
                        "duration_seconds": (datetime.now() - start_time).total_seconds(),
                    },
                )
                raise

            logger.log_operation(
                f"{operation_name}_completed",
                {
                    "duration_seconds": (datetime.now() - start_time).total_seconds(),
                    "success": True,
                },
            )
            return result

        return wrapper

    return decorator


def handle_store_errors(function: Callable) -> Callable:
    """
    Decorator translating SQLAlchemy failures into PersistenceError.

    Other exceptions propagate unchanged.
    """

    @wraps(function)
    def wrapper(*args, **kwargs):
        try:
            return function(*args, **kwargs)
        except IntegrityError as e:
            raise PersistenceError(f"Data integrity violation: {e}") from e
        except SQLAlchemyError as e:
            raise PersistenceError(f"Blob store operation failed: {e}") from e

    return wrapper
