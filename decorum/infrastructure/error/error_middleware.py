"""Error handling middleware for command handlers."""

import functools
import json
import sys
from typing import Any, Callable, Optional

from decorum.infrastructure.error.context import ExceptionContext
from decorum.infrastructure.error.exception_handler import ExceptionHandler, get_exception_handler


class ErrorMiddleware:
    """Middleware for consistent error handling."""

    def __init__(self, error_handler: Optional[ExceptionHandler] = None):
        self._error_handler = error_handler or get_exception_handler()

    def wrap_handler(self, handler_func: Callable) -> Callable:
        """
        Wrap a handler function so errors come back as error dictionaries.

        Args:
            handler_func: The handler function to wrap

        Returns:
            Wrapped handler function with error handling
        """

        @functools.wraps(handler_func)
        def wrapped_handler(*args: Any, **kwargs: Any) -> Any:
            try:
                return handler_func(*args, **kwargs)
            except Exception as e:
                context = ExceptionContext(handler_func.__name__, layer="interface")
                return self._error_handler.handle(e, context).to_dict()

        return wrapped_handler

    def wrap_script_handler(self, script_handler: Callable) -> Callable:
        """
        Wrap a script handler so errors print a JSON payload and exit with status 1.

        Args:
            script_handler: The script handler function to wrap

        Returns:
            Wrapped script handler function with error handling
        """

        @functools.wraps(script_handler)
        def wrapped_script_handler(*args: Any, **kwargs: Any) -> Any:
            try:
                return script_handler(*args, **kwargs)
            except Exception as e:
                context = ExceptionContext.for_command(script_handler.__name__, args[0] if args else None)
                error_response = self._error_handler.handle(e, context)
                print(json.dumps(error_response.to_dict(), indent=2, default=str))
                sys.exit(1)

        return wrapped_script_handler


def with_error_handling(error_handler: Optional[ExceptionHandler] = None):
    """
    Decorator for adding error handling to functions.

    Args:
        error_handler: Optional error handler instance

    Returns:
        Decorator function
    """

    def decorator(func: Callable) -> Callable:
        return ErrorMiddleware(error_handler).wrap_handler(func)

    return decorator
