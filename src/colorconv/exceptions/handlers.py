"""
Error handling helpers shared by the CLI and the TUI.

A bad edit travels up through three layers:

1. **Converter** raises `InvalidFormatError` for text it cannot parse
2. **Controller** raises `InvalidFormatError`/`OutOfRangeError`, keeps the
   previous color and notifies observers with `EDIT_REJECTED`
3. **Presentation** shows `user_message` and `recovery_hint`, and logs
   `technical_message`

| Situation | Helper |
|-----------|--------|
| TUI handler that must never raise | `@handle_errors(operation_name="apply edit", re_raise=False)` |
| Several inputs on one command line | `collector = collect_errors("convert"); with collector.try_operation(text): ...` |
| Block that should log how it ended | `with ErrorContext("load configuration"): ...` |
| Config file rejected by pydantic | `raise wrap_pydantic_error(e, path)` |
"""

import logging
from functools import wraps
from typing import Callable, Optional, TypeVar

from .base import ColorConvError
from .config import ConfigFileInvalidError, ConfigValidationError

logger = logging.getLogger(__name__)

T = TypeVar('T')


def _describe(error: BaseException) -> str:
    if isinstance(error, ColorConvError):
        return error.technical_message
    return str(error)


def handle_errors(
    *,
    operation_name: str,
    user_notification: Optional[Callable[[str], None]] = None,
    fallback_value: Optional[T] = None,
    re_raise: bool = True,
    log_level: int = logging.ERROR
) -> Callable:
    """
    Decorator that logs failures of the wrapped call.

    Args:
        operation_name: Used in the log line ("Failed to <operation_name>")
        user_notification: Called with a readable message when the call fails
        fallback_value: Returned instead when re_raise is False
        re_raise: Propagate the exception after logging it
        log_level: Level of the log line

    Only colorconv errors count as expected; anything else is logged with a
    traceback.
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                expected = isinstance(e, ColorConvError)
                if expected:
                    logger.log(log_level, f"Failed to {operation_name}: {e.technical_message}")
                else:
                    logger.log(log_level, f"Unexpected error during {operation_name}: {e}", exc_info=True)

                if user_notification:
                    user_notification(e.get_full_message() if expected else f"Error: {e}")

                if re_raise:
                    raise
                return fallback_value

        return wrapper
    return decorator


class ErrorContext:
    """
    Context manager that logs how a block ended.

    The exception (if any) is kept on `error`, so callers that pass
    re_raise=False can still inspect it afterwards:

        with ErrorContext("read seed color", re_raise=False) as ctx:
            seed = normalize_hex(text)
        if ctx.error:
            seed = DEFAULT_SEED_COLOR
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[BaseException] = None

    def __enter__(self) -> "ErrorContext":
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_val is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val
        self.logger.error(
            f"Failed to {self.operation}: {_describe(exc_val)}",
            exc_info=not isinstance(exc_val, ColorConvError),
        )
        return not self.re_raise


def _field_name(loc) -> str:
    return ".".join(str(part) for part in loc) or "unknown"


def wrap_pydantic_error(error: Exception, file_path: str) -> ColorConvError:
    """
    Turn a pydantic error raised while reading a config file into a
    ConfigurationError.

    JSON syntax problems become ConfigFileInvalidError; everything else is a
    ConfigValidationError naming the field (or "multiple fields").
    """
    from pydantic import ValidationError

    text = str(error)

    # Pydantic words syntax problems as "Invalid JSON: <detail> [type=json_invalid, ..."
    if "json_invalid" in text or "Invalid JSON" in text:
        detail = text
        if "Invalid JSON:" in text:
            detail = text.split("Invalid JSON:", 1)[1].split("[type=", 1)[0].strip()
        return ConfigFileInvalidError(file_path, detail)

    problems = error.errors() if isinstance(error, ValidationError) else []

    if len(problems) == 1:
        (problem,) = problems
        return ConfigValidationError(
            field=_field_name(problem.get('loc', ())),
            value=problem.get('input'),
            error_msg=problem.get('msg', 'validation failed'),
            file_path=file_path
        )

    if problems:
        lines = [
            f"  - {_field_name(p.get('loc', ()))}: {p.get('msg', 'validation failed')}"
            for p in problems
        ]
        return ConfigValidationError(
            field="multiple fields",
            value=None,
            error_msg=f"{len(problems)} validation errors:\n" + "\n".join(lines),
            file_path=file_path
        )

    return ConfigValidationError(field="unknown", value=None, error_msg=text, file_path=file_path)


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """Return (message, hint) for showing any exception to a user."""
    if isinstance(error, ColorConvError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None


def collect_errors(operation: str) -> "ErrorCollector":
    """
    Start collecting errors for a batch, e.g. several colors on one command
    line. Each item runs inside `collector.try_operation(label)`; failures are
    recorded and the loop carries on.
    """
    return ErrorCollector(operation)


class ErrorCollector:
    """Records per-item failures of a batch operation."""

    def __init__(self, operation: str):
        self.operation = operation
        self.errors: list[tuple[str, Exception]] = []
        self.success_count = 0

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def try_operation(self, sub_operation: str) -> "ErrorCollector._Attempt":
        """Context manager for one item; exceptions inside it are recorded, not raised."""
        return self._Attempt(self, sub_operation)

    def get_summary(self) -> str:
        """One header line plus one line per failed item."""
        total = self.error_count + self.success_count
        if not self.has_errors:
            return f"All operations completed successfully ({total} total)"

        lines = [f"Failed {self.error_count} of {total} operations:"]
        for label, error in self.errors:
            message = error.user_message if isinstance(error, ColorConvError) else str(error)
            lines.append(f"  - {label}: {message}")
        return "\n".join(lines)

    class _Attempt:
        def __init__(self, collector: "ErrorCollector", label: str):
            self.collector = collector
            self.label = label

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
            if exc_val is None:
                self.collector.success_count += 1
                return False
            if not isinstance(exc_val, Exception):
                return False

            logger.debug(f"{self.collector.operation}: {self.label} failed: {_describe(exc_val)}")
            self.collector.errors.append((self.label, exc_val))
            return True
