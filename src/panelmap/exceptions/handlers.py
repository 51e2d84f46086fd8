"""
Helpers for turning errors into log lines and command-line messages.

| Scenario | Use This |
|----------|----------|
| Rotation angle not a multiple of 90 | `InvalidAngleError` |
| Stage bound to None | `NullSurfaceError` |
| Drawing before bind | `UnboundSurfaceError` |
| Parallel chains don't divide the height | `ParallelChainError` |
| Config file syntax error | `ConfigFileInvalidError` |
| Config value invalid | `ConfigValidationError` |

Loading a config file:

```python
try:
    config = MatrixConfig.model_validate_json(path.read_text())
except ValidationError as e:
    raise wrap_pydantic_error(e, str(path)) from e
```

Geometry errors are never caught inside the mapping core. They reach the
CLI, which prints `user_message` and `recovery_hint` and exits non-zero.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from .base import PanelMapError
from .config import ConfigFileInvalidError, ConfigValidationError


logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Log a failed operation once, with its technical message.

    ```python
    with ErrorContext("walk pixels", logger_instance=logger):
        report = walk_pixels(outer, panel, color)
    ```

    With re_raise=False the exception is kept on `.error` instead.
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
        self.error: Optional[Exception] = None

    def __enter__(self):
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val
        if isinstance(exc_val, PanelMapError):
            self.logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)

        return not self.re_raise


def _field_name(error: dict) -> str:
    return ".".join(str(part) for part in error.get("loc", ())) or "unknown"


def wrap_pydantic_error(error: Exception, file_path: str) -> PanelMapError:
    """
    Convert a pydantic failure into a configuration error.

    Args:
        error: Usually a pydantic ValidationError
        file_path: Config file being loaded, used in the recovery hint

    Returns:
        ConfigFileInvalidError for JSON syntax problems, otherwise
        ConfigValidationError naming the failing field(s)
    """
    if not isinstance(error, ValidationError):
        return ConfigValidationError("unknown", None, str(error), file_path)

    errors = error.errors()
    for err in errors:
        if err.get("type") == "json_invalid":
            parse_error = err.get("msg", "").removeprefix("Invalid JSON:").strip()
            return ConfigFileInvalidError(file_path, parse_error or str(error))

    if len(errors) == 1:
        only = errors[0]
        return ConfigValidationError(
            field=_field_name(only),
            value=only.get("input"),
            error_msg=only.get("msg", "validation failed"),
            file_path=file_path,
        )

    lines = [f"  - {_field_name(err)}: {err.get('msg', 'validation failed')}" for err in errors]
    return ConfigValidationError(
        field="multiple fields",
        value=None,
        error_msg=f"{len(errors)} validation errors:\n" + "\n".join(lines),
        file_path=file_path,
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """Return (message, recovery hint or None) for printing."""
    if isinstance(error, PanelMapError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None
