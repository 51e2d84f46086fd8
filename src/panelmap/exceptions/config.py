"""Errors raised while loading or validating a matrix config."""

from typing import Any, Optional

from .base import PanelMapError


class ConfigurationError(PanelMapError):
    """Configuration is invalid or cannot be loaded."""
    pass


class ConfigFileInvalidError(ConfigurationError):
    """Config file is not valid JSON."""

    def __init__(self, file_path: str, parse_error: str):
        lowered = parse_error.lower()
        if "trailing comma" in lowered:
            user_msg = "Configuration file has a trailing comma"
            recovery = (
                f"Remove the trailing comma from {file_path}\n"
                "JSON doesn't allow commas after the last item in an object or array"
            )
        else:
            user_msg = "Configuration file has invalid syntax"
            if "expecting" in lowered or "eof" in lowered:
                user_msg = "Configuration file has a syntax error"
            recovery = (
                "Check for unclosed braces, missing quotes and stray commas\n"
                f"  - Edit: {file_path}\n"
                "  - Or recreate it with: panelmap config init --force"
            )

        super().__init__(
            user_message=user_msg,
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery
        )
        self.file_path = file_path
        self.parse_error = parse_error


_FIELD_HINTS = {
    "angle": "Valid angles: 0, 90, 180, 270",
    "parallel": "Parallel chain count must be 1 or more",
    "kind": "Valid kinds: rotate, u_arrangement, large_square_64x64, snake_8x2",
}


class ConfigValidationError(ConfigurationError):
    """A config value (from a file or a --transform option) is invalid."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        """
        Args:
            field: Dotted field name, e.g. "transforms.0.angle"
            value: The rejected value
            error_msg: Why it was rejected
            file_path: Config file the value came from, if any
        """
        recovery = f"Update the '{field}' value in your configuration"
        if file_path:
            recovery += f"\nConfig file: {file_path}"
        for key, hint in _FIELD_HINTS.items():
            if key in field.lower():
                recovery += f"\n{hint}"
                break

        super().__init__(
            user_message=f"Invalid configuration value for '{field}': {error_msg}",
            technical_message=f"Config validation failed for {field}={value!r}: {error_msg}",
            recoverable=True,
            recovery_hint=recovery
        )
        self.field = field
        self.value = value
        self.file_path = file_path
