"""Unit tests for the exception hierarchy and handlers."""

import logging

import pytest
from pydantic import BaseModel, ValidationError

from panelmap.exceptions import (
    ConfigFileInvalidError,
    ConfigValidationError,
    ErrorContext,
    GeometryError,
    InvalidAngleError,
    NullSurfaceError,
    PanelMapError,
    ParallelChainError,
    UnboundSurfaceError,
    format_error_for_display,
    wrap_pydantic_error,
)


class StrictModel(BaseModel):
    rows: int
    cols: int


class TestGeometryErrors:
    """Geometry precondition errors."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "error",
        [
            InvalidAngleError(45),
            NullSurfaceError("RotateTransformer"),
            UnboundSurfaceError("RotateSurface", "set_pixel"),
            ParallelChainError(0),
            ParallelChainError(3, 32),
        ],
    )
    def test_unrecoverable_with_hint(self, error):
        """Test that geometry errors are fatal and explain themselves."""
        assert isinstance(error, GeometryError)
        assert isinstance(error, PanelMapError)
        assert error.recoverable is False
        assert error.recovery_hint
        assert "Suggestion:" in error.get_full_message()

    @pytest.mark.unit
    def test_messages(self):
        """Test user and technical messages."""
        error = InvalidAngleError(45)
        assert str(error) == "Rotation angle 45 is not a multiple of 90"
        assert "45" in error.technical_message

        error = UnboundSurfaceError("RotateSurface", "set_pixel")
        assert "set_pixel" in error.technical_message

    @pytest.mark.unit
    def test_parallel_messages(self):
        """Test the two ParallelChainError forms."""
        assert "positive" in ParallelChainError(0).user_message
        assert "height=32" in ParallelChainError(3, 32).user_message


class TestHandlers:
    """Error conversion and display helpers."""

    @pytest.mark.unit
    def test_format_custom_error(self):
        """Test formatting a PanelMapError."""
        message, hint = format_error_for_display(InvalidAngleError(45))
        assert message == "Rotation angle 45 is not a multiple of 90"
        assert "0, 90, 180 or 270" in hint

    @pytest.mark.unit
    def test_format_standard_error(self):
        """Test formatting any other exception."""
        message, hint = format_error_for_display(ValueError("boom"))
        assert message == "ValueError: boom"
        assert hint is None

    @pytest.mark.unit
    def test_wrap_single_validation_error(self):
        """Test that one failing field becomes ConfigValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            StrictModel.model_validate({"rows": "x", "cols": 1})

        error = wrap_pydantic_error(exc_info.value, "matrix.json")
        assert isinstance(error, ConfigValidationError)
        assert error.field == "rows"
        assert "matrix.json" in error.recovery_hint

    @pytest.mark.unit
    def test_wrap_multiple_validation_errors(self):
        """Test that several failures are combined."""
        with pytest.raises(ValidationError) as exc_info:
            StrictModel.model_validate({})

        error = wrap_pydantic_error(exc_info.value, "matrix.json")
        assert isinstance(error, ConfigValidationError)
        assert error.field == "multiple fields"
        assert "2 validation errors" in error.user_message

    @pytest.mark.unit
    def test_wrap_json_error(self):
        """Test that syntax errors become ConfigFileInvalidError."""
        with pytest.raises(ValidationError) as exc_info:
            StrictModel.model_validate_json('{"rows": 1,')

        error = wrap_pydantic_error(exc_info.value, "matrix.json")
        assert isinstance(error, ConfigFileInvalidError)
        assert error.file_path == "matrix.json"


class TestErrorContext:
    """ErrorContext logging."""

    @pytest.mark.unit
    def test_logs_and_reraises(self, caplog):
        """Test that errors are logged with their technical message."""
        with caplog.at_level(logging.ERROR):
            with pytest.raises(InvalidAngleError):
                with ErrorContext("bind rotation"):
                    raise InvalidAngleError(45)

        assert "Failed to bind rotation" in caplog.text

    @pytest.mark.unit
    def test_suppress(self):
        """Test that re_raise=False keeps the error on the context."""
        with ErrorContext("bind rotation", re_raise=False) as ctx:
            raise InvalidAngleError(45)

        assert isinstance(ctx.error, InvalidAngleError)
