"""Geometry precondition errors.

These are programmer or configuration errors, never runtime conditions.
They are raised as soon as the bad geometry is seen so that no frame is
drawn with a silently wrong pixel mapping:

- GeometryError: Base class for geometry errors
- InvalidAngleError: Rotation angle is not a multiple of 90
- NullSurfaceError: A stage was bound to None
- UnboundSurfaceError: A remapper was drawn on before being bound
- ParallelChainError: Parallel chain count does not fit the inner surface
- SurfaceDimensionError: A surface was given a non-positive size
"""

from typing import Optional

from .base import PanelMapError


class GeometryError(PanelMapError):
    """Panel geometry violates a precondition of the pixel mapping."""

    def __init__(self, user_message: str, technical_message: Optional[str] = None,
                 recovery_hint: Optional[str] = None):
        super().__init__(
            user_message=user_message,
            technical_message=technical_message,
            recoverable=False,
            recovery_hint=recovery_hint,
        )


class InvalidAngleError(GeometryError):
    """Rotation angle is not a multiple of 90 degrees."""

    def __init__(self, angle: int):
        super().__init__(
            user_message=f"Rotation angle {angle} is not a multiple of 90",
            technical_message=f"RotateTransformer angle={angle!r}: angle % 90 != 0",
            recovery_hint="Use one of 0, 90, 180 or 270 (negative multiples of 90 are allowed)",
        )
        self.angle = angle


class NullSurfaceError(GeometryError):
    """A transformer was asked to bind to a missing surface."""

    def __init__(self, transformer_name: str):
        super().__init__(
            user_message=f"{transformer_name} cannot be bound to an empty surface",
            technical_message=f"{transformer_name}.bind() called with None",
            recovery_hint="Pass the drawing surface (or the result of a previous bind) to bind()",
        )
        self.transformer_name = transformer_name


class UnboundSurfaceError(GeometryError):
    """A remapping surface was used before any inner surface was bound."""

    def __init__(self, surface_name: str, operation: str):
        super().__init__(
            user_message=f"{surface_name} is not bound to a surface",
            technical_message=f"{surface_name}.{operation}() called before bind()",
            recovery_hint="Draw on the surface returned by the transformer's bind()",
        )
        self.surface_name = surface_name
        self.operation = operation


class ParallelChainError(GeometryError):
    """Parallel chain count is invalid for the inner surface."""

    def __init__(self, parallel: int, height: Optional[int] = None):
        if height is None:
            user_msg = f"Parallel chain count must be positive, got {parallel}"
            technical = f"UArrangementTransformer(parallel={parallel!r})"
            hint = "Use the number of chains wired in parallel (1 or more)"
        else:
            user_msg = (
                f"For parallel={parallel} the height={height} should be "
                f"divisible by {parallel}"
            )
            technical = f"inner height {height} % parallel {parallel} != 0"
            hint = "Check the panel rows and parallel chain settings"

        super().__init__(
            user_message=user_msg,
            technical_message=technical,
            recovery_hint=hint,
        )
        self.parallel = parallel
        self.height = height


class SurfaceDimensionError(GeometryError):
    """Surface dimensions must be positive."""

    def __init__(self, width: int, height: int):
        super().__init__(
            user_message=f"Surface size {width}x{height} is invalid",
            technical_message=f"surface width={width!r}, height={height!r}",
            recovery_hint="Width and height must both be at least 1",
        )
        self.width = width
        self.height = height
