"""
Custom exception hierarchy for panelmap.

## Exception Hierarchy

```
PanelMapError (base)
├── GeometryError
│   ├── InvalidAngleError
│   ├── NullSurfaceError
│   ├── UnboundSurfaceError
│   ├── ParallelChainError
│   └── SurfaceDimensionError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions inherit from `PanelMapError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

Geometry errors are always unrecoverable: a wrong mapping corrupts every
frame, so they stop the caller instead of drawing garbage.

### Example: Invalid rotation

```python
from panelmap.transformers import RotateTransformer

RotateTransformer(45)
# raises InvalidAngleError: "Rotation angle 45 is not a multiple of 90"
```
"""

from .base import PanelMapError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .geometry import (
    GeometryError,
    InvalidAngleError,
    NullSurfaceError,
    ParallelChainError,
    SurfaceDimensionError,
    UnboundSurfaceError,
)
from .handlers import ErrorContext, format_error_for_display, wrap_pydantic_error

__all__ = [
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Handlers
    "ErrorContext",
    # Geometry
    "GeometryError",
    "InvalidAngleError",
    "NullSurfaceError",
    # Base
    "PanelMapError",
    "ParallelChainError",
    "SurfaceDimensionError",
    "UnboundSurfaceError",
    "format_error_for_display",
    "wrap_pydantic_error",
]
