"""
Custom exception hierarchy for accessible-colors.

## Exception Hierarchy

```
AccessibleColorsError (base)
├── InvalidColorError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

The public color operations never raise for malformed colors; they return
`None`. `InvalidColorError` is raised by the codec functions and by the CLI
when it validates its arguments.

### Example: Invalid color

```python
from accessible_colors.codec import hex_to_rgb

hex_to_rgb("#12345")

# User sees: "Invalid color '#12345': expected 6 hex digits"
# Recovery hint: "Use the #RRGGBB form, e.g. #1a2b3c ..."
```

See `accessible_colors.exceptions.handlers` for the translation helpers.
"""

from .base import AccessibleColorsError
from .color import InvalidColorError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import format_error_for_display, wrap_pydantic_error

__all__ = [
    # Base
    "AccessibleColorsError",
    # Color
    "InvalidColorError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
]
