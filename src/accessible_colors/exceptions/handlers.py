"""
Centralized error handling utilities.

Errors are translated on their way up through the package. The codec and
pydantic raise low-level errors (`InvalidColorError`, `ValidationError`);
the contrast and search functions turn decode failures into `None`, config
loading wraps validation errors into `ConfigurationError` subclasses with
hints, and the CLI shows `user_message` and `recovery_hint` to the user.

## Examples

### Converting Pydantic errors

```python
from pydantic import ValidationError
from accessible_colors.exceptions import wrap_pydantic_error

try:
    config = AppConfig.model_validate_json(json_content)
except ValidationError as e:
    raise wrap_pydantic_error(e, str(path)) from e
```

### Showing an error to the user

```python
user_message, recovery_hint = format_error_for_display(error)
click.echo(f"ERROR: {user_message}", err=True)
```
"""

import logging
from typing import Optional

from .base import AccessibleColorsError
from .config import ConfigFileInvalidError, ConfigValidationError


logger = logging.getLogger(__name__)


def wrap_pydantic_error(error: Exception, file_path: str) -> AccessibleColorsError:
    """
    Convert Pydantic validation errors to accessible-colors exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    # Invalid JSON syntax, format: "Invalid JSON: <actual error> [type=json_invalid, ..."
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg

        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if errors:
            if len(errors) == 1:
                first_error = errors[0]
                field = ".".join(str(loc) for loc in first_error.get('loc', ('unknown',)))
                reason = first_error.get('msg', 'validation failed')
                value = first_error.get('input', None)

                return ConfigValidationError(
                    field=field,
                    value=value,
                    error_msg=reason,
                    file_path=file_path
                )

            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get('loc', ('unknown',)))
                msg = err.get('msg', 'validation failed')
                error_lines.append(f"  - {field}: {msg}")

            combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)

            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=combined_msg,
                file_path=file_path
            )

    logger.debug(f"Falling back to string parsing for error: {error_msg}")
    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=error_msg,
        file_path=file_path
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, AccessibleColorsError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
