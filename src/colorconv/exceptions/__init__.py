"""
Custom exception hierarchy for colorconv.

## Exception Hierarchy

```
ColorConvError (base)
├── ColorError
│   ├── InvalidFormatError
│   └── OutOfRangeError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions inherit from `ColorConvError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

### Example: Rejected HEX edit

```python
from colorconv.exceptions import InvalidFormatError

try:
    controller.on_hex_edited("#gg11aa")
except InvalidFormatError as e:
    show(e.raw_value, e.get_full_message())   # previous color is still current
```

See `colorconv.exceptions.handlers` for utilities to handle these exceptions systematically.
"""

from .base import ColorConvError
from .color import ColorError, InvalidFormatError, OutOfRangeError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorCollector,
    ErrorContext,
    collect_errors,
    format_error_for_display,
    handle_errors,
    wrap_pydantic_error,
)

__all__ = [
    # Base
    "ColorConvError",
    # Color
    "ColorError",
    "InvalidFormatError",
    "OutOfRangeError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Handlers
    "ErrorCollector",
    "ErrorContext",
    "collect_errors",
    "format_error_for_display",
    "handle_errors",
    "wrap_pydantic_error",
]
