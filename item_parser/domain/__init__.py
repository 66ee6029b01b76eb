from .exceptions import (
    ParsingError,
    ParsingConfigurationError,
)

__all__ = [
    "ParsingError",
    "ParsingConfigurationError",
]
