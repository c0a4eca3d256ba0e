"""
Exceptions Module
Errors raised when a matcher is built with arguments it can't use.
"""

from typing import Any

class InvalidArgumentError(ValueError):
    """An argument value that the receiving function can't work with."""

    def __init__(self, value: Any, message: str, name: str):
        self.value = value
        self.name = name
        self.message = message
        super().__init__(f"Invalid argument ({name}): {message}: {value!r}")
