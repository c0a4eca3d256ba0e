"""
Prop Errors Module
Errors a component raises when it is given props it can't render.
"""

from typing import Any, Optional

PROP_ERROR_PREFIX = 'PropError: '
REQUIRED_PREFIX = 'RequiredPropError: '
INVALID_VALUE_PREFIX = 'InvalidPropValueError: '
COMBINATION_PREFIX = 'InvalidPropCombinationError: '

class PropError(Exception):
    """
    Raised when a component's props are missing, invalid, or conflict.

    The string form is what the prop error matchers look for, so it follows
    a fixed template per kind:

        PropError: Prop {prop}. {message}
        RequiredPropError: Prop {prop} is required. {message}
        InvalidPropValueError: Prop {prop} set to {value}. {message}
        InvalidPropCombinationError: Prop {prop} and prop {prop2} are set to incompatible values. {message}
    """

    def __init__(self, prop_name: str, message: str = '', *,
                 prefix: str = PROP_ERROR_PREFIX,
                 prop2_name: Optional[str] = None,
                 invalid_value: Any = None):
        self.prop_name = prop_name
        self.prop2_name = prop2_name
        self.invalid_value = invalid_value
        self.message = message
        self.prefix = prefix
        super().__init__(str(self))

    @classmethod
    def required(cls, prop_name: str, message: str = '') -> 'PropError':
        return cls(prop_name, message, prefix=REQUIRED_PREFIX)

    @classmethod
    def value(cls, invalid_value: Any, prop_name: str, message: str = '') -> 'PropError':
        return cls(prop_name, message, prefix=INVALID_VALUE_PREFIX, invalid_value=invalid_value)

    @classmethod
    def combination(cls, prop_name: str, prop2_name: str, message: str = '') -> 'PropError':
        return cls(prop_name, message, prefix=COMBINATION_PREFIX, prop2_name=prop2_name)

    def __str__(self) -> str:
        if self.prefix == REQUIRED_PREFIX:
            return f"{self.prefix}Prop {self.prop_name} is required. {self.message}"
        if self.prefix == INVALID_VALUE_PREFIX:
            return f"{self.prefix}Prop {self.prop_name} set to {self.invalid_value}. {self.message}"
        if self.prefix == COMBINATION_PREFIX:
            return (f"{self.prefix}Prop {self.prop_name} and prop {self.prop2_name} "
                    f"are set to incompatible values. {self.message}")
        return f"{self.prefix}Prop {self.prop_name}. {self.message}"
