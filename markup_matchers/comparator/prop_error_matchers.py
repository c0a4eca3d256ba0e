"""
Prop Error Matchers Module
Matchers asserting that rendering a component raises a PropError of a given kind.

The error's string form is matched rather than its type, so errors that
were re-wrapped on their way out of the browser still match. Use them with
a callable, typically hamcrest's calling(render).with_args(...).
"""

from typing import Any

from hamcrest import any_of, contains_string, has_string, raises
from hamcrest.core.matcher import Matcher

# What some JS engines report in place of the original error's message
WRAPPED_EXCEPTION_STRING = 'V8 Exception'

def _throws_error_message(expected_message: str) -> Matcher:
    return raises(Exception, matching=any_of(
        has_string(WRAPPED_EXCEPTION_STRING),
        has_string(contains_string(expected_message.strip())),
    ))

def throws_prop_error(prop_name: str, message: str = '') -> Matcher:
    """Match a callable that raises a PropError for prop_name with message."""
    return _throws_error_message(f"PropError: Prop {prop_name}. {message}")

def throws_prop_error_required(prop_name: str, message: str = '') -> Matcher:
    """Match a callable that raises a required PropError for prop_name with message."""
    return _throws_error_message(f"RequiredPropError: Prop {prop_name} is required. {message}")

def throws_prop_error_value(invalid_value: Any, prop_name: str, message: str = '') -> Matcher:
    """Match a callable that raises an invalid value PropError for prop_name set to invalid_value."""
    return _throws_error_message(f"InvalidPropValueError: Prop {prop_name} set to {invalid_value}. {message}")

def throws_prop_error_combination(prop_name: str, prop2_name: str, message: str = '') -> Matcher:
    """Match a callable that raises a PropError for the incompatible props prop_name and prop2_name."""
    return _throws_error_message(f"InvalidPropCombinationError: Prop {prop_name} and prop {prop2_name} "
                                 f"are set to incompatible values. {message}")
