"""
Markup Matchers
PyHamcrest matchers for asserting on parsed HTML elements, JSX component
elements and live browser elements.
"""

from .comparator.element_matchers import (
    excludes_classes,
    has_attr,
    has_classes,
    has_exact_classes,
    has_node_name,
    has_prop,
    has_to_string_value,
)
from .comparator.focus_matcher import is_focused
from .comparator.prop_error_matchers import (
    throws_prop_error,
    throws_prop_error_combination,
    throws_prop_error_required,
    throws_prop_error_value,
)
from .core.html_parser import HTMLParser
from .core.jsx_parser import JSXElement, JSXParser
from .core.prop_errors import PropError
from .exceptions import InvalidArgumentError

__version__ = '0.1.0'

__all__ = [
    'excludes_classes',
    'has_attr',
    'has_classes',
    'has_exact_classes',
    'has_node_name',
    'has_prop',
    'has_to_string_value',
    'is_focused',
    'throws_prop_error',
    'throws_prop_error_combination',
    'throws_prop_error_required',
    'throws_prop_error_value',
    'HTMLParser',
    'JSXElement',
    'JSXParser',
    'PropError',
    'InvalidArgumentError',
]
