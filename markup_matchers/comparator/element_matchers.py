"""
Element Matchers Module
Matchers over parsed HTML elements and JSX component elements.
"""

from typing import Any
import logging

from bs4 import Tag
from hamcrest import equal_to_ignoring_case, has_entry, has_string
from hamcrest.core.description import Description
from hamcrest.core.helpers.wrap_matcher import wrap_matcher
from hamcrest.core.matcher import Matcher

from ..core import dom
from .class_matcher import ClassNameMatcher
from .feature_matcher import FeatureMatcher

logger = logging.getLogger(__name__)

class IsNode(FeatureMatcher):
    def __init__(self, matcher: Matcher):
        super().__init__('Element with node name that is', 'node name', matcher)

    def feature_value_of(self, item: Any) -> str:
        return dom.node_name(item)

class ElementClassNameMatcher(FeatureMatcher):
    def __init__(self, matcher: ClassNameMatcher):
        super().__init__('Element that', 'class name', matcher)

    def feature_value_of(self, item: Any) -> str:
        if not dom.is_element(item):
            raise TypeError(f"Not an element: {item!r}")
        return dom.class_name(item)

class ElementAttributeMatcher(FeatureMatcher):
    def __init__(self, attribute_name: str, matcher: Matcher):
        self.attribute_name = attribute_name
        super().__init__(f'Element with "{attribute_name}" attribute that equals', 'attributes', matcher)

    def feature_value_of(self, item: Any) -> Any:
        return dom.get_attribute(item, self.attribute_name)

class HasPropMatcher(FeatureMatcher):
    """
    Match components whose props contain the pair (prop_key, prop_value).

    Props of DOM-backed components can't be read back once rendered, so the
    element's attributes are matched instead. That only works for keys that
    are known DOM/SVG props or start with "data-"/"aria-"; any other key
    never matches a DOM-backed component.
    """

    def __init__(self, prop_key: Any, prop_value: Any):
        self.prop_key = prop_key
        self.prop_value = prop_value
        super().__init__('component with props that', 'props/attributes map', has_entry(prop_key, prop_value))
        # Parsed HTML tags hold the attribute the prop renders as, e.g. class for className
        self._attribute_matcher = has_entry(
            dom.prop_key_to_attribute(prop_key) if isinstance(prop_key, str) else prop_key, prop_value)

    def _unsupported_reason(self, item: Any) -> str:
        if dom.is_dom_component(item) and not dom.is_valid_dom_prop_key(self.prop_key):
            return (f"Cannot verify whether the `{self.prop_key}` prop is available on a DOM component. "
                    'Only DOM/SVG props or props starting with "data-"/"aria-" are supported.')
        return ''

    def feature_value_of(self, item: Any) -> Any:
        return dom.props_of(item)

    def describe_to(self, description: Description) -> None:
        super().describe_to(description)
        if isinstance(self.prop_key, str):
            attribute = dom.prop_key_to_attribute(self.prop_key)
            if attribute != self.prop_key:
                description.append_text(f' (read from the "{attribute}" attribute on HTML elements)')

    def matcher_for(self, item: Any) -> Matcher:
        if isinstance(item, Tag):
            return self._attribute_matcher
        return self.matcher

    def _matches(self, item: Any) -> bool:
        # None has no props to look up
        if item is None:
            return False

        if self._unsupported_reason(item):
            logger.debug(f"Prop {self.prop_key!r} can't be checked on DOM component {item!r}")
            return False

        return super()._matches(item)

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        if item is None:
            return

        reason = self._unsupported_reason(item)
        if reason:
            mismatch_description.append_text(reason)
            return

        super().describe_mismatch(item, mismatch_description)

def has_classes(classes: Any) -> Matcher:
    """Match an element that has classes."""
    return ElementClassNameMatcher(ClassNameMatcher.expected(classes))

def has_exact_classes(classes: Any) -> Matcher:
    """Match an element that has classes, with no additional or duplicated classes."""
    return ElementClassNameMatcher(ClassNameMatcher.expected(classes, allow_extraneous=False))

def excludes_classes(classes: Any) -> Matcher:
    """Match an element that does not have classes."""
    return ElementClassNameMatcher(ClassNameMatcher.unexpected(classes))

def has_attr(attribute_name: str, value: Any) -> Matcher:
    """Match an element that has attribute_name set to value (a value or a matcher)."""
    return ElementAttributeMatcher(attribute_name, wrap_matcher(value))

def has_node_name(node_name: str) -> Matcher:
    """Match an element with the node name node_name, ignoring case."""
    return IsNode(equal_to_ignoring_case(node_name))

def has_prop(prop_key: Any, prop_value: Any) -> Matcher:
    """
    Match component elements and DOM elements that contain the prop pair (prop_key, prop_value).

    Parsed HTML tags can only be matched on DOM/SVG props and "data-"/"aria-"
    props; any other key fails against them.
    """
    return HasPropMatcher(prop_key, prop_value)

def has_to_string_value(value: Any) -> Matcher:
    """Match an object whose str() matches value."""
    return has_string(value)
