"""
Class Matcher Module
Compares an element's space-delimited class names against expected and unwanted classes.
"""

from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, List, Set
import logging

from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description

from ..exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

def _format_set(classes: Iterable[str]) -> str:
    return '{' + ', '.join(sorted(classes)) + '}'

def _format_list(classes: Iterable[str]) -> str:
    return '[' + ', '.join(classes) + ']'

@dataclass
class ClassNameMatchResult:
    matched: bool
    missing: Set[str] = field(default_factory=set)
    unwanted: Set[str] = field(default_factory=set)
    # Kept in the order found, duplicates included
    extraneous: List[str] = field(default_factory=list)

class ClassNameMatcher(BaseMatcher[str]):
    """
    Match a space-delimited class name string.

    Built with `expected` to require classes (optionally with nothing else),
    or with `unexpected` to forbid them. Only one of the two sets is ever
    populated.
    """

    def __init__(self, expected_classes: Iterable[str] = (), unexpected_classes: Iterable[str] = (),
                 allow_extraneous: bool = True):
        self.expected_classes = frozenset(expected_classes)
        self.unexpected_classes = frozenset(unexpected_classes)
        # Whether classes not in expected_classes are allowed
        self.allow_extraneous = allow_extraneous

    @classmethod
    def expected(cls, classes: Any, allow_extraneous: bool = True) -> 'ClassNameMatcher':
        return cls(expected_classes=cls.get_class_iterable(classes), allow_extraneous=allow_extraneous)

    @classmethod
    def unexpected(cls, classes: Any) -> 'ClassNameMatcher':
        return cls(unexpected_classes=cls.get_class_iterable(classes), allow_extraneous=True)

    @staticmethod
    def get_class_iterable(class_names: Any) -> List[str]:
        """
        Split class names into individual tokens.

        Args:
            class_names: A class name string ('a b'), or any iterable of them
                (['a b', 'c'], a generator, dict keys). None entries are skipped.
                Mappings are not treated as collections of class names.

        Returns:
            The tokens in order, duplicates included

        Raises:
            InvalidArgumentError: If class_names is neither
        """
        if isinstance(class_names, str):
            return class_names.split()

        if isinstance(class_names, Iterable) and not isinstance(class_names, (bytes, Mapping)):
            # Materialized once so generators can be checked and then split
            names = list(class_names)
            if all(name is None or isinstance(name, str) for name in names):
                return [token for name in names if name is not None for token in name.split()]

        raise InvalidArgumentError(class_names, 'Must be a list of class names or a class name string',
                                   'class_names')

    def evaluate(self, class_name: str) -> ClassNameMatchResult:
        actual_classes = self.get_class_iterable(class_name)
        actual_set = set(actual_classes)

        missing = set(self.expected_classes - actual_set)
        unwanted = set(self.unexpected_classes & actual_set)

        # Each expected class accounts for one occurrence; repeats are extraneous
        remaining = Counter(self.expected_classes)
        extraneous = []
        for token in actual_classes:
            if remaining[token] > 0:
                remaining[token] -= 1
            else:
                extraneous.append(token)

        if self.allow_extraneous:
            matched = not missing and not unwanted
        else:
            matched = not missing and not extraneous

        logger.debug(f"Classes {actual_classes}: missing={missing} unwanted={unwanted} "
                     f"extraneous={extraneous} matched={matched}")
        return ClassNameMatchResult(matched, missing, unwanted, extraneous)

    def _matches(self, item: str) -> bool:
        return self.evaluate(item).matched

    def describe_to(self, description: Description) -> None:
        parts = []
        if self.allow_extraneous:
            if self.expected_classes:
                parts.append(f"has the classes: {_format_set(self.expected_classes)}")
            if self.unexpected_classes:
                parts.append(f"does not have the classes: {_format_set(self.unexpected_classes)}")
        else:
            parts.append(f"has ONLY the classes: {_format_set(self.expected_classes)}")
        description.append_text(' and '.join(parts))

    def describe_mismatch(self, item: str, mismatch_description: Description) -> None:
        result = self.evaluate(item)

        parts = []
        if self.allow_extraneous:
            if result.unwanted:
                parts.append(f"has unwanted classes: {_format_set(result.unwanted)}")
        elif result.extraneous:
            parts.append(f"has extraneous classes: {_format_list(result.extraneous)}")

        if result.missing:
            parts.append(f"is missing classes: {_format_set(result.missing)}")

        mismatch_description.append_text('; '.join(parts))
