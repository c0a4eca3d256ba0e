"""
Feature Matcher Module
Base for matchers that pull one feature out of an object and hand it to another matcher.
"""

from typing import Any
import logging

from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description
from hamcrest.core.matcher import Matcher
from hamcrest.core.string_description import StringDescription

logger = logging.getLogger(__name__)

class FeatureMatcher(BaseMatcher[Any]):
    """
    Match the feature `feature_value_of` returns against `matcher`.

    Subclasses only implement `feature_value_of`. An exception raised while
    reading the feature counts as a mismatch and is reported as such.
    """

    def __init__(self, feature_description: str, feature_name: str, matcher: Matcher):
        self.feature_description = feature_description
        self.feature_name = feature_name
        self.matcher = matcher

    def feature_value_of(self, item: Any) -> Any:
        raise NotImplementedError('feature_value_of')

    def matcher_for(self, item: Any) -> Matcher:
        """The matcher the feature of item is checked against."""
        return self.matcher

    def _matches(self, item: Any) -> bool:
        try:
            feature = self.feature_value_of(item)
        except Exception as e:
            logger.debug(f"Reading {self.feature_name} from {item!r} raised {e!r}")
            return False
        return self.matcher_for(item).matches(feature)

    def describe_to(self, description: Description) -> None:
        description.append_text(f"{self.feature_description} ").append_description_of(self.matcher)

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        try:
            feature = self.feature_value_of(item)
        except Exception as e:
            mismatch_description.append_text('threw ').append_description_of(e)
            return

        mismatch_description.append_text(f"has {self.feature_name} with value ") \
            .append_description_of(feature)

        inner = StringDescription()
        self.matcher_for(item).describe_mismatch(feature, inner)
        if str(inner):
            mismatch_description.append_text(' which ').append_text(str(inner))
