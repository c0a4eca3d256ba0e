"""
Focus Matcher Module
Checks whether a live browser element is the document's active element.
"""

from typing import Any, Dict
import logging

from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description
from playwright.sync_api import ElementHandle, Error as PlaywrightError, Locator

logger = logging.getLogger(__name__)

# Evaluated against the element itself, so one round trip covers focus, attachment and the active element
FOCUS_SNAPSHOT_SCRIPT = """
el => {
    const active = document.activeElement;
    return {
        focused: el === active,
        attached: document.documentElement.contains(el),
        activeElement: active && active !== document.body ? active.outerHTML : null,
    };
}
"""

def focus_snapshot(element: Any) -> Dict[str, Any]:
    """
    Focus state of a Playwright element handle or locator.

    A locator that resolves to no element, or to several in strict mode,
    reads as a detached, unfocused element.
    """
    try:
        return element.evaluate(FOCUS_SNAPSHOT_SCRIPT.strip())
    except PlaywrightError as e:
        logger.debug(f"Reading focus state of {element!r} failed: {e}")
        return {'focused': False, 'attached': False, 'activeElement': None}

class IsFocused(BaseMatcher[Any]):
    def _matches(self, item: Any) -> bool:
        if not isinstance(item, (ElementHandle, Locator)):
            return False

        snapshot = focus_snapshot(item)
        logger.debug(f"Focus snapshot: {snapshot}")
        return bool(snapshot['focused'])

    def describe_to(self, description: Description) -> None:
        description.append_text('is focused')

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        if not isinstance(item, (ElementHandle, Locator)):
            mismatch_description.append_text('is not a valid Element.')
            return

        snapshot = focus_snapshot(item)
        if not snapshot['attached']:
            mismatch_description.append_text('is not attached to the document, and thus cannot be focused.') \
                .append_text(' Make sure the element is still part of the page before asserting on focus.')
            return

        mismatch_description.append_text('is not focused; ')
        if snapshot['activeElement'] is None:
            mismatch_description.append_text('there is no element currently focused')
        else:
            mismatch_description.append_text('the currently focused element is ') \
                .append_description_of(snapshot['activeElement'])

_IS_FOCUSED = IsFocused()

def is_focused() -> IsFocused:
    """Match the element that currently has focus (document.activeElement)."""
    return _IS_FOCUSED
