import sys
import os
from unittest.mock import MagicMock
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from hamcrest import assert_that, is_not
from hamcrest.core.string_description import StringDescription
from playwright.sync_api import ElementHandle, Error, Locator
from markup_matchers import is_focused

def live_element(focused=False, attached=True, active_element=None, cls=ElementHandle):
    element = MagicMock(spec=cls)
    element.evaluate.return_value = {
        'focused': focused,
        'attached': attached,
        'activeElement': active_element,
    }
    return element

def mismatch(item):
    description = StringDescription()
    assert not is_focused().matches(item, description)
    return str(description)

def test_is_focused_is_shared():
    assert is_focused() is is_focused()

def test_focused_element():
    assert_that(live_element(focused=True, active_element='<input>'), is_focused())

def test_focused_locator():
    assert_that(live_element(focused=True, cls=Locator), is_focused())

def test_unfocused_element():
    assert_that(live_element(), is_not(is_focused()))

def test_describe():
    description = StringDescription()
    is_focused().describe_to(description)
    assert str(description) == 'is focused'

def test_mismatch_not_an_element():
    assert mismatch('<input>') == 'is not a valid Element.'
    assert mismatch(None) == 'is not a valid Element.'

def test_mismatch_detached():
    assert mismatch(live_element(attached=False)).startswith(
        'is not attached to the document, and thus cannot be focused.')

def test_mismatch_nothing_focused():
    assert mismatch(live_element()) == 'is not focused; there is no element currently focused'

def test_mismatch_other_element_focused():
    assert mismatch(live_element(active_element='<button id="ok"></button>')) == \
        'is not focused; the currently focused element is \'<button id="ok"></button>\''

def test_unresolvable_locator_is_a_mismatch():
    locator = MagicMock(spec=Locator)
    locator.evaluate.side_effect = Error('strict mode violation: resolved to 2 elements')
    assert_that(locator, is_not(is_focused()))
    assert mismatch(locator).startswith('is not attached to the document')
