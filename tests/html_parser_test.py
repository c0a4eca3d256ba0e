import sys
import os
import pytest
import tempfile
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from markup_matchers.core.html_parser import HTMLParser
from markup_matchers.core import dom

def test_parse_element_returns_first_element():
    parser = HTMLParser()
    div = parser.parse_element('<div id="a" class="b c"><span>Hi</span></div><p></p>')
    assert div.name == 'div'
    assert dom.class_name(div) == 'b c'
    assert dom.get_attribute(div, 'id') == 'a'

def test_parse_element_full_document_uses_body():
    parser = HTMLParser()
    main = parser.parse_element('<html><head><title>T</title></head><body><main></main></body></html>')
    assert main.name == 'main'

def test_parse_element_with_comments_and_whitespace():
    parser = HTMLParser()
    span = parser.parse_element('  <!-- comment -->  <span>Hi</span>')
    assert span.name == 'span'

def test_parse_element_no_element():
    with pytest.raises(ValueError):
        HTMLParser().parse_element('just text')

def test_parse_file():
    parser = HTMLParser()
    with tempfile.NamedTemporaryFile('w+', suffix='.html', delete=False) as f:
        f.write('<ul><li class="item">1</li></ul>')
        path = f.name
    soup = parser.parse_file(path)
    os.unlink(path)
    assert soup.find('li')['class'] == ['item']

def test_parse_missing_file():
    with pytest.raises(FileNotFoundError):
        HTMLParser().parse_file('/nonexistent/page.html')

def test_attributes_join_multi_valued():
    a = HTMLParser().parse_element('<a rel="nofollow noopener" href="/x"></a>')
    assert dom.attributes(a) == {'rel': 'nofollow noopener', 'href': '/x'}

def test_dom_prop_keys():
    assert dom.is_valid_dom_prop_key('className')
    assert dom.is_valid_dom_prop_key('viewBox')
    assert dom.is_valid_dom_prop_key('data-anything')
    assert dom.is_valid_dom_prop_key('aria-hidden')
    assert not dom.is_valid_dom_prop_key('customProp')
    assert not dom.is_valid_dom_prop_key(3)

def test_prop_key_to_attribute():
    assert dom.prop_key_to_attribute('className') == 'class'
    assert dom.prop_key_to_attribute('htmlFor') == 'for'
    assert dom.prop_key_to_attribute('httpEquiv') == 'http-equiv'
    assert dom.prop_key_to_attribute('strokeWidth') == 'stroke-width'
    assert dom.prop_key_to_attribute('readOnly') == 'readonly'
    assert dom.prop_key_to_attribute('data-id') == 'data-id'
