import sys
import os
import pytest
import tempfile
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from markup_matchers.core.jsx_parser import JSXElement, JSXParser

def parse_jsx_string(jsx_str):
    parser = JSXParser()
    with tempfile.NamedTemporaryFile('w+', suffix='.jsx', delete=False) as f:
        f.write(jsx_str)
        f.flush()
        path = f.name
    tree = parser.parse_jsx_file(path)
    os.unlink(path)
    return tree

def test_jsx_element_and_prop_extraction():
    tree = parse_jsx_string('<div id="main"><Button color="red">Click</Button></div>')
    assert tree.tag == 'div'
    assert tree.props == {'id': 'main'}
    assert tree.children[0].tag == 'Button'
    assert tree.children[0].props['color'] == 'red'
    assert tree.children[0].children == [{'type': 'text', 'content': 'Click'}]

def test_jsx_found_inside_module_source():
    source = (
        "import React from 'react';\n"
        "export const App = () => (\n"
        "  <Layout title='Home'><Header /></Layout>\n"
        ");\n"
    )
    tree = JSXParser().parse(source)
    assert tree.tag == 'Layout'
    assert tree.props == {'title': 'Home'}
    assert tree.children[0].tag == 'Header'

def test_jsx_expression_and_boolean_props():
    tree = JSXParser().parse('<input value={name} disabled />')
    assert tree.props == {'value': 'name', 'disabled': True}

def test_jsx_spread_props():
    tree = JSXParser().parse('<Button {...rest} size="small" />')
    assert tree.props == {'__spread': 'rest', 'size': 'small'}

def test_jsx_expression_children_and_comments():
    tree = JSXParser().parse('<ul>{/* comment */}{items}<li>One</li></ul>')
    assert tree.children[0] == {'type': 'expression', 'content': 'items'}
    assert tree.children[1].tag == 'li'

def test_jsx_whitespace_variations():
    tree = JSXParser().parse('<div>   <Button>Hi</Button> </div>')
    assert len(tree.children) == 1

def test_jsx_deeply_nested():
    tree = JSXParser().parse('<div><A><B><C>1</C></B></A></div>')
    assert tree.children[0].children[0].children[0].tag == 'C'

def test_jsx_dom_and_composite_components():
    assert JSXElement('div').is_dom_component
    assert JSXElement('svg').is_dom_component
    assert not JSXElement('Button').is_dom_component

def test_jsx_no_element():
    with pytest.raises(ValueError):
        JSXParser().parse('const x = 1;')

def test_jsx_stray_angle_bracket_is_text():
    tree = JSXParser().parse('<p>1 < 2</p>')
    assert [child['content'] for child in tree.children] == ['1', '< 2']

def test_jsx_arrow_function_prop():
    tree = JSXParser().parse('<Button onClick={() => go()} size="large" />')
    assert tree.tag == 'Button'
    assert tree.props == {'onClick': '() => go()', 'size': 'large'}

def test_jsx_arrow_function_prop_with_children():
    tree = JSXParser().parse('<Link onClick={e => e.preventDefault()} href="/x"><Icon /> Home</Link>')
    assert tree.props['onClick'] == 'e => e.preventDefault()'
    assert tree.children[0].tag == 'Icon'
    assert tree.children[1] == {'type': 'text', 'content': 'Home'}

def test_jsx_nested_braces_and_quoted_angle_brackets():
    tree = JSXParser().parse('<Chart style={{width: 10}} label="a > b" />')
    assert tree.props == {'style': '{width: 10}', 'label': 'a > b'}

def test_jsx_same_tag_nested():
    tree = JSXParser().parse('<div><div>inner</div><span /></div>')
    assert tree.children[0].tag == 'div'
    assert tree.children[0].children == [{'type': 'text', 'content': 'inner'}]
    assert tree.children[1].tag == 'span'
