"""
DOM Inspection Module
Reads node names, classes, attributes and props from parsed HTML elements
(BeautifulSoup tags) and parsed JSX component elements.
"""

from collections.abc import Mapping
from typing import Any, Dict, Optional
import re

from bs4 import Tag

from .jsx_parser import JSXElement

# Props React renders straight onto DOM nodes
DOM_PROP_KEYS = frozenset({
    'accept', 'acceptCharset', 'accessKey', 'action', 'allowFullScreen', 'allowTransparency',
    'alt', 'async', 'autoComplete', 'autoFocus', 'autoPlay', 'cellPadding', 'cellSpacing',
    'charSet', 'checked', 'classID', 'className', 'colSpan', 'cols', 'content',
    'contentEditable', 'contextMenu', 'controls', 'coords', 'crossOrigin', 'data', 'dateTime',
    'defer', 'dir', 'disabled', 'download', 'draggable', 'encType', 'form', 'formAction',
    'formEncType', 'formMethod', 'formNoValidate', 'formTarget', 'frameBorder', 'headers',
    'height', 'hidden', 'high', 'href', 'hrefLang', 'htmlFor', 'httpEquiv', 'icon', 'id',
    'inputMode', 'label', 'lang', 'list', 'loop', 'low', 'manifest', 'marginHeight',
    'marginWidth', 'max', 'maxLength', 'media', 'mediaGroup', 'method', 'min', 'minLength',
    'multiple', 'muted', 'name', 'noValidate', 'open', 'optimum', 'pattern', 'placeholder',
    'poster', 'preload', 'radioGroup', 'readOnly', 'rel', 'required', 'role', 'rowSpan',
    'rows', 'sandbox', 'scope', 'scoped', 'scrolling', 'seamless', 'selected', 'shape',
    'size', 'sizes', 'span', 'spellCheck', 'src', 'srcDoc', 'srcSet', 'start', 'step',
    'style', 'tabIndex', 'target', 'title', 'type', 'useMap', 'value', 'width', 'wmode',
    'wrap',
    'onBlur', 'onChange', 'onClick', 'onContextMenu', 'onCopy', 'onCut', 'onDoubleClick',
    'onDrag', 'onDragEnd', 'onDragEnter', 'onDragExit', 'onDragLeave', 'onDragOver',
    'onDragStart', 'onDrop', 'onFocus', 'onInput', 'onKeyDown', 'onKeyPress', 'onKeyUp',
    'onMouseDown', 'onMouseEnter', 'onMouseLeave', 'onMouseMove', 'onMouseOut',
    'onMouseOver', 'onMouseUp', 'onPaste', 'onScroll', 'onSubmit', 'onTouchCancel',
    'onTouchEnd', 'onTouchMove', 'onTouchStart', 'onWheel',
})

SVG_PROP_KEYS = frozenset({
    'clipPath', 'cx', 'cy', 'd', 'dx', 'dy', 'fill', 'fillOpacity', 'fontFamily', 'fontSize',
    'fx', 'fy', 'gradientTransform', 'gradientUnits', 'markerEnd', 'markerMid', 'markerStart',
    'offset', 'opacity', 'patternContentUnits', 'patternUnits', 'points',
    'preserveAspectRatio', 'r', 'rx', 'ry', 'spreadMethod', 'stopColor', 'stopOpacity',
    'stroke', 'strokeDasharray', 'strokeLinecap', 'strokeOpacity', 'strokeWidth',
    'textAnchor', 'transform', 'version', 'viewBox', 'x1', 'x2', 'x', 'y1', 'y2', 'y',
})

# SVG presentation props whose attribute name is kebab-case
SVG_HYPHENATED_PROP_KEYS = frozenset({
    'clipPath', 'fillOpacity', 'fontFamily', 'fontSize', 'markerEnd', 'markerMid',
    'markerStart', 'stopColor', 'stopOpacity', 'strokeDasharray', 'strokeLinecap',
    'strokeOpacity', 'strokeWidth', 'textAnchor',
})

# Prop names that don't map onto their attribute name by lowercasing
JSX_TO_HTML_ATTRS = {
    'className': 'class',
    'htmlFor': 'for',
    'acceptCharset': 'accept-charset',
    'httpEquiv': 'http-equiv',
}

def is_valid_dom_prop_key(prop_key: Any) -> bool:
    """Whether prop_key can be verified against a DOM-backed component."""
    if not isinstance(prop_key, str):
        return False
    return prop_key in DOM_PROP_KEYS or prop_key in SVG_PROP_KEYS or prop_key.startswith(('data-', 'aria-'))

def prop_key_to_attribute(prop_key: str) -> str:
    """Translate a React prop key to the HTML attribute it renders as."""
    if prop_key in JSX_TO_HTML_ATTRS:
        return JSX_TO_HTML_ATTRS[prop_key]
    if prop_key in SVG_HYPHENATED_PROP_KEYS:
        return re.sub(r'[A-Z]', lambda m: f'-{m.group(0).lower()}', prop_key)
    return prop_key.lower()

def is_element(item: Any) -> bool:
    return isinstance(item, (Tag, JSXElement))

def is_dom_component(item: Any) -> bool:
    """Parsed HTML tags are always DOM-backed; JSX elements are when their tag is lowercase."""
    if isinstance(item, Tag):
        return True
    return isinstance(item, JSXElement) and item.is_dom_component

def node_name(item: Any) -> str:
    if isinstance(item, Tag):
        return item.name
    if isinstance(item, JSXElement):
        return item.tag
    raise TypeError(f"Not an element: {item!r}")

def _attribute_value(value: Any) -> Any:
    # bs4 stores multi-valued attributes (class, rel, ...) as lists
    if isinstance(value, (list, tuple)):
        return ' '.join(value)
    return value

def attributes(item: Any) -> Dict[str, Any]:
    """The element's attribute map, with multi-valued attributes joined by spaces."""
    if isinstance(item, Tag):
        return {key: _attribute_value(value) for key, value in item.attrs.items()}
    if isinstance(item, JSXElement):
        return dict(item.props)
    raise TypeError(f"Not an element: {item!r}")

def get_attribute(item: Any, name: str) -> Optional[Any]:
    """The named attribute of the element, or None when it is absent."""
    if isinstance(item, Tag):
        return _attribute_value(item.get(name))
    if isinstance(item, JSXElement):
        return item.props.get(name)
    raise TypeError(f"Not an element: {item!r}")

def class_name(item: Any) -> str:
    """The element's class attribute as a space-delimited string."""
    if isinstance(item, JSXElement):
        value = item.props.get('className', item.props.get('class'))
    else:
        value = get_attribute(item, 'class')
    return value if isinstance(value, str) else ''

def props_of(item: Any) -> Mapping:
    """
    The map a prop matcher compares against.

    DOM-backed tags expose their attributes, JSX elements their props, and
    any other object its `props` mapping. A mapping is used as-is.
    """
    if isinstance(item, Tag):
        return attributes(item)
    if isinstance(item, JSXElement):
        return item.props
    if isinstance(item, Mapping):
        return item
    props = getattr(item, 'props', None)
    if isinstance(props, Mapping):
        return props
    raise TypeError(f"Cannot read props from {item!r}")
