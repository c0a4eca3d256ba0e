"""
JSX Parser Module
A simple parser that turns React/JSX markup into component elements with props.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union, Any
import logging
import re

logger = logging.getLogger(__name__)

TAG_START_PATTERN = re.compile(r'<([\w.]+)')
PROP_NAME_PATTERN = re.compile(r'[\w-]+')
QUOTES = '"\'`'

@dataclass
class JSXElement:
    """A component element: its tag, its props and its children."""
    tag: str
    props: Dict[str, Any] = field(default_factory=dict)
    children: List[Union['JSXElement', Dict[str, str]]] = field(default_factory=list)

    @property
    def is_dom_component(self) -> bool:
        """Lowercase tags are DOM-backed; capitalized tags are composite components."""
        return self.tag[:1].islower()

    def __str__(self) -> str:
        props = ''.join(f' {k}={v!r}' for k, v in self.props.items())
        return f"<{self.tag}{props}>"

def find_unnested(source: str, pos: int, targets: str) -> int:
    """
    Index of the first character in targets at or after pos that sits
    outside quotes and braces, or -1.

    Quoted strings and {expressions} are skipped whole, so the '>' of an
    arrow function inside onClick={() => go()} is never taken for the end
    of a tag.
    """
    depth = 0
    quote = None
    for i in range(pos, len(source)):
        ch = source[i]
        if quote:
            if ch == quote:
                quote = None
        elif depth == 0 and ch in targets:
            return i
        elif ch in QUOTES:
            quote = ch
        elif ch == '{':
            depth += 1
        elif ch == '}':
            depth = max(depth - 1, 0)
    return -1

def matching_brace(source: str, pos: int) -> int:
    """Index of the '}' closing the '{' at pos, or len(source) when it is never closed."""
    end = find_unnested(source, pos + 1, '}')
    return end if end != -1 else len(source)

class JSXParser:
    def parse_jsx_file(self, file_path: Union[str, Path]) -> JSXElement:
        """Parse JSX/TSX file and create component structure."""
        path = Path(file_path)
        logger.info(f"Parsing JSX file: {path}")

        with open(path, 'r', encoding='utf-8') as f:
            return self.parse(f.read())

    def parse(self, source: str) -> JSXElement:
        """Parse the first JSX element in source."""
        for start in TAG_START_PATTERN.finditer(source):
            parsed = self._parse_element_at(source, start.start())
            if parsed:
                element = parsed[0]
                logger.debug(f"Parsed root element {element.tag} with {len(element.children)} children")
                return element

        raise ValueError("No JSX element found")

    def _parse_element_at(self, source: str, pos: int) -> Optional[Tuple[JSXElement, int]]:
        """Parse the element whose '<' is at pos; returns it and the index just past it."""
        start = TAG_START_PATTERN.match(source, pos)
        if not start:
            return None

        tag = start.group(1)
        tag_end = find_unnested(source, start.end(), '>')
        if tag_end == -1:
            return None

        props_str = source[start.end():tag_end].rstrip()
        if props_str.endswith('/'):  # Self-closing tag
            return JSXElement(tag, self._parse_props(props_str[:-1])), tag_end + 1

        closing = self._find_closing_tag(source, tag, tag_end + 1)
        if closing is None:
            return None

        close_start, close_end = closing
        element = JSXElement(tag, self._parse_props(props_str),
                             self._parse_children(source[tag_end + 1:close_start]))
        return element, close_end

    def _find_closing_tag(self, source: str, tag: str, pos: int) -> Optional[Tuple[int, int]]:
        """Span of the </tag> matching an open tag, skipping nested tags of the same name."""
        tag_pattern = re.compile(rf'<(/?){re.escape(tag)}(?=[\s/>])')
        depth = 0
        while True:
            match = tag_pattern.search(source, pos)
            if not match:
                return None

            tag_end = find_unnested(source, match.end(), '>')
            if tag_end == -1:
                return None

            if match.group(1):
                if depth == 0:
                    return match.start(), tag_end + 1
                depth -= 1
            elif not source[match.end():tag_end].rstrip().endswith('/'):
                depth += 1
            pos = tag_end + 1

    def _parse_props(self, props_str: str) -> Dict[str, Any]:
        """Parse JSX props string into a dictionary."""
        props = {}

        pos = 0
        while pos < len(props_str):
            ch = props_str[pos]
            if ch.isspace():
                pos += 1
                continue

            # Spread props
            if ch == '{':
                end = matching_brace(props_str, pos)
                expr = props_str[pos+1:end].strip()
                if expr.startswith('...'):
                    props['__spread'] = expr[3:].strip()
                pos = end + 1
                continue

            name_match = PROP_NAME_PATTERN.match(props_str, pos)
            if not name_match:
                pos += 1
                continue

            name = name_match.group(0)
            pos = name_match.end()
            if pos >= len(props_str) or props_str[pos] != '=':
                # Bare boolean prop, e.g. <input disabled />
                props[name] = True
                continue

            pos += 1
            if pos < len(props_str) and props_str[pos] in '"\'':
                end = props_str.find(props_str[pos], pos + 1)
                if end == -1:
                    end = len(props_str)
                props[name] = props_str[pos+1:end]
            elif pos < len(props_str) and props_str[pos] == '{':
                end = matching_brace(props_str, pos)
                props[name] = props_str[pos+1:end].strip()
            else:
                value_match = PROP_NAME_PATTERN.match(props_str, pos)
                end = value_match.end() - 1 if value_match else pos - 1
                props[name] = value_match.group(0) if value_match else True
            pos = end + 1

        return props

    def _parse_children(self, children_str: str) -> List[Union[JSXElement, Dict[str, str]]]:
        """Parse JSX children string into a list of nodes."""
        children = []

        pos = 0
        while pos < len(children_str):
            # Skip whitespace
            while pos < len(children_str) and children_str[pos].isspace():
                pos += 1

            if pos >= len(children_str):
                break

            # Check for JSX expression
            if children_str[pos] == '{':
                end = matching_brace(children_str, pos)
                expr = children_str[pos+1:end].strip()
                if expr and not (expr.startswith('/*') and expr.endswith('*/')):
                    children.append({'type': 'expression', 'content': expr})
                pos = end + 1
                continue

            # Check for JSX element
            if children_str[pos] == '<':
                parsed = self._parse_element_at(children_str, pos)
                if parsed:
                    child, pos = parsed
                    children.append(child)
                    continue

            # Check for text content
            text_end = pos + 1
            while text_end < len(children_str):
                if children_str[text_end] in '{<':
                    break
                text_end += 1

            text = children_str[pos:text_end].strip()
            if text:
                children.append({'type': 'text', 'content': text})
            pos = text_end

        return children
