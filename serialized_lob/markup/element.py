"""
Typed markup element used between the department tree and markup text
"""
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional
from xml.etree import ElementTree

from serialized_lob.exceptions import MalformedMarkupError

# Characters XML 1.0 cannot carry, not even as character references.
INVALID_XML_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]')


def check_xml_text(value: str, what: str = 'value'):
    """
    :raises MalformedMarkupError: if `value` holds a character markup cannot represent.
    """
    match = INVALID_XML_CHARS.search(value)
    if match:
        raise MalformedMarkupError(
            f"{what} {value!r} contains {match.group()!r}, which cannot be written as markup")


@dataclass
class Element:
    """
    A markup element: a tag, its attributes and its ordered child elements.

    Traversals use an explicit stack, so nesting depth is limited by memory
    rather than by the interpreter's recursion limit.
    """

    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List['Element'] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tag={self.tag!r}, attributes={self.attributes!r}, children={len(self.children)})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        stack = [(self, other)]
        while stack:
            left, right = stack.pop()
            if (left.tag != right.tag or left.attributes != right.attributes
                    or len(left.children) != len(right.children)):
                return False
            stack.extend(zip(left.children, right.children))
        return True

    def get(self, attribute: str, default: Optional[str] = None) -> Optional[str]:
        return self.attributes.get(attribute, default)

    def append(self, child: 'Element') -> 'Element':
        self.children.append(child)
        return child

    @classmethod
    def from_etree(cls, node: ElementTree.Element) -> 'Element':
        """Builds an element from an ElementTree element, dropping text content."""
        root = cls(tag=node.tag, attributes=dict(node.attrib))
        stack = [(root, node)]
        while stack:
            element, source = stack.pop()
            for source_child in source:
                child = element.append(cls(tag=source_child.tag, attributes=dict(source_child.attrib)))
                stack.append((child, source_child))
        return root
