"""
Conversions between a department forest, markup elements and markup text.

The tree <-> element half and the element <-> text half are independent so
that each can be exercised on its own:

    tree_to_element(departments)  ->  Element
    element_to_string(element)    ->  str
    string_to_element(text)       ->  Element
    element_to_tree(element)      ->  list of Department
"""
import logging
from typing import Iterable, List, Union
from xml.etree import ElementTree
from xml.sax.saxutils import escape

from serialized_lob.exceptions import MalformedMarkupError
from serialized_lob.markup.element import Element, check_xml_text
from serialized_lob.models.department import Department

logger = logging.getLogger(__name__)

DEPARTMENT_LIST_TAG = 'departmentList'
DEPARTMENT_TAG = 'department'
NAME_ATTRIBUTE = 'name'

ATTRIBUTE_ENTITIES = {'"': '&quot;', '\n': '&#10;', '\r': '&#13;', '\t': '&#09;'}


def _department_to_element(department: Department) -> Element:
    """A childless `department` element for `department`."""
    check_xml_text(department.name, 'Department name')
    return Element(tag=DEPARTMENT_TAG, attributes={NAME_ATTRIBUTE: department.name})


def tree_to_element(departments: Iterable[Department]) -> Element:
    """
    Builds a `departmentList` element holding one `department` element per root.

    :raises MalformedMarkupError: if a department name holds a character that
        markup cannot represent.
    """
    root = Element(tag=DEPARTMENT_LIST_TAG)
    # Siblings are pushed in reverse so they are popped, and appended, in order.
    stack = [(root, department) for department in reversed(list(departments))]
    while stack:
        parent, department = stack.pop()
        element = parent.append(_department_to_element(department))
        stack.extend((element, child) for child in reversed(department.children))
    return root


def _element_to_department(element: Element) -> Department:
    """A childless department for a `department` element."""
    if element.tag != DEPARTMENT_TAG:
        raise MalformedMarkupError(
            f"Expected <{DEPARTMENT_TAG}> element, found <{element.tag}>")
    name = element.get(NAME_ATTRIBUTE)
    if name is None:
        raise MalformedMarkupError(
            f"<{DEPARTMENT_TAG}> element is missing the '{NAME_ATTRIBUTE}' attribute")
    return Department(name=name)


def element_to_tree(element: Element) -> List[Department]:
    """
    Rebuilds the department forest from a `departmentList` element.

    :raises MalformedMarkupError: if the element is not a department list, or a
        department element has an unexpected tag or no `name` attribute.
    """
    if element.tag != DEPARTMENT_LIST_TAG:
        raise MalformedMarkupError(
            f"Expected <{DEPARTMENT_LIST_TAG}> root element, found <{element.tag}>")
    departments = []
    stack = [(departments, child) for child in reversed(element.children)]
    while stack:
        siblings, child = stack.pop()
        department = _element_to_department(child)
        siblings.append(department)
        stack.extend((department.children, grandchild) for grandchild in reversed(child.children))
    return departments


def _quote_attribute(value: str) -> str:
    # Whitespace is written as references so parsing does not normalize it away.
    return '"' + escape(value, ATTRIBUTE_ENTITIES) + '"'


def element_to_string(element: Element) -> str:
    """
    Serializes an element tree to markup text.

    :raises MalformedMarkupError: if an attribute value holds a character that
        markup cannot represent.
    """
    parts = []
    # Holds elements still to open and closing tags (plain strings) still to write.
    stack = [element]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue

        attributes = []
        for name, value in item.attributes.items():
            check_xml_text(value, f"Attribute {name!r}")
            attributes.append(f' {name}={_quote_attribute(value)}')

        if not item.children:
            parts.append(f"<{item.tag}{''.join(attributes)} />")
        else:
            parts.append(f"<{item.tag}{''.join(attributes)}>")
            stack.append(f"</{item.tag}>")
            stack.extend(reversed(item.children))
    return ''.join(parts)


def string_to_element(text: Union[str, bytes]) -> Element:
    """
    Parses markup text into an element tree.

    :raises MalformedMarkupError: if the text is not well-formed markup.
    """
    try:
        root = ElementTree.fromstring(text)
    except ElementTree.ParseError as ex:
        logger.debug("Unable to parse markup: %s", ex)
        raise MalformedMarkupError(f"Malformed markup: {ex}") from ex
    return Element.from_etree(root)


def departments_to_string(departments: Iterable[Department]) -> str:
    return element_to_string(tree_to_element(departments))


def string_to_departments(text: Union[str, bytes]) -> List[Department]:
    return element_to_tree(string_to_element(text))
