"""
Markup codec between department trees and their text representation
"""

from .element import Element
from .codec import (
    DEPARTMENT_LIST_TAG,
    DEPARTMENT_TAG,
    NAME_ATTRIBUTE,
    tree_to_element,
    element_to_tree,
    element_to_string,
    string_to_element,
    departments_to_string,
    string_to_departments,
)
