#!/usr/bin/env python
import sys
from collections.abc import Iterable
from typing import ClassVar
from typing import Dict
from typing import List
from typing import Optional
from typing import Union

from lxml import etree
from lxml.etree import _Element

from davproto.lib.namespace import nsmap as prefixed_nsmap
from davproto.lib.python_utilities import to_normal_str

XML_DECLARATION = b'<?xml version="1.0" encoding="utf-8" ?>'

if sys.version_info < (3, 11):
    from typing_extensions import Self
else:
    from typing import Self


class BaseElement:
    children: Optional[List[Self]] = None
    tag: ClassVar[Optional[str]] = None
    ## Namespace declarations to use when this element is the root of
    ## the serialized tree.  Children always inherit the root's map.
    nsmap: ClassVar[Optional[Dict[Optional[str], str]]] = None
    value: Optional[str] = None

    def __init__(self, value: Union[str, bytes, None] = None) -> None:
        self.children = []
        self.value = to_normal_str(value)

    def __add__(
        self, other: Union["BaseElement", Iterable["BaseElement"]]
    ) -> "BaseElement":
        return self.append(other)

    def __str__(self) -> str:
        utf8 = etree.tostring(
            self.xmlelement(), encoding="utf-8", xml_declaration=True, pretty_print=True
        )
        return str(utf8, "utf-8")

    def __repr__(self) -> str:
        return "%s(%r)" % (self.__class__.__name__, self.value)

    def xmlelement(
        self, nsmap: Optional[Dict[Optional[str], str]] = None
    ) -> _Element:
        if self.tag is None:
            raise ValueError("Unexpected value None for self.tag")

        if nsmap is None:
            nsmap = self.nsmap or prefixed_nsmap

        root = etree.Element(self.tag, nsmap=nsmap)
        if self.value is not None:
            root.text = self.value

        self.xmlchildren(root, nsmap)
        return root

    def xmlchildren(
        self, root: _Element, nsmap: Dict[Optional[str], str]
    ) -> None:
        if self.children is None:
            raise ValueError("Unexpected value None for self.children")

        for c in self.children:
            root.append(c.xmlelement(nsmap))

    def append(self, element: Union[Self, Iterable[Self]]) -> Self:
        if self.children is None:
            raise ValueError("Unexpected value None for self.children")

        if isinstance(element, Iterable):
            self.children.extend(element)
        else:
            self.children.append(element)

        return self

    def tostring(self) -> bytes:
        """Serialize as an UTF-8 encoded document with an XML declaration"""
        body = etree.tostring(self.xmlelement(), encoding="utf-8", xml_declaration=False)
        return XML_DECLARATION + b"\n" + body


class ValuedBaseElement(BaseElement):
    def __init__(self, value: Union[str, bytes, None] = None) -> None:
        super(ValuedBaseElement, self).__init__(value=value)
