#!/usr/bin/env python
from .base import BaseElement
from davproto.lib.namespace import ns


class CustomProperty(BaseElement):
    """
    An application-defined property.  Unlike the DAV elements the tag
    isn't fixed on the class, it's given per instance and always lives
    in the "S" namespace.
    """

    def __init__(self, name: str, value=None) -> None:
        super(CustomProperty, self).__init__(value=value)
        self.name = name
        self.tag = ns("S", name)

    def __repr__(self) -> str:
        return "CustomProperty(%r, %r)" % (self.name, self.value)
