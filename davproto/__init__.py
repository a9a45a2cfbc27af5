#!/usr/bin/env python
import logging

__version__ = "0.1.0"

from .protocol import (
    MultistatusDocument,
    WebDAVProtocol,
    XmlBody,
    build_propfind_allprop_body,
    build_proppatch_body,
    extract_custom_properties,
    parse_date,
    parse_multistatus,
)

## Silence notification of no default logging handler
log = logging.getLogger("davproto")


class NullHandler(logging.Handler):
    def emit(self, record) -> None:
        pass


log.addHandler(NullHandler())

__all__ = [
    "__version__",
    "MultistatusDocument",
    "WebDAVProtocol",
    "XmlBody",
    "build_propfind_allprop_body",
    "build_proppatch_body",
    "extract_custom_properties",
    "parse_date",
    "parse_multistatus",
]
