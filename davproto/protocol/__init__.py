"""
Sans-I/O WebDAV property protocol implementation.

This module provides protocol-level operations without any I/O.
It builds requests and parses responses as pure data transformations.

The protocol layer is organized into:
- types: Core data structures (XmlBody, DAVRequest, MultistatusDocument, ...)
- dates: Parsing of the various date formats servers send
- xml_builders: Pure functions to build XML request bodies
- xml_parsers: Pure functions to parse XML response bodies
- operations: High-level WebDAVProtocol class combining builders and parsers

Example usage:

    from davproto.protocol import WebDAVProtocol

    protocol = WebDAVProtocol(base_url="https://dav.example.com")

    # Build a request (no I/O)
    request = protocol.propfind_request(path="/files/", depth=1)

    # Execute via your preferred I/O (sync, async, or mock)
    response = your_http_client.execute(request)

    # Parse response (no I/O)
    document = protocol.parse_propfind_response(response)
    for resource in document.responses:
        print(resource.href, resource.properties.getlastmodified)
"""

from .types import (
    # Enums
    DAVMethod,
    # Request/Response
    DAVRequest,
    DAVResponse,
    XmlBody,
    # Result types
    MultistatusDocument,
    Prop,
    PropStat,
    Response,
)
from .dates import DATE_FORMATS, DateFormat, parse_date
from .xml_builders import (
    build_propfind_allprop_body,
    build_propfind_body,
    build_proppatch_body,
)
from .xml_parsers import (
    extract_custom_properties,
    parse_multistatus,
)
from .operations import WebDAVProtocol

__all__ = [
    # Enums
    "DAVMethod",
    # Request/Response
    "DAVRequest",
    "DAVResponse",
    "XmlBody",
    # Result types
    "MultistatusDocument",
    "Prop",
    "PropStat",
    "Response",
    # Dates
    "DATE_FORMATS",
    "DateFormat",
    "parse_date",
    # XML Builders
    "build_propfind_allprop_body",
    "build_propfind_body",
    "build_proppatch_body",
    # XML Parsers
    "extract_custom_properties",
    "parse_multistatus",
    # Protocol
    "WebDAVProtocol",
]
