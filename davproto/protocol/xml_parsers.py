"""
Pure functions for parsing WebDAV XML responses.

All functions in this module are pure - they take XML in and return
structured data out, with no side effects or I/O.
"""

import logging
from collections.abc import Iterable
from typing import IO, Union

from lxml import etree
from lxml.etree import _Element

from davproto.elements import dav
from davproto.lib import error
from davproto.lib.debug import xmlstring

from .dates import parse_date
from .types import MultistatusDocument, Prop, PropStat, Response

log = logging.getLogger(__name__)

## Text valued DAV properties, mapped to the Prop attribute they end up in
_TEXT_PROPERTIES = {
    dav.DisplayName.tag: "displayname",
    dav.GetContentLanguage.tag: "getcontentlanguage",
    dav.GetContentType.tag: "getcontenttype",
    dav.GetEtag.tag: "getetag",
}
_DATE_PROPERTIES = {
    dav.CreationDate.tag: "creationdate",
    dav.GetLastModified.tag: "getlastmodified",
}


def parse_multistatus(
    stream: Union[IO[bytes], bytes, bytearray],
    huge_tree: bool = False,
) -> MultistatusDocument:
    """
    Parse a 207 Multi-Status response body.

    A new parser is created for every call, so this is safe to use from
    several threads at once.

    Args:
        stream: Raw XML response, as bytes or as a binary file-like object
        huge_tree: Allow parsing very large XML documents

    Returns:
        Structured MultistatusDocument with one Response per resource

    Raises:
        MalformedResponseError: If the body is not well-formed XML or
            doesn't look like a DAV:multistatus document
    """
    parser = etree.XMLParser(
        huge_tree=huge_tree,
        resolve_entities=False,
        no_network=True,
    )
    try:
        if isinstance(stream, (bytes, bytearray)):
            tree = etree.fromstring(bytes(stream), parser)
        else:
            tree = etree.parse(stream, parser).getroot()
    except etree.XMLSyntaxError as e:
        raise error.MalformedResponseError(reason=f"invalid XML: {e}") from e
    except ValueError as e:
        ## lxml raises ValueError rather than XMLSyntaxError for some
        ## inputs, i.e. an empty document
        raise error.MalformedResponseError(reason=str(e)) from e

    if tree is None:
        raise error.MalformedResponseError(reason="empty response body")

    if log.isEnabledFor(logging.DEBUG):
        log.debug("multistatus body: %s", xmlstring(tree))

    if tree.tag != dav.MultiStatus.tag:
        raise error.MalformedResponseError(
            reason=f"expected {dav.MultiStatus.tag} as root element, got {tree.tag}"
        )

    document = MultistatusDocument()
    for elem in _elements(tree):
        if elem.tag == dav.Response.tag:
            document.responses.append(_parse_response_element(elem))
        elif elem.tag == dav.ResponseDescription.tag:
            document.responsedescription = _text(elem)
    return document


def extract_custom_properties(elements: Iterable[_Element]) -> dict[str, str]:
    """
    Flatten arbitrary property elements into a dict.

    The key is the local name of the element, the namespace is thrown
    away.  If two elements share the same local name (even in different
    namespaces), the last one wins.  The value is all text found in the
    element and its descendants, or an empty string if there is none.

    Args:
        elements: Property elements, typically the children of a DAV:prop

    Returns:
        Dict mapping local name to text content
    """
    properties: dict[str, str] = {}
    for elem in elements:
        if not isinstance(elem.tag, str):
            ## comments and processing instructions
            continue
        properties[etree.QName(elem).localname] = _text(elem)
    return properties


# Helper functions


def _elements(parent: _Element) -> list[_Element]:
    return [child for child in parent if isinstance(child.tag, str)]


def _text(elem: _Element) -> str:
    return elem.xpath("string()", smart_strings=False)


def _parse_response_element(response: _Element) -> Response:
    hrefs: list[str] = []
    propstats: list[PropStat] = []
    status: str | None = None
    responsedescription: str | None = None

    for elem in _elements(response):
        if elem.tag == dav.Href.tag:
            hrefs.append(_text(elem).strip())
        elif elem.tag == dav.PropStat.tag:
            propstats.append(_parse_propstat_element(elem))
        elif elem.tag == dav.Status.tag:
            status = _text(elem).strip()
        elif elem.tag == dav.ResponseDescription.tag:
            responsedescription = _text(elem)

    if not hrefs:
        raise error.MalformedResponseError(reason="response without href")
    if not propstats and status is None:
        raise error.MalformedResponseError(
            url=hrefs[0], reason="response without propstat or status"
        )

    return Response(
        href=hrefs[0],
        hrefs=hrefs,
        propstats=propstats,
        status=status,
        responsedescription=responsedescription,
    )


def _parse_propstat_element(propstat: _Element) -> PropStat:
    prop_elem = propstat.find(dav.Prop.tag)
    status_elem = propstat.find(dav.Status.tag)
    if prop_elem is None:
        raise error.MalformedResponseError(reason="propstat without prop")
    if status_elem is None:
        raise error.MalformedResponseError(reason="propstat without status")

    description_elem = propstat.find(dav.ResponseDescription.tag)
    return PropStat(
        status=_text(status_elem).strip(),
        prop=_parse_prop_element(prop_elem),
        responsedescription=(
            _text(description_elem) if description_elem is not None else None
        ),
    )


def _parse_prop_element(prop_elem: _Element) -> Prop:
    prop = Prop()
    custom: list[_Element] = []

    for child in _elements(prop_elem):
        tag = child.tag
        if tag in _TEXT_PROPERTIES:
            setattr(prop, _TEXT_PROPERTIES[tag], _text(child))
        elif tag in _DATE_PROPERTIES:
            setattr(prop, _DATE_PROPERTIES[tag], parse_date(_text(child)))
        elif tag == dav.GetContentLength.tag:
            prop.getcontentlength = _content_length(child)
        elif tag == dav.ResourceType.tag:
            prop.resourcetype = [x.tag for x in _elements(child)]
        else:
            custom.append(child)

    prop.custom = extract_custom_properties(custom)
    return prop


def _content_length(elem: _Element) -> int | None:
    text = _text(elem).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        error.weirdness("getcontentlength is not an integer", elem)
        return None
