"""
Pure functions for building WebDAV XML request bodies.

All functions in this module are pure - they take data in and return XML out,
with no side effects or I/O.
"""
import functools
import logging
from collections.abc import Iterable
from collections.abc import Mapping
from typing import Any
from typing import Dict
from typing import List
from typing import Optional

from lxml import etree

from davproto.elements import dav
from davproto.elements.base import BaseElement
from davproto.elements.custom import CustomProperty
from davproto.lib import error
from davproto.lib.python_utilities import to_normal_str

from .types import XmlBody

log = logging.getLogger(__name__)


@functools.lru_cache(maxsize=None)
def build_propfind_allprop_body() -> XmlBody:
    """
    Build the PROPFIND body asking for all properties.

    The body never changes, so it's built on the first call and the very
    same (immutable) XmlBody is returned afterwards.

    Returns:
        XmlBody with
        <?xml version="1.0" encoding="utf-8" ?>
        <propfind xmlns="DAV:"><allprop/></propfind>
    """
    propfind = dav.Propfind() + dav.Allprop()
    return XmlBody(_tostring(propfind))


def build_propfind_body(
    props: Optional[List[str]] = None,
    allprop: bool = False,
) -> XmlBody:
    """
    Build PROPFIND request body XML.

    Args:
        props: List of DAV property names to retrieve. If None and
               allprop=False, returns a propfind with an empty prop.
        allprop: If True, request all properties.

    Returns:
        XmlBody with the UTF-8 encoded document
    """
    if allprop:
        return build_propfind_allprop_body()

    prop = dav.Prop()
    for prop_name in props or []:
        prop_element = _prop_name_to_element(prop_name)
        if prop_element is None:
            raise error.PropfindError(reason=f"unknown DAV property {prop_name!r}")
        prop += prop_element
    propfind = dav.Propfind() + prop
    return XmlBody(_tostring(propfind))


def build_proppatch_body(
    set_props: Optional[Mapping[str, Any]] = None,
    remove_props: Optional[Iterable[str]] = None,
) -> XmlBody:
    """
    Build PROPPATCH request body for setting and removing custom properties.

    All properties go into the "S" namespace.  A section is emitted
    whenever the corresponding argument is not None - an empty dict
    gives an empty <D:set><D:prop/></D:set>.

    Property values are escaped by lxml, so "a < b" is sent as
    "a &lt; b".  Don't escape them in advance.

    Args:
        set_props: Properties to set (name -> value), in iteration order
        remove_props: Names of properties to remove, in order

    Returns:
        XmlBody with the UTF-8 encoded document

    Raises:
        ProppatchError: If a property name isn't a valid XML name
        EncodingError: If a value can't be represented in UTF-8 XML
    """
    propertyupdate = dav.PropertyUpdate()

    if set_props is not None:
        set_prop = dav.Prop()
        for name, value in set_props.items():
            set_prop += _custom_property(name, value)
        propertyupdate += dav.Set() + set_prop

    if remove_props is not None:
        remove_prop = dav.Prop()
        for name in remove_props:
            remove_prop += _custom_property(name)
        propertyupdate += dav.Remove() + remove_prop

    return XmlBody(_tostring(propertyupdate))


def _custom_property(name: str, value: Optional[Any] = None) -> CustomProperty:
    try:
        etree.QName(None, name)
    except ValueError as e:
        raise error.ProppatchError(reason=f"invalid property name {name!r}") from e
    try:
        return CustomProperty(name, value)
    except UnicodeError as e:
        raise error.EncodingError(reason=f"value of {name!r} is not valid UTF-8") from e


def _tostring(root: BaseElement) -> bytes:
    try:
        return root.tostring()
    except ValueError as e:
        ## lxml refuses control characters and lone surrogates
        log.debug("could not serialize request body", exc_info=True)
        raise error.EncodingError(reason=str(e)) from e


# Property name to element mapping


def _prop_name_to_element(name: str) -> Optional[BaseElement]:
    """
    Convert property name string to element object.

    Args:
        name: Property name (case-insensitive)

    Returns:
        BaseElement instance or None if unknown property
    """
    dav_props: Dict[str, Any] = {
        "creationdate": dav.CreationDate,
        "displayname": dav.DisplayName,
        "getcontentlanguage": dav.GetContentLanguage,
        "getcontentlength": dav.GetContentLength,
        "getcontenttype": dav.GetContentType,
        "getetag": dav.GetEtag,
        "getlastmodified": dav.GetLastModified,
        "resourcetype": dav.ResourceType,
    }

    name_lower = to_normal_str(name).lower().replace("_", "")
    cls = dav_props.get(name_lower)
    if cls is None:
        return None
    return cls()
