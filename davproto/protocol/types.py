"""
Core protocol types for the sans-I/O WebDAV property layer.

These dataclasses represent request bodies, HTTP requests/responses and
parsed multistatus documents, independent of any I/O implementation.
"""

from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from urllib.parse import unquote, urlparse

from davproto.elements import dav


class DAVMethod(Enum):
    """WebDAV HTTP methods used for property handling."""

    PROPFIND = "PROPFIND"
    PROPPATCH = "PROPPATCH"


@dataclass(frozen=True)
class XmlBody:
    """
    An encoded XML request body, ready to be handed to an HTTP client.

    Attributes:
        content: The encoded document, including the XML declaration
        content_type: MIME type of the body
        charset: Encoding used for content
    """

    content: bytes
    content_type: str = "text/xml"
    charset: str = "utf-8"

    @property
    def headers(self) -> dict[str, str]:
        """Content-Type header matching this body."""
        return {"Content-Type": f"{self.content_type}; charset={self.charset}"}

    @property
    def text(self) -> str:
        return self.content.decode(self.charset)


@dataclass(frozen=True)
class DAVRequest:
    """
    Represents an HTTP request to be made.

    This is a pure data structure with no I/O. It describes what request
    should be made, but does not make it.

    Attributes:
        method: HTTP method (PROPFIND or PROPPATCH)
        url: Full URL for the request
        headers: HTTP headers as dict
        body: Request body as bytes (optional)
    """

    method: DAVMethod
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None


@dataclass(frozen=True)
class DAVResponse:
    """
    Represents an HTTP response received.

    Attributes:
        status: HTTP status code
        headers: HTTP headers as dict
        body: Response body as bytes
    """

    status: int
    headers: dict[str, str]
    body: bytes

    @property
    def ok(self) -> bool:
        """True if status indicates success (2xx)."""
        return 200 <= self.status < 300

    @property
    def is_multistatus(self) -> bool:
        """True if this is a 207 Multi-Status response."""
        return self.status == 207


@dataclass
class Prop:
    """
    The properties found in one DAV:prop element.

    Standard DAV properties get their own typed attributes, anything else
    ends up in ``custom``, keyed by local name (namespaces are dropped, a
    later property with the same local name replaces an earlier one).

    Dates that the server sent in a format we don't understand are None,
    just as if the server hadn't sent them at all.
    """

    creationdate: datetime | None = None
    displayname: str | None = None
    getcontentlanguage: str | None = None
    getcontentlength: int | None = None
    getcontenttype: str | None = None
    getetag: str | None = None
    getlastmodified: datetime | None = None
    resourcetype: list[str] = field(default_factory=list)
    custom: dict[str, str] = field(default_factory=dict)

    @property
    def is_collection(self) -> bool:
        return dav.Collection.tag in self.resourcetype

    def update(self, other: "Prop") -> None:
        """Copy over everything that is set in other"""
        for f in fields(self):
            value = getattr(other, f.name)
            if f.name == "custom":
                self.custom.update(value)
            elif value is not None and value != []:
                setattr(self, f.name, value)


@dataclass
class PropStat:
    """
    One DAV:propstat - a set of properties sharing the same status.

    Attributes:
        status: The raw status line, i.e. "HTTP/1.1 200 OK"
        prop: The properties
        responsedescription: Optional human readable text from the server
    """

    status: str
    prop: Prop = field(default_factory=Prop)
    responsedescription: str | None = None

    @property
    def status_code(self) -> int | None:
        """The numeric code from the status line, None if it can't be found"""
        parts = self.status.split()
        if len(parts) >= 2:
            try:
                return int(parts[1])
            except ValueError:
                pass
        return None

    @property
    def ok(self) -> bool:
        code = self.status_code
        return code is not None and 200 <= code < 300


@dataclass
class Response:
    """
    One DAV:response element, describing a single resource.

    Attributes:
        href: The first href, exactly as the server sent it
        hrefs: All hrefs given in the response, for the rare
               response form listing several resources with one status
        propstats: Property sets grouped by status
        status: Response-level status line (only in the href+status form)
        responsedescription: Optional human readable text from the server
    """

    href: str
    hrefs: list[str] = field(default_factory=list)
    propstats: list[PropStat] = field(default_factory=list)
    status: str | None = None
    responsedescription: str | None = None

    @property
    def path(self) -> str:
        """
        The percent-decoded path of href.  Decoding is lossy (an escaped
        slash turns into a separator), so use href to build URLs.
        """
        return unquote(urlparse(self.href).path)

    @property
    def properties(self) -> Prop:
        """All successfully retrieved properties, merged into one Prop"""
        merged = Prop()
        for propstat in self.propstats:
            if propstat.ok:
                merged.update(propstat.prop)
        return merged

    @property
    def custom_properties(self) -> dict[str, str]:
        return self.properties.custom


@dataclass
class MultistatusDocument:
    """
    Parsed 207 Multi-Status response body.

    Attributes:
        responses: One entry per resource, in document order
        responsedescription: Optional top level description
    """

    responses: list[Response] = field(default_factory=list)
    responsedescription: str | None = None
