"""
WebDAV property operations combining request building and response parsing.

This class provides a high-level interface to PROPFIND and PROPPATCH while
remaining completely I/O-free.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Optional, Union
from urllib.parse import urljoin, urlparse

from davproto.lib import error

from .types import DAVMethod, DAVRequest, DAVResponse, MultistatusDocument, XmlBody
from .xml_builders import build_propfind_allprop_body, build_proppatch_body
from .xml_parsers import parse_multistatus


class WebDAVProtocol:
    """
    Sans-I/O WebDAV property handler.

    Builds requests and parses responses without doing any I/O.
    All HTTP communication (including authentication) is delegated to an
    external I/O implementation.

    Example:
        protocol = WebDAVProtocol(base_url="https://dav.example.com/")

        # Build request
        request = protocol.propfind_request("/files/", depth=1)

        # Execute with your I/O (not shown)
        response = io.execute(request)

        # Parse response
        document = protocol.parse_propfind_response(response)
    """

    def __init__(self, base_url: str = "", huge_tree: bool = False):
        """
        Initialize the protocol handler.

        Args:
            base_url: Base URL for the WebDAV server
            huge_tree: Allow parsing very large XML documents
        """
        self.base_url = base_url.rstrip("/") if base_url else ""
        self.huge_tree = huge_tree

    def _resolve_url(self, path: str) -> str:
        """
        Resolve a path to a full URL.

        Args:
            path: Relative path or absolute URL

        Returns:
            Full URL
        """
        if not path:
            return self.base_url or ""

        # Already a full URL
        parsed = urlparse(path)
        if parsed.scheme:
            return path

        # Relative path - join with base
        if self.base_url:
            return urljoin(self.base_url + "/", path.lstrip("/"))

        return path

    def _request(
        self, method: DAVMethod, path: str, body: XmlBody, **headers: str
    ) -> DAVRequest:
        return DAVRequest(
            method=method,
            url=self._resolve_url(path),
            headers={**body.headers, **headers},
            body=body.content,
        )

    # =========================================================================
    # Request builders
    # =========================================================================

    def propfind_request(
        self,
        path: str,
        depth: Union[int, str] = 1,
    ) -> DAVRequest:
        """
        Build a PROPFIND request for all properties.

        Args:
            path: Resource path or URL
            depth: Depth header value (0, 1, or "infinity")

        Returns:
            DAVRequest ready for execution
        """
        if str(depth) not in ("0", "1", "infinity"):
            raise error.PropfindError(reason=f"invalid depth {depth!r}")
        return self._request(
            DAVMethod.PROPFIND,
            path,
            build_propfind_allprop_body(),
            Depth=str(depth),
        )

    def proppatch_request(
        self,
        path: str,
        set_props: Optional[Mapping[str, Any]] = None,
        remove_props: Optional[Iterable[str]] = None,
    ) -> DAVRequest:
        """
        Build a PROPPATCH request to set and/or remove custom properties.

        Args:
            path: Resource path or URL
            set_props: Properties to set (name -> value)
            remove_props: Names of properties to remove

        Returns:
            DAVRequest ready for execution
        """
        return self._request(
            DAVMethod.PROPPATCH,
            path,
            build_proppatch_body(set_props, remove_props),
        )

    # =========================================================================
    # Response parsers
    # =========================================================================

    def parse_propfind_response(self, response: DAVResponse) -> MultistatusDocument:
        """
        Parse a PROPFIND response.

        A 404 gives an empty document, any other status than 207 is an error.

        Args:
            response: The DAVResponse from the server

        Returns:
            MultistatusDocument with properties for each resource
        """
        if response.status == 404:
            return MultistatusDocument()
        if not response.is_multistatus:
            raise error.PropfindError(
                reason=f"PROPFIND failed with status {response.status}"
            )
        return parse_multistatus(response.body, huge_tree=self.huge_tree)

    def parse_proppatch_response(self, response: DAVResponse) -> MultistatusDocument:
        """
        Parse a PROPPATCH response.

        Some servers answer a successful PROPPATCH with a plain 200 or 204
        and no body, that gives an empty document.

        Args:
            response: The DAVResponse from the server

        Returns:
            MultistatusDocument with the status of each property
        """
        if response.status in (200, 204) and not response.body:
            return MultistatusDocument()
        if not response.is_multistatus:
            raise error.ProppatchError(
                reason=f"PROPPATCH failed with status {response.status}"
            )
        return parse_multistatus(response.body, huge_tree=self.huge_tree)

