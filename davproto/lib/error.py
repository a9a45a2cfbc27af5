#!/usr/bin/env python
import logging
from typing import Optional

from davproto import __version__

try:
    import os

    ## Environmental variables prepended with "PYTHON_DAVPROTO" are used for debug purposes
    ## one of DEBUG_PDB, DEBUG, DEVELOPMENT, PRODUCTION
    debugmode = os.environ["PYTHON_DAVPROTO_DEBUGMODE"]
except KeyError:
    if "dev" in __version__:
        debugmode = "DEVELOPMENT"
    else:
        debugmode = "PRODUCTION"

log = logging.getLogger("davproto")
if debugmode.startswith("DEBUG"):
    log.setLevel(logging.DEBUG)
else:
    log.setLevel(logging.WARNING)


def weirdness(*reasons):
    from davproto.lib.debug import xmlstring

    reason = " : ".join([xmlstring(x) for x in reasons])
    log.warning(f"Deviation from expectations found: {reason}")
    if debugmode == "DEBUG_PDB":
        log.error(f"Dropping into debugger due to {reason}")
        import pdb

        pdb.set_trace()


class DAVError(Exception):
    url: Optional[str] = None
    reason: str = "no reason"

    def __init__(self, url: Optional[str] = None, reason: Optional[str] = None) -> None:
        if url:
            self.url = url
        if reason:
            self.reason = reason

    def __str__(self) -> str:
        return "%s at '%s', reason %s" % (
            self.__class__.__name__,
            self.url,
            self.reason,
        )


class PropfindError(DAVError):
    pass


class ProppatchError(DAVError):
    """
    Raised when a PROPPATCH body can't be built from the given
    properties (i.e. a property name that isn't a valid XML name), or
    when the server answers a PROPPATCH with an unexpected status.
    """

    pass


class EncodingError(DAVError):
    """
    A request body could not be encoded as UTF-8 XML.  This should not
    happen for normal text, but lone surrogates and control characters
    will end up here.
    """

    pass


class ResponseError(DAVError):
    pass


class MalformedResponseError(ResponseError):
    """
    The response body is not well-formed XML, or it does not look like
    a DAV:multistatus document.  The underlying exception is available
    as __cause__.
    """

    pass
