#!/usr/bin/env python
from typing import Dict
from typing import Optional

## The "S" namespace is where all custom properties end up in PROPPATCH
## bodies.  It's not possible (yet) for the caller to pick another one.
nsmap: Dict[str, str] = {
    "D": "DAV:",
    "S": "SAR:",
}

## PROPFIND bodies are sent with DAV: as the default namespace, some
## servers are picky about seeing exactly <propfind xmlns="DAV:">
default_nsmap: Dict[Optional[str], str] = {None: nsmap["D"]}


def ns(prefix: str, tag: Optional[str] = None) -> str:
    name = "{%s}" % nsmap[prefix]
    if tag is not None:
        name = "%s%s" % (name, tag)
    return name
