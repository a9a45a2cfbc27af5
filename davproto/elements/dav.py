#!/usr/bin/env python
from typing import ClassVar

from .base import BaseElement
from .base import ValuedBaseElement
from davproto.lib.namespace import default_nsmap
from davproto.lib.namespace import nsmap as propertyupdate_nsmap
from davproto.lib.namespace import ns


# Operations
class Propfind(BaseElement):
    tag: ClassVar[str] = ns("D", "propfind")
    nsmap = default_nsmap


class PropertyUpdate(BaseElement):
    tag: ClassVar[str] = ns("D", "propertyupdate")
    nsmap = propertyupdate_nsmap


class Allprop(BaseElement):
    tag: ClassVar[str] = ns("D", "allprop")


class Set(BaseElement):
    tag: ClassVar[str] = ns("D", "set")


class Remove(BaseElement):
    tag: ClassVar[str] = ns("D", "remove")


class Prop(BaseElement):
    tag: ClassVar[str] = ns("D", "prop")


# Response structure
class MultiStatus(BaseElement):
    tag: ClassVar[str] = ns("D", "multistatus")


class Response(BaseElement):
    tag: ClassVar[str] = ns("D", "response")


class Href(BaseElement):
    tag: ClassVar[str] = ns("D", "href")


class PropStat(BaseElement):
    tag: ClassVar[str] = ns("D", "propstat")


class Status(BaseElement):
    tag: ClassVar[str] = ns("D", "status")


class ResponseDescription(ValuedBaseElement):
    tag: ClassVar[str] = ns("D", "responsedescription")


# Properties
class CreationDate(ValuedBaseElement):
    tag: ClassVar[str] = ns("D", "creationdate")


class DisplayName(ValuedBaseElement):
    tag: ClassVar[str] = ns("D", "displayname")


class GetContentLanguage(ValuedBaseElement):
    tag: ClassVar[str] = ns("D", "getcontentlanguage")


class GetContentLength(ValuedBaseElement):
    tag: ClassVar[str] = ns("D", "getcontentlength")


class GetContentType(ValuedBaseElement):
    tag: ClassVar[str] = ns("D", "getcontenttype")


class GetEtag(ValuedBaseElement):
    tag: ClassVar[str] = ns("D", "getetag")


class GetLastModified(ValuedBaseElement):
    tag: ClassVar[str] = ns("D", "getlastmodified")


class ResourceType(BaseElement):
    tag: ClassVar[str] = ns("D", "resourcetype")


class Collection(BaseElement):
    tag: ClassVar[str] = ns("D", "collection")
