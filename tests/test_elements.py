from lxml import etree

from davproto.elements import dav
from davproto.elements.custom import CustomProperty


def test_element():
    propfind = dav.Propfind() + dav.Allprop()
    assert str(propfind).startswith("<?xml")
    assert not "xml" in repr(propfind)
    assert "Propfind" in repr(propfind)
    assert "propfind" in str(propfind)


def test_propfind_uses_default_namespace():
    propfind = dav.Propfind() + dav.Allprop()
    assert etree.tostring(propfind.xmlelement()) == (
        b'<propfind xmlns="DAV:"><allprop/></propfind>'
    )


def test_children_inherit_root_namespaces():
    update = dav.PropertyUpdate() + (
        dav.Set() + (dav.Prop() + CustomProperty("author", "Alice"))
    )
    assert etree.tostring(update.xmlelement()) == (
        b'<D:propertyupdate xmlns:D="DAV:" xmlns:S="SAR:">'
        b"<D:set><D:prop><S:author>Alice</S:author></D:prop></D:set>"
        b"</D:propertyupdate>"
    )


def test_append_list():
    prop = dav.Prop() + [dav.DisplayName(), dav.GetEtag()]
    tags = [x.tag for x in prop.xmlelement()]
    assert tags == ["{DAV:}displayname", "{DAV:}getetag"]


def test_custom_property():
    prop = CustomProperty("author", b"Alice")
    assert prop.tag == "{SAR:}author"
    assert prop.value == "Alice"
    assert repr(prop) == "CustomProperty('author', 'Alice')"
    assert CustomProperty("draft").xmlelement().text is None


def test_tostring():
    body = dav.Propfind().tostring()
    assert body.startswith(b'<?xml version="1.0" encoding="utf-8" ?>\n<propfind')
