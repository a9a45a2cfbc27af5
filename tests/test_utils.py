from unittest import TestCase

from davproto.lib.error import DAVError
from davproto.lib.error import MalformedResponseError
from davproto.lib.python_utilities import to_normal_str


class TestUtils(TestCase):
    def test_to_normal_str(self):
        # fmt: off
        self.assertEqual(to_normal_str('blatti'), 'blatti')
        self.assertEqual(to_normal_str(b'blatti'), 'blatti')
        self.assertEqual(to_normal_str(bytearray(b'blatti')), 'blatti')
        self.assertEqual(to_normal_str(42), '42')
        self.assertEqual(to_normal_str(''), '')
        self.assertEqual(to_normal_str(b''), '')
        self.assertEqual(to_normal_str(None), None)
        # fmt: on


class TestErrors(TestCase):
    def test_str(self):
        self.assertEqual(
            str(DAVError("/files/", "gone")), "DAVError at '/files/', reason gone"
        )
        self.assertEqual(
            str(MalformedResponseError(reason="invalid XML")),
            "MalformedResponseError at 'None', reason invalid XML",
        )

    def test_defaults(self):
        e = DAVError()
        self.assertIsNone(e.url)
        self.assertEqual(e.reason, "no reason")
