# ============================================================================
# OPERATION ELEMENT TESTS
# ============================================================================
# STATUS: Tests - <op> element builder
# PURPOSE: Verify id derivation and attribute layout
# ============================================================================
"""
Operation Element Tests

Run with:
    pytest tests/test_op_element.py -v
"""

import xml.etree.ElementTree as ET

import pytest

from codec.op_element import create_op_xml, sanitize_id
from core.errors import InvalidArgumentError


class TestCreateOpXml:
    def test_attributes(self):
        op = create_op_xml(None, "db", "monitor", "10s", "20s")
        assert op.tag == "op"
        assert op.attrib == {
            "id": "db-monitor-10s",
            "interval": "10s",
            "name": "monitor",
            "timeout": "20s",
        }

    def test_without_timeout(self):
        op = create_op_xml(None, "db", "start", "0")
        assert "timeout" not in op.attrib

    def test_appended_to_parent(self):
        operations = ET.Element("operations")
        op = create_op_xml(operations, "db", "stop", "0")
        assert list(operations) == [op]

    def test_id_sanitized(self):
        op = create_op_xml(None, "db:0#a", "start", "0")
        assert op.get("id") == "db.0.a-start-0"
        assert op.get("name") == "start"

    @pytest.mark.parametrize("args", [
        (None, "start", "0"),
        ("db", None, "0"),
        ("db", "start", None),
    ])
    def test_missing_argument(self, args):
        with pytest.raises(InvalidArgumentError):
            create_op_xml(None, *args)

    def test_sanitize_id(self):
        assert sanitize_id("a:b#c") == "a.b.c"
        assert sanitize_id("plain") == "plain"
