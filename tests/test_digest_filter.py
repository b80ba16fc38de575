# ============================================================================
# DIGEST FILTER TESTS
# ============================================================================
# STATUS: Tests - Digest parameter filter and attribute stores
# PURPOSE: Verify which attributes survive digest preparation
# ============================================================================
"""
Digest Filter Tests

Covers:
1. Fixed attribute removal
2. Case-insensitive meta-attribute removal
3. Timeout kept for recurring operations only
4. Repeated filtering
5. Dict, ParameterSet and ElementTree stores

Run with:
    pytest tests/test_digest_filter.py -v
"""

import xml.etree.ElementTree as ET

import pytest

from core.contracts import meta_name
from digest.attributes import ElementAttributeStore, ParameterSet
from digest.filter import DIGEST_ATTR_FILTER, filter_op_for_digest, value_ms


# ============================================================================
# FIXTURES
# ============================================================================

def _params(**overrides):
    """Parameters as recorded for a recurring monitor."""
    params = {
        "id": "db-monitor-10000",
        "crm_feature_set": "3.4.1",
        "op-digest": "f2317cad3d54cec5d7d7aa7d0bf35cf8",
        "on_node": "node1",
        "on_node_uuid": "1",
        "pcmk_external_ip": "192.0.2.10",
        "ip": "10.0.0.1",
        "cidr_netmask": "24",
        "CRM_meta_interval": "10000",
        "CRM_meta_timeout": "20000",
        "CRM_meta_name": "monitor",
        "crm_meta_on_fail": "restart",
    }
    params.update(overrides)
    return params


# ============================================================================
# FILTER
# ============================================================================


class TestFilterOpForDigest:
    def test_recurring_keeps_timeout(self):
        params = _params()
        filter_op_for_digest(params)
        assert params == {
            "ip": "10.0.0.1",
            "cidr_netmask": "24",
            "CRM_meta_timeout": "20000",
        }

    def test_timeout_moves_to_end(self):
        params = _params()
        filter_op_for_digest(params)
        assert list(params)[-1] == "CRM_meta_timeout"

    def test_one_shot_drops_timeout(self):
        params = _params(CRM_meta_interval="0")
        filter_op_for_digest(params)
        assert params == {"ip": "10.0.0.1", "cidr_netmask": "24"}

    def test_missing_interval_is_zero(self):
        params = _params()
        del params["CRM_meta_interval"]
        filter_op_for_digest(params)
        assert "CRM_meta_timeout" not in params

    @pytest.mark.parametrize("interval", ["abc", "", "-5", "4294967296"])
    def test_malformed_interval_is_zero(self, interval):
        params = _params(CRM_meta_interval=interval)
        filter_op_for_digest(params)
        assert "CRM_meta_timeout" not in params

    def test_recurring_without_timeout(self):
        params = _params()
        del params["CRM_meta_timeout"]
        filter_op_for_digest(params)
        assert params == {"ip": "10.0.0.1", "cidr_netmask": "24"}

    def test_fixed_attributes_removed(self):
        params = _params()
        filter_op_for_digest(params)
        for name in DIGEST_ATTR_FILTER:
            assert name not in params

    def test_prefix_match_ignores_case(self):
        """Matches 'CRM_meta' with no separator: crm_metadata goes too."""
        params = {"CRM_META_X": "1", "crm_metadata": "2", "crm_me": "3", "xCRM_meta_y": "4"}
        filter_op_for_digest(params)
        assert params == {"crm_me": "3", "xCRM_meta_y": "4"}

    def test_none_is_ignored(self):
        filter_op_for_digest(None)

    def test_refilter_does_not_duplicate_timeout(self):
        store = ParameterSet(_params())
        filter_op_for_digest(store)
        filter_op_for_digest(store)
        assert store.names().count("CRM_meta_timeout") <= 1
        assert store.get("ip") == "10.0.0.1"
        assert store.get("cidr_netmask") == "24"

    def test_refilter_one_shot_is_noop(self):
        store = ParameterSet(_params(CRM_meta_interval="0"))
        filter_op_for_digest(store)
        before = store.to_dict()
        filter_op_for_digest(store)
        assert store.to_dict() == before


class TestFilterElement:
    def test_element_attributes(self):
        element = ET.Element("parameters", _params())
        filter_op_for_digest(element)
        assert dict(element.attrib) == {
            "ip": "10.0.0.1",
            "cidr_netmask": "24",
            "CRM_meta_timeout": "20000",
        }
        assert list(element.attrib)[-1] == "CRM_meta_timeout"

    def test_element_store(self):
        element = ET.Element("parameters", {"a": "1"})
        store = ElementAttributeStore(element)
        store.set("b", "2")
        store.remove("a")
        store.remove("missing")
        assert element.attrib == {"b": "2"}
        assert "b" in store
        assert len(store) == 1


# ============================================================================
# STORES & HELPERS
# ============================================================================


class TestParameterSet:
    def test_copy_vs_wrap(self):
        source = {"a": "1"}
        ParameterSet(source).remove("a")
        assert source == {"a": "1"}
        ParameterSet.wrap(source).remove("a")
        assert source == {}

    def test_names_snapshot_safe_for_removal(self):
        store = ParameterSet({"a": "1", "b": "2", "c": "3"})
        for name in store.names():
            store.remove(name)
        assert len(store) == 0

    def test_equality(self):
        assert ParameterSet({"a": "1"}) == {"a": "1"}
        assert ParameterSet({"a": "1"}) == ParameterSet({"a": "1"})


class TestValueMs:
    def test_values(self):
        store = ParameterSet({"x": "1500", "y": " 20 ", "z": "1.5"})
        assert value_ms(store, "x") == 1500
        assert value_ms(store, "y") == 20
        assert value_ms(store, "z") is None
        assert value_ms(store, "missing") is None

    def test_meta_name(self):
        assert meta_name("interval") == "CRM_meta_interval"
        assert meta_name("on-fail") == "CRM_meta_on_fail"

    @pytest.mark.parametrize("raw", ["1_000", "١٠", "１０", "1e3", "+", ""])
    def test_non_ascii_or_underscored_rejected(self, raw):
        assert value_ms(ParameterSet({"x": raw}), "x") is None

    def test_long_and_signed_values(self):
        store = ParameterSet({"big": "9" * 5000, "zeros": "0" * 5000 + "7", "plus": "+15"})
        assert value_ms(store, "big") is None
        assert value_ms(store, "zeros") == 7
        assert value_ms(store, "plus") == 15

    def test_non_ascii_interval_drops_timeout(self):
        params = _params(CRM_meta_interval="١٠")
        filter_op_for_digest(params)
        assert "CRM_meta_timeout" not in params
