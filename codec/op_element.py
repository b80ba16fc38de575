# ============================================================================
# OPERATION DEFINITION ELEMENT
# ============================================================================
# STATUS: Core - Build <op> elements for resource configuration
# PURPOSE: Operation definitions with ids derived like operation keys
# EXPORTS: create_op_xml, sanitize_id
# DEPENDENCIES: xml.etree.ElementTree
# ============================================================================
"""
Operation Definition Element

    <op id="db-monitor-10s" interval="10s" name="monitor" timeout="20s"/>

The id is "<prefix>-<task>-<interval_spec>" with characters that are not
valid in XML ids replaced.
"""

import xml.etree.ElementTree as ET
from typing import Optional

from core.contracts import ATTR_ID, ATTR_INTERVAL, ATTR_NAME, ATTR_TIMEOUT, TAG_OP
from core.errors import require


def sanitize_id(value: str) -> str:
    """Replace characters not allowed in XML ids."""
    # TODO: reject or replace the remaining non-NCName characters
    return value.replace(":", ".").replace("#", ".")


def create_op_xml(
    parent: Optional[ET.Element],
    prefix: str,
    task: str,
    interval_spec: str,
    timeout: Optional[str] = None,
) -> ET.Element:
    """
    Create an element for an operation definition.

    Args:
        parent: If not None, the new element is appended to this one
        prefix: Generate the id using this prefix (normally the resource id)
        task: Operation name
        interval_spec: Interval as configured (e.g. "10s", "0")
        timeout: Optional operation timeout

    Returns:
        The new element

    Raises:
        InvalidArgumentError: prefix, task or interval_spec is None
    """
    require(prefix, "prefix", "create_op_xml")
    require(task, "task", "create_op_xml")
    require(interval_spec, "interval_spec", "create_op_xml")

    if parent is None:
        op = ET.Element(TAG_OP)
    else:
        op = ET.SubElement(parent, TAG_OP)

    op.set(ATTR_ID, sanitize_id(f"{prefix}-{task}-{interval_spec}"))
    op.set(ATTR_INTERVAL, interval_spec)
    op.set(ATTR_NAME, task)
    if timeout:
        op.set(ATTR_TIMEOUT, timeout)
    return op


__all__ = ["create_op_xml", "sanitize_id"]
