# ============================================================================
# CODEC MODULE
# ============================================================================
# STATUS: Codec module initialization
# PURPOSE: Export key builders and parsers
# ============================================================================
"""
Codec Module

String identifiers that correlate operations across the scheduler,
executor and status layers:
- Operation keys:   "<rsc_id>_<op_type>_<interval_ms>"
- Notify keys:      "<rsc_id>_<pre|post>_notify_<op_type>_0"
- Transition keys:  "<action_id>:<transition_id>:<target_rc>:<node>"
- Transition magic: "<op_status>:<op_rc>;<transition key>"
"""

from codec.operation_key import op_key, parse_op_key, is_op_key
from codec.notify_key import notify_key
from codec.transition import (
    transition_key,
    decode_transition_key,
    transition_magic,
    decode_transition_magic,
)
from codec.op_element import create_op_xml

__all__ = [
    "op_key",
    "parse_op_key",
    "is_op_key",
    "notify_key",
    "transition_key",
    "decode_transition_key",
    "transition_magic",
    "decode_transition_magic",
    "create_op_xml",
]
