"""
Prefixed identifiers such as ``TO0193A2F4C1D87B2E9A0C4F6E1B3D5A79``.

The body is a UUIDv7 rendered as upper-case hex, so ids carry their creation
millisecond in the leading bits and sort chronologically as plain strings.
"""

from uuid_utils import uuid7


ORDER_ID_PREFIX = 'TO'
EVENT_ID_PREFIX = 'EVENT'
SHOW_ID_PREFIX = 'SHOW'
TICKET_STOCK_ID_PREFIX = 'TSTK'


def generate_prefixed_id(prefix: str) -> str:
    return f'{prefix}{uuid7().hex.upper()}'
