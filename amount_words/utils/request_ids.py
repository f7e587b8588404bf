"""
Amount Words Request IDs
Identifiers used to correlate log lines with responses.
"""

import secrets
from datetime import datetime, timezone


def generate_request_id() -> str:
    """
    Generate a unique request ID.

    The UTC timestamp prefix keeps IDs roughly time ordered in logs.
    """
    timestamp = datetime.now(timezone.utc).strftime('%Y%m%d%H%M%S')
    random_part = secrets.token_hex(8)
    return f"req_{timestamp}_{random_part}"
