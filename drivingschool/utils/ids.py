import secrets
import threading
import time
from datetime import datetime, timezone

_lock = threading.Lock()
_last_id = 0


def new_id(prefix=''):
    """
    Time-derived identifier: milliseconds since the epoch, bumped so that
    ids handed out by this process are strictly increasing, followed by a
    random suffix so that workers sharing a database never collide.
    """
    global _last_id
    with _lock:
        value = max(int(time.time() * 1000), _last_id + 1)
        _last_id = value
    return f'{prefix}{value}{secrets.token_hex(3)}'


def utc_timestamp():
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-06-01T10:00:00.000Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')
