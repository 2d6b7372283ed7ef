import secrets
import threading
import time


class ResetCodeStore:
    """
    Short-lived password reset codes held in memory.

    Expired codes are swept on every access, and a code can be redeemed
    once only.
    """

    def __init__(self, ttl=15 * 60, clock=time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._codes = {}
        self._lock = threading.Lock()

    def _sweep(self, now):
        expired = [code for code, (_, expires) in self._codes.items() if now > expires]
        for code in expired:
            del self._codes[code]

    def issue(self, username):
        """Generate a fresh 6-digit code for username"""
        with self._lock:
            now = self._clock()
            self._sweep(now)
            code = str(100000 + secrets.randbelow(900000))
            while code in self._codes:
                code = str(100000 + secrets.randbelow(900000))
            self._codes[code] = (username, now + self.ttl)
            return code

    def redeem(self, code):
        """Consume a code; returns its username, or None if unknown or expired"""
        with self._lock:
            self._sweep(self._clock())
            entry = self._codes.pop(code, None)
            return entry[0] if entry else None

    def __len__(self):
        with self._lock:
            self._sweep(self._clock())
            return len(self._codes)
