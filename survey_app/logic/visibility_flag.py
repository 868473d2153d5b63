"""Answer visibility flag.

A single boolean controlling whether participants' answers are publicly
shown. Only a caller presenting the configured admin secret may change it.
"""

from __future__ import annotations

import logging
import threading


logger = logging.getLogger(__name__)


class VisibilityFlag:
    def __init__(self, admin_secret: str, initial: bool = False) -> None:
        self._admin_secret = admin_secret
        self._value = initial
        self._lock = threading.Lock()

    def get(self) -> bool:
        with self._lock:
            return self._value

    def set(self, supplied_secret: str, desired: bool) -> bool:
        """Set the flag when ``supplied_secret`` matches the admin secret.

        Returns True when the value was applied and False when the secret
        did not match; a mismatch leaves the flag unchanged and never raises.
        """
        if supplied_secret != self._admin_secret:
            logger.warning("show_answers_rejected reason=admin_secret_mismatch")
            return False
        with self._lock:
            self._value = desired
        logger.info("show_answers_set value=%s", desired)
        return True


__all__ = ["VisibilityFlag"]
