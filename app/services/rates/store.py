from __future__ import annotations

"""In-memory bidirectional rate store.

Every registered rate lives under two ordered keys: (FROM, TO) -> rate and
(TO, FROM) -> 1 / rate. Both entries are written and removed under a single
lock acquisition, so readers never observe one direction without the other.

Codes are upper-cased before they become key components; callers may pass any
case. Nothing survives a restart.
"""
import logging
import math
import threading
from typing import Dict, Optional, Tuple

logger = logging.getLogger("app.rates")

RateKey = Tuple[str, str]


def rate_key(from_currency: str, to_currency: str) -> RateKey:
    return from_currency.upper(), to_currency.upper()


class RateStore:
    """Forward/inverse consistent exchange-rate table.

    A set on a self pair (A, A) writes rate and then 1/rate to the same key; the
    inverse wins. The HTTP layer never issues such writes.
    """

    def __init__(self) -> None:
        self._rates: Dict[RateKey, float] = {}
        self._lock = threading.Lock()

    def get_rate(self, from_currency: str, to_currency: str) -> Optional[float]:
        with self._lock:
            return self._rates.get(rate_key(from_currency, to_currency))

    def set_rate(self, from_currency: str, to_currency: str, rate: float) -> None:
        if not math.isfinite(rate) or rate <= 0:
            raise ValueError("rate must be a positive finite number")
        inverse_rate = 1.0 / rate
        if not math.isfinite(inverse_rate):
            raise ValueError("inverse of rate is not representable")
        forward = rate_key(from_currency, to_currency)
        inverse = rate_key(to_currency, from_currency)
        with self._lock:
            self._rates[forward] = rate
            self._rates[inverse] = inverse_rate
        logger.info("rate set %s/%s=%s", forward[0], forward[1], rate)

    def remove_rate(self, from_currency: str, to_currency: str) -> None:
        forward = rate_key(from_currency, to_currency)
        inverse = rate_key(to_currency, from_currency)
        with self._lock:
            removed = self._rates.pop(forward, None) is not None
            self._rates.pop(inverse, None)
        if removed:
            logger.info("rate removed %s/%s", forward[0], forward[1])

    def convert(
        self, from_currency: str, to_currency: str, amount: float
    ) -> Optional[float]:
        rate = self.get_rate(from_currency, to_currency)
        if rate is None:
            return None
        return amount * rate

    def snapshot(self) -> Dict[RateKey, float]:
        with self._lock:
            return dict(self._rates)

    def __len__(self) -> int:
        with self._lock:
            return len(self._rates)
