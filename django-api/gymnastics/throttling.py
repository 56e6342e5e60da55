"""Rate limiting for the signup endpoint."""

import re

from rest_framework.settings import api_settings
from rest_framework.throttling import SimpleRateThrottle

PERIOD_SECONDS = {"s": 1, "m": 60, "h": 3600, "d": 86400}
PERIOD_PATTERN = re.compile(r"^(\d*)([smhd])")


class SignupRateThrottle(SimpleRateThrottle):
    """Limits signup attempts per client address.

    Rates accept a multiplier on the period, e.g. "3/15m" for three
    requests per fifteen minutes.
    """

    scope = "signup"

    def get_rate(self):
        # Read on every request so overridden settings take effect.
        return api_settings.DEFAULT_THROTTLE_RATES.get(self.scope)

    def parse_rate(self, rate):
        if rate is None:
            return (None, None)
        num, period = rate.split("/")
        match = PERIOD_PATTERN.match(period)
        if match is None:
            raise ValueError(f"Invalid throttle period: {period!r}")
        multiplier = int(match.group(1) or 1)
        return (int(num), multiplier * PERIOD_SECONDS[match.group(2)])

    def get_cache_key(self, request, view):
        return self.cache_format % {
            "scope": self.scope,
            "ident": self.get_ident(request),
        }
