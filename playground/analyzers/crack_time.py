"""
Crack Time Estimator
=====================

Converts entropy into a human-readable brute-force duration.  An attacker
is assumed to find the password after exhausting half the keyspace on
average:

    seconds = 2^H / guesses_per_second / 2

The figures are order-of-magnitude illustrations, not predictions.

Comparisons are carried out on log2(seconds) so that very long passwords,
whose 2^H exceeds the float range, still fall into the unbounded
"Millions of years" bucket.
"""

from __future__ import annotations

import math

_MINUTE = 60
_HOUR = 3_600
_DAY = 86_400
_YEAR = 31_536_000

INSTANT = "Instant"
MILLIONS_OF_YEARS = "Millions of years"

# (upper bound in seconds, unit divisor, label suffix), ascending.
_BUCKETS: tuple[tuple[float, float, str], ...] = (
    (_MINUTE, 1, "seconds"),
    (_HOUR, _MINUTE, "minutes"),
    (_DAY, _HOUR, "hours"),
    (_YEAR, _DAY, "days"),
    (_YEAR * 100, _YEAR, "years"),
    (_YEAR * 1_000_000, _YEAR * 1_000, "thousand years"),
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)


class CrackTimeEstimator:
    """Buckets brute-force time into labels such as ``"3 hours"``.

    Usage::

        estimator = CrackTimeEstimator()
        estimator.estimate(40.0, 1e7)   # '15 hours'
    """

    def seconds_log2(self, entropy_bits: float, guesses_per_second: float) -> float:
        """log2 of the average-case crack time in seconds."""
        return entropy_bits - math.log2(guesses_per_second) - 1

    def bucket_index(self, entropy_bits: float, guesses_per_second: float) -> int:
        """Ordinal of the duration bucket: 0 = Instant ... 7 = Millions of years."""
        log_seconds = self.seconds_log2(entropy_bits, guesses_per_second)
        if log_seconds < 0:
            return 0
        for idx, (upper, _, _) in enumerate(_BUCKETS, start=1):
            if log_seconds < math.log2(upper):
                return idx
        return len(_BUCKETS) + 1

    def estimate(self, entropy_bits: float, guesses_per_second: float) -> str:
        """Human-readable crack time at the given guess rate."""
        idx = self.bucket_index(entropy_bits, guesses_per_second)
        if idx == 0:
            return INSTANT
        if idx > len(_BUCKETS):
            return MILLIONS_OF_YEARS

        _, divisor, unit = _BUCKETS[idx - 1]
        seconds = 2.0 ** self.seconds_log2(entropy_bits, guesses_per_second)
        return f"{round_half_up(seconds / divisor)} {unit}"
