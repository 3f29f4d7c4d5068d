"""
Cryptographically secure random index source
Uses only the system CSPRNG - no seeded or third-party randomness
"""

import secrets
from typing import Protocol


class SecureRandomSource(Protocol):
    """Anything that can draw a uniform integer in [0, bound)"""

    def randbelow(self, bound: int) -> int:
        ...


class SystemRandomSource:
    """
    Uniform integers backed by the operating system CSPRNG

    secrets.randbelow draws getrandbits(bound.bit_length()) and rejects
    values >= bound, so there is no modulo bias for any bound.
    The underlying os.urandom source is safe to share between threads.
    """

    def randbelow(self, bound: int) -> int:
        if bound < 1:
            raise ValueError(f"bound must be positive, got {bound}")
        return secrets.randbelow(bound)


# Process-wide shared source
system_random = SystemRandomSource()
