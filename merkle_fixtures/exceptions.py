"""
Exception hierarchy for merkle-fixtures.

All custom exceptions inherit from FixtureError.
"""


class FixtureError(Exception):
    """Base exception for fixture generation errors."""
    pass


class InvalidUintError(FixtureError, ValueError):
    """Raised when an argument cannot be encoded as uint256."""

    def __init__(self, name: str, value: str, reason: str):
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"{name}={value!r} {reason}")


class InvalidAddressError(FixtureError, ValueError):
    """Raised when a member is not a 20-byte hex address."""
    pass


class EncodingError(FixtureError):
    """Raised when a root cannot be ABI-encoded as bytes32."""
    pass
