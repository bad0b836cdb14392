"""
Custom exceptions for the license verifier.
"""

from __future__ import annotations


class LicenseError(Exception):
    """Base class for every license verification failure."""


class KeyFormatError(LicenseError):
    """Public key blob is not a recognizable PEM encoded key or certificate."""


class KeyTypeError(LicenseError):
    """Decoded key is not an EC key usable with the bound algorithm."""


class VerificationError(LicenseError):
    """Token failed to parse or validate."""

    def __init__(self, message: str) -> None:
        super().__init__(f"failed to verify license: {message}")
        self.reason = message


class MalformedTokenError(VerificationError):
    """Token envelope could not be decoded."""


class SignatureAlgorithmMismatchError(VerificationError):
    """Token header declares a different algorithm than the key set."""

    def __init__(self, expected: str, actual: object) -> None:
        super().__init__(
            f"token algorithm {actual!r} does not match key algorithm {expected!r}"
        )
        self.expected = expected
        self.actual = actual


class InvalidSignatureError(VerificationError):
    """Signature does not verify against the payload and key."""


class LicenseExpiredError(VerificationError):
    """Current time is at or after the expiration claim."""


class LicenseNotYetValidError(VerificationError):
    """Current time is before the not-before or issued-at claim."""


class ClaimPredicateError(VerificationError):
    """A caller supplied claim predicate rejected the token."""


class InvalidClaimError(LicenseError):
    """A custom claim is missing or has the wrong type."""

    def __init__(self, field: str, claim: str = "", detail: str = "") -> None:
        message = f"Invalid {field} in claims"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.field = field
        self.claim = claim or field


class DeploymentMismatchError(LicenseError):
    """License was issued for a different deployment."""

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__("Invalid license - deployment ID doesn't match")
        self.expected = expected
        self.actual = actual
