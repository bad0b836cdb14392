# License key verification

from licverify.common.exceptions import (
    ClaimPredicateError,
    DeploymentMismatchError,
    InvalidClaimError,
    InvalidSignatureError,
    KeyFormatError,
    KeyTypeError,
    LicenseError,
    LicenseExpiredError,
    LicenseNotYetValidError,
    MalformedTokenError,
    SignatureAlgorithmMismatchError,
    VerificationError,
)
from licverify.common.models import LicenseInfo, VerifyOptions
from licverify.verifier import (
    LicenseVerifier,
    VerificationKeySet,
    load_public_key,
    verify_cluster_license,
    verify_for_deployment,
)

__all__ = [
    "ClaimPredicateError",
    "DeploymentMismatchError",
    "InvalidClaimError",
    "InvalidSignatureError",
    "KeyFormatError",
    "KeyTypeError",
    "LicenseError",
    "LicenseExpiredError",
    "LicenseInfo",
    "LicenseNotYetValidError",
    "LicenseVerifier",
    "MalformedTokenError",
    "SignatureAlgorithmMismatchError",
    "VerificationError",
    "VerificationKeySet",
    "VerifyOptions",
    "load_public_key",
    "verify_cluster_license",
    "verify_for_deployment",
]
