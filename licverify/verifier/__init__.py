# License verification pipeline
from licverify.verifier.claims import extract_license_info
from licverify.verifier.deployment import verify_cluster_license, verify_for_deployment
from licverify.verifier.key_loader import load_public_key
from licverify.verifier.keyset import DEFAULT_ALGORITHM, VerificationKeySet
from licverify.verifier.license_verifier import LicenseVerifier

__all__ = [
    "DEFAULT_ALGORITHM",
    "LicenseVerifier",
    "VerificationKeySet",
    "extract_license_info",
    "load_public_key",
    "verify_cluster_license",
    "verify_for_deployment",
]
