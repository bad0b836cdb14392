"""
PEM public key loading for license verification.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ec import EllipticCurvePublicKey

from licverify.common.exceptions import KeyFormatError, KeyTypeError

logger = logging.getLogger(__name__)

_PEM_BLOCK = re.compile(
    rb"-----BEGIN (?P<label>[A-Z0-9 ]+)-----\s*"
    rb"(?P<body>[A-Za-z0-9+/=\s]*?)\s*"
    rb"-----END (?P=label)-----"
)


def _decode_pem(blob: bytes) -> tuple[str, bytes]:
    """Return the label and DER payload of the first PEM block in ``blob``."""
    match = _PEM_BLOCK.search(blob)
    if match is None:
        msg = "key must be a PEM encoded PKIX public key or X.509 certificate"
        raise KeyFormatError(msg)

    body = b"".join(match.group("body").split())
    try:
        der = base64.b64decode(body, validate=True)
    except binascii.Error as err:
        msg = f"invalid base64 in PEM block: {err}"
        raise KeyFormatError(msg) from err
    return match.group("label").decode("ascii"), der


def load_public_key(blob: bytes | str) -> EllipticCurvePublicKey:
    """Parse a PEM blob holding an EC public key or a certificate for one.

    The DER payload is read as SubjectPublicKeyInfo first and as an X.509
    certificate second, regardless of the PEM label.

    Raises:
        KeyFormatError: no PEM block, or neither structure parses.
        KeyTypeError: the key is not an elliptic curve key.
    """
    if isinstance(blob, str):
        blob = blob.encode()

    label, der = _decode_pem(blob)
    logger.debug("Parsing PEM block %r (%d bytes)", label, len(der))

    try:
        key = serialization.load_der_public_key(der)
    except (ValueError, UnsupportedAlgorithm) as key_err:
        try:
            cert = x509.load_der_x509_certificate(der)
            key = cert.public_key()
        except (ValueError, UnsupportedAlgorithm) as cert_err:
            msg = f"failed to parse public key: {cert_err}"
            raise KeyFormatError(msg) from key_err
        logger.debug(
            "Loaded public key from certificate %s", cert.subject.rfc4514_string()
        )

    if not isinstance(key, EllipticCurvePublicKey):
        msg = f"key is not a valid EC public key (got {type(key).__name__})"
        raise KeyTypeError(msg)

    return key
