"""
License token verification.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any

import jwt

from licverify.common.exceptions import (
    ClaimPredicateError,
    InvalidSignatureError,
    LicenseExpiredError,
    LicenseNotYetValidError,
    MalformedTokenError,
    SignatureAlgorithmMismatchError,
    VerificationError,
)
from licverify.common.models import LicenseInfo, VerifyOptions
from licverify.verifier.claims import extract_license_info
from licverify.verifier.keyset import DEFAULT_ALGORITHM, VerificationKeySet

logger = logging.getLogger(__name__)


def _numeric_date(claims: dict[str, Any], name: str) -> int | float | None:
    value = claims.get(name)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        msg = f"{name} claim must be a numeric date"
        raise MalformedTokenError(msg)
    if isinstance(value, float) and not math.isfinite(value):
        msg = f"{name} claim must be a finite numeric date"
        raise MalformedTokenError(msg)
    return value


def _format_ts(ts: int | float) -> str:
    try:
        return datetime.fromtimestamp(ts, tz=timezone.utc).isoformat()
    except (ValueError, OverflowError, OSError):
        # beyond the datetime range, report the raw numeric date
        return str(ts)


class LicenseVerifier:
    """Verifies license keys issued by the holder of one ECDSA private key.

    The verifier is immutable once built and may be shared between threads.
    """

    def __init__(
        self, pem_bytes: bytes | str, algorithm: str = DEFAULT_ALGORITHM
    ) -> None:
        self.key_set = VerificationKeySet.from_pem(pem_bytes, algorithm)
        self.algorithm = algorithm

    def verify(self, license: str, options: VerifyOptions | None = None) -> LicenseInfo:
        """Verify the license key and return the customer data it carries."""
        options = options or VerifyOptions()
        claims = self._decode(license, options)
        self._validate_times(claims, options)

        view = MappingProxyType(claims)
        for predicate in options.predicates:
            if not predicate(view):
                name = getattr(predicate, "__name__", repr(predicate))
                logger.info("License rejected by claim predicate %s", name)
                msg = f"claim predicate {name} rejected the license"
                raise ClaimPredicateError(msg)

        info = extract_license_info(claims)
        logger.debug(
            "License for account %s verified, expires %s",
            info.account_id,
            info.expires_at.isoformat(),
        )
        return info

    def _decode(self, license: str, options: VerifyOptions) -> dict[str, Any]:
        """Check the envelope and signature, returning the raw claims."""
        try:
            header = jwt.get_unverified_header(license)
        except jwt.DecodeError as err:
            logger.info("License envelope rejected: %s", err)
            raise MalformedTokenError(str(err)) from err

        alg = header.get("alg")
        key = self.key_set.find(alg) if isinstance(alg, str) else None
        if key is None:
            logger.info(
                "License declares algorithm %r, expected %s", alg, self.algorithm
            )
            raise SignatureAlgorithmMismatchError(self.algorithm, alg)

        try:
            claims = jwt.decode(
                license,
                key.key,
                algorithms=[key.algorithm],
                issuer=options.issuer,
                audience=options.audience,
                options={
                    # time claims are checked against the injectable clock below
                    "verify_exp": False,
                    "verify_nbf": False,
                    "verify_iat": False,
                    "verify_aud": options.audience is not None,
                    "verify_iss": options.issuer is not None,
                    "require": ["exp"],
                },
            )
        except jwt.InvalidSignatureError as err:
            logger.info("License signature invalid")
            msg = "signature verification failed"
            raise InvalidSignatureError(msg) from err
        except jwt.InvalidAlgorithmError as err:
            raise SignatureAlgorithmMismatchError(self.algorithm, alg) from err
        except jwt.DecodeError as err:
            logger.info("License payload rejected: %s", err)
            raise MalformedTokenError(str(err)) from err
        except jwt.PyJWTError as err:
            logger.info("License claims rejected: %s", err)
            raise VerificationError(str(err)) from err

        return claims

    def _validate_times(self, claims: dict[str, Any], options: VerifyOptions) -> None:
        now_dt = options.clock() if options.clock else datetime.now(timezone.utc)
        now = now_dt.timestamp()
        leeway = options.leeway

        exp = _numeric_date(claims, "exp")
        if exp is not None and not options.skip_expiry_check and now >= exp + leeway:
            logger.info("License expired at %s", _format_ts(exp))
            msg = f"license expired at {_format_ts(exp)}"
            raise LicenseExpiredError(msg)

        nbf = _numeric_date(claims, "nbf")
        if nbf is not None and now < nbf - leeway:
            logger.info("License not valid before %s", _format_ts(nbf))
            msg = f"license not valid before {_format_ts(nbf)}"
            raise LicenseNotYetValidError(msg)

        iat = _numeric_date(claims, "iat")
        if iat is not None and now < iat - leeway:
            logger.info("License issued in the future at %s", _format_ts(iat))
            msg = f"license issued in the future at {_format_ts(iat)}"
            raise LicenseNotYetValidError(msg)
