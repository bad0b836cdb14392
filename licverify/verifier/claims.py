"""
Typed extraction of license claims from a verified token payload.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from licverify.common.exceptions import InvalidClaimError
from licverify.common.models import LicenseInfo

# license claim name -> field name used in error reports
CLAIM_FIELDS: dict[str, str] = {
    "aid": "accountId",
    "did": "deploymentId",
    "org": "organization",
    "cap": "storageCapacity",
    "plan": "plan",
    "sub": "email",
    "exp": "expiresAt",
}


def _invalid(claim: str, detail: str) -> InvalidClaimError:
    return InvalidClaimError(CLAIM_FIELDS.get(claim, claim), claim, detail)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid numeric claim
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _require_int(claims: Mapping[str, Any], claim: str) -> int:
    if claim not in claims:
        raise _invalid(claim, "missing")
    value = claims[claim]
    if not _is_number(value):
        raise _invalid(claim, f"expected a number, got {type(value).__name__}")
    if isinstance(value, float) and not value.is_integer():
        raise _invalid(claim, "expected a whole number")
    return int(value)


def _require_str(claims: Mapping[str, Any], claim: str) -> str:
    if claim not in claims:
        raise _invalid(claim, "missing")
    value = claims[claim]
    if not isinstance(value, str):
        raise _invalid(claim, f"expected a string, got {type(value).__name__}")
    return value


def _optional_str(claims: Mapping[str, Any], claim: str) -> str:
    if claims.get(claim) is None:
        return ""
    return _require_str(claims, claim)


def extract_license_info(claims: Mapping[str, Any]) -> LicenseInfo:
    """Build a LicenseInfo from the claims of an already verified token.

    Raises:
        InvalidClaimError: naming the first missing or mistyped claim.
    """
    account_id = _require_int(claims, "aid")
    if account_id < 0:
        raise _invalid("aid", "must not be negative")

    # Licenses issued before deployment binding carry no "did".
    # No other claim may be absent.
    deployment_id = _optional_str(claims, "did")

    organization = _require_str(claims, "org")
    storage_capacity = _require_int(claims, "cap")
    plan = _require_str(claims, "plan")

    email = _optional_str(claims, "sub")
    exp = claims.get("exp")
    if not _is_number(exp):
        raise _invalid("exp", "expected a numeric date")
    try:
        expires_at = datetime.fromtimestamp(exp, tz=timezone.utc)
    except (ValueError, OverflowError, OSError) as err:
        raise _invalid("exp", f"not a representable date: {err}") from err

    return LicenseInfo(
        email=email,
        organization=organization,
        account_id=account_id,
        deployment_id=deployment_id,
        storage_capacity=storage_capacity,
        plan=plan,
        expires_at=expires_at,
    )
