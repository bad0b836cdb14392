from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from licverify.common.models import LicenseInfo, VerifyOptions


def _info(**overrides) -> LicenseInfo:
    fields = {
        "organization": "Acme",
        "account_id": 42,
        "storage_capacity": 100,
        "plan": "enterprise",
        "expires_at": datetime(2027, 1, 1, tzinfo=timezone.utc),
    }
    fields.update(overrides)
    return LicenseInfo(**fields)


def test_license_info_defaults() -> None:
    info = _info()
    assert info.email == ""
    assert info.deployment_id == ""


def test_license_info_is_frozen() -> None:
    info = _info()
    with pytest.raises(ValidationError):
        info.plan = "free"  # type: ignore[misc]


def test_license_info_rejects_negative_account() -> None:
    with pytest.raises(ValidationError):
        _info(account_id=-1)


def test_license_info_json() -> None:
    data = _info(deployment_id="dep-1").model_dump(mode="json")
    assert data["deployment_id"] == "dep-1"
    assert data["expires_at"].startswith("2027-01-01T00:00:00")


def test_verify_options_defaults() -> None:
    options = VerifyOptions()
    assert options.skip_expiry_check is False
    assert options.leeway == 0
    assert options.issuer is None
    assert options.audience is None
    assert options.clock is None
    assert options.predicates == ()


def test_verify_options_validation() -> None:
    with pytest.raises(ValidationError):
        VerifyOptions(leeway=-1)
    with pytest.raises(ValidationError):
        VerifyOptions(predicates=["not callable"])
