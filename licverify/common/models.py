"""
Pydantic models for verification options and verified license data.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

ClaimPredicate = Callable[[Mapping[str, Any]], bool]


class LicenseInfo(BaseModel):
    """Customer metadata carried by a verified license."""

    model_config = ConfigDict(frozen=True)

    email: str = ""  # license requestor, from the subject claim
    organization: str
    account_id: int = Field(ge=0)
    deployment_id: str = ""  # older licenses carry no deployment id
    storage_capacity: int  # TB
    plan: str
    expires_at: datetime


class VerifyOptions(BaseModel):
    """Caller supplied knobs applied on top of the standard checks.

    The defaults enforce signature and time validity only.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    skip_expiry_check: bool = False
    leeway: int = Field(default=0, ge=0)  # seconds of tolerated clock skew
    issuer: str | None = None
    audience: str | None = None
    clock: Callable[[], datetime] | None = None
    predicates: tuple[ClaimPredicate, ...] = ()
