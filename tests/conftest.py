from __future__ import annotations

import time
from typing import Any, Callable

import jwt
import pytest
from cryptography.hazmat.primitives.asymmetric import ec

from keyutils import public_pem


@pytest.fixture(scope="session")
def signing_key() -> ec.EllipticCurvePrivateKey:
    return ec.generate_private_key(ec.SECP384R1())


@pytest.fixture(scope="session")
def other_signing_key() -> ec.EllipticCurvePrivateKey:
    return ec.generate_private_key(ec.SECP384R1())


@pytest.fixture(scope="session")
def key_pem(signing_key: ec.EllipticCurvePrivateKey) -> bytes:
    return public_pem(signing_key)


@pytest.fixture
def claims() -> dict[str, Any]:
    now = int(time.time())
    return {
        "sub": "admin@acme.example",
        "aid": 42,
        "org": "Acme",
        "cap": 100,
        "plan": "enterprise",
        "did": "dep-123",
        "iat": now - 60,
        "exp": now + 3600,
    }


@pytest.fixture
def make_token(signing_key: ec.EllipticCurvePrivateKey) -> Callable[..., str]:
    """Sign ``payload`` as a license; ``drop`` removes claims first."""

    def _make(
        payload: dict[str, Any],
        *,
        key: Any = None,
        algorithm: str = "ES384",
        drop: tuple[str, ...] = (),
    ) -> str:
        body = {k: v for k, v in payload.items() if k not in drop}
        return jwt.encode(
            body, key if key is not None else signing_key, algorithm=algorithm
        )

    return _make
