"""
Verification key set binding one EC public key to its signature algorithm.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, NamedTuple

from cryptography.hazmat.primitives.asymmetric import ec
from jwt import PyJWK
from jwt.algorithms import ECAlgorithm

from licverify.common.exceptions import KeyTypeError
from licverify.verifier.key_loader import load_public_key

if TYPE_CHECKING:
    from cryptography.hazmat.primitives.asymmetric.ec import EllipticCurvePublicKey

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "ES384"

# ECDSA algorithm tag -> curve its keys must be on
ALGORITHM_CURVES: dict[str, type[ec.EllipticCurve]] = {
    "ES256": ec.SECP256R1,
    "ES384": ec.SECP384R1,
    "ES512": ec.SECP521R1,
}


class BoundKey(NamedTuple):
    algorithm: str
    jwk: PyJWK

    @property
    def key(self) -> Any:
        return self.jwk.key


class VerificationKeySet:
    """Read-only set of public keys, each bound to an explicit algorithm."""

    def __init__(
        self,
        public_key: EllipticCurvePublicKey,
        algorithm: str = DEFAULT_ALGORITHM,
    ) -> None:
        curve = ALGORITHM_CURVES.get(algorithm)
        if curve is None:
            msg = f"unsupported signature algorithm {algorithm!r}"
            raise KeyTypeError(msg)
        if not isinstance(public_key.curve, curve):
            msg = (
                f"{public_key.curve.name} key cannot be used with {algorithm}, "
                f"which requires {curve.name}"
            )
            raise KeyTypeError(msg)

        jwk_data = ECAlgorithm.to_jwk(public_key, as_dict=True)
        jwk_data["alg"] = algorithm
        jwk_data["use"] = "sig"
        self._keys: tuple[BoundKey, ...] = (
            BoundKey(algorithm, PyJWK(jwk_data, algorithm=algorithm)),
        )
        logger.debug("Key set bound %s key to %s", public_key.curve.name, algorithm)

    @classmethod
    def from_pem(
        cls, pem_bytes: bytes | str, algorithm: str = DEFAULT_ALGORITHM
    ) -> VerificationKeySet:
        """Load a PEM key or certificate and bind it to ``algorithm``."""
        return cls(load_public_key(pem_bytes), algorithm)

    @property
    def algorithms(self) -> list[str]:
        return [bound.algorithm for bound in self._keys]

    def find(self, algorithm: str) -> BoundKey | None:
        """Return the key bound to ``algorithm``, if any."""
        for bound in self._keys:
            if bound.algorithm == algorithm:
                return bound
        return None

    def __len__(self) -> int:
        return len(self._keys)
