"""
Deployment bound license checks.
"""

from __future__ import annotations

import logging

from licverify.common.config import Config
from licverify.common.exceptions import DeploymentMismatchError
from licverify.common.models import LicenseInfo, VerifyOptions
from licverify.verifier.license_verifier import LicenseVerifier

logger = logging.getLogger(__name__)


def verify_for_deployment(
    license: str,
    deployment_id: str,
    key_pem: bytes | str,
    options: VerifyOptions | None = None,
) -> LicenseInfo:
    """Verify ``license`` and check it was issued for ``deployment_id``.

    Returns the verified LicenseInfo. Deployment ids are compared exactly.
    """
    verifier = LicenseVerifier(key_pem)
    info = verifier.verify(license, options)

    if info.deployment_id != deployment_id:
        logger.info(
            "License for account %s is bound to another deployment", info.account_id
        )
        raise DeploymentMismatchError(deployment_id, info.deployment_id)

    return info


def verify_cluster_license(
    license: str,
    deployment_id: str,
    config: Config | None = None,
    options: VerifyOptions | None = None,
) -> LicenseInfo:
    """Verify a cluster license against the configured authority key."""
    config = config or Config()
    if options is None:
        options = VerifyOptions(leeway=config.LEEWAY)
    elif "leeway" not in options.model_fields_set:
        # leeway set explicitly by the caller wins over the environment
        options = options.model_copy(update={"leeway": config.LEEWAY})
    return verify_for_deployment(
        license, deployment_id, config.get_public_key_pem(), options
    )
