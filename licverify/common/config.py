"""
Configuration settings for the license verifier.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from licverify.common.keys import DEVELOPMENT_PUBLIC_KEY, PRODUCTION_PUBLIC_KEY


class Config:
    """Central configuration class for all verifier settings."""

    def __init__(self) -> None:
        # Key selection
        self.DEV_MODE: bool = bool(
            os.getenv("LICVERIFY_DEV_MODE") or os.getenv("MINIO_CI_CD")
        )
        key_path = os.getenv("LICVERIFY_PUBLIC_KEY_PATH")
        self.PUBLIC_KEY_PATH: Path | None = Path(key_path) if key_path else None

        # Signature scheme every license is issued with
        self.ALGORITHM: str = "ES384"

        # Verification defaults
        leeway = os.getenv("LICVERIFY_LEEWAY", "0")
        try:
            self.LEEWAY: int = int(leeway)
        except ValueError as err:
            msg = f"LICVERIFY_LEEWAY must be a whole number of seconds, got {leeway!r}"
            raise ValueError(msg) from err
        if self.LEEWAY < 0:
            msg = f"LICVERIFY_LEEWAY must not be negative, got {self.LEEWAY}"
            raise ValueError(msg)

        # Logging
        level_name = os.getenv("LICVERIFY_LOG_LEVEL", "WARNING").upper()
        self.LOG_LEVEL: int = logging.getLevelName(level_name)
        if not isinstance(self.LOG_LEVEL, int):
            msg = f"Unknown log level: {level_name}"
            raise ValueError(msg)

    def get_public_key_pem(self) -> bytes:
        """Return the PEM bytes of the license authority key in effect."""
        if self.PUBLIC_KEY_PATH is not None:
            try:
                with self.PUBLIC_KEY_PATH.open("rb") as f:
                    return f.read()
            except FileNotFoundError as err:
                msg = f"Public key not found at {self.PUBLIC_KEY_PATH}"
                raise ValueError(msg) from err

        if self.DEV_MODE:
            return DEVELOPMENT_PUBLIC_KEY
        return PRODUCTION_PUBLIC_KEY
