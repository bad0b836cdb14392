"""
Command-line interface for license verification.
"""

from __future__ import annotations

from pathlib import Path

import click

from licverify.common.config import Config
from licverify.common.exceptions import LicenseError
from licverify.common.logging_utils import setup_logger
from licverify.common.models import VerifyOptions
from licverify.verifier import (
    LicenseVerifier,
    VerificationKeySet,
    load_public_key,
    verify_for_deployment,
)


def _load_config(key_file: str | None, dev: bool) -> Config:  # noqa: FBT001
    config = Config()
    if key_file:
        config.PUBLIC_KEY_PATH = Path(key_file)
    if dev:
        config.DEV_MODE = True
    setup_logger(config.LOG_LEVEL)
    return config


def _read_license(source: str) -> str:
    if source == "-":
        return click.get_text_stream("stdin").read().strip()
    path = Path(source)
    try:
        # inline tokens are longer than most file systems allow for a name
        is_file = path.is_file()
    except OSError:
        is_file = False
    if is_file:
        return path.read_text(encoding="utf-8").strip()
    return source.strip()


key_file_option = click.option(
    "--key-file",
    default=None,
    type=click.Path(dir_okay=False),
    help="PEM public key or certificate (default: embedded authority key)",
)
dev_option = click.option(
    "--dev",
    is_flag=True,
    help="Use the development authority key",
)


@click.group()
def cli() -> None:
    """License key verifier CLI"""


@cli.command()
@click.argument("license_key")
@key_file_option
@dev_option
@click.option(
    "--deployment-id",
    default=None,
    help="Fail unless the license is bound to this deployment",
)
@click.option(
    "--skip-expiry",
    is_flag=True,
    help="Accept expired licenses",
)
@click.option(
    "--leeway",
    default=None,
    type=click.IntRange(min=0),
    help="Tolerated clock skew in seconds (default: from LICVERIFY_LEEWAY or 0)",
)
def verify(
    license_key: str,
    key_file: str | None,
    dev: bool,  # noqa: FBT001
    deployment_id: str | None,
    skip_expiry: bool,  # noqa: FBT001
    leeway: int | None,
) -> None:
    """Verify a license key and print its contents

    LICENSE_KEY is the token itself, a file holding it, or - for stdin.
    """
    config = _load_config(key_file, dev)
    options = VerifyOptions(
        skip_expiry_check=skip_expiry,
        leeway=config.LEEWAY if leeway is None else leeway,
    )
    license = _read_license(license_key)

    try:
        pem = config.get_public_key_pem()
        if deployment_id is None:
            info = LicenseVerifier(pem, config.ALGORITHM).verify(license, options)
        else:
            info = verify_for_deployment(license, deployment_id, pem, options)
    except (LicenseError, ValueError) as err:
        raise click.ClickException(str(err)) from err

    click.echo(info.model_dump_json(indent=2))


@cli.command()
@key_file_option
@dev_option
def keyinfo(key_file: str | None, dev: bool) -> None:  # noqa: FBT001
    """Show the license authority key in effect"""
    config = _load_config(key_file, dev)
    try:
        key = load_public_key(config.get_public_key_pem())
        key_set = VerificationKeySet(key, config.ALGORITHM)
    except (LicenseError, ValueError) as err:
        raise click.ClickException(str(err)) from err

    mode = "development" if config.DEV_MODE else "production"
    source = config.PUBLIC_KEY_PATH or mode
    click.echo(f"Source: {source}")
    click.echo(f"Curve: {key.curve.name}")
    click.echo(f"Key size: {key.key_size}")
    click.echo(f"Algorithms: {', '.join(key_set.algorithms)}")


if __name__ == "__main__":
    cli()
