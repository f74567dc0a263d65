"""CLI for license key resolution."""

import sys
from pathlib import Path

import click
from botocore.exceptions import BotoCoreError

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv  # noqa: E402

load_dotenv(project_root / ".env")

from extension.config.configuration import mask  # noqa: E402
from extension.config.exceptions import ConfigError  # noqa: E402
from extension.config.loader import ConfigLoader  # noqa: E402
from extension.credentials import CredentialError, LicenseKeyResolver  # noqa: E402
from extension.utils.logging import setup_logging  # noqa: E402

config_file_option = click.option(
    "--config-file", "-c", default=None, help="YAML config file"
)


def _load_config(config_file):
    try:
        conf = ConfigLoader(config_file=config_file).load()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
    setup_logging(level=conf.log_level, format_style=conf.log_format)
    return conf


def _build_resolver(conf):
    try:
        return LicenseKeyResolver.from_session(region_name=conf.aws_region)
    except BotoCoreError as e:
        click.echo(f"Error: cannot set up AWS session: {e}", err=True)
        raise SystemExit(1)


@click.group()
@click.version_option(version="1.0.0", prog_name="license-key")
def cli():
    """License key resolver for the New Relic Lambda extension."""
    pass


@cli.command()
@config_file_option
def config(config_file: str):
    """Show loaded configuration."""
    conf = _load_config(config_file)

    click.echo(f"\n{'='*60}")
    click.echo("Extension Configuration")
    click.echo(f"{'='*60}")
    click.echo(f"License key:    {conf.masked_license_key() or '(not set)'}")
    click.echo(f"Secret id:      {conf.license_key_secret_id or '(default)'}")
    click.echo(f"AWS region:     {conf.aws_region or '(from AWS config)'}")
    click.echo(f"Log level:      {conf.log_level}")
    click.echo(f"Log format:     {conf.log_format}")


@cli.command()
@config_file_option
@click.option("--reveal", is_flag=True, help="Print the full license key")
@click.option("--metrics", is_flag=True, help="Print Prometheus metrics afterwards")
def resolve(config_file: str, reveal: bool, metrics: bool):
    """Resolve the license key from configured sources."""
    conf = _load_config(config_file)
    resolver = _build_resolver(conf)

    try:
        resolution = resolver.resolve_detailed(conf)
    except CredentialError as e:
        click.echo(f"Error: no license key found: {e}", err=True)
        raise SystemExit(1)
    finally:
        if metrics:
            from prometheus_client import generate_latest

            click.echo(generate_latest().decode("utf-8"))

    license_key = resolution.license_key if reveal else mask(resolution.license_key)
    click.echo(f"Source:      {resolution.source}")
    click.echo(f"License key: {license_key}")


@cli.command("check-secret")
@config_file_option
def check_secret(config_file: str):
    """Check whether the Secrets Manager secret exists."""
    conf = _load_config(config_file)
    resolver = _build_resolver(conf)
    secret_id = resolver.license_key_secret_id(conf)

    if resolver.is_secret_configured(conf):
        click.echo(f"✓ Secret '{secret_id}' is configured")
        return

    click.echo(f"✗ Secret '{secret_id}' is not configured", err=True)
    raise SystemExit(1)


if __name__ == "__main__":
    cli()
