"""Shared CLI parameter definitions.

The parameter functions return Typer options that are used inside
``Annotated`` signatures, so every command spells a given option the same
way with the same help text.

Usage:
    @app.command()
    def my_command(
        version_id: Annotated[Optional[str], version_id_option()] = None,
    ):
        pass

Parameter Categories:
    - AWS parameters: credentials, profile, region and endpoint
    - Listing parameters: result-size caps
    - Object parameters: version selection and restore duration
"""

from typing import Annotated, Optional

import typer


def aws_access_key_option() -> Annotated[Optional[str], typer.Option]:
    """AWS access key ID option."""
    return typer.Option("--access-key-id", help="AWS access key ID")


def aws_secret_key_option() -> Annotated[Optional[str], typer.Option]:
    """AWS secret access key option."""
    return typer.Option("--secret-access-key", help="AWS secret access key")


def aws_session_token_option() -> Annotated[Optional[str], typer.Option]:
    """AWS session token option."""
    return typer.Option("--session-token", help="AWS session token")


def aws_region_option() -> Annotated[Optional[str], typer.Option]:
    """Initial AWS region option."""
    return typer.Option(
        "--region", help="Initial AWS region (defaults to REGIONAL_S3_DEFAULT_REGION)"
    )


def aws_endpoint_url_option() -> Annotated[Optional[str], typer.Option]:
    """AWS endpoint URL option."""
    return typer.Option("--endpoint-url", help="Custom S3 endpoint URL")


def aws_profile_option() -> Annotated[Optional[str], typer.Option]:
    """AWS profile option."""
    return typer.Option("--aws-profile", help="AWS CLI profile name")


def max_keys_option() -> Annotated[Optional[int], typer.Option]:
    """Max keys option."""
    return typer.Option("--max-keys", help="Maximum number of keys to return")


def version_id_option() -> Annotated[Optional[str], typer.Option]:
    """Object version option."""
    return typer.Option("--version-id", help="Object version ID")


def restore_days_option() -> Annotated[int, typer.Option]:
    """Restore duration option."""
    return typer.Option("--days", help="Days to keep the restored copy")


def filter_region_option() -> Annotated[Optional[str], typer.Option]:
    """Region filter option for bucket listing."""
    return typer.Option("--in-region", help="Only list buckets located in this region")
