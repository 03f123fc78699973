"""Command-line interface for regional-s3.

Connection options go before the command and apply to the whole invocation:

    regional-s3 --aws-profile prod --region us-east-1 ls logs-eu

Commands:
    - profiles: List credential profiles
    - buckets: List buckets, optionally only those in one region
    - create-bucket: Create a bucket in a region
    - ls: List the objects in a bucket
    - versions: List the versions of an object
    - upload / download: Transfer a file
    - rm / rb: Delete an object or a bucket
    - restore: Restore an archived object version

Buckets in other regions are reached automatically.
"""

from dataclasses import dataclass
from typing import Annotated, NoReturn, Optional

import typer

from . import __version__
from .cli_params import (
    aws_access_key_option,
    aws_endpoint_url_option,
    aws_profile_option,
    aws_region_option,
    aws_secret_key_option,
    aws_session_token_option,
    filter_region_option,
    max_keys_option,
    restore_days_option,
    version_id_option,
)
from .core import settings
from .core.exceptions import RegionalS3Error
from .objectstorage import RegionalClientFactory, RegionalS3Session, S3ClientConfig

app = typer.Typer(
    name="regional-s3",
    help="Region-aware S3 bucket and object operations.",
    no_args_is_help=True,
)


@dataclass
class ConnectionOptions:
    """Connection options collected by the app callback."""

    aws_profile: Optional[str] = None
    region: Optional[str] = None
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    session_token: Optional[str] = None
    endpoint_url: Optional[str] = None


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"regional-s3 {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    aws_profile: Annotated[Optional[str], aws_profile_option()] = None,
    region: Annotated[Optional[str], aws_region_option()] = None,
    access_key_id: Annotated[Optional[str], aws_access_key_option()] = None,
    secret_access_key: Annotated[Optional[str], aws_secret_key_option()] = None,
    session_token: Annotated[Optional[str], aws_session_token_option()] = None,
    endpoint_url: Annotated[Optional[str], aws_endpoint_url_option()] = None,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    Regional S3: bucket and object operations across AWS regions.
    """
    ctx.obj = ConnectionOptions(
        aws_profile=aws_profile,
        region=region,
        access_key_id=access_key_id,
        secret_access_key=secret_access_key,
        session_token=session_token,
        endpoint_url=endpoint_url,
    )


def _create_session(options: ConnectionOptions) -> RegionalS3Session:
    """Create a session from the connection options.

    Explicit keys win over a profile; with neither, the default credential
    chain is used.
    """
    region = options.region or settings.default_region

    if options.access_key_id or options.secret_access_key:
        if not (options.access_key_id and options.secret_access_key):
            raise typer.BadParameter(
                "--access-key-id and --secret-access-key must be given together"
            )
        return RegionalS3Session.from_credentials(
            access_key_id=options.access_key_id,
            secret_access_key=options.secret_access_key,
            region=region,
            session_token=options.session_token,
            endpoint_url=options.endpoint_url,
        )

    if options.session_token:
        raise typer.BadParameter(
            "--session-token requires --access-key-id and --secret-access-key"
        )

    config = S3ClientConfig(
        aws_profile=options.aws_profile, endpoint_url=options.endpoint_url
    )
    return RegionalS3Session(config, region)


def _fail(error: Exception) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)


@app.command("profiles")
def profiles_cmd() -> None:
    """List the credential profiles available on this machine."""
    profiles = RegionalClientFactory.list_profiles()
    if profiles:
        for profile in profiles:
            typer.echo(profile)
    else:
        typer.echo("No profiles found.")


@app.command("buckets")
def buckets_cmd(
    ctx: typer.Context,
    in_region: Annotated[Optional[str], filter_region_option()] = None,
) -> None:
    """
    List buckets owned by the account.

    Examples:
        regional-s3 --aws-profile prod buckets
        regional-s3 --aws-profile prod buckets --in-region eu-west-1
    """
    try:
        session = _create_session(ctx.obj)
        if in_region:
            buckets = session.list_buckets_in_region(in_region)
        else:
            buckets = session.list_buckets()
    except RegionalS3Error as e:
        _fail(e)

    if buckets:
        typer.echo(f"Found {len(buckets)} buckets:")
        for bucket in buckets:
            typer.echo(f"  {bucket['Name']}")
    else:
        typer.echo("No buckets found.")


@app.command("create-bucket")
def create_bucket_cmd(
    ctx: typer.Context,
    bucket: Annotated[str, typer.Argument(help="Name of the bucket to create")],
    bucket_region: Annotated[
        Optional[str],
        typer.Option("--bucket-region", help="Region to create the bucket in"),
    ] = None,
) -> None:
    """Create a bucket, by default in the session's initial region."""
    try:
        session = _create_session(ctx.obj)
        region = bucket_region or session.active_region
        session.create_bucket(bucket, region)
    except RegionalS3Error as e:
        _fail(e)

    typer.echo(f"✓ Bucket created: {bucket} ({region})")


@app.command("ls")
def ls_cmd(
    ctx: typer.Context,
    bucket: Annotated[str, typer.Argument(help="Bucket to list")],
    max_keys: Annotated[Optional[int], max_keys_option()] = None,
) -> None:
    """List the objects in a bucket."""
    try:
        session = _create_session(ctx.obj)
        objects = session.list_bucket_contents(bucket, max_keys=max_keys)
    except RegionalS3Error as e:
        _fail(e)

    if objects:
        typer.echo(f"Found {len(objects)} objects:")
        for obj in objects:
            typer.echo(f"  {obj['Key']}\t{obj.get('Size', 0):,} bytes")
    else:
        typer.echo("No objects found.")


@app.command("versions")
def versions_cmd(
    ctx: typer.Context,
    bucket: Annotated[str, typer.Argument(help="Bucket holding the object")],
    key: Annotated[str, typer.Argument(help="Object key")],
    max_keys: Annotated[Optional[int], max_keys_option()] = None,
) -> None:
    """List the versions of one object."""
    try:
        session = _create_session(ctx.obj)
        versions = session.list_object_versions(bucket, key, max_keys=max_keys)
    except RegionalS3Error as e:
        _fail(e)

    if versions:
        typer.echo(f"Found {len(versions)} versions of {key}:")
        for version in versions:
            latest = " (latest)" if version.get("IsLatest") else ""
            typer.echo(f"  {version.get('VersionId')}{latest}")
    else:
        typer.echo(f"No versions found for {key}.")


@app.command("upload")
def upload_cmd(
    ctx: typer.Context,
    bucket: Annotated[str, typer.Argument(help="Destination bucket")],
    key: Annotated[str, typer.Argument(help="Destination object key")],
    file_path: Annotated[str, typer.Argument(help="Local file to upload")],
) -> None:
    """Upload a local file."""
    try:
        session = _create_session(ctx.obj)
        session.upload_file(bucket, key, file_path)
    except RegionalS3Error as e:
        _fail(e)

    typer.echo(f"✓ Uploaded {file_path} to s3://{bucket}/{key}")


@app.command("download")
def download_cmd(
    ctx: typer.Context,
    bucket: Annotated[str, typer.Argument(help="Source bucket")],
    key: Annotated[str, typer.Argument(help="Object key")],
    directory: Annotated[str, typer.Argument(help="Directory to download into")],
    version_id: Annotated[Optional[str], version_id_option()] = None,
) -> None:
    """Download an object into a local directory."""
    try:
        session = _create_session(ctx.obj)
        session.download_object(bucket, key, directory, version_id=version_id)
    except RegionalS3Error as e:
        _fail(e)

    typer.echo(f"✓ Downloaded s3://{bucket}/{key} to {directory}")


@app.command("rm")
def rm_cmd(
    ctx: typer.Context,
    bucket: Annotated[str, typer.Argument(help="Bucket holding the object")],
    key: Annotated[str, typer.Argument(help="Object key")],
    version_id: Annotated[Optional[str], version_id_option()] = None,
) -> None:
    """Delete an object or one of its versions."""
    try:
        session = _create_session(ctx.obj)
        session.delete_object(bucket, key, version_id=version_id)
    except RegionalS3Error as e:
        _fail(e)

    typer.echo(f"✓ Deleted s3://{bucket}/{key}")


@app.command("rb")
def rb_cmd(
    ctx: typer.Context,
    bucket: Annotated[str, typer.Argument(help="Bucket to delete")],
) -> None:
    """Delete an empty bucket."""
    try:
        session = _create_session(ctx.obj)
        session.delete_bucket(bucket)
    except RegionalS3Error as e:
        _fail(e)

    typer.echo(f"✓ Deleted bucket {bucket}")


@app.command("restore")
def restore_cmd(
    ctx: typer.Context,
    bucket: Annotated[str, typer.Argument(help="Bucket holding the object")],
    key: Annotated[str, typer.Argument(help="Object key")],
    version_id: Annotated[Optional[str], version_id_option()] = None,
    days: Annotated[int, restore_days_option()] = 1,
) -> None:
    """Restore an archived object version."""
    try:
        session = _create_session(ctx.obj)
        session.restore_object_version(bucket, key, version_id=version_id, days=days)
    except RegionalS3Error as e:
        _fail(e)

    typer.echo(f"✓ Restore requested for s3://{bucket}/{key}")


if __name__ == "__main__":
    app()
