"""
Upgrade check command.
"""

import logging

import click
import httpx
from pydantic import ValidationError

from peon import __version__
from peon.errors import UnsupportedPlatformError, VersionParseError
from peon.upgrade import (
    fetch_latest_release,
    find_matching_asset,
    get_asset_name,
    is_version_up_to_date,
    parse_version_tag,
)

logger = logging.getLogger(__name__)


@click.command()
@click.option("--force", is_flag=True, help="Show the download even if already up to date")
def upgrade(force: bool) -> None:
    """Check GitHub releases for a newer peon."""
    click.echo(f"peon-ping: current version {__version__}")
    click.echo("peon-ping: checking for updates...")

    try:
        release = fetch_latest_release()
    except (httpx.HTTPError, ValidationError) as e:
        raise click.ClickException(f"could not fetch latest release: {e}") from None

    latest = parse_version_tag(release.tag_name)

    if force:
        click.echo(f"peon-ping: forcing upgrade to {latest}")
    else:
        try:
            if is_version_up_to_date(__version__, latest):
                click.echo(f"peon-ping: already up to date ({__version__})")
                return
            click.echo(f"peon-ping: new version available: {latest}")
        except VersionParseError as e:
            click.echo(f"peon-ping: warning: version comparison failed: {e}", err=True)

    try:
        asset_name = get_asset_name()
    except UnsupportedPlatformError as e:
        raise click.ClickException(str(e)) from None

    asset = find_matching_asset(release, asset_name)
    if asset is None:
        raise click.ClickException(f"no asset found for {asset_name}")

    logger.debug(f"Matched asset {asset.name}")
    click.echo(f"peon-ping: download {asset_name} from {asset.browser_download_url}")
