"""Detect command implementation."""

import json

import click
from rich.console import Console
from rich.panel import Panel

from selfupdate.core.checksum import VALIDATORS, get_validator
from selfupdate.core.detector import Updater
from selfupdate.core.errors import SelfUpdateError
from selfupdate.core.github import InvalidSlugError
from selfupdate.core.platform import PlatformInfo, get_platform_info
from selfupdate.models.release_type import ReleaseType

console = Console()


def format_size(size: int) -> str:
    """Human readable byte count."""
    value = float(size)
    for unit in ("B", "KB", "MB"):
        if value < 1024:
            return f"{value:.0f} {unit}" if unit == "B" else f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} GB"


@click.command()
@click.argument("slug")
@click.option("--version", "-V", "version", default="", help="Exact release tag to look for")
@click.option("--prerelease", is_flag=True, help="Also consider pre-releases")
@click.option("--only-prerelease", is_flag=True, help="Consider pre-releases only")
@click.option(
    "--validator",
    type=click.Choice(sorted(VALIDATORS)),
    default=None,
    help="Require a validation file next to the asset",
)
@click.option("--os", "os_name", default=None, help="Target OS (defaults to this machine)")
@click.option("--arch", default=None, help="Target architecture (defaults to this machine)")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def detect(
    slug: str,
    version: str,
    prerelease: bool,
    only_prerelease: bool,
    validator: str | None,
    os_name: str | None,
    arch: str | None,
    as_json: bool,
):
    """Detect the release to update to.

    SLUG is the repository in owner/name format.
    """
    if only_prerelease:
        release_types = ReleaseType.PRERELEASE
    elif prerelease:
        release_types = ReleaseType.RELEASE | ReleaseType.PRERELEASE
    else:
        release_types = ReleaseType.RELEASE

    current = get_platform_info()
    platform = PlatformInfo(os=os_name or current.os, arch=arch or current.arch)

    updater = Updater(
        validator=get_validator(validator) if validator else None,
        platform=platform,
    )

    try:
        release = updater.detect_version_of_type(slug, version, release_types)
    except InvalidSlugError as e:
        raise click.BadParameter(str(e), param_hint="SLUG")
    except SelfUpdateError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    if release is None:
        target = f" {version}" if version else ""
        console.print(
            f"[yellow]No release{target} found for {platform.os}/{platform.arch} in {slug}[/yellow]"
        )
        raise SystemExit(1)

    if as_json:
        click.echo(json.dumps(release.to_dict(), indent=2))
        return

    lines = [
        f"[bold]Version:[/bold] {release.version}",
        f"[bold]Name:[/bold] {release.name}",
        f"[bold]Asset:[/bold] {release.asset_name} ({format_size(release.asset_size)})",
        f"[bold]Download:[/bold] {release.asset_url}",
        f"[bold]Release page:[/bold] {release.url}",
    ]
    if release.published_at:
        lines.append(f"[bold]Published:[/bold] {release.published_at.strftime('%Y-%m-%d %H:%M')}")
    if release.validation_asset_id is not None:
        lines.append(f"[bold]Validation file:[/bold] {release.validation_asset_url}")

    console.print(Panel("\n".join(lines), title=f"[green]{release.slug}[/green]"))
