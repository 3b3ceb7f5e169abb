"""`screen get` - print everything known about a screen."""

from datetime import datetime

from ..formatters.layer import format_assets, format_layer_tree, format_links
from ..formatters.style import format_color, format_number
from ..models import Screen, ScreenVersion
from ..utils import parse_screen_url
from .common import command, make_client

NONE = "(none)"


def format_date(timestamp: int) -> str:
    return datetime.fromtimestamp(timestamp).strftime("%Y-%m-%d %H:%M:%S")


def format_screen_info(screen: Screen) -> list[str]:
    return [
        "=== Screen ===",
        f"Name: {screen.name}",
        f"Description: {screen.description or NONE}",
        f"ID: {screen.id}",
        f"Tags: {', '.join(screen.tags) if screen.tags else NONE}",
        f"Section: {screen.section_id or NONE}",
        f"Created: {format_date(screen.created)}",
        f"Updated: {format_date(screen.updated) if screen.updated else NONE}",
    ]


def format_version_info(version: ScreenVersion) -> list[str]:
    background = format_color(version.background_color) if version.background_color else NONE
    return [
        "",
        "=== Latest version ===",
        f"Size: {format_number(version.width)} x {format_number(version.height)}",
        f"Density: {format_number(version.density_scale)}x",
        f"Background: {background}",
        f"Layers: {len(version.layers)}",
        f"Assets: {len(version.assets)}",
        f"Links: {len(version.links)}",
    ]


def format_stats(screen: Screen) -> list[str]:
    return [
        "",
        "=== Stats ===",
        f"Notes: {screen.number_of_notes}",
        f"Annotations: {screen.number_of_annotations}",
        f"Versions: {screen.number_of_versions}",
    ]


@command
def handler(args) -> int:
    ref = parse_screen_url(args.url)
    client = make_client()

    screen = client.get_screen(ref.project_id, ref.screen_id)
    version = client.get_latest_screen_version(ref.project_id, ref.screen_id)

    lines = format_screen_info(screen) + format_version_info(version) + format_stats(screen)
    if version.layers:
        lines += ["", "=== Layers ==="] + format_layer_tree(version.layers)
    lines += format_assets(version.assets)
    lines += format_links(version.links)

    print("\n".join(lines), flush=True)
    return 0
