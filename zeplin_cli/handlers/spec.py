"""`screen spec` - print the compact structural spec of a screen."""

from ..formatters.spec import filter_by_section, render_header, render_spec
from ..utils import parse_screen_url
from .common import command, make_client


@command
def handler(args) -> int:
    ref = parse_screen_url(args.url)
    client = make_client()

    screen = client.get_screen(ref.project_id, ref.screen_id)
    version = client.get_latest_screen_version(ref.project_id, ref.screen_id)

    print("\n".join(render_header(screen, version)), flush=True)

    layers = version.layers
    if args.section:
        layers = filter_by_section(layers, args.section)
        if not layers:
            print(f'No layer name contains "{args.section}".', flush=True)
            return 0

    print("\n".join(render_spec(layers, args.depth)), flush=True)
    return 0
