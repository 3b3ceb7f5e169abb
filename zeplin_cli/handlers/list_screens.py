"""`screen list` - dump a project's screens as JSON."""

import json

from .common import command, make_client


@command
def handler(args) -> int:
    client = make_client()
    screens = client.get_project_screens(args.project_id, limit=args.limit, offset=args.offset)
    print(json.dumps(screens, indent=2, ensure_ascii=False), flush=True)
    return 0
