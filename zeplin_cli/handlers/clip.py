"""`screen clip` - copy depth-1 sections of a screen to the clipboard."""

import shlex
import subprocess
import sys
from typing import Callable

from ..config import CLIPBOARD_COMMAND
from ..formatters.layer import format_layer_head, format_layer_subtree
from ..models import Layer
from ..utils import parse_screen_url
from .common import command, make_client


def copy_to_clipboard(text: str, clipboard_command: str = CLIPBOARD_COMMAND) -> None:
    """Pipe text into the clipboard command (pbcopy, xclip -selection clipboard, ...)."""
    subprocess.run(shlex.split(clipboard_command), input=text.encode("utf-8"), check=True)


def run_clip_loop(
    sections: list[Layer],
    root_name: str,
    input_fn: Callable[[str], str] = input,
    copy_fn: Callable[[str], None] = copy_to_clipboard,
) -> None:
    """List sections and copy the chosen one until the user enters 0."""
    print(f"\n=== {root_name} - depth-1 sections ===", flush=True)
    for i, layer in enumerate(sections, start=1):
        print(f"  [{i}] {format_layer_head(layer)}", flush=True)
    print("  [0] Quit", flush=True)

    while True:
        answer = input_fn("\nSection number to copy: ").strip()
        if answer == "0":
            return

        if not answer.isdecimal() or not 1 <= int(answer) <= len(sections):
            print(f"Enter a number between 1 and {len(sections)}, or 0 to quit.", flush=True)
            continue

        layer = sections[int(answer) - 1]
        try:
            copy_fn("\n".join(format_layer_subtree(layer)))
        except (OSError, subprocess.CalledProcessError) as e:
            print(f"Failed to copy to clipboard: {e}", file=sys.stderr, flush=True)
            continue
        print(f'Copied "{layer.name or "(unnamed)"}" to the clipboard.', flush=True)


@command
def handler(args) -> int:
    ref = parse_screen_url(args.url)
    client = make_client()
    version = client.get_latest_screen_version(ref.project_id, ref.screen_id)

    if not version.layers:
        print("The screen has no root layer.", flush=True)
        return 0

    root = version.layers[0]
    if not root.layers:
        print("The root layer has no depth-1 layers.", flush=True)
        return 0

    run_clip_loop(root.layers, root.name or "(unnamed)")
    return 0
