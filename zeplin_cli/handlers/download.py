"""`screen download` - classify a screen's assets and download them."""

from pathlib import Path

from ..prompts import select_prompt
from ..services import classify_assets, download_all_assets
from ..utils import parse_screen_url
from .common import command, make_client


@command
def handler(args) -> int:
    ref = parse_screen_url(args.url)
    output_dir = Path(args.output).resolve()
    client = make_client()

    print("Fetching screen...", flush=True)
    version = client.get_latest_screen_version(ref.project_id, ref.screen_id)

    if not version.assets:
        print("No assets to download.", flush=True)
        return 0

    print(f"Classifying {len(version.assets)} assets...", flush=True)
    classified = classify_assets(version.assets, chooser=select_prompt)

    if not classified:
        print("No downloadable assets.", flush=True)
        return 0

    print(f"\nDownloading {len(classified)} assets -> {output_dir}\n", flush=True)
    result = download_all_assets(classified, output_dir, workers=args.jobs)

    stats = result.get_stats()
    print("\n=== Download complete ===", flush=True)
    print(f"Succeeded: {stats['success']}", flush=True)
    if stats["failed"]:
        print(f"Failed: {stats['failed']}", flush=True)
    return 0
