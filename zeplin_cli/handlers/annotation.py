"""`screen annotation` - find the root layer each matching annotation points at."""

from dataclasses import dataclass

from ..formatters.layer import format_layer_detail, format_layer_head
from ..formatters.style import format_number
from ..models import Annotation, Layer
from ..utils import parse_screen_url, round_half_up
from .common import command, make_client


@dataclass
class AnnotationMatch:
    annotation: Annotation
    x: int                     # pixel position on the screen
    y: int
    root_layer: Layer | None


def filter_annotations(annotations: list[Annotation], text: str) -> list[Annotation]:
    needle = text.lower()
    return [a for a in annotations if needle in a.content.lower()]


def match_annotation(annotation: Annotation, root_layers: list[Layer], width: float, height: float) -> AnnotationMatch:
    """Resolve the normalized annotation position to pixels and find the root layer under it."""
    x = round_half_up(annotation.x * width)
    y = round_half_up(annotation.y * height)
    root = next((layer for layer in root_layers if layer.rect.contains(x, y)), None)
    return AnnotationMatch(annotation=annotation, x=x, y=y, root_layer=root)


def format_match(match: AnnotationMatch, index: int) -> list[str]:
    annotation = match.annotation
    lines = [
        "",
        f"--- Annotation #{index} ---",
        f'Content: "{annotation.content}"',
        f"Type: {annotation.type_name}",
        f"Position (normalized): ({format_number(annotation.x)}, {format_number(annotation.y)})",
        f"Position (px): ({match.x}, {match.y})",
    ]
    if match.root_layer:
        lines += ["", "Matched root layer:", f"  {format_layer_head(match.root_layer)}"]
        lines += format_layer_detail(match.root_layer, "  ")
    else:
        lines += ["", "Matched root layer: (none)"]
    return lines


@command
def handler(args) -> int:
    ref = parse_screen_url(args.url)
    client = make_client()

    annotations = client.get_screen_annotations(ref.project_id, ref.screen_id)
    version = client.get_latest_screen_version(ref.project_id, ref.screen_id)

    matched = filter_annotations(annotations, args.text)
    print("=== Annotation search ===", flush=True)
    print(f'Query: "{args.text}"', flush=True)
    print(f"Matched annotations: {len(matched)}", flush=True)

    for i, annotation in enumerate(matched, start=1):
        match = match_annotation(annotation, version.layers, version.width, version.height)
        print("\n".join(format_match(match, i)), flush=True)
    return 0
