import math
import re
from dataclasses import dataclass
from urllib.parse import urlparse

from .config import ZEPLIN_HOST

_UNSAFE_FILE_CHARS = re.compile(r"[^a-z0-9가-힣]+")


class ScreenUrlError(ValueError):
    """Screen URL could not be parsed."""

    pass


@dataclass(frozen=True)
class ScreenRef:
    """Project/screen pair addressed by a screen URL."""

    project_id: str
    screen_id: str


def parse_screen_url(raw_url: str, host: str = ZEPLIN_HOST) -> ScreenRef:
    """Parse a screen URL of the form https://<host>/project/{projectId}/screen/{screenId}.

    Raises:
        ScreenUrlError: If the URL is malformed, points at another host,
            or lacks the project or screen segment.
    """
    parsed = urlparse(raw_url.strip())
    if not parsed.scheme or not parsed.netloc:
        raise ScreenUrlError(f"Invalid URL: {raw_url}")

    if parsed.hostname != host:
        raise ScreenUrlError(f'Not a Zeplin URL, expected host "{host}": {raw_url}')

    segments = [s for s in parsed.path.split("/") if s]
    project_id = _segment_after(segments, "project")
    screen_id = _segment_after(segments, "screen")

    if not project_id or not screen_id:
        raise ScreenUrlError(
            "Could not find projectId or screenId in URL. "
            f"Expected format: https://{host}/project/{{projectId}}/screen/{{screenId}}"
        )

    return ScreenRef(project_id=project_id, screen_id=screen_id)


def _segment_after(segments: list[str], name: str) -> str | None:
    if name not in segments:
        return None
    index = segments.index(name)
    if index + 1 < len(segments):
        return segments[index + 1]
    return None


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 away from minus infinity.

    Example: 2.5 -> 3, -2.5 -> -2 (built-in round() would give 2 and -2)
    """
    return int(math.floor(value + 0.5))


def sanitize_file_name(display_name: str) -> str:
    """Convert a display name to a file base name.

    Example: "Close Icon!!" -> "close_icon"
    """
    return _UNSAFE_FILE_CHARS.sub("_", display_name.lower()).strip("_")
