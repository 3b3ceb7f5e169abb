"""Shared command plumbing: client construction and the error boundary."""

import functools
import logging
import sys

from ..clients import ZeplinApiError, ZeplinClient
from ..config import ZEPLIN_API_URL, ZEPLIN_TOKEN
from ..utils import ScreenUrlError

logger = logging.getLogger(__name__)


def make_client() -> ZeplinClient:
    if not ZEPLIN_TOKEN:
        logger.warning("ZEPLIN_TOKEN is not set; requests will be unauthenticated")
    return ZeplinClient(ZEPLIN_TOKEN, ZEPLIN_API_URL)


def command(func):
    """Turn failures into a printed message and exit code 1."""

    @functools.wraps(func)
    def wrapper(args) -> int:
        try:
            return func(args) or 0
        except ScreenUrlError as e:
            print(str(e), file=sys.stderr, flush=True)
        except ZeplinApiError as e:
            print(e.message, file=sys.stderr, flush=True)
        except Exception as e:
            logger.debug("Command failed", exc_info=True)
            print(f"Error: {e}", file=sys.stderr, flush=True)
        return 1

    return wrapper
