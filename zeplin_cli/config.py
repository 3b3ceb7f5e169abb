import os
from dotenv import load_dotenv

load_dotenv()

# API Keys and Config - loaded from .env
ZEPLIN_TOKEN = os.getenv("ZEPLIN_TOKEN", "")
ZEPLIN_API_URL = os.getenv("ZEPLIN_API_URL", "https://api.zeplin.dev/v1")
ZEPLIN_HOST = os.getenv("ZEPLIN_HOST", "app.zeplin.io")

# Clipboard command used by `screen clip` (reads text from stdin)
CLIPBOARD_COMMAND = os.getenv("CLIPBOARD_COMMAND", "pbcopy")

# Export defaults
WEBP_QUALITY = int(os.getenv("WEBP_QUALITY", "80"))
DEFAULT_SPEC_DEPTH = int(os.getenv("DEFAULT_SPEC_DEPTH", "3"))
DEFAULT_OUTPUT_DIR = os.getenv("DEFAULT_OUTPUT_DIR", "./assets")
