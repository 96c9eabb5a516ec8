import os
import promptdeck.data as data
import logging
import sys
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Local file related

PROMPTDECK_STORAGE_PATH = os.environ.get(
    "PROMPTDECK_STORAGE_PATH", os.path.dirname(data.__file__)
).strip() or os.path.dirname(data.__file__)

# Key of the root project collection in the storage
PROMPTDECK_STORAGE_KEY = (
    os.environ.get("PROMPTDECK_STORAGE_KEY", "projects").strip() or "projects"
)

# Logging

DEBUG_LOG_TO_CONSOLE = os.environ.get("DEBUG_LOG_TO_CONSOLE", "").strip().lower()
root_logger = logging.getLogger()

if DEBUG_LOG_TO_CONSOLE and DEBUG_LOG_TO_CONSOLE not in ("false", "0", "no"):
    # Enable verbose logging to console
    if not any(isinstance(h, logging.StreamHandler) for h in root_logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger.setLevel(logging.INFO)
else:
    # Default to WARNING level when DEBUG_LOG_TO_CONSOLE is not set or is false
    root_logger.setLevel(logging.WARNING)
