"""untranslated - flag hard-coded user-facing strings in JS/TS sources."""

# Load .env so UNTRANSLATED_DISABLE_PROGRESS and friends are set for any
# entry point (CLI, pytest, scripts) that imports untranslated.
from dotenv import load_dotenv

load_dotenv()

# Keep in sync with pyproject.toml [project] version.
__version__ = "0.1.0"

MESSAGE = "disallow literal string"
