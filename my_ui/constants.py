"""Global constants for my-ui"""

from enum import Enum
from pathlib import Path

APP_NAME = "my-ui"
LOG_FORMAT = "%(message)s"

# Bundled data
PACKAGE_DIR = Path(__file__).resolve().parent
DATA_DIR = PACKAGE_DIR / "data"
DEFAULT_REGISTRY_PATH = DATA_DIR / "registry.json"
DEFAULT_TEMPLATES_DIR = DATA_DIR / "templates"

# Consumer project
PROJECT_CONFIG_FILE = "my-ui.config.json"

DEFAULT_CONFIG = {
    "components": "src/components",
    "hooks": "src/hooks",
    "utils": "src/lib",
    "tests": ".",
}

# Registry manifest schema
ROOT_KEYS = ("name", "version", "items")
ITEMS_KEYS = ("test-configs", "components", "hooks", "utils")
ITEM_KEYS = ("name", "description", "category", "files", "dependencies", "meta")
META_KEYS = ("since", "deprecated", "breaking")
META_REQUIRED_KEYS = ("since",)

# Filename marker stripped from test-config templates on install
EXAMPLE_MARKER = ".example."
TEST_FILE_MARKER = ".test."

# Test setup
TEST_FRAMEWORKS = ("vitest", "jest", "rstest")
TEST_FRAMEWORK_CHOICES = TEST_FRAMEWORKS + ("all",)
TEST_COMMON_ITEMS = ("test/setup", "test/globals", "test/css-modules")
TEST_FRAMEWORK_ITEM_PATTERN = "test/{framework}-config"

TEST_FRAMEWORK_DESCRIPTIONS = {
    "vitest": "Vitest (recommended) - fast and modern",
    "jest": "Jest - mature and reliable",
    "rstest": "Rstest - new, from the Rspack team",
    "all": "Install all three",
}

TEST_FRAMEWORK_INSTALL_COMMANDS = {
    "vitest": (
        "npm install -D vitest @vitejs/plugin-react @testing-library/react "
        "@testing-library/jest-dom @testing-library/user-event jsdom"
    ),
    "jest": (
        "npm install -D jest @types/jest @testing-library/react "
        "@testing-library/jest-dom @testing-library/user-event "
        "jest-environment-jsdom ts-jest"
    ),
    "rstest": (
        "npm install -D @rstest/core @vitejs/plugin-react @testing-library/react "
        "@testing-library/jest-dom @testing-library/user-event jsdom"
    ),
}

# Files probed in the tests directory to detect an existing setup
TEST_CONFIG_FILES = {
    "vitest": ("vitest.config.ts", "vitest.config.js"),
    "jest": ("jest.config.ts", "jest.config.js"),
    "rstest": ("rstest.config.ts", "rstest.config.js"),
}
TEST_SETUP_FILES = ("test-setup.ts", "test-setup.js")
TEST_GLOBALS_FILES = ("test-globals.d.ts",)


class OutputFormat(Enum):
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


# Error codes
class ErrorCode:
    MANIFEST_INVALID = "UI001"
    ITEM_NOT_FOUND = "UI101"
    TEMPLATE_NOT_FOUND = "UI102"
    FILE_ALREADY_EXISTS = "UI103"
    FILE_WRITE_FAILED = "UI104"
    USER_CANCELLED = "UI200"


# Environment variables
ENV_PROJECT_ROOT = "MY_UI_PROJECT_ROOT"
ENV_REGISTRY_PATH = "MY_UI_REGISTRY"
ENV_TEMPLATES_DIR = "MY_UI_TEMPLATES"
ENV_LOG_LEVEL = "MY_UI_LOG_LEVEL"

# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"
EMOJI_WARNING = "⚠"
EMOJI_PACKAGE = "📦"
EMOJI_FOLDER = "📁"
EMOJI_CLIPBOARD = "📋"
EMOJI_WRENCH = "🔧"
EMOJI_TEST = "🧪"
