MANIFEST_FILE = "package.json"
METADATA_DIR = ".github"

INSTALL_COMMAND = "yarn install"
PRODUCTION_INSTALL_COMMAND = "yarn install --production"
CLEANUP_COMMAND = f"rm -rdf {METADATA_DIR}"
COMMAND_SEPARATOR = "&&"

# checked in order, first hit wins
BUILD_SCRIPT_NAMES = (
    "build",
    "production",
    "prod",
)

DEFAULT_COMMIT_MESSAGE = "feat: Build for release"
DEFAULT_COMMIT_NAME = "GitHub Action"
DEFAULT_COMMIT_EMAIL = "example@example.com"

# event name -> payload actions that trigger a release build
TARGET_EVENTS = {
    "release": ("published",),
}

GITHUB_API_URL = "https://api.github.com"
REPOSITORY_CONFIG_FILE = ".github/config.yml"
