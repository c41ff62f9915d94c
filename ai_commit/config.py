"""Default values and constants for ai-commit.

User settings are persisted in <user config dir>/ai-commit/config.toml.
Use 'ai-commit config' commands to modify them.
"""

APP_NAME = "ai-commit"
CONFIG_FILE_NAME = "config.toml"

# Environment variable that redirects the config directory
CONFIG_DIR_ENV_VAR = "AI_COMMIT_CONFIG_DIR"

# Environment variable used when no API key is stored in config.toml
API_KEY_ENV_VAR = "AI_COMMIT_API_KEY"


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================
# These are used when config.toml doesn't exist or omits a field

DEFAULT_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_LANGUAGE = "en"
DEFAULT_TIMEOUT = 60.0
DEFAULT_MAX_DIFF_CHARS = 50000
