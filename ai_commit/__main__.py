"""Allow running ai-commit with ``python -m ai_commit``."""

from ai_commit.cli import app

if __name__ == "__main__":
    app()
