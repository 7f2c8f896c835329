"""Entry point: ``python -m src``."""

from src.api.main import run

if __name__ == "__main__":
    run()
