"""Allow running the converter with ``python -m webpconvert``."""

from webpconvert.cli.main import run

if __name__ == "__main__":
    run()
