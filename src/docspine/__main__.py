"""``python -m docspine`` — same as the ``docspine`` console script."""

from docspine.cli.app import app

if __name__ == "__main__":
    app()
