"""Main entry point for quiz-client CLI."""

from quizclient.cli.app import app


def main():
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    main()
