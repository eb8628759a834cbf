"""Main entry point for the wgs command-line interface."""

from waivern_graphql_signature.cli import app

if __name__ == "__main__":
    app()
