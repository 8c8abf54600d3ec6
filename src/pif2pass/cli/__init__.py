"""pif2pass CLI layer."""

__all__ = ["cli"]


def cli() -> None:
    """Lazy import and run the CLI."""
    from pif2pass.cli.main import main

    main()
