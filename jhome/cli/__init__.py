"""CLI entrypoint exposing ``main`` for console_scripts."""


def main() -> None:  # pragma: no cover - thin wrapper
    from jhome.cli.__main__ import cli

    cli()


__all__ = ["main"]
