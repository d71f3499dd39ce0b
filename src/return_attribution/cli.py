"""CLI dispatcher with subcommands for return_attribution."""

from __future__ import annotations

import argparse


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="attribution",
        description="Backtest return attribution toolkit",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    from src.return_attribution.commands import attribute

    commands: dict[str, object] = {}
    for mod in [attribute]:
        mod.register(subparsers)
        commands[mod.COMMAND_NAME] = mod.run

    args = parser.parse_args(argv)
    return commands[args.command](args)


if __name__ == "__main__":
    raise SystemExit(main())
