"""Command line arguments."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

_U32_MAX = 0xFFFFFFFF


@dataclass
class CommandlineArgs:
    """Options the server is started with."""

    display: str = ":0"
    config: str = "rxserver.toml"
    mode: str = "headless"
    width: int = 1920
    height: int = 1080


def _u32(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from None
    if not 0 <= value <= _U32_MAX:
        raise argparse.ArgumentTypeError(f"{value} is out of range")
    return value


def _parser() -> argparse.ArgumentParser:
    defaults = CommandlineArgs()
    parser = argparse.ArgumentParser(
        prog="rxserver", description="RX Server - Rust X11 Compatible Server"
    )
    parser.add_argument("-d", "--display", default=defaults.display)
    parser.add_argument("-c", "--config", default=defaults.config)
    parser.add_argument(
        "--mode", default=defaults.mode, help="Display mode: headless, virtual, native"
    )
    parser.add_argument(
        "--width", type=_u32, default=defaults.width,
        help="Display width (for virtual/native mode)",
    )
    parser.add_argument(
        "--height", type=_u32, default=defaults.height,
        help="Display height (for virtual/native mode)",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> CommandlineArgs:
    """Parse *argv* (or sys.argv when None); exits on invalid input."""
    namespace = _parser().parse_args(argv)
    return CommandlineArgs(**vars(namespace))