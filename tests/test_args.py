import pytest

from rxserver.core.args import CommandlineArgs, parse_args


def test_defaults():
    assert parse_args([]) == CommandlineArgs(":0", "rxserver.toml", "headless", 1920, 1080)


def test_short_options():
    args = parse_args(["-d", ":1", "-c", "other.toml"])
    assert args.display == ":1"
    assert args.config == "other.toml"


def test_long_options():
    args = parse_args(["--mode", "virtual", "--width", "800", "--height", "600"])
    assert (args.mode, args.width, args.height) == ("virtual", 800, 600)


@pytest.mark.parametrize("value", ["-1", "abc", "4294967296"])
def test_invalid_width_exits(value):
    with pytest.raises(SystemExit) as info:
        parse_args(["--width", value])
    assert info.value.code == 2