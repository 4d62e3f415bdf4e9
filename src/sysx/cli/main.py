"""
sysx CLI Main Entry Point

Command-line interface to the sysx codecs and utilities.
"""

import sys

import click

from ..core.exceptions import SysxError
from ..core.logging import get_logger, setup_logging
from ..io.cmd import run as run_command
from ..math import hex as hexadecimal
from ..math.radix import BINARY, HEX, RadixCodec
from ..net import is_valid_ipv4, is_valid_ipv6, str_to_ipv4, str_to_ipv6
from ..time.sleep import SleepTime, safe_sleep
from ..utils.rand import random_bool, random_string, random_value

logger = get_logger(__name__)


def _fail(error: SysxError) -> None:
    logger.debug("Command failed: %s", error)
    click.echo(f"✗ {error.message}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version="0.1.0")
@click.option("--log-level", default=None, help="Logging level (TRACE to FATAL)")
def cli(log_level: str):
    """
    sysx - general-purpose system utilities

    Binary/hex codecs, address validation, sleep, commands and randomness.
    """
    try:
        setup_logging(log_level=log_level)
    except SysxError as e:
        _fail(e)


def _codec_commands(group: click.Group, codec: RadixCodec) -> None:
    """Attach the shared codec subcommands to ``group``."""

    @group.command("encode")
    @click.argument("text")
    def encode(text: str):
        """Encode TEXT as a digit string."""
        click.echo(codec.encode(text))

    @group.command("decode")
    @click.argument("digits")
    def decode(digits: str):
        """Decode DIGITS (noise and separators ignored) into text."""
        try:
            click.echo(codec.decode(digits))
        except SysxError as e:
            _fail(e)

    @group.command("format")
    @click.argument("digits")
    def format_digits(digits: str):
        """Regroup DIGITS into space-separated bytes."""
        try:
            click.echo(codec.format(digits))
        except SysxError as e:
            _fail(e)

    @group.command("clean")
    @click.argument("digits")
    def clean(digits: str):
        """Strip everything that is not a digit from DIGITS."""
        click.echo(codec.clean(digits))

    @group.command("check")
    @click.argument("digits")
    @click.option("--strict", is_flag=True, help="Require whole bytes")
    def check(digits: str, strict: bool):
        """Validate DIGITS; exit status 1 if invalid."""
        valid = codec.check_strict(digits) if strict else codec.check(digits)
        if valid:
            click.echo("✓ valid")
        else:
            click.echo("✗ invalid", err=True)
            sys.exit(1)


@cli.group("bin")
def bin_group():
    """Binary (base-2) codec commands."""
    pass


@cli.group("hex")
def hex_group():
    """Hexadecimal (base-16) codec commands."""
    pass


_codec_commands(bin_group, BINARY)
_codec_commands(hex_group, HEX)


@hex_group.command("upper")
@click.argument("digits")
def hex_upper(digits: str):
    """Clean DIGITS and print them in uppercase."""
    click.echo(hexadecimal.to_uppercase(digits))


@hex_group.command("lower")
@click.argument("digits")
def hex_lower(digits: str):
    """Clean DIGITS and print them in lowercase."""
    click.echo(hexadecimal.to_lowercase(digits))


@cli.group()
def net():
    """Socket address commands."""
    pass


@net.command("check")
@click.argument("address")
def net_check(address: str):
    """
    Validate an IPv4 (IP:PORT) or IPv6 ([IP]:PORT) socket address.

    Example:
        sysx net check "[::1]:8080"
    """
    if is_valid_ipv4(address):
        click.echo(f"✓ IPv4 {str_to_ipv4(address)}")
    elif is_valid_ipv6(address):
        click.echo(f"✓ IPv6 {str_to_ipv6(address)}")
    else:
        click.echo(f"✗ Invalid socket address: {address}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("duration")
def sleep(duration: str):
    """
    Sleep for DURATION (e.g. 500ms, 2s, 1.5m).

    Example:
        sysx sleep 250ms
    """
    try:
        safe_sleep(SleepTime.parse(duration))
    except SysxError as e:
        _fail(e)


@cli.command()
@click.argument("command_line")
@click.option("--timeout", "-t", type=float, default=None, help="Timeout in seconds")
def run(command_line: str, timeout: float):
    """
    Run COMMAND_LINE and print its output.

    Example:
        sysx run "echo hello"
    """
    try:
        result = run_command(command_line, timeout=timeout)
    except SysxError as e:
        _fail(e)
        return
    sys.exit(result.returncode)


@cli.group()
def rand():
    """Random value commands."""
    pass


@rand.command("string")
@click.argument("length", type=int)
@click.option("--charset", "-c", default=None, help="Characters to draw from")
def rand_string(length: int, charset: str):
    """Print a random string of LENGTH characters."""
    try:
        click.echo(random_string(length, charset))
    except SysxError as e:
        _fail(e)


@rand.command("int")
@click.argument("low", type=int)
@click.argument("high", type=int)
def rand_int(low: int, high: int):
    """Print a random integer between LOW and HIGH (inclusive)."""
    click.echo(random_value(low, high))


@rand.command("bool")
def rand_bool():
    """Print true or false."""
    click.echo(str(random_bool()).lower())


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
