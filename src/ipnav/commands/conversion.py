"""
Conversion CLI commands.
"""

import click

from ipnav.commands import AliasedGroup
from ipnav.config import CLIConfig
from ipnav.exceptions import IPNavError
from ipnav.ip.codec import (
    cidr_to_mask,
    from_binary_string,
    from_integer,
    parse_address,
    parse_integer,
    parse_mask,
    parse_prefix,
    to_binary_string,
    to_hex,
)
from ipnav.output import fail, print_table

BINARY_FORMAT_HINT = "Expected format: 11000000.10101000.00000001.00000001 or space-separated"


@click.command("to-binary")
@click.argument("address")
@click.option("-s", "--spaces", is_flag=True, help="Use spaces instead of dots as separators")
@click.option("-p", "--plain", is_flag=True, help="Output only the binary value")
@click.pass_obj
def to_binary(config: CLIConfig, address: str, spaces: bool, plain: bool):
    """Convert an IP address to binary representation.

    Examples:
        ipnav to-binary 192.168.1.1
        ipnav bin 10.0.0.1 --spaces --plain
    """
    plain = plain or config.plain
    try:
        binary = to_binary_string(parse_address(address), " " if spaces else ".")
    except IPNavError as e:
        fail(e.message, plain)

    if plain:
        click.echo(binary)
        return

    print_table("Binary Conversion", [("IP Address", address), ("Binary", binary)])


@click.command("from-binary")
@click.argument("binary")
@click.option("-p", "--plain", is_flag=True, help="Output only the IP address")
@click.pass_obj
def from_binary(config: CLIConfig, binary: str, plain: bool):
    """Convert binary to an IP address.

    Groups may be separated by dots or whitespace.

    Examples:
        ipnav from-binary 11000000.10101000.00000001.00000001
        ipnav fbin "00001010 00000000 00000000 00000001"
    """
    plain = plain or config.plain
    try:
        address = from_binary_string(binary)
    except IPNavError as e:
        fail(e.message, plain, hint=BINARY_FORMAT_HINT)

    if plain:
        click.echo(str(address))
        return

    print_table(
        "Binary Conversion",
        [("Binary", to_binary_string(address)), ("IP Address", str(address))],
    )


@click.command("to-integer")
@click.argument("address")
@click.option("-h", "--hex", "show_hex", is_flag=True, help="Display result in hexadecimal")
@click.option("-p", "--plain", is_flag=True, help="Output only the integer value")
@click.pass_obj
def to_integer(config: CLIConfig, address: str, show_hex: bool, plain: bool):
    """Convert an IP address to its 32-bit integer.

    Examples:
        ipnav to-integer 192.168.1.1
        ipnav int 10.0.0.1 --hex
    """
    plain = plain or config.plain
    try:
        parsed = parse_address(address)
    except IPNavError as e:
        fail(e.message, plain)

    if plain:
        click.echo(to_hex(parsed) if show_hex else str(parsed.value))
        return

    rows = [("IP Address", address), ("Integer", str(parsed.value))]
    if show_hex:
        rows.append(("Hexadecimal", to_hex(parsed)))
    print_table("Integer Conversion", rows)


@click.command("from-integer")
@click.argument("number")
@click.option("-p", "--plain", is_flag=True, help="Output only the IP address")
@click.pass_obj
def from_integer_cmd(config: CLIConfig, number: str, plain: bool):
    """Convert a 32-bit integer to an IP address.

    Examples:
        ipnav from-integer 3232235777
        ipnav fint 167772161 --plain
    """
    plain = plain or config.plain
    try:
        address = from_integer(parse_integer(number))
    except IPNavError as e:
        fail(e.message, plain, hint="Expected range: 0 to 4294967295 (2^32 - 1)")

    if plain:
        click.echo(str(address))
        return

    print_table("Integer Conversion", [("Integer", str(address.value)), ("IP Address", str(address))])


@click.command("cidr-to-mask")
@click.argument("prefix")
@click.option("-p", "--plain", is_flag=True, help="Output only the subnet mask")
@click.pass_obj
def cidr_to_mask_cmd(config: CLIConfig, prefix: str, plain: bool):
    """Convert a CIDR prefix to a subnet mask (e.g., 24 -> 255.255.255.0).

    A leading slash is accepted.

    Examples:
        ipnav cidr-to-mask 24
        ipnav c2m /20 --plain
    """
    plain = plain or config.plain
    try:
        mask = cidr_to_mask(parse_prefix(prefix.removeprefix("/")))
    except IPNavError as e:
        fail(e.message, plain)

    if plain:
        click.echo(str(mask))
        return

    print_table(
        "CIDR to Subnet Mask",
        [
            ("CIDR Prefix", f"/{mask.prefix_length}"),
            ("Subnet Mask", str(mask)),
            ("Binary", to_binary_string(mask.as_address())),
        ],
    )


@click.command("mask-to-cidr")
@click.argument("mask")
@click.option("-p", "--plain", is_flag=True, help="Output only the CIDR prefix (without /)")
@click.pass_obj
def mask_to_cidr_cmd(config: CLIConfig, mask: str, plain: bool):
    """Convert a subnet mask to a CIDR prefix (e.g., 255.255.255.0 -> /24).

    Examples:
        ipnav mask-to-cidr 255.255.255.0
        ipnav m2c 255.255.240.0 --plain
    """
    plain = plain or config.plain
    try:
        parsed = parse_mask(mask)
    except IPNavError as e:
        fail(e.message, plain)

    if plain:
        click.echo(str(parsed.prefix_length))
        return

    print_table(
        "Subnet Mask to CIDR",
        [
            ("Subnet Mask", str(parsed)),
            ("CIDR Prefix", f"/{parsed.prefix_length}"),
            ("Binary", to_binary_string(parsed.as_address())),
        ],
    )


@click.command("convert")
@click.argument("address")
@click.option("-p", "--plain", is_flag=True, help="Output tab-separated values: decimal binary integer hex")
@click.pass_obj
def convert(config: CLIConfig, address: str, plain: bool):
    """Show all representations of an IP address.

    Examples:
        ipnav convert 192.168.1.1
        ipnav cvt 10.0.0.1 --plain
    """
    plain = plain or config.plain
    try:
        parsed = parse_address(address)
    except IPNavError as e:
        fail(e.message, plain)

    binary = to_binary_string(parsed)
    integer = str(parsed.value)
    hex_value = to_hex(parsed)

    # Tab separated for easy parsing
    if plain:
        click.echo("\t".join([str(parsed), binary, integer, hex_value]))
        return

    print_table(
        "IP Address Representations",
        [
            ("Decimal", str(parsed)),
            ("Binary", binary),
            ("Integer", integer),
            ("Hexadecimal", hex_value),
        ],
    )


def register(group: AliasedGroup) -> None:
    """Register conversion commands and their aliases."""
    group.add_command(to_binary, aliases=["bin"])
    group.add_command(from_binary, aliases=["fbin"])
    group.add_command(to_integer, aliases=["int"])
    group.add_command(from_integer_cmd, aliases=["fint"])
    group.add_command(cidr_to_mask_cmd, aliases=["c2m"])
    group.add_command(mask_to_cidr_cmd, aliases=["m2c"])
    group.add_command(convert, aliases=["cvt"])
