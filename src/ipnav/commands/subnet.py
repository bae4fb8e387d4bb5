"""
Subnet CLI commands.
"""

import click
from rich.console import Console
from rich.markup import escape

from ipnav.commands import AliasedGroup
from ipnav.config import CLIConfig
from ipnav.exceptions import IPNavError
from ipnav.ip.codec import (
    IPv4Address,
    SubnetMask,
    cidr_to_mask,
    parse_address,
    parse_cidr,
    parse_mask,
    parse_prefix,
)
from ipnav.ip.subnet import broadcast_address, is_in_subnet, network_address, subnet_info
from ipnav.output import fail, print_table


def _resolve_subnet(
    address: str, mask: str | None, cidr: str | None, plain: bool
) -> tuple[IPv4Address, SubnetMask]:
    """Work out the address and mask from the accepted argument forms."""
    if "/" in address:
        if mask or cidr is not None:
            fail("Give either ADDRESS/PREFIX or a separate mask, not both", plain)
        parsed, prefix = parse_cidr(address)
        return parsed, cidr_to_mask(prefix)

    parsed = parse_address(address)
    if cidr is not None:
        if mask:
            fail("Give either a subnet mask or --cidr, not both", plain)
        return parsed, cidr_to_mask(parse_prefix(cidr.removeprefix("/")))
    if mask:
        return parsed, parse_mask(mask)
    fail("Please provide either a subnet mask or use --cidr flag", plain)


@click.command("subnet-info")
@click.argument("address")
@click.argument("mask", required=False)
@click.option("-c", "--cidr", help="Use CIDR prefix instead of subnet mask")
@click.option(
    "-p", "--plain", is_flag=True,
    help="Output tab-separated values: network broadcast first last total usable",
)
@click.pass_obj
def subnet_info_cmd(config: CLIConfig, address: str, mask: str | None, cidr: str | None, plain: bool):
    """Get comprehensive subnet information.

    ADDRESS may also be given in CIDR notation.

    Examples:
        ipnav subnet-info 192.168.1.100 255.255.255.0
        ipnav sinfo 10.0.0.1 --cidr 8
        ipnav sinfo 172.16.5.4/20 --plain
    """
    plain = plain or config.plain
    try:
        parsed, subnet_mask = _resolve_subnet(address, mask, cidr, plain)
        info = subnet_info(parsed, subnet_mask)
    except IPNavError as e:
        fail(e.message, plain)

    if plain:
        click.echo("\t".join([
            str(info.network_address),
            str(info.broadcast_address),
            str(info.first_usable_host),
            str(info.last_usable_host),
            str(info.total_hosts),
            str(info.usable_hosts),
        ]))
        return

    print_table(
        f"Subnet Information: {info.cidr}",
        [
            ("IP Address", str(info.address)),
            ("Subnet Mask", str(info.subnet_mask)),
            ("Prefix Length", f"/{info.prefix_length}"),
            ("Wildcard Mask", str(info.host_mask)),
            ("Network Address", str(info.network_address)),
            ("Broadcast Address", str(info.broadcast_address)),
            ("First Usable", str(info.first_usable_host)),
            ("Last Usable", str(info.last_usable_host)),
            ("Total Hosts", f"{info.total_hosts:,}"),
            ("Usable Hosts", f"{info.usable_hosts:,}"),
        ],
    )


@click.command("network-address")
@click.argument("address")
@click.argument("mask")
@click.option("-p", "--plain", is_flag=True, help="Output only the network address")
@click.pass_obj
def network_address_cmd(config: CLIConfig, address: str, mask: str, plain: bool):
    """Calculate the network address from IP and subnet mask.

    Examples:
        ipnav network-address 192.168.1.100 255.255.255.0
    """
    plain = plain or config.plain
    try:
        result = network_address(parse_address(address), parse_mask(mask))
    except IPNavError as e:
        fail(e.message, plain)

    if plain:
        click.echo(str(result))
        return

    Console().print(f"[cyan]Network Address:[/cyan] {result}")


@click.command("broadcast-address")
@click.argument("address")
@click.argument("mask")
@click.option("-p", "--plain", is_flag=True, help="Output only the broadcast address")
@click.pass_obj
def broadcast_address_cmd(config: CLIConfig, address: str, mask: str, plain: bool):
    """Calculate the broadcast address from IP and subnet mask.

    Examples:
        ipnav broadcast-address 192.168.1.100 255.255.255.0
    """
    plain = plain or config.plain
    try:
        result = broadcast_address(parse_address(address), parse_mask(mask))
    except IPNavError as e:
        fail(e.message, plain)

    if plain:
        click.echo(str(result))
        return

    Console().print(f"[cyan]Broadcast Address:[/cyan] {result}")


@click.command("in-subnet")
@click.argument("address")
@click.argument("network")
@click.argument("mask")
@click.option("-p", "--plain", is_flag=True, help="Output only 'yes' or 'no'")
@click.pass_obj
def in_subnet(config: CLIConfig, address: str, network: str, mask: str, plain: bool):
    """Check if an IP address belongs to a subnet.

    Exit status is 0 when it does and 1 when it does not.

    Examples:
        ipnav in-subnet 192.168.1.50 192.168.1.0 255.255.255.0
        ipnav insubnet 10.1.2.3 10.0.0.0 255.255.0.0 --plain
    """
    plain = plain or config.plain
    try:
        result = is_in_subnet(parse_address(address), parse_address(network), parse_mask(mask))
    except IPNavError as e:
        fail(e.message, plain)

    if plain:
        click.echo("yes" if result else "no")
    elif result:
        Console().print(
            f"[green]Yes[/green] - {escape(address)} belongs to subnet {escape(network)}/{escape(mask)}"
        )
    else:
        Console().print(
            f"[red]No[/red] - {escape(address)} does NOT belong to subnet {escape(network)}/{escape(mask)}"
        )
    raise SystemExit(0 if result else 1)


def register(group: AliasedGroup) -> None:
    """Register subnet commands and their aliases."""
    group.add_command(subnet_info_cmd, aliases=["sinfo"])
    group.add_command(network_address_cmd, aliases=["netaddr"])
    group.add_command(broadcast_address_cmd, aliases=["bcast"])
    group.add_command(in_subnet, aliases=["insubnet"])
