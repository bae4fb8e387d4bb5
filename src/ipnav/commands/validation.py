"""
Validation CLI commands.

Exit status doubles as the answer: 0 for valid input, 1 for invalid.
"""

from typing import Callable

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ipnav.commands import AliasedGroup
from ipnav.config import CLIConfig
from ipnav.exceptions import IPNavError
from ipnav.ip.codec import parse_address, parse_cidr, parse_mask


def validation_error(parser: Callable[[str], object], text: str) -> IPNavError | None:
    """Run a parser and return its error instead of raising it."""
    try:
        parser(text)
    except IPNavError as e:
        return e
    return None


def _report(error: IPNavError | None, plain: bool, label: str, value: str, expected: str) -> None:
    if plain:
        click.echo("invalid" if error else "valid")
        raise SystemExit(1 if error else 0)

    if error is None:
        Console().print(f"[green]Valid[/green] {label}: {escape(value)}")
        return

    console = Console(stderr=True)
    console.print(f"[red]Invalid[/red] {label}: {escape(value)}")
    console.print(f"[dim]{escape(error.message)}[/dim]")
    console.print(f"[dim]Expected format: {escape(expected)}[/dim]")
    raise SystemExit(1)


@click.command("validate-ip")
@click.argument("address")
@click.option("-p", "--plain", is_flag=True, help="Output only 'valid' or 'invalid'")
@click.pass_obj
def validate_ip(config: CLIConfig, address: str, plain: bool):
    """Validate an IPv4 address.

    Examples:
        ipnav validate-ip 192.168.1.1
        ipnav vip 256.0.0.1 --plain
    """
    _report(
        validation_error(parse_address, address),
        plain or config.plain,
        "IP address",
        address,
        "xxx.xxx.xxx.xxx (0-255 for each octet)",
    )


@click.command("validate-mask")
@click.argument("mask")
@click.option("-p", "--plain", is_flag=True, help="Output only 'valid' or 'invalid'")
@click.pass_obj
def validate_mask(config: CLIConfig, mask: str, plain: bool):
    """Validate a subnet mask.

    Examples:
        ipnav validate-mask 255.255.255.0
        ipnav vmask 255.0.255.0
    """
    _report(
        validation_error(parse_mask, mask),
        plain or config.plain,
        "subnet mask",
        mask,
        "valid contiguous binary mask (e.g., 255.255.255.0)",
    )


@click.command("validate-cidr")
@click.argument("cidr")
@click.option("-p", "--plain", is_flag=True, help="Output only 'valid' or 'invalid'")
@click.pass_obj
def validate_cidr(config: CLIConfig, cidr: str, plain: bool):
    """Validate CIDR notation (e.g., 192.168.1.0/24).

    Examples:
        ipnav validate-cidr 10.0.0.0/8
        ipnav vcidr 10.0.0.0/33
    """
    _report(
        validation_error(parse_cidr, cidr),
        plain or config.plain,
        "CIDR notation",
        cidr,
        "xxx.xxx.xxx.xxx/yy (IP address with /0-32 prefix)",
    )


@click.command("validate-batch")
@click.argument("addresses", nargs=-1, required=True)
@click.option("-q", "--quiet", is_flag=True, help="Only show invalid addresses")
@click.option("-p", "--plain", is_flag=True, help="Output only valid IP addresses, one per line")
@click.pass_obj
def validate_batch(config: CLIConfig, addresses: tuple[str, ...], quiet: bool, plain: bool):
    """Validate multiple IP addresses at once.

    Exits with status 1 if any address is invalid.

    Examples:
        ipnav validate-batch 8.8.8.8 192.168.1.1 10.0.0.300
        ipnav vbatch 1.1.1.1 bad --quiet
    """
    results = [(address, validation_error(parse_address, address)) for address in addresses]
    invalid_count = sum(1 for _, error in results if error)
    valid_count = len(results) - invalid_count

    if plain or config.plain:
        for address, error in results:
            if error is None:
                click.echo(address)
        raise SystemExit(1 if invalid_count else 0)

    console = Console()

    table = Table(title="IP Address Validation", box=None)
    table.add_column("Address", style="white")
    table.add_column("Status", style="white")
    table.add_column("Detail", style="dim")

    for address, error in results:
        if error is None and not quiet:
            table.add_row(escape(address), "[green]Valid[/green]", "")
        elif error is not None:
            table.add_row(escape(address), "[red]Invalid[/red]", escape(error.message))

    if table.row_count:
        console.print(table)
    console.print(
        f"\n[cyan]Summary:[/cyan] {valid_count} valid, {invalid_count} invalid ({len(results)} total)"
    )
    raise SystemExit(1 if invalid_count else 0)


def register(group: AliasedGroup) -> None:
    """Register validation commands and their aliases."""
    group.add_command(validate_ip, aliases=["vip"])
    group.add_command(validate_mask, aliases=["vmask"])
    group.add_command(validate_cidr, aliases=["vcidr"])
    group.add_command(validate_batch, aliases=["vbatch"])
