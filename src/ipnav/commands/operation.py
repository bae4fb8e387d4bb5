"""
Address operation CLI commands: classification, stepping, ranges and comparison.
"""

from itertools import islice

import click
from rich.console import Console

from ipnav.commands import AliasedGroup
from ipnav.config import CLIConfig
from ipnav.exceptions import IPNavError
from ipnav.ip.codec import parse_address
from ipnav.ip.sequence import (
    address_range,
    compare as compare_addresses,
    next_address,
    previous_address,
    private_block,
    range_to_cidrs,
    special_purpose,
)
from ipnav.ip.subnet import calculate_subnet
from ipnav.output import fail, print_table


def _parse_count(text: str, config: CLIConfig, plain: bool) -> int:
    try:
        count = int(text)
    except ValueError:
        fail(f"Invalid count '{text}': expected a whole number", plain)
    if not 1 <= count <= config.max_step_count:
        fail(f"Count must be between 1 and {config.max_step_count}", plain)
    return count


@click.command("classify")
@click.argument("address")
@click.option("-p", "--plain", is_flag=True, help="Output only 'public' or 'private'")
@click.pass_obj
def classify(config: CLIConfig, address: str, plain: bool):
    """Classify an IP address as public or private (RFC 1918).

    Examples:
        ipnav classify 8.8.8.8
        ipnav class 192.168.1.1 --plain
    """
    plain = plain or config.plain
    try:
        parsed = parse_address(address)
    except IPNavError as e:
        fail(e.message, plain)

    block = private_block(parsed)

    if plain:
        click.echo("private" if block else "public")
        return

    rows = [
        ("IP Address", str(parsed)),
        ("Type", "Private IP" if block else "Public IP"),
    ]
    if block:
        info = calculate_subnet(block)
        rows.append(("Standard", "RFC 1918 (Private Network)"))
        rows.append(("Range", f"{info.network_address} - {info.broadcast_address}"))

    labels = special_purpose(parsed)
    if labels:
        rows.append(("Notes", ", ".join(labels)))

    print_table("IP Classification", rows)


@click.command("next")
@click.argument("address")
@click.option("-n", "--count", default="1", show_default=True, help="Get N next IP addresses")
@click.option("-p", "--plain", is_flag=True, help="Output plain IP list (one per line)")
@click.pass_obj
def next_cmd(config: CLIConfig, address: str, count: str, plain: bool):
    """Get the next IP address in sequence.

    Stepping past 255.255.255.255 is an error.

    Examples:
        ipnav next 192.168.1.1
        ipnav next 10.0.0.254 -n 5 --plain
    """
    plain = plain or config.plain
    steps = _parse_count(count, config, plain)

    results = []
    try:
        current = parse_address(address)
        for _ in range(steps):
            current = next_address(current)
            results.append(current)
    except IPNavError as e:
        fail(e.message, plain)

    if plain:
        for ip in results:
            click.echo(str(ip))
        return

    console = Console()
    console.print(f"[cyan]Current:[/cyan] {address}")
    for i, ip in enumerate(results, start=1):
        console.print(f"[cyan]Next {i}:[/cyan]  {ip}")


@click.command("previous")
@click.argument("address")
@click.option("-n", "--count", default="1", show_default=True, help="Get N previous IP addresses")
@click.option("-p", "--plain", is_flag=True, help="Output plain IP list (one per line)")
@click.pass_obj
def previous_cmd(config: CLIConfig, address: str, count: str, plain: bool):
    """Get the previous IP address in sequence.

    Stepping below 0.0.0.0 is an error.

    Examples:
        ipnav previous 192.168.1.10
        ipnav prev 10.0.1.0 -n 3 --plain
    """
    plain = plain or config.plain
    steps = _parse_count(count, config, plain)

    results = []
    try:
        current = parse_address(address)
        for _ in range(steps):
            current = previous_address(current)
            results.append(current)
    except IPNavError as e:
        fail(e.message, plain)

    if plain:
        for ip in results:
            click.echo(str(ip))
        return

    # Ascending order, furthest address first
    console = Console()
    for i, ip in reversed(list(enumerate(results, start=1))):
        console.print(f"[cyan]Prev {i}:[/cyan] {ip}")
    console.print(f"[cyan]Current:[/cyan] {address}")


@click.command("range")
@click.argument("start")
@click.argument("end")
@click.option("-c", "--count", "count_only", is_flag=True, help="Only show the count of IPs in range")
@click.option("-l", "--limit", type=int, help="Limit formatted output to N addresses")
@click.option("--cidrs", is_flag=True, help="Show the minimal CIDR blocks covering the range")
@click.option("-p", "--plain", is_flag=True, help="Output plain IP list (one per line, no formatting)")
@click.pass_obj
def range_cmd(
    config: CLIConfig,
    start: str,
    end: str,
    count_only: bool,
    limit: int | None,
    cidrs: bool,
    plain: bool,
):
    """Generate all IP addresses between start and end (inclusive).

    Plain output streams every address, which suits piping into
    scanners such as nmap.

    Examples:
        ipnav range 192.168.1.1 192.168.1.10
        ipnav range 10.0.0.0 10.0.255.255 --count
        ipnav range 10.0.0.0 10.0.3.255 --cidrs
        ipnav range 192.168.1.1 192.168.1.254 --plain
    """
    plain = plain or config.plain
    limit = config.range_limit if limit is None else limit
    if limit < 1:
        fail("Limit must be at least 1", plain)

    try:
        first = parse_address(start)
        last = parse_address(end)
        addresses = address_range(first, last)
        blocks = range_to_cidrs(first, last) if cidrs else []
    except IPNavError as e:
        fail(e.message, plain)

    total = len(addresses)

    if cidrs:
        if plain:
            for block in blocks:
                click.echo(block)
            return
        console = Console()
        console.print(f"[cyan]{start} - {end}[/cyan] ({total:,} addresses) as {len(blocks)} CIDR block(s):\n")
        for block in blocks:
            console.print(block)
        return

    if count_only:
        if plain:
            click.echo(str(total))
            return
        print_table(
            "IP Range Information",
            [("Start", start), ("End", end), ("Count", f"{total:,} addresses")],
        )
        return

    if plain:
        for ip in addresses:
            click.echo(str(ip))
        return

    console = Console()
    if total > limit:
        console.print(f"[yellow]Range contains {total:,} IPs. Showing first {limit}:[/yellow]\n")
    else:
        console.print(f"[cyan]IP Range ({total:,} addresses):[/cyan]\n")

    for idx, ip in enumerate(islice(addresses, limit), start=1):
        console.print(f"{idx:>3}. {ip}")

    if total > limit:
        console.print(f"\n[dim]... and {total - limit:,} more addresses[/dim]")
        console.print("[dim]Tip: Use --count to see total or --limit N to show more[/dim]")


@click.command("compare")
@click.argument("ip1")
@click.argument("ip2")
@click.option("-p", "--plain", is_flag=True, help="Output -1 for less, 0 for equal, 1 for greater")
@click.pass_obj
def compare_cmd(config: CLIConfig, ip1: str, ip2: str, plain: bool):
    """Compare two IP addresses numerically.

    Examples:
        ipnav compare 10.0.0.1 9.255.255.255
        ipnav cmp 192.168.1.1 192.168.1.1 --plain
    """
    plain = plain or config.plain
    try:
        result = compare_addresses(parse_address(ip1), parse_address(ip2))
    except IPNavError as e:
        fail(e.message, plain)

    if plain:
        click.echo(str(result))
        return

    if result < 0:
        outcome = f"{ip1} < {ip2} (IP 1 is smaller)"
    elif result > 0:
        outcome = f"{ip1} > {ip2} (IP 1 is larger)"
    else:
        outcome = f"{ip1} = {ip2} (IPs are equal)"

    print_table("IP Comparison", [("IP 1", ip1), ("IP 2", ip2), ("Result", outcome)])


def register(group: AliasedGroup) -> None:
    """Register operation commands and their aliases."""
    group.add_command(classify, aliases=["class"])
    group.add_command(next_cmd)
    group.add_command(previous_cmd, aliases=["prev"])
    group.add_command(range_cmd)
    group.add_command(compare_cmd, aliases=["cmp"])
