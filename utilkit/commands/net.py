"""
Network Commands

Commands:
- /net ip <text>: Is the text an IP address?
- /net cidr <text>: Is the text CIDR notation?
- /net classify <text>: IP address, CIDR, or neither.
- /net addr <addr>: Is the text a valid listen address (":8080", "127.0.0.1:80")?
- /net methods <method>...: Validate and normalize HTTP methods.
"""

from rich.console import Console
import click
from utilkit.commands.base import RichGroup, RichCommand, rich_help, value_print, error_print
from utilkit.lib.network import (
    addr_isValid,
    cidr_isValid,
    httpMethods_normalize,
    ip_isValid,
    ipOrCidr_classify,
)
from utilkit.models.dataModel import IPClassification

console: Console = Console()


@click.group(
    cls=RichGroup,
    short_help="Validate addresses and HTTP methods",
    help="""
    Network Helpers

    Validate IP addresses, CIDRs, listen addresses and HTTP methods.
    """,
)
def net() -> None:
    """
    Root group for network commands.
    """
    pass


net: click.Group = net


@net.command(
    cls=RichCommand,
    help=rich_help(
        command="ip",
        description="Check whether the text is an IPv4 or IPv6 address.",
        usage="/net ip <text>",
        args={"<text>": "Candidate address."},
    ),
)
@click.argument("text", type=str)
def ip(text: str) -> None:
    value_print(console, text, "valid" if ip_isValid(text) else "invalid")


@net.command(
    cls=RichCommand,
    help=rich_help(
        command="cidr",
        description="Check whether the text is CIDR notation.",
        usage="/net cidr <text>",
        args={"<text>": "Candidate CIDR, e.g. 10.0.0.0/8."},
    ),
)
@click.argument("text", type=str)
def cidr(text: str) -> None:
    value_print(console, text, "valid" if cidr_isValid(text) else "invalid")


@net.command(
    cls=RichCommand,
    help=rich_help(
        command="classify",
        description="Report whether the text is an IP address, a CIDR, or neither.",
        usage="/net classify <text>",
        args={"<text>": "Candidate address or CIDR."},
    ),
)
@click.argument("text", type=str)
def classify(text: str) -> None:
    kind: IPClassification = ipOrCidr_classify(text)
    if kind.isIP:
        value_print(console, text, "IP address")
    elif kind.isCIDR:
        value_print(console, text, "CIDR")
    else:
        value_print(console, text, "neither an IP address nor a CIDR")


@net.command(
    cls=RichCommand,
    help=rich_help(
        command="addr",
        description="Check a listen address of the form :<port> or <IP>:<port>.",
        usage="/net addr <addr>",
        args={"<addr>": "Address such as :8080 or 127.0.0.1:80."},
    ),
)
@click.argument("addr", type=str)
def addr(addr: str) -> None:
    value_print(console, addr, "valid" if addr_isValid(addr) else "invalid")


@net.command(
    cls=RichCommand,
    help=rich_help(
        command="methods",
        description="Validate HTTP methods and print them uppercased.",
        usage="/net methods <method>...",
        args={"<method>": "One or more HTTP methods, any case."},
    ),
)
@click.argument("methods", nargs=-1, required=True)
def methods(methods: tuple[str, ...]) -> None:
    try:
        value_print(console, "methods", " ".join(httpMethods_normalize(*methods)))
    except ValueError as e:
        error_print(console, "net methods", e)
