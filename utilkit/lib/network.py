"""
Network address and HTTP helpers.

Features:
- IP address and CIDR validation
- host:port splitting and listen address validation
- Client IP extraction from proxy headers
- HTTP method validation and normalization
"""

import ipaddress
from typing import Final, Mapping
from utilkit.models.dataModel import IPClassification, MethodValidation

HTTP_METHODS: Final[frozenset[str]] = frozenset(
    {"GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "CONNECT", "OPTIONS", "TRACE"}
)


def ip_isValid(text: str) -> bool:
    """Check if the input is a valid IPv4 or IPv6 address (no zone)."""
    if "%" in text:
        return False
    try:
        ipaddress.ip_address(text)
    except ValueError:
        return False
    return True


def cidr_isValid(text: str) -> bool:
    """Check if the input is valid CIDR notation, e.g. 10.0.0.1/8."""
    address, slash, prefix = text.partition("/")
    if not slash or not prefix.isdigit() or not ip_isValid(address):
        return False
    try:
        ipaddress.ip_interface(text)
    except ValueError:
        return False
    return True


def ipOrCidr_classify(text: str) -> IPClassification:
    """Determine whether the input is an IP address or a CIDR."""
    if ip_isValid(text):
        return IPClassification(isIP=True, isCIDR=False)
    if cidr_isValid(text):
        return IPClassification(isIP=False, isCIDR=True)
    return IPClassification(isIP=False, isCIDR=False)


def hostPort_split(addr: str) -> tuple[str, str]:
    """Split "host:port" or "[host]:port" into host and port.

    Raises:
        ValueError: If the address has no port or is malformed
    """
    if addr.startswith("["):
        host, bracket, rest = addr[1:].partition("]")
        if not bracket:
            raise ValueError(f"missing ']' in address: {addr}")
        if not rest.startswith(":"):
            raise ValueError(f"missing port in address: {addr}")
        port: str = rest[1:]
        if ":" in port:
            raise ValueError(f"too many colons in address: {addr}")
        return host, port

    host, colon, port = addr.rpartition(":")
    if not colon:
        raise ValueError(f"missing port in address: {addr}")
    if ":" in host:
        raise ValueError(f"too many colons in address: {addr}")
    if "[" in host or "]" in host:
        raise ValueError(f"unexpected bracket in address: {addr}")
    return host, port


def addr_isValid(addr: str) -> bool:
    """Check a listen address of the form ":<port>" or "<IP>:<port>".

    The port must be in 1-65535.
    """
    try:
        host, port = hostPort_split(addr)
    except ValueError:
        return False
    if host and not ip_isValid(host):
        return False
    if not (port.isascii() and port.isdigit()):
        return False
    return 1 <= int(port) <= 65535


def realIP_get(headers: Mapping[str, str], remote_addr: str) -> str:
    """Extract the client IP address of a request.

    Checks X-Forwarded-For (first entry), then X-Real-IP, then the host part
    of the remote address, then the raw remote address.

    Args:
        headers: Request headers; names are matched case-insensitively
        remote_addr: Peer address as "host:port"

    Returns:
        The best guess at the client IP
    """
    lowered: dict[str, str] = {name.lower(): value for name, value in headers.items()}

    forwarded: str = lowered.get("x-forwarded-for", "")
    if forwarded:
        return forwarded.split(",")[0].strip()

    real_ip: str = lowered.get("x-real-ip", "")
    if real_ip:
        return real_ip.strip()

    try:
        host, _ = hostPort_split(remote_addr)
        return host
    except ValueError:
        return remote_addr


def httpMethods_validate(*methods: str) -> MethodValidation:
    """Check that every method is a standard HTTP method (case-insensitive).

    Returns:
        MethodValidation with the invalid methods in their original spelling
    """
    invalid: list[str] = [m for m in methods if m.upper() not in HTTP_METHODS]
    return MethodValidation(valid=not invalid, invalid=invalid)


def httpMethods_normalize(*methods: str) -> list[str]:
    """Uppercase and validate HTTP methods.

    Raises:
        ValueError: If any method is not a standard HTTP method
    """
    result: MethodValidation = httpMethods_validate(*methods)
    if not result.valid:
        raise ValueError(f"invalid HTTP methods: {result.invalid}")
    return [m.upper() for m in methods]
