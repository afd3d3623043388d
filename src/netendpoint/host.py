"""Handling of the host part of network endpoints."""

from __future__ import annotations

import ipaddress
import string
from typing import Self

from .errors import InvalidAddressError
from .types import IPAddress

_DOMAIN_CHARACTERS = frozenset(string.ascii_letters + string.digits + "-.")
"""The characters permitted in a domain name."""


class IPHost:
    """A host given as a literal IPv4 or IPv6 address."""

    __slots__ = {
        "_address": "The address.",
    }

    _address: IPAddress

    def __init__(self: Self, address: IPAddress) -> None:
        """
        Construct a new IPHost.

        :param address: The address.
        """
        self._address = address

    @property
    def address(self: Self) -> IPAddress:
        """The address."""
        return self._address

    def authority_text(self: Self) -> str:
        """
        Format the host for use in an authority alongside a port.

        IPv6 literals are bracketed to isolate them from the port number.
        """
        if self._address.version == 6:  # noqa: PLR2004
            return f"[{self._address}]"
        return str(self._address)

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, IPHost):
            return NotImplemented
        return self._address == other._address

    def __hash__(self: Self) -> int:
        return hash((IPHost, self._address))

    def __repr__(self: Self) -> str:
        return f"IPHost({self._address!r})"

    def __str__(self: Self) -> str:
        return str(self._address)


class DomainHost:
    """A host given as a domain name, not yet resolved."""

    __slots__ = {
        "_name": "The domain name, exactly as written.",
    }

    _name: str

    def __init__(self: Self, name: str) -> None:
        """
        Construct a new DomainHost.

        :param name: The domain name, which must be non-empty and consist only of
            ASCII letters, digits, hyphens, and dots.
        """
        if not name or not _DOMAIN_CHARACTERS.issuperset(name):
            raise InvalidAddressError(name)
        self._name = name

    @property
    def name(self: Self) -> str:
        """The domain name, exactly as written."""
        return self._name

    def authority_text(self: Self) -> str:
        """Format the host for use in an authority alongside a port."""
        return self._name

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, DomainHost):
            return NotImplemented
        return self._name == other._name

    def __hash__(self: Self) -> int:
        return hash((DomainHost, self._name))

    def __repr__(self: Self) -> str:
        return f"DomainHost({self._name!r})"

    def __str__(self: Self) -> str:
        return self._name


HostAddr = IPHost | DomainHost
"""A host: either a literal IP address or an unresolved domain name."""


def parse_host(token: str) -> HostAddr:
    """
    Parse a host token.

    :param token: The host, without port. IPv6 literals may be bracketed.
    :return: An IPHost if the token is an IPv4 or IPv6 literal, otherwise a
        DomainHost.
    :raises InvalidAddressError: if the token is empty or contains characters that
        cannot appear in a domain name.
    """
    if token.startswith("[") and token.endswith("]"):
        try:
            return IPHost(ipaddress.IPv6Address(token[1:-1]))
        except ValueError:
            raise InvalidAddressError(token) from None
    try:
        return IPHost(ipaddress.ip_address(token))
    except ValueError:
        # Not an address literal, so it had better be a domain name.
        return DomainHost(token)


def split_authority(authority: str) -> tuple[HostAddr, int | None]:
    """
    Split an authority into host and port parts.

    :param authority: The authority, in the form HOST, HOST:PORT, [IPv6], or
        [IPv6]:PORT.
    :return: The host and the port, or None for the port if there is no port part.
    :raises InvalidAddressError: if the authority is malformed.
    """
    if authority.startswith("["):
        # This is an IPv6 literal with brackets to isolate it from the port number.
        # The Python stdlib doesn’t like the brackets.
        host_part, bracket, rest = authority[1:].partition("]")
        if not bracket:
            raise InvalidAddressError(authority)
        if rest == "":
            port_part = None
        elif rest.startswith(":"):
            port_part = rest[1:]
        else:
            raise InvalidAddressError(authority)
        try:
            host: HostAddr = parse_host(f"[{host_part}]")
        except InvalidAddressError:
            raise InvalidAddressError(authority) from None
    else:
        # The host and port part are separated by the last colon.
        parts = authority.rsplit(":", 1)
        host_part = parts[0]
        port_part = parts[1] if len(parts) == 2 else None  # noqa: PLR2004
        if not host_part or ":" in host_part:
            # Either there is no host at all, or it is an IPv6 literal missing its
            # brackets.
            raise InvalidAddressError(authority)
        try:
            host = parse_host(host_part)
        except InvalidAddressError:
            raise InvalidAddressError(authority) from None
    if port_part is None:
        return host, None
    # int() would also accept signs, whitespace, underscores, and non-ASCII digits.
    if not (port_part.isascii() and port_part.isdigit()):
        raise InvalidAddressError(authority)
    port = int(port_part)
    if port > 0xFFFF:  # noqa: PLR2004
        raise InvalidAddressError(authority)
    return host, port
