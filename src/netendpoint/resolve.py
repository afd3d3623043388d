"""
Resolution of endpoints to socket addresses.

Endpoints whose host is an address literal are resolved without any lookup. For
endpoints whose host is a domain name, the caller-supplied resolver is asked
exactly once; its answer is combined with the endpoint’s port in the order given.
No timeout, retry, or caching is applied here. Those are up to the resolver.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Self

from .endpoint import Endpoint, NetworkEndpoint
from .errors import NotNetworkEndpointError, ResolutionError, ResolutionFailedError
from .host import DomainHost, IPHost
from .types import AsyncResolver, IPAddress, Resolver


class SocketAddress:
    """A concrete IP address and port."""

    __slots__ = {
        "_address": "The IP address.",
        "_port": "The port number.",
    }

    _address: IPAddress
    _port: int

    def __init__(self: Self, address: IPAddress, port: int) -> None:
        """
        Construct a new SocketAddress.

        :param address: The IP address.
        :param port: The port number.
        """
        self._address = address
        self._port = port

    @property
    def address(self: Self) -> IPAddress:
        """The IP address."""
        return self._address

    @property
    def port(self: Self) -> int:
        """The port number."""
        return self._port

    @property
    def sockaddr(self: Self) -> tuple[str, int] | tuple[str, int, int, int]:
        """The address to pass to the socket module for an AF_INET(6) socket."""
        if self._address.version == 6:  # noqa: PLR2004
            return (str(self._address), self._port, 0, 0)
        return (str(self._address), self._port)

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, SocketAddress):
            return NotImplemented
        return (self._address, self._port) == (other._address, other._port)

    def __hash__(self: Self) -> int:
        return hash((self._address, self._port))

    def __repr__(self: Self) -> str:
        return f"SocketAddress({self._address!r}, {self._port})"

    def __str__(self: Self) -> str:
        return f"{IPHost(self._address).authority_text()}:{self._port}"


def _network_endpoint(endpoint: Endpoint) -> NetworkEndpoint:
    """
    Check that an endpoint can be resolved.

    :param endpoint: The endpoint.
    :return: The same endpoint.
    :raises NotNetworkEndpointError: if the endpoint is a socket or file path.
    """
    if not isinstance(endpoint, NetworkEndpoint):
        raise NotNetworkEndpointError(endpoint)
    return endpoint


def _combine(
    domain: str, addresses: Sequence[IPAddress], port: int
) -> list[SocketAddress]:
    """
    Attach a port to each address returned by a resolver.

    :param domain: The domain name that was looked up.
    :param addresses: The resolver’s answer.
    :param port: The port.
    :raises ResolutionFailedError: if there are no addresses.
    """
    if not addresses:
        msg = "No addresses found"
        raise ResolutionFailedError(domain, ResolutionError(msg))
    logging.getLogger(__name__).debug(
        "Resolved %s to %s", domain, ", ".join(str(i) for i in addresses)
    )
    return [SocketAddress(i, port) for i in addresses]


def resolve(endpoint: Endpoint, resolver: Resolver) -> list[SocketAddress]:
    """
    Resolve an endpoint to the socket addresses it denotes.

    :param endpoint: The endpoint to resolve.
    :param resolver: The resolver used if the endpoint’s host is a domain name.
    :return: The socket addresses, in the order the resolver gave them.
    :raises NotNetworkEndpointError: if the endpoint is a socket or file path.
    :raises ResolutionFailedError: if the resolver fails or finds nothing.
    """
    endpoint = _network_endpoint(endpoint)
    host = endpoint.host
    if isinstance(host, IPHost):
        return [SocketAddress(host.address, endpoint.port)]
    assert isinstance(host, DomainHost)
    logging.getLogger(__name__).debug("Looking up %s", host.name)
    try:
        addresses = resolver.lookup(host.name)
    except ResolutionError as exp:
        raise ResolutionFailedError(host.name, exp) from exp
    return _combine(host.name, addresses, endpoint.port)


async def resolve_async(
    endpoint: Endpoint, resolver: AsyncResolver
) -> list[SocketAddress]:
    """
    Resolve an endpoint to the socket addresses it denotes, without blocking.

    :param endpoint: The endpoint to resolve.
    :param resolver: The resolver used if the endpoint’s host is a domain name.
    :return: The socket addresses, in the order the resolver gave them.
    :raises NotNetworkEndpointError: if the endpoint is a socket or file path.
    :raises ResolutionFailedError: if the resolver fails or finds nothing.
    """
    endpoint = _network_endpoint(endpoint)
    host = endpoint.host
    if isinstance(host, IPHost):
        return [SocketAddress(host.address, endpoint.port)]
    assert isinstance(host, DomainHost)
    logging.getLogger(__name__).debug("Looking up %s", host.name)
    try:
        addresses = await resolver.lookup(host.name)
    except ResolutionError as exp:
        raise ResolutionFailedError(host.name, exp) from exp
    return _combine(host.name, addresses, endpoint.port)
