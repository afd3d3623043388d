"""
Endpoint values and their string form.

An endpoint string is either “SCHEME://HOST[:PORT]” for a network endpoint or
“SCHEME://PATH” for a Unix-domain socket or file, so “unix:///run/app.sock” names
the socket at /run/app.sock. The supported schemes and their default ports are
fixed by the Scheme enumeration.

The main entry point is the parse function. Formatting is done by str().
"""

from __future__ import annotations

import enum
import os
import pathlib
from typing import Self

from .errors import InvalidAddressError, InvalidSchemeError
from .host import HostAddr, split_authority


class Scheme(enum.Enum):
    """A supported endpoint protocol."""

    TCP = "tcp"
    UDP = "udp"
    HTTP = "http"
    HTTPS = "https"
    WS = "ws"
    WSS = "wss"
    MQTT = "mqtt"
    MQTTS = "mqtts"
    COAP = "coap"
    COAPS = "coaps"
    REDIS = "redis"
    AMQP = "amqp"
    FTP = "ftp"
    UNIX = "unix"
    FILE = "file"

    @property
    def is_network(self: Self) -> bool:
        """Whether endpoints of this scheme are reached by host and port."""
        return self not in (Scheme.UNIX, Scheme.FILE)

    @property
    def default_port(self: Self) -> int | None:
        """
        The port used when an endpoint string does not give one.

        This is None for tcp and udp, which have no standard port, and for the
        schemes that are not network schemes at all.
        """
        return _DEFAULT_PORTS.get(self)


_DEFAULT_PORTS: dict[Scheme, int] = {
    Scheme.HTTP: 80,
    Scheme.HTTPS: 443,
    Scheme.WS: 80,
    Scheme.WSS: 443,
    Scheme.MQTT: 1883,
    Scheme.MQTTS: 8883,
    Scheme.COAP: 5683,
    Scheme.COAPS: 5684,
    Scheme.REDIS: 6379,
    Scheme.AMQP: 5672,
    Scheme.FTP: 21,
}
"""The default port of each network scheme that has one."""


class NetworkEndpoint:
    """An endpoint reached over the network by protocol, host, and port."""

    __slots__ = {
        "_scheme": "The protocol.",
        "_host": "The host, as an address literal or domain name.",
        "_port": "The port number.",
    }

    _scheme: Scheme
    _host: HostAddr
    _port: int

    def __init__(self: Self, scheme: Scheme, host: HostAddr, port: int) -> None:
        """
        Construct a new NetworkEndpoint.

        :param scheme: The protocol, which must be a network scheme.
        :param host: The host.
        :param port: The port number, from 0 to 65535 inclusive.
        :raises InvalidAddressError: if the port is out of range.
        """
        if not scheme.is_network:
            msg = f"Scheme {scheme.value} is not a network scheme"
            raise ValueError(msg)
        if not 0 <= port <= 0xFFFF:  # noqa: PLR2004
            raise InvalidAddressError(str(port))
        self._scheme = scheme
        self._host = host
        self._port = port

    @property
    def scheme(self: Self) -> Scheme:
        """The protocol."""
        return self._scheme

    @property
    def host(self: Self) -> HostAddr:
        """The host, as an address literal or domain name."""
        return self._host

    @property
    def port(self: Self) -> int:
        """The port number."""
        return self._port

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, NetworkEndpoint):
            return NotImplemented
        return (self._scheme, self._host, self._port) == (
            other._scheme,
            other._host,
            other._port,
        )

    def __hash__(self: Self) -> int:
        return hash((self._scheme, self._host, self._port))

    def __repr__(self: Self) -> str:
        return f"NetworkEndpoint({self._scheme}, {self._host!r}, {self._port})"

    def __str__(self: Self) -> str:
        return f"{self._scheme.value}://{self._host.authority_text()}:{self._port}"


class _PathEndpoint:
    """The common parts of endpoints that are named by a filesystem path."""

    __slots__ = {
        "_path": "The path, exactly as written.",
    }

    _path: str

    scheme: Scheme
    """The protocol."""

    def __init__(self: Self, path: str) -> None:
        """
        Construct a new endpoint.

        :param path: The path, which must not be empty.
        :raises InvalidAddressError: if the path is empty.
        """
        if not path:
            raise InvalidAddressError(path)
        self._path = path

    @property
    def path(self: Self) -> str:
        """The path, exactly as written."""
        return self._path

    def __eq__(self: Self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        assert isinstance(other, _PathEndpoint)
        return self._path == other._path

    def __hash__(self: Self) -> int:
        return hash((self.scheme, self._path))

    def __repr__(self: Self) -> str:
        return f"{type(self).__name__}({self._path!r})"

    def __str__(self: Self) -> str:
        return f"{self.scheme.value}://{self._path}"


class UnixEndpoint(_PathEndpoint):
    """
    An endpoint that is a UNIX-domain socket.

    A path starting with “@” names a socket in the Linux abstract namespace rather
    than in the filesystem.
    """

    __slots__ = ()

    scheme = Scheme.UNIX

    @property
    def is_abstract(self: Self) -> bool:
        """Whether the socket is in the abstract namespace."""
        return self._path.startswith("@")

    @property
    def sockaddr(self: Self) -> str | bytes:
        """The address to pass to the socket module for an AF_UNIX socket."""
        if self.is_abstract:
            return b"\x00" + os.fsencode(self._path[1:])
        return self._path

    def as_path(self: Self) -> pathlib.Path:
        """
        Return the socket’s filesystem path.

        :raises ValueError: if the socket is in the abstract namespace.
        """
        if self.is_abstract:
            msg = f"{self} is in the abstract namespace"
            raise ValueError(msg)
        return pathlib.Path(self._path)


class FileEndpoint(_PathEndpoint):
    """An endpoint that is a plain file."""

    __slots__ = ()

    scheme = Scheme.FILE

    def as_path(self: Self) -> pathlib.Path:
        """Return the file’s filesystem path."""
        return pathlib.Path(self._path)


Endpoint = NetworkEndpoint | UnixEndpoint | FileEndpoint
"""Any endpoint."""


def parse(uri: str) -> Endpoint:
    """
    Parse an endpoint string.

    :param uri: The string, such as “https://example.com” or “unix:///run/a.sock”.
        It is not trimmed, and the scheme is case-sensitive.
    :return: The endpoint. If a network endpoint string has no port, the scheme’s
        default port is filled in.
    :raises InvalidSchemeError: if the scheme is missing or not supported.
    :raises InvalidAddressError: if the rest of the string is malformed, or if a tcp
        or udp endpoint has no port.
    """
    scheme_text, separator, remainder = uri.partition("://")
    if not separator:
        # Still report an unsupported scheme in preference to a malformed address.
        scheme_text, colon, _ = uri.partition(":")
        if not colon:
            scheme_text = ""
    try:
        scheme = Scheme(scheme_text)
    except ValueError:
        raise InvalidSchemeError(scheme_text) from None
    if not separator:
        raise InvalidAddressError(uri)

    if scheme is Scheme.UNIX:
        return UnixEndpoint(remainder)
    if scheme is Scheme.FILE:
        return FileEndpoint(remainder)

    host, port = split_authority(remainder)
    if port is None:
        port = scheme.default_port
        if port is None:
            # tcp and udp have no standard port, so it must be given.
            raise InvalidAddressError(remainder)
    return NetworkEndpoint(scheme, host, port)
