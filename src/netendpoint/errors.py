"""Exceptions raised while parsing and resolving endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from .endpoint import Endpoint


class EndpointError(Exception):
    """The base class of all errors raised by netendpoint."""

    __slots__ = ()


class InvalidSchemeError(EndpointError, ValueError):
    """Raised if an endpoint string’s scheme is not a supported protocol."""

    __slots__ = {
        "scheme": "The scheme token that was not recognized.",
    }

    scheme: str

    def __init__(self: Self, scheme: str) -> None:
        """
        Construct a new InvalidSchemeError.

        :param scheme: The unrecognized scheme token.
        """
        super().__init__(f"Unsupported scheme {scheme!r}")
        self.scheme = scheme


class InvalidAddressError(EndpointError, ValueError):
    """
    Raised if the host, port, or path of an endpoint is malformed or missing.

    This is also raised for tcp and udp endpoints that lack an explicit port, since
    neither protocol has a default port.
    """

    __slots__ = {
        "token": "The offending part of the input.",
    }

    token: str

    def __init__(self: Self, token: str) -> None:
        """
        Construct a new InvalidAddressError.

        :param token: The offending part of the input.
        """
        super().__init__(f"Invalid address {token!r}")
        self.token = token


class NotNetworkEndpointError(EndpointError, TypeError):
    """Raised if resolution is attempted on a Unix-domain socket or file endpoint."""

    __slots__ = {
        "endpoint": "The endpoint that has no socket address.",
    }

    endpoint: Endpoint

    def __init__(self: Self, endpoint: Endpoint) -> None:
        """
        Construct a new NotNetworkEndpointError.

        :param endpoint: The endpoint that was passed for resolution.
        """
        super().__init__(f"{endpoint} is not a network endpoint")
        self.endpoint = endpoint


class ResolutionError(Exception):
    """
    Raised by a resolver that cannot look up a domain name.

    The core never raises this itself; it wraps it in a ResolutionFailedError.
    """

    __slots__ = ()


class ResolutionFailedError(EndpointError):
    """Raised if a domain name could not be resolved to any address."""

    __slots__ = {
        "domain": "The domain name that was looked up.",
        "cause": "The resolver’s own failure.",
    }

    domain: str
    cause: ResolutionError

    def __init__(self: Self, domain: str, cause: ResolutionError) -> None:
        """
        Construct a new ResolutionFailedError.

        :param domain: The domain name that was looked up.
        :param cause: The failure reported by the resolver.
        """
        super().__init__(f"Resolution of {domain!r} failed: {cause}")
        self.domain = domain
        self.cause = cause
