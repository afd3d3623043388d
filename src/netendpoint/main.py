"""The application entry point."""

import argparse
import asyncio
import importlib.metadata
import json
import logging
import logging.config
import pathlib
import sys
from collections.abc import Iterable
from typing import TextIO

from .endpoint import parse
from .errors import EndpointError
from .resolve import SocketAddress, resolve, resolve_async
from .types import AsyncResolver, Resolver


def describe(
    uri: str, resolver: Resolver | AsyncResolver | None, output: TextIO
) -> bool:
    """
    Print the canonical form of an endpoint and, optionally, its socket addresses.

    :param uri: The endpoint string.
    :param resolver: The resolver to resolve the endpoint with, or None to only
        parse it.
    :param output: Where to print.
    :return: True on success, or False if the endpoint could not be parsed or
        resolved, in which case the failure has been logged.
    """
    try:
        endpoint = parse(uri)
        addresses: Iterable[SocketAddress] = ()
        if isinstance(resolver, AsyncResolver):
            addresses = asyncio.run(resolve_async(endpoint, resolver))
        elif resolver is not None:
            addresses = resolve(endpoint, resolver)
    except EndpointError as exp:
        logging.getLogger(__name__).error("%s: %s", uri, exp)  # noqa: TRY400
        return False
    print(endpoint, file=output)
    for address in addresses:
        print(f"  {address}", file=output)
    return True


def main() -> None:
    """Run the application."""
    try:
        # Discover the available resolvers.
        resolvers = {
            entry.name: entry
            for entry in importlib.metadata.entry_points(group="netendpoint.resolvers")
        }

        # Parse and check command-line parameters.
        parser = argparse.ArgumentParser(
            description="Parse endpoint strings and print their canonical forms."
        )
        parser.add_argument(
            "--logging",
            "-l",
            type=pathlib.Path,
            help="the JSON file containing a logging configuration dictionary per "
            "logging.config.dictConfig (default: none)",
        )
        parser.add_argument(
            "--resolve",
            "-r",
            action="store_true",
            help="also resolve each network endpoint to its socket addresses",
        )
        parser.add_argument(
            "--resolver",
            default="system",
            choices=resolvers,
            help="the resolver to use with --resolve (default: system)",
        )
        parser.add_argument(
            "uri",
            nargs="+",
            help="an endpoint string",
            metavar="SCHEME://HOST[:PORT] | unix://PATH | file://PATH",
        )
        args = parser.parse_args()

        # Set up logging.
        if args.logging is not None:
            with args.logging.open("rb") as logging_config_file:
                cfg = json.load(logging_config_file)
            logging.config.dictConfig(cfg)
        else:
            logging.basicConfig(level=logging.INFO)

        # Load the resolver.
        resolver = resolvers[args.resolver].load()() if args.resolve else None

        # Describe each endpoint, carrying on past failures.
        results = [describe(uri, resolver, sys.stdout) for uri in args.uri]
        if not all(results):
            sys.exit(1)
    finally:
        logging.shutdown()
