"""
Typed endpoint strings: parsing, formatting, and resolution.

netendpoint turns strings such as “mqtt://broker.local” or “unix:///run/app.sock”
into immutable values from a closed set of variants, fills in the default port of
each protocol, renders them back to a canonical string, and resolves network
endpoints to concrete socket addresses.

Resolution of domain names is not performed by the core. It is delegated to a
resolver, which is passed in explicitly. Resolvers are setuptools entry points in
the netendpoint.resolvers group, allowing other packages to add their own. See the
types module for the interfaces a resolver must implement.

Please see the individual modules for more details.
"""
