"""
Typed Python bindings for Google REST APIs that have no official
client library of their own.

Each API is a module with a client class, one method per REST operation,
and dataclasses for the JSON schemas.  Python dataclasses are used for the
resource structs and most of the logic is translating between those and the
raw dicts, including the fields JSON can't carry natively: 64-bit integers,
timestamps and bytes all travel as strings.

Authentication is shared through the access.gapi singleton, or pass
credentials to a client directly.  catalog lists the bundled APIs.
"""

__version__ = "0.1.0"
