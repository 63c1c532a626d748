"""
sslh socket-unit generator.

Reads the sslh configuration and emits the ``sslh.socket`` unit the
service manager uses to socket-activate the multiplexer.
"""

__version__ = "0.1.0"
