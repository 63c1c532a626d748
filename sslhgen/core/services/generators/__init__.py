"""
Generators — produce unit files from the sslh configuration.

Each generator module exposes a ``generate_*()`` function that returns
a ``GeneratedFile``.
"""
