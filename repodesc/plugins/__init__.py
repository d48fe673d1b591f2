"""
Built-in plugins for repodesc.

Subpackages are scanned by :func:`repodesc.core.registry.discover_plugins`.
"""
