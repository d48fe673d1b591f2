"""
Service implementations for repodesc.
"""
