"""Presence-based XMPP chat bot."""

__version__ = "0.1.0"
