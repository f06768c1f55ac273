"""
Interfaces Layer - Abstract Protocols for Dependencies.

Protocols:
    - RecordSourceProtocol: Single read of the backing record collection

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Sources return decoded JSON; parsing belongs to the loader
"""

from progress_tracker.interfaces.record_source import RecordSourceProtocol

__all__ = ["RecordSourceProtocol"]
