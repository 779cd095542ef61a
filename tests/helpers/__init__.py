"""Test doubles shared across the unit tests."""

from .transport import RecordingSleep, ScriptedTransport, TransportCall, connect_failure

__all__ = ["RecordingSleep", "ScriptedTransport", "TransportCall", "connect_failure"]
