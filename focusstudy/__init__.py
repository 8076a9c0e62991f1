"""Counterbalanced timer-visualization focus study.

Participants alternate between a numeric countdown and a non-numeric
hourglass across repeated focus sessions. This package generates each
participant's condition sequence, resolves the condition for a session,
and validates the balance of generated sequences.
"""

from __future__ import annotations

__version__ = "0.1.0"
