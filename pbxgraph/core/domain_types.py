"""Domain Types — rich types that replace bare primitives across the graph.

Invariants:
    - ObjectUUID wraps the document-unique identifier — never use a bare str in graph logic
    - UUID length bounds are shared by Settings and Document

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ObjectUUID = NewType("ObjectUUID", str)


# ─── Constants ───────────────────────────────────────────────────

DEFAULT_UUID_LENGTH = 24
MIN_UUID_LENGTH = 8
MAX_UUID_LENGTH = 32
ISA_PREFIX = "PBX"
