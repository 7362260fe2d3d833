# ==============================================
# TypeDetector
# ==============================================
#
# PURPOSE:
#   Tell which Document kind a decoded Python value belongs to.
#   Result documents arrive already parsed (json / bson), so the
#   Python types are the only shape information there is.
#
# KINDS:
# ------
#   None                     → "null"
#   bool                     → "bool"     (checked before int!)
#   int / float              → "number"
#   str                      → "string"
#   datetime / date          → "date"     (BSON $date decodes to datetime)
#   list / tuple             → "sequence"
#   Mapping (dict, SON, ...) → "record"
#   anything else            → "other"    (ObjectId, Decimal128, ... primitives)
#
# ==============================================

from collections.abc import Mapping
from datetime import date
from typing import Any

from ..errors import DocumentTooDeepError

# Containers nested deeper than this are rejected rather than walked.
DEFAULT_MAX_DEPTH = 256


class TypeDetector:
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    DATE = "date"
    SEQUENCE = "sequence"
    RECORD = "record"
    OTHER = "other"

    CONTAINER_KINDS = {SEQUENCE, RECORD}

    @classmethod
    def detect(cls, value: Any) -> str:
        if value is None:
            return cls.NULL

        if isinstance(value, bool):
            return cls.BOOL

        if isinstance(value, (int, float)):
            return cls.NUMBER

        if isinstance(value, str):
            return cls.STRING

        if isinstance(value, date):
            return cls.DATE

        if isinstance(value, (list, tuple)):
            return cls.SEQUENCE

        if isinstance(value, Mapping):
            return cls.RECORD

        return cls.OTHER

    @classmethod
    def is_number(cls, value: Any) -> bool:
        return cls.detect(value) == cls.NUMBER

    @classmethod
    def is_container(cls, value: Any) -> bool:
        return cls.detect(value) in cls.CONTAINER_KINDS

    @classmethod
    def check_depth(cls, value: Any, max_depth: int) -> None:
        """
        Reject values nested deeper than max_depth containers.

        Walks with an explicit stack so the check itself cannot
        overflow the interpreter stack.

        Raises:
            DocumentTooDeepError: if any branch exceeds max_depth
        """
        stack = [(value, 0)]
        while stack:
            current, depth = stack.pop()
            kind = cls.detect(current)
            if kind not in cls.CONTAINER_KINDS:
                continue
            if depth >= max_depth:
                raise DocumentTooDeepError(max_depth)
            children = current.values() if kind == cls.RECORD else current
            stack.extend((child, depth + 1) for child in children)
