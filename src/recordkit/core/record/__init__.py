"""Record functionality: protocol, mixin and decorator."""

from recordkit.core.record.core import RecordBase, record
from recordkit.core.record.models import Record

__all__ = [
    "Record",
    "RecordBase",
    "record",
]
