"""Core type definitions for recordkit."""

type Copy[T] = T
"""Type alias indicating a value is a fresh shallow copy of a record.

When you see `Copy[T]` in a return type, the returned record is a new instance
unless the change set was empty, in which case it is the original itself.
Sub-objects are shared with the original; mutating them in place affects both.
"""
