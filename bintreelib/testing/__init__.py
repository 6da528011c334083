"""Testing utilities for BinTreeLib consumers."""

from .fixtures import TreeTestHelper

__all__ = ['TreeTestHelper']
