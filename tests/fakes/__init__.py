"""Shared test doubles — re-export memory backends."""

from __future__ import annotations

from chunkproc.persistence.memory_backend import MemoryObjectLister, MemoryStateStore

__all__ = ["MemoryObjectLister", "MemoryStateStore"]
