"""Store, prove and verify operations."""

from .StorageProof import StorageProof, StoreJob, ProveJob

__all__ = ["StorageProof", "StoreJob", "ProveJob"]
