"""Fake implementations for testing."""

from tests.fakes.record_store_fake import FakeRecordStore

__all__ = ["FakeRecordStore"]
