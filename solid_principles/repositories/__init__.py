# Repositories package initialization
# Persistence adapters that keep storage concerns out of domain entities

from .journal_repository import JournalFileRepository

__all__ = ["JournalFileRepository"]
