"""Core services for chunkcache."""

from chunkcache.core.services.assembler import Assembler
from chunkcache.core.services.cache_service import CacheService
from chunkcache.core.services.chunker import Chunker, split_into_chunks
from chunkcache.core.services.cleaner import Cleaner
from chunkcache.core.services.key_validator import KeyValidator
from chunkcache.core.services.size_guard import SizeGuard

__all__ = [
    "CacheService",
    "KeyValidator",
    "SizeGuard",
    "Chunker",
    "Assembler",
    "Cleaner",
    "split_into_chunks",
]
