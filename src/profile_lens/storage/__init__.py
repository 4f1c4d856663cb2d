"""저장소 모듈."""

from profile_lens.storage.token_store import FileTokenStore, MemoryTokenStore, TokenStore

__all__ = ["FileTokenStore", "MemoryTokenStore", "TokenStore"]
