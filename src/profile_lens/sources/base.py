"""소스 프로토콜 정의."""

from typing import Protocol

from profile_lens.models import ProfileSnapshot


class ProfileSource(Protocol):
    """프로필 데이터 소스 프로토콜."""

    async def fetch(self, username: str) -> ProfileSnapshot:
        """프로필 데이터를 가져온다."""
        ...
