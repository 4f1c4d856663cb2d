"""GitHub 토큰 저장소 모듈."""

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

TOKEN_KEY = "github_token"


class TokenStore(Protocol):
    """토큰 저장소 프로토콜."""

    def get(self) -> str | None:
        """저장된 토큰을 반환한다."""
        ...

    def set(self, token: str) -> None:
        """토큰을 저장한다."""
        ...

    def clear(self) -> None:
        """저장된 토큰을 삭제한다."""
        ...


class MemoryTokenStore:
    """프로세스 메모리에만 토큰을 보관한다."""

    def __init__(self, token: str | None = None) -> None:
        self._token = token

    def get(self) -> str | None:
        return self._token

    def set(self, token: str) -> None:
        if token.strip():
            self._token = token.strip()

    def clear(self) -> None:
        self._token = None


class FileTokenStore:
    """JSON 파일에 토큰을 저장한다."""

    def __init__(self, path: Path) -> None:
        """
        Args:
            path: 토큰 파일 경로
        """
        self.path = path

    def get(self) -> str | None:
        """저장된 토큰을 반환한다. 파일이 없거나 손상되었으면 None."""
        if not self.path.exists():
            return None

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to read token file {self.path}: {e}")
            return None

        token = data.get(TOKEN_KEY) if isinstance(data, dict) else None
        return token or None

    def set(self, token: str) -> None:
        """토큰을 저장한다. 공백뿐인 입력은 무시한다."""
        token = token.strip()
        if not token:
            return

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({TOKEN_KEY: token}), encoding="utf-8")
        logger.info(f"Token saved to {self.path}")

    def clear(self) -> None:
        """저장된 토큰을 삭제한다."""
        self.path.unlink(missing_ok=True)
        logger.info("Token removed")
