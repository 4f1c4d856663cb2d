"""GitHub 프로필 조회 모듈."""

import asyncio
import logging
from typing import Any
from urllib.parse import quote

import httpx

from profile_lens.config import settings
from profile_lens.errors import FetchErrorKind, ProfileFetchError, classify_error
from profile_lens.models import Profile, ProfileSnapshot, RateLimit, RepositorySummary
from profile_lens.storage import TokenStore

logger = logging.getLogger(__name__)

RECENT_LIMIT = 10
ALL_LIMIT = 100


class GitHubProfileSource:
    """GitHub REST API에서 사용자 프로필과 저장소를 가져온다."""

    def __init__(
        self,
        token_store: TokenStore | None = None,
        *,
        token: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            token_store: 사용자가 저장한 토큰 저장소
            token: 빌드 시점 토큰. None이면 설정값 사용.
            base_url: API 기본 URL. None이면 설정값 사용.
            timeout: 요청 타임아웃 (초). None이면 설정값, 그것도 없으면 httpx 기본값.
            transport: httpx 전송 계층 (테스트용)
        """
        self.token_store = token_store
        self.token = token or settings.github_token
        self.base_url = base_url or settings.github_api_url
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.transport = transport

    def _resolve_token(self) -> str | None:
        """요청마다 토큰을 다시 읽는다."""
        if self.token:
            return self.token
        if self.token_store is not None:
            return self.token_store.get()
        return None

    def _build_headers(self) -> dict[str, str]:
        """요청 헤더를 생성한다."""
        headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "profile-lens",
        }
        token = self._resolve_token()
        if token:
            headers["Authorization"] = f"token {token}"
        else:
            logger.debug("No GitHub token, using unauthenticated requests")
        return headers

    def _client(self) -> httpx.AsyncClient:
        kwargs: dict[str, Any] = {
            "base_url": self.base_url,
            "headers": self._build_headers(),
        }
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        if self.transport is not None:
            kwargs["transport"] = self.transport
        return httpx.AsyncClient(**kwargs)

    @staticmethod
    def _parse_rate_limit(response: httpx.Response) -> RateLimit | None:
        """응답 헤더에서 요청 한도를 읽는다."""
        limit = response.headers.get("x-ratelimit-limit")
        remaining = response.headers.get("x-ratelimit-remaining")
        if not limit or not remaining:
            return None
        try:
            return RateLimit(limit=int(limit), remaining=int(remaining))
        except ValueError:
            return None

    async def _get(
        self,
        client: httpx.AsyncClient,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        response = await client.get(path, params=params)
        response.raise_for_status()
        return response

    async def fetch(self, username: str) -> ProfileSnapshot:
        """사용자 프로필, 최근 저장소, 전체 저장소를 동시에 가져온다.

        세 요청이 모두 끝난 뒤에 결과를 판단하며, 하나라도 실패하면 전체가 실패한다.

        Args:
            username: GitHub username

        Returns:
            ProfileSnapshot

        Raises:
            ValueError: username이 비어 있는 경우
            ProfileFetchError: 요청이 하나라도 실패한 경우
        """
        username = username.strip()
        if not username:
            raise ValueError("username must not be empty")

        user_path = f"/users/{quote(username, safe='')}"
        logger.info(f"Fetching profile for {username}")

        async with self._client() as client:
            results = await asyncio.gather(
                self._get(client, user_path),
                self._get(
                    client,
                    f"{user_path}/repos",
                    {"sort": "updated", "per_page": RECENT_LIMIT},
                ),
                self._get(client, f"{user_path}/repos", {"per_page": ALL_LIMIT}),
                return_exceptions=True,
            )

        for result in results:
            if isinstance(result, BaseException):
                kind = classify_error(result)
                logger.error(
                    f"GitHub API error for {username}: {kind.value}", exc_info=result
                )
                raise ProfileFetchError(kind) from result

        user_response, recent_response, all_response = results

        try:
            snapshot = ProfileSnapshot(
                profile=Profile.model_validate(user_response.json()),
                recent_repositories=[
                    RepositorySummary.model_validate(item)
                    for item in recent_response.json()
                ],
                all_repositories=[
                    RepositorySummary.model_validate(item)
                    for item in all_response.json()
                ],
                rate_limit=self._parse_rate_limit(user_response),
            )
        except (ValueError, TypeError) as e:
            # JSON 디코딩 실패와 ValidationError는 ValueError, 목록이 아닌 본문은 TypeError
            logger.error(f"Unexpected GitHub payload for {username}", exc_info=e)
            raise ProfileFetchError(FetchErrorKind.UNKNOWN) from e

        logger.info(f"Fetched {username}: {len(snapshot.all_repositories)} repos")
        return snapshot
