"""대시보드 상태 관리 모듈."""

import logging

from profile_lens.analytics import calculate_statistics
from profile_lens.errors import FetchErrorKind, ProfileFetchError
from profile_lens.models import (
    DerivedStatistics,
    Profile,
    ProfileReport,
    RateLimit,
    RepositorySummary,
)
from profile_lens.share import build_share_url
from profile_lens.sources import ProfileSource
from profile_lens.storage import TokenStore

logger = logging.getLogger(__name__)


class DashboardSession:
    """검색 결과와 화면 상태를 보관한다.

    검색마다 세대 번호를 부여하고, 완료 시점에 최신 검색이 아니면 결과를 버린다.
    느린 이전 응답이 새 결과를 덮어쓰지 않게 하기 위함이다.
    """

    def __init__(
        self,
        source: ProfileSource,
        token_store: TokenStore | None = None,
    ) -> None:
        """
        Args:
            source: 프로필 데이터 소스
            token_store: 토큰 저장소 (토큰 삭제 시 사용)
        """
        self.source = source
        self.token_store = token_store

        self.profile: Profile | None = None
        self.repositories: list[RepositorySummary] = []
        self.statistics: DerivedStatistics | None = None
        self.rate_limit: RateLimit | None = None
        self.error: ProfileFetchError | None = None
        self.show_results = False
        self.loading = False

        self._generation = 0

    @property
    def generation(self) -> int:
        """마지막으로 시작한 검색의 세대 번호."""
        return self._generation

    def _clear_results(self) -> None:
        self.profile = None
        self.repositories = []
        self.statistics = None
        self.show_results = False

    async def search(self, username: str) -> bool:
        """사용자를 검색하고 상태를 갱신한다.

        Args:
            username: GitHub username

        Returns:
            이 검색의 결과가 적용되었으면 True.
            빈 입력이거나 더 새로운 검색에 밀려난 경우 False.
        """
        if not username.strip():
            return False

        self._generation += 1
        generation = self._generation
        self.loading = True
        self.error = None

        try:
            snapshot = await self.source.fetch(username)
        except ProfileFetchError as e:
            if generation != self._generation:
                logger.debug(f"Dropping stale failure for {username}")
                return False
            self.error = e
            self._clear_results()
            return True
        except Exception as e:
            if generation != self._generation:
                logger.debug(f"Dropping stale failure for {username}")
                return False
            logger.error(f"Unexpected error while searching {username}", exc_info=e)
            self.error = ProfileFetchError(FetchErrorKind.UNKNOWN)
            self._clear_results()
            return True
        finally:
            if generation == self._generation:
                self.loading = False

        if generation != self._generation:
            logger.debug(f"Dropping stale result for {username}")
            return False

        if snapshot.rate_limit is not None:
            self.rate_limit = snapshot.rate_limit
        self.profile = snapshot.profile
        self.repositories = snapshot.recent_repositories
        self.statistics = calculate_statistics(snapshot.all_repositories)
        self.show_results = True
        return True

    def new_search(self) -> None:
        """결과 화면을 닫고 검색 화면으로 돌아간다."""
        self.show_results = False

    def clear_token(self) -> None:
        """저장된 토큰과 요청 한도 정보를 지운다."""
        if self.token_store is not None:
            self.token_store.clear()
        self.rate_limit = None

    def share_url(self, base_url: str) -> str | None:
        """현재 프로필의 공유 링크를 반환한다."""
        if self.profile is None:
            return None
        return build_share_url(base_url, self.profile.login)

    def report(self) -> ProfileReport | None:
        """내보내기용 리포트를 반환한다."""
        if self.profile is None or self.statistics is None:
            return None
        return ProfileReport(
            user=self.profile,
            stats=self.statistics,
            repositories=self.repositories,
        )
