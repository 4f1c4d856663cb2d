"""저장소 통계 계산 모듈."""

import calendar
import random
from collections.abc import Sequence
from datetime import UTC, datetime

from profile_lens.models import (
    CodeQuality,
    DerivedStatistics,
    RepositorySummary,
    SyntheticFigures,
)

# 라이선스 정보 없이 전체의 약 60%가 라이선스를 가진다고 추정한다
LICENSE_RATIO = 0.6


def one_month_before(moment: datetime) -> datetime:
    """한 달 전 같은 날짜/시각을 반환한다.

    이전 달에 같은 날짜가 없으면 그 달의 마지막 날로 맞춘다 (예: 3/31 -> 2/28).
    """
    year, month = moment.year, moment.month - 1
    if month == 0:
        year, month = year - 1, 12
    last_day = calendar.monthrange(year, month)[1]
    return moment.replace(year=year, month=month, day=min(moment.day, last_day))


def _synthetic_figures(rng: random.Random) -> SyntheticFigures:
    """시뮬레이션 값을 생성한다."""
    return SyntheticFigures(
        commits_last_month=rng.randint(10, 59),
        issues_created=rng.randint(5, 24),
        pull_requests_opened=rng.randint(8, 37),
        contribution_streak=rng.randint(50, 414),
    )


def calculate_statistics(
    repos: Sequence[RepositorySummary],
    *,
    now: datetime | None = None,
    rng: random.Random | None = None,
) -> DerivedStatistics:
    """저장소 목록으로 통계를 계산한다.

    Args:
        repos: 저장소 목록 (변경하지 않는다)
        now: 기준 시각. None이면 현재 UTC 시각.
        rng: 시뮬레이션 값용 난수 생성기. None이면 새로 만든다.

    Returns:
        DerivedStatistics
    """
    now = now or datetime.now(UTC)
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    rng = rng or random.Random()

    total_stars = sum(repo.stargazers_count for repo in repos)
    total_forks = sum(repo.forks_count for repo in repos)
    total_size = sum(repo.size for repo in repos)
    total_issues = sum(repo.open_issues_count or 0 for repo in repos)

    languages: dict[str, int] = {}
    for repo in repos:
        if repo.language:
            languages[repo.language] = languages.get(repo.language, 0) + 1

    # 동점이면 먼저 나온 저장소를 유지한다
    most_starred: RepositorySummary | None = None
    for repo in repos:
        if most_starred is None or repo.stargazers_count > most_starred.stargazers_count:
            most_starred = repo

    since = one_month_before(now)
    recent_activity = sum(1 for repo in repos if repo.updated_at > since)

    count = len(repos)
    avg_stars = round(total_stars / count, 1) if count else 0.0
    avg_size = round(total_size / count, 1) if count else 0.0
    described = sum(1 for repo in repos if repo.description)

    return DerivedStatistics(
        total_stars=total_stars,
        total_forks=total_forks,
        total_size=total_size,
        top_languages=languages,
        repositories_per_language=dict(languages),
        most_starred_repo=most_starred,
        recent_activity=recent_activity,
        avg_stars_per_repo=avg_stars,
        total_issues=total_issues,
        code_quality=CodeQuality(
            avg_repo_size=avg_size,
            has_readme=described,
            has_license=int(count * LICENSE_RATIO),
            has_description=described,
        ),
        synthetic=_synthetic_figures(rng),
    )
