"""데이터 모델 정의."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Profile(BaseModel):
    """GitHub 사용자 프로필 스냅샷."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    login: str = Field(description="로그인 ID")
    name: str | None = Field(default=None, description="표시 이름")
    avatar_url: str = Field(default="", description="아바타 이미지 URL")
    bio: str | None = Field(default=None, description="자기소개")
    public_repos: int = Field(default=0, description="공개 저장소 수")
    followers: int = Field(default=0, description="팔로워 수")
    following: int = Field(default=0, description="팔로잉 수")
    created_at: datetime = Field(description="계정 생성 시각")
    location: str | None = Field(default=None, description="위치")
    blog: str | None = Field(default=None, description="블로그 URL")
    company: str | None = Field(default=None, description="소속")
    email: str | None = Field(default=None, description="공개 이메일")
    html_url: str | None = Field(default=None, description="프로필 페이지 URL")


class RepositorySummary(BaseModel):
    """GitHub API가 반환하는 저장소 공개 메타데이터."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int = Field(description="저장소 ID")
    name: str = Field(description="저장소 이름")
    description: str | None = Field(default=None, description="저장소 설명")
    stargazers_count: int = Field(default=0, description="스타 수")
    forks_count: int = Field(default=0, description="포크 수")
    language: str | None = Field(default=None, description="주 프로그래밍 언어")
    html_url: str = Field(description="저장소 URL")
    updated_at: datetime = Field(description="마지막 업데이트 시각")
    size: int = Field(default=0, description="크기 (KB)")
    open_issues_count: int = Field(default=0, description="열린 이슈 수")
    topics: list[str] = Field(default_factory=list, description="토픽 태그")

    @field_validator("updated_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        """시간대 정보가 없는 시각은 UTC로 본다."""
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class RateLimit(BaseModel):
    """API 요청 한도 (참고용)."""

    limit: int = Field(description="시간당 요청 한도")
    remaining: int = Field(description="남은 요청 수")


class CodeQuality(BaseModel):
    """코드 품질 추정치."""

    avg_repo_size: float = Field(default=0, description="저장소 평균 크기 (KB)")
    has_readme: int = Field(default=0, description="설명이 있는 저장소 수 (README 대용)")
    has_license: int = Field(default=0, description="라이선스 보유 추정치 (전체의 60%)")
    has_description: int = Field(default=0, description="설명이 있는 저장소 수")


class SyntheticFigures(BaseModel):
    """실제 데이터가 아닌 시뮬레이션 값.

    추가 API 호출 없이는 알 수 없는 값이라 난수로 채운다.
    비교나 검증에 사용하지 않는다.
    """

    synthetic: bool = Field(default=True, description="항상 True. 시뮬레이션 값 표시")
    commits_last_month: int = Field(description="최근 한 달 커밋 수")
    issues_created: int = Field(description="생성한 이슈 수")
    pull_requests_opened: int = Field(description="연 PR 수")
    contribution_streak: int = Field(description="연속 기여 일수")


class DerivedStatistics(BaseModel):
    """저장소 목록에서 계산한 통계."""

    total_stars: int = Field(default=0, description="총 스타 수")
    total_forks: int = Field(default=0, description="총 포크 수")
    total_size: int = Field(default=0, description="총 크기 (KB)")
    top_languages: dict[str, int] = Field(
        default_factory=dict, description="언어별 저장소 수"
    )
    repositories_per_language: dict[str, int] = Field(
        default_factory=dict, description="언어별 저장소 수 (top_languages와 동일)"
    )
    most_starred_repo: RepositorySummary | None = Field(
        default=None, description="스타가 가장 많은 저장소"
    )
    recent_activity: int = Field(default=0, description="최근 한 달 내 업데이트된 저장소 수")
    avg_stars_per_repo: float = Field(default=0, description="저장소당 평균 스타 수")
    total_issues: int = Field(default=0, description="열린 이슈 합계")
    code_quality: CodeQuality = Field(default_factory=CodeQuality)
    synthetic: SyntheticFigures = Field(description="시뮬레이션 값 (실제 데이터 아님)")


class ProfileSnapshot(BaseModel):
    """한 번의 조회로 얻은 결과."""

    profile: Profile = Field(description="사용자 프로필")
    recent_repositories: list[RepositorySummary] = Field(
        default_factory=list, description="최근 업데이트된 저장소 (최대 10개)"
    )
    all_repositories: list[RepositorySummary] = Field(
        default_factory=list, description="통계용 저장소 목록 (최대 100개)"
    )
    rate_limit: RateLimit | None = Field(default=None, description="API 요청 한도")


class ProfileReport(BaseModel):
    """내보내기 문서."""

    user: Profile = Field(description="사용자 프로필")
    stats: DerivedStatistics = Field(description="계산된 통계")
    repositories: list[RepositorySummary] = Field(
        default_factory=list, description="최근 업데이트된 저장소"
    )
