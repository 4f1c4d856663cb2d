"""데이터 소스 모듈."""

from profile_lens.sources.base import ProfileSource
from profile_lens.sources.github import GitHubProfileSource

__all__ = ["GitHubProfileSource", "ProfileSource"]
