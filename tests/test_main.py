"""CLI 테스트."""

import json
from pathlib import Path
from typing import Any

import httpx
import pytest
from typer.testing import CliRunner

from profile_lens.main import app
from profile_lens.sources.github import GitHubProfileSource
from profile_lens.storage import TokenStore

runner = CliRunner()


@pytest.fixture(autouse=True)
def token_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """토큰 파일을 임시 경로로 바꾼다."""
    path = tmp_path / "token.json"
    monkeypatch.setattr("profile_lens.main.settings.token_file", path)
    monkeypatch.setattr("profile_lens.main.settings.github_token", None)
    return path


class TestTokenCommands:
    """token 하위 명령 테스트."""

    def test_set_status_clear(self, token_file: Path) -> None:
        """토큰을 저장하고 상태를 확인한 뒤 삭제한다."""
        result = runner.invoke(app, ["token", "set", "ghp_abc"])
        assert result.exit_code == 0
        assert token_file.exists()

        result = runner.invoke(app, ["token", "status"])
        assert "저장된 토큰" in result.output

        result = runner.invoke(app, ["token", "clear"])
        assert result.exit_code == 0
        assert not token_file.exists()

        result = runner.invoke(app, ["token", "status"])
        assert "토큰 없음" in result.output


class TestOpenCommand:
    """open 명령 테스트."""

    def test_link_without_user(self) -> None:
        """user 파라미터가 없으면 실패한다."""
        result = runner.invoke(app, ["open", "https://profile-lens.app/"])
        assert result.exit_code == 1
        assert "user 파라미터" in result.output


class TestSearchCommand:
    """search 명령 테스트."""

    def test_blank_username(self) -> None:
        """빈 username은 실패한다."""
        result = runner.invoke(app, ["search", " "])
        assert result.exit_code == 1


USER_PAYLOAD: dict[str, Any] = {
    "login": "octocat",
    "name": "The Octocat",
    "public_repos": 2,
    "followers": 10,
    "following": 1,
    "created_at": "2011-01-25T18:44:36Z",
    "location": "San Francisco",
}

REPOS_PAYLOAD: list[dict[str, Any]] = [
    {
        "id": 1,
        "name": "hello-world",
        "description": "My first repository",
        "stargazers_count": 9,
        "forks_count": 2,
        "language": "Python",
        "html_url": "https://github.com/octocat/hello-world",
        "updated_at": "2024-01-01T00:00:00Z",
        "size": 10,
    },
    {
        "id": 2,
        "name": "spoon-knife",
        "stargazers_count": 1,
        "language": "Go",
        "html_url": "https://github.com/octocat/spoon-knife",
        "updated_at": "2023-06-01T00:00:00Z",
    },
]


def _use_transport(
    monkeypatch: pytest.MonkeyPatch, handler: Any
) -> None:
    """CLI가 가짜 GitHub API를 쓰도록 소스를 바꾼다."""

    def factory(token_store: TokenStore) -> GitHubProfileSource:
        return GitHubProfileSource(
            token_store,
            base_url="https://api.github.test",
            transport=httpx.MockTransport(handler),
        )

    monkeypatch.setattr("profile_lens.main.GitHubProfileSource", factory)


def _github(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/users/octocat":
        return httpx.Response(
            200,
            json=USER_PAYLOAD,
            headers={"x-ratelimit-limit": "60", "x-ratelimit-remaining": "42"},
        )
    if request.url.path == "/users/octocat/repos":
        return httpx.Response(200, json=REPOS_PAYLOAD)
    return httpx.Response(404, json={"message": "Not Found"})


class TestSearchResults:
    """search 명령의 결과 출력 테스트."""

    def test_success_with_share_and_export(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """프로필과 통계를 출력하고 공유 링크와 JSON 파일을 만든다."""
        _use_transport(monkeypatch, _github)
        monkeypatch.setattr(
            "profile_lens.main.settings.share_base_url", "https://profile-lens.app/"
        )
        export_dir = tmp_path / "out"

        result = runner.invoke(
            app, ["search", "octocat", "--share", "--export", str(export_dir)]
        )

        assert result.exit_code == 0, result.output
        assert "The Octocat" in result.output
        assert "API: 42/60" in result.output
        assert "hello-world" in result.output
        assert "Python" in result.output
        assert "https://profile-lens.app/?user=octocat" in result.output

        exported = export_dir / "octocat-github-analytics.json"
        data = json.loads(exported.read_text(encoding="utf-8"))
        assert data["user"]["login"] == "octocat"
        assert data["stats"]["total_stars"] == 10
        assert data["stats"]["top_languages"] == {"Python": 1, "Go": 1}

    def test_not_found_exits_with_message(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """404면 사용자 없음 메시지와 함께 종료 코드 1을 반환한다."""
        _use_transport(monkeypatch, _github)

        result = runner.invoke(app, ["search", "ghost"])

        assert result.exit_code == 1
        assert "사용자를 찾을 수 없습니다" in result.output
        assert "token set" not in result.output

    def test_rate_limit_shows_token_hint(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """요청 한도 초과면 토큰 설정 방법을 안내한다."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(403, headers={"x-ratelimit-remaining": "0"})

        _use_transport(monkeypatch, handler)

        result = runner.invoke(app, ["search", "octocat"])

        assert result.exit_code == 1
        assert "요청 한도를 초과" in result.output
        assert "profile-lens token set" in result.output

    def test_open_link_runs_search(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """공유 링크의 사용자를 검색한다."""
        _use_transport(monkeypatch, _github)

        result = runner.invoke(app, ["open", "https://profile-lens.app/?user=octocat"])

        assert result.exit_code == 0, result.output
        assert "The Octocat" in result.output
