"""조회 실패 분류 테스트."""

import httpx
import pytest

from profile_lens.errors import (
    ERROR_MESSAGES,
    FetchErrorKind,
    ProfileFetchError,
    classify_error,
)


def _status_error(status: int, headers: dict[str, str] | None = None) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "https://api.github.com/users/octocat")
    response = httpx.Response(status, headers=headers, request=request)
    return httpx.HTTPStatusError("error", request=request, response=response)


class TestClassifyError:
    """classify_error 테스트."""

    def test_rate_limited(self) -> None:
        """남은 요청이 0인 403은 RATE_LIMITED다."""
        exc = _status_error(403, {"x-ratelimit-remaining": "0"})
        assert classify_error(exc) is FetchErrorKind.RATE_LIMITED

    def test_access_restricted(self) -> None:
        """그 외 403은 ACCESS_RESTRICTED다."""
        exc = _status_error(403, {"x-ratelimit-remaining": "12"})
        assert classify_error(exc) is FetchErrorKind.ACCESS_RESTRICTED
        assert classify_error(_status_error(403)) is FetchErrorKind.ACCESS_RESTRICTED

    @pytest.mark.parametrize(
        ("status", "kind"),
        [
            (404, FetchErrorKind.NOT_FOUND),
            (422, FetchErrorKind.INVALID_INPUT),
            (500, FetchErrorKind.UNKNOWN),
            (401, FetchErrorKind.UNKNOWN),
        ],
    )
    def test_status_codes(self, status: int, kind: FetchErrorKind) -> None:
        """상태 코드별로 분류한다."""
        assert classify_error(_status_error(status)) is kind

    def test_connect_error_is_offline(self) -> None:
        """연결 실패는 OFFLINE이다."""
        exc = httpx.ConnectError("no route to host")
        assert classify_error(exc) is FetchErrorKind.OFFLINE

    def test_other_errors_are_unknown(self) -> None:
        """그 밖의 예외는 UNKNOWN이다."""
        assert classify_error(httpx.ReadTimeout("timed out")) is FetchErrorKind.UNKNOWN
        assert classify_error(RuntimeError("boom")) is FetchErrorKind.UNKNOWN


class TestProfileFetchError:
    """ProfileFetchError 테스트."""

    def test_every_kind_has_message(self) -> None:
        """모든 유형에 고정 메시지가 있다."""
        assert set(ERROR_MESSAGES) == set(FetchErrorKind)
        for kind in FetchErrorKind:
            assert ProfileFetchError(kind).message == ERROR_MESSAGES[kind]

    def test_only_rate_limit_suggests_token(self) -> None:
        """토큰 안내는 RATE_LIMITED에만 붙는다."""
        suggested = {k for k in FetchErrorKind if ProfileFetchError(k).suggests_token}
        assert suggested == {FetchErrorKind.RATE_LIMITED}
