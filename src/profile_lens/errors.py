"""조회 실패 분류 모듈."""

from enum import Enum

import httpx


class FetchErrorKind(str, Enum):
    """조회 실패 유형."""

    RATE_LIMITED = "rate_limited"
    ACCESS_RESTRICTED = "access_restricted"
    NOT_FOUND = "not_found"
    INVALID_INPUT = "invalid_input"
    OFFLINE = "offline"
    UNKNOWN = "unknown"


ERROR_MESSAGES: dict[FetchErrorKind, str] = {
    FetchErrorKind.RATE_LIMITED: (
        "GitHub API 요청 한도를 초과했습니다. 잠시 후 다시 시도하거나 GitHub 토큰을 추가하세요."
    ),
    FetchErrorKind.ACCESS_RESTRICTED: (
        "GitHub API 접근이 제한되었습니다. 설정을 확인하거나 잠시 후 다시 시도하세요."
    ),
    FetchErrorKind.NOT_FOUND: "사용자를 찾을 수 없습니다. username 철자를 확인하세요.",
    FetchErrorKind.INVALID_INPUT: "잘못된 username입니다. 철자를 확인하세요.",
    FetchErrorKind.OFFLINE: "인터넷에 연결되어 있지 않습니다. 네트워크 연결을 확인하세요.",
    FetchErrorKind.UNKNOWN: "데이터를 불러오는 중 오류가 발생했습니다. 잠시 후 다시 시도하세요.",
}


class ProfileFetchError(Exception):
    """프로필 조회 실패."""

    def __init__(self, kind: FetchErrorKind) -> None:
        self.kind = kind
        self.message = ERROR_MESSAGES[kind]
        super().__init__(self.message)

    @property
    def suggests_token(self) -> bool:
        """토큰 설정을 안내해야 하는지 여부."""
        return self.kind is FetchErrorKind.RATE_LIMITED


def classify_error(exc: BaseException) -> FetchErrorKind:
    """예외를 조회 실패 유형으로 분류한다.

    Args:
        exc: 요청 중 발생한 예외

    Returns:
        FetchErrorKind
    """
    if isinstance(exc, httpx.HTTPStatusError):
        response = exc.response
        status = response.status_code
        if status == 403:
            if response.headers.get("x-ratelimit-remaining") == "0":
                return FetchErrorKind.RATE_LIMITED
            return FetchErrorKind.ACCESS_RESTRICTED
        if status == 404:
            return FetchErrorKind.NOT_FOUND
        if status == 422:
            return FetchErrorKind.INVALID_INPUT
        return FetchErrorKind.UNKNOWN

    # DNS 실패나 연결 불가는 오프라인으로 본다
    if isinstance(exc, httpx.ConnectError):
        return FetchErrorKind.OFFLINE

    return FetchErrorKind.UNKNOWN
