"""공유 링크 모듈."""

from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

USER_PARAM = "user"


def build_share_url(base_url: str, login: str) -> str:
    """`user` 쿼리 파라미터를 설정한 공유 링크를 만든다. 다른 파라미터는 유지한다."""
    parts = urlsplit(base_url)
    query = parse_qs(parts.query, keep_blank_values=True)
    query[USER_PARAM] = [login]
    return urlunsplit(parts._replace(query=urlencode(query, doseq=True)))


def parse_share_url(url: str) -> str | None:
    """공유 링크에서 username을 읽는다."""
    values = parse_qs(urlsplit(url).query).get(USER_PARAM)
    if not values or not values[0].strip():
        return None
    return values[0].strip()
