"""분석 결과 내보내기 모듈."""

import logging
from pathlib import Path

from profile_lens.models import ProfileReport

logger = logging.getLogger(__name__)


def report_filename(login: str) -> str:
    """내보내기 파일 이름을 반환한다."""
    return f"{login}-github-analytics.json"


def export_report(report: ProfileReport, directory: Path) -> Path:
    """리포트를 JSON 파일로 저장한다.

    Args:
        report: 내보낼 리포트
        directory: 저장할 디렉터리

    Returns:
        저장된 파일 경로
    """
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / report_filename(report.user.login)
    path.write_text(report.model_dump_json(indent=2), encoding="utf-8")
    logger.info(f"Exported report to {path}")
    return path


def load_report(path: Path) -> ProfileReport:
    """저장된 리포트를 읽는다."""
    return ProfileReport.model_validate_json(path.read_text(encoding="utf-8"))
