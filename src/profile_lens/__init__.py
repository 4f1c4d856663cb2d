"""GitHub 프로필 분석 대시보드."""
