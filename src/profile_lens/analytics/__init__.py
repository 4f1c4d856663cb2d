"""통계 모듈."""

from profile_lens.analytics.statistics import calculate_statistics, one_month_before

__all__ = ["calculate_statistics", "one_month_before"]
