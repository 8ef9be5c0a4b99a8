"""Load time banding."""

from typing import Optional

from seocheck.config import LoadTimeThresholds, default_thresholds
from seocheck.models import LoadTime, LoadTimeGrade, LoadTimeResult


def classify_load_time(
    milliseconds: int, thresholds: Optional[LoadTimeThresholds] = None
) -> LoadTime:
    """Band a latency measurement into a result and a letter grade.

    Args:
        milliseconds: Measured load time
        thresholds: Band boundaries (defaults to 2000ms / 4000ms)

    Returns:
        LoadTime with the matching result and grade
    """
    thresholds = thresholds or default_thresholds

    if milliseconds < thresholds.good_ms:
        result, grade = LoadTimeResult.GOOD, LoadTimeGrade.A
    elif milliseconds < thresholds.moderate_ms:
        result, grade = LoadTimeResult.MODERATE, LoadTimeGrade.B
    else:
        result, grade = LoadTimeResult.POOR, LoadTimeGrade.C

    return LoadTime(milliseconds=milliseconds, result=result, grade=grade)
