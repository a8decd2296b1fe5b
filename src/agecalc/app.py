"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from agecalc.adapters.schema import AgeReportPayload
from agecalc.domain._dates import local_now
from agecalc.domain.report import build_age_report

if TYPE_CHECKING:
    from datetime import datetime

    from agecalc.domain._dates import Clock

log = getLogger(__name__)


def create_age_report(
    date_of_birth: datetime,
    reference_date: datetime | None = None,
    *,
    clock: Clock = local_now,
) -> AgeReportPayload:
    """Build the serialisable report for one birth date."""

    log.debug("Building age report: dob=%s, reference=%s", date_of_birth, reference_date)
    report = build_age_report(date_of_birth, reference_date, clock=clock)
    log.debug(
        "Finished age report: age=%s, next_birthday=%s",
        report.age,
        report.next_birthday,
    )
    return AgeReportPayload.from_report(report)
