from __future__ import annotations

from .schema import AgeBreakdownPayload, AgeReportPayload, parse_date_input

__all__ = ["AgeBreakdownPayload", "AgeReportPayload", "parse_date_input"]
