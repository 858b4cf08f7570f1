"""Contains the Reports class which is used to query the YouTube Analytics API
for the reports of a video.
"""

__all__ = ["Reports"]

import logging
from datetime import date, timedelta

from ytvideo.enums import ReportMetric
from ytvideo.session import YouTubeSession
from ytvideo.types import TimeSeries, ViewerPercentages


class Reports:
    """A class that fetches analytics reports scoped by the given parameters."""

    DEFAULT_RANGE = timedelta(days=30)

    def __init__(self, session: YouTubeSession, params: dict[str, str]) -> None:
        """Create a new Reports instance.

        :param session: The session of the account that owns the analytics.
        :param params: The parameters scoping every query, usually "ids" and
            "filters".
        """
        self._logger = logging.getLogger(self.__class__.__name__)
        self._session = session
        self._params = params

    def fetch(
        self,
        metric: str | ReportMetric,
        *,
        since: date | None = None,
        until: date | None = None,
        by: str = "day",
    ) -> TimeSeries:
        """Fetch a report as a time series.

        :param metric: The report to fetch, e.g. "views" or ReportMetric.VIEWS.
        :param since: The first day of the report.
            If not provided, 30 days before the last day.
        :param until: The last day of the report. If not provided, today.
        :param by: The time dimension to group the values by, "day" or "month".
        :return: The value of the metric for each day, in chronological order.
        :raises ValueError: If the report is unknown or the range is empty.
        :raises Unauthorized: If the session cannot read the analytics.
        """
        metric = ReportMetric.from_name(metric)
        since, until = self._get_range(since, until)

        self._logger.debug(
            "Fetching %s report (%s) from %s to %s",
            metric.name.lower(),
            self._params.get("filters"),
            since,
            until,
        )

        data = self._query(
            metrics=metric.value, dimensions=by, since=since, until=until
        )

        series: TimeSeries = {}
        for period, value in sorted(data.get("rows") or []):
            # Monthly reports use "YYYY-MM"
            day = date.fromisoformat(period if len(period) > 7 else f"{period}-01")
            series[day] = float(value)

        return series

    def viewer_percentages(
        self, *, since: date | None = None, until: date | None = None
    ) -> ViewerPercentages:
        """Fetch the percentage of viewers by age group and gender.

        :param since: The first day of the report.
            If not provided, 30 days before the last day.
        :param until: The last day of the report. If not provided, today.
        :return: The percentages keyed by age group, then by gender.
        :raises ValueError: If the range is empty.
        :raises Unauthorized: If the session cannot read the analytics.
        """
        since, until = self._get_range(since, until)
        data = self._query(
            metrics="viewerPercentage",
            dimensions="ageGroup,gender",
            since=since,
            until=until,
        )

        percentages: ViewerPercentages = {}
        for age_group, gender, value in data.get("rows") or []:
            percentages.setdefault(age_group, {})[gender] = float(value)

        return percentages

    def _get_range(self, since: date | None, until: date | None) -> tuple[date, date]:
        until = until or date.today()
        since = since or until - self.DEFAULT_RANGE

        if since > until:
            raise ValueError(
                f"The report cannot start ({since}) after it ends ({until})"
            )

        return since, until

    def _query(
        self, *, metrics: str, dimensions: str, since: date, until: date
    ) -> dict:
        return self._session.get(
            self._session.analytics_url("reports"),
            {
                **self._params,
                "metrics": metrics,
                "dimensions": dimensions,
                "startDate": since.isoformat(),
                "endDate": until.isoformat(),
            },
            authenticated=True,
        )
