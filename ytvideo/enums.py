"""Defines Enum classes used in the package."""

__all__ = ["Rating", "ReportMetric"]

from enum import Enum


class Rating(Enum):
    """Enum for the rating an account gives to a video."""

    LIKE = "like"
    """The account likes the video"""

    DISLIKE = "dislike"
    """The account dislikes the video"""

    NONE = "none"
    """The account has not rated the video"""


class ReportMetric(Enum):
    """Enum for the reports available for a video.

    The name is the report name, the value is the metric queried from the
    YouTube Analytics API.
    """

    EARNINGS = "estimatedRevenue"
    """Estimated revenue of the video"""

    VIEWS = "views"
    """Number of views"""

    COMMENTS = "comments"
    """Number of comments"""

    LIKES = "likes"
    """Number of likes"""

    DISLIKES = "dislikes"
    """Number of dislikes"""

    SHARES = "shares"
    """Number of shares"""

    IMPRESSIONS = "adImpressions"
    """Number of ad impressions"""

    @classmethod
    def from_name(cls, name: "str | ReportMetric") -> "ReportMetric":
        """Get the metric for the given report name.

        :param name: The report name, e.g. ``"views"``, or a ReportMetric.
        :return: The matching ReportMetric.
        :raises ValueError: If no report has the given name.
        """
        if isinstance(name, cls):
            return name

        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown report: {name}") from None
