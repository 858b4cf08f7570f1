"""Contains the dataclass for the statistics of a video."""

__all__ = ["StatisticsSet"]

from dataclasses import dataclass
from typing import Any, Self


@dataclass
class StatisticsSet:
    """Represents the statistics of a YouTube video.
    Counters hidden by the uploader are reported as 0.
    """

    view_count: int = 0
    """The number of times the video has been viewed"""

    like_count: int = 0
    """The number of users who liked the video"""

    dislike_count: int = 0
    """The number of users who disliked the video"""

    favorite_count: int = 0
    """The number of users who marked the video as a favorite"""

    comment_count: int = 0
    """The number of comments on the video"""

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> Self:
        """Create a StatisticsSet from the statistics part of a videos resource.
        The API sends the counters as strings.

        :param data: The JSON object of the statistics.
        :return: The statistics.
        """
        return cls(
            view_count=int(data.get("viewCount", 0)),
            like_count=int(data.get("likeCount", 0)),
            dislike_count=int(data.get("dislikeCount", 0)),
            favorite_count=int(data.get("favoriteCount", 0)),
            comment_count=int(data.get("commentCount", 0)),
        )
