"""Contains the Video class which is used to read the metadata, status,
statistics and analytics of a YouTube video, and to update, delete and rate it
on behalf of an authenticated account.
"""

__all__ = [
    "Annotation",
    "ContentDetail",
    "HTTPError",
    "Rating",
    "ReportMetric",
    "Reports",
    "SessionConfig",
    "Snippet",
    "StatisticsSet",
    "Status",
    "Unauthorized",
    "Video",
    "VideoRating",
    "YouTubeSession",
]

from ytvideo.enums import Rating, ReportMetric
from ytvideo.errors import HTTPError, Unauthorized
from ytvideo.models import SessionConfig
from ytvideo.models.annotation import Annotation
from ytvideo.models.content_detail import ContentDetail
from ytvideo.models.rating import VideoRating
from ytvideo.models.snippet import Snippet
from ytvideo.models.statistics_set import StatisticsSet
from ytvideo.models.status import Status
from ytvideo.models.video import Video
from ytvideo.reports import Reports
from ytvideo.session import YouTubeSession
