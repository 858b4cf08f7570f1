"""Contains the Video class which is used to read and change a YouTube video."""

__all__ = ["Video"]

import logging
from datetime import date
from http import HTTPStatus
from typing import Any

from ytvideo.enums import Rating, ReportMetric
from ytvideo.errors import HTTPError
from ytvideo.models.annotation import Annotation, parse_annotations
from ytvideo.models.content_detail import ContentDetail
from ytvideo.models.rating import VideoRating
from ytvideo.models.snippet import Snippet
from ytvideo.models.statistics_set import StatisticsSet
from ytvideo.models.status import Status
from ytvideo.reports import Reports
from ytvideo.session import YouTubeSession
from ytvideo.types import TimeSeries, ViewerPercentages


class _Delegate:
    """A read-only attribute that forwards to the attribute of the same name
    of a part of the video, e.g. ``video.title`` to ``video.snippet.title``.
    """

    def __init__(self, to: str) -> None:
        """Create a new _Delegate instance.

        :param to: The name of the property holding the part.
        """
        self._to = to
        self._name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self._name = name
        self.__doc__ = f"Same as ``{self._to}.{name}``."

    def __get__(self, instance: object, owner: type | None = None) -> Any:
        if instance is None:
            return self

        return getattr(getattr(instance, self._to), self._name)

    def __set__(self, instance: object, value: Any) -> None:
        raise AttributeError(f"{self._name} is read-only, use update() instead")


class Video:
    """A class that represents a YouTube video.

    The parts of the video (snippet, status, content details, statistics,
    rating and annotations) are fetched the first time they are accessed and
    kept for the lifetime of the instance.
    """

    def __init__(
        self,
        id: str | None,  # noqa: A002
        *,
        auth: YouTubeSession,
        data: dict[str, Any] | None = None,
    ) -> None:
        """Create a new Video instance.

        :param id: The ID of the video.
        :param auth: The session used to send the requests about the video.
        :param data: The videos resource if it was already fetched. Any of its
            "snippet", "status", "contentDetails" and "statistics" parts are
            used instead of fetching them again.
        """
        self._logger = logging.getLogger(self.__class__.__name__)
        self._id = id
        self._auth = auth

        data = data or {}
        self._snippet = (
            Snippet.from_data(data["snippet"]) if data.get("snippet") else None
        )
        self._status = Status.from_data(data["status"]) if data.get("status") else None
        self._content_detail = (
            ContentDetail.from_data(data["contentDetails"])
            if data.get("contentDetails")
            else None
        )
        self._statistics_set = (
            StatisticsSet.from_data(data["statistics"])
            if data.get("statistics")
            else None
        )
        self._rating: VideoRating | None = None
        self._annotations: list[Annotation] | None = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id!r})"

    @property
    def id(self) -> str | None:
        """Get the ID of the video.

        :return: The ID, or None if the video was deleted.
        """
        return self._id

    @property
    def auth(self) -> YouTubeSession:
        """Get the session used to send the requests about the video.

        :return: The session.
        """
        return self._auth

    @property
    def snippet(self) -> Snippet:
        """Get the basic details of the video.

        :return: The snippet.
        :raises HTTPError: If the video does not exist.
        """
        if self._snippet is None:
            self._snippet = Snippet.from_data(self._fetch_part("snippet"))

        return self._snippet

    @property
    def status(self) -> Status:
        """Get the upload, processing and privacy status of the video.

        :return: The status.
        :raises HTTPError: If the video does not exist.
        """
        if self._status is None:
            self._status = Status.from_data(self._fetch_part("status"))

        return self._status

    @property
    def content_detail(self) -> ContentDetail:
        """Get the content details of the video.

        :return: The content details.
        :raises HTTPError: If the video does not exist.
        """
        if self._content_detail is None:
            self._content_detail = ContentDetail.from_data(
                self._fetch_part("contentDetails")
            )

        return self._content_detail

    @property
    def statistics_set(self) -> StatisticsSet:
        """Get the statistics of the video.

        :return: The statistics.
        :raises HTTPError: If the video does not exist.
        """
        if self._statistics_set is None:
            self._statistics_set = StatisticsSet.from_data(
                self._fetch_part("statistics")
            )

        return self._statistics_set

    @property
    def rating(self) -> VideoRating:
        """Get the rating of the video by the authenticated account.

        :return: The rating.
        """
        if self._rating is None:
            self._rating = VideoRating(self._require_id(), session=self._auth)

        return self._rating

    @property
    def annotations(self) -> list[Annotation]:
        """Get the in-video annotations of the video.

        :return: The annotations in the order they appear in the video.
        :raises HTTPError: If the annotations could not be fetched.
        :raises ValueError: If the annotations document is invalid.
        """
        if self._annotations is None:
            self._logger.debug("Fetching annotations of video (%s)", self._id)
            document = self._auth.get_text(
                self._auth.config.annotations_url, {"video_id": self._require_id()}
            )
            self._annotations = parse_annotations(document)

        return self._annotations

    # Snippet
    title = _Delegate("snippet")
    description = _Delegate("snippet")
    tags = _Delegate("snippet")
    channel_id = _Delegate("snippet")
    channel_title = _Delegate("snippet")
    category_id = _Delegate("snippet")
    live_broadcast_content = _Delegate("snippet")
    published_at = _Delegate("snippet")

    # Status
    is_deleted = _Delegate("status")
    is_failed = _Delegate("status")
    is_processed = _Delegate("status")
    is_rejected = _Delegate("status")
    is_uploaded = _Delegate("status")
    uses_unsupported_codec = _Delegate("status")
    has_failed_conversion = _Delegate("status")
    is_empty = _Delegate("status")
    is_invalid = _Delegate("status")
    is_too_small = _Delegate("status")
    is_aborted = _Delegate("status")
    is_claimed = _Delegate("status")
    infringes_copyright = _Delegate("status")
    is_duplicate = _Delegate("status")
    scheduled_at = _Delegate("status")
    is_scheduled = _Delegate("status")
    is_too_long = _Delegate("status")
    violates_terms_of_use = _Delegate("status")
    is_inappropriate = _Delegate("status")
    infringes_trademark = _Delegate("status")
    belongs_to_closed_account = _Delegate("status")
    belongs_to_suspended_account = _Delegate("status")
    licensed_as_creative_commons = _Delegate("status")
    licensed_as_standard_youtube = _Delegate("status")
    has_public_stats_viewable = _Delegate("status")
    is_embeddable = _Delegate("status")
    is_public = _Delegate("status")
    is_private = _Delegate("status")
    is_unlisted = _Delegate("status")

    # Content details
    duration = _Delegate("content_detail")
    is_hd = _Delegate("content_detail")
    is_stereoscopic = _Delegate("content_detail")
    is_captioned = _Delegate("content_detail")
    is_licensed = _Delegate("content_detail")

    # Statistics
    view_count = _Delegate("statistics_set")
    like_count = _Delegate("statistics_set")
    dislike_count = _Delegate("statistics_set")
    favorite_count = _Delegate("statistics_set")
    comment_count = _Delegate("statistics_set")

    def thumbnail_url(self, size: str = "default") -> str | None:
        """Get the URL of a thumbnail of the video.

        :param size: The size of the thumbnail, e.g. "default", "medium" or
            "high".
        :return: The URL, or None if there is no thumbnail of that size.
        """
        return self.snippet.thumbnails.get(size)

    def exists(self) -> bool:
        """Check if the video exists. This does not send any request.

        :return: True if the video has not been deleted, False otherwise.
        """
        return self._id is not None

    def delete(self) -> bool:
        """Delete the video.
        Deleting a video that was already deleted does nothing.

        :return: True if the video does not exist anymore.
        :raises Unauthorized: If the session's account cannot delete the video.
        """
        if not self.exists():
            self._logger.debug("Video is already deleted")
            return True

        video_id = self._id

        def on_success() -> None:
            self._id = None

        self._auth.do_delete(
            self._auth.data_url("videos"), {"id": video_id}, on_success
        )
        self._logger.info("Deleted video (%s)", video_id)

        return not self.exists()

    def update(
        self,
        *,
        title: str | None = None,
        description: str | None = None,
        tags: list[str] | None = None,
        category_id: str | None = None,
    ) -> bool:
        """Update the snippet of the video.
        Fields that are not provided keep their current values.

        Only the snippet can be changed. The status (privacy, license,
        embeddable, public stats and publishing time) has to be sent as a
        whole, so it is not updated here.

        :param title: The new title.
        :param description: The new description.
        :param tags: The new keyword tags.
        :param category_id: The ID of the new category.
        :return: True if the video was updated.
        :raises Unauthorized: If the session's account cannot update the video.
        """
        video_id = self._require_id()
        snippet = {
            "title": self.title if title is None else title,
            "description": self.description if description is None else description,
            "tags": self.tags if tags is None else tags,
            "categoryId": self.category_id if category_id is None else category_id,
        }

        def on_success(data: dict[str, Any]) -> bool:
            self._id = data.get("id", video_id)
            if data.get("snippet"):
                self._snippet = Snippet.from_data(data["snippet"])
            return True

        updated = self._auth.do_update(
            self._auth.data_url("videos"),
            {"part": "snippet"},
            {"id": video_id, "snippet": snippet},
            on_success,
        )
        self._logger.info("Updated snippet of video (%s)", video_id)

        return updated

    def liked(self) -> bool:
        """Check if the authenticated account likes the video.

        :return: True if the account likes the video, False otherwise.
        :raises Unauthorized: If the session has no authenticated account.
        """
        return self.rating.rating == Rating.LIKE

    def like(self) -> bool:
        """Like the video on behalf of the authenticated account.

        :return: True if the account likes the video.
        :raises Unauthorized: If the session has no authenticated account.
        """
        self.rating.update(Rating.LIKE)
        return self.liked()

    def dislike(self) -> bool:
        """Dislike the video on behalf of the authenticated account.

        :return: True if the account does not like the video.
        :raises Unauthorized: If the session has no authenticated account.
        """
        self.rating.update(Rating.DISLIKE)
        return not self.liked()

    def unlike(self) -> bool:
        """Reset the rating of the video on behalf of the authenticated account.

        :return: True if the account does not like the video.
        :raises Unauthorized: If the session has no authenticated account.
        """
        self.rating.update(Rating.NONE)
        return not self.liked()

    def reports_params(self) -> dict[str, str]:
        """Get the parameters that scope the analytics reports to the video,
        either as the channel of the video or as the content owner of the
        session.

        :return: The "ids" and "filters" parameters.
        :raises HTTPError: If the video was deleted.
        """
        video_id = self._require_id()

        if self._auth.owner_name:
            ids = f"contentOwner=={self._auth.owner_name}"
        else:
            ids = f"channel=={self.channel_id}"

        return {"ids": ids, "filters": f"video=={video_id}"}

    def report(
        self,
        metric: str | ReportMetric,
        *,
        since: date | None = None,
        until: date | None = None,
        by: str = "day",
    ) -> TimeSeries:
        """Fetch an analytics report of the video.

        :param metric: The report to fetch: "earnings", "views", "comments",
            "likes", "dislikes", "shares" or "impressions".
        :param since: The first day of the report.
            If not provided, 30 days before the last day.
        :param until: The last day of the report. If not provided, today.
        :param by: The time dimension to group the values by, "day" or "month".
        :return: The value of the metric for each day, in chronological order.
        :raises ValueError: If the report is unknown or the range is empty.
        :raises HTTPError: If the video was deleted.
        :raises Unauthorized: If the session cannot read the analytics.
        """
        return Reports(self._auth, self.reports_params()).fetch(
            metric, since=since, until=until, by=by
        )

    def viewer_percentages(
        self, *, since: date | None = None, until: date | None = None
    ) -> ViewerPercentages:
        """Fetch the percentage of viewers of the video by age group and gender.

        :param since: The first day of the report.
            If not provided, 30 days before the last day.
        :param until: The last day of the report. If not provided, today.
        :return: The percentages keyed by age group, then by gender.
        :raises HTTPError: If the video was deleted.
        :raises Unauthorized: If the session cannot read the analytics.
        """
        return Reports(self._auth, self.reports_params()).viewer_percentages(
            since=since, until=until
        )

    def _require_id(self) -> str:
        """Get the ID of the video, failing if it was deleted.

        :return: The ID.
        :raises HTTPError: If the video was deleted.
        """
        if self._id is None:
            raise HTTPError("The video does not exist", HTTPStatus.NOT_FOUND)

        return self._id

    def _fetch_part(self, part: str) -> dict[str, Any]:
        """Fetch a part of the videos resource.

        :param part: The name of the part, e.g. "snippet".
        :return: The JSON object of the part.
        :raises HTTPError: If the video does not exist.
        """
        video_id = self._require_id()
        self._logger.debug("Fetching %s of video (%s)", part, video_id)

        data = self._auth.get(
            self._auth.data_url("videos"), {"id": video_id, "part": part}
        )
        items = data.get("items") or []
        if not items:
            raise HTTPError(f"Video not found: {video_id}", HTTPStatus.NOT_FOUND)

        return items[0].get(part) or {}
