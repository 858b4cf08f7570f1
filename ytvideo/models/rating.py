"""Contains the rating an authenticated account gives to a video."""

__all__ = ["VideoRating"]

import logging

from ytvideo.enums import Rating
from ytvideo.session import YouTubeSession


class VideoRating:
    """Represents the rating of a video by the account of a session.
    The rating is fetched on first access and kept until it is updated.
    """

    def __init__(
        self,
        video_id: str,
        *,
        session: YouTubeSession,
        rating: Rating | None = None,
    ) -> None:
        """Create a new VideoRating instance.

        :param video_id: The ID of the rated video.
        :param session: The session of the account that rates the video.
        :param rating: The rating if it is already known.
        """
        self._logger = logging.getLogger(self.__class__.__name__)
        self._video_id = video_id
        self._session = session
        self._rating = rating

    @property
    def rating(self) -> Rating:
        """Get the rating of the video by the account.

        :return: The rating.
        :raises Unauthorized: If the session has no authenticated account.
        """
        if self._rating is None:
            self._logger.debug("Fetching rating of video (%s)", self._video_id)
            data = self._session.get(
                self._session.data_url("videos/getRating"),
                {"id": self._video_id},
                authenticated=True,
            )
            items = data.get("items") or [{}]
            try:
                self._rating = Rating(items[0].get("rating"))
            except ValueError:
                # "unspecified" or missing
                self._rating = Rating.NONE

        return self._rating

    def update(self, rating: Rating) -> Rating:
        """Rate the video on behalf of the account.

        :param rating: The new rating.
        :return: The new rating.
        :raises Unauthorized: If the session has no authenticated account.
        """

        def on_success() -> Rating:
            self._rating = rating
            self._logger.info("Rated video (%s) as %s", self._video_id, rating.value)
            return rating

        return self._session.do_post(
            self._session.data_url("videos/rate"),
            {"id": self._video_id, "rating": rating.value},
            on_success,
        )
