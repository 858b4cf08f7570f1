"""The following example demonstrates how to fetch the analytics of a video,
either as its channel or as the content owner managing it.
"""

import logging
from datetime import date

from ytvideo import Video, YouTubeSession


def main() -> None:
    """Run the application."""
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger = logging.getLogger(__name__)

    with YouTubeSession(
        access_token="Your OAuth access token here",
        owner_name="Your content owner name here, or None for a channel",
    ) as session:
        video = Video("Your video ID here", auth=session)

        for name in ("views", "likes", "earnings"):
            series = video.report(name, since=date(2024, 1, 1), until=date(2024, 1, 31))
            logger.info("%s: %s", name, sum(series.values()))

        logger.info("Viewers: %s", video.viewer_percentages())


if __name__ == "__main__":
    main()
