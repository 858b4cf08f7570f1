"""Contains the dataclasses used to configure the YouTubeSession."""

import os
from dataclasses import dataclass
from typing import Self


@dataclass
class SessionConfig:
    """Represents the configuration of the YouTubeSession."""

    data_api_url: str = "https://www.googleapis.com/youtube/v3"
    """The base URL of the YouTube Data API"""

    analytics_api_url: str = "https://youtubeanalytics.googleapis.com/v2"
    """The base URL of the YouTube Analytics API"""

    annotations_url: str = "https://www.youtube.com/annotations_invideo"
    """The URL serving the in-video annotations of a video"""

    timeout: float = 10.0
    """The timeout in seconds for every request"""

    @classmethod
    def from_env(cls) -> Self:
        """Create a configuration from the environment variables.
        Variables that are not set keep their default values.

        :return: The configuration.
        :raises ValueError: If YTVIDEO_TIMEOUT is not a number.
        """
        defaults = cls()
        return cls(
            data_api_url=os.getenv("YTVIDEO_DATA_API_URL", defaults.data_api_url),
            analytics_api_url=os.getenv(
                "YTVIDEO_ANALYTICS_API_URL", defaults.analytics_api_url
            ),
            annotations_url=os.getenv(
                "YTVIDEO_ANNOTATIONS_URL", defaults.annotations_url
            ),
            timeout=float(os.getenv("YTVIDEO_TIMEOUT", defaults.timeout)),
        )
