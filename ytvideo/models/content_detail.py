"""Contains the dataclass for the content details of a video."""

__all__ = ["ContentDetail"]

from dataclasses import dataclass
from typing import Any, Self

import isodate


@dataclass
class ContentDetail:
    """Represents the content details of a YouTube video."""

    duration: int = 0
    """The length of the video in seconds"""

    is_hd: bool = False
    """Whether the video is available in high definition"""

    is_stereoscopic: bool = False
    """Whether the video is available in 3D"""

    is_captioned: bool = False
    """Whether captions are available for the video"""

    is_licensed: bool = False
    """Whether the video is claimed licensed content"""

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> Self:
        """Create a ContentDetail from the contentDetails part of a videos
        resource.

        :param data: The JSON object of the content details.
        :return: The content details.
        :raises isodate.ISO8601Error: If the duration is malformed.
        """
        duration = data.get("duration")

        return cls(
            duration=(
                int(isodate.parse_duration(duration).total_seconds())
                if duration
                else 0
            ),
            is_hd=data.get("definition") == "hd",
            is_stereoscopic=data.get("dimension") == "3d",
            is_captioned=data.get("caption") == "true",
            is_licensed=bool(data.get("licensedContent", False)),
        )
