"""Contains the dataclass for the snippet of a video."""

__all__ = ["Snippet"]

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Self


@dataclass
class Snippet:
    """Represents the basic details of a YouTube video, such as its title,
    description and category.
    """

    title: str | None = None
    """The title of the video"""

    description: str | None = None
    """The description of the video"""

    tags: list[str] = field(default_factory=list)
    """The keyword tags of the video"""

    category_id: str | None = None
    """The ID of the category of the video"""

    channel_id: str | None = None
    """The ID of the channel the video was uploaded to"""

    channel_title: str | None = None
    """The title of the channel the video was uploaded to"""

    live_broadcast_content: str | None = None
    """Whether the video is an upcoming or active live broadcast
    ("upcoming", "live" or "none")"""

    published_at: datetime | None = None
    """The time when the video was published"""

    thumbnails: dict[str, str] = field(default_factory=dict)
    """The URLs of the thumbnails of the video, keyed by size"""

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> Self:
        """Create a Snippet from the snippet part of a videos resource.

        :param data: The JSON object of the snippet.
        :return: The snippet.
        """
        published_at = data.get("publishedAt")
        thumbnails = data.get("thumbnails") or {}

        return cls(
            title=data.get("title"),
            description=data.get("description"),
            tags=list(data.get("tags") or []),
            category_id=data.get("categoryId"),
            channel_id=data.get("channelId"),
            channel_title=data.get("channelTitle"),
            live_broadcast_content=data.get("liveBroadcastContent"),
            published_at=(
                datetime.fromisoformat(published_at.replace("Z", "+00:00"))
                if published_at
                else None
            ),
            thumbnails={
                size: thumbnail["url"]
                for size, thumbnail in thumbnails.items()
                if "url" in thumbnail
            },
        )
