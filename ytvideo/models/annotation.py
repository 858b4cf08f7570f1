"""
This module contains the annotation model and the parser for the in-video
annotations document of a video.
"""

__all__ = ["Annotation", "parse_annotations"]

from dataclasses import dataclass
from pyexpat import ExpatError
from typing import Any, Self
from urllib.parse import parse_qs, urlparse

import xmltodict


def _as_list(value: Any) -> list:
    """Normalize a node that xmltodict returns as a dict when it occurs once
    and as a list when it occurs several times.
    """
    if value is None:
        return []

    return value if isinstance(value, list) else [value]


def _parse_time(value: str | None) -> float | None:
    """Convert a timestamp such as "0:01:03.5" into seconds."""
    if not value or value == "never":
        return None

    seconds = 0.0
    for part in value.split(":"):
        seconds = seconds * 60 + float(part)

    return seconds


@dataclass
class Annotation:
    """
    Represents an in-video annotation of a YouTube video.
    """

    id: str
    """The unique ID of the annotation"""

    type: str | None
    """The type of the annotation, such as text, highlight or branding"""

    style: str | None
    """The style of the annotation, such as speech or note"""

    text: str | None
    """The text displayed by the annotation"""

    starts_at: float | None
    """The second of the video when the annotation appears"""

    ends_at: float | None
    """The second of the video when the annotation disappears"""

    link: str | None
    """The URL the annotation links to, if any"""

    link_target: str | None = None
    """Where the link is opened ("current" or "new")"""

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> Self:
        """Create an Annotation from an <annotation> node parsed by xmltodict.

        :param data: The parsed node.
        :return: The annotation.
        """
        regions = []
        for segment in _as_list(data.get("segment")):
            moving_region = (segment or {}).get("movingRegion") or {}
            for kind in ("rectRegion", "anchoredRegion"):
                regions.extend(_as_list(moving_region.get(kind)))

        times = [region.get("@t") for region in regions]

        url = None
        for action in _as_list(data.get("action")):
            url = (action or {}).get("url") or url

        return cls(
            id=data.get("@id", ""),
            type=data.get("@type"),
            style=data.get("@style"),
            text=data.get("TEXT"),
            starts_at=_parse_time(times[0]) if times else None,
            ends_at=_parse_time(times[-1]) if times else None,
            link=url.get("@value") if url else None,
            link_target=url.get("@target") if url else None,
        )

    @property
    def has_link_to_video(self) -> bool:
        """Whether the annotation links to a YouTube video."""
        if self.link is None:
            return False

        url = urlparse(self.link)
        if url.netloc.endswith("youtu.be"):
            return bool(url.path.strip("/"))

        return url.path == "/watch" and "v" in parse_qs(url.query)

    @property
    def has_link_to_playlist(self) -> bool:
        """Whether the annotation links to a YouTube playlist."""
        if self.link is None:
            return False

        url = urlparse(self.link)
        return url.path == "/playlist" or "list" in parse_qs(url.query)

    @property
    def has_link_to_subscribe(self) -> bool:
        """Whether the annotation links to the subscription page of a channel."""
        if self.link is None:
            return False

        url = urlparse(self.link)
        return (
            "subscription_center" in url.path or "add_user" in parse_qs(url.query)
        )

    @property
    def has_link_to_same_window(self) -> bool:
        """Whether the link of the annotation opens in the same window."""
        return self.link is not None and self.link_target == "current"

    @property
    def has_invideo_programming(self) -> bool:
        """Whether the annotation is a branding watermark or a featured video
        promotion set by the channel.
        """
        return self.type in ("branding", "promotion")


def parse_annotations(document: str) -> list[Annotation]:
    """Parse the in-video annotations document of a video.

    :param document: The XML document.
    :return: The annotations in the order they appear in the document.
    :raises ValueError: If the document is not valid XML.
    """
    if not document.strip():
        return []

    try:
        body = xmltodict.parse(document)
    except ExpatError as ex:
        raise ValueError("Invalid annotations document") from ex

    annotations = ((body or {}).get("document") or {}).get("annotations") or {}

    return [
        Annotation.from_data(annotation)
        for annotation in _as_list(annotations.get("annotation"))
        if annotation
    ]
