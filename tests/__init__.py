"""Contains fixtures and utility functions."""

from typing import Any

from dotenv import load_dotenv

from ytvideo import Video, YouTubeSession

DATA_API_URL = "https://www.googleapis.com/youtube/v3"
VIDEOS_URL = f"{DATA_API_URL}/videos"
RATE_URL = f"{DATA_API_URL}/videos/rate"
GET_RATING_URL = f"{DATA_API_URL}/videos/getRating"
REPORTS_URL = "https://youtubeanalytics.googleapis.com/v2/reports"
ANNOTATIONS_URL = "https://www.youtube.com/annotations_invideo"

VIDEO_ID = "MESycYJytkU"
CHANNEL_ID = "UCxO1tY8h1AhOz0T4ENwmpow"
ACCESS_TOKEN = "mock_access_token"  # noqa: S105

load_dotenv()


def get_session(
    *, access_token: str | None = ACCESS_TOKEN, owner_name: str | None = None
) -> YouTubeSession:
    """Create a mock session."""
    return YouTubeSession(access_token=access_token, owner_name=owner_name)


def get_video_data() -> dict[str, Any]:
    """Create a mock videos resource."""
    return {
        "kind": "youtube#video",
        "id": VIDEO_ID,
        "snippet": {
            "publishedAt": "2014-04-17T15:00:01Z",
            "channelId": CHANNEL_ID,
            "title": "Mock Video",
            "description": "Mock description",
            "thumbnails": {
                "default": {"url": "https://i.ytimg.com/vi/MESycYJytkU/default.jpg"},
                "high": {"url": "https://i.ytimg.com/vi/MESycYJytkU/hqdefault.jpg"},
            },
            "channelTitle": "Mock Channel",
            "tags": ["mock", "video"],
            "categoryId": "22",
            "liveBroadcastContent": "none",
        },
        "status": {
            "uploadStatus": "processed",
            "privacyStatus": "public",
            "license": "youtube",
            "embeddable": True,
            "publicStatsViewable": True,
        },
        "contentDetails": {
            "duration": "PT1M30S",
            "dimension": "2d",
            "definition": "hd",
            "caption": "false",
            "licensedContent": True,
        },
        "statistics": {
            "viewCount": "1500",
            "likeCount": "30",
            "favoriteCount": "0",
            "commentCount": "7",
        },
    }


def get_video(session: YouTubeSession, *, prefetched: bool = True) -> Video:
    """Create a mock video."""
    return Video(
        VIDEO_ID, auth=session, data=get_video_data() if prefetched else None
    )
