"""Script for end-to-end testing the Video class against the YouTube APIs."""

import logging
import os
import sys

from dotenv import load_dotenv

from ytvideo import Video, YouTubeSession

if __name__ == "__main__":  # pragma: no cover
    load_dotenv()
    logging.basicConfig(level=logging.DEBUG)

    video_id = sys.argv[1] if len(sys.argv) > 1 else os.environ["YOUTUBE_VIDEO_ID"]

    with YouTubeSession.from_env() as session:
        video = Video(video_id, auth=session)

        print(f"{video.title} by {video.channel_title}")  # noqa: T201
        print(f"{video.duration}s, {video.view_count} views")  # noqa: T201

        if session.is_authenticated:
            print(f"Liked: {video.liked()}")  # noqa: T201
            print(f"Views: {video.report('views')}")  # noqa: T201
