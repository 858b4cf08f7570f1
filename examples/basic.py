"""The following example demonstrates how to read the details of a public video
with an API key.
"""

from ytvideo import Video, YouTubeSession


def main() -> None:
    """Run the application."""
    with YouTubeSession(api_key="Your API key here") as session:
        video = Video("9bZkp7q19f0", auth=session)

        print(f"{video.title} by {video.channel_title}")
        print(f"Duration: {video.duration} seconds")
        print(f"Views: {video.view_count}, likes: {video.like_count}")


if __name__ == "__main__":
    main()
