"""The following example demonstrates how to update, rate and delete a video
on behalf of an authenticated account.
"""

from ytvideo import Unauthorized, Video, YouTubeSession


def main() -> None:
    """Run the application."""
    with YouTubeSession(access_token="Your OAuth access token here") as session:
        video = Video("Your video ID here", auth=session)

        try:
            video.update(title="A better title", tags=["python", "youtube"])
            print(f"Updated: {video.title}")

            if not video.liked():
                video.like()

            video.delete()
            print(f"Exists: {video.exists()}")
        except Unauthorized as ex:
            print(f"The account cannot manage this video: {ex}")


if __name__ == "__main__":
    main()
