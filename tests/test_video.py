"""Contains the tests for the class Video."""

import json
from collections.abc import Iterator
from datetime import UTC, date, datetime
from http import HTTPStatus

import pytest
import respx
from httpx import Response

from tests import (
    ANNOTATIONS_URL,
    CHANNEL_ID,
    GET_RATING_URL,
    RATE_URL,
    REPORTS_URL,
    VIDEO_ID,
    VIDEOS_URL,
    get_session,
    get_video,
    get_video_data,
)
from ytvideo import HTTPError, Rating, Unauthorized, Video, YouTubeSession


@pytest.fixture
def session() -> Iterator[YouTubeSession]:
    """Fixture for an authenticated YouTubeSession."""
    with get_session() as session:
        yield session


@pytest.fixture
def video(session: YouTubeSession) -> Video:
    """Fixture for a Video with all parts already fetched."""
    return get_video(session)


def test_exists(session: YouTubeSession) -> None:
    """Test the exists method of the Video class."""
    assert Video(VIDEO_ID, auth=session).exists()
    assert not Video(None, auth=session).exists()


@respx.mock
def test_delete(video: Video) -> None:
    """Test the delete method of the Video class."""
    route = respx.delete(VIDEOS_URL).mock(Response(HTTPStatus.NO_CONTENT))

    assert video.delete()
    assert not video.exists()
    assert video.id is None

    request = route.calls.last.request
    assert request.url.params["id"] == VIDEO_ID
    assert request.headers["Authorization"] == "Bearer mock_access_token"

    assert video.delete(), "Deleting a deleted video should be a no-op"
    assert route.call_count == 1, "Should not send a request for a deleted video"


@respx.mock
def test_delete_unauthorized() -> None:
    """Test deleting a video without the permission to do it."""
    route = respx.delete(VIDEOS_URL)

    with get_session(access_token=None) as session:
        video = get_video(session)

        with pytest.raises(Unauthorized):
            video.delete()

    assert not route.called, "Should not send a request without an access token"
    assert video.id == VIDEO_ID

    route.mock(
        Response(
            HTTPStatus.FORBIDDEN,
            json={"error": {"code": 403, "message": "Forbidden"}},
        )
    )

    with get_session() as session:
        video = get_video(session)

        with pytest.raises(Unauthorized) as info:
            video.delete()

    assert info.value.status_code == HTTPStatus.FORBIDDEN
    assert info.value.message == "Forbidden"
    assert video.exists()


@respx.mock
def test_update(video: Video) -> None:
    """Test the update method of the Video class."""
    data = get_video_data()
    data["snippet"]["title"] = "T"
    route = respx.put(VIDEOS_URL).mock(Response(HTTPStatus.OK, json=data))

    assert video.update(title="T")

    request = route.calls.last.request
    assert request.url.params["part"] == "snippet"
    assert json.loads(request.content) == {
        "id": VIDEO_ID,
        "snippet": {
            "title": "T",
            "description": "Mock description",
            "tags": ["mock", "video"],
            "categoryId": "22",
        },
    }

    assert video.title == "T"
    assert video.description == "Mock description"
    assert video.tags == ["mock", "video"]
    assert video.category_id == "22"
    assert video.id == VIDEO_ID


@respx.mock
def test_update_all_fields(video: Video) -> None:
    """Test updating every field of the snippet."""
    route = respx.put(VIDEOS_URL).mock(
        Response(HTTPStatus.OK, json={"id": VIDEO_ID})
    )

    assert video.update(
        title="New title", description="", tags=[], category_id="10"
    )

    assert json.loads(route.calls.last.request.content)["snippet"] == {
        "title": "New title",
        "description": "",
        "tags": [],
        "categoryId": "10",
    }

    # The response has no snippet, so the cached one is kept
    assert video.title == "Mock Video"


@respx.mock
def test_update_unauthorized() -> None:
    """Test updating a video without the permission to do it."""
    respx.put(VIDEOS_URL).mock(Response(HTTPStatus.UNAUTHORIZED))

    with get_session() as session:
        video = get_video(session)

        with pytest.raises(Unauthorized):
            video.update(title="T")

    assert video.id == VIDEO_ID
    assert video.title == "Mock Video"


@respx.mock
def test_rating(video: Video) -> None:
    """Test the like, dislike, unlike and liked methods of the Video class."""
    get_rating = respx.get(GET_RATING_URL).mock(
        Response(
            HTTPStatus.OK,
            json={"items": [{"videoId": VIDEO_ID, "rating": "none"}]},
        )
    )
    rate = respx.post(RATE_URL).mock(Response(HTTPStatus.NO_CONTENT))

    assert not video.liked()
    assert not video.liked()
    assert get_rating.call_count == 1, "Should fetch the rating only once"

    assert video.like()
    assert video.liked()
    assert rate.calls.last.request.url.params["rating"] == "like"

    assert video.dislike()
    assert not video.liked()
    assert rate.calls.last.request.url.params["rating"] == "dislike"

    assert video.unlike()
    assert not video.liked()
    assert rate.calls.last.request.url.params["rating"] == "none"

    assert rate.call_count == 3
    assert get_rating.call_count == 1


@respx.mock(assert_all_called=False)
def test_rating_unauthorized() -> None:
    """Test rating a video without an authenticated account."""
    rate = respx.post(RATE_URL)

    with get_session(access_token=None) as session:
        video = get_video(session)

        for action in (video.like, video.dislike, video.unlike, video.liked):
            with pytest.raises(Unauthorized):
                action()

    assert not rate.called


@respx.mock
def test_rating_kept_on_failure(video: Video) -> None:
    """Test that a failed rating keeps the previous rating."""
    respx.get(GET_RATING_URL).mock(
        Response(HTTPStatus.OK, json={"items": [{"rating": "like"}]})
    )
    respx.post(RATE_URL).mock(Response(HTTPStatus.FORBIDDEN))

    assert video.liked()

    with pytest.raises(Unauthorized):
        video.dislike()

    assert video.liked()


def test_reports_params(session: YouTubeSession) -> None:
    """Test the reports_params method of the Video class."""
    video = get_video(session)
    assert video.reports_params() == {
        "ids": f"channel=={CHANNEL_ID}",
        "filters": f"video=={VIDEO_ID}",
    }

    with get_session(owner_name="OWNER") as owner_session:
        video = get_video(owner_session)
        assert video.reports_params() == {
            "ids": "contentOwner==OWNER",
            "filters": f"video=={VIDEO_ID}",
        }


@respx.mock
def test_report(video: Video) -> None:
    """Test the report method of the Video class."""
    route = respx.get(REPORTS_URL).mock(
        Response(
            HTTPStatus.OK,
            json={
                "columnHeaders": [{"name": "day"}, {"name": "views"}],
                "rows": [["2024-01-02", 5], ["2024-01-01", 10]],
            },
        )
    )

    views = video.report("views", since=date(2024, 1, 1), until=date(2024, 1, 2))

    assert views == {date(2024, 1, 1): 10.0, date(2024, 1, 2): 5.0}
    assert list(views) == [date(2024, 1, 1), date(2024, 1, 2)]

    params = route.calls.last.request.url.params
    assert params["ids"] == f"channel=={CHANNEL_ID}"
    assert params["filters"] == f"video=={VIDEO_ID}"
    assert params["metrics"] == "views"
    assert params["dimensions"] == "day"
    assert params["startDate"] == "2024-01-01"
    assert params["endDate"] == "2024-01-02"

    video.report("earnings")
    assert route.calls.last.request.url.params["metrics"] == "estimatedRevenue"

    with pytest.raises(ValueError):
        video.report("subscribers")


@respx.mock
def test_viewer_percentages(video: Video) -> None:
    """Test the viewer_percentages method of the Video class."""
    respx.get(REPORTS_URL).mock(
        Response(
            HTTPStatus.OK,
            json={
                "rows": [
                    ["age18-24", "female", 10.5],
                    ["age18-24", "male", 20.0],
                    ["age25-34", "male", 69.5],
                ]
            },
        )
    )

    assert video.viewer_percentages() == {
        "age18-24": {"female": 10.5, "male": 20.0},
        "age25-34": {"male": 69.5},
    }


def test_prefetched_parts(video: Video) -> None:
    """Test reading the forwarded attributes of prefetched parts."""
    assert video.title == "Mock Video"
    assert video.channel_id == CHANNEL_ID
    assert video.channel_title == "Mock Channel"
    assert video.live_broadcast_content == "none"
    assert video.published_at == datetime(2014, 4, 17, 15, 0, 1, tzinfo=UTC)
    assert video.thumbnail_url("high").endswith("hqdefault.jpg")
    assert video.thumbnail_url("maxres") is None

    assert video.is_processed
    assert not video.is_deleted
    assert not video.is_scheduled
    assert video.is_public
    assert video.is_embeddable
    assert video.licensed_as_standard_youtube

    assert video.duration == 90
    assert video.is_hd
    assert not video.is_stereoscopic
    assert not video.is_captioned
    assert video.is_licensed

    assert video.view_count == 1500
    assert video.like_count == 30
    assert video.dislike_count == 0
    assert video.comment_count == 7


@respx.mock
def test_lazy_parts(session: YouTubeSession) -> None:
    """Test fetching the parts of a video on first access."""
    data = get_video_data()
    snippet = respx.get(VIDEOS_URL, params__contains={"part": "snippet"}).mock(
        Response(
            HTTPStatus.OK,
            json={"items": [{"id": VIDEO_ID, "snippet": data["snippet"]}]},
        )
    )
    statistics = respx.get(VIDEOS_URL, params__contains={"part": "statistics"}).mock(
        Response(
            HTTPStatus.OK,
            json={"items": [{"id": VIDEO_ID, "statistics": data["statistics"]}]},
        )
    )

    video = get_video(session, prefetched=False)

    assert not snippet.called
    assert video.title == "Mock Video"
    assert video.tags == ["mock", "video"]
    assert snippet.call_count == 1, "Should cache the snippet"

    assert video.view_count == 1500
    assert video.comment_count == 7
    assert statistics.call_count == 1, "Should cache the statistics"

    assert snippet.calls.last.request.url.params["id"] == VIDEO_ID


@respx.mock
def test_not_found(session: YouTubeSession) -> None:
    """Test reading a video that does not exist."""
    respx.get(VIDEOS_URL).mock(Response(HTTPStatus.OK, json={"items": []}))

    video = Video("unknown", auth=session)

    with pytest.raises(HTTPError) as info:
        _ = video.status

    assert info.value.status_code == HTTPStatus.NOT_FOUND

    deleted = Video(None, auth=session)
    with pytest.raises(HTTPError):
        _ = deleted.title


@respx.mock
def test_annotations(video: Video) -> None:
    """Test the annotations of the Video class."""
    route = respx.get(ANNOTATIONS_URL).mock(
        Response(
            HTTPStatus.OK,
            text="""
            <document>
              <annotations>
                <annotation id="annotation_1" type="text" style="speech">
                  <TEXT>Hello</TEXT>
                  <segment>
                    <movingRegion type="rect">
                      <rectRegion t="0:00:03.5" x="1" y="1" w="10" h="10"/>
                      <rectRegion t="0:00:08.0" x="1" y="1" w="10" h="10"/>
                    </movingRegion>
                  </segment>
                </annotation>
              </annotations>
            </document>
            """,
        )
    )

    annotations = video.annotations

    assert len(annotations) == 1
    assert annotations[0].text == "Hello"
    assert annotations[0].starts_at == 3.5
    assert annotations[0].ends_at == 8.0

    assert video.annotations is annotations
    assert route.call_count == 1
    assert route.calls.last.request.url.params["video_id"] == VIDEO_ID
    assert "Authorization" not in route.calls.last.request.headers


def test_repr(video: Video) -> None:
    """Test the string representation of the Video class."""
    assert repr(video) == f"Video(id='{VIDEO_ID}')"


@respx.mock
def test_unspecified_rating(video: Video) -> None:
    """Test reading a rating the API reports as unspecified."""
    respx.get(GET_RATING_URL).mock(
        Response(HTTPStatus.OK, json={"items": [{"rating": "unspecified"}]})
    )

    assert video.rating.rating == Rating.NONE
    assert not video.liked()


def test_read_only_attributes(video: Video) -> None:
    """Test that the forwarded attributes cannot be assigned."""
    for name in ("title", "is_public", "duration", "view_count"):
        with pytest.raises(AttributeError):
            setattr(video, name, "X")

    assert video.title == "Mock Video"
    assert video.is_public
    assert "title" not in vars(video)


@respx.mock
def test_update_after_failed_assignment(video: Video) -> None:
    """Test that update sends and caches the remote snippet, not local values."""
    data = get_video_data()
    data["snippet"]["title"] = "Remote"
    route = respx.put(VIDEOS_URL).mock(Response(HTTPStatus.OK, json=data))

    with pytest.raises(AttributeError):
        video.title = "Local"

    assert video.update(description="d")

    sent = json.loads(route.calls.last.request.content)["snippet"]
    assert sent["title"] == "Mock Video"
    assert video.title == "Remote"


@respx.mock
def test_deleted_video_operations(session: YouTubeSession) -> None:
    """Test that operations on a deleted video fail without a request."""
    video = Video(None, auth=session)

    operations = (
        lambda: video.update(title="T"),
        video.like,
        video.reports_params,
        lambda: video.report("views"),
        video.viewer_percentages,
    )
    for operation in operations:
        with pytest.raises(HTTPError) as info:
            operation()

        assert info.value.status_code == HTTPStatus.NOT_FOUND

    assert not respx.calls
