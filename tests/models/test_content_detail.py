"""Test classes ContentDetail, StatisticsSet and Snippet."""

import isodate
import pytest

from ytvideo import ContentDetail, Snippet, StatisticsSet


def test_content_detail() -> None:
    """Test parsing the content details of a video."""
    detail = ContentDetail.from_data(
        {
            "duration": "PT1H2M3S",
            "dimension": "3d",
            "definition": "sd",
            "caption": "true",
            "licensedContent": False,
        }
    )

    assert detail.duration == 3723
    assert detail.is_stereoscopic
    assert not detail.is_hd
    assert detail.is_captioned
    assert not detail.is_licensed

    assert ContentDetail.from_data({}).duration == 0

    with pytest.raises(isodate.ISO8601Error):
        ContentDetail.from_data({"duration": "one minute"})


def test_statistics_set() -> None:
    """Test parsing the statistics of a video."""
    statistics = StatisticsSet.from_data(
        {"viewCount": "10", "likeCount": "2", "dislikeCount": "1", "commentCount": "3"}
    )

    assert statistics.view_count == 10
    assert statistics.like_count == 2
    assert statistics.dislike_count == 1
    assert statistics.favorite_count == 0
    assert statistics.comment_count == 3


def test_snippet() -> None:
    """Test parsing the snippet of a video."""
    snippet = Snippet.from_data({"title": "Title", "thumbnails": {"default": {}}})

    assert snippet.title == "Title"
    assert snippet.tags == []
    assert snippet.published_at is None
    assert snippet.thumbnails == {}
