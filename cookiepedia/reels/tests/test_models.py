import pytest

from cookiepedia.reels.models import Reel
from cookiepedia.reels.models import extract_hashtags
from cookiepedia.reels.models import extract_mentions


def test_extract_hashtags_lowercases_and_deduplicates():
    assert extract_hashtags("#Cookies and #baking, more #cookies!") == [
        "cookies",
        "baking",
    ]
    assert extract_hashtags("") == []


def test_extract_mentions():
    assert extract_mentions("thanks @baker and @taster, @baker again") == [
        "baker",
        "taster",
    ]


@pytest.mark.django_db
def test_save_recomputes_hashtags(user):
    reel = Reel.objects.create(
        user=user,
        video_url="https://cdn.example.com/r.mp4",
        thumbnail_url="https://cdn.example.com/r.jpg",
        caption="Weekend #Snickerdoodles",
        duration=30,
    )
    assert reel.hashtags == ["snickerdoodles"]

    reel.caption = "Now #Macarons"
    reel.save(update_fields=["caption"])
    reel.refresh_from_db()
    assert reel.hashtags == ["macarons"]
