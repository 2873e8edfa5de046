import pytest
from pydantic import ValidationError

from arclead.models.artists import NewArtist
from arclead.models.filmography import Filmography


def test_document_keeps_only_sent_fields():
    filmography = Filmography.model_validate({"dramas": [{"title": "A"}]})
    assert filmography.document() == {"dramas": [{"title": "A"}]}


def test_document_keeps_extra_categories():
    sent = {"dramas": [], "movies": [], "commercials": [], "musicals": [{"title": "B"}]}
    assert Filmography.model_validate(sent).document() == sent


def test_entries_are_opaque():
    sent = {"dramas": ["free text", {"title": "A", "year": 2023, "role": ["lead"]}]}
    assert Filmography.model_validate(sent).document() == sent


def test_new_artist_requires_name():
    with pytest.raises(ValidationError):
        NewArtist.model_validate({"filmography": {"dramas": []}})


def test_new_artist_filmography_optional():
    assert NewArtist(name="Kim").filmography is None
