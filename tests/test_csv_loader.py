import pytest

from opinion_cards.csv_loader import load_cards
from opinion_cards.store import CardStore


def _write(tmp_path, text: str):
    path = tmp_path / "cards.csv"
    path.write_text(text)
    return path


def test_load_cards_with_ids_and_counts(tmp_path):
    path = _write(tmp_path, (
        "id,content,category,duration,image_url,approved_count,rejected_count\n"
        "card-1,I believe pineapple belongs on pizza,Sales,1 day,,24,13\n"
        "card-3,I think cats are better than dogs,MIS ONE,10 days,blob:cat,89,76\n"
    ))
    store = CardStore()

    cards = load_cards(path, store)

    assert [c.id for c in cards] == ["card-1", "card-3"]
    cats = store.get("card-3")
    assert cats.category == "MIS ONE"
    assert cats.image_url == "blob:cat"
    assert (cats.approved_count, cats.rejected_count) == (89, 76)
    assert store.get("card-1").image_url is None


def test_load_cards_generates_ids_when_missing(tmp_path):
    path = _write(tmp_path, "content,category,duration\nMuseums on weekends,Support,3 days\n")
    store = CardStore()

    cards = load_cards(path, store)

    assert len(cards) == 1
    assert cards[0].id
    assert cards[0].approved_count == 0


def test_invalid_rows_are_skipped(tmp_path, caplog):
    path = _write(tmp_path, (
        "id,content,category,duration,approved_count\n"
        "a,Valid card,Tech,1 hour,1\n"
        "b,Wrong category,Marketing,1 hour,1\n"
        "c,,Tech,1 hour,1\n"
        "a,Duplicate id,Tech,1 hour,1\n"
        "d,Negative votes,Tech,1 hour,-4\n"
    ))
    store = CardStore()

    with caplog.at_level("WARNING"):
        cards = load_cards(path, store)

    assert [c.id for c in cards] == ["a"]
    assert len(store) == 1
    assert caplog.text.count("Skipping row") == 4


def test_missing_required_columns(tmp_path):
    path = _write(tmp_path, "content,category\nx,Tech\n")
    with pytest.raises(ValueError, match="duration"):
        load_cards(path, CardStore())


def test_fractional_counts_are_skipped(tmp_path, caplog):
    path = _write(tmp_path, (
        "id,content,category,duration,approved_count,rejected_count\n"
        "a,Whole counts,Tech,1 hour,3.0,1\n"
        "b,Fractional count,Tech,1 hour,2.7,1\n"
    ))
    store = CardStore()

    with caplog.at_level("WARNING"):
        cards = load_cards(path, store)

    assert [c.id for c in cards] == ["a"]
    assert cards[0].approved_count == 3
    assert "b" not in store
    assert "whole number" in caplog.text
