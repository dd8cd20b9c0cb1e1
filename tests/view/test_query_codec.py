import pytest

from barcraft_view import query_codec
from barcraft_view.models import ViewQuery


def test_default_view_encodes_to_empty_string() -> None:
    assert query_codec.encode(ViewQuery()) == ""


def test_omits_default_offset_and_page_size() -> None:
    query = ViewQuery(free_text="margarita", offset=0, page_size=10)
    assert query_codec.encode(query) == "q=margarita"


def test_emits_non_default_offset_and_page_size() -> None:
    query = ViewQuery(free_text="gin fizz", offset=20, page_size=5)
    assert query_codec.encode(query) == "q=gin+fizz&offset=20&limit=5"


def test_page_size_is_compared_with_the_configured_default() -> None:
    query = ViewQuery(category="cocktail", page_size=24)
    assert query_codec.encode(query, default_page_size=24) == "category=cocktail"


def test_cleared_search_drops_the_parameter() -> None:
    assert "q=" not in query_codec.encode(ViewQuery(free_text=""))


@pytest.mark.parametrize(
    "raw",
    [None, "", "?", "%%%&&==x", "page=3&sort=name", "/cocktails", "#q=hidden"],
)
def test_decode_is_total(raw) -> None:
    assert query_codec.decode(raw) == ViewQuery()


def test_decode_clamps_negative_offset() -> None:
    assert query_codec.decode("offset=-30").offset == 0


def test_decode_ignores_non_numeric_numbers() -> None:
    query = query_codec.decode("offset=ten&limit=lots")
    assert query.offset == 0
    assert query.page_size == 10


def test_decode_rejects_non_positive_page_size() -> None:
    assert query_codec.decode("limit=0", default_page_size=12).page_size == 12
    assert query_codec.decode("limit=-5", default_page_size=12).page_size == 12


def test_decode_keeps_unaligned_offsets() -> None:
    assert query_codec.decode("offset=7").offset == 7


def test_decode_accepts_full_urls_and_trims_free_text() -> None:
    query = query_codec.decode("http://localhost:3000/?q=%20margarita%20&offset=10#top")
    assert query == ViewQuery(free_text="margarita", offset=10)


def test_decode_drops_letters_that_are_not_one_character() -> None:
    assert query_codec.decode("letter=ab").letter is None
    assert query_codec.decode("letter=").letter is None
    assert query_codec.decode("letter=M").letter == "m"


def test_decode_keeps_only_the_highest_priority_filter() -> None:
    assert query_codec.decode("q=gin&category=cocktail&letter=a") == ViewQuery(letter="a")
    assert query_codec.decode("q=gin&category=cocktail") == ViewQuery(category="cocktail")


def test_decode_uses_first_value_of_repeated_parameters() -> None:
    assert query_codec.decode("q=mojito&q=negroni").free_text == "mojito"


@pytest.mark.parametrize(
    "query",
    [
        ViewQuery(),
        ViewQuery(offset=10),
        ViewQuery(free_text="margarita"),
        ViewQuery(free_text="old fashioned", offset=30),
        ViewQuery(free_text="piña & colada"),
        ViewQuery(letter="m", offset=20),
        ViewQuery(category="non-alcoholic"),
        ViewQuery(category="ordinary-drink", offset=40, page_size=20),
    ],
)
def test_round_trip_for_reachable_queries(query: ViewQuery) -> None:
    assert query_codec.decode(query_codec.encode(query)) == query


def test_decode_keeps_letters_whose_lower_case_is_longer() -> None:
    query = query_codec.decode(query_codec.encode(ViewQuery(letter="İ")))
    assert query.letter == "İ"
