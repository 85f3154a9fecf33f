from app.domain.services.filters import match_category, match_keyword


def test_empty_keyword_matches_everything():
    assert match_keyword("Caramel Latte", "")
    assert match_keyword("Caramel Latte", "   ")
    assert match_keyword("", "")


def test_keyword_matches_word_of_name():
    assert match_keyword("Caramel Latte", "latte")
    assert match_keyword("Caramel Latte", "late")


def test_keyword_matches_full_name_case_insensitively():
    assert match_keyword("Green Tea", "  GREEN TEA ")
    assert match_keyword("Green Tea", "gren tee")


def test_keyword_without_close_word_does_not_match():
    assert not match_keyword("Caramel Latte", "xyz")


def test_short_words_are_ignored():
    # "tea" is within 3 edits of "pie" but shorter than 4 characters
    assert not match_keyword("Apple Pie Deluxe Edition", "tea")


def test_threshold_override():
    assert not match_keyword("Caramel Latte", "lat", threshold=1)
    assert match_keyword("Caramel Latte", "lat", threshold=2)


def test_category_filter():
    assert match_category("Tea", set())
    assert match_category("Tea", {"Tea", "Coffee"})
    assert not match_category("Tea", {"Coffee"})
    assert not match_category("Tea", {"tea"})
