# tests/test_format.py

from orthocal.core.date import Date
from orthocal.format import describe, format_date, join_descriptions
from orthocal.properties import tags as T
from orthocal.properties.titles import property_title


def test_default_format_is_julian_genitive():
    assert str(Date(2024, 4, 22)) == "22 Апреля 2024 г."


def test_numeric_directives():
    d = Date(2024, 4, 22)
    assert format_date(d, "%JD.%JQ.%JY") == "22.04.2024"
    assert format_date(d, "%GD.%GQ.%GY") == "05.05.2024"
    assert format_date(d, "%Gd/%Gq/%Gy") == "5/5/24"
    assert format_date(d, "%MF") == "Май"
    assert format_date(d, "%Jm") == "апр"


def test_weekday_directives():
    d = Date(2024, 4, 22)
    assert format_date(d, "%wd") == "0"
    assert format_date(d, "%WD") == "Воскресенье"
    assert format_date(d, "%Wd") == "Вс"


def test_percent_and_unknown_directives():
    d = Date(2024, 4, 22)
    assert format_date(d, "%%JY") == "%JY"
    assert format_date(d, "x %Zq y") == "x %Zq y"
    # a trailing % with fewer than two characters after it is kept
    assert format_date(d, "%JY %J") == "2024 %J"
    assert format_date(d, "ab") == "ab"


def test_replacement_text_is_not_rescanned():
    d = Date(2024, 4, 22)
    assert format_date(d, "%%%JY") == "%2024"
    assert format_date(d, "100%% %JY") == "100% 2024"
    assert format_date(d, "%%JY%%") == "%JY%"
    assert format_date(d, "%%Gd") == "%Gd"


def test_describe_day_and_fasts():
    text = describe(Date(2024, 4, 22), [T.pasha, T.full7_pasha], "%JD.%JQ")
    assert text.startswith("22.04 ")
    assert property_title(T.pasha) in text

    text = describe(Date(2024, 11, 25), [T.m11d25, T.post_rojd], "%JD.%JQ")
    assert text == "25.11 " + property_title(T.m11d25) + " " + property_title(T.post_rojd) + "."

    text = describe(Date(2024, 12, 1), [T.post_rojd], "%JD.%JQ")
    assert text == "01.12 " + property_title(T.post_rojd) + "."


def test_describe_skips_feast_classes_and_empty_date():
    text = describe(Date(2024, 12, 25), [T.m12d25, T.dvana10_nep_prazd], "%JD")
    assert text == "25 " + property_title(T.m12d25)
    assert describe(Date(), [T.pasha], "%JD") == ""


def test_join_descriptions_drops_empty():
    assert join_descriptions(["a", "", "b"]) == "a\nb"
    assert join_descriptions(["a", "b"], separator="; ") == "a; b"
