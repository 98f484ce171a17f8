# tests/test_tags.py

import pytest

from orthocal.properties import tags as T
from orthocal.properties.titles import TITLES, property_title


def test_lookup_by_name_and_value():
    assert T.tag_by_name("pasha") == T.pasha == 1
    assert T.tag_by_name(" m12d25 ") == T.m12d25
    assert T.tag_by_name("1001") == T.m1d1
    assert T.tag_name(T.ned8_popashe) == "ned8_popashe"
    assert T.tag_name(999999) == ""
    with pytest.raises(KeyError):
        T.tag_by_name("no_such_tag")
    with pytest.raises(KeyError):
        T.tag_by_name("999999")


def test_groups():
    assert T.tag_group(T.pasha) == "movable"
    assert T.tag_group(T.m12d25) == "fixed"
    assert T.tag_group(T.dvana10_nep_prazd) == "feast_class"
    assert T.tag_group(T.post_rojd) == "fast"
    assert T.tag_group(0) == ""


def test_paschal_chain_is_contiguous():
    assert T.ned8_popashe - T.pasha == 49
    assert T.ned1_po50 - T.pasha == 56
    assert T.vel_post_d6n7 - T.vel_post_d1n1 == 47


def test_every_title_belongs_to_a_known_tag():
    for tag in TITLES:
        assert T.tag_name(tag)
    assert property_title(T.pasha)
    assert property_title(999999) == ""
