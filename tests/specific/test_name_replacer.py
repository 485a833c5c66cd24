"""Tests for the NameReplacer literal multi-pair find/replace"""

import pytest

from glueclone.utils.name_replacer import NameReplacer


def test_single_pair():
    replacer = NameReplacer({"dev": "prod"})
    assert replacer.replace("dev_ingest_dev") == "prod_ingest_prod"


def test_multiple_pairs():
    replacer = NameReplacer({"dev": "prod", "eu-west-1": "us-east-1"})
    assert replacer.replace("dev_crawler_eu-west-1") == "prod_crawler_us-east-1"


def test_no_cascading():
    """Replaced text is never rescanned"""
    replacer = NameReplacer({"a": "b", "b": "c"})
    assert replacer.replace("ab") == "bc"


def test_swap():
    replacer = NameReplacer({"blue": "green", "green": "blue"})
    assert replacer.replace("blue_to_green") == "green_to_blue"


def test_earlier_key_wins_at_same_position():
    assert NameReplacer({"ab": "X", "abc": "Y"}).replace("abcd") == "Xcd"
    assert NameReplacer({"abc": "Y", "ab": "X"}).replace("abcd") == "Yd"


def test_regex_characters_are_literal():
    replacer = NameReplacer({"a.b": "x", "(1)": "[2]"})
    assert replacer.replace("a.b_axb_(1)") == "x_axb_[2]"


def test_no_match_and_empty_map():
    assert NameReplacer({"qa": "prod"}).replace("dev_etl") == "dev_etl"
    assert NameReplacer().replace("dev_etl") == "dev_etl"
    assert NameReplacer({}).replace("") == ""


def test_replace_with_empty_value():
    assert NameReplacer({"_tmp": ""}).replace("ingest_tmp_job") == "ingest_job"


def test_bool():
    assert not NameReplacer()
    assert NameReplacer({"a": "b"})


def test_empty_key_rejected():
    with pytest.raises(ValueError):
        NameReplacer({"": "x"})
