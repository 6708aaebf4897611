import re

from inflectedit.structures.inflectable_string import InflectableString


def test_equality_and_hash_match_plain_strings():
    string = InflectableString("hanami")
    assert string == "hanami"
    assert string == InflectableString("hanami")
    assert hash(string) == hash("hanami")
    assert {string: 1}["hanami"] == 1
    assert "hanami" in {string}


def test_builds_from_non_strings():
    assert InflectableString(None) == ""
    assert InflectableString(42) == "42"
    assert InflectableString() == ""


def test_inflections_return_new_instances():
    string = InflectableString("HanamiView")
    result = string.underscore()
    assert isinstance(result, InflectableString)
    assert result == "hanami_view"
    assert string == "HanamiView"


def test_instance_and_function_forms_agree():
    string = InflectableString("Hanami::Utils::String")
    assert string.underscore() == "hanami/utils/string"
    assert string.demodulize() == "String"
    assert string.namespace() == "Hanami"
    assert InflectableString("APIDoc").dasherize() == "api-doc"
    assert InflectableString("hanami/router").classify() == "Hanami::Router"
    assert InflectableString("hanami' utils").titleize() == "Hanami' Utils"
    assert InflectableString("OneTwoThree").capitalize() == "One two three"
    assert InflectableString("exercise").pluralize() == "exercises"
    assert InflectableString("exercises").singularize() == "exercise"
    assert InflectableString("authors/books/index").rsub(re.compile("/"), "#") == "authors/books#index"


def test_rsub_accepts_an_inflectable_replacement():
    result = InflectableString("authors/books/index").rsub("/", InflectableString("#"))
    assert result == "authors/books#index"


def test_tokenize_visits_inflectable_strings():
    visited = []
    result = InflectableString("Hanami::(Utils|App)").tokenize(visited.append)
    assert result is None
    assert visited == ["Hanami::Utils", "Hanami::App"]
    assert all(isinstance(token, InflectableString) for token in visited)


def test_transform():
    result = InflectableString("hanami/utils").transform("underscore", "classify")
    assert isinstance(result, InflectableString)
    assert result == "Hanami::Utils"
    assert InflectableString("abc").transform(len) == 3


def test_plain_str_methods_still_work():
    string = InflectableString("Hanami\n")
    assert string.rstrip() == "Hanami"
    assert string.startswith("Han")


def test_transform_keeps_the_type_through_str_methods():
    string = InflectableString("  Hanami View ")
    assert type(string.strip()) is str
    result = string.transform("strip", "underscore")
    assert isinstance(result, InflectableString)
    assert result == "hanami_view"


def test_repr():
    assert repr(InflectableString("hanami")) == "InflectableString('hanami')"
