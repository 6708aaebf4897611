import re
from enum import Enum

import pytest

from inflectedit.behaviour.inflector import capitalize
from inflectedit.behaviour.inflector import classify
from inflectedit.behaviour.inflector import dasherize
from inflectedit.behaviour.inflector import demodulize
from inflectedit.behaviour.inflector import namespace
from inflectedit.behaviour.inflector import rsub
from inflectedit.behaviour.inflector import titleize
from inflectedit.behaviour.inflector import to_string
from inflectedit.behaviour.inflector import tokenize
from inflectedit.behaviour.inflector import tokens
from inflectedit.behaviour.inflector import underscore


class Name(Enum):
    HANAMI_UTILS = "HanamiUtils"


@pytest.mark.parametrize(
    "string, expected",
    [
        ("Hanami", "hanami"),
        ("HanamiView", "hanami_view"),
        ("Hanami::Utils::String", "hanami/utils/string"),
        ("APIDoc", "api_doc"),
        ("Lucky23Action", "lucky23_action"),
        ("hanami-utils", "hanami_utils"),
        ("Hanami Utils", "hanami_utils"),
        ("è vero", "è_vero"),
    ],
)
def test_underscore(string, expected):
    assert underscore(string) == expected


@pytest.mark.parametrize(
    "string, expected",
    [
        ("Hanami", "hanami"),
        ("HanamiView", "hanami-view"),
        ("APIDoc", "api-doc"),
        ("Lucky23Action", "lucky23-action"),
        ("hanami_utils", "hanami-utils"),
        ("Hanami Utils", "hanami-utils"),
        ("è vero", "è-vero"),
    ],
)
def test_dasherize(string, expected):
    assert dasherize(string) == expected


@pytest.mark.parametrize(
    "string, expected",
    [
        ("hanami", "Hanami"),
        ("hanami_view", "HanamiView"),
        ("hanami-router", "HanamiRouter"),
        ("hanami/router", "Hanami::Router"),
        ("hanami::router", "Hanami::Router"),
        ("hanami::router/base_object", "Hanami::Router::BaseObject"),
        ("AwesomeProject", "AwesomeProject"),
        ("AwesomeProject::Namespace", "AwesomeProject::Namespace"),
    ],
)
def test_classify(string, expected):
    assert classify(string) == expected


def test_classify_reverts_underscore():
    assert underscore("HanamiView") == "hanami_view"
    assert classify("hanami_view") == "HanamiView"


def test_demodulize_and_namespace():
    assert demodulize("Hanami::Utils::String") == "String"
    assert demodulize("String") == "String"
    assert demodulize("Hanami::") == "Hanami"
    assert demodulize("Hanami::Utils::::") == "Utils"
    assert demodulize("") == ""
    assert namespace("Hanami::Utils::String") == "Hanami"
    assert namespace("String") == "String"


@pytest.mark.parametrize(
    "string, expected",
    [
        ("hanami", "Hanami"),
        ("HanamiUtils", "Hanami Utils"),
        ("hanami utils", "Hanami Utils"),
        ("hanami_utils", "Hanami Utils"),
        ("hanami-utils", "Hanami Utils"),
        ("hanami' utils", "Hanami' Utils"),
        ("hanami’ utils", "Hanami’ Utils"),
        ("hanami` utils", "Hanami` Utils"),
    ],
)
def test_titleize(string, expected):
    assert titleize(string) == expected


@pytest.mark.parametrize(
    "string, expected",
    [
        ("hanami", "Hanami"),
        ("HanamiUtils", "Hanami utils"),
        ("hanami utils", "Hanami utils"),
        ("hanami' utils", "Hanami' utils"),
        ("hanami’ utils", "Hanami’ utils"),
        ("OneTwoThree", "One two three"),
        ("one Two three", "One two three"),
        ("one_two_three", "One two three"),
        ("one-two-three", "One two three"),
    ],
)
def test_capitalize(string, expected):
    assert capitalize(string) == expected


def test_apostrophe_words_are_capitalized_once():
    assert titleize("rock'n'roll band") == "Rock'n'roll Band"
    assert capitalize("rock'n'roll band") == "Rock'n'roll band"


def test_operations_return_plain_strings():
    assert type(classify("hanami")) is str
    assert type(underscore("Hanami")) is str


def test_operations_accept_non_strings():
    assert underscore(Name.HANAMI_UTILS) == "hanami_utils"
    assert capitalize(Name.HANAMI_UTILS) == "Hanami utils"
    assert to_string(None) == ""
    assert classify(None) == ""


def test_rsub_replaces_rightmost_match():
    assert rsub("authors/books/index", "/", "#") == "authors/books#index"
    assert rsub("authors/books/index", re.compile("/"), "#") == "authors/books#index"


def test_rsub_without_match_returns_input():
    assert rsub("index", "/", "#") == "index"


def test_rsub_treats_string_pattern_literally():
    assert rsub("a.b.c", ".", "-") == "a.b-c"


def test_rsub_replacement_is_literal():
    assert rsub("a/b", re.compile("(/)"), r"\1\1") == r"a\1\1b"


def test_rsub_with_empty_pattern_and_replacement():
    assert rsub("authors/books/index", re.compile(""), "") == "authors/books/index"


def test_tokenize_visits_each_alternative_in_order():
    visited = []
    result = tokenize("Lotus::(Utils|App)", visited.append)
    assert result is None
    assert visited == ["Lotus::Utils", "Lotus::App"]


def test_tokenize_without_group_visits_once():
    visited = []
    tokenize("Lotus", visited.append)
    assert visited == ["Lotus"]


def test_tokens_keep_prefix_and_suffix():
    assert list(tokens("App::(Layer|Layer::)Step")) == ["App::LayerStep", "App::Layer::Step"]


def test_inputs_are_not_mutated():
    string = "hanami_utils"
    classify(string)
    underscore(string)
    rsub(string, "_", "-")
    assert string == "hanami_utils"
