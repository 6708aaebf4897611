"""
Rule tables for pluralize and singularize.

These are a fixed, ordered list tuned for identifiers (table names, resources, ...), not a complete English inflector.
Each regular rule is a pattern matched against the whole word and a template expanded from the match. The first
rule that matches wins, so the most specific suffixes come first.
"""
import re
from typing import NamedTuple

from attrs import define


class Rule(NamedTuple):
    pattern: re.Pattern
    template: str


def rule(pattern: str, template: str, flags: int = 0) -> Rule:
    return Rule(pattern=re.compile(pattern, flags), template=template)


# The words that lend their -o to -oes
OES_WORDS = "buffal|domin|ech|embarg|her|mosquit|potat|tomat"
# The words whose -sis becomes -ses
SES_WORDS = "analy|cri|diagno|parenthe|progno|synop|the"

IRREGULAR_PLURALS = {
    # irregular
    "cactus": "cacti",
    "child": "children",
    "corpus": "corpora",
    "foot": "feet",
    "genus": "genera",
    "goose": "geese",
    "louse": "lice",
    "man": "men",
    "mouse": "mice",
    "ox": "oxen",
    "person": "people",
    "quiz": "quizzes",
    "sex": "sexes",
    "testis": "testes",
    "tooth": "teeth",
    "woman": "women",
    # uncountable
    "deer": "deer",
    "equipment": "equipment",
    "fish": "fish",
    "information": "information",
    "means": "means",
    "money": "money",
    "news": "news",
    "offspring": "offspring",
    "rice": "rice",
    "series": "series",
    "sheep": "sheep",
    "species": "species",
    "police": "police",
    # regressions of the suffix rules
    "album": "albums",
    "area": "areas",
}

IRREGULAR_SINGULARS = {
    **{plural: singular for singular, plural in IRREGULAR_PLURALS.items()},
    # fallbacks for the -ives and -ses rules
    "hives": "hive",
    "horses": "horse",
}

PLURAL_RULES = (
    rule(r"\A(.*[^aeiou])ch\Z", r"\1ches"),
    rule(r"\A(.*[^aeiou])y\Z", r"\1ies"),
    rule(r"\A(.*)(?:ex|ix)\Z", r"\1ices"),
    rule(r"\A(.*)(?:eau|eaux)\Z", r"\1eaux"),
    rule(r"\A(.*)x\Z", r"\1xes"),
    rule(r"\A(.*sh)\Z", r"\1es"),
    rule(r"\A(.*ma)\Z", r"\1ta"),
    rule(r"\A(.*)(?:um|a)\Z", r"\1a"),
    rule(rf"\A(.*(?:{OES_WORDS}))o\Z", r"\1oes", re.IGNORECASE),
    rule(r"\A(.*fee)\Z", r"\1s"),
    rule(r"\A(.*[^f])fe*\Z", r"\1ves"),
    rule(r"\A(.*)us\Z", r"\1uses"),
    rule(r"\A(.*)non\Z", r"\1na"),
    rule(r"\A(.*[^aeiou])is\Z", r"\1es"),
    rule(r"\A(.*)ss\Z", r"\1sses"),
    rule(r"\A(.*s)\Z", r"\1"),
)

SINGULAR_RULES = (
    rule(r"\A(.*[^aeiou])ches\Z", r"\1ch"),
    rule(r"\A(.*[^aeiou])ies\Z", r"\1y"),
    rule(r"\A(.*)ices\Z", r"\1ice"),
    rule(r"\A(.*)eaux\Z", r"\1eau"),
    rule(r"\A(.*[^aeiou]us)es\Z", r"\1"),
    rule(r"\A(.*ss)es\Z", r"\1"),
    rule(r"\A(.*sh)es\Z", r"\1"),
    rule(rf"\A(.*(?:{SES_WORDS}))ses\Z", r"\1sis"),
    rule(r"\A(.*)mata\Z", r"\1ma"),
    rule(rf"\A(.*(?:{OES_WORDS}))oes\Z", r"\1o", re.IGNORECASE),
    rule(r"\A(.*)xes\Z", r"\1x"),
    rule(r"\A(.*)ives\Z", r"\1ife"),
    rule(r"\A(.*)ves\Z", r"\1f"),
    rule(r"\A(.*)i\Z", r"\1us"),
    rule(r"\A(.*)ae\Z", r"\1a"),
    rule(r"\A(.*)na\Z", r"\1non"),
    rule(r"\A(.*)a\Z", r"\1um"),
    rule(r"\A(.*(?:[^s]|ss|us))\Z", r"\1"),
)

# Used when no rule matches
DEFAULT_PLURAL_RULE = rule(r"\A(.*)\Z", r"\1s", re.DOTALL)
DEFAULT_SINGULAR_RULE = rule(r"\A(.*)s\Z", r"\1", re.DOTALL)

LAST_TOKEN_REGEXP = re.compile(r"_([^\W\d_]*)\Z")


@define(frozen=True)
class IrregularRules:
    """
    Irregular and uncountable words, looked up by the last ``_``-separated token of a word.
    """

    rules: dict[str, str]

    def __contains__(self, word: str) -> bool:
        key = self._last_token(word)
        return key in self.rules or key in self.rules.values()

    def apply(self, word: str) -> str:
        key = self._last_token(word)
        # A word that is already in the target form maps to itself
        result = self.rules.get(key, key)
        # Keep everything up to and including the first letter of the token, so its case survives
        prefix = word[: len(word) - len(key) + 1]
        return prefix + result[1:]

    @staticmethod
    def _last_token(word: str) -> str:
        match = LAST_TOKEN_REGEXP.search(word.lower())
        if match:
            return match.group(1)
        return word.lower()


PLURALS = IrregularRules(IRREGULAR_PLURALS)
SINGULARS = IrregularRules(IRREGULAR_SINGULARS)


def inflect(word: str, irregulars: IrregularRules, rules: tuple[Rule, ...], default: Rule) -> str:
    if word in irregulars:
        return irregulars.apply(word)
    for pattern, template in rules:
        match = pattern.search(word)
        if match:
            return match.expand(template)
    match = default.pattern.search(word)
    return match.expand(default.template) if match else word
