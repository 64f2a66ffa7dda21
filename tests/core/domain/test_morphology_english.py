# tests/core/domain/test_morphology_english.py
import pytest

from realiser.core.domain.categories import LexicalCategory
from realiser.core.domain.elements import InflectedWordElement
from realiser.core.domain.features import (
    DiscourseFunction,
    Feature,
    Form,
    InternalFeature,
    NumberAgreement,
    Person,
    Tense,
)
from realiser.core.domain.morphology.english import (
    add_possessive,
    build_comparative,
    build_greco_latin_plural,
    build_past,
    build_present3s,
    build_present_participle,
    build_regular_plural,
    build_superlative,
)


class TestRegularBuilders:
    """Spelling rules for regular English inflection."""

    @pytest.mark.parametrize(
        "base, expected",
        [("dog", "dogs"), ("baby", "babies"), ("box", "boxes"), ("church", "churches"), ("day", "days")],
    )
    def test_regular_plural(self, base, expected):
        assert build_regular_plural(base) == expected

    @pytest.mark.parametrize(
        "base, expected",
        [("cactus", "cacti"), ("datum", "data"), ("analysis", "analyses"), ("index", "indices")],
    )
    def test_greco_latin_plural(self, base, expected):
        assert build_greco_latin_plural(base) == expected

    def test_present_third_singular(self):
        assert build_present3s("kiss") == "kisses"
        assert build_present3s("carry") == "carries"
        assert build_present3s("walk") == "walks"

    def test_past(self):
        """
        Scenario: regular verbs ending in a consonant, "e" and consonant + "y".
        Expected: "-ed", "-d" and "-ied"; doubling when requested.
        """
        assert build_past("walk") == "walked"
        assert build_past("like") == "liked"
        assert build_past("carry") == "carried"
        assert build_past("stop", True) == "stopped"

    def test_present_participle(self):
        assert build_present_participle("like") == "liking"
        assert build_present_participle("die") == "dying"
        assert build_present_participle("see") == "seeing"
        assert build_present_participle("run", True) == "running"

    def test_comparative_and_superlative(self):
        assert build_comparative("big", True) == "bigger"
        assert build_comparative("happy") == "happier"
        assert build_comparative("large") == "larger"
        assert build_superlative("happy") == "happiest"
        assert build_superlative("large") == "largest"

    def test_possessive(self):
        assert add_possessive("Mary") == "Mary's"
        assert add_possessive("dogs") == "dogs'"


class TestEnglishMorphologyHelper:
    """Inflection of lexicon words through the registry."""

    def _inflect(self, registry, lexicon, base, category, **features):
        element = InflectedWordElement(lexicon.get_word(base, category))
        for name, value in features.items():
            element.set_feature(name, value)
        return registry.realise_morphology(element).realisation

    def test_irregular_forms_come_from_lexicon(self, registry, en_lexicon):
        """
        Scenario: plural "woman", past "go" and plural "sheep".
        Expected: the stored irregular forms.
        """
        assert self._inflect(registry, en_lexicon, "woman", LexicalCategory.NOUN, number=NumberAgreement.PLURAL) == "women"
        assert self._inflect(registry, en_lexicon, "go", LexicalCategory.VERB, tense=Tense.PAST) == "went"
        assert self._inflect(registry, en_lexicon, "sheep", LexicalCategory.NOUN, number=NumberAgreement.PLURAL) == "sheep"

    def test_inflection_patterns(self, registry, en_lexicon):
        """
        Scenario: words carrying the Greco-Latin, doubling and uncountable patterns.
        Expected: "cacti", "stopped" and an unchanged "information".
        """
        assert self._inflect(registry, en_lexicon, "cactus", LexicalCategory.NOUN, number=NumberAgreement.PLURAL) == "cacti"
        assert self._inflect(registry, en_lexicon, "stop", LexicalCategory.VERB, tense=Tense.PAST) == "stopped"
        assert (
            self._inflect(registry, en_lexicon, "information", LexicalCategory.NOUN, number=NumberAgreement.PLURAL)
            == "information"
        )

    def test_verb_agreement(self, registry, en_lexicon):
        assert self._inflect(registry, en_lexicon, "kiss", LexicalCategory.VERB) == "kisses"
        assert self._inflect(registry, en_lexicon, "kiss", LexicalCategory.VERB, person=Person.FIRST) == "kiss"
        assert self._inflect(registry, en_lexicon, "carry", LexicalCategory.VERB, form=Form.PRESENT_PARTICIPLE) == "carrying"

    def test_be_is_suppletive(self, registry, en_lexicon):
        """
        Scenario: "be" in several person, number and tense combinations.
        Expected: am / is / are / was / were.
        """
        assert self._inflect(registry, en_lexicon, "be", LexicalCategory.VERB, person=Person.FIRST) == "am"
        assert self._inflect(registry, en_lexicon, "be", LexicalCategory.VERB) == "is"
        assert self._inflect(registry, en_lexicon, "be", LexicalCategory.VERB, number=NumberAgreement.PLURAL) == "are"
        assert self._inflect(registry, en_lexicon, "be", LexicalCategory.VERB, tense=Tense.PAST) == "was"
        assert (
            self._inflect(registry, en_lexicon, "be", LexicalCategory.VERB, tense=Tense.PAST, number=NumberAgreement.PLURAL)
            == "were"
        )

    def test_comparative_from_lexicon_or_rules(self, registry, en_lexicon):
        assert self._inflect(registry, en_lexicon, "good", LexicalCategory.ADJECTIVE, is_comparative=True) == "better"
        assert self._inflect(registry, en_lexicon, "big", LexicalCategory.ADJECTIVE, is_superlative=True) == "biggest"

    def test_personal_pronoun_case(self, registry, en_lexicon):
        """
        Scenario: "he" as object, plural subject and possessive specifier.
        Expected: "him", "they" and "his".
        """
        assert (
            self._inflect(registry, en_lexicon, "he", LexicalCategory.PRONOUN, discourse_function=DiscourseFunction.OBJECT)
            == "him"
        )
        assert (
            self._inflect(
                registry, en_lexicon, "he", LexicalCategory.PRONOUN,
                discourse_function=DiscourseFunction.SUBJECT, number=NumberAgreement.PLURAL,
            )
            == "they"
        )
        assert (
            self._inflect(
                registry, en_lexicon, "he", LexicalCategory.PRONOUN,
                discourse_function=DiscourseFunction.SPECIFIER, possessive=True,
            )
            == "his"
        )

    def test_plural_determiners(self, registry, en_lexicon):
        assert self._inflect(registry, en_lexicon, "this", LexicalCategory.DETERMINER, number=NumberAgreement.PLURAL) == "these"
        assert self._inflect(registry, en_lexicon, "a", LexicalCategory.DETERMINER, number=NumberAgreement.PLURAL) == "some"

    def test_non_morph_words_keep_base_form(self, registry, en_lexicon):
        element = InflectedWordElement(en_lexicon.get_word("dog", LexicalCategory.NOUN))
        element.set_feature(Feature.NUMBER, NumberAgreement.PLURAL)
        element.set_feature(InternalFeature.NON_MORPH, True)

        assert registry.realise_morphology(element).realisation == "dog"


if __name__ == "__main__":
    pytest.main([__file__])
