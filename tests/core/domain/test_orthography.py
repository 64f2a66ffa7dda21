# tests/core/domain/test_orthography.py
import pytest

from realiser.core.domain.categories import LexicalCategory
from realiser.core.domain.elements import StringElement
from realiser.core.domain.features import Feature, Language, NumberAgreement, PronounType
from realiser.core.domain.orthography.base import capitalise_first_letter, terminate_sentence
from realiser.core.domain.orthography.french import FrenchOrthographyHelper, begins_with_vowel


def _word(text, category=None, **features):
    element = StringElement(text)
    if category is not None:
        element.category = category
    for name, value in features.items():
        element.set_feature(name, value)
    return element


class TestSentenceFormatting:
    """Capitalisation and terminal punctuation."""

    def test_capitalise_first_letter(self):
        assert capitalise_first_letter("the dog") == "The dog"
        assert capitalise_first_letter("élan") == "Élan"
        assert capitalise_first_letter("1984") == "1984"
        assert capitalise_first_letter("") == ""

    def test_terminate_sentence(self):
        """
        Scenario: declarative, interrogative and already punctuated text.
        Expected: "." or "?" is appended once.
        """
        assert terminate_sentence("It rains", False) == "It rains."
        assert terminate_sentence("Does it rain", True) == "Does it rain?"
        assert terminate_sentence("Stop.", False) == "Stop."
        assert terminate_sentence("Why?", True) == "Why?"


class TestEnglishMorphophonology:
    """The indefinite article before vowels."""

    @pytest.mark.parametrize("following, article", [("apple", "an"), ("ball", "a"), ("Egg", "an")])
    def test_a_an(self, registry, following, article):
        left, right = StringElement("a"), StringElement(following)

        registry.orthography_helper(Language.ENGLISH).apply_morphophonology(left, right)

        assert left.realisation == article


class TestFrenchMorphophonology:
    """Contraction, elision and duplicate removal between adjacent French words."""

    def test_begins_with_vowel(self):
        assert begins_with_vowel(_word("homme"))
        assert begins_with_vowel(_word("école"))
        assert not begins_with_vowel(_word("héros", aspired_h=True))
        assert not begins_with_vowel(_word("onzième"))
        assert not begins_with_vowel(_word("chat"))

    @pytest.mark.parametrize(
        "preposition, article, contracted",
        [("de", "le", "du"), ("de", "les", "des"), ("à", "le", "au"), ("à", "les", "aux")],
    )
    def test_preposition_article_contraction(self, preposition, article, contracted):
        """
        Scenario: a preposition is followed by a definite article.
        Expected: one contracted word; the article realises to nothing.
        """
        # Arrange
        left = _word(preposition, LexicalCategory.PREPOSITION)
        right = _word(article, LexicalCategory.DETERMINER)

        # Act
        FrenchOrthographyHelper.contract(left, right)

        # Assert
        assert left.realisation == contracted
        assert right.realisation is None

    def test_relative_pronoun_contraction(self):
        left = _word("à", LexicalCategory.PREPOSITION)
        right = _word("lesquelles", LexicalCategory.PRONOUN, pronoun_type=PronounType.RELATIVE)

        FrenchOrthographyHelper.contract(left, right)

        assert left.realisation == "auxquelles"
        assert right.realisation is None

        FrenchOrthographyHelper.contract(left, right)

        assert left.realisation == "auxquelles"

    def test_no_contraction_with_pronoun_le(self):
        left = _word("de", LexicalCategory.PREPOSITION)
        right = _word("le", LexicalCategory.PRONOUN)

        FrenchOrthographyHelper.contract(left, right)

        assert left.realisation == "de"
        assert right.realisation == "le"

    def test_elision_before_vowel(self):
        """
        Scenario: "le" (elidable) before "homme", then before aspirated "héros".
        Expected: "l'" in the first case only.
        """
        left = _word("le", LexicalCategory.DETERMINER, vowel_elision=True)
        FrenchOrthographyHelper.elide(left, _word("homme"))
        assert left.realisation == "l'"

        left = _word("le", LexicalCategory.DETERMINER, vowel_elision=True)
        FrenchOrthographyHelper.elide(left, _word("héros", aspired_h=True))
        assert left.realisation == "le"

    def test_plural_does_not_elide(self):
        left = _word("le", LexicalCategory.DETERMINER, vowel_elision=True)
        left.set_feature(Feature.NUMBER, NumberAgreement.PLURAL)

        FrenchOrthographyHelper.elide(left, _word("hommes"))

        assert left.realisation == "le"

    def test_si_il(self):
        left = _word("si")

        FrenchOrthographyHelper.elide(left, _word("il"))

        assert left.realisation == "s'"

    def test_duplicate_de_is_removed(self):
        left, right = _word("de"), _word("du")

        FrenchOrthographyHelper.remove_duplicate(left, right)

        assert left.realisation is None
        assert right.realisation == "du"


class TestFrenchLinearisation:
    """Joining French words into text."""

    def test_no_space_after_apostrophe(self, registry):
        helper = registry.orthography_helper(Language.FRENCH)

        text = helper.realise_list([_word("l'"), _word("homme"), _word("part")])

        assert text == "l'homme part"

    def test_adverbs_are_comma_separated(self, registry):
        helper = registry.orthography_helper(Language.FRENCH)

        text = helper.realise_list([_word("hier", LexicalCategory.ADVERB), _word("ici", LexicalCategory.ADVERB)])

        assert text == "hier, ici"


class TestWhitespaceTidying:
    """Stray spaces in strings and modifiers never reach the output."""

    def test_string_is_stripped(self, realiser, en_factory):
        assert realiser.realise(en_factory.create_string("  hello  ")).realisation == "hello"

    def test_padded_post_modifier(self, realiser, en_factory):
        """
        Scenario: a clause post-modifier given as " today ".
        Expected: single spaces between words and none at the ends.
        """
        clause = en_factory.create_clause(
            en_factory.create_noun_phrase("Mary"),
            "chase",
            en_factory.create_noun_phrase("George"),
        )
        clause.add_post_modifier(" today ")

        assert realiser.realise(clause).realisation == "Mary chases George today"

    def test_padded_sentence_and_paragraph(self, realiser, en_factory):
        """
        Scenario: padded strings wrapped in sentences, then in a paragraph.
        Expected: the full stop follows the last word; sentences are joined by one space.
        """
        sentence = en_factory.create_sentence(en_factory.create_string(" hello world "))
        assert realiser.realise(sentence).realisation == "Hello world."

        paragraph = en_factory.create_paragraph(
            [
                en_factory.create_sentence(en_factory.create_string(" hello ")),
                en_factory.create_sentence(en_factory.create_string("bye  ")),
            ]
        )
        assert realiser.realise(paragraph).realisation == "Hello. Bye."

    def test_tidy_collapses_spaces(self, registry):
        helper = registry.orthography_helper(Language.ENGLISH)

        assert helper.tidy("  the  dog ,  barks ") == "the dog, barks"

    def test_realisation_is_stable(self, realiser, en_factory):
        """
        Scenario: realised text is fed back in as a string, and tidied twice.
        Expected: no further change.
        """
        # Arrange
        clause = en_factory.create_clause(en_factory.create_noun_phrase("the", "dog"), "bark")
        clause.add_post_modifier(" today ")
        first = realiser.realise(en_factory.create_sentence(clause)).realisation

        # Act
        again = realiser.realise(en_factory.create_string(first)).realisation

        # Assert
        assert again == first
        assert realiser.registry.orthography_helper(Language.ENGLISH).tidy(first) == first


if __name__ == "__main__":
    pytest.main([__file__])
