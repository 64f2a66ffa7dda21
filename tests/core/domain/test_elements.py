# tests/core/domain/test_elements.py
import copy

import pytest

from realiser.core.domain.categories import DocumentCategory, LexicalCategory, PhraseCategory
from realiser.core.domain.elements import (
    CoordinatedPhraseElement,
    DocumentElement,
    InflectedWordElement,
    ListElement,
    StringElement,
    WordElement,
    feature_key,
)
from realiser.core.domain.features import (
    Feature,
    Gender,
    InternalFeature,
    Language,
    LexicalFeature,
    NumberAgreement,
    Person,
    Tense,
)


class TestFeatureMap:
    """Typed access to the feature map of an element."""

    def test_enum_and_raw_names_share_a_key(self):
        """
        Scenario: a feature set by enum member is read back by its raw name.
        Expected: both spellings address the same entry.
        """
        # Arrange
        element = StringElement("x")

        # Act
        element.set_feature(Feature.TENSE, Tense.PAST)

        # Assert
        assert feature_key(Feature.TENSE) == "tense"
        assert element.get_feature("tense") == Tense.PAST
        assert element.has_feature(Feature.TENSE)

    def test_boolean_getter_only_accepts_booleans(self):
        """
        Scenario: a feature holds a truthy non-boolean value.
        Expected: get_feature_as_boolean reports False.
        """
        element = StringElement("x")
        element.set_feature(Feature.PASSIVE, "yes")
        element.set_feature(Feature.PERFECT, True)

        assert element.get_feature_as_boolean(Feature.PASSIVE) is False
        assert element.get_feature_as_boolean(Feature.PERFECT) is True
        assert element.get_feature_as_boolean(Feature.NEGATED) is False

    def test_string_getter_renders_words_and_enums(self):
        """
        Scenario: features hold a word, an enum and a string element.
        Expected: the string getter returns base form, enum value and realisation.
        """
        element = StringElement("x")
        element.set_feature(Feature.MODAL, WordElement("can", LexicalCategory.MODAL))
        element.set_feature(Feature.PERSON, Person.FIRST)
        element.set_feature(Feature.PARTICLE, StringElement("up"))

        assert element.get_feature_as_string(Feature.MODAL) == "can"
        assert element.get_feature_as_string(Feature.PERSON) == "first"
        assert element.get_feature_as_string(Feature.PARTICLE) == "up"
        assert element.get_feature_as_string(Feature.TENSE) is None

    def test_element_list_getter_wraps_single_element(self):
        """
        Scenario: a list-valued slot holds one element, or nothing at all.
        Expected: a one-item list, then an empty list.
        """
        element = StringElement("x")
        child = StringElement("y")
        element.set_feature(InternalFeature.COMPLEMENTS, child)

        assert element.get_feature_as_element_list(InternalFeature.COMPLEMENTS) == [child]
        assert element.get_feature_as_element_list(InternalFeature.PREMODIFIERS) == []

    def test_convenience_accessors(self):
        """
        Scenario: plural, tense and negation are set through helper methods.
        Expected: the matching features carry the enumerated values.
        """
        element = StringElement("x")

        assert element.get_tense() == Tense.PRESENT
        element.set_plural(True)
        element.set_tense(Tense.FUTURE)
        element.set_negated(True)

        assert element.get_feature(Feature.NUMBER) == NumberAgreement.PLURAL
        assert element.is_plural()
        assert element.get_tense() == Tense.FUTURE
        assert element.is_negated()

    def test_integer_getter_ignores_non_finite_floats(self):
        """
        Scenario: a numeric feature holds floats, infinities, NaN and text.
        Expected: finite values are truncated; the rest read as None.
        """
        element = StringElement("x")

        for value, expected in [
            (3.9, 3),
            (4, 4),
            (" 7 ", 7),
            (float("inf"), None),
            (float("-inf"), None),
            (float("nan"), None),
            ("seven", None),
            (True, None),
        ]:
            element.set_feature("count", value)
            assert element.get_feature_as_integer("count") == expected

    def test_is_a_accepts_category_names(self):
        word = WordElement("dog", LexicalCategory.NOUN)

        assert word.is_a(LexicalCategory.NOUN)
        assert word.is_a("noun")
        assert not word.is_a(LexicalCategory.VERB)


class TestWordElements:
    """Lexicon words and their per-occurrence copies."""

    def test_word_is_shared_by_deepcopy(self):
        """
        Scenario: a tree holding a lexicon word is deep-copied.
        Expected: the copy points at the very same word object.
        """
        # Arrange
        word = WordElement("dog", LexicalCategory.NOUN, "E_dog")
        holder = ListElement()
        holder.set_feature(InternalFeature.BASE_WORD, word)

        # Act
        clone = copy.deepcopy(holder)

        # Assert
        assert clone is not holder
        assert clone.get_feature(InternalFeature.BASE_WORD) is word

    def test_inflected_word_copies_lexical_features(self, en_lexicon):
        """
        Scenario: an occurrence is made from the lexicon word "woman".
        Expected: it keeps base form, category and language of the entry.
        """
        word = en_lexicon.get_word("woman", LexicalCategory.NOUN)

        inflected = InflectedWordElement(word)

        assert inflected.base_form == "woman"
        assert inflected.base_word is word
        assert inflected.category == LexicalCategory.NOUN
        assert inflected.get_feature_as_string(LexicalFeature.PLURAL) == "women"
        assert inflected.language == Language.ENGLISH

    def test_inflected_word_from_text(self):
        inflected = InflectedWordElement("chien", LexicalCategory.NOUN)

        assert inflected.base_form == "chien"
        assert inflected.base_word is None
        assert inflected.category == LexicalCategory.NOUN

    def test_string_element_inherits_source_features(self):
        """
        Scenario: a string element is built from a feminine noun occurrence.
        Expected: it copies the category and the features of the source.
        """
        source = InflectedWordElement("table", LexicalCategory.NOUN)
        source.set_feature(LexicalFeature.GENDER, Gender.FEMININE)

        realised = StringElement("tables", source)

        assert realised.realisation == "tables"
        assert realised.category == LexicalCategory.NOUN
        assert realised.get_feature(LexicalFeature.GENDER) == Gender.FEMININE


class TestContainers:
    """List, document and coordination containers."""

    def test_list_component_gets_parent(self):
        """
        Scenario: a component is added to a list.
        Expected: the list becomes its parent; None components are ignored.
        """
        parent = ListElement()
        child = StringElement("a")

        parent.add_component(child)
        parent.add_component(None)

        assert parent.get_children() == [child]
        assert child.parent is parent

    def test_list_copies_source(self):
        source = StringElement("x")
        source.category = PhraseCategory.NOUN_PHRASE
        source.set_plural(True)

        realised = ListElement(source)

        assert realised.category == PhraseCategory.NOUN_PHRASE
        assert realised.is_plural()

    def test_language_is_found_through_parents(self, fr_factory):
        """
        Scenario: a bare string element sits inside a French sentence.
        Expected: its language resolves to French through the parent chain.
        """
        sentence = fr_factory.create_sentence("bonjour")
        child = StringElement("x")
        sentence.add_component(child)

        assert child.language == Language.FRENCH
        assert StringElement("orphan").language == Language.ENGLISH

    def test_document_keeps_category_and_title(self):
        document = DocumentElement(DocumentCategory.PARAGRAPH, title="Intro")

        assert document.title == "Intro"
        assert document.category == DocumentCategory.PARAGRAPH
        assert document.get_children() == []

    def test_coordination_counts_its_children(self):
        coordination = CoordinatedPhraseElement(None, "Mary", "George")

        assert len(coordination.coordinates) == 2
        assert coordination.last_coordinate.realisation == "George"
        assert all(child.parent is coordination for child in coordination.coordinates)


if __name__ == "__main__":
    pytest.main([__file__])
