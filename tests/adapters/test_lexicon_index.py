# tests/adapters/test_lexicon_index.py
import pytest

from realiser.adapters.persistence.lexicon import LexemeNotFound, LexiconIndex, LexiconSchemaError
from realiser.core.domain.categories import LexicalCategory
from realiser.core.domain.exceptions import MissingClosedClassWordError
from realiser.core.domain.features import Gender, Language, Person, PronounType


@pytest.fixture
def small_index():
    """A three-word English index built from raw records."""
    return LexiconIndex(
        Language.ENGLISH,
        [
            {"id": "E_run", "base": "run", "category": "verb", "past": "ran"},
            {"id": "E_run_n", "base": "run", "category": "noun"},
            {"id": "E_ox", "base": "ox", "category": "noun", "plural": "oxen"},
        ],
    )


class TestLookups:
    """Exact, variant and id lookups."""

    def test_base_form_lookup_filters_by_category(self, small_index):
        assert len(small_index.get_words("run")) == 2
        assert small_index.get_word("run", LexicalCategory.NOUN).id == "E_run_n"
        assert small_index.get_words("walk") == []

    def test_variant_lookup(self, small_index):
        """
        Scenario: irregular and generated inflected forms are looked up.
        Expected: "ran" and "oxen" find their words; "runs" too.
        """
        assert small_index.get_word_from_variant("ran").id == "E_run"
        assert small_index.get_word_from_variant("oxen").base_form == "ox"
        assert small_index.has_word_from_variant("runs", LexicalCategory.VERB)

    def test_id_lookup(self, small_index):
        assert small_index.get_word_by_id("E_ox").base_form == "ox"
        assert small_index.get_words_by_id("E_missing") == []

    def test_be_variants(self, en_lexicon):
        """
        Scenario: suppletive forms of "be".
        Expected: each of them resolves to the verb "be".
        """
        for form in ("is", "am", "are", "was", "were"):
            assert en_lexicon.get_word_from_variant(form, LexicalCategory.VERB).base_form == "be"

    def test_french_generated_variants(self, fr_lexicon):
        assert fr_lexicon.get_word_from_variant("pommes").base_form == "pomme"
        assert fr_lexicon.get_word_from_variant("belle").base_form == "beau"

    def test_words_by_category(self, small_index):
        assert [word.id for word in small_index.words(LexicalCategory.NOUN)] == ["E_run_n", "E_ox"]
        assert len(small_index) == 3


class TestFeatureQueries:
    """Selection of words by feature values."""

    def test_absent_feature_matches_none_or_false(self, fr_lexicon):
        """
        Scenario: a French personal subject pronoun is queried, detached=False.
        Expected: "il" matches although it does not carry the detached flag.
        """
        words = fr_lexicon.get_words_by_features(
            LexicalCategory.PRONOUN,
            {
                "pronoun_type": PronounType.PERSONAL,
                "person": Person.THIRD,
                "gender": Gender.MASCULINE,
                "discourse_function": "subject",
                "detached": False,
            },
        )

        assert "il" in [word.base_form for word in words]

    def test_no_match_returns_none(self, small_index):
        assert small_index.get_word_by_features(LexicalCategory.NOUN, {"plural": "mice"}) is None
        assert not small_index.has_word_by_features(LexicalCategory.VERB, {"past": "walked"})

    def test_english_first_person_pronoun(self, en_lexicon):
        words = en_lexicon.get_words_by_features(LexicalCategory.PRONOUN, {"person": Person.FIRST})

        assert [word.base_form for word in words] == ["I"]


class TestCreationAndStrictness:
    """On-the-fly creation versus strict access."""

    def test_unknown_word_is_created_once(self, small_index):
        """
        Scenario: an unknown noun is looked up twice.
        Expected: the same new word both times, now indexed.
        """
        first = small_index.lookup_word("zorblax", LexicalCategory.NOUN)
        second = small_index.lookup_word("zorblax", LexicalCategory.NOUN)

        assert first is second
        assert first.lexicon is small_index
        assert small_index.has_word("zorblax")
        assert len(small_index) == 4

    def test_lookup_falls_back_to_variant_then_id(self, small_index):
        assert small_index.lookup_word("oxen").base_form == "ox"
        assert small_index.lookup_word("E_run").base_form == "run"

    def test_strict_lookup_raises(self, small_index):
        with pytest.raises(LexemeNotFound) as exc:
            small_index.get_word_strict("walk", LexicalCategory.VERB)

        assert exc.value.key == "walk"
        assert exc.value.pos == "verb"

    def test_required_closed_class_word(self, small_index):
        with pytest.raises(MissingClosedClassWordError) as exc:
            small_index.get_passive_preposition()

        assert exc.value.word == "by"

    def test_record_without_base_is_rejected(self):
        with pytest.raises(LexiconSchemaError):
            LexiconIndex(Language.FRENCH, [{"category": "noun"}])


class TestClosedClassShortcuts:
    """Per-language conjunction, passive preposition and complementiser."""

    def test_english(self, en_lexicon):
        assert en_lexicon.get_addition_coord_conjunction().base_form == "and"
        assert en_lexicon.get_passive_preposition().base_form == "by"
        assert en_lexicon.get_default_complementiser().base_form == "that"

    def test_french(self, fr_lexicon):
        assert fr_lexicon.get_addition_coord_conjunction().base_form == "et"
        assert fr_lexicon.get_passive_preposition().base_form == "par"
        assert fr_lexicon.get_default_complementiser().base_form == "que"

    def test_base_forms_come_from_the_index_language(self):
        """
        Scenario: Two empty indexes asked for the same closed-class roles.
        Expected: Each answers from its own language table.
        """
        english = LexiconIndex(Language.ENGLISH, [])
        french = LexiconIndex(Language.FRENCH, [])

        assert english.closed_class_base_form("addition_conjunction") == "and"
        assert french.closed_class_base_form("addition_conjunction") == "et"
        assert english.closed_class_base_form("passive_preposition") == "by"
        assert french.closed_class_base_form("complementiser") == "que"

    def test_unknown_role(self, small_index):
        with pytest.raises(LexemeNotFound) as exc:
            small_index.closed_class_base_form("article")

        assert exc.value.key == "article"
        assert exc.value.language == "en"


if __name__ == "__main__":
    pytest.main([__file__])
