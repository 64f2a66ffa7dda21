# tests/core/test_use_cases.py
import pytest

from realiser.adapters.persistence.lexicon import LexiconIndex
from realiser.core.domain.elements import StringElement
from realiser.core.domain.exceptions import (
    MissingClosedClassWordError,
    RealisationError,
    UnsupportedFeatureCombinationError,
)
from realiser.core.domain.factory import NLGFactory
from realiser.core.domain.features import Feature, Language
from realiser.core.domain.registry import HelperRegistry
from realiser.core.use_cases.realise_text import Realiser


@pytest.fixture
def clause(en_factory):
    return en_factory.create_clause(
        en_factory.create_noun_phrase("the", "woman"),
        "kiss",
        en_factory.create_noun_phrase("the", "man"),
    )


class TestRealiseUseCase:
    """The four-stage pipeline as seen by a caller."""

    def test_none_passes_through(self, realiser):
        assert realiser.realise(None) is None
        assert realiser.realise_sentence(None) == ""

    def test_input_tree_is_not_mutated(self, realiser, clause):
        """
        Scenario: the same clause is realised twice.
        Expected: identical output; the caller's clause keeps its structure.
        """
        # Arrange
        children_before = len(clause.get_children())

        # Act
        first = realiser.realise(clause).realisation
        second = realiser.realise(clause).realisation

        # Assert
        assert first == second == "the woman kisses the man"
        assert len(clause.get_children()) == children_before
        assert clause.realisation is None

    def test_realise_sentence_wraps_element(self, realiser, clause):
        """
        Scenario: a bare clause is passed to realise_sentence.
        Expected: sentence text; the clause is not re-parented.
        """
        text = realiser.realise_sentence(clause)

        assert text == "The woman kisses the man."
        assert clause.parent is None

    def test_elided_element_realises_to_empty_string(self, realiser):
        element = StringElement("hidden")
        element.set_feature(Feature.ELIDED, True)

        realised = realiser.realise(element)

        assert realised.realisation == ""

    def test_debug_mode_logs_every_stage(self, realiser, clause):
        realiser.set_debug_mode(True)

        assert realiser.realise(clause).realisation == "the woman kisses the man"


class TestRealiseErrors:
    """Which failures surface as-is and which are wrapped."""

    def test_unexpected_failure_is_wrapped(self, registry, realiser, clause, monkeypatch):
        """
        Scenario: a stage raises a programming error.
        Expected: RealisationError carrying the original message and cause.
        """
        def broken(element):
            raise RuntimeError("boom")

        monkeypatch.setattr(registry, "realise_syntax", broken)

        with pytest.raises(RealisationError) as exc:
            realiser.realise(clause)

        assert str(exc.value) == "Realisation failed: boom"
        assert isinstance(exc.value.__cause__, RuntimeError)

    def test_missing_closed_class_word_propagates(self):
        """
        Scenario: a lexicon without "do" realises a negated present clause.
        Expected: MissingClosedClassWordError, not a wrapped error.
        """
        # Arrange
        lexicon = LexiconIndex(
            Language.ENGLISH,
            [
                {"base": "that", "category": "complementiser"},
                {"base": "the", "category": "determiner"},
                {"base": "woman", "category": "noun"},
                {"base": "man", "category": "noun"},
                {"base": "kiss", "category": "verb"},
            ],
        )
        registry = HelperRegistry()
        factory = NLGFactory(lexicon, registry)
        clause = factory.create_clause(
            factory.create_noun_phrase("the", "woman"), "kiss", factory.create_noun_phrase("the", "man")
        )
        clause.set_feature(Feature.NEGATED, True)

        # Act / Assert
        with pytest.raises(MissingClosedClassWordError) as exc:
            Realiser(registry).realise(clause)

        assert exc.value.word == "do"

    def test_strict_mode_errors_propagate(self, clause, monkeypatch):
        strict = HelperRegistry(strict=True)

        def reject(element):
            strict.report_unsupported("test combination")

        monkeypatch.setattr(strict, "realise_syntax", reject)

        with pytest.raises(UnsupportedFeatureCombinationError):
            Realiser(strict).realise(clause)


if __name__ == "__main__":
    pytest.main([__file__])
