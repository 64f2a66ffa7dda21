# tests/core/domain/test_registry.py
import pytest

from realiser.core.domain.elements import ListElement, StringElement, WordElement
from realiser.core.domain.categories import LexicalCategory
from realiser.core.domain.exceptions import (
    HelperRegistrationError,
    LanguageNotSupportedError,
    UnsupportedFeatureCombinationError,
)
from realiser.core.domain.features import Feature, Language
from realiser.core.domain.registry import (
    HelperRegistry,
    HelperRole,
    load_builtin_helpers,
    register_helper,
    supported_languages,
)
from realiser.core.domain.orthography.english import EnglishOrthographyHelper
from realiser.core.domain.orthography.french import FrenchOrthographyHelper


class TestHelperLookup:
    """Per-language helper resolution."""

    def test_builtin_languages_are_complete(self):
        """
        Scenario: the bundled rule sets are loaded.
        Expected: English and French each provide all six roles.
        """
        languages = supported_languages()

        assert Language.ENGLISH in languages
        assert Language.FRENCH in languages

    def test_helpers_are_memoized_per_registry(self, registry):
        """
        Scenario: the same helper is requested twice, by code and by enum.
        Expected: one instance, bound to the registry that built it.
        """
        first = registry.helper_for("fr", HelperRole.ORTHOGRAPHY)
        second = registry.orthography_helper(Language.FRENCH)

        assert first is second
        assert isinstance(first, FrenchOrthographyHelper)
        assert first.registry is registry

    def test_registries_do_not_share_instances(self):
        one = HelperRegistry().orthography_helper("en")
        other = HelperRegistry().orthography_helper("en")

        assert isinstance(one, EnglishOrthographyHelper)
        assert one is not other

    def test_unknown_language_is_rejected(self, registry):
        """
        Scenario: a helper is requested for a language with no rule set.
        Expected: LanguageNotSupportedError naming the code.
        """
        with pytest.raises(LanguageNotSupportedError) as exc:
            registry.helper_for("de", HelperRole.CLAUSE)

        assert "de" in str(exc.value)

    def test_duplicate_registration_is_rejected(self):
        """
        Scenario: a second class claims the English clause role.
        Expected: HelperRegistrationError, the built-in helper stays in place.
        """
        load_builtin_helpers()

        with pytest.raises(HelperRegistrationError):
            @register_helper(Language.ENGLISH, HelperRole.CLAUSE)
            class Impostor:
                pass

    def test_registration_needs_known_language(self):
        with pytest.raises(HelperRegistrationError):
            register_helper("klingon", HelperRole.CLAUSE)


class TestUnsupportedCombinations:
    """Best-effort versus strict handling of undefined feature combinations."""

    def test_lenient_registry_only_logs(self, registry):
        """
        Scenario: a non-strict registry reports a combination.
        Expected: no exception.
        """
        registry.report_unsupported("modal with subjunctive", language="fr")

    def test_strict_registry_raises(self):
        """
        Scenario: a strict registry reports a combination.
        Expected: UnsupportedFeatureCombinationError carrying the detail.
        """
        strict = HelperRegistry(strict=True)

        with pytest.raises(UnsupportedFeatureCombinationError) as exc:
            strict.report_unsupported("modal with subjunctive")

        assert exc.value.detail == "modal with subjunctive"


class TestStageDispatch:
    """Generic behaviour of the stage dispatchers."""

    def test_syntax_passes_none_and_drops_elided(self, registry):
        elided = StringElement("gone")
        elided.set_feature(Feature.ELIDED, True)

        assert registry.realise_syntax(None) is None
        assert registry.realise_syntax(elided) is None

    def test_syntax_flattens_nested_lists(self, registry):
        """
        Scenario: a list holds a word and another list of two strings.
        Expected: one flat list of three elements; words become occurrences.
        """
        # Arrange
        inner = ListElement(components=[StringElement("b"), StringElement("c")])
        outer = ListElement(components=[WordElement("a", LexicalCategory.NOUN), inner])

        # Act
        realised = registry.realise_syntax(outer)

        # Assert
        children = realised.get_children()
        assert len(children) == 3
        assert children[0].base_form == "a"
        assert [child.realisation for child in children[1:]] == ["b", "c"]
        assert all(child.parent is realised for child in children)

    def test_morphophonology_rewrites_adjacent_words(self, registry):
        """
        Scenario: English "a" precedes "apple" in a list.
        Expected: the article becomes "an" before linearisation.
        """
        words = ListElement(components=[StringElement("a"), StringElement("apple")])

        registry.realise_morphophonology(words)
        realised = registry.realise_orthography(words)

        assert realised.realisation == "an apple"

    def test_orthography_skips_empty_children(self, registry):
        words = ListElement(components=[StringElement("one"), StringElement(None), StringElement("two")])

        assert registry.realise_orthography(words).realisation == "one two"


if __name__ == "__main__":
    pytest.main([__file__])
