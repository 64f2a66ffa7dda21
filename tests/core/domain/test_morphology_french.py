# tests/core/domain/test_morphology_french.py
import pytest

from realiser.core.domain.categories import LexicalCategory, PhraseCategory
from realiser.core.domain.elements import InflectedWordElement, ListElement
from realiser.core.domain.features import (
    Feature,
    Form,
    Gender,
    LexicalFeature,
    NumberAgreement,
    Person,
    Tense,
)
from realiser.core.domain.morphology.french import (
    build_feminine_adjective,
    build_future_radical,
    build_past_participle,
    build_present_verb,
    build_regular_plural,
    build_subjunctive_verb,
)

SING, PLUR = NumberAgreement.SINGULAR, NumberAgreement.PLURAL
FIRST, SECOND, THIRD = Person.FIRST, Person.SECOND, Person.THIRD


class TestConjugationBuilders:
    """Regular conjugation by infinitive ending."""

    @pytest.mark.parametrize(
        "base, number, person, expected",
        [
            ("aimer", SING, FIRST, "aime"),
            ("aimer", PLUR, FIRST, "aimons"),
            ("aimer", PLUR, THIRD, "aiment"),
            ("manger", PLUR, FIRST, "mangeons"),
            ("commencer", PLUR, FIRST, "commençons"),
            ("lever", SING, FIRST, "lève"),
            ("finir", SING, THIRD, "finit"),
            ("finir", PLUR, FIRST, "finissons"),
            ("vendre", SING, THIRD, "vend"),
            ("mettre", SING, FIRST, "mets"),
            ("voir", SING, FIRST, "vois"),
        ],
    )
    def test_present(self, base, number, person, expected):
        assert build_present_verb(base, number, person) == expected

    def test_subjunctive_uses_plural_radical(self):
        """
        Scenario: subjunctive of "finir" and "aimer".
        Expected: built on the plural radical ("finiss-", "aim-").
        """
        assert build_subjunctive_verb("finir", SING, THIRD) == "finisse"
        assert build_subjunctive_verb("aimer", PLUR, FIRST) == "aimions"

    @pytest.mark.parametrize(
        "base, expected",
        [("aimer", "aimé"), ("finir", "fini"), ("vendre", "vendu"), ("mettre", "mis")],
    )
    def test_past_participle(self, base, expected):
        assert build_past_participle(base) == expected

    def test_future_radical(self):
        assert build_future_radical("aimer") == "aimer"
        assert build_future_radical("lever") == "lèver"
        assert build_future_radical("mettre") == "mettr"


class TestAgreementBuilders:
    """Feminine and plural of nouns and adjectives."""

    @pytest.mark.parametrize(
        "masculine, feminine",
        [
            ("petit", "petite"),
            ("actif", "active"),
            ("cruel", "cruelle"),
            ("heureux", "heureuse"),
            ("premier", "première"),
            ("bon", "bonne"),
            ("acteur", "actrice"),
            ("rouge", "rouge"),
        ],
    )
    def test_feminine_adjective(self, masculine, feminine):
        assert build_feminine_adjective(masculine) == feminine

    def test_feminine_of_eur_depends_on_participle(self):
        """
        Scenario: "menteur" when the lexicon knows the participle "mentant".
        Expected: "menteuse" instead of the default "-eure".
        """
        assert build_feminine_adjective("menteur", lambda form: form == "mentant") == "menteuse"
        assert build_feminine_adjective("supérieur", lambda form: False) == "supérieure"

    @pytest.mark.parametrize(
        "singular, plural",
        [("chat", "chats"), ("cheval", "chevaux"), ("eau", "eaux"), ("jeu", "jeux"), ("prix", "prix")],
    )
    def test_regular_plural(self, singular, plural):
        assert build_regular_plural(singular) == plural


class TestFrenchMorphologyHelper:
    """Inflection of French lexicon words through the registry."""

    def _verb(self, lexicon, base, **features):
        element = InflectedWordElement(lexicon.lookup_word(base, LexicalCategory.VERB))
        for name, value in features.items():
            element.set_feature(name, value)
        return element

    def test_irregular_present_from_lexicon(self, registry, fr_lexicon):
        """
        Scenario: "être" at the first person singular and third plural.
        Expected: the stored forms "suis" and "sont".
        """
        first = self._verb(fr_lexicon, "être", person=FIRST, number=SING)
        third = self._verb(fr_lexicon, "être", person=THIRD, number=PLUR)

        assert registry.realise_morphology(first).realisation == "suis"
        assert registry.realise_morphology(third).realisation == "sont"

    def test_future_and_imparfait(self, registry, fr_lexicon):
        """
        Scenario: future of "aimer", imparfait of "finir", future of "être".
        Expected: "aimerons", "finissait" and "serai".
        """
        future = self._verb(fr_lexicon, "aimer", tense=Tense.FUTURE, person=FIRST, number=PLUR)
        imparfait = self._verb(fr_lexicon, "finir", tense=Tense.PAST, person=THIRD, number=SING)
        etre = self._verb(fr_lexicon, "être", tense=Tense.FUTURE, person=FIRST, number=SING)

        assert registry.realise_morphology(future).realisation == "aimerons"
        assert registry.realise_morphology(imparfait).realisation == "finissait"
        assert registry.realise_morphology(etre).realisation == "serai"

    def test_past_participle_agreement(self, registry, fr_lexicon):
        participle = self._verb(
            fr_lexicon, "aimer", form=Form.PAST_PARTICIPLE, gender=Gender.FEMININE, number=PLUR
        )

        assert registry.realise_morphology(participle).realisation == "aimées"

    def test_determiner_agrees_with_parent(self, registry, fr_lexicon):
        """
        Scenario: "le" inside a feminine noun phrase, then plural.
        Expected: "la", then "les".
        """
        # Arrange
        phrase = ListElement()
        phrase.category = PhraseCategory.NOUN_PHRASE
        phrase.set_feature(LexicalFeature.GENDER, Gender.FEMININE)
        singular = InflectedWordElement(fr_lexicon.get_word("le", LexicalCategory.DETERMINER))
        plural = InflectedWordElement(fr_lexicon.get_word("le", LexicalCategory.DETERMINER))
        plural.set_feature(Feature.NUMBER, PLUR)
        phrase.add_component(singular)

        # Act
        realised_singular = registry.realise_morphology(singular)

        # Assert
        assert realised_singular.realisation == "la"
        assert registry.realise_morphology(plural).realisation == "les"

    def test_adjective_agrees_with_phrase(self, registry, fr_lexicon):
        """
        Scenario: "heureux" and "beau" inside a feminine plural noun phrase.
        Expected: "heureuses" built by rule, "belles" from the stored feminine.
        """
        phrase = ListElement()
        phrase.set_feature(LexicalFeature.GENDER, Gender.FEMININE)
        phrase.set_feature(Feature.NUMBER, PLUR)
        heureux = InflectedWordElement(fr_lexicon.get_word("heureux", LexicalCategory.ADJECTIVE))
        beau = InflectedWordElement(fr_lexicon.get_word("beau", LexicalCategory.ADJECTIVE))
        phrase.add_components([heureux, beau])

        assert registry.realise_morphology(heureux).realisation == "heureuses"
        assert registry.realise_morphology(beau).realisation == "belles"

    def test_noun_takes_opposite_gender_form(self, registry, fr_lexicon):
        chat = InflectedWordElement(fr_lexicon.get_word("chat", LexicalCategory.NOUN))
        chat.set_feature(LexicalFeature.GENDER, Gender.FEMININE)

        assert registry.realise_morphology(chat).realisation == "chatte"


if __name__ == "__main__":
    pytest.main([__file__])
