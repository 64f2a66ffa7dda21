# tests/core/domain/test_syntax_french.py
import pytest

from realiser.core.domain.exceptions import UnsupportedFeatureCombinationError
from realiser.core.domain.factory import NLGFactory
from realiser.core.domain.features import Feature, FrenchFeature, InterrogativeType, NumberAgreement, Tense
from realiser.core.domain.registry import HelperRegistry
from realiser.core.use_cases.realise_text import Realiser


def _text(realiser, element):
    return realiser.realise(element).realisation


class TestFrenchNounPhrases:
    """Determiner agreement, elision and adjective placement."""

    def test_determiner_takes_noun_gender(self, realiser, fr_factory):
        """
        Scenario: the masculine base form "le" specifies a feminine noun.
        Expected: "la pomme".
        """
        assert _text(realiser, fr_factory.create_noun_phrase("le", "pomme")) == "la pomme"
        assert _text(realiser, fr_factory.create_noun_phrase("un", "pomme")) == "une pomme"

    def test_elision_before_vowel(self, realiser, fr_factory):
        """
        Scenario: "le" before "homme" (mute h) and before "école".
        Expected: elided article with no space after the apostrophe.
        """
        assert _text(realiser, fr_factory.create_noun_phrase("le", "homme")) == "l'homme"
        assert _text(realiser, fr_factory.create_noun_phrase("le", "école")) == "l'école"

    def test_aspirated_h_blocks_elision(self, realiser, fr_factory):
        assert _text(realiser, fr_factory.create_noun_phrase("le", "héros")) == "le héros"

    def test_plural_phrase(self, realiser, fr_factory):
        """
        Scenario: plural noun phrases with "le".
        Expected: "les", no elision in the plural.
        """
        chats = fr_factory.create_noun_phrase("le", "chat")
        chats.set_plural(True)
        hommes = fr_factory.create_noun_phrase("le", "homme")
        hommes.set_plural(True)

        assert _text(realiser, chats) == "les chats"
        assert _text(realiser, hommes) == "les hommes"

    def test_preposed_adjective_liaison_form(self, realiser, fr_factory):
        """
        Scenario: the preposed adjective "beau" before the vowel-initial "homme".
        Expected: the liaison form "bel" in front of the noun.
        """
        phrase = fr_factory.create_noun_phrase("un", "homme")
        phrase.add_modifier("beau")

        assert _text(realiser, phrase) == "un bel homme"

    def test_postposed_adjective_agrees(self, realiser, fr_factory):
        """
        Scenario: "heureux" modifies a feminine noun, singular then plural.
        Expected: the adjective follows the noun and agrees with it.
        """
        phrase = fr_factory.create_noun_phrase("le", "femme")
        phrase.add_modifier("heureux")
        assert _text(realiser, phrase) == "la femme heureuse"

        phrase.set_plural(True)
        assert _text(realiser, phrase) == "les femmes heureuses"


@pytest.fixture
def eat_clause(fr_factory):
    """'le chat mange la pomme'."""
    return fr_factory.create_clause(
        fr_factory.create_noun_phrase("le", "chat"),
        "manger",
        fr_factory.create_noun_phrase("le", "pomme"),
    )


class TestFrenchClauses:
    """Simple French clauses."""

    def test_simple_clause(self, realiser, eat_clause):
        assert _text(realiser, eat_clause) == "le chat mange la pomme"

    def test_sentence(self, realiser, fr_factory, eat_clause):
        sentence = fr_factory.create_sentence(eat_clause)

        assert _text(realiser, sentence) == "Le chat mange la pomme."

    def test_negation_wraps_the_verb(self, realiser, eat_clause):
        """
        Scenario: the clause is negated.
        Expected: "ne" before and "pas" after the conjugated verb.
        """
        eat_clause.set_feature(Feature.NEGATED, True)

        assert _text(realiser, eat_clause) == "le chat ne mange pas la pomme"


class TestFrenchAspectAndPronouns:
    """Progressive periphrasis and personal pronoun forms."""

    def test_progressive_uses_en_train_de(self, realiser, eat_clause):
        """
        Scenario: a present progressive clause.
        Expected: être + "en train de" + infinitive.
        """
        eat_clause.set_feature(Feature.PROGRESSIVE, True)

        assert _text(realiser, eat_clause) == "le chat est en train de manger la pomme"

    def test_past_progressive_is_imparfait(self, realiser, eat_clause):
        eat_clause.set_feature(Feature.TENSE, Tense.PAST)
        eat_clause.set_feature(Feature.PROGRESSIVE, True)

        assert _text(realiser, eat_clause) == "le chat mangeait la pomme"

    def test_clitic_object_and_detached_indirect_object(self, realiser, fr_factory):
        """
        Scenario: first person direct object and second person indirect object.
        Expected: "me" before the verb; the indirect object stays after it as "à toi".
        """
        clause = fr_factory.create_clause("je", "référer")
        clause.set_object("moi")
        clause.set_indirect_object("toi")

        assert _text(realiser, clause) == "je me réfère à toi"


class TestFrenchQuestions:
    """Questions built on "est-ce que"."""

    def test_yes_no(self, realiser, eat_clause):
        eat_clause.set_feature(Feature.INTERROGATIVE_TYPE, InterrogativeType.YES_NO)

        assert _text(realiser, eat_clause) == "est-ce que le chat mange la pomme"

    def test_who_subject(self, realiser, eat_clause):
        """
        Scenario: the subject is questioned.
        Expected: "qui est-ce qui" and no subject noun phrase.
        """
        eat_clause.set_feature(Feature.INTERROGATIVE_TYPE, InterrogativeType.WHO_SUBJECT)

        assert _text(realiser, eat_clause) == "qui est-ce qui mange la pomme"

    def test_what_object(self, realiser, eat_clause):
        """
        Scenario: the direct object is questioned.
        Expected: "qu'est-ce que" and no object noun phrase.
        """
        eat_clause.set_feature(Feature.INTERROGATIVE_TYPE, InterrogativeType.WHAT_OBJECT)

        assert _text(realiser, eat_clause) == "qu'est-ce que le chat mange"

    def test_how_many(self, realiser, fr_factory):
        chats = fr_factory.create_noun_phrase("le", "chat")
        chats.set_plural(True)
        clause = fr_factory.create_clause(chats, "manger", fr_factory.create_noun_phrase("le", "pomme"))
        clause.set_feature(Feature.INTERROGATIVE_TYPE, InterrogativeType.HOW_MANY)

        assert _text(realiser, clause) == "combien de chats mangent la pomme"


class TestFrenchRelativeClauses:
    """Relative pronoun choice."""

    def test_object_becomes_que(self, realiser, fr_factory):
        """
        Scenario: the relativised constituent is the direct object.
        Expected: "que" at the front, the object not realised in place.
        """
        pomme = fr_factory.create_noun_phrase("le", "pomme")
        clause = fr_factory.create_clause(fr_factory.create_noun_phrase("le", "chat"), "manger", pomme)
        clause.set_feature(FrenchFeature.RELATIVE_PHRASE, pomme)

        assert _text(realiser, clause) == "que le chat mange"

    def test_de_complement_becomes_dont(self, realiser, fr_factory):
        """
        Scenario: the relativised constituent is a "de" complement, and the
        relative clause modifies a noun.
        Expected: "dont" at the front, the complement not realised in place.
        """
        # Arrange
        de_homme = fr_factory.create_prepositional_phrase("de", fr_factory.create_noun_phrase("le", "homme"))
        clause = fr_factory.create_clause("je", "parler")
        clause.add_complement(de_homme)
        clause.set_relative_phrase(de_homme)
        homme = fr_factory.create_noun_phrase("le", "homme")
        homme.add_post_modifier(clause)

        # Act / Assert
        assert _text(realiser, homme) == "l'homme dont je parle"

    def test_other_preposition_takes_lequel(self, realiser, fr_factory):
        """
        Scenario: the relativised constituent is a "dans" complement of a clause
        modifying a masculine noun.
        Expected: the preposition followed by "lequel".
        """
        # Arrange
        dans_train = fr_factory.create_prepositional_phrase("dans", fr_factory.create_noun_phrase("le", "train"))
        clause = fr_factory.create_clause(fr_factory.create_noun_phrase("le", "homme"), "manger")
        clause.add_complement(dans_train)
        clause.set_relative_phrase(dans_train)
        train = fr_factory.create_noun_phrase("le", "train")
        train.add_post_modifier(clause)

        # Act / Assert
        assert _text(realiser, train) == "le train dans lequel l'homme mange"

    def test_unresolved_function_falls_back_to_que(self, realiser, fr_factory):
        clause = fr_factory.create_clause(fr_factory.create_noun_phrase("le", "chat"), "manger")
        clause.set_feature(FrenchFeature.RELATIVE_PHRASE, fr_factory.create_noun_phrase("le", "pomme"))

        assert _text(realiser, clause).startswith("que ")

    def test_unresolved_function_strict(self, fr_lexicon):
        """
        Scenario: strict registry, relative phrase outside the clause.
        Expected: UnsupportedFeatureCombinationError.
        """
        # Arrange
        strict = HelperRegistry(strict=True)
        factory = NLGFactory(fr_lexicon, strict)
        clause = factory.create_clause(factory.create_noun_phrase("le", "chat"), "manger")
        clause.set_feature(FrenchFeature.RELATIVE_PHRASE, factory.create_noun_phrase("le", "pomme"))

        # Act / Assert
        with pytest.raises(UnsupportedFeatureCombinationError):
            Realiser(strict).realise(clause)


class TestFrenchCliticsAndAgreement:
    """Clitic pronoun order and past participle agreement."""

    def test_direct_before_lui(self, realiser, fr_factory):
        """
        Scenario: pronominal direct object and third-person indirect object.
        Expected: "la" before "lui", both before the verb.
        """
        # Arrange
        pomme = fr_factory.create_noun_phrase("le", "pomme")
        pomme.set_feature(Feature.PRONOMINAL, True)
        chat = fr_factory.create_noun_phrase("le", "chat")
        chat.set_feature(Feature.PRONOMINAL, True)
        clause = fr_factory.create_clause(fr_factory.create_noun_phrase("le", "femme"), "donner", pomme)
        clause.set_indirect_object(chat)

        # Act / Assert
        assert _text(realiser, clause) == "la femme la lui donne"

    def test_avoir_agrees_with_preceding_object(self, realiser, fr_factory):
        pomme = fr_factory.create_noun_phrase("le", "pomme")
        pomme.set_feature(Feature.PRONOMINAL, True)
        clause = fr_factory.create_clause(fr_factory.create_noun_phrase("le", "chat"), "manger", pomme)
        clause.set_feature(Feature.TENSE, Tense.PAST)

        assert _text(realiser, clause) == "le chat l'a mangée"

    def test_avoir_without_preceding_object(self, realiser, fr_factory):
        clause = fr_factory.create_clause(
            fr_factory.create_noun_phrase("le", "femme"),
            "manger",
            fr_factory.create_noun_phrase("le", "pomme"),
        )
        clause.set_feature(Feature.TENSE, Tense.PAST)

        assert _text(realiser, clause) == "la femme a mangé la pomme"

    def test_etre_agrees_with_subject(self, realiser, fr_factory):
        """
        Scenario: "aller" in the past with a feminine plural subject.
        Expected: auxiliary être and a feminine plural participle.
        """
        femmes = fr_factory.create_noun_phrase("le", "femme")
        femmes.set_feature(Feature.NUMBER, NumberAgreement.PLURAL)
        clause = fr_factory.create_clause(femmes, "aller")
        clause.set_feature(Feature.TENSE, Tense.PAST)

        assert _text(realiser, clause) == "les femmes sont allées"

    def test_passive_agrees_with_surface_subject(self, realiser, fr_factory):
        pommes = fr_factory.create_noun_phrase("le", "pomme")
        pommes.set_feature(Feature.NUMBER, NumberAgreement.PLURAL)
        clause = fr_factory.create_clause(fr_factory.create_noun_phrase("le", "chat"), "manger", pommes)
        clause.set_feature(Feature.PASSIVE, True)

        assert _text(realiser, clause) == "les pommes sont mangées par le chat"


if __name__ == "__main__":
    pytest.main([__file__])
