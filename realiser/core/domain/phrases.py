# realiser/core/domain/phrases.py
"""
core/domain/phrases.py

Typed phrase specifications built on `PhraseElement`.

These are the objects client code assembles before calling the realiser:

- SPhraseSpec      clause (subject, verb phrase, complementiser, ...)
- VPPhraseSpec     verb phrase (verb with optional particle, objects)
- NPPhraseSpec     noun phrase (specifier, noun or pronoun head, modifiers)
- PPPhraseSpec     prepositional phrase (preposition + object)
- AdjPhraseSpec    adjective phrase
- AdvPhraseSpec    adverb phrase

Setters accept either elements or plain strings; strings are resolved
through the owning factory's lexicon. Placement decisions for untyped
modifiers (`add_modifier`) are language-specific and delegated to the
helper registry.
"""

from __future__ import annotations

from typing import Any, List, Optional

from .categories import LexicalCategory, PhraseCategory
from .elements import (
    CoordinatedPhraseElement,
    InflectedWordElement,
    NLGElement,
    PhraseElement,
    WordElement,
)
from .features import (
    ClauseStatus,
    DiscourseFunction,
    Feature,
    FrenchFeature,
    Form,
    InternalFeature,
    LexicalFeature,
    NumberAgreement,
    Person,
    Tense,
)


# Clause features that are mirrored onto the verb phrase.
VP_FEATURES = frozenset(
    name.value
    for name in (
        Feature.MODAL,
        Feature.TENSE,
        Feature.NEGATED,
        Feature.NUMBER,
        Feature.PASSIVE,
        Feature.PERFECT,
        Feature.PARTICLE,
        Feature.PERSON,
        Feature.PROGRESSIVE,
        InternalFeature.REALISE_AUXILIARY,
        Feature.FORM,
        Feature.INTERROGATIVE_TYPE,
        LexicalFeature.GENDER,
        FrenchFeature.NEGATION_AUXILIARY,
    )
)


def _registry(element: NLGElement):
    factory = element.factory
    if factory is not None and getattr(factory, "registry", None) is not None:
        return factory.registry
    from .registry import default_registry

    return default_registry()


def _as_phrase(factory: Any, value: Any) -> NLGElement:
    """Keep phrases and coordinations; wrap anything else in a noun phrase."""
    if isinstance(value, (PhraseElement, CoordinatedPhraseElement)):
        return value
    return factory.create_noun_phrase(value)


# ---------------------------------------------------------------------------
# Noun phrase
# ---------------------------------------------------------------------------


class NPPhraseSpec(PhraseElement):
    """Noun phrase. Setting the head copies its agreement features."""

    def __init__(self, factory: Any = None) -> None:
        super().__init__(PhraseCategory.NOUN_PHRASE, factory)

    @classmethod
    def copy_of(cls, original: "NPPhraseSpec") -> "NPPhraseSpec":
        """Shallow copy sharing slot contents, used when a phrase is re-wrapped."""
        copy = cls(original.factory)
        copy.parent = original.parent
        copy.copy_features_from(original)
        return copy

    def set_head(self, new_head: Any) -> None:
        super().set_head(new_head)
        self._copy_head_features(self.head)

    def _copy_head_features(self, noun: Optional[NLGElement]) -> None:
        if noun is None:
            return
        self.set_feature(Feature.POSSESSIVE, noun.get_feature_as_boolean(Feature.POSSESSIVE))
        self.set_feature(InternalFeature.RAISED, False)
        self.set_feature(InternalFeature.ACRONYM, False)
        if noun.has_feature(Feature.NUMBER):
            self.set_feature(Feature.NUMBER, noun.get_feature(Feature.NUMBER))
        else:
            self.set_plural(False)
        if noun.has_feature(Feature.PERSON):
            self.set_feature(Feature.PERSON, noun.get_feature(Feature.PERSON))
        else:
            self.set_feature(Feature.PERSON, Person.THIRD)
        if noun.has_feature(LexicalFeature.GENDER):
            self.set_feature(LexicalFeature.GENDER, noun.get_feature(LexicalFeature.GENDER))
        if noun.has_feature(LexicalFeature.EXPLETIVE_SUBJECT):
            self.set_feature(LexicalFeature.EXPLETIVE_SUBJECT,
                             noun.get_feature(LexicalFeature.EXPLETIVE_SUBJECT))
        self.set_feature(LexicalFeature.REFLEXIVE, noun.get_feature_as_boolean(LexicalFeature.REFLEXIVE))
        self.set_feature(LexicalFeature.PROPER, noun.get_feature_as_boolean(LexicalFeature.PROPER))
        self.set_feature(Feature.ADJECTIVE_ORDERING, True)

    def set_noun(self, noun: Any) -> None:
        self.set_head(self.factory.create_nlg_element(noun, LexicalCategory.NOUN))

    def set_pronoun(self, pronoun: Any) -> None:
        self.set_head(self.factory.create_nlg_element(pronoun, LexicalCategory.PRONOUN))

    @property
    def noun(self) -> Optional[NLGElement]:
        return self.head

    def set_specifier(self, specifier: Any) -> None:
        if specifier is None:
            self.remove_feature(InternalFeature.SPECIFIER)
            return
        if isinstance(specifier, WordElement):
            element: NLGElement = InflectedWordElement(specifier)
        elif isinstance(specifier, NLGElement):
            element = specifier
        else:
            element = InflectedWordElement(self.factory.create_word(specifier, LexicalCategory.DETERMINER))
        self.set_feature(InternalFeature.SPECIFIER, element)
        element.set_feature(InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.SPECIFIER)
        element.parent = self

        # a determiner turns a pronoun head back into a noun
        head = self.head
        if isinstance(head, WordElement) and head.is_a(LexicalCategory.PRONOUN):
            self.set_noun(self.lexicon.lookup_word(head.base_form, LexicalCategory.NOUN))

        if element.has_feature(Feature.NUMBER):
            self.set_feature(Feature.NUMBER, element.get_feature(Feature.NUMBER))

    @property
    def specifier(self) -> Optional[NLGElement]:
        return self.get_feature_as_element(InternalFeature.SPECIFIER)

    def add_pre_modifier(self, modifier: Any) -> None:
        if isinstance(modifier, str):
            modifier = self.factory.create_nlg_element(modifier, LexicalCategory.ADJECTIVE)
        super().add_pre_modifier(modifier)

    def add_modifier(self, modifier: Any) -> None:
        _registry(self).noun_phrase_helper(self.language).add_modifier(self, modifier)

    def check_if_ne_only_negation(self) -> bool:
        specifier = self.specifier
        if specifier is not None and specifier.check_if_ne_only_negation():
            return True
        head = self.head
        return head is not None and head.check_if_ne_only_negation()


# ---------------------------------------------------------------------------
# Verb phrase
# ---------------------------------------------------------------------------


class VPPhraseSpec(PhraseElement):
    """Verb phrase with the grammatical defaults of a simple present verb."""

    def __init__(self, factory: Any = None) -> None:
        super().__init__(PhraseCategory.VERB_PHRASE, factory)
        self.set_feature(Feature.PERFECT, False)
        self.set_feature(Feature.PROGRESSIVE, False)
        self.set_feature(Feature.PASSIVE, False)
        self.set_feature(Feature.NEGATED, False)
        self.set_feature(Feature.TENSE, Tense.PRESENT)
        self.set_feature(Feature.PERSON, Person.THIRD)
        self.set_feature(Feature.NUMBER, NumberAgreement.SINGULAR)
        self.set_feature(Feature.FORM, Form.NORMAL)
        self.set_feature(InternalFeature.REALISE_AUXILIARY, True)

    def set_verb(self, verb: Any) -> None:
        """Set the head verb; "pick up" is split into verb + particle."""
        if isinstance(verb, str):
            text = verb.strip()
            space = text.find(" ")
            if space == -1:
                element = self.factory.create_word(text, LexicalCategory.VERB)
            else:
                element = self.factory.create_word(text[:space], LexicalCategory.VERB)
                self.set_feature(Feature.PARTICLE, text[space + 1:])
        else:
            element = self.factory.create_nlg_element(verb, LexicalCategory.VERB)
        self.set_head(element)

    @property
    def verb(self) -> Optional[NLGElement]:
        return self.head

    def _complement_with(self, function: DiscourseFunction) -> Optional[NLGElement]:
        for complement in self.complements:
            if complement.get_feature(InternalFeature.DISCOURSE_FUNCTION) == function:
                return complement
        return None

    def set_object(self, obj: Any) -> None:
        phrase = _as_phrase(self.factory, obj)
        phrase.set_feature(InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.OBJECT)
        self.set_complement(phrase)

    @property
    def object(self) -> Optional[NLGElement]:
        return self._complement_with(DiscourseFunction.OBJECT)

    def set_indirect_object(self, indirect_object: Any) -> None:
        phrase = _as_phrase(self.factory, indirect_object)
        phrase.set_feature(InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.INDIRECT_OBJECT)
        self.set_complement(phrase)

    @property
    def indirect_object(self) -> Optional[NLGElement]:
        return self._complement_with(DiscourseFunction.INDIRECT_OBJECT)

    def add_modifier(self, modifier: Any) -> None:
        _registry(self).verb_phrase_helper(self.language).add_modifier(self, modifier)


# ---------------------------------------------------------------------------
# Clause
# ---------------------------------------------------------------------------


class SPhraseSpec(PhraseElement):
    """
    Clause. Verb-level features set on the clause are mirrored onto its
    verb phrase, and premodifiers and complements are stored there too.
    """

    def __init__(self, factory: Any) -> None:
        super().__init__(PhraseCategory.CLAUSE, factory)
        self.set_verb_phrase(factory.create_verb_phrase())
        self.set_feature(Feature.ELIDED, False)
        self.set_feature(InternalFeature.CLAUSE_STATUS, ClauseStatus.MATRIX)
        self.set_feature(Feature.SUPPRESSED_COMPLEMENTISER, False)
        self.set_feature(LexicalFeature.EXPLETIVE_SUBJECT, False)
        self.set_feature(Feature.COMPLEMENTISER, factory.lexicon.get_default_complementiser())

    def set_feature(self, name: Any, value: Any) -> None:
        super().set_feature(name, value)
        key = getattr(name, "value", name)
        if key in VP_FEATURES:
            verb_phrase = self.verb_phrase
            if verb_phrase is not None:
                verb_phrase.set_feature(name, value)

    # -- verb phrase -------------------------------------------------------

    @property
    def verb_phrase(self) -> Optional[NLGElement]:
        return self.get_feature_as_element(InternalFeature.VERB_PHRASE)

    def set_verb_phrase(self, verb_phrase: NLGElement) -> None:
        super().set_feature(InternalFeature.VERB_PHRASE, verb_phrase)
        verb_phrase.parent = self

    def set_verb(self, verb: Any) -> None:
        verb_phrase = self.verb_phrase
        if isinstance(verb_phrase, VPPhraseSpec):
            verb_phrase.set_verb(verb)

    @property
    def verb(self) -> Optional[NLGElement]:
        verb_phrase = self.verb_phrase
        if isinstance(verb_phrase, PhraseElement):
            return verb_phrase.head
        return None

    # -- arguments ---------------------------------------------------------

    def set_subject(self, subject: Any) -> None:
        phrase = _as_phrase(self.factory, subject)
        self.set_feature(InternalFeature.SUBJECTS, [phrase])
        phrase.parent = self
        phrase.set_feature(InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.SUBJECT)

    @property
    def subject(self) -> Optional[NLGElement]:
        subjects = self.get_feature_as_element_list(InternalFeature.SUBJECTS)
        return subjects[0] if subjects else None

    def set_object(self, obj: Any) -> None:
        verb_phrase = self.verb_phrase
        if isinstance(verb_phrase, VPPhraseSpec):
            verb_phrase.set_object(obj)

    @property
    def object(self) -> Optional[NLGElement]:
        verb_phrase = self.verb_phrase
        return verb_phrase.object if isinstance(verb_phrase, VPPhraseSpec) else None

    def set_indirect_object(self, indirect_object: Any) -> None:
        verb_phrase = self.verb_phrase
        if isinstance(verb_phrase, VPPhraseSpec):
            verb_phrase.set_indirect_object(indirect_object)

    @property
    def indirect_object(self) -> Optional[NLGElement]:
        verb_phrase = self.verb_phrase
        return verb_phrase.indirect_object if isinstance(verb_phrase, VPPhraseSpec) else None

    def set_complementiser(self, complementiser: Any) -> None:
        if isinstance(complementiser, str):
            complementiser = self.factory.create_word(complementiser, LexicalCategory.COMPLEMENTISER)
        self.set_feature(Feature.COMPLEMENTISER, complementiser)

    # -- slots forwarded to the verb phrase ----------------------------------

    def add_pre_modifier(self, modifier: Any) -> None:
        if isinstance(modifier, str):
            modifier = self.factory.create_nlg_element(modifier, LexicalCategory.ADVERB)
        verb_phrase = self.verb_phrase
        if isinstance(verb_phrase, (PhraseElement, CoordinatedPhraseElement)):
            verb_phrase.add_pre_modifier(modifier)
        else:
            super().add_pre_modifier(modifier)

    def add_post_modifier(self, modifier: Any) -> None:
        if isinstance(modifier, str):
            modifier = self.factory.create_nlg_element(modifier, LexicalCategory.ADVERB)
        super().add_post_modifier(modifier)

    def add_complement(self, complement: Any) -> None:
        verb_phrase = self.verb_phrase
        if isinstance(verb_phrase, PhraseElement):
            verb_phrase.add_complement(complement)
        else:
            super().add_complement(complement)

    def add_modifier(self, modifier: Any) -> None:
        _registry(self).clause_helper(self.language).add_modifier(self, modifier)

    def clear_modifiers(self) -> None:
        super().clear_modifiers()
        verb_phrase = self.verb_phrase
        if isinstance(verb_phrase, VPPhraseSpec):
            verb_phrase.clear_modifiers()

    def clear_complements(self) -> None:
        super().clear_complements()
        verb_phrase = self.verb_phrase
        if isinstance(verb_phrase, VPPhraseSpec):
            verb_phrase.clear_complements()

    # -- relative clauses --------------------------------------------------

    def set_relative_phrase(self, relative: NLGElement, function: Optional[DiscourseFunction] = None) -> None:
        """Mark `relative` (a constituent of this clause) as relativised."""
        if function is not None:
            relative.set_feature(InternalFeature.DISCOURSE_FUNCTION, function)
        super().set_feature(FrenchFeature.RELATIVE_PHRASE, relative)

    def has_relative_phrase(self, function: DiscourseFunction) -> bool:
        relative = self.get_feature_as_element(FrenchFeature.RELATIVE_PHRASE)
        if relative is None:
            return False
        if relative.get_feature(InternalFeature.DISCOURSE_FUNCTION) == function:
            return True
        if function == DiscourseFunction.SUBJECT:
            subjects = self.get_feature_as_element_list(InternalFeature.SUBJECTS)
            return any(subject is relative for subject in subjects)
        return False


# ---------------------------------------------------------------------------
# Prepositional, adjective and adverb phrases
# ---------------------------------------------------------------------------


class PPPhraseSpec(PhraseElement):
    """Prepositional phrase: a preposition head plus its object(s)."""

    def __init__(self, factory: Any = None) -> None:
        super().__init__(PhraseCategory.PREPOSITIONAL_PHRASE, factory)

    def set_preposition(self, preposition: Any) -> None:
        if isinstance(preposition, NLGElement):
            self.set_head(preposition)
        else:
            self.set_head(self.factory.create_word(preposition, LexicalCategory.PREPOSITION))

    @property
    def preposition(self) -> Optional[NLGElement]:
        return self.head

    def set_object(self, obj: Any) -> None:
        super().clear_complements()
        self.add_object(obj)

    def add_object(self, obj: Any) -> None:
        phrase = _as_phrase(self.factory, obj)
        phrase.set_feature(InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.OBJECT)
        super().add_complement(phrase)

    def add_complement(self, complement: Any) -> None:
        self.add_object(complement)

    def set_complement(self, complement: Any) -> None:
        self.set_object(complement)

    @property
    def object(self) -> Optional[NLGElement]:
        for complement in self.complements:
            if complement.get_feature(InternalFeature.DISCOURSE_FUNCTION) == DiscourseFunction.OBJECT:
                return complement
        return None

    def check_if_ne_only_negation(self) -> bool:
        obj = self.object
        return obj is not None and obj.check_if_ne_only_negation()


def _is_adverbial(element: NLGElement) -> bool:
    return element.is_a(LexicalCategory.ADVERB) or element.is_a(PhraseCategory.ADVERB_PHRASE)


class AdjPhraseSpec(PhraseElement):
    def __init__(self, factory: Any = None) -> None:
        super().__init__(PhraseCategory.ADJECTIVE_PHRASE, factory)

    def set_adjective(self, adjective: Any) -> None:
        self.set_head(self.factory.create_nlg_element(adjective, LexicalCategory.ADJECTIVE))

    @property
    def adjective(self) -> Optional[NLGElement]:
        return self.head

    def add_modifier(self, modifier: Any) -> None:
        if modifier is None:
            return
        element = self._coerce(modifier, LexicalCategory.ADVERB)
        if element is not None and _is_adverbial(element):
            self.add_pre_modifier(element)
        else:
            self.add_post_modifier(element)


class AdvPhraseSpec(PhraseElement):
    def __init__(self, factory: Any = None) -> None:
        super().__init__(PhraseCategory.ADVERB_PHRASE, factory)

    def set_adverb(self, adverb: Any) -> None:
        self.set_head(self.factory.create_nlg_element(adverb, LexicalCategory.ADVERB))

    @property
    def adverb(self) -> Optional[NLGElement]:
        return self.head

    def add_modifier(self, modifier: Any) -> None:
        if modifier is None:
            return
        element = self._coerce(modifier, LexicalCategory.ADVERB)
        if element is not None and _is_adverbial(element):
            self.add_pre_modifier(element)
        else:
            self.add_post_modifier(element)


def subjects_of(clause: NLGElement) -> List[NLGElement]:
    return clause.get_feature_as_element_list(InternalFeature.SUBJECTS)


__all__ = [
    "VP_FEATURES",
    "NPPhraseSpec",
    "VPPhraseSpec",
    "SPhraseSpec",
    "PPPhraseSpec",
    "AdjPhraseSpec",
    "AdvPhraseSpec",
    "subjects_of",
]
