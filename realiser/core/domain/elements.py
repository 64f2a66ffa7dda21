# realiser/core/domain/elements.py
"""
core/domain/elements.py

The element model the realisation pipeline operates on.

Every node is an `NLGElement`: a category, a feature map, an optional parent
back-reference and an optional realisation string. Variants:

- WordElement            a lexicon entry (owned by the lexicon, never copied)
- InflectedWordElement   one occurrence of a word with per-occurrence features
- StringElement          literal text, or the spelled-out form of a word
- ListElement            ordered sequence; the syntax stage's output container
- PhraseElement          slot-based phrase whose children are derived from
                         its category and slots
- CoordinatedPhraseElement  coordinates joined by a conjunction
- DocumentElement        sentence / paragraph container

Parent references are navigational only (language resolution, agreement
look-ups, relative clause antecedents). They never imply ownership.

Feature accessors never raise: a missing feature or a value of the wrong
type degrades to the neutral value of the accessor (False, None, []).
"""

from __future__ import annotations

import math
import re
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from .categories import (
    DocumentCategory,
    ElementCategory,
    LexicalCategory,
    PhraseCategory,
)
from .features import (
    ClauseStatus,
    DiscourseFunction,
    Feature,
    FrenchLexicalFeature,
    Gender,
    InternalFeature,
    Language,
    LexicalFeature,
    NumberAgreement,
    Person,
    Tense,
    get_default_language,
)


def feature_key(name: Any) -> str:
    """Normalise an enumerated or raw feature name to its map key."""
    if isinstance(name, Enum):
        return str(name.value)
    return str(name)


def _split_words(text: str) -> List[str]:
    parts = re.split(r"[ ']", text)
    while parts and parts[-1] == "":
        parts.pop()
    return parts


# ---------------------------------------------------------------------------
# Base element
# ---------------------------------------------------------------------------


class NLGElement:
    """Base class of every node in a realisation tree."""

    def __init__(self, category: Optional[ElementCategory] = None, factory: Any = None) -> None:
        self._features: Dict[str, Any] = {}
        self.category: Optional[ElementCategory] = category
        self.parent: Optional[NLGElement] = None
        self.realisation: Optional[str] = None
        self.factory = factory

    # -- feature map -------------------------------------------------------

    def set_feature(self, name: Any, value: Any) -> None:
        self._features[feature_key(name)] = value

    def get_feature(self, name: Any, default: Any = None) -> Any:
        return self._features.get(feature_key(name), default)

    def has_feature(self, name: Any) -> bool:
        return feature_key(name) in self._features

    def remove_feature(self, name: Any) -> None:
        self._features.pop(feature_key(name), None)

    def clear_all_features(self) -> None:
        self._features.clear()

    def all_features(self) -> Dict[str, Any]:
        return dict(self._features)

    def feature_names(self) -> List[str]:
        return list(self._features.keys())

    def copy_features_from(self, other: "NLGElement", *, skip: Iterable[Any] = ()) -> None:
        skipped = {feature_key(name) for name in skip}
        for name, value in other._features.items():
            if name not in skipped:
                self._features[name] = value

    # -- typed accessors ---------------------------------------------------

    def get_feature_as_boolean(self, name: Any) -> bool:
        value = self.get_feature(name)
        return value if isinstance(value, bool) else False

    def get_feature_as_string(self, name: Any) -> Optional[str]:
        value = self.get_feature(name)
        if value is None:
            return None
        if isinstance(value, StringElement):
            return value.realisation
        if isinstance(value, (WordElement, InflectedWordElement)):
            return value.base_form
        if isinstance(value, Enum):
            return str(value.value)
        return str(value)

    def get_feature_as_element(self, name: Any) -> Optional["NLGElement"]:
        value = self.get_feature(name)
        if isinstance(value, NLGElement):
            return value
        if isinstance(value, str) and not isinstance(value, Enum):
            return StringElement(value)
        return None

    def get_feature_as_element_list(self, name: Any) -> List["NLGElement"]:
        value = self.get_feature(name)
        if isinstance(value, NLGElement):
            return [value]
        if isinstance(value, (list, tuple)):
            return [item for item in value if isinstance(item, NLGElement)]
        return []

    def get_feature_as_string_list(self, name: Any) -> List[str]:
        value = self.get_feature(name)
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return [str(item) for item in value]
        return [str(value)]

    def get_feature_as_integer(self, name: Any) -> Optional[int]:
        value = self.get_feature(name)
        if isinstance(value, bool):
            return None
        if isinstance(value, float):
            return int(value) if math.isfinite(value) else None
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                return None
        return None

    def get_feature_as_float(self, name: Any) -> Optional[float]:
        value = self.get_feature(name)
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return float(value)
        if isinstance(value, str):
            try:
                return float(value.strip())
            except ValueError:
                return None
        return None

    # -- convenience -------------------------------------------------------

    def is_a(self, category: Any) -> bool:
        if self.category is None or category is None:
            return False
        if isinstance(category, str):
            return getattr(self.category, "value", None) == category.strip().lower()
        return self.category == category

    def is_plural(self) -> bool:
        return self.get_feature(Feature.NUMBER) == NumberAgreement.PLURAL

    def set_plural(self, plural: bool) -> None:
        self.set_feature(
            Feature.NUMBER,
            NumberAgreement.PLURAL if plural else NumberAgreement.SINGULAR,
        )

    def get_tense(self) -> Tense:
        value = self.get_feature(Feature.TENSE)
        return value if isinstance(value, Tense) else Tense.PRESENT

    def set_tense(self, tense: Tense) -> None:
        self.set_feature(Feature.TENSE, tense)

    def is_negated(self) -> bool:
        return self.get_feature_as_boolean(Feature.NEGATED)

    def set_negated(self, negated: bool) -> None:
        self.set_feature(Feature.NEGATED, negated)

    def get_children(self) -> List["NLGElement"]:
        return []

    # -- language / lexicon ------------------------------------------------

    def _own_language(self) -> Optional[Language]:
        if self.factory is not None:
            return self.factory.language
        lexicon = self.lexicon
        if lexicon is not None:
            return lexicon.language
        return None

    @property
    def lexicon(self):
        if self.factory is not None:
            return self.factory.lexicon
        return None

    @property
    def language(self) -> Language:
        element: Optional[NLGElement] = self
        while element is not None:
            language = element._own_language()
            if language is not None:
                return language
            element = element.parent
        return get_default_language()

    # -- navigation used by morphophonology --------------------------------

    def leftmost_string_element(self) -> Optional["StringElement"]:
        for child in self.get_children():
            found = child.leftmost_string_element()
            if found is not None:
                return found
        return None

    def rightmost_string_element(self) -> Optional["StringElement"]:
        for child in reversed(self.get_children()):
            found = child.rightmost_string_element()
            if found is not None:
                return found
        return None

    # -- misc --------------------------------------------------------------

    def count_words(self) -> int:
        if self.get_feature_as_boolean(Feature.ELIDED):
            return 0
        if isinstance(self.category, LexicalCategory):
            return 1
        if self.category == PhraseCategory.CANNED_TEXT:
            return len(_split_words(self.realisation)) if self.realisation else 0
        return count_words(self.get_children())

    def check_if_ne_only_negation(self) -> bool:
        return self.get_feature_as_boolean(FrenchLexicalFeature.NE_ONLY_NEGATION)

    def has_relative_phrase(self, function: DiscourseFunction) -> bool:
        return False

    def print_tree(self, indent: Optional[str] = None) -> str:
        this_indent = " |-" if indent is None else indent + " |-"
        child_indent = " | " if indent is None else indent + " | "
        last_indent = " \\-" if indent is None else indent + " \\-"
        last_child_indent = "   " if indent is None else indent + "   "

        lines = [f"{type(self).__name__}: category={_category_name(self.category)}, "
                 f"features={{{_features_repr(self._features)}}}\n"]
        children = self.get_children()
        for index, child in enumerate(children):
            if index < len(children) - 1:
                lines.append(this_indent + child.print_tree(child_indent))
            else:
                lines.append(last_indent + child.print_tree(last_child_indent))
        return "".join(lines)

    def __repr__(self) -> str:
        return f"{type(self).__name__}[{_category_name(self.category)}]"


def count_words(elements: Iterable[Optional[NLGElement]]) -> int:
    return sum(element.count_words() for element in elements if element is not None)


def _category_name(category: Any) -> str:
    if category is None:
        return "none"
    return category.name


def _features_repr(features: Dict[str, Any]) -> str:
    parts = []
    for name in sorted(features):
        value = features[name]
        if isinstance(value, Enum):
            value = value.value
        elif isinstance(value, NLGElement):
            value = repr(value)
        elif isinstance(value, list):
            value = "[" + ", ".join(repr(item) for item in value) + "]"
        parts.append(f"{name}={value}")
    return " ".join(parts)


# ---------------------------------------------------------------------------
# Words
# ---------------------------------------------------------------------------


class WordElement(NLGElement):
    """
    A lexicon entry. Shared by every tree that mentions the word, so the
    syntax stage never mutates it: occurrences are wrapped into
    InflectedWordElements instead.
    """

    def __init__(
        self,
        base_form: str,
        category: LexicalCategory = LexicalCategory.ANY,
        id: Optional[str] = None,
        lexicon: Any = None,
    ) -> None:
        super().__init__(category)
        self.base_form = base_form
        self.id = id
        self._lexicon = lexicon
        self.set_feature(LexicalFeature.BASE_FORM, base_form)

    @property
    def lexicon(self):
        return self._lexicon

    @lexicon.setter
    def lexicon(self, value) -> None:
        self._lexicon = value

    @property
    def default_spelling_variant(self) -> str:
        return self.base_form

    def __copy__(self) -> "WordElement":
        return self

    def __deepcopy__(self, memo) -> "WordElement":
        return self

    def __repr__(self) -> str:
        return f"WordElement[{self.base_form}:{_category_name(self.category)}]"

    def print_tree(self, indent: Optional[str] = None) -> str:
        return (f"WordElement: base={self.base_form}, "
                f"category={_category_name(self.category)}, id={self.id}\n")


class InflectedWordElement(NLGElement):
    """One occurrence of a word, carrying its agreement and form features."""

    def __init__(self, word: Any, category: Optional[LexicalCategory] = None) -> None:
        super().__init__()
        if isinstance(word, WordElement):
            self.copy_features_from(word)
            self.set_feature(InternalFeature.BASE_WORD, word)
            self.set_feature(LexicalFeature.BASE_FORM, word.default_spelling_variant)
            self.category = word.category
        elif isinstance(word, str):
            self.set_feature(LexicalFeature.BASE_FORM, word)
            self.category = category or LexicalCategory.ANY
        else:
            self.category = LexicalCategory.ANY
        if category is not None:
            self.category = category

    @property
    def base_form(self) -> Optional[str]:
        return self.get_feature_as_string(LexicalFeature.BASE_FORM)

    @property
    def base_word(self) -> Optional[WordElement]:
        word = self.get_feature(InternalFeature.BASE_WORD)
        return word if isinstance(word, WordElement) else None

    @base_word.setter
    def base_word(self, word: Optional[WordElement]) -> None:
        self.set_feature(InternalFeature.BASE_WORD, word)

    @property
    def lexicon(self):
        word = self.base_word
        if word is not None and word.lexicon is not None:
            return word.lexicon
        return super().lexicon

    def _own_language(self) -> Optional[Language]:
        lexicon = self.lexicon
        if lexicon is not None:
            return lexicon.language
        return super()._own_language()

    def __repr__(self) -> str:
        return f"InflectedWordElement[{self.base_form}:{_category_name(self.category)}]"

    def print_tree(self, indent: Optional[str] = None) -> str:
        return (f"InflectedWordElement: base={self.base_form}, "
                f"category={_category_name(self.category)}, "
                f"features={{{_features_repr(self._features)}}}\n")


class StringElement(NLGElement):
    """Literal text; also the spelled-out result of morphology for a word."""

    def __init__(self, value: Optional[str], source: Optional[NLGElement] = None) -> None:
        super().__init__(PhraseCategory.CANNED_TEXT)
        if source is not None:
            self.copy_features_from(source)
            self.category = source.category
            self.factory = source.factory
        self.set_feature(Feature.ELIDED, False)
        self.realisation = value

    @property
    def lexicon(self):
        word = self.get_feature(InternalFeature.BASE_WORD)
        if isinstance(word, WordElement) and word.lexicon is not None:
            return word.lexicon
        return super().lexicon

    def _own_language(self) -> Optional[Language]:
        lexicon = self.lexicon
        if lexicon is not None:
            return lexicon.language
        return super()._own_language()

    def leftmost_string_element(self) -> Optional["StringElement"]:
        return self

    def rightmost_string_element(self) -> Optional["StringElement"]:
        return self

    def __repr__(self) -> str:
        return f"StringElement[{self.realisation}:{_category_name(self.category)}]"

    def print_tree(self, indent: Optional[str] = None) -> str:
        return (f'StringElement: content="{self.realisation}", '
                f"category={_category_name(self.category)}\n")


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------


class ListElement(NLGElement):
    """
    Ordered sequence of elements. When built from a phrase, the list
    inherits the phrase's category, features and factory so that words
    placed in it can read agreement features from their parent.
    """

    def __init__(
        self,
        source: Optional[NLGElement] = None,
        components: Optional[Iterable[NLGElement]] = None,
    ) -> None:
        super().__init__()
        if source is not None:
            self.copy_features_from(source, skip=(InternalFeature.COMPONENTS,))
            self.category = source.category
            self.factory = source.factory
            self.parent = source.parent
        self.set_feature(InternalFeature.COMPONENTS, [])
        if components is not None:
            self.add_components(components)

    def get_children(self) -> List[NLGElement]:
        return self.get_feature_as_element_list(InternalFeature.COMPONENTS)

    def add_component(self, component: Optional[NLGElement]) -> None:
        if component is None:
            return
        components = self.get_feature(InternalFeature.COMPONENTS)
        if not isinstance(components, list):
            components = []
            self.set_feature(InternalFeature.COMPONENTS, components)
        components.append(component)
        component.parent = self

    def add_components(self, components: Iterable[Optional[NLGElement]]) -> None:
        for component in components:
            self.add_component(component)

    def set_components(self, components: Iterable[Optional[NLGElement]]) -> None:
        self.set_feature(InternalFeature.COMPONENTS, [])
        self.add_components(components)

    def clear_components(self) -> None:
        self.set_feature(InternalFeature.COMPONENTS, [])

    def size(self) -> int:
        return len(self.get_children())

    def first(self) -> Optional[NLGElement]:
        children = self.get_children()
        return children[0] if children else None

    def last(self) -> Optional[NLGElement]:
        children = self.get_children()
        return children[-1] if children else None

    def __repr__(self) -> str:
        return f"ListElement{self.get_children()!r}"


class DocumentElement(NLGElement):
    """Sentence, paragraph or other document-level container."""

    def __init__(self, category: DocumentCategory, title: Optional[str] = None, factory: Any = None) -> None:
        super().__init__(category, factory)
        self.title = title
        self.set_feature(InternalFeature.COMPONENTS, [])

    def get_children(self) -> List[NLGElement]:
        return self.get_feature_as_element_list(InternalFeature.COMPONENTS)

    def add_component(self, component: Optional[NLGElement]) -> None:
        if component is None:
            return
        components = self.get_feature(InternalFeature.COMPONENTS)
        if not isinstance(components, list):
            components = []
            self.set_feature(InternalFeature.COMPONENTS, components)
        components.append(component)
        component.parent = self

    def add_components(self, components: Iterable[Optional[NLGElement]]) -> None:
        for component in components:
            self.add_component(component)

    def set_components(self, components: Iterable[Optional[NLGElement]]) -> None:
        self.set_feature(InternalFeature.COMPONENTS, [])
        self.add_components(components)

    def clear_components(self) -> None:
        self.set_feature(InternalFeature.COMPONENTS, [])


# ---------------------------------------------------------------------------
# Phrases
# ---------------------------------------------------------------------------


def _attach_subordinate(parent: NLGElement, element: NLGElement) -> None:
    if element.is_a(PhraseCategory.CLAUSE) or isinstance(element, CoordinatedPhraseElement):
        element.set_feature(InternalFeature.CLAUSE_STATUS, ClauseStatus.SUBORDINATE)
        if not element.has_feature(InternalFeature.DISCOURSE_FUNCTION):
            element.set_feature(InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.OBJECT)


class PhraseElement(NLGElement):
    """
    Phrase with named slots (specifier, front modifiers, premodifiers, head,
    complements, postmodifiers). Children are always derived from the
    category and the slots, never stored.
    """

    def __init__(self, category: PhraseCategory, factory: Any = None) -> None:
        super().__init__(category, factory)
        self.set_feature(Feature.ELIDED, False)

    def get_children(self) -> List[NLGElement]:
        children: List[NLGElement] = []
        category = self.category
        if category == PhraseCategory.CANNED_TEXT:
            return children
        if category == PhraseCategory.CLAUSE:
            cue = self.get_feature_as_element(Feature.CUE_PHRASE)
            if cue is not None:
                children.append(cue)
            children.extend(self.get_feature_as_element_list(InternalFeature.FRONT_MODIFIERS))
            children.extend(self.get_feature_as_element_list(InternalFeature.PREMODIFIERS))
            children.extend(self.get_feature_as_element_list(InternalFeature.SUBJECTS))
            children.extend(self.get_feature_as_element_list(InternalFeature.VERB_PHRASE))
            children.extend(self.get_feature_as_element_list(InternalFeature.COMPLEMENTS))
            return children
        if category == PhraseCategory.NOUN_PHRASE:
            specifier = self.get_feature_as_element(InternalFeature.SPECIFIER)
            if specifier is not None:
                children.append(specifier)
        children.extend(self.get_feature_as_element_list(InternalFeature.PREMODIFIERS))
        head = self.head
        if head is not None:
            children.append(head)
        children.extend(self.get_feature_as_element_list(InternalFeature.COMPLEMENTS))
        children.extend(self.get_feature_as_element_list(InternalFeature.POSTMODIFIERS))
        return children

    # -- head --------------------------------------------------------------

    @property
    def head(self) -> Optional[NLGElement]:
        return self.get_feature_as_element(InternalFeature.HEAD)

    def set_head(self, new_head: Any) -> None:
        if new_head is None:
            self.remove_feature(InternalFeature.HEAD)
            return
        if isinstance(new_head, NLGElement):
            head_element: NLGElement = new_head
        else:
            head_element = StringElement(str(new_head))
        self.set_feature(InternalFeature.HEAD, head_element)
        # Lexicon words are shared, so they never get a parent.
        if not isinstance(head_element, WordElement):
            head_element.parent = self

    # -- slot helpers ------------------------------------------------------

    def _append_to(self, slot: InternalFeature, element: NLGElement) -> None:
        items = self.get_feature_as_element_list(slot)
        items.append(element)
        self.set_feature(slot, items)
        element.parent = self

    def _coerce(self, value: Any, category: LexicalCategory = LexicalCategory.ANY) -> Optional[NLGElement]:
        if isinstance(value, WordElement):
            return InflectedWordElement(value)
        if isinstance(value, NLGElement):
            return value
        if value is None:
            return None
        if self.factory is not None:
            return self.factory.create_nlg_element(value, category)
        return StringElement(str(value))

    @property
    def complements(self) -> List[NLGElement]:
        return self.get_feature_as_element_list(InternalFeature.COMPLEMENTS)

    @property
    def pre_modifiers(self) -> List[NLGElement]:
        return self.get_feature_as_element_list(InternalFeature.PREMODIFIERS)

    @property
    def post_modifiers(self) -> List[NLGElement]:
        return self.get_feature_as_element_list(InternalFeature.POSTMODIFIERS)

    @property
    def front_modifiers(self) -> List[NLGElement]:
        return self.get_feature_as_element_list(InternalFeature.FRONT_MODIFIERS)

    def add_complement(self, complement: Any) -> None:
        element = self._coerce(complement)
        if element is None:
            return
        if isinstance(complement, NLGElement):
            _attach_subordinate(self, element)
        self._append_to(InternalFeature.COMPLEMENTS, element)

    def set_complement(self, complement: Any) -> None:
        if isinstance(complement, NLGElement):
            self.remove_complements(complement.get_feature(InternalFeature.DISCOURSE_FUNCTION))
        else:
            self.clear_complements()
        self.add_complement(complement)

    def remove_complements(self, function: Optional[DiscourseFunction]) -> None:
        if function is None:
            return
        kept = [
            complement for complement in self.complements
            if complement.get_feature(InternalFeature.DISCOURSE_FUNCTION) != function
        ]
        self.set_feature(InternalFeature.COMPLEMENTS, kept)

    def clear_complements(self) -> None:
        self.remove_feature(InternalFeature.COMPLEMENTS)

    def add_pre_modifier(self, modifier: Any) -> None:
        element = self._coerce(modifier)
        if element is not None:
            self._append_to(InternalFeature.PREMODIFIERS, element)

    def add_post_modifier(self, modifier: Any) -> None:
        element = self._coerce(modifier)
        if element is not None:
            self._append_to(InternalFeature.POSTMODIFIERS, element)

    def add_front_modifier(self, modifier: Any) -> None:
        if modifier is None:
            return
        if isinstance(modifier, NLGElement):
            element = self._coerce(modifier)
            _attach_subordinate(self, element)
        else:
            element = StringElement(str(modifier))
        self._append_to(InternalFeature.FRONT_MODIFIERS, element)

    def add_modifier(self, modifier: Any) -> None:
        """Default placement: premodifier. Typed phrases override this."""
        self.add_pre_modifier(modifier)

    def clear_modifiers(self) -> None:
        self.remove_feature(InternalFeature.FRONT_MODIFIERS)
        self.remove_feature(InternalFeature.PREMODIFIERS)
        self.remove_feature(InternalFeature.POSTMODIFIERS)


# ---------------------------------------------------------------------------
# Coordination
# ---------------------------------------------------------------------------


_NOMINAL = (PhraseCategory.NOUN_PHRASE, LexicalCategory.PRONOUN, LexicalCategory.NOUN)


class CoordinatedPhraseElement(NLGElement):
    """Coordinates joined by a conjunction ("and" unless set otherwise)."""

    def __init__(self, factory: Any = None, *coordinates: Any) -> None:
        super().__init__(None, factory)
        for coordinate in coordinates:
            self.add_coordinate(coordinate)

    def get_children(self) -> List[NLGElement]:
        return self.get_feature_as_element_list(InternalFeature.COORDINATES)

    @property
    def coordinates(self) -> List[NLGElement]:
        return self.get_children()

    def add_coordinate(self, coordinate: Any) -> None:
        coordinates = self.get_feature_as_element_list(InternalFeature.COORDINATES)
        if isinstance(coordinate, NLGElement):
            if isinstance(coordinate, WordElement):
                coordinate = InflectedWordElement(coordinate)
            if coordinate.is_a(PhraseCategory.CLAUSE) and coordinates:
                coordinate.set_feature(Feature.SUPPRESSED_COMPLEMENTISER, True)
            coordinates.append(coordinate)
            coordinate.parent = self
            self._determine_gender(coordinate)
            self._determine_person(coordinate)
        elif isinstance(coordinate, str):
            element = StringElement(coordinate)
            element.set_feature(Feature.SUPPRESSED_COMPLEMENTISER, True)
            coordinates.append(element)
            element.parent = self
        else:
            return
        self.set_feature(InternalFeature.COORDINATES, coordinates)

    def _determine_gender(self, coordinate: NLGElement) -> None:
        current = self.get_feature(LexicalFeature.GENDER)
        if isinstance(coordinate, CoordinatedPhraseElement) or coordinate.category in _NOMINAL:
            gender = coordinate.get_feature(LexicalFeature.GENDER)
            if gender == Gender.MASCULINE:
                self.set_feature(LexicalFeature.GENDER, Gender.MASCULINE)
            elif gender == Gender.NEUTER:
                if current != Gender.MASCULINE:
                    self.set_feature(LexicalFeature.GENDER, Gender.NEUTER)
            elif gender == Gender.FEMININE:
                if current is None:
                    self.set_feature(LexicalFeature.GENDER, Gender.FEMININE)
        elif current is None:
            self.set_feature(LexicalFeature.GENDER, Gender.NEUTER)

    def _determine_person(self, coordinate: NLGElement) -> None:
        current = self.get_feature(Feature.PERSON)
        if current == Person.FIRST:
            return
        if isinstance(coordinate, CoordinatedPhraseElement) or coordinate.category in _NOMINAL:
            person = coordinate.get_feature(Feature.PERSON)
            if person == Person.FIRST or current != Person.SECOND:
                self.set_feature(Feature.PERSON, person)

    def clear_coordinates(self) -> None:
        self.remove_feature(InternalFeature.COORDINATES)
        self.remove_feature(Feature.NUMBER)
        self.remove_feature(Feature.PERSON)
        self.remove_feature(LexicalFeature.GENDER)

    @property
    def last_coordinate(self) -> Optional[NLGElement]:
        children = self.get_children()
        return children[-1] if children else None

    # -- conjunction -------------------------------------------------------

    def set_conjunction(self, conjunction: Any) -> None:
        if isinstance(conjunction, str) and not isinstance(conjunction, Enum) and self.lexicon is not None:
            conjunction = self.lexicon.lookup_word(conjunction, LexicalCategory.CONJUNCTION)
        self.set_feature(Feature.CONJUNCTION, conjunction)

    @property
    def conjunction(self) -> Optional[WordElement]:
        value = self.get_feature(Feature.CONJUNCTION)
        if isinstance(value, WordElement):
            return value
        lexicon = self.lexicon
        if lexicon is None:
            return None
        if isinstance(value, str):
            return lexicon.lookup_word(value, LexicalCategory.CONJUNCTION)
        return lexicon.get_addition_coord_conjunction()

    def check_if_plural(self) -> bool:
        children = self.get_children()
        if len(children) == 1:
            return children[0].get_feature(Feature.NUMBER) == NumberAgreement.PLURAL
        conjunction = self.conjunction
        if conjunction is None:
            return True
        if conjunction.get_feature(Feature.NUMBER) == NumberAgreement.PLURAL:
            return True
        lexicon = self.lexicon
        return lexicon is not None and conjunction is lexicon.get_addition_coord_conjunction()

    def check_if_ne_only_negation(self) -> bool:
        conjunction = self.conjunction
        return conjunction is not None and conjunction.check_if_ne_only_negation()

    # -- modifiers ---------------------------------------------------------

    def _append_to(self, slot: InternalFeature, modifier: Any) -> None:
        if modifier is None:
            return
        element = modifier if isinstance(modifier, NLGElement) else StringElement(str(modifier))
        items = self.get_feature_as_element_list(slot)
        items.append(element)
        self.set_feature(slot, items)
        element.parent = self

    def add_pre_modifier(self, modifier: Any) -> None:
        self._append_to(InternalFeature.PREMODIFIERS, modifier)

    def add_post_modifier(self, modifier: Any) -> None:
        self._append_to(InternalFeature.POSTMODIFIERS, modifier)

    def add_complement(self, complement: Any) -> None:
        self._append_to(InternalFeature.COMPLEMENTS, complement)

    @property
    def pre_modifiers(self) -> List[NLGElement]:
        return self.get_feature_as_element_list(InternalFeature.PREMODIFIERS)

    @property
    def post_modifiers(self) -> List[NLGElement]:
        return self.get_feature_as_element_list(InternalFeature.POSTMODIFIERS)

    @property
    def complements(self) -> List[NLGElement]:
        return self.get_feature_as_element_list(InternalFeature.COMPLEMENTS)

    def count_words(self) -> int:
        return (count_words(self.get_children()) + count_words(self.complements)
                + count_words(self.pre_modifiers) + count_words(self.post_modifiers))

    def __repr__(self) -> str:
        return f"CoordinatedPhraseElement{self.get_children()!r}"


__all__ = [
    "feature_key",
    "count_words",
    "NLGElement",
    "WordElement",
    "InflectedWordElement",
    "StringElement",
    "ListElement",
    "DocumentElement",
    "PhraseElement",
    "CoordinatedPhraseElement",
]
