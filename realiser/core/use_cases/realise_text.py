# realiser/core/use_cases/realise_text.py
import copy
from typing import Optional

import structlog

from realiser.adapters.persistence.lexicon.errors import LexiconError
from realiser.core.domain.categories import DocumentCategory
from realiser.core.domain.elements import DocumentElement, NLGElement, StringElement
from realiser.core.domain.exceptions import DomainError, RealisationError
from realiser.core.domain.registry import HelperRegistry, default_registry
from realiser.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class Realiser:
    """
    Use Case: turns a feature-tagged element tree into surface text.

    Responsibilities:
    1. Snapshots the input tree, so the caller's elements are never mutated.
    2. Runs the four stages in order: syntax, morphology, morphophonology,
       orthography. Each stage dispatches per language via the registry.
    3. Traces the run and, in debug mode, logs the tree after every stage.
    4. Lets domain and lexicon errors through; wraps anything else.
    """

    def __init__(self, registry: Optional[HelperRegistry] = None, debug: bool = False):
        self.registry = registry or default_registry()
        self.debug = debug

    def set_debug_mode(self, debug: bool) -> None:
        self.debug = debug

    def realise(self, element: Optional[NLGElement]) -> Optional[NLGElement]:
        """
        Realise an element.

        Args:
            element: any element (phrase, word, document...). None is
                passed through.

        Returns:
            A settled element whose `realisation` holds the text. An element
            that realises to nothing (e.g. elided) yields an empty string
            element.
        """
        if element is None:
            return None

        language = element.language
        with tracer.start_as_current_span("use_case.realise") as span:
            span.set_attribute("realiser.language", language.value)
            span.set_attribute("realiser.category", str(getattr(element.category, "value", element.category)))

            try:
                snapshot = copy.deepcopy(element)
                self._trace("input", snapshot)

                realised = self.registry.realise_syntax(snapshot)
                self._trace("syntax", realised)

                realised = self.registry.realise_morphology(realised)
                self._trace("morphology", realised)

                realised = self.registry.realise_morphophonology(realised)
                self._trace("morphophonology", realised)

                realised = self.registry.realise_orthography(realised)
                self._trace("orthography", realised)

            except (DomainError, LexiconError):
                # configuration problems (missing closed-class word, unknown language...)
                raise
            except Exception as e:
                logger.error("realisation_failed", language=language.value, error=str(e), exc_info=True)
                raise RealisationError(str(e)) from e

            if realised is None:
                realised = StringElement("")
            text = realised.realisation or ""
            span.set_attribute("realiser.text_length", len(text))
            logger.debug("realisation_complete", language=language.value, text=text[:80])
            return realised

    def realise_sentence(self, element: Optional[NLGElement]) -> str:
        """
        Realise an element as a sentence: capitalised, with a final "." or
        "?" for questions. Returns the text, "" for nothing.
        """
        if element is None:
            return ""
        if element.category == DocumentCategory.SENTENCE:
            sentence = element
        else:
            # the wrapper takes a copy, the caller's element keeps its parent
            sentence = DocumentElement(DocumentCategory.SENTENCE, factory=element.factory)
            sentence.add_component(copy.deepcopy(element))

        realised = self.realise(sentence)
        if realised is None:
            return ""
        return realised.realisation or ""

    def _trace(self, stage: str, element: Optional[NLGElement]) -> None:
        if not self.debug:
            return
        tree = element.print_tree() if element is not None else "<none>"
        logger.debug("realiser_tree", stage=stage, tree=tree)


__all__ = ["Realiser"]
