"""Semantic analysis engine: intent, entities and resonance boosting."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence

from intentlayer.classifiers.base import IntentModel
from intentlayer.models.intent import EntityMap, Intent, ResonantWord, SemanticContext
from intentlayer.semantic.patterns import (
    ENTITY_CAPTURES,
    FALLBACK_CONFIDENCE,
    FALLBACK_INTENT,
    KEYWORD_ASSOCIATIONS,
    STOP_WORDS,
    match_rule,
    rules_for,
)
from intentlayer.semantic.templates import RESPONSE_TEMPLATES, ResponseTemplate

logger = logging.getLogger(__name__)

SEMANTIC_BOOST_FACTOR = 2.0
HIGH_CONFIDENCE_FACTOR = 1.3
HIGH_CONFIDENCE_THRESHOLD = 0.7

_WORD_SPLIT = re.compile(r"\W+")


def _unique(items: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(items))


def extract_keywords(text: str) -> list[str]:
    """Lower-cased content words longer than two characters, stop words removed."""
    return [
        word
        for word in _WORD_SPLIT.split(text.lower())
        if len(word) > 2 and word not in STOP_WORDS
    ]


def keyword_boosts(keywords: Sequence[str]) -> list[str]:
    boosts: list[str] = []
    for keyword in keywords:
        boosts.extend(KEYWORD_ASSOCIATIONS.get(keyword, ()))
        boosts.append(keyword)
    return _unique(boosts)


def _entity_updates(utterance: str) -> list[tuple[int, dict[str, str]]]:
    updates: list[tuple[int, dict[str, str]]] = []
    for capture in ENTITY_CAPTURES:
        for match in capture.pattern.finditer(utterance):
            values: dict[str, str] = {}
            noun: str | None = None
            for role, value in zip(capture.roles, match.groups()):
                if role == "noun":
                    noun = value.lower()
                    values["entity_type"] = noun
                else:
                    values[role] = value
            if capture.entity_type:
                values["entity_type"] = capture.entity_type
            if noun and "entity_name" in values:
                values[f"{noun}_name"] = values["entity_name"]
            updates.append((match.start(), values))
    updates.sort(key=lambda update: update[0])
    return updates


class SemanticEngine:
    """Pattern-driven intent analysis for a single utterance or a history.

    All analysis methods are synchronous and keep no state between calls.
    An ``intent_model`` may be supplied to classify through a pluggable
    model instead of the built-in decision list (see ``analyze_with_model``).
    """

    def __init__(
        self,
        bot_name: str = "PrimeBot",
        templates: dict[Intent, ResponseTemplate] | None = None,
        intent_model: IntentModel | None = None,
    ) -> None:
        self._bot_name = bot_name
        self._templates = RESPONSE_TEMPLATES if templates is None else templates
        self._intent_model = intent_model

    @property
    def intent_model(self) -> IntentModel | None:
        return self._intent_model

    def analyze_semantic_context(self, text: str) -> SemanticContext:
        text = text or ""
        found = match_rule(text)
        if found is None:
            keywords = extract_keywords(text)
            logger.debug("No rule matched; falling back with keywords %s", keywords)
            return SemanticContext(
                intent=FALLBACK_INTENT,
                entities=keywords,
                semantic_boosts=keyword_boosts(keywords),
                confidence=FALLBACK_CONFIDENCE,
            )

        rule, match = found
        logger.debug("Rule %s matched: %s", rule.name, rule.intent.value)
        return SemanticContext(
            intent=rule.intent,
            entities=[group for group in match.groups() if group],
            semantic_boosts=list(rule.boosts),
            confidence=rule.confidence,
        )

    async def analyze_with_model(self, text: str) -> SemanticContext:
        """Classify with the configured intent model, keeping rule boosts."""
        if self._intent_model is None:
            return self.analyze_semantic_context(text)

        await self._intent_model.initialize()
        result = await self._intent_model.classify(text)

        rules = rules_for(result.intent)
        entities: list[str] = []
        for rule in rules:
            match = rule.match(text)
            if match:
                entities = [group for group in match.groups() if group]
                break

        if rules:
            boosts = _unique(boost for rule in rules for boost in rule.boosts)
        else:
            boosts = keyword_boosts(extract_keywords(text))

        return SemanticContext(
            intent=result.intent,
            entities=entities,
            semantic_boosts=boosts,
            confidence=result.confidence,
        )

    def extract_entities_from_context(self, history: Sequence[str]) -> EntityMap:
        entities: EntityMap = {}
        for utterance in history:
            if not isinstance(utterance, str):
                continue
            for _, values in _entity_updates(utterance):
                entities.update(values)
        return entities

    def generate_contextual_response(
        self,
        context: SemanticContext,
        history: Sequence[str],
        resonant_words: Sequence[str],
    ) -> str | None:
        """Render the template registered for ``context.intent``.

        Returns ``None`` when the intent has no template so the caller can
        fall back to another response strategy.
        """
        template = self._templates.get(context.intent)
        if template is None:
            logger.debug("No response template for %s", context.intent.value)
            return None

        name = None
        if context.intent == Intent.IDENTITY_INTRODUCTION and context.entities:
            name = context.entities[0]
        elif template.slot == "name":
            name = self.extract_entities_from_context(history).get("user_name")

        slots = {
            "bot": self._bot_name,
            "name": name,
            "topic": resonant_words[0] if resonant_words else None,
        }
        if template.with_value and template.slot and slots.get(template.slot):
            return template.with_value.format(**slots)
        return template.text.format(**slots)

    def enhance_resonance_with_semantics(
        self,
        resonant_words: Sequence[ResonantWord],
        context: SemanticContext,
    ) -> list[ResonantWord]:
        boosts = {boost.lower() for boost in context.semantic_boosts}
        enhanced: list[ResonantWord] = []
        for item in resonant_words:
            resonance = item.resonance
            if item.word.lower() in boosts:
                resonance *= SEMANTIC_BOOST_FACTOR
                if context.confidence > HIGH_CONFIDENCE_THRESHOLD:
                    resonance *= HIGH_CONFIDENCE_FACTOR
                logger.debug(
                    "Semantic boost for %r: %.1f -> %.1f", item.word, item.resonance, resonance
                )
            enhanced.append(ResonantWord(word=item.word, resonance=resonance))
        return enhanced
