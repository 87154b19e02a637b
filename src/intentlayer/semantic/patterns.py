"""Decision list and entity capture rules for conversational intent."""

from __future__ import annotations

import re
from dataclasses import dataclass

from intentlayer.models.intent import Intent

_NAME = r"([A-Za-z][\w'-]*)"

MY_NAME_IS = re.compile(rf"\bmy name is {_NAME}", re.IGNORECASE)
# Only capitalised words count as names so "I am tired" and "call me back"
# are not introductions.
CALL_ME = re.compile(r"\b(?i:call me)\s+([A-Z][a-z]+)\b")
I_AM = re.compile(r"\b(?i:i am|i'm)\s+([A-Z][a-z]+)\b")
MY_NOUN_NAME_IS = re.compile(rf"\bmy (\w+?)(?:'s)?\s+name is {_NAME}", re.IGNORECASE)
MY_NOUN_IS_NAMED = re.compile(rf"\bmy (\w+) is (?:named|called) {_NAME}", re.IGNORECASE)
THIRD_PERSON_NAME_IS = re.compile(rf"\b(?:his|her) name is {_NAME}", re.IGNORECASE)


@dataclass(frozen=True)
class SemanticRule:
    name: str
    pattern: re.Pattern[str]
    intent: Intent
    confidence: float
    boosts: tuple[str, ...]

    def match(self, text: str) -> re.Match[str] | None:
        return self.pattern.search(text)


_IDENTITY_BOOSTS = ("name", "identity", "person", "individual", "called", "known")
_ENTITY_BOOSTS = ("name", "identity", "called", "known", "entity")
_RECALL_BOOSTS = ("name", "identity", "remember", "recall", "called", "known")

# Evaluated top to bottom; the first match wins.
SEMANTIC_RULES: tuple[SemanticRule, ...] = (
    SemanticRule("my_name_is", MY_NAME_IS, Intent.IDENTITY_INTRODUCTION, 0.9, _IDENTITY_BOOSTS),
    SemanticRule("call_me", CALL_ME, Intent.IDENTITY_INTRODUCTION, 0.9, _IDENTITY_BOOSTS),
    SemanticRule("i_am", I_AM, Intent.IDENTITY_INTRODUCTION, 0.9, _IDENTITY_BOOSTS),
    SemanticRule(
        "what_is_my_name",
        re.compile(
            r"\bwhat(?: is|'s) my name\b|\bwho am i\b|\b(?:know|remember) my name\b",
            re.IGNORECASE,
        ),
        Intent.IDENTITY_QUERY,
        0.9,
        _RECALL_BOOSTS,
    ),
    SemanticRule("my_noun_name_is", MY_NOUN_NAME_IS, Intent.ENTITY_INTRODUCTION, 0.85, _ENTITY_BOOSTS),
    SemanticRule("my_noun_is_named", MY_NOUN_IS_NAMED, Intent.ENTITY_INTRODUCTION, 0.85, _ENTITY_BOOSTS),
    SemanticRule(
        "third_person_name_is", THIRD_PERSON_NAME_IS, Intent.ENTITY_INTRODUCTION, 0.85, _ENTITY_BOOSTS
    ),
    SemanticRule(
        "what_is_my_noun_name",
        re.compile(r"\bwhat(?: is|'s) my (\w+?)(?:'s)?\s+name\b", re.IGNORECASE),
        Intent.ENTITY_QUERY,
        0.85,
        _RECALL_BOOSTS,
    ),
    SemanticRule(
        "what_is_my_noun_called",
        re.compile(r"\bwhat(?: is|'s) my (\w+) (?:called|named)\b", re.IGNORECASE),
        Intent.ENTITY_QUERY,
        0.85,
        _RECALL_BOOSTS,
    ),
    SemanticRule(
        "who_are_you",
        re.compile(r"\bwho are you\b|\bwhat(?: is|'s) your name\b", re.IGNORECASE),
        Intent.BOT_IDENTITY_QUERY,
        0.85,
        ("identity", "bot", "assistant", "who", "you", "name"),
    ),
    SemanticRule(
        "greeting",
        re.compile(r"^\s*(?:hello|hi|hey|greetings)\b", re.IGNORECASE),
        Intent.GREETING,
        0.9,
        ("hello", "greeting", "welcome", "salutation", "social", "friendly"),
    ),
    SemanticRule(
        "time_of_day_greeting",
        re.compile(r"\bgood (?:morning|afternoon|evening)\b", re.IGNORECASE),
        Intent.GREETING,
        0.9,
        ("greeting", "time", "polite", "social", "welcome"),
    ),
    SemanticRule(
        "help",
        re.compile(r"\b(?:help|assist|support)", re.IGNORECASE),
        Intent.HELP_REQUEST,
        0.8,
        ("help", "assist", "support", "aid", "guidance", "service"),
    ),
    SemanticRule(
        "gratitude",
        re.compile(r"\b(?:thank|grateful|appreciate)", re.IGNORECASE),
        Intent.GRATITUDE,
        0.8,
        ("thanks", "gratitude", "appreciation", "polite", "positive"),
    ),
    SemanticRule(
        "positive_feedback",
        re.compile(r"\b(?:good|great|excellent|awesome|wonderful|amazing)\b", re.IGNORECASE),
        Intent.POSITIVE_FEEDBACK,
        0.8,
        ("good", "positive", "approval", "satisfaction", "pleased"),
    ),
    SemanticRule(
        "what_is",
        re.compile(r"^\s*what (?:is|are|was|were)\b", re.IGNORECASE),
        Intent.INFORMATION_REQUEST,
        0.75,
        ("question", "information", "explain", "definition", "knowledge"),
    ),
    SemanticRule(
        "how_why_when_where",
        re.compile(r"^\s*(?:how|why|when|where)\b", re.IGNORECASE),
        Intent.INFORMATION_REQUEST,
        0.75,
        ("question", "inquiry", "explanation", "information", "help"),
    ),
    SemanticRule(
        "question_mark",
        re.compile(r"\?"),
        Intent.QUESTION,
        0.7,
        ("question", "inquiry", "ask", "information", "help"),
    ),
    SemanticRule(
        "knowledge",
        re.compile(r"\b(?:understand|know|learn|explain|teach)", re.IGNORECASE),
        Intent.KNOWLEDGE_REQUEST,
        0.6,
        ("understand", "knowledge", "learn", "explain", "information", "teach"),
    ),
)

FALLBACK_INTENT = Intent.GENERAL_CONVERSATION
FALLBACK_CONFIDENCE = 0.3


def match_rule(text: str) -> tuple[SemanticRule, re.Match[str]] | None:
    """Return the first rule matching ``text`` together with its match."""
    for rule in SEMANTIC_RULES:
        found = rule.match(text)
        if found:
            return rule, found
    return None


def rules_for(intent: Intent) -> list[SemanticRule]:
    return [rule for rule in SEMANTIC_RULES if rule.intent == intent]


@dataclass(frozen=True)
class EntityCapture:
    """A pattern whose groups fill semantic roles.

    ``roles`` names the role filled by each group. The special role
    ``"noun"`` stores the group as ``entity_type`` and makes the following
    name group also fill ``<noun>_name``.
    """

    pattern: re.Pattern[str]
    roles: tuple[str, ...]
    entity_type: str | None = None


ENTITY_CAPTURES: tuple[EntityCapture, ...] = (
    EntityCapture(MY_NAME_IS, ("user_name",)),
    EntityCapture(CALL_ME, ("user_name",)),
    EntityCapture(I_AM, ("user_name",)),
    EntityCapture(MY_NOUN_NAME_IS, ("noun", "entity_name")),
    EntityCapture(MY_NOUN_IS_NAMED, ("noun", "entity_name")),
    EntityCapture(THIRD_PERSON_NAME_IS, ("entity_name",), entity_type="person"),
)


STOP_WORDS = frozenset(
    {
        "the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
        "by", "is", "are", "was", "were", "be", "been", "have", "has", "had",
        "do", "does", "did", "will", "would", "could", "should", "may",
        "might", "can", "this", "that", "there", "these", "those", "just",
    }
)

KEYWORD_ASSOCIATIONS: dict[str, tuple[str, ...]] = {
    "name": ("identity", "person", "individual", "called", "known"),
    "hello": ("greeting", "welcome", "social", "friendly"),
    "help": ("assist", "support", "aid", "guidance"),
    "what": ("question", "information", "inquiry"),
    "how": ("method", "process", "way", "explanation"),
    "why": ("reason", "cause", "explanation", "purpose"),
    "when": ("time", "schedule", "timing"),
    "where": ("location", "place", "position"),
    "who": ("person", "identity", "individual"),
    "good": ("positive", "quality", "approval"),
    "bad": ("negative", "problem", "issue"),
    "like": ("preference", "enjoy", "positive"),
    "love": ("strong_positive", "emotion", "preference"),
    "hate": ("strong_negative", "dislike", "emotion"),
    "want": ("desire", "need", "request"),
    "need": ("requirement", "necessity", "important"),
    "think": ("opinion", "belief", "cognitive"),
    "feel": ("emotion", "sensation", "experience"),
    "work": ("job", "employment", "activity", "function"),
    "play": ("recreation", "fun", "game", "entertainment"),
    "time": ("temporal", "schedule", "duration"),
    "place": ("location", "position", "area"),
    "person": ("individual", "human", "people"),
    "people": ("group", "humans", "social"),
    "family": ("relatives", "relationship", "personal"),
    "friend": ("social", "relationship", "personal"),
    "home": ("residence", "place", "personal"),
    "school": ("education", "learning", "institution"),
    "book": ("reading", "knowledge", "information"),
    "computer": ("technology", "digital", "tool"),
    "phone": ("communication", "technology", "contact"),
    "car": ("transportation", "vehicle", "travel"),
    "food": ("nutrition", "eating", "sustenance"),
    "water": ("drink", "liquid", "essential"),
    "money": ("finance", "currency", "value"),
    "job": ("work", "employment", "career"),
    "dog": ("animal", "pet", "companion"),
    "cat": ("animal", "pet", "companion"),
}
