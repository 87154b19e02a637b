"""Response templates keyed by intent."""

from __future__ import annotations

from pydantic import BaseModel

from intentlayer.models.intent import Intent


class ResponseTemplate(BaseModel):
    """A reply with an optional variant used when a slot value is known.

    ``text`` may reference ``{bot}``. ``with_value`` is preferred when the
    ``slot`` it depends on (``name`` or ``topic``) has a value, and may
    reference that slot as a format field.
    """

    text: str
    with_value: str | None = None
    slot: str | None = None


RESPONSE_TEMPLATES: dict[Intent, ResponseTemplate] = {
    Intent.GREETING: ResponseTemplate(
        text="Hello! I'm {bot}. How can I help you today?",
    ),
    Intent.IDENTITY_INTRODUCTION: ResponseTemplate(
        text="Nice to meet you! I'm {bot}.",
        with_value="Nice to meet you, {name}! I'm {bot}. How can I assist you today?",
        slot="name",
    ),
    Intent.IDENTITY_QUERY: ResponseTemplate(
        text="I don't recall you mentioning your name. What is your name?",
        with_value="Based on our conversation, your name is {name}.",
        slot="name",
    ),
    Intent.BOT_IDENTITY_QUERY: ResponseTemplate(
        text="I'm {bot}, an assistant that listens for what you mean as well as what you say.",
    ),
    Intent.HELP_REQUEST: ResponseTemplate(
        text=(
            "I'm here to help! I can keep track of people, pets, and things you "
            "tell me about. What would you like to discuss?"
        ),
    ),
    Intent.GRATITUDE: ResponseTemplate(
        text="You're welcome! I'm glad I could help.",
    ),
    Intent.POSITIVE_FEEDBACK: ResponseTemplate(
        text="That's wonderful! Is there anything else I can help you with?",
    ),
    Intent.INFORMATION_REQUEST: ResponseTemplate(
        text="That's a great question! Let me think about what you're asking.",
        with_value='What specifically would you like to know about "{topic}"?',
        slot="topic",
    ),
    Intent.QUESTION: ResponseTemplate(
        text="That's a great question! Let me think about what you're asking.",
        with_value='What specifically would you like to know about "{topic}"?',
        slot="topic",
    ),
    Intent.KNOWLEDGE_REQUEST: ResponseTemplate(
        text="I learn from the relationships in our conversation. What would you like me to understand?",
    ),
    Intent.GENERAL_CONVERSATION: ResponseTemplate(
        text="I'm listening. What would you like to talk about?",
        with_value='I notice you mentioned "{topic}". Tell me more about it!',
        slot="topic",
    ),
}
