"""Intent model backed by the semantic decision list."""

from __future__ import annotations

from intentlayer.classifiers.base import IntentModel
from intentlayer.models.classification import DetailedClassificationResult
from intentlayer.semantic.patterns import FALLBACK_CONFIDENCE, FALLBACK_INTENT, match_rule


class RuleBasedIntentModel(IntentModel):
    name = "rule-based-intent-classifier"
    description = "Rule-based intent classifier using an ordered decision list of patterns"

    async def _load(self) -> None:
        # Rules are compiled at import time.
        return None

    async def _predict(self, text: str) -> DetailedClassificationResult:
        found = match_rule(text)
        if found is None:
            return DetailedClassificationResult(
                intent=FALLBACK_INTENT,
                confidence=FALLBACK_CONFIDENCE,
                model_output=None,
                reasoning=["No rule matched; using fallback intent"],
            )

        rule, match = found
        return DetailedClassificationResult(
            intent=rule.intent,
            confidence=rule.confidence,
            model_output={"rule": rule.name, "groups": list(match.groups())},
            reasoning=[
                f"Rule '{rule.name}' matched {match.group(0)!r}",
                f"Mapped to {rule.intent.value}",
            ],
        )
