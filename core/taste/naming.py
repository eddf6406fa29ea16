# =============================================================================
# core/taste/naming.py - Style Naming
# =============================================================================
# Names the aesthetic detected from a (tone, energy) bucket pair.
#
# Rules are an ordered table evaluated first-match-wins. Exact pairs come
# before single-axis rules, so e.g. (balanced, bold) lands on
# "Bold Statement" while (playful, bold) lands on "Vibrant Bold".
#
# Usage:
#   from core.taste.naming import name_style
#   name_style("serious", "minimal")  # "Elegant Refined"
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from core.constants import BALANCED, EnergyBucket, ToneBucket

DEFAULT_STYLE_NAME = "Your Brand Style"

# Takes (tone_bucket, energy_bucket), returns whether the rule applies
RulePredicate = Callable[[str | None, str | None], bool]


@dataclass(frozen=True)
class StyleRule:
    """One row of the naming table."""
    name: str
    predicate: RulePredicate
    label: str

    def matches(self, tone: str | None, energy: str | None) -> bool:
        return self.predicate(tone, energy)


def _pair(tone_bucket: str, energy_bucket: str) -> RulePredicate:
    return lambda tone, energy: tone == tone_bucket and energy == energy_bucket


def _tone_is(tone_bucket: str) -> RulePredicate:
    return lambda tone, energy: tone == tone_bucket


def _energy_is(energy_bucket: str) -> RulePredicate:
    return lambda tone, energy: energy == energy_bucket


PLAYFUL = ToneBucket.PLAYFUL.value
SERIOUS = ToneBucket.SERIOUS.value
BOLD = EnergyBucket.BOLD.value
MINIMAL = EnergyBucket.MINIMAL.value

# Order is the tie-break. Do not reorder.
STYLE_RULES: tuple[StyleRule, ...] = (
    StyleRule("playful_bold", _pair(PLAYFUL, BOLD), "Vibrant Bold"),
    StyleRule("playful_minimal", _pair(PLAYFUL, MINIMAL), "Playful Minimal"),
    StyleRule("serious_bold", _pair(SERIOUS, BOLD), "Professional Impact"),
    StyleRule("serious_minimal", _pair(SERIOUS, MINIMAL), "Elegant Refined"),
    StyleRule("balanced_balanced", _pair(BALANCED, BALANCED), "Versatile Classic"),
    StyleRule("tone_playful", _tone_is(PLAYFUL), "Spirited Modern"),
    StyleRule("tone_serious", _tone_is(SERIOUS), "Corporate Clean"),
    StyleRule("energy_bold", _energy_is(BOLD), "Bold Statement"),
    StyleRule("energy_minimal", _energy_is(MINIMAL), "Clean Minimal"),
)


def _value(bucket) -> str | None:
    # Accept enum members as well as plain strings
    return getattr(bucket, "value", bucket)


def matching_rule(tone_bucket, energy_bucket) -> StyleRule | None:
    """Return the first rule that applies, or None for the default."""
    tone, energy = _value(tone_bucket), _value(energy_bucket)
    for rule in STYLE_RULES:
        if rule.matches(tone, energy):
            return rule
    return None


def name_style(tone_bucket, energy_bucket) -> str:
    """
    Human-readable aesthetic label for a bucket pair.

    Unknown or missing buckets fall through to "Your Brand Style".
    """
    rule = matching_rule(tone_bucket, energy_bucket)
    return rule.label if rule else DEFAULT_STYLE_NAME
