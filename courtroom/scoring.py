"""
Argument strength scoring.

A side's strength is a base value plus weighted contributions from each of
its turns. Every weight lives in the tables below; ``score`` only walks them.
There is no randomness here: the same turns always give the same score.
"""

import logging
from types import MappingProxyType
from typing import Iterable, Set

from . import lexicon
from .models import Attachment, Turn

logger = logging.getLogger(__name__)

BASE_STRENGTH = 1.0
CITATION_WEIGHT = 2.5

# Per occurrence of any term in the lexicon category.
CATEGORY_WEIGHTS = MappingProxyType({
    lexicon.DIRECT_EVIDENCE: 2.5,
    lexicon.CIRCUMSTANTIAL_EVIDENCE: 0.8,
    lexicon.GENERAL_EVIDENCE: 1.2,
    lexicon.LEGAL_TERMS: 1.5,
    lexicon.RECENT_PRECEDENTS: 5.0,
    lexicon.CLASSIC_PRECEDENTS: 4.0,
})

# (offence keyword, IPC section, weight). Only these pairs are checked.
STATUTE_PAIRINGS = (
    ("murder", "302", 5.0),
    ("culpable homicide", "304", 4.0),
    ("rape", "376", 5.0),
    ("theft", "378", 3.0),
    ("murder", "420", -5.0),
    ("rape", "302", -3.0),
)

# Both phrases must appear in the same turn.
BURDEN_OF_PROOF_BONUSES = (
    ("beyond reasonable doubt", "criminal", 3.0),
    ("preponderance", "civil", 3.0),
)

# Attachment rules, first match wins: (name substrings, media type prefix, weight).
ATTACHMENT_WEIGHTS = (
    (("forensic", "expert", "report"), None, 5.0),
    (("photo", "video"), "image/", 4.0),
)
DEFAULT_ATTACHMENT_WEIGHT = 3.0


def ipc_sections(turn: Turn) -> Set[str]:
    """IPC section numbers referenced by a turn's text or attached citations."""
    sections = {ref.section for ref in lexicon.extract_sections(turn.content) if ref.body == "IPC"}
    for citation in turn.citations:
        if citation.law == "Indian Penal Code":
            sections.update(ref.section for ref in lexicon.extract_sections(citation.section))
    return sections


def attachment_weight(attachment: Attachment) -> float:
    name = attachment.name.lower()
    media_type = (attachment.media_type or "").lower()
    for substrings, type_prefix, weight in ATTACHMENT_WEIGHTS:
        if any(s in name for s in substrings):
            return weight
        if type_prefix and media_type.startswith(type_prefix):
            return weight
    return DEFAULT_ATTACHMENT_WEIGHT


def score_turn(turn: Turn) -> float:
    """Contribution of a single turn, excluding the base strength."""
    text = turn.content
    total = len(turn.citations) * CITATION_WEIGHT

    counts = lexicon.match(text, CATEGORY_WEIGHTS.keys())
    for category, weight in CATEGORY_WEIGHTS.items():
        total += counts[category] * weight

    sections = ipc_sections(turn)
    if sections:
        for offence, section, weight in STATUTE_PAIRINGS:
            if section in sections and lexicon.contains(text, offence):
                total += weight

    for first, second, weight in BURDEN_OF_PROOF_BONUSES:
        if lexicon.contains(text, first) and lexicon.contains(text, second):
            total += weight

    for attachment in turn.attachments:
        total += attachment_weight(attachment)

    return total


def score(turns: Iterable[Turn]) -> float:
    """Strength of one side's turns, starting from BASE_STRENGTH.

    Penalties can pull the result below the base value; callers clamp the
    derived probability rather than the score.
    """
    strength = BASE_STRENGTH
    n = 0
    for turn in turns:
        strength += score_turn(turn)
        n += 1
    logger.debug("Scored %d turns: %.2f", n, strength)
    return strength
