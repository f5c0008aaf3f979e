"""
Clarification checks run against the latest human turn before any reply is
generated. When one fires, the judge asks its question instead of the normal
reply.
"""

import logging
from typing import Optional, Sequence

from . import lexicon, templates
from .models import Speaker, Turn

logger = logging.getLogger(__name__)


def _opposing_texts(latest: Turn, turns: Sequence[Turn]):
    for turn in turns:
        if turn.id == latest.id or turn.speaker in (latest.speaker, Speaker.ARBITER):
            continue
        yield turn.content


def check(latest: Turn, turns: Sequence[Turn]) -> Optional[str]:
    """Return the judge's clarification question for ``latest``, or None.

    Rules are tried in order and the first one that applies wins:

    1. A precedent cited in ``latest`` was also cited by the opposing party.
    2. A conclusion ("therefore", "thus", ...) with no statutory reference.
    3. A claim of evidence or proof with nothing saying what the evidence is.
    """
    text = latest.content or ""
    role = latest.speaker.value

    shared = lexicon.shared_precedents(text, _opposing_texts(latest, turns))
    if shared:
        precedent = shared[0][0]
        logger.info("Clarification: conflicting precedent %s", precedent)
        return templates.CLARIFY_CONFLICTING_PRECEDENT.format(precedent=precedent, role=role)

    counts = lexicon.match(text, (
        lexicon.CONCLUSION_MARKERS,
        lexicon.STATUTORY_MARKERS,
        lexicon.EVIDENCE_CLAIMS,
        lexicon.EVIDENCE_QUALIFIERS,
    ))

    if counts[lexicon.CONCLUSION_MARKERS] and not counts[lexicon.STATUTORY_MARKERS]:
        logger.info("Clarification: conclusion without legal basis")
        return templates.CLARIFY_LEGAL_BASIS.format(role=role)

    if counts[lexicon.EVIDENCE_CLAIMS] and not counts[lexicon.EVIDENCE_QUALIFIERS]:
        logger.info("Clarification: unspecified evidence")
        return templates.CLARIFY_EVIDENCE.format(role=role)

    return None
