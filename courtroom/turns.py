"""
Turn generation: what the judge or opposing counsel says next.

Content comes from the case-type template pools in ``templates``; the choice
of pool entry and whether citations are attached go through the injected
random source, so a seeded or scripted ``random.Random`` makes every reply
reproducible.
"""

import logging
import random
from typing import List, Optional, Sequence

from . import clarification, references, templates
from .config import Settings
from .models import Attachment, CaseType, Speaker, Turn, TurnKind

logger = logging.getLogger(__name__)


def _note_for(attachment: Attachment, rules) -> str:
    name = attachment.name.lower()
    media_type = (attachment.media_type or "").lower()
    for substrings, type_prefix, note in rules:
        if any(s in name for s in substrings):
            return note
        if type_prefix and media_type.startswith(type_prefix):
            return note
    return rules[-1][2]


def attachment_analysis(attachments: Sequence[Attachment]) -> str:
    """The judge's one-line note on each attachment."""
    rules = templates.ARBITER_ATTACHMENT_NOTES
    return "\n".join(f"- {a.name}: {_note_for(a, rules)}" for a in attachments)


class TurnGenerator:
    """Builds the generated turns of a session.

    The generator holds no session state of its own; every method reads what it
    needs from the session passed in.
    """

    def __init__(self, settings: Settings, rng: Optional[random.Random] = None):
        self.settings = settings
        self.rng = rng or random.Random()

    # ---- fixed turns ----

    def welcome(self, session) -> Turn:
        role = session.human_role
        content = templates.WELCOME.format(
            title=session.case_title,
            case_type=session.case_type.value.capitalize(),
            role=role.value,
            opponent_title=role.opponent.value.capitalize(),
        )
        return Turn(speaker=Speaker.ARBITER, kind=TurnKind.WELCOME, content=content)

    def final_arguments(self, session) -> Turn:
        role = session.human_role
        content = templates.FINAL_ARGUMENTS.format(
            role_title=role.value.capitalize(),
            opponent_title=role.opponent.value.capitalize(),
        )
        return Turn(speaker=Speaker.ARBITER, kind=TurnKind.FINAL_ARGUMENTS, content=content)

    def deliberation(self) -> Turn:
        return Turn(speaker=Speaker.ARBITER, kind=TurnKind.DELIBERATION, content=templates.DELIBERATION)

    # ---- replies ----

    def should_intervene(self, n: int, human_turn: Turn) -> bool:
        s = self.settings
        return (
            n % s.intervention_every == 0
            or n > s.intervention_after
            or bool(human_turn.attachments)
        )

    def reply(self, session, human_turn: Turn) -> Turn:
        """Reply to the human turn just appended to ``session.turns``."""
        n = len(session.turns)

        question = clarification.check(human_turn, session.turns)
        if question is not None:
            turn = self._arbiter(question, TurnKind.CLARIFICATION, human_turn)
        elif self.should_intervene(n, human_turn):
            turn = self._arbiter(self.intervention_text(session), TurnKind.INTERVENTION, human_turn)
        else:
            turn = self.rebuttal(session)

        logger.debug("Session %s turn %d: %s by %s", session.id, n + 1, turn.kind.value, turn.speaker.value)
        return turn

    def intervention_text(self, session) -> str:
        pool = templates.ARBITER_POOLS.get(session.case_type, templates.ARBITER_POOLS[CaseType.OTHER])
        return self.rng.choice(pool).format(role=session.human_role.value)

    def rebuttal(self, session) -> Turn:
        role = session.human_role.opponent
        pools = templates.OPPOSING_POOLS.get(session.case_type, templates.OPPOSING_POOLS[CaseType.OTHER])
        return Turn(
            speaker=role.speaker,
            kind=TurnKind.REBUTTAL,
            content=self.rng.choice(pools[role]),
            citations=self.citations(session),
        )

    def citations(self, session) -> List:
        if self.rng.random() >= self.settings.citation_probability:
            return []
        transcript = " ".join(t.content for t in session.turns)
        return references.draw_citations(session.case_type, transcript, self.rng)

    def _arbiter(self, content: str, kind: TurnKind, human_turn: Turn) -> Turn:
        if human_turn.attachments:
            content += templates.DOCUMENT_ANALYSIS_HEADER + attachment_analysis(human_turn.attachments)
        return Turn(speaker=Speaker.ARBITER, kind=kind, content=content)
