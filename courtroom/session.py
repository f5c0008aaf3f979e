"""
Courtroom session state machine.

A session moves opening -> exchange -> final_arguments -> deliberating ->
delivered. Each accepted human turn is appended, answered, and then the
progression thresholds are checked against the total turn count. Rejected
operations raise before anything is changed.
"""

import logging
import random
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from . import scoring, verdict
from .config import Settings, get_settings
from .errors import InvalidTransition, InvalidTurn
from .models import (
    Attachment,
    CaseType,
    Judgment,
    Role,
    SessionSnapshot,
    SessionState,
    Speaker,
    Turn,
    TurnKind,
    new_id,
)
from .turns import TurnGenerator

logger = logging.getLogger(__name__)

ACTIVE_STATES = (SessionState.OPENING, SessionState.EXCHANGE, SessionState.FINAL_ARGUMENTS)


class CourtroomSession:
    """One simulated hearing of one case."""

    def __init__(
        self,
        case_title: str,
        case_type,
        human_role: Role = Role.PROSECUTION,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
        session_id: Optional[str] = None,
    ):
        self.id = session_id or new_id("case")
        self.case_title = (case_title or "").strip() or "New Legal Case"
        self.case_type = CaseType.parse(case_type)
        self.human_role = Role(human_role)
        self.settings = settings or get_settings()
        self.rng = rng or random.Random()
        self.generator = TurnGenerator(self.settings, self.rng)
        self.verdict_engine = verdict.VerdictEngine(self.rng)

        self.state = SessionState.OPENING
        self.turns: List[Turn] = []
        self.strength: Dict[str, float] = {
            Role.PROSECUTION.value: scoring.BASE_STRENGTH,
            Role.DEFENSE.value: scoring.BASE_STRENGTH,
        }
        self.judgment: Optional[Judgment] = None
        self.created_at = datetime.utcnow()
        self._final_arguments_requested = False

    @classmethod
    def open(cls, case_title: str, case_type, human_role: Role = Role.PROSECUTION, **kwargs) -> "CourtroomSession":
        """Create a session with the judge's welcome as its first turn."""
        session = cls(case_title, case_type, human_role, **kwargs)
        session._append(session.generator.welcome(session))
        logger.info(
            "Opened session %s (%s, human=%s)",
            session.id, session.case_type.value, session.human_role.value,
        )
        return session

    # ---- queries ----

    @property
    def is_terminal(self) -> bool:
        return self.state == SessionState.DELIVERED

    @property
    def turn_count(self) -> int:
        return len(self.turns)

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            id=self.id,
            case_title=self.case_title,
            case_type=self.case_type,
            human_role=self.human_role,
            state=self.state,
            turns=list(self.turns),
            strength=dict(self.strength),
            judgment=self.judgment,
            created_at=self.created_at,
        )

    # ---- commands ----

    def switch_role(self) -> Role:
        if self.state != SessionState.EXCHANGE:
            raise InvalidTransition(f"Cannot switch role while session is {self.state.value}")
        self.human_role = self.human_role.opponent
        logger.info("Session %s: human now argues for the %s", self.id, self.human_role.value)
        return self.human_role

    def check_turn(self, text: str, attachments: Sequence[Attachment] = ()) -> None:
        """Raise if a human turn would be rejected; changes nothing."""
        if self.state not in ACTIVE_STATES:
            raise InvalidTransition(f"Session is {self.state.value}; no further turns accepted")
        if not (text or "").strip() and not attachments:
            raise InvalidTurn("A turn needs text or at least one attachment")

    def submit(self, text: str, attachments: Sequence[Attachment] = (), deliver: bool = True) -> List[Turn]:
        """Process one human turn.

        Returns every turn appended by this call, the human turn first. When the
        turn ends the hearing and ``deliver`` is False, the session is left in
        ``deliberating`` and the caller delivers the judgment later.

        Raises:
            InvalidTransition: the session is no longer taking arguments.
            InvalidTurn: no text and no attachments.
        """
        attachments = list(attachments or ())
        self.check_turn(text, attachments)

        if self.state == SessionState.OPENING:
            self._transition(SessionState.EXCHANGE)

        start = len(self.turns)
        human_turn = self._append(Turn(
            speaker=self.human_role.speaker,
            kind=TurnKind.ARGUMENT,
            content=text or "",
            attachments=attachments,
        ))
        n = len(self.turns)

        self._append(self.generator.reply(self, human_turn))
        self._update_strength()

        if self.state == SessionState.EXCHANGE and n > self.settings.final_arguments_after \
                and not self._final_arguments_requested:
            self._final_arguments_requested = True
            self._transition(SessionState.FINAL_ARGUMENTS)
            self._append(self.generator.final_arguments(self))
        elif self.state == SessionState.FINAL_ARGUMENTS and n > self.settings.deliberation_after:
            self._transition(SessionState.DELIBERATING)
            self._append(self.generator.deliberation())
            if deliver:
                self.deliver_judgment()

        return self.turns[start:]

    def deliver_judgment(self) -> Judgment:
        """Run the verdict engine once and append the judgment turn."""
        if self.state != SessionState.DELIBERATING:
            raise InvalidTransition(f"Cannot deliver judgment while session is {self.state.value}")

        judgment = self.verdict_engine.decide(self)
        self._append(Turn(speaker=Speaker.ARBITER, kind=TurnKind.JUDGMENT, content=verdict.render(judgment)))
        self.judgment = judgment
        self._transition(SessionState.DELIVERED)
        logger.info("Session %s judgment delivered: %s", self.id, judgment.verdict)
        return judgment

    # ---- internals ----

    def _append(self, turn: Turn) -> Turn:
        self.turns.append(turn)
        return turn

    def _transition(self, state: SessionState) -> None:
        logger.info("Session %s: %s -> %s", self.id, self.state.value, state.value)
        self.state = state

    def _update_strength(self) -> None:
        for role in Role:
            own = [t for t in self.turns if t.speaker == role.speaker]
            self.strength[role.value] = max(self.strength[role.value], scoring.score(own))
