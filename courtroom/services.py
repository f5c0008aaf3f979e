import asyncio
import logging
import random
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine, select

from . import models
from .config import Settings, get_settings
from .errors import SessionNotFound
from .models import Attachment, Role, SessionState, Turn
from .session import CourtroomSession

logger = logging.getLogger(__name__)


# -------------------------------
# Utility: archive database engine
# -------------------------------
def make_engine(db_url: str):
    if db_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if db_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(db_url, echo=False, **kwargs)
    return create_engine(db_url, echo=False)


# -------------------------------
# Session registry
# -------------------------------
class SessionService:
    """Holds the live sessions of this process.

    Turns of one session are processed one at a time under that session's lock;
    different sessions share nothing but the read-only tables.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        rng_factory: Optional[Callable[[], random.Random]] = None,
        engine=None,
    ):
        self.settings = settings or get_settings()
        self.rng_factory = rng_factory or random.Random
        self.engine = engine or make_engine(self.settings.db_url)
        self._sessions: Dict[str, CourtroomSession] = {}
        self._locks: Dict[str, asyncio.Lock] = {}
        SQLModel.metadata.create_all(self.engine)

    def _get(self, session_id: str) -> CourtroomSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFound(f"Session {session_id} not found")
        return session

    def _lock(self, session_id: str) -> asyncio.Lock:
        lock = self._locks.get(session_id)
        if lock is None:
            lock = self._locks[session_id] = asyncio.Lock()
        return lock

    # ---- operations ----

    def open_session(self, case_title: str, case_type, human_role: Role) -> Tuple[CourtroomSession, Turn]:
        session = CourtroomSession.open(
            case_title, case_type, human_role,
            settings=self.settings, rng=self.rng_factory(),
        )
        self._sessions[session.id] = session
        self._archive_case(session)
        self._archive_turns(session, 0)
        return session, session.turns[0]

    def check_turn(self, session_id: str, text: str, attachments: Sequence = ()) -> None:
        """Raise if the session would reject this turn; changes nothing."""
        self._get(session_id).check_turn(text, attachments)

    async def submit_turn(self, session_id: str, text: str, attachments: Sequence[Attachment] = ()) -> List[Turn]:
        session = self._get(session_id)
        async with self._lock(session_id):
            session.check_turn(text, attachments)
            start = session.turn_count

            await asyncio.sleep(self.settings.response_delay_seconds)
            produced = session.submit(text, attachments, deliver=False)

            if session.state == SessionState.DELIBERATING:
                await asyncio.sleep(self.settings.judgment_delay_seconds)
                session.deliver_judgment()
                produced = session.turns[start:]

            await asyncio.to_thread(self._archive_turns, session, start)
            if session.judgment is not None:
                await asyncio.to_thread(self._archive_judgment, session)
            return produced

    async def switch_role(self, session_id: str) -> Role:
        session = self._get(session_id)
        async with self._lock(session_id):
            return session.switch_role()

    def get_session(self, session_id: str) -> models.SessionSnapshot:
        return self._get(session_id).snapshot()

    def list_sessions(self) -> List[models.SessionSummary]:
        return [
            models.SessionSummary(
                id=s.id,
                case_title=s.case_title,
                case_type=s.case_type,
                human_role=s.human_role,
                state=s.state,
                turn_count=s.turn_count,
            )
            for s in self._sessions.values()
        ]

    def discard(self, session_id: str) -> None:
        self._get(session_id)
        self._sessions.pop(session_id, None)
        self._locks.pop(session_id, None)

    # ---- transcript archive ----

    def _archive_case(self, session: CourtroomSession) -> None:
        with Session(self.engine) as sess:
            sess.add(models.CaseRecord(
                session_id=session.id,
                title=session.case_title,
                case_type=session.case_type.value,
                human_role=session.human_role.value,
            ))
            sess.commit()

    def _archive_turns(self, session: CourtroomSession, start: int) -> None:
        with Session(self.engine) as sess:
            for position, turn in enumerate(session.turns[start:], start=start):
                sess.add(models.TranscriptEntry(
                    session_id=session.id,
                    position=position,
                    speaker=turn.speaker.value,
                    kind=turn.kind.value,
                    content=turn.content,
                    created_at=turn.created_at,
                ))
            sess.commit()

    def _archive_judgment(self, session: CourtroomSession) -> None:
        judgment = session.judgment
        with Session(self.engine) as sess:
            sess.add(models.JudgmentRecord(
                session_id=session.id,
                verdict=judgment.verdict,
                prosecution_probability=judgment.prosecution_probability,
                reasoning=judgment.reasoning,
                sentencing=judgment.sentencing,
            ))
            sess.commit()

    def transcript(self, session_id: str) -> dict:
        with Session(self.engine) as sess:
            case = sess.exec(
                select(models.CaseRecord).where(models.CaseRecord.session_id == session_id)
            ).first()
            if not case:
                raise SessionNotFound(f"Session {session_id} not found")

            entries = sess.exec(
                select(models.TranscriptEntry)
                .where(models.TranscriptEntry.session_id == session_id)
                .order_by(models.TranscriptEntry.position)
            ).all()

            judge = sess.exec(
                select(models.JudgmentRecord).where(models.JudgmentRecord.session_id == session_id)
            ).first()

            return {"case": case, "transcript": entries, "judge": judge}
