"""
Tests for the session state machine
===================================

Progression through the hearing, rejected operations and strength tracking.
"""

import pytest

from courtroom import templates
from courtroom.errors import InvalidTransition, InvalidTurn
from courtroom.models import Attachment, Role, SessionState, Speaker, Turn, TurnKind

ARGUMENTS = [
    "The witness statement recorded under Section 161 CrPC places the accused at the scene.",
    "The forensic report links the weapon to the accused under Section 45 IEA.",
    "Section 302 IPC applies because the murder was premeditated.",
    "The CCTV recording shows the accused leaving the building at midnight.",
]


def argue(session, i):
    return session.submit(ARGUMENTS[i % len(ARGUMENTS)])


class TestOpening:
    def test_welcome_is_first_turn(self, make_session):
        session = make_session()
        assert session.state == SessionState.OPENING
        assert session.turn_count == 1
        welcome = session.turns[0]
        assert welcome.speaker == Speaker.ARBITER
        assert welcome.kind == TurnKind.WELCOME
        assert "State of Maharashtra vs Rajesh Kumar" in welcome.content
        assert "Criminal" in welcome.content

    def test_first_turn_starts_exchange(self, make_session):
        session = make_session()
        turns = argue(session, 0)
        assert session.state == SessionState.EXCHANGE
        assert [t.speaker for t in turns] == [Speaker.PROSECUTION, Speaker.DEFENSE]
        assert session.turn_count == 3


class TestFullHearing:
    def test_reaches_judgment(self, make_session):
        session = make_session()
        submissions = 0
        while not session.is_terminal:
            before = session.turn_count
            argue(session, submissions)
            submissions += 1
            assert session.turn_count > before
            assert (session.judgment is not None) == (session.state == SessionState.DELIVERED)
            assert submissions < 20

        assert submissions == 13
        assert session.turn_count == 30
        assert session.judgment.verdict in ("Guilty", "Not Guilty")
        assert session.judgment.reasoning
        assert session.turns[-1].kind == TurnKind.JUDGMENT
        assert session.turns[-2].kind == TurnKind.DELIBERATION

    def test_final_arguments_requested_once(self, make_session):
        session = make_session()
        for i in range(11):
            argue(session, i)
        assert session.state == SessionState.FINAL_ARGUMENTS
        assert session.turns[-1].kind == TurnKind.FINAL_ARGUMENTS
        assert session.turns[-1].content.startswith("We have heard substantial arguments")

        argue(session, 11)
        kinds = [t.kind for t in session.turns]
        assert kinds.count(TurnKind.FINAL_ARGUMENTS) == 1

    def test_judges_answer_late_turns(self, make_session):
        session = make_session()
        for i in range(9):
            argue(session, i)
        # the twentieth turn is past the intervention threshold
        reply = argue(session, 9)[1]
        assert reply.speaker == Speaker.ARBITER

    def test_no_turns_after_delivery(self, make_session):
        session = make_session()
        i = 0
        while not session.is_terminal:
            argue(session, i)
            i += 1
        count = session.turn_count
        with pytest.raises(InvalidTransition):
            session.submit("One more thing, Your Honour.")
        assert session.turn_count == count
        assert session.state == SessionState.DELIVERED

    def test_deferred_delivery(self, make_session):
        session = make_session(final_arguments_after=2, deliberation_after=4)
        argue(session, 0)
        argue(session, 1)
        assert session.state == SessionState.FINAL_ARGUMENTS

        turns = session.submit(ARGUMENTS[2], deliver=False)
        assert session.state == SessionState.DELIBERATING
        assert session.judgment is None
        assert turns[-1].kind == TurnKind.DELIBERATION
        assert turns[-1].content == templates.DELIBERATION

        with pytest.raises(InvalidTransition):
            session.submit("Anything further?")

        judgment = session.deliver_judgment()
        assert session.state == SessionState.DELIVERED
        assert session.judgment is judgment
        assert session.turn_count == 10

    def test_deliver_only_while_deliberating(self, make_session):
        with pytest.raises(InvalidTransition):
            make_session().deliver_judgment()


class TestRejectedTurns:
    def test_blank_turn(self, make_session):
        session = make_session()
        with pytest.raises(InvalidTurn):
            session.submit("   ")
        assert session.turn_count == 1
        assert session.state == SessionState.OPENING

    def test_attachment_only_turn_is_accepted(self, make_session):
        session = make_session()
        turns = session.submit("", [Attachment(name="exhibit_a.pdf", media_type="application/pdf")])
        assert turns[0].attachments[0].name == "exhibit_a.pdf"
        assert turns[1].speaker == Speaker.ARBITER


class TestRoleSwitch:
    def test_not_before_first_argument(self, make_session):
        session = make_session()
        with pytest.raises(InvalidTransition):
            session.switch_role()
        assert session.human_role == Role.PROSECUTION

    def test_switch_during_exchange(self, make_session):
        session = make_session()
        argue(session, 0)
        assert session.switch_role() == Role.DEFENSE
        turns = argue(session, 1)
        assert turns[0].speaker == Speaker.DEFENSE
        assert turns[1].speaker == Speaker.PROSECUTION

    def test_not_in_final_arguments(self, make_session):
        session = make_session(final_arguments_after=2)
        argue(session, 0)
        argue(session, 1)
        with pytest.raises(InvalidTransition):
            session.switch_role()


class TestConflictingPrecedent:
    def test_judge_asks_about_shared_precedent(self, make_session):
        session = make_session(role=Role.DEFENSE, case_type="constitutional")
        session.turns.append(Turn(
            speaker=Speaker.PROSECUTION,
            content="As held in Kesavananda Bharati v. State of Kerala, the basic structure stands.",
        ))
        reply = session.submit("Kesavananda Bharati vs State of Kerala supports our petition under Article 368.")[1]
        assert reply.kind == TurnKind.CLARIFICATION
        assert "Kesavananda Bharati v. State of Kerala" in reply.content
        assert "defense" in reply.content


class TestStrength:
    def test_never_decreases(self, make_session):
        session = make_session()
        previous = dict(session.strength)
        texts = ARGUMENTS + ["This murder falls under Section 420 IPC."] * 3
        for text in texts:
            session.submit(text)
            for role, value in session.strength.items():
                assert value >= previous[role]
            previous = dict(session.strength)
