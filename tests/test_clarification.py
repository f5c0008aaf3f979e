"""
Tests for the judge's clarification questions
"""

from courtroom import clarification, templates
from courtroom.models import Speaker, Turn


def human(text, speaker=Speaker.PROSECUTION):
    return Turn(speaker=speaker, content=text)


def test_conclusion_without_legal_basis():
    latest = human("Therefore my client should be acquitted")
    question = clarification.check(latest, [latest])
    assert question == templates.CLARIFY_LEGAL_BASIS.format(role="prosecution")


def test_conclusion_with_statute_passes():
    latest = human("Thus Section 302 IPC applies to the accused")
    assert clarification.check(latest, [latest]) is None


def test_unqualified_evidence():
    latest = human("We have evidence against him", speaker=Speaker.DEFENSE)
    question = clarification.check(latest, [latest])
    assert question == templates.CLARIFY_EVIDENCE.format(role="defense")


def test_qualified_evidence_passes():
    latest = human("The witness evidence is clear")
    assert clarification.check(latest, [latest]) is None


def test_conflicting_precedent():
    opposing = Turn(speaker=Speaker.DEFENSE,
                    content="As held in Kesavananda Bharati v. State of Kerala, the basic structure stands.")
    latest = human("Kesavananda Bharati vs State of Kerala supports our petition under Article 368.")
    question = clarification.check(latest, [opposing, latest])
    assert question is not None
    assert "Kesavananda Bharati v. State of Kerala" in question
    assert question.startswith("The Court notes that both sides have cited")


def test_conflicting_precedent_wins_over_other_rules():
    opposing = Turn(speaker=Speaker.DEFENSE, content="Kesavananda Bharati v. State of Kerala is binding.")
    latest = human("Therefore Kesavananda Bharati v. State of Kerala governs, and the evidence agrees.")
    question = clarification.check(latest, [opposing, latest])
    assert "both sides have cited" in question


def test_conflicting_precedent_written_in_lowercase():
    opposing = Turn(speaker=Speaker.DEFENSE, content="Kesavananda Bharati v. State of Kerala is binding.")
    latest = human("as held in kesavananda bharati v. state of kerala the amendment is valid")
    question = clarification.check(latest, [opposing, latest])
    assert question == templates.CLARIFY_CONFLICTING_PRECEDENT.format(
        precedent="bharati v. state of kerala", role="prosecution")


def test_precedent_from_judge_or_own_side_is_ignored():
    judge = Turn(speaker=Speaker.ARBITER, content="Consider Kesavananda Bharati v. State of Kerala.")
    earlier = human("Kesavananda Bharati v. State of Kerala is relevant under Article 368.")
    latest = human("Kesavananda Bharati v. State of Kerala supports the petition under Article 368.")
    assert clarification.check(latest, [judge, earlier, latest]) is None


def test_plain_argument_has_no_question():
    latest = human("The accused was seen near the scene at midnight.")
    assert clarification.check(latest, [latest]) is None
