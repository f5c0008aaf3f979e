"""
Tests for the verdict engine
"""

import random

import pytest

from courtroom import references, templates, verdict
from courtroom.models import Speaker, Turn
from courtroom.session import CourtroomSession
from courtroom.verdict import VerdictEngine

from conftest import ScriptedRandom


def hearing(settings, case_type="criminal", prosecution=(), defense=(), title="State v. Kumar"):
    session = CourtroomSession(title, case_type, settings=settings)
    for text in prosecution:
        session.turns.append(Turn(speaker=Speaker.PROSECUTION, content=text))
    for text in defense:
        session.turns.append(Turn(speaker=Speaker.DEFENSE, content=text))
    return session


BRUTAL_MURDER = "The accused committed a premeditated and brutal murder. He has a prior conviction for assault."
NOTHING_TO_ADD = "The defense has nothing further to add at this stage."


class TestProbability:
    def test_share_of_total(self):
        assert verdict.probability(3.0, 1.0) == pytest.approx(0.75)

    def test_zero_total_is_even(self):
        assert verdict.probability(0.0, 0.0) == 0.5

    @pytest.mark.parametrize("sp,sd", [(10.0, 0.0), (-2.0, 1.0), (1.0, -3.0), (-1.0, -1.0), (0.0, 4.0)])
    def test_always_within_bounds(self, sp, sd):
        assert 0.0 <= verdict.probability(sp, sd) <= 1.0

    def test_negative_strength_counts_as_zero(self):
        assert verdict.probability(-2.0, 1.0) == 0.0
        assert verdict.probability(1.0, -3.0) == 1.0
        assert verdict.probability(-6.0, -1.0) == 0.5


class TestFactors:
    def test_aggravating(self):
        assert verdict.aggravating_factors(BRUTAL_MURDER) == [
            "premeditation", "brutality of the crime", "prior criminal record",
        ]

    def test_aggravating_default(self):
        assert verdict.aggravating_factors("The accused was present.") == [verdict.DEFAULT_AGGRAVATING]

    def test_mitigating(self):
        assert verdict.mitigating_factors("He showed remorse and has a clean record.") == [
            "no prior criminal record", "genuine remorse",
        ]

    def test_procedural_violations(self):
        text = ("The confession was made to the police and is barred by Section 25. "
                "The evidence was tampered with and the chain of custody broke.")
        assert verdict.procedural_violations(text) == [
            "Potential inadmissibility of confession under Section 25 of the Indian Evidence Act",
            "Concerns regarding chain of custody of physical evidence",
        ]

    def test_violation_needs_every_group(self):
        assert verdict.procedural_violations("The confession was recorded by a magistrate.") == []


class TestSentencing:
    def test_death_for_premeditated_murder_without_mitigation(self):
        agg = ["premeditation", "brutality of the crime", "prior criminal record"]
        assert "sentenced to death" in verdict.sentence("murder", agg, [])

    def test_life_when_mitigated(self):
        agg = ["premeditation", "brutality of the crime", "prior criminal record"]
        text = verdict.sentence("murder", agg, ["genuine remorse"])
        assert text.startswith("The accused is sentenced to imprisonment for life")
        assert "genuine remorse" in text

    def test_life_without_premeditation(self):
        assert verdict.sentence("murder", ["brutality of the crime"], []) == templates.SENTENCE_LIFE

    @pytest.mark.parametrize("offence,expected", [
        ("culpable homicide", templates.SENTENCE_CULPABLE_HOMICIDE),
        ("rape", templates.SENTENCE_RAPE),
        (None, templates.SENTENCE_DEFAULT),
    ])
    def test_other_offences(self, offence, expected):
        assert verdict.sentence(offence, [verdict.DEFAULT_AGGRAVATING], []) == expected

    def test_alternatives_for_serious_offence(self):
        ids = [o.id for o in verdict.alternative_sentencing("murder", [])]
        assert ids == ["probation", "rehabilitation", "house-arrest"]

    def test_alternatives_ranked_by_mitigation(self):
        options = verdict.alternative_sentencing(None, ["mental health issues"])
        assert options[0].id in ("rehabilitation", "house-arrest")
        assert len(options) == len(verdict.SENTENCING_OPTIONS)


class TestCriminalJudgment:
    def test_guilty_with_death_sentence(self, settings):
        session = hearing(settings, prosecution=[BRUTAL_MURDER], defense=[NOTHING_TO_ADD])
        judgment = VerdictEngine(ScriptedRandom([0.0])).decide(session)

        assert judgment.verdict == "Guilty"
        assert "sentenced to death" in judgment.sentencing
        assert judgment.aggravating_factors == ["premeditation", "brutality of the crime", "prior criminal record"]
        assert judgment.mitigating_factors == []
        assert judgment.post_verdict_considerations == templates.POST_VERDICT_CONVICTION
        assert [o.id for o in judgment.alternative_sentencing] == ["probation", "rehabilitation", "house-arrest"]
        assert judgment.applicable_laws == [references.IPC_302, references.IPC_304, references.IPC_307]
        assert "State v. Kumar" in judgment.reasoning

    def test_not_guilty(self, settings):
        session = hearing(settings, prosecution=[BRUTAL_MURDER], defense=[NOTHING_TO_ADD])
        judgment = VerdictEngine(ScriptedRandom([0.999999])).decide(session)

        assert judgment.verdict == "Not Guilty"
        assert judgment.sentencing is None
        assert judgment.aggravating_factors == []
        assert judgment.post_verdict_considerations == templates.POST_VERDICT_ACQUITTAL

    def test_overwhelming_prosecution_always_convicts(self, settings, monkeypatch):
        session = hearing(settings, prosecution=[BRUTAL_MURDER])
        for seed in range(50):
            engine = VerdictEngine(random.Random(seed))
            monkeypatch.setattr(engine, "strengths", lambda turns: (10.0, 0.0))
            judgment = engine.decide(session)
            assert judgment.prosecution_probability == 1.0
            assert judgment.verdict == "Guilty"

    def test_penalised_prosecution_is_not_certain(self, settings):
        wrong_statute = "This murder falls under Section 420 IPC."
        session = hearing(settings, prosecution=[wrong_statute, wrong_statute])
        engine = VerdictEngine(random.Random(0))
        assert engine.strengths(session.turns) == (1.0, 1.0)

        verdicts = set()
        for seed in range(30):
            judgment = VerdictEngine(random.Random(seed)).decide(session)
            assert judgment.prosecution_probability == 0.5
            verdicts.add(judgment.verdict)
        assert verdicts == {"Guilty", "Not Guilty"}

    def test_judgment_is_reproducible_for_a_seed(self, settings):
        session = hearing(settings, prosecution=[BRUTAL_MURDER], defense=[NOTHING_TO_ADD])
        first = VerdictEngine(random.Random(11)).decide(session)
        second = VerdictEngine(random.Random(11)).decide(session)
        assert first == second


class TestOtherCaseTypes:
    def test_civil_claim_upheld(self, settings):
        session = hearing(settings, "civil", prosecution=["The contract was breached."], title="Sharma v. Gupta")
        judgment = VerdictEngine(ScriptedRandom([0.0])).decide(session)
        assert judgment.verdict == "Claim Upheld"
        assert judgment.reasoning.startswith("In the matter of Sharma v. Gupta: ")
        assert judgment.sentencing == templates.CASE_JUDGMENTS[session.case_type][4]

    def test_civil_claim_dismissed(self, settings):
        session = hearing(settings, "civil", prosecution=["The contract was breached."])
        judgment = VerdictEngine(ScriptedRandom([0.999999])).decide(session)
        assert judgment.verdict == "Claim Dismissed"
        assert judgment.sentencing is None

    @pytest.mark.parametrize("case_type,verdicts", [
        ("property", {"Title Confirmed", "Claim Rejected"}),
        ("family", {"Petition Granted", "Petition Dismissed"}),
        ("constitutional", {"Provision Unconstitutional", "Provision Constitutional"}),
        ("corporate", {"Petition Allowed", "Petition Dismissed"}),
        ("tax", {"In Favor of Plaintiff", "In Favor of Defendant"}),
    ])
    def test_vocabulary_per_case_type(self, settings, case_type, verdicts):
        session = hearing(settings, case_type, prosecution=["Our claim is sound."])
        judgment = VerdictEngine(random.Random(2)).decide(session)
        assert judgment.verdict in verdicts
        assert judgment.post_verdict_considerations == templates.POST_VERDICT_DEFAULT


class TestRendering:
    def test_key_points_without_turns(self):
        assert verdict.key_argument_points([]) == templates.NO_ARGUMENTS

    def test_key_points_of_short_turns(self):
        turns = [Turn(speaker=Speaker.DEFENSE, content="No. Not at all.")]
        assert verdict.key_argument_points(turns) == templates.NO_SUBSTANTIVE_ARGUMENTS

    def test_render_includes_verdict_and_sentence(self, settings):
        session = hearing(settings, prosecution=[BRUTAL_MURDER], defense=[NOTHING_TO_ADD])
        judgment = VerdictEngine(ScriptedRandom([0.0])).decide(session)
        text = verdict.render(judgment)
        assert text.startswith("**JUDGMENT**")
        assert "Verdict: Guilty" in text
        assert "Sentencing: " in text
