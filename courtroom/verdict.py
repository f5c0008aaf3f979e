"""
Verdict engine.

Runs once per session, when deliberation ends. The outcome is a weighted draw:
the prosecution (or petitioner / plaintiff) side wins with probability
``strength_p / (strength_p + strength_d)``. The judgment text is assembled from
fixed templates keyed by case type, with aggravating and mitigating factors,
procedural concerns and a sentence picked from keywords in the transcript.
"""

import logging
import random
import re
from typing import List, Optional, Sequence, Tuple

from . import lexicon, references, scoring, templates
from .models import CaseType, Judgment, SentencingOption, Speaker, Turn

logger = logging.getLogger(__name__)

# (factor, trigger phrases)
AGGRAVATING_FACTORS = (
    ("premeditation", ("premeditated", "planned", "premeditation")),
    ("brutality of the crime", ("cruel", "cruelty", "brutal", "heinous")),
    ("prior criminal record", ("prior conviction", "criminal history", "previous offense")),
    ("vulnerability of the victim", ("vulnerable victim", "child victim", "elderly victim")),
    ("abuse of position of trust", ("position of trust", "authority", "power")),
)
DEFAULT_AGGRAVATING = "nature and circumstances of the offense"

MITIGATING_FACTORS = (
    ("no prior criminal record", ("no prior", "clean record", "first offense")),
    ("provocation", ("provocation", "heat of passion", "sudden quarrel")),
    ("mental health issues", ("mental illness", "psychiatric", "psychological")),
    ("young age of the accused", ("young", "juvenile", "immature")),
    ("genuine remorse", ("remorse", "regret", "apologized")),
)

# (note, groups of phrases); every group needs at least one phrase present.
PROCEDURAL_VIOLATIONS = (
    ("Potential inadmissibility of confession under Section 25 of the Indian Evidence Act",
     (("confession",), ("police",), ("section 25",))),
    ("Concerns regarding chain of custody of physical evidence",
     (("chain of custody",),)),
    ("Concerns regarding chain of custody of physical evidence",
     (("evidence",), ("tamper", "tampered", "tampering"))),
    ("Issues with electronic evidence certification under Section 65B of the Indian Evidence Act",
     (("electronic",), ("section 65b",), ("certificate", "authentication"))),
    ("Potential violations of arrest procedures as per D.K. Basu guidelines",
     (("arrest",), ("procedure",), ("d.k. basu",))),
)

# Offence sentencing, first match wins.
OFFENCES = (
    ("murder", ("murder", "section 302")),
    ("culpable homicide", ("culpable homicide", "section 304")),
    ("rape", ("rape", "section 376")),
)
SERIOUS_OFFENCES = ("murder", "rape")

SENTENCING_OPTIONS = (
    SentencingOption(
        id="probation", title="Probation",
        description="Release of the offender under supervision with certain conditions",
        applicability=["first-time offender", "non-violent crime", "young offender"],
        legal_basis="Probation of Offenders Act, 1958",
    ),
    SentencingOption(
        id="community-service", title="Community Service",
        description="Mandatory unpaid work for the benefit of the community",
        applicability=["minor offenses", "first-time offender", "non-violent crime"],
        legal_basis="Section 357 CrPC - Court's power to order community service",
    ),
    SentencingOption(
        id="rehabilitation", title="Rehabilitation Program",
        description="Mandatory participation in rehabilitation programs (drug treatment, counseling, etc.)",
        applicability=["addiction-related crimes", "mental health issues", "domestic violence"],
        legal_basis="Mental Healthcare Act, 2017 and NDPS Act provisions",
    ),
    SentencingOption(
        id="house-arrest", title="House Arrest",
        description="Confinement to one's residence with electronic monitoring",
        applicability=["elderly offenders", "health concerns", "non-violent crime"],
        legal_basis="Supreme Court guidelines in Gautam Navlakha v. NIA (2021)",
    ),
    SentencingOption(
        id="plea-bargain", title="Plea Bargaining",
        description="Reduced sentence in exchange for a guilty plea",
        applicability=["offenses with maximum punishment up to 7 years", "non-violent crime"],
        legal_basis="Chapter XXIA of CrPC (Sections 265A to 265L)",
    ),
)
EXCLUDED_FOR_SERIOUS = ("community-service", "plea-bargain")

# Mitigating factor -> applicability tags it makes relevant.
MITIGATION_TAGS = {
    "no prior criminal record": ("first-time offender",),
    "young age of the accused": ("young offender",),
    "mental health issues": ("mental health issues", "health concerns"),
}

_SENTENCE_SPLIT = re.compile(r"\.\s+")


def probability(strength_p: float, strength_d: float) -> float:
    """Chance that the prosecution side prevails, clamped to [0, 1].

    Negative strengths count as zero, so a penalised side can only lose
    ground. A session where both strengths are zero is even: 0.5.
    """
    strength_p, strength_d = max(strength_p, 0.0), max(strength_d, 0.0)
    total = strength_p + strength_d
    if total == 0:
        return 0.5
    return min(1.0, max(0.0, strength_p / total))


def transcript_text(turns: Sequence[Turn]) -> str:
    return " ".join(t.content for t in turns)


def detect_factors(text: str, table) -> List[str]:
    return [name for name, phrases in table if lexicon.contains_any(text, phrases)]


def aggravating_factors(text: str) -> List[str]:
    return detect_factors(text, AGGRAVATING_FACTORS) or [DEFAULT_AGGRAVATING]


def mitigating_factors(text: str) -> List[str]:
    return detect_factors(text, MITIGATING_FACTORS)


def procedural_violations(text: str) -> List[str]:
    notes = []
    for note, groups in PROCEDURAL_VIOLATIONS:
        if note in notes:
            continue
        if all(lexicon.contains_any(text, group) for group in groups):
            notes.append(note)
    return notes


def detect_offence(text: str) -> Optional[str]:
    for offence, phrases in OFFENCES:
        if lexicon.contains_any(text, phrases):
            return offence
    return None


def sentence(offence: Optional[str], aggravating: List[str], mitigating: List[str]) -> str:
    if offence == "murder":
        if "premeditation" in aggravating and len(aggravating) >= 3 and not mitigating:
            return templates.SENTENCE_DEATH.format(aggravating=", ".join(aggravating))
        if mitigating:
            return templates.SENTENCE_LIFE_MITIGATED.format(
                aggravating=", ".join(aggravating), mitigating=", ".join(mitigating))
        return templates.SENTENCE_LIFE
    if offence == "culpable homicide":
        return templates.SENTENCE_CULPABLE_HOMICIDE
    if offence == "rape":
        return templates.SENTENCE_RAPE
    return templates.SENTENCE_DEFAULT


def alternative_sentencing(offence: Optional[str], mitigating: List[str]) -> List[SentencingOption]:
    """Alternatives to custody, most relevant to the mitigating factors first."""
    options = list(SENTENCING_OPTIONS)
    if offence in SERIOUS_OFFENCES:
        options = [o for o in options if o.id not in EXCLUDED_FOR_SERIOUS]

    tags = set()
    for factor in mitigating:
        tags.update(MITIGATION_TAGS.get(factor, ()))

    return sorted(options, key=lambda o: -sum(1 for a in o.applicability if a in tags))


def key_argument_points(turns: Sequence[Turn]) -> str:
    """First two substantial sentences of each of the last three turns."""
    if not turns:
        return templates.NO_ARGUMENTS
    lines = []
    for turn in turns[-3:]:
        sentences = [s for s in _SENTENCE_SPLIT.split(turn.content) if len(s) > 20][:2]
        if sentences:
            lines.append("- " + ". ".join(s.rstrip(".") for s in sentences) + ".")
    return "\n".join(lines) or templates.NO_SUBSTANTIVE_ARGUMENTS


def render(judgment: Judgment) -> str:
    """Text of the judge's final turn."""
    sentencing = f"Sentencing: {judgment.sentencing}\n\n" if judgment.sentencing else ""
    return templates.JUDGMENT_TURN.format(
        reasoning=judgment.reasoning,
        verdict=judgment.verdict,
        sentencing=sentencing,
        post_verdict=judgment.post_verdict_considerations,
    )


class VerdictEngine:
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def strengths(self, turns: Sequence[Turn]) -> Tuple[float, float]:
        """Each side's score, floored at the base strength."""
        prosecution = [t for t in turns if t.speaker == Speaker.PROSECUTION]
        defense = [t for t in turns if t.speaker == Speaker.DEFENSE]
        return (
            max(scoring.score(prosecution), scoring.BASE_STRENGTH),
            max(scoring.score(defense), scoring.BASE_STRENGTH),
        )

    def decide(self, session) -> Judgment:
        """Draw the outcome for ``session`` and build its judgment."""
        turns = list(session.turns)
        strength_p, strength_d = self.strengths(turns)
        p = probability(strength_p, strength_d)
        upheld = self.rng.random() < p

        logger.info(
            "Session %s verdict draw: prosecution=%.2f defense=%.2f p=%.3f upheld=%s",
            session.id, strength_p, strength_d, p, upheld,
        )

        evidence_point = self.rng.choice(templates.EVIDENCE_POINTS)
        defense_point = self.rng.choice(templates.DEFENSE_POINTS)
        laws = references.applicable_laws(session.case_type)

        if session.case_type == CaseType.CRIMINAL:
            return self._criminal(session, turns, upheld, p, evidence_point, defense_point, laws)

        verdict_for, verdict_against, reasoning_for, reasoning_against, relief = \
            templates.CASE_JUDGMENTS.get(session.case_type, templates.CASE_JUDGMENTS[CaseType.OTHER])
        reasoning = (reasoning_for if upheld else reasoning_against).format(
            evidence_point=evidence_point, defense_point=defense_point)
        text = transcript_text(turns)

        return Judgment(
            verdict=verdict_for if upheld else verdict_against,
            reasoning=templates.CASE_TITLE_PREFIX.format(title=session.case_title) + reasoning,
            sentencing=relief if upheld else None,
            applicable_laws=laws,
            procedural_violations=procedural_violations(text),
            post_verdict_considerations=templates.POST_VERDICT_DEFAULT,
            prosecution_probability=p,
        )

    def _criminal(self, session, turns, guilty, p, evidence_point, defense_point, laws) -> Judgment:
        text = transcript_text(turns)
        violations = procedural_violations(text)
        points = dict(
            title=session.case_title,
            prosecution_points=key_argument_points([t for t in turns if t.speaker == Speaker.PROSECUTION]),
            defense_points=key_argument_points([t for t in turns if t.speaker == Speaker.DEFENSE]),
            evidence_point=evidence_point,
            defense_point=defense_point,
        )

        if not guilty:
            extra = templates.CRIMINAL_ACQUITTAL_VIOLATIONS.format(
                violations="; ".join(violations)) if violations else ""
            return Judgment(
                verdict="Not Guilty",
                reasoning=templates.CRIMINAL_ACQUITTAL_REASONING.format(violations=extra, **points),
                applicable_laws=laws,
                procedural_violations=violations,
                post_verdict_considerations=templates.POST_VERDICT_ACQUITTAL,
                prosecution_probability=p,
            )

        aggravating = aggravating_factors(text)
        mitigating = mitigating_factors(text)
        offence = detect_offence(text)
        extra = templates.CRIMINAL_GUILTY_VIOLATIONS.format(
            violations="; ".join(violations)) if violations else ""

        return Judgment(
            verdict="Guilty",
            reasoning=templates.CRIMINAL_GUILTY_REASONING.format(violations=extra, **points),
            sentencing=sentence(offence, aggravating, mitigating),
            applicable_laws=laws,
            aggravating_factors=aggravating,
            mitigating_factors=mitigating,
            procedural_violations=violations,
            post_verdict_considerations=templates.POST_VERDICT_CONVICTION,
            alternative_sentencing=alternative_sentencing(offence, mitigating),
            prosecution_probability=p,
        )
