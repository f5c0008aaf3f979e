"""
Reference catalog: statutes and sections relevant to each case type.

The tables are built once at import time and never mutated, so they can be
shared by every session.
"""

from types import MappingProxyType
from typing import List, Tuple

from . import lexicon
from .models import CaseType, Citation

IPC = "Indian Penal Code"
CRPC = "Code of Criminal Procedure"
IEA = "Indian Evidence Act"

IPC_302 = Citation(law=IPC, section="Section 302",
                   description="Punishment for murder - Death or imprisonment for life, and fine")
IPC_304 = Citation(law=IPC, section="Section 304",
                   description="Punishment for culpable homicide not amounting to murder - "
                               "Imprisonment up to life, or up to 10 years, and fine")
IPC_307 = Citation(law=IPC, section="Section 307",
                   description="Attempt to murder - Imprisonment up to 10 years and fine")
IPC_376 = Citation(law=IPC, section="Section 376",
                   description="Punishment for rape - Rigorous imprisonment from 10 years to life, and fine")
CRPC_161 = Citation(law=CRPC, section="Section 161",
                    description="Examination of witnesses by police")
CRPC_164 = Citation(law=CRPC, section="Section 164",
                    description="Recording of confessions and statements by Magistrate")
IEA_3 = Citation(law=IEA, section="Section 3",
                 description="Definition of Evidence - Oral and documentary evidence")
IEA_25 = Citation(law=IEA, section="Section 25",
                  description="Confession to police officer not to be proved against accused")
IEA_45 = Citation(law=IEA, section="Section 45",
                  description="Opinions of experts - When relevant")
IEA_65B = Citation(law=IEA, section="Section 65B",
                   description="Admissibility of electronic records")
IEA_101 = Citation(law=IEA, section="Section 101",
                   description="Burden of proof - Whoever desires any Court to give judgment must prove facts")
IEA_105 = Citation(law=IEA, section="Section 105",
                   description="Burden of proving exception lies on accused")

_CIVIL = (
    Citation(law="Civil Procedure Code", section="Order VII Rule 1",
             description="Particulars to be contained in plaint"),
    Citation(law="Transfer of Property Act", section="Section 54",
             description="Transfer of immovable property"),
    Citation(law="Indian Contract Act", section="Section 10",
             description="What agreements are contracts"),
)

CATALOG = MappingProxyType({
    CaseType.CRIMINAL: (
        IPC_302, IPC_304, IPC_307, IPC_376, CRPC_161, CRPC_164,
        IEA_3, IEA_25, IEA_45, IEA_65B, IEA_101, IEA_105,
    ),
    CaseType.CIVIL: _CIVIL,
    CaseType.PROPERTY: _CIVIL,
    CaseType.FAMILY: (
        Citation(law="Hindu Marriage Act", section="Section 13", description="Divorce"),
        Citation(law="Hindu Adoption and Maintenance Act", section="Section 18",
                 description="Maintenance of wife"),
    ),
    CaseType.CONSTITUTIONAL: (
        Citation(law="Constitution of India", section="Article 14",
                 description="Equality before law"),
        Citation(law="Constitution of India", section="Article 19",
                 description="Protection of certain rights regarding freedom of speech, etc."),
        Citation(law="Constitution of India", section="Article 21",
                 description="Protection of life and personal liberty"),
    ),
    CaseType.CORPORATE: (
        Citation(law="Companies Act, 2013", section="Section 166",
                 description="Duties of directors"),
        Citation(law="Companies Act, 2013", section="Section 179",
                 description="Powers of Board"),
        Citation(law="Companies Act, 2013", section="Section 241",
                 description="Application to Tribunal for relief in cases of oppression, etc."),
    ),
    CaseType.OTHER: (),
})

# Offence keyword -> section cited for it; first match wins.
OFFENCE_CITATIONS = (
    ("murder", IPC_302),
    ("culpable homicide", IPC_304),
    ("attempt to murder", IPC_307),
    ("rape", IPC_376),
)


def lookup(case_type: CaseType) -> Tuple[Citation, ...]:
    """Statutes for a case type; types without entries get the empty default pool."""
    return CATALOG.get(CaseType.parse(case_type), CATALOG[CaseType.OTHER])


def applicable_laws(case_type: CaseType, limit: int = 3) -> List[Citation]:
    return list(lookup(case_type)[:limit])


def draw_citations(case_type: CaseType, transcript: str, rng) -> List[Citation]:
    """Pick 2-3 citations for an opposing counsel turn.

    Criminal cases start from the offence and evidence keywords found in the
    transcript and always cite the burden of proof; the rest is filled at
    random from the catalog without repeating a section.
    """
    catalog = lookup(case_type)
    if not catalog:
        return []

    wanted = rng.randint(2, 3)
    citations: List[Citation] = []

    if case_type == CaseType.CRIMINAL:
        for keyword, citation in OFFENCE_CITATIONS:
            if lexicon.contains(transcript, keyword):
                citations.append(citation)
                break
        if lexicon.contains(transcript, "confession"):
            citations.extend([IEA_25, CRPC_164])
        if lexicon.contains_any(transcript, ("expert", "forensic")):
            citations.append(IEA_45)
        citations.append(IEA_101)

    remaining = [c for c in catalog if c not in citations]
    while len(citations) < wanted and remaining:
        citations.append(remaining.pop(rng.randrange(len(remaining))))

    return citations
