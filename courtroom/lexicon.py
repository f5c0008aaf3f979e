"""
Lexicon matching for courtroom transcripts.

Everything here is a pure function of the input text and the module level
term tables. Matching is case-insensitive and whole-word (or whole-phrase);
single words also match their plural form ("witnesses", "sections").
"""

import re
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

DIRECT_EVIDENCE = "direct_evidence"
CIRCUMSTANTIAL_EVIDENCE = "circumstantial_evidence"
GENERAL_EVIDENCE = "general_evidence"
LEGAL_TERMS = "legal_terms"
RECENT_PRECEDENTS = "recent_precedents"
CLASSIC_PRECEDENTS = "classic_precedents"
CONCLUSION_MARKERS = "conclusion_markers"
STATUTORY_MARKERS = "statutory_markers"
EVIDENCE_CLAIMS = "evidence_claims"
EVIDENCE_QUALIFIERS = "evidence_qualifiers"

CATEGORIES = MappingProxyType({
    DIRECT_EVIDENCE: (
        "forensic", "DNA", "fingerprint", "ballistic", "medical report",
        "expert opinion", "CCTV", "video", "recording", "photograph", "eyewitness",
    ),
    CIRCUMSTANTIAL_EVIDENCE: (
        "circumstantial", "inference", "suggest", "indicate", "possibility",
        "likely", "probable",
    ),
    GENERAL_EVIDENCE: (
        "evidence", "exhibit", "witness", "testimony", "document", "proof",
        "record", "confession", "statement",
    ),
    LEGAL_TERMS: (
        "section", "article", "act", "statute", "precedent", "judgment",
        "supreme court", "beyond reasonable doubt", "mens rea", "actus reus",
        "burden of proof", "admissibility", "direct evidence", "hearsay",
        "cross-examination", "presumption of innocence", "criminal intent",
        "motive", "alibi",
    ),
    RECENT_PRECEDENTS: (
        "Mukesh & Anr. v. State (NCT of Delhi) (2017)",
        "K.S. Puttaswamy v. Union of India (2017)",
        "Navtej Singh Johar v. Union of India (2018)",
        "Joseph Shine v. Union of India (2018)",
        "Indian Young Lawyers Association v. State of Kerala (2018)",
        "Tehseen Poonawalla v. Union of India (2018)",
    ),
    CLASSIC_PRECEDENTS: (
        "Bachan Singh v. State of Punjab (1980)",
        "Machhi Singh v. State of Punjab (1983)",
        "Sharad Birdhichand Sarda v. State of Maharashtra (1984)",
        "Kali Ram v. State of Himachal Pradesh (1973)",
        "Tomaso Bruno v. State of U.P. (2015)",
        "K. Venkateshwarlu v. State of Andhra Pradesh (2012)",
        "Surendra Mishra v. State of Jharkhand (2011)",
        "D.K. Basu v. State of West Bengal (1997)",
    ),
    CONCLUSION_MARKERS: ("therefore", "thus", "hence", "conclude"),
    STATUTORY_MARKERS: ("section", "article", "act"),
    EVIDENCE_CLAIMS: ("evidence", "proof"),
    EVIDENCE_QUALIFIERS: ("witness", "document", "documentary", "exhibit", "forensic"),
})


class StatuteRef(NamedTuple):
    body: Optional[str]
    section: str


_BODY_ALIASES = (
    (re.compile(r"^(ipc|indian penal code)$"), "IPC"),
    (re.compile(r"^(crpc|cr\.?\s?p\.?\s?c\.?|code of criminal procedure)$"), "CrPC"),
    (re.compile(r"^(iea|(indian )?evidence act)$"), "IEA"),
    (re.compile(r"^constitution$"), "Constitution"),
)

_SECTION_RE = re.compile(
    r"\b(section|sec\.|article|art\.)\s*(\d+[a-z]?)\b"
    r"(?:\s*\([0-9a-z]+\))*"
    r"(?:\s*,?\s*(?:of\s+)?(?:the\s+)?"
    r"(ipc|indian penal code|crpc|cr\.\s?p\.\s?c\.?|code of criminal procedure"
    r"|indian evidence act|evidence act|iea|constitution)\b)?",
    re.IGNORECASE,
)

# A party name token: "Kerala", "U.P", "K.S.", "Anr."
_PARTY = r"[A-Z][\w'&-]*(?:\.[A-Z][\w'&-]*)*"
_PRECEDENT_RE = re.compile(
    rf"((?:{_PARTY}\.?\s+){{0,3}}?)({_PARTY}\.?)\s+(?:[vV]|vs|versus)\.?\s+"
    rf"({_PARTY}(?:\s+(?:(?:of|the|and|for|&)\s+)*{_PARTY})*)"
)
_LEADING_WORDS = frozenset(("In", "As", "See", "Per", "The", "We", "Also", "Under", "Following"))
# Lowercase fallback on normalised text: the first party's last word and up to
# eight words after " v. ".
_LOOSE_PRECEDENT_RE = re.compile(r"([\w'&-]+) v\. (\S+(?: \S+){0,7})")
_VERSUS_RE = re.compile(r"\s(?:v|vs|versus)\.?\s")
_SPACE_RE = re.compile(r"\s+")


@lru_cache(maxsize=512)
def _term_pattern(term: str) -> "re.Pattern":
    body = r"\s+".join(re.escape(part) for part in term.split())
    if term[-1].isalpha():
        body += r"(?:e?s)?"
    return re.compile(rf"(?<!\w){body}(?!\w)", re.IGNORECASE)


def count(text: str, term: str) -> int:
    if not text:
        return 0
    return len(_term_pattern(term).findall(text))


def contains(text: str, term: str) -> bool:
    return bool(text) and _term_pattern(term).search(text) is not None


def contains_any(text: str, terms: Iterable[str]) -> bool:
    return any(contains(text, term) for term in terms)


def match(text: str, categories: Iterable[str] = None) -> Dict[str, int]:
    """Count term occurrences per category.

    Args:
        text: Free text to scan.
        categories: Category names from CATEGORIES; all categories when omitted.

    Returns:
        Mapping of category name to summed match count.
    """
    names = list(categories) if categories is not None else list(CATEGORIES)
    return {
        name: sum(count(text, term) for term in CATEGORIES.get(name, ()))
        for name in names
    }


def _normalize_body(raw: Optional[str], keyword: str) -> Optional[str]:
    if raw:
        lowered = _SPACE_RE.sub(" ", raw.lower()).strip()
        for pattern, body in _BODY_ALIASES:
            if pattern.match(lowered):
                return body
    if keyword.lower().startswith("art"):
        return "Constitution"
    return None


def extract_sections(text: str) -> List[StatuteRef]:
    """Find "Section 302 IPC" / "Article 21" style references, in text order."""
    refs = []
    for m in _SECTION_RE.finditer(text or ""):
        keyword, number, body = m.group(1), m.group(2), m.group(3)
        refs.append(StatuteRef(_normalize_body(body, keyword), number.upper()))
    return refs


def extract_precedents(text: str) -> List[str]:
    """Find "X v. Y" case names as written in the text."""
    names = []
    for m in _PRECEDENT_RE.finditer(text or ""):
        words = (m.group(1) + m.group(2)).split()
        while len(words) > 1 and words[0] in _LEADING_WORDS:
            words.pop(0)
        names.append(f"{' '.join(words)} v. {m.group(3).strip()}")
    return names


def precedent_key(name: str) -> str:
    """Comparable form of a case name: last word of the first party onwards, lowercased."""
    left, _, right = normalize_for_precedents(name).partition(" v. ")
    last = left.split(" ")[-1] if left else ""
    return f"{last} v. {right}".strip()


def normalize_for_precedents(text: str) -> str:
    lowered = _SPACE_RE.sub(" ", f" {text or ''} ".lower())
    return _VERSUS_RE.sub(" v. ", lowered).strip()


def shared_precedents(text: str, other_texts: Iterable[str]) -> List[Tuple[str, str]]:
    """Case names cited in ``text`` that also appear in any of ``other_texts``.

    Returns (name, key) pairs in the order they appear in ``text``. When
    ``text`` holds no capitalised case name it is scanned again without regard
    to case, and each "x v. y" is matched by its longest opening run of words.
    """
    haystack = " ".join(normalize_for_precedents(t) for t in other_texts)
    names = extract_precedents(text)
    if not names:
        return _loose_shared_precedents(text, haystack)

    found = []
    for name in names:
        key = precedent_key(name)
        if key and key in haystack:
            found.append((name, key))
    return found


def _loose_shared_precedents(text: str, haystack: str) -> List[Tuple[str, str]]:
    found = []
    for m in _LOOSE_PRECEDENT_RE.finditer(normalize_for_precedents(text)):
        words = m.group(2).split()
        for k in range(len(words), 0, -1):
            key = f"{m.group(1)} v. {' '.join(words[:k]).rstrip('.,;:')}"
            if re.search(rf"(?<!\w){re.escape(key)}(?!\w)", haystack):
                found.append((key, key))
                break
    return found
