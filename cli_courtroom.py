import mimetypes
import sys
from pathlib import Path
from courtroom.config import configure_logging, get_settings
from courtroom.errors import CourtroomError
from courtroom.models import Attachment, CaseType, Role
from courtroom.session import CourtroomSession

# Case metadata
TITLE = "State of Maharashtra vs Rajesh Kumar"
CASE_TYPE = "criminal"

LABELS = {"prosecution": "PROSECUTION", "defense": "DEFENSE", "arbiter": "JUDGE"}


def get_attachments(raw: str):
    """Turn ':attach a.pdf b.jpg' arguments into attachments; missing files are skipped."""
    attachments = []
    for name in raw.split():
        path = Path(name)
        if not path.exists():
            print(f"Attachment {path} does not exist.")
            continue
        media_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        attachments.append(Attachment(
            name=path.name, media_type=media_type, size=path.stat().st_size, handle=str(path),
        ))
    return attachments


def print_turns(turns):
    for turn in turns:
        print(f"[{LABELS[turn.speaker.value]}] {turn.content}\n")


def main():
    configure_logging()
    print("=== Virtual Courtroom CLI ===\n")

    case_type = input(f"Case type ({', '.join(c.value for c in CaseType)}) [default: {CASE_TYPE}]: ").strip()
    role = input("Argue as (prosecution/defense) [default: prosecution]: ").strip().lower()
    if role not in [r.value for r in Role]:
        role = "prosecution"

    session = CourtroomSession.open(TITLE, case_type or CASE_TYPE, Role(role), settings=get_settings())
    print_turns(session.turns)
    print("Commands: ':attach <files>' adds attachments to the next turn, ':switch' changes sides, ':quit' exits.\n")

    pending = []
    while not session.is_terminal:
        try:
            line = input(f"{session.human_role.value}> ")
        except EOFError:
            break

        if line.strip() == ":quit":
            break
        if line.startswith(":attach"):
            pending.extend(get_attachments(line[len(":attach"):]))
            continue
        if line.strip() == ":switch":
            try:
                print(f"Now arguing for the {session.switch_role().value}.\n")
            except CourtroomError as e:
                print(e.message)
            continue

        try:
            turns = session.submit(line, pending)
        except CourtroomError as e:
            print(e.message)
            continue
        pending = []
        print_turns(turns[1:])

    if session.judgment:
        print("=== Judgment ===")
        print(f"Verdict: {session.judgment.verdict}")
        print(f"Prosecution probability: {session.judgment.prosecution_probability:.0%}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
