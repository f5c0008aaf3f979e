from fastapi import FastAPI, UploadFile, File, HTTPException, Form
from fastapi.responses import Response
from fastapi.middleware.cors import CORSMiddleware
from pathlib import Path
from typing import List, Optional
import uuid
import aiofiles
from courtroom import models
from courtroom.config import configure_logging, get_settings
from courtroom.errors import CourtroomError
from courtroom.services import SessionService

settings = get_settings()
service = SessionService(settings)
app = FastAPI(title="AI Courtroom Simulator")

# Directory for uploaded attachments
UPLOAD_DIR = Path(settings.upload_dir)
UPLOAD_DIR.mkdir(parents=True, exist_ok=True)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["*"]
)


def _http_error(exc: CourtroomError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.to_dict())


# Root route
@app.get("/")
def read_root():
    return {"message": "Welcome to the AI Courtroom Simulator API"}

# Favicon handler
@app.get("/favicon.ico")
def favicon():
    return Response(status_code=204)

@app.on_event("startup")
def on_startup():
    configure_logging(settings)

# ---- LIST SESSIONS ----
@app.get("/sessions")
def list_sessions():
    """List the live sessions of this process"""
    sessions = service.list_sessions()
    return {"sessions": sessions, "count": len(sessions)}

# ---- OPEN SESSION ----
@app.post("/sessions")
def open_session(payload: models.SessionCreate):
    """Open a courtroom session; returns its id and the judge's welcome"""
    session, welcome = service.open_session(payload.case_title, payload.case_type, payload.human_role)
    return {"session_id": session.id, "state": session.state, "turn": welcome}

# ---- GET SESSION ----
@app.get("/sessions/{session_id}")
def get_session(session_id: str):
    """Full turn history, state and judgment of a session"""
    try:
        return service.get_session(session_id)
    except CourtroomError as e:
        raise _http_error(e)

# ---- SUBMIT TURN ----
@app.post("/sessions/{session_id}/turns")
async def submit_turn(
    session_id: str,
    text: str = Form(""),
    files: Optional[List[UploadFile]] = File(None),
):
    """Submit a human turn with optional attachments"""
    try:
        service.check_turn(session_id, text, files or [])
    except CourtroomError as e:
        raise _http_error(e)

    attachments = []
    for file in files or []:
        filename = f"{uuid.uuid4().hex}_{Path(file.filename or 'attachment').name}"
        dest = UPLOAD_DIR / filename
        content = await file.read()
        async with aiofiles.open(dest, "wb") as out:
            await out.write(content)
        attachments.append(models.Attachment(
            name=file.filename or "attachment",
            media_type=file.content_type or "application/octet-stream",
            size=len(content),
            handle=str(dest),
        ))

    try:
        turns = await service.submit_turn(session_id, text, attachments)
    except CourtroomError as e:
        raise _http_error(e)

    snapshot = service.get_session(session_id)
    return {"turns": turns, "state": snapshot.state, "judgment": snapshot.judgment}

# ---- SWITCH ROLE ----
@app.post("/sessions/{session_id}/role")
async def switch_role(session_id: str):
    """Swap the human participant between prosecution and defense"""
    try:
        role = await service.switch_role(session_id)
    except CourtroomError as e:
        raise _http_error(e)
    return {"session_id": session_id, "human_role": role}

# ---- DISCARD SESSION ----
@app.delete("/sessions/{session_id}")
def discard_session(session_id: str):
    """Drop a live session; its archived transcript is kept"""
    try:
        service.discard(session_id)
    except CourtroomError as e:
        raise _http_error(e)
    return {"session_id": session_id, "discarded": True}

# ---- SESSION TRANSCRIPT ----
@app.get("/sessions/{session_id}/transcript")
def get_transcript(session_id: str):
    """Archived transcript and judgment of a session"""
    try:
        return service.transcript(session_id)
    except CourtroomError as e:
        raise _http_error(e)

# ---- HEALTH CHECK ----
@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "AI Courtroom Simulator API"}
