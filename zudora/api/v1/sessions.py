from fastapi import APIRouter, Depends, HTTPException, Request, status

from zudora.api.deps import get_session_controller
from zudora.core.rate_limit import rate_limit
from zudora.core.security import require_api_key
from zudora.schemas.chat import (
    ChatRequest,
    ConversationTurnOut,
    ExchangeOut,
    HistoryEntryOut,
    ResetOut,
    SessionOut,
)
from zudora.session import (
    ConversationTurn,
    EmptyMessageError,
    HistoryEntry,
    ReplyPendingError,
    Session,
    SessionController,
    SessionNotFoundError,
)

router = APIRouter(dependencies=[Depends(require_api_key)])


def _turn_out(turn: ConversationTurn) -> ConversationTurnOut:
    return ConversationTurnOut(
        id=turn.id,
        role=turn.role,
        content=turn.content,
        timestamp=turn.timestamp,
        suggestions=turn.suggestions,
    )


def _session_out(session: Session) -> SessionOut:
    return SessionOut(
        id=session.id,
        created_at=session.created_at,
        pending=session.pending,
        messages=[_turn_out(turn) for turn in session.messages],
    )


def _history_out(entry: HistoryEntry) -> HistoryEntryOut:
    return HistoryEntryOut(id=entry.id, title=entry.title, timestamp=entry.timestamp)


def _get_or_404(controller: SessionController, session_id: str) -> Session:
    try:
        return controller.get_session(session_id)
    except SessionNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.post("/sessions", response_model=SessionOut, status_code=status.HTTP_201_CREATED)
def create_session(controller: SessionController = Depends(get_session_controller)):
    return _session_out(controller.start_session())


@router.get("/sessions/{session_id}", response_model=SessionOut)
def get_session(session_id: str, controller: SessionController = Depends(get_session_controller)):
    return _session_out(_get_or_404(controller, session_id))


@router.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def end_session(session_id: str, controller: SessionController = Depends(get_session_controller)):
    try:
        controller.end_session(session_id)
    except SessionNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ReplyPendingError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc


@router.post("/sessions/{session_id}/messages", response_model=ExchangeOut)
@rate_limit()
async def send_message(
    request: Request,
    session_id: str,
    payload: ChatRequest,
    controller: SessionController = Depends(get_session_controller),
):
    _ = request
    try:
        user_turn, assistant_turn = await controller.submit(session_id, payload.message)
    except SessionNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except EmptyMessageError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ReplyPendingError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return ExchangeOut(user=_turn_out(user_turn), assistant=_turn_out(assistant_turn))


@router.post("/sessions/{session_id}/reset", response_model=ResetOut)
def reset_session(session_id: str, controller: SessionController = Depends(get_session_controller)):
    _get_or_404(controller, session_id)
    try:
        session, saved = controller.reset_session(session_id)
    except ReplyPendingError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return ResetOut(
        session=_session_out(session),
        saved=_history_out(saved) if saved is not None else None,
    )


@router.get("/history", response_model=list[HistoryEntryOut])
def list_history(controller: SessionController = Depends(get_session_controller)):
    return [_history_out(entry) for entry in controller.list_history()]


@router.delete("/history", status_code=status.HTTP_204_NO_CONTENT)
def delete_history(controller: SessionController = Depends(get_session_controller)):
    controller.delete_history()
