import json
import logging
from typing import Any
from uuid import UUID

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from fastapi.encoders import jsonable_encoder

from auth.application.services import decode_token
from documents.application.session import DocumentSession, SessionState
from shared.dependencies import build_workspace
from shared.exceptions import (
    AppError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from shared.infrastructure.database import async_session

logger = logging.getLogger(__name__)

router = APIRouter()


def _snapshot(session: DocumentSession) -> dict[str, Any]:
    return {
        "state": session.state.value,
        "base_version": session.base_version,
        "content": session.buffer,
    }


async def handle_message(
    session: DocumentSession, message: dict[str, Any], caller_id: UUID
) -> dict[str, Any]:
    """Apply one client message to the session and build the reply."""
    op = message.get("op")
    reply: dict[str, Any] = {"op": op}
    try:
        if op == "edit":
            content = message.get("content")
            if not isinstance(content, str):
                raise ValidationError("'content' must be a string")
            session.edit(content)
        elif op == "save":
            version = await session.save(caller_id)
            reply["version_number"] = version.version_number
        elif op == "stage":
            try:
                version_number = int(message["version"])
            except (KeyError, TypeError, ValueError):
                raise ValidationError("'version' must be an integer")
            await session.stage_version(version_number)
        elif op == "history":
            reply["versions"] = [
                {
                    "version_number": v.version_number,
                    "author_id": v.author_id,
                    "created_at": v.created_at,
                }
                for v in await session.history()
            ]
        elif op == "comments":
            reply["comments"] = await session.comments()
        elif op == "comment":
            text = message.get("text")
            if not isinstance(text, str):
                raise ValidationError("'text' must be a string")
            reply["comment"] = await session.add_comment(caller_id, text)
        elif op == "delete":
            await session.delete(caller_id)
        elif op == "close":
            session.close()
        else:
            raise ValidationError(f"Unknown operation: {op!r}")
    except AppError as exc:
        reply["error"] = _error(exc)

    reply.update(_snapshot(session))
    return jsonable_encoder(reply)


async def handle_frame(
    session: DocumentSession, frame: str, caller_id: UUID
) -> dict[str, Any]:
    """Decode one text frame and apply it. Malformed frames get an error reply."""
    try:
        message = json.loads(frame)
    except ValueError:
        message = None
    if not isinstance(message, dict):
        reply = {"op": None, "error": _error(ValidationError("Frame must be a JSON object"))}
        reply.update(_snapshot(session))
        return jsonable_encoder(reply)
    return await handle_message(session, message, caller_id)


def _error(exc: AppError) -> dict[str, str]:
    return {"type": type(exc).__name__, "message": exc.message}


@router.websocket("/ws/documents/{document_id}")
async def document_session_endpoint(websocket: WebSocket, document_id: UUID):
    # Authenticate via query param: ?token=xxx
    token = websocket.query_params.get("token")
    if not token:
        await websocket.close(code=4001, reason="Missing token")
        return
    try:
        user_id = decode_token(token)
    except AuthenticationError:
        await websocket.close(code=4001, reason="Invalid token")
        return

    async with async_session() as db:
        session = build_workspace(db).new_session()
        try:
            await session.open(document_id, user_id)
        except NotFoundError as exc:
            await websocket.close(code=4004, reason=exc.message)
            return
        except AuthorizationError as exc:
            await websocket.close(code=4003, reason=exc.message)
            return
        except StoreError as exc:
            await websocket.close(code=1011, reason=exc.message)
            return

        await websocket.accept()
        await websocket.send_json(jsonable_encoder({"op": "open", **_snapshot(session)}))

        try:
            while session.state != SessionState.CLOSED:
                frame = await websocket.receive_text()
                await websocket.send_json(await handle_frame(session, frame, user_id))
            await websocket.close()
        except WebSocketDisconnect:
            logger.debug("Client left document %s", document_id)
        except Exception:
            logger.exception("Session on document %s failed", document_id)
            await websocket.close(code=1011, reason="Internal error")
        finally:
            session.close()
