"""Discovery call session endpoints."""

from __future__ import annotations

from urllib.parse import quote

from fastapi import APIRouter, Response, status
from fastapi.responses import PlainTextResponse
from loguru import logger

from estimator.models.estimate import (
    ClientInfo,
    ClientUpdate,
    PricingResponse,
    ServiceResponse,
    SessionResponse,
    ToggleResponse,
)
from estimator.services.documents.generator import PROPOSAL_MEDIA_TYPE
from estimator.services.web.session import EstimatorSession, session_manager

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _session_response(session: EstimatorSession) -> SessionResponse:
    snapshot = session.selection.snapshot()
    return SessionResponse(
        session_id=session.session_id,
        created_at=session.created_at.isoformat(),
        client=session.client,
        services=[
            ServiceResponse.from_definition(service, snapshot[service.key])
            for service in session.selection.catalog
        ],
        pricing=PricingResponse.from_result(
            session_manager.calculate(session.session_id)
        ),
    )


@router.post(
    "",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_session(data: ClientInfo | None = None) -> SessionResponse:
    """Starts a discovery call with the default service selection."""
    session = session_manager.create_session(client=data)
    return _session_response(session)


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(session_id: str) -> SessionResponse:
    """Returns client info, selection and current pricing."""
    return _session_response(session_manager.get_session(session_id))


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(session_id: str) -> Response:
    """Ends a discovery call."""
    session_manager.delete_session(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{session_id}/client", response_model=SessionResponse)
async def update_client(session_id: str, data: ClientUpdate) -> SessionResponse:
    """Updates school and contact details."""
    changes = data.model_dump(exclude_none=True)
    session_manager.update_client(session_id, **changes)
    return _session_response(session_manager.get_session(session_id))


@router.post("/{session_id}/services/{key}/toggle", response_model=ToggleResponse)
async def toggle_service(session_id: str, key: str) -> ToggleResponse:
    """Flips one service on or off and returns the new pricing."""
    selected = session_manager.toggle_service(session_id, key)
    return ToggleResponse(
        key=key,
        selected=selected,
        pricing=PricingResponse.from_result(session_manager.calculate(session_id)),
    )


@router.get("/{session_id}/pricing", response_model=PricingResponse)
async def get_pricing(session_id: str) -> PricingResponse:
    """Prices the session's current inputs."""
    return PricingResponse.from_result(session_manager.calculate(session_id))


@router.get("/{session_id}/proposal", response_class=PlainTextResponse)
async def download_proposal(session_id: str) -> PlainTextResponse:
    """Returns the preliminary proposal as a text attachment."""
    filename, text = session_manager.render_proposal(session_id)
    logger.info("Proposal {} downloaded for session {}", filename, session_id)
    return PlainTextResponse(
        content=text,
        media_type=PROPOSAL_MEDIA_TYPE,
        headers={
            "Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}",
        },
    )
