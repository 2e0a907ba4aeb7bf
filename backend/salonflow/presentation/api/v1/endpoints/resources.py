"""Tenant-scoped CRUD endpoints, generated once per resource config.

Bodies are accepted as raw JSON (``Any``) so that the resource handler's
validator, not the framework, decides what counts as a field error.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request, status
from fastapi.responses import JSONResponse

from salonflow.application.schemas import DeleteConfirmation, ErrorResponse, ValidationErrorResponse
from salonflow.application.services import ResourceConfig, ResourceHandler
from salonflow.domain.entities import Principal
from salonflow.infrastructure.dependencies import (
    get_current_principal,
    resource_handler_provider,
)
from salonflow.presentation.envelope import render

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    422: {"model": ValidationErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def build_resource_router(config: ResourceConfig) -> APIRouter:
    """Mount list/get/create/update/delete under ``/<resource_type>``."""
    router = APIRouter(
        prefix=f"/{config.resource_type}",
        tags=[config.label],
        responses=_ERROR_RESPONSES,
    )
    get_handler = resource_handler_provider(config)
    label = config.label

    @router.get("", response_model=list[config.response_schema])
    async def list_records(
        request: Request,
        principal: Principal = Depends(get_current_principal),
        handler: ResourceHandler = Depends(get_handler),
    ) -> JSONResponse:
        """List the caller's records, optionally filtered by equality params."""
        outcome = await handler.list(principal, dict(request.query_params))
        return render(outcome, label)

    @router.get("/{record_id}", response_model=config.response_schema)
    async def get_record(
        record_id: str,
        principal: Principal = Depends(get_current_principal),
        handler: ResourceHandler = Depends(get_handler),
    ) -> JSONResponse:
        """Retrieve one of the caller's records by ID."""
        outcome = await handler.get_by_id(principal, record_id)
        return render(outcome, label)

    @router.post(
        "",
        response_model=config.response_schema,
        status_code=status.HTTP_201_CREATED,
    )
    async def create_record(
        payload: Any = Body(...),
        principal: Principal = Depends(get_current_principal),
        handler: ResourceHandler = Depends(get_handler),
    ) -> JSONResponse:
        """Create a record owned by the caller."""
        outcome = await handler.create(principal, payload)
        return render(outcome, label)

    @router.put("/{record_id}", response_model=config.response_schema)
    @router.patch("/{record_id}", response_model=config.response_schema)
    async def update_record(
        record_id: str,
        payload: Any = Body(...),
        principal: Principal = Depends(get_current_principal),
        handler: ResourceHandler = Depends(get_handler),
    ) -> JSONResponse:
        """Partially update one of the caller's records."""
        outcome = await handler.update(principal, record_id, payload)
        return render(outcome, label)

    @router.delete("/{record_id}", response_model=DeleteConfirmation)
    async def delete_record(
        record_id: str,
        principal: Principal = Depends(get_current_principal),
        handler: ResourceHandler = Depends(get_handler),
    ) -> JSONResponse:
        """Delete one of the caller's records."""
        outcome = await handler.delete(principal, record_id)
        return render(outcome, label)

    return router
