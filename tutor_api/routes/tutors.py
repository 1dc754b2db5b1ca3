"""
Tutor API — Tutor Route Handlers
=================================

What:  CRUD endpoints for the tutor resource.
Why:   The HTTP face of the Persistence Gateway.
How:   A guard check on the identifier, at most one lookup, then a single
       repository call. Each request runs in one unit of work
       (see `get_db_session`): a raised exception rolls the request back.

Endpoints (under settings.api_prefix):
    POST   /tutors        create  → 201 + Location + alert headers
    PUT    /tutors        update  → 200 + alert headers
    GET    /tutors        list    → 200
    GET    /tutors/{id}   get     → 200 | 404
    DELETE /tutors/{id}   delete  → 204 + alert headers (even for unknown ids)
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from tutor_api import alerts
from tutor_api.config import settings
from tutor_api.exceptions import BadRequestAlertError, NotFoundError
from tutor_api.models.tutor import Tutor
from tutor_api.repositories.tutor_repository import TutorRepository, get_tutor_repository
from tutor_api.schemas.tutor import ErrorResponse, TutorPayload, TutorResponse

logger = logging.getLogger(__name__)

ENTITY_NAME = "tutor"

router = APIRouter(prefix=settings.api_prefix, tags=["Tutors"])


@router.post(
    "/tutors",
    response_model=TutorResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Tutor created", "model": TutorResponse},
        400: {"description": "Payload already has an ID", "model": ErrorResponse},
    },
    summary="Create a new tutor",
)
async def create_tutor(
    payload: TutorPayload,
    response: Response,
    repository: TutorRepository = Depends(get_tutor_repository),
) -> TutorResponse:
    """
    Create a new tutor.

    The identifier is assigned by the database; a payload that already
    carries one is rejected with 400 (error key "idexists").
    """
    logger.debug("REST request to save Tutor : %s", payload)
    if payload.id is not None:
        raise BadRequestAlertError(
            "A new tutor cannot already have an ID", ENTITY_NAME, "idexists"
        )

    result = await repository.save(Tutor(**payload.attributes()))

    response.headers["Location"] = f"{settings.api_prefix}/tutors/{result.id}"
    response.headers.update(alerts.entity_creation_alert(ENTITY_NAME, str(result.id)))
    return TutorResponse.model_validate(result)


@router.put(
    "/tutors",
    response_model=TutorResponse,
    responses={
        200: {"description": "Tutor updated", "model": TutorResponse},
        400: {"description": "Payload has no ID", "model": ErrorResponse},
        404: {"description": "No tutor with that ID", "model": ErrorResponse},
    },
    summary="Update an existing tutor",
)
async def update_tutor(
    payload: TutorPayload,
    response: Response,
    repository: TutorRepository = Depends(get_tutor_repository),
) -> TutorResponse:
    """
    Replace an existing tutor.

    Full overwrite: attributes omitted from the payload are stored as null.
    An unknown identifier is a 404. The stored row is loaded and modified in
    place, so update never creates a row; a concurrent delete makes the
    flush fail instead.
    """
    logger.debug("REST request to update Tutor : %s", payload)
    if payload.id is None:
        raise BadRequestAlertError("Invalid id", ENTITY_NAME, "idnull")
    tutor = await repository.find_by_id(payload.id)
    if tutor is None:
        raise NotFoundError(resource=ENTITY_NAME, resource_id=str(payload.id))

    for column, value in payload.attributes().items():
        setattr(tutor, column, value)
    result = await repository.save(tutor)

    response.headers.update(alerts.entity_update_alert(ENTITY_NAME, str(result.id)))
    return TutorResponse.model_validate(result)


@router.get(
    "/tutors",
    response_model=List[TutorResponse],
    summary="List all tutors",
)
async def get_all_tutors(
    repository: TutorRepository = Depends(get_tutor_repository),
) -> List[TutorResponse]:
    """Every stored tutor, ordered by ID. No filtering or pagination."""
    logger.debug("REST request to get all Tutors")
    tutors = await repository.find_all()
    return [TutorResponse.model_validate(tutor) for tutor in tutors]


@router.get(
    "/tutors/{tutor_id}",
    response_model=TutorResponse,
    responses={
        200: {"description": "The tutor", "model": TutorResponse},
        404: {"description": "Tutor not found", "model": ErrorResponse},
    },
    summary="Get a tutor by ID",
)
async def get_tutor(
    tutor_id: int,
    repository: TutorRepository = Depends(get_tutor_repository),
) -> TutorResponse:
    logger.debug("REST request to get Tutor : %s", tutor_id)
    tutor = await repository.find_by_id(tutor_id)
    if tutor is None:
        raise NotFoundError(resource=ENTITY_NAME, resource_id=str(tutor_id))
    return TutorResponse.model_validate(tutor)


@router.delete(
    "/tutors/{tutor_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a tutor by ID",
)
async def delete_tutor(
    tutor_id: int,
    repository: TutorRepository = Depends(get_tutor_repository),
) -> Response:
    """Delete without an existence check; an unknown ID still answers 204."""
    logger.debug("REST request to delete Tutor : %s", tutor_id)
    await repository.delete_by_id(tutor_id)
    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers=alerts.entity_deletion_alert(ENTITY_NAME, str(tutor_id)),
    )
