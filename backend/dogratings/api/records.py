"""Records API — validate, save and read people, dogs and ratings."""

from typing import Type

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from dogratings.models.requests import DogPayload, PersonPayload, RatingPayload
from dogratings.models.responses import (
    RecordRejectedResponse,
    RecordResponse,
    ValidationReportResponse,
)
from dogratings.records import Dog, Person, Rating, Record
from dogratings.validators import ValidationContext

router = APIRouter()


def _context(request: Request) -> ValidationContext:
    """Validation context bound to the app's store and geography."""
    return ValidationContext(
        store=request.app.state.store,
        geography=request.app.state.geography,
    )


def _record_response(record: Record) -> RecordResponse:
    attributes = record.to_dict()
    attributes.pop("id")
    return RecordResponse(type=record.record_type, id=record.id, attributes=attributes)


def _register(prefix: str, record_cls: Type[Record], payload_cls: Type[BaseModel]) -> None:
    """Add validate / create / show routes for one record type."""
    tag = record_cls.__name__

    async def validate_record(body: payload_cls, request: Request) -> ValidationReportResponse:
        record = record_cls(**body.model_dump())
        report = record.validate(_context(request))
        return ValidationReportResponse.from_report(report)

    async def create_record(body: payload_cls, request: Request):
        record = record_cls(**body.model_dump())
        if not record.save(_context(request)):
            rejected = RecordRejectedResponse(
                type=tag,
                report=ValidationReportResponse.from_report(record.errors),
            )
            return JSONResponse(status_code=422, content=rejected.model_dump(mode="json"))
        return JSONResponse(status_code=201, content=_record_response(record).model_dump(mode="json"))

    async def show_record(record_id: int, request: Request) -> RecordResponse:
        record = request.app.state.store.get(tag, record_id)
        return _record_response(record)

    router.add_api_route(
        f"/{prefix}/validate", validate_record, methods=["POST"],
        response_model=ValidationReportResponse, tags=[tag], name=f"validate_{prefix}",
    )
    router.add_api_route(
        f"/{prefix}", create_record, methods=["POST"], status_code=201,
        responses={422: {"model": RecordRejectedResponse}}, tags=[tag], name=f"create_{prefix}",
    )
    router.add_api_route(
        f"/{prefix}/{{record_id}}", show_record, methods=["GET"],
        response_model=RecordResponse, tags=[tag], name=f"show_{prefix}",
    )


_register("people", Person, PersonPayload)
_register("dogs", Dog, DogPayload)
_register("ratings", Rating, RatingPayload)


# ─── Associations ───

@router.get("/people/{person_id}/dogs", response_model=list[RecordResponse], tags=["Person"])
async def list_person_dogs(person_id: int, request: Request):
    """Dogs owned by a person."""
    store = request.app.state.store
    person = store.get("Person", person_id)
    return [_record_response(dog) for dog in person.dogs(store)]


@router.get("/people/{person_id}/ratings", response_model=list[RecordResponse], tags=["Person"])
async def list_person_ratings(person_id: int, request: Request):
    """Ratings a person gave as judge."""
    store = request.app.state.store
    person = store.get("Person", person_id)
    return [_record_response(rating) for rating in person.ratings(store)]


@router.get("/dogs/{dog_id}/ratings", response_model=list[RecordResponse], tags=["Dog"])
async def list_dog_ratings(dog_id: int, request: Request):
    """Ratings a dog received."""
    store = request.app.state.store
    dog = store.get("Dog", dog_id)
    return [_record_response(rating) for rating in dog.ratings(store)]
