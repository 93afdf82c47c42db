"""
People API routes (in-memory, not persisted).
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from api.responses import json_response
from domain.models import Address, Person
from repositories import PeopleRepository

router = APIRouter()


class AddressPayload(BaseModel):
    city: str = ""
    country: str = ""


class PersonPayload(BaseModel):
    id: str = ""
    firstname: str = ""
    lastname: str = ""
    address: Optional[AddressPayload] = None


def get_people_repo(request: Request) -> PeopleRepository:
    return request.app.state.people_repo


def _people_response(people: List[Person]):
    return json_response([p.to_dict() for p in people])


@router.get("")
def list_people(repo: PeopleRepository = Depends(get_people_repo)):
    return _people_response(repo.list_people())


@router.get("/{person_id}")
def get_person(person_id: str, repo: PeopleRepository = Depends(get_people_repo)):
    """Get a person by id; unknown ids yield an empty person, not a 404."""
    person = repo.get_person(person_id) or Person()
    return json_response(person.to_dict())


@router.post("/{person_id}")
def create_person(
    person_id: str,
    payload: Optional[PersonPayload] = None,
    repo: PeopleRepository = Depends(get_people_repo),
):
    """Append a person; the path id always wins over any id in the body."""
    payload = payload or PersonPayload()
    address = None
    if payload.address is not None:
        address = Address(city=payload.address.city, country=payload.address.country)
    person = Person(id=person_id, firstname=payload.firstname, lastname=payload.lastname, address=address)
    return _people_response(repo.add_person(person))


@router.delete("/{person_id}")
def delete_person(person_id: str, repo: PeopleRepository = Depends(get_people_repo)):
    return _people_response(repo.delete_person(person_id))
