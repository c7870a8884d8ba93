"""
FastAPI backend: REST API over the persons CSV source.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

_REPO_ROOT = Path(__file__).resolve().parent.parent.parent

# Load .env from repo root (when run from repo root or from Docker)
for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
    if path.exists():
        load_dotenv(path)
        break

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from persons.application import PersonService
from persons.domain import Person
from persons.infrastructure import CsvPersonRepository

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO",
)
logger = logging.getLogger(__name__)

DEFAULT_CSV_NAME = "sample-input.csv"


def get_csv_path() -> Path:
    """Return path to the persons CSV (PERSONS_CSV_PATH env or sample-input.csv at repo root)."""
    path = os.environ.get("PERSONS_CSV_PATH", "").strip()
    if path:
        return Path(path).resolve()
    return _REPO_ROOT / DEFAULT_CSV_NAME


def _get_repository() -> CsvPersonRepository:
    return CsvPersonRepository(get_csv_path())


def _get_cached_service(app: FastAPI) -> PersonService:
    # One repository per process: runtime additions live in it.
    if getattr(app.state, "service", None) is None:
        app.state.service = PersonService(_get_repository())
    return app.state.service


def get_service(request: Request) -> PersonService:
    return _get_cached_service(request.app)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.service = None
    repo = _get_repository()
    logger.info("Persons source: %s", repo.path)
    if not repo.source_exists():
        logger.warning("Persons source %s not found; serving in-memory additions only", repo.path)
    app.state.service = PersonService(repo)
    yield


app = FastAPI(title="Persons API", lifespan=lifespan)


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: persons ---


class PersonBody(BaseModel):
    id: int | None = None
    name: str = ""
    lastname: str = ""
    zipcode: str = ""
    city: str = ""
    color: str = ""


class PersonItem(BaseModel):
    id: int
    name: str
    lastname: str
    zipcode: str
    city: str
    color: str


def _to_item(person: Person) -> PersonItem:
    return PersonItem(
        id=person.id,
        name=person.name,
        lastname=person.lastname,
        zipcode=person.zipcode,
        city=person.city,
        color=person.color,
    )


@app.get("/persons")
def list_persons(service: PersonService = Depends(get_service)) -> list[PersonItem]:
    return [_to_item(p) for p in service.list_persons()]


@app.get("/persons/color/{color}")
def persons_by_color(
    color: str, service: PersonService = Depends(get_service)
) -> list[PersonItem]:
    return [_to_item(p) for p in service.persons_by_color(color)]


@app.get("/persons/{person_id}")
def get_person(
    person_id: int, service: PersonService = Depends(get_service)
) -> PersonItem:
    person = service.get_person(person_id)
    if person is None:
        raise HTTPException(status_code=404, detail="Person not found")
    return _to_item(person)


@app.post("/persons", status_code=201)
def create_person(
    body: PersonBody,
    request: Request,
    service: PersonService = Depends(get_service),
):
    """Add a person in memory. The id is assigned here; any id in the body is ignored."""
    created = service.add_person(
        Person(
            name=body.name,
            lastname=body.lastname,
            zipcode=body.zipcode,
            city=body.city,
            color=body.color,
        )
    )
    location = request.app.url_path_for("get_person", person_id=str(created.id))
    return JSONResponse(
        content=_to_item(created).model_dump(),
        status_code=201,
        headers={"Location": str(location)},
    )
