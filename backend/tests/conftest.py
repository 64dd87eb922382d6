import pytest
from fastapi.testclient import TestClient #gives you a fake http client that calls the FastAPI routes without running a real server.

from schedpro.core.config import get_settings
from schedpro.main import app
from schedpro.schemas.course import CourseRef
from schedpro.schemas.room import Room


@pytest.fixture() #test client
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def fresh_settings():
    # settings are lru_cached; tests that patch env vars need a clean instance
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def rooms():
    return [
        Room(id="r1", name="A101", type="Classroom", capacity=20, equipment=["Whiteboard"]),
        Room(id="r2", name="B202", type="Lecture Hall", capacity=50, equipment=["Projector", "Smart Board"]),
        Room(id="r3", name="C-Lab", type="Computer Lab", capacity=30, equipment=["Projector", "Computers (30)"]),
    ]


@pytest.fixture
def make_course():
    def _make(course_id, instructor=None, room=None, **extra):
        return CourseRef(
            id=course_id,
            code=extra.pop("code", f"CS{course_id}"),
            name=extra.pop("name", f"Course {course_id}"),
            instructor=instructor,
            room=room,
            **extra,
        )

    return _make
