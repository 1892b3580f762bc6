"""Integration tests: Transcript and grade endpoints."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_get_transcript(async_client: AsyncClient, student_id: int):
    resp = await async_client.get(f"/transcripts/{student_id}")
    assert resp.status_code == 200
    assert resp.json() == {
        "studentId": student_id,
        "studentName": "Test Student",
        "grades": [],
    }


@pytest.mark.asyncio
async def test_get_transcript_not_found(async_client: AsyncClient):
    resp = await async_client.get("/transcripts/9999")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Student not found"}


@pytest.mark.asyncio
async def test_get_transcript_invalid_id(async_client: AsyncClient):
    resp = await async_client.get("/transcripts/invalid-id")
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid ID format"}


@pytest.mark.asyncio
async def test_add_grade(async_client: AsyncClient, student_id: int, transcript_service, db_session):
    resp = await async_client.post(
        f"/transcripts/{student_id}/grades",
        json={"course": "Math 101", "grade": "A"},
    )
    assert resp.status_code == 200
    assert resp.json() == {"message": "Grade added successfully"}

    transcript = await transcript_service.get_transcript(db_session, student_id)
    assert len(transcript.grades) == 1
    assert transcript.grades[0].course == "Math 101"
    assert transcript.grades[0].grade == "A"


@pytest.mark.asyncio
async def test_add_numeric_grade_is_returned_as_text(async_client: AsyncClient, student_id: int):
    resp = await async_client.post(
        f"/transcripts/{student_id}/grades",
        json={"course": "Math 101", "grade": 95},
    )
    assert resp.status_code == 200

    resp = await async_client.get(f"/transcripts/{student_id}")
    assert resp.json()["grades"] == [{"course": "Math 101", "grade": "95"}]


@pytest.mark.asyncio
async def test_add_multiple_grades_keeps_order(async_client: AsyncClient, student_id: int):
    for course, grade in (("Math 101", "A"), ("Physics 201", "B+")):
        resp = await async_client.post(
            f"/transcripts/{student_id}/grades",
            json={"course": course, "grade": grade},
        )
        assert resp.status_code == 200

    resp = await async_client.get(f"/transcripts/{student_id}")
    grades = resp.json()["grades"]
    assert len(grades) == 2
    assert [g["course"] for g in grades] == ["Math 101", "Physics 201"]
    assert grades[1] == {"course": "Physics 201", "grade": "B+"}


@pytest.mark.asyncio
async def test_add_grade_unknown_student(async_client: AsyncClient):
    resp = await async_client.post(
        "/transcripts/9999/grades",
        json={"course": "Math 101", "grade": "A"},
    )
    assert resp.status_code == 404
    assert resp.json() == {"error": "Student not found"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {"grade": "A"},
        {"course": "Math 101"},
        {},
        {"course": "", "grade": "A"},
        {"course": "Math 101", "grade": ""},
    ],
)
async def test_add_grade_validation(async_client: AsyncClient, student_id: int, body: dict):
    resp = await async_client.post(f"/transcripts/{student_id}/grades", json=body)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid request parameters"}


@pytest.mark.asyncio
async def test_add_grade_invalid_id(async_client: AsyncClient):
    resp = await async_client.post(
        "/transcripts/abc/grades",
        json={"course": "Math 101", "grade": "A"},
    )
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_transcript_workflow(async_client: AsyncClient):
    resp = await async_client.post("/students", json={"name": "Workflow Test Student"})
    assert resp.status_code == 201
    student_id = resp.json()["id"]

    for course, grade in (("Math 101", "A"), ("Physics 201", "B+"), ("Chemistry 101", "A-")):
        resp = await async_client.post(
            f"/transcripts/{student_id}/grades",
            json={"course": course, "grade": grade},
        )
        assert resp.status_code == 200

    resp = await async_client.get(f"/transcripts/{student_id}")
    assert resp.status_code == 200
    data = resp.json()
    assert data["studentId"] == student_id
    assert data["studentName"] == "Workflow Test Student"
    assert [g["course"] for g in data["grades"]] == ["Math 101", "Physics 201", "Chemistry 101"]
    math = next(g for g in data["grades"] if g["course"] == "Math 101")
    assert math["grade"] == "A"


@pytest.mark.asyncio
async def test_get_transcript_id_out_of_range(async_client: AsyncClient):
    resp = await async_client.get("/transcripts/99999999999999999999")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Student not found"}


@pytest.mark.asyncio
async def test_add_grade_id_out_of_range(async_client: AsyncClient):
    resp = await async_client.post(
        "/transcripts/99999999999999999999/grades",
        json={"course": "Math 101", "grade": "A"},
    )
    assert resp.status_code == 404
    assert resp.json() == {"error": "Student not found"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {"course": "Math 101", "grade": "x" * 51},
        {"course": "x" * 256, "grade": "A"},
    ],
)
async def test_add_grade_too_long(async_client: AsyncClient, student_id: int, body: dict):
    resp = await async_client.post(f"/transcripts/{student_id}/grades", json=body)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid request parameters"}

    resp = await async_client.get(f"/transcripts/{student_id}")
    assert resp.json()["grades"] == []
