"""Schemas for assignments, fee records and attendance marks."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class AssignmentCreate(BaseModel):
    id: str | None = Field(default=None, max_length=64)
    branch: str = Field(..., min_length=1, max_length=50)
    semester: str = Field(..., min_length=1, max_length=20)
    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    due_date: datetime | None = None
    posted_by: str | None = None


class AssignmentRead(BaseModel):
    id: str
    branch: str
    semester: str
    title: str
    description: str | None
    due_date: datetime | None
    posted_by: str | None
    posted_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class FeeRecordCreate(BaseModel):
    id: str | None = Field(default=None, max_length=64)
    student_uid: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1, max_length=200)
    amount: float = Field(..., ge=0)
    due_date: datetime
    status: str = "pending"


class FeeStatusUpdate(BaseModel):
    status: str
    paid_on: date | None = None

    model_config = ConfigDict(extra="forbid")


class FeeRecordRead(BaseModel):
    id: str
    student_uid: str
    description: str
    amount: float
    due_date: datetime
    status: str
    paid_on: date | None
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class AttendanceMarkItem(BaseModel):
    student_uid: str = Field(..., min_length=1)
    status: str


class AttendanceCreate(BaseModel):
    """A period's worth of attendance marks."""

    day: date
    period: int = Field(..., ge=1)
    subject: str = Field(..., min_length=1)
    marked_by: str | None = None
    marks: list[AttendanceMarkItem] = Field(..., min_length=1)


class AttendanceRecordRead(BaseModel):
    id: str
    student_uid: str
    status: str
    date: date | None
    period: int | None
    subject: str | None
    marked_by: str | None

    model_config = ConfigDict(from_attributes=True)
