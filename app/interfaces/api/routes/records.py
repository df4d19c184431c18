"""Routes to register the records the notification rules read."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.application.use_cases.assignments import create_assignment as create_assignment_uc
from app.application.use_cases.attendance import AttendanceMark, record_attendance
from app.application.use_cases.fees import (
    create_fee_record as create_fee_record_uc,
    update_fee_status as update_fee_status_uc,
)
from app.infrastructure.database import get_db
from app.interfaces.api.schemas import (
    AssignmentCreate,
    AssignmentRead,
    AttendanceCreate,
    AttendanceRecordRead,
    FeeRecordCreate,
    FeeRecordRead,
    FeeStatusUpdate,
)

assignments_router = APIRouter(prefix="/assignments", tags=["assignments"])
fees_router = APIRouter(prefix="/fees", tags=["fees"])
attendance_router = APIRouter(prefix="/attendance", tags=["attendance"])


@assignments_router.post("/", response_model=AssignmentRead, status_code=status.HTTP_201_CREATED)
def create_assignment(payload: AssignmentCreate, db: Session = Depends(get_db)):
    """Post an assignment for a branch and semester."""

    try:
        assignment = create_assignment_uc(
            db,
            branch=payload.branch,
            semester=payload.semester,
            title=payload.title,
            description=payload.description,
            due_date=payload.due_date,
            posted_by=payload.posted_by,
            assignment_id=payload.id,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return AssignmentRead.model_validate(assignment)


@fees_router.post("/", response_model=FeeRecordRead, status_code=status.HTTP_201_CREATED)
def create_fee_record(payload: FeeRecordCreate, db: Session = Depends(get_db)):
    """Charge a fee to a student."""

    try:
        fee = create_fee_record_uc(
            db,
            student_uid=payload.student_uid,
            description=payload.description,
            amount=payload.amount,
            due_date=payload.due_date,
            status=payload.status,
            fee_id=payload.id,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return FeeRecordRead.model_validate(fee)


@fees_router.patch("/{fee_id}/status", response_model=FeeRecordRead)
def update_fee_status(fee_id: str, payload: FeeStatusUpdate, db: Session = Depends(get_db)):
    """Change the status of a fee record."""

    try:
        fee = update_fee_status_uc(db, fee_id, status=payload.status, paid_on=payload.paid_on)
    except ValueError as exc:
        detail = str(exc)
        code = (
            status.HTTP_404_NOT_FOUND
            if "not found" in detail
            else status.HTTP_400_BAD_REQUEST
        )
        raise HTTPException(status_code=code, detail=detail) from exc
    return FeeRecordRead.model_validate(fee)


@attendance_router.post(
    "/", response_model=list[AttendanceRecordRead], status_code=status.HTTP_201_CREATED
)
def create_attendance(payload: AttendanceCreate, db: Session = Depends(get_db)):
    """Record the attendance of a period."""

    marks = [AttendanceMark(student_uid=item.student_uid, status=item.status) for item in payload.marks]
    try:
        records = record_attendance(
            db,
            day=payload.day,
            period=payload.period,
            subject=payload.subject,
            marks=marks,
            marked_by=payload.marked_by,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return [AttendanceRecordRead.model_validate(record) for record in records]
