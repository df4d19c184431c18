"""Campus user schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class NotificationPreferencesSchema(BaseModel):
    approval: bool = True
    assignment_deadline: bool = True
    fee_due: bool = True
    low_attendance: bool = True

    model_config = ConfigDict(from_attributes=True, extra="forbid")


class NotificationPreferencesUpdate(BaseModel):
    approval: bool | None = None
    assignment_deadline: bool | None = None
    fee_due: bool | None = None
    low_attendance: bool | None = None

    model_config = ConfigDict(extra="forbid")


class CampusUserUpsert(BaseModel):
    role: str = Field(..., max_length=20)
    is_approved: bool = False
    display_name: str | None = Field(default=None, max_length=120)
    email: EmailStr | None = None
    rejection_reason: str | None = None
    branch: str | None = Field(default=None, max_length=50)
    semester: str | None = Field(default=None, max_length=20)
    notification_preferences: NotificationPreferencesSchema | None = None


class CampusUserRead(BaseModel):
    uid: str
    role: str
    is_approved: bool
    display_name: str | None
    email: str | None
    rejection_reason: str | None
    branch: str | None
    semester: str | None
    notification_preferences: NotificationPreferencesSchema

    model_config = ConfigDict(from_attributes=True)
