"""Pydantic models for API request/response."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from domain.model.message import MailboxEntry, Message, MessageDetail
from domain.model.user import User, UserSummary


# ── requests ─────────────────────────────────────────────

class RegisterRequest(BaseModel):
    """Request model for user registration."""
    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1)
    first_name: str
    last_name: str
    phone: str


class LoginRequest(BaseModel):
    """Request model for user login."""
    username: str
    password: str


class SendMessageRequest(BaseModel):
    """Request model for sending a message. The sender comes from the token."""
    to_username: str = Field(..., min_length=1)
    body: str = Field(..., min_length=1)


# ── responses ────────────────────────────────────────────

class TokenResponse(BaseModel):
    token: str


class UserSummaryResponse(BaseModel):
    username: str
    first_name: str
    last_name: str
    phone: str

    @classmethod
    def from_domain(cls, summary: UserSummary) -> "UserSummaryResponse":
        return cls(
            username=summary.username,
            first_name=summary.first_name,
            last_name=summary.last_name,
            phone=summary.phone,
        )


class UserDetailResponse(UserSummaryResponse):
    join_at: datetime
    last_login_at: Optional[datetime] = None

    @classmethod
    def from_user(cls, user: User) -> "UserDetailResponse":
        return cls(
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
            phone=user.phone,
            join_at=user.join_at,
            last_login_at=user.last_login_at,
        )


class UserListResponse(BaseModel):
    users: list[UserSummaryResponse]


class UserEnvelope(BaseModel):
    user: UserDetailResponse


class InboxEntryResponse(BaseModel):
    id: int
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None
    from_user: UserSummaryResponse


class OutboxEntryResponse(BaseModel):
    id: int
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None
    to_user: UserSummaryResponse


class InboxResponse(BaseModel):
    messages: list[InboxEntryResponse]

    @classmethod
    def from_entries(cls, entries: list[MailboxEntry]) -> "InboxResponse":
        return cls(messages=[
            InboxEntryResponse(
                id=e.id, body=e.body, sent_at=e.sent_at, read_at=e.read_at,
                from_user=UserSummaryResponse.from_domain(e.counterpart),
            )
            for e in entries
        ])


class OutboxResponse(BaseModel):
    messages: list[OutboxEntryResponse]

    @classmethod
    def from_entries(cls, entries: list[MailboxEntry]) -> "OutboxResponse":
        return cls(messages=[
            OutboxEntryResponse(
                id=e.id, body=e.body, sent_at=e.sent_at, read_at=e.read_at,
                to_user=UserSummaryResponse.from_domain(e.counterpart),
            )
            for e in entries
        ])


class MessageResponse(BaseModel):
    """Message as created: raw usernames, no joined user cards."""
    id: int
    from_username: str
    to_username: str
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, message: Message) -> "MessageResponse":
        return cls(
            id=message.id,
            from_username=message.from_username,
            to_username=message.to_username,
            body=message.body,
            sent_at=message.sent_at,
            read_at=message.read_at,
        )


class MessageDetailResponse(BaseModel):
    id: int
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None
    from_user: UserSummaryResponse
    to_user: UserSummaryResponse

    @classmethod
    def from_domain(cls, detail: MessageDetail) -> "MessageDetailResponse":
        return cls(
            id=detail.id,
            body=detail.body,
            sent_at=detail.sent_at,
            read_at=detail.read_at,
            from_user=UserSummaryResponse.from_domain(detail.from_user),
            to_user=UserSummaryResponse.from_domain(detail.to_user),
        )


class ReadReceiptResponse(BaseModel):
    id: int
    read_at: Optional[datetime] = None


class MessageEnvelope(BaseModel):
    message: MessageResponse


class MessageDetailEnvelope(BaseModel):
    message: MessageDetailResponse


class ReadReceiptEnvelope(BaseModel):
    message: ReadReceiptResponse
