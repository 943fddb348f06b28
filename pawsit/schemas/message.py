from pydantic import BaseModel, Field
from datetime import datetime


class MessageCreate(BaseModel):
    booking_id: str
    sender_id: str
    receiver_id: str
    content: str = Field(..., min_length=1)


class MessageOut(BaseModel):
    id: str
    booking_id: str
    sender_id: str
    receiver_id: str
    content: str
    is_read: bool = False
    created_at: datetime
