from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import DateTime, Float, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from event_ticketing.platform.database.orm_db_setting import Base


if TYPE_CHECKING:
    from event_ticketing.service.ticketing.driven_adapter.model.event_model import EventModel
    from event_ticketing.service.ticketing.driven_adapter.model.user_model import UserModel


class BookingModel(Base):
    __tablename__ = 'booking'

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)  # UUID7
    customer_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    # No FK: bookings outlive a deleted event
    event_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    total_price: Mapped[float] = mapped_column(Float, nullable=False)
    status: Mapped[str] = mapped_column(String(20), default='confirmed', nullable=False)
    booking_reference: Mapped[str] = mapped_column(
        String(32), nullable=False, unique=True, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    customer: Mapped['UserModel'] = relationship(
        'UserModel',
        primaryjoin='foreign(BookingModel.customer_id) == UserModel.id',
        viewonly=True,
        lazy='selectin',
    )
    event: Mapped[Optional['EventModel']] = relationship(
        'EventModel',
        primaryjoin='foreign(BookingModel.event_id) == EventModel.id',
        viewonly=True,
        lazy='selectin',
    )
