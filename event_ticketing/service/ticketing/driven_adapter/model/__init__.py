"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from event_ticketing.service.ticketing.driven_adapter.model.booking_model import BookingModel
from event_ticketing.service.ticketing.driven_adapter.model.event_model import EventModel
from event_ticketing.service.ticketing.driven_adapter.model.user_model import UserModel

__all__ = [
    'BookingModel',
    'EventModel',
    'UserModel',
]
