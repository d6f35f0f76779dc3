"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from event_ticketing.service.ticketing.app.command import (
    cancel_booking_use_case,
    create_booking_use_case,
    create_event_use_case,
    delete_event_use_case,
    process_notifications_use_case,
    publish_event_use_case,
    sign_up_use_case,
    update_event_use_case,
)
from event_ticketing.service.ticketing.app.query import (
    get_booking_use_case,
    get_event_use_case,
    list_bookings_use_case,
    list_events_use_case,
)
from event_ticketing.service.ticketing.driving_adapter.http_controller import auth_controller


WIRE_MODULES: list[ModuleType] = [
    sign_up_use_case,
    create_event_use_case,
    update_event_use_case,
    publish_event_use_case,
    delete_event_use_case,
    create_booking_use_case,
    cancel_booking_use_case,
    process_notifications_use_case,
    get_event_use_case,
    list_events_use_case,
    get_booking_use_case,
    list_bookings_use_case,
    auth_controller,
]
