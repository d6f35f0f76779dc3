# API Route Constants

# Base API
API_BASE = '/api'

# Auth routes
AUTH_BASE = f'{API_BASE}/auth'
AUTH_SIGNUP = f'{AUTH_BASE}/signup'
AUTH_LOGIN = f'{AUTH_BASE}/login'
AUTH_ME = f'{AUTH_BASE}/me'

# Event routes
EVENT_BASE = f'{API_BASE}/events'
EVENT_CREATE = EVENT_BASE
EVENT_LIST = EVENT_BASE
EVENT_GET = f'{EVENT_BASE}/{{event_id}}'
EVENT_UPDATE = f'{EVENT_BASE}/{{event_id}}'
EVENT_DELETE = f'{EVENT_BASE}/{{event_id}}'
EVENT_PUBLISH = f'{EVENT_BASE}/{{event_id}}/publish'

# Booking routes
BOOKING_BASE = f'{API_BASE}/bookings'
BOOKING_CREATE = BOOKING_BASE
BOOKING_LIST = BOOKING_BASE
BOOKING_GET = f'{BOOKING_BASE}/{{booking_id}}'
BOOKING_CANCEL = f'{BOOKING_BASE}/{{booking_id}}/cancel'
BOOKING_BY_EVENT = f'{BOOKING_BASE}/event/{{event_id}}/bookings'

# System routes
PROCESS_JOBS = f'{API_BASE}/process-jobs'
HEALTH = f'{API_BASE}/health'
