# Test Utility Constants

# Test Passwords
DEFAULT_PASSWORD = 'P@ssw0rd'
WRONG_PASSWORD = 'Wr0ngP@ss'

# Test Emails
TEST_ORGANIZER_EMAIL = 'organizer@test.com'
ANOTHER_ORGANIZER_EMAIL = 'another_organizer@test.com'
TEST_CUSTOMER_EMAIL = 'customer@test.com'
ANOTHER_CUSTOMER_EMAIL = 'another_customer@test.com'

# Test Names
TEST_ORGANIZER_NAME = 'Test Organizer'
ANOTHER_ORGANIZER_NAME = 'Another Organizer'
TEST_CUSTOMER_NAME = 'Test Customer'
ANOTHER_CUSTOMER_NAME = 'Another Customer'

# Test Event Data
TEST_EVENT_TITLE = 'Summer Jazz Night'
TEST_EVENT_DESCRIPTION = 'An evening of live jazz by the river'
TEST_EVENT_DATE = '2030-07-15T19:30:00+00:00'
TEST_EVENT_LOCATION = 'Riverside Amphitheatre'
TEST_EVENT_TOTAL_TICKETS = 10
TEST_EVENT_TICKET_PRICE = 50.0
TEST_EVENT_CATEGORY = 'music'
