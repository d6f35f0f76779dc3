from prometheus_client import Counter


class TicketingMetrics:
    """
    Event Ticketing Core Metrics Collector

    Tracks inventory transitions (bookings, cancellations) and the
    notification side channel.
    """

    def __init__(self) -> None:
        # ========== Booking / Inventory Metrics ==========
        self.booking_requests = Counter(
            'booking_requests_total',
            'Total booking requests',
            ['result'],  # result: confirmed/not_published/sold_out/not_found
        )

        self.tickets_booked = Counter('tickets_booked_total', 'Tickets taken from inventory')

        self.booking_cancellations = Counter(
            'booking_cancellations_total', 'Bookings cancelled by customers'
        )

        self.tickets_released = Counter(
            'tickets_released_total', 'Tickets returned to inventory by cancellations'
        )

        # ========== Notification Metrics ==========
        self.notifications_enqueued = Counter(
            'notifications_enqueued_total',
            'Notifications handed to the dispatcher',
            ['job_type', 'backend'],  # backend: redis/memory
        )

        self.notifications_processed = Counter(
            'notifications_processed_total',
            'Notifications rendered by the job processor',
            ['job_type', 'result'],
        )

    # ========== Helper Methods ==========

    def record_booking(self, *, result: str, quantity: int = 0) -> None:
        self.booking_requests.labels(result=result).inc()
        if quantity:
            self.tickets_booked.inc(quantity)

    def record_cancellation(self, *, quantity: int) -> None:
        self.booking_cancellations.inc()
        self.tickets_released.inc(quantity)

    def record_notification_enqueued(self, *, job_type: str, backend: str) -> None:
        self.notifications_enqueued.labels(job_type=job_type, backend=backend).inc()

    def record_notification_processed(self, *, job_type: str, success: bool) -> None:
        self.notifications_processed.labels(
            job_type=job_type, result='success' if success else 'failed'
        ).inc()


# Global metrics instance
metrics = TicketingMetrics()
