from bookings.infrastructure.scheduling.reminder_scheduler import ReminderScheduler

__all__ = ["ReminderScheduler"]
