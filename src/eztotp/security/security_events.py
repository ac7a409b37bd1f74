"""
Security Events Module

Tracks verification outcomes that matter for monitoring: rejected codes,
scratch code use and unusable timestamps. Repeated rejections raise an
alert in the log so guessing attempts stand out.

Key Features:
- Event categorization and counting
- Threshold-based alerting with a cooldown period
- Thread-safe counters, since one tracker may serve many verifiers
"""

import time
import logging
import threading

from .. import config

# Configure logging
logger = logging.getLogger(__name__)

MALFORMED_CODE = 'malformed_code'
NO_MATCH = 'no_match'
SCRATCH_USED = 'scratch_used'
INVALID_TIMESTAMP = 'invalid_timestamp'

EVENT_TYPES = (MALFORMED_CODE, NO_MATCH, SCRATCH_USED, INVALID_TIMESTAMP)

# Events that count towards the rejection alert
REJECTION_EVENTS = (MALFORMED_CODE, NO_MATCH)


class SecurityEventTracker:
    """
    Tracks security events and alerts on repeated rejections.
    """

    def __init__(self, alert_threshold=None, cooldown_period=None, clock=time.monotonic):
        """
        Initialize the security event tracker.

        Args:
            alert_threshold: Rejections needed before an alert (default from config)
            cooldown_period: Minimum seconds between alerts (default from config)
            clock: Callable returning the current time in seconds
        """
        self._counts = dict.fromkeys(EVENT_TYPES, 0)
        self._rejections_since_alert = 0
        self._lock = threading.Lock()
        self._last_alert_time = None
        self._alert_threshold = alert_threshold if alert_threshold is not None else config.ALERT_THRESHOLD
        self._cooldown_period = cooldown_period if cooldown_period is not None else config.ALERT_COOLDOWN
        self._clock = clock
        self.alerts_raised = 0

    def record_event(self, event_type, details=None):
        """
        Record a security event and alert if the threshold is reached.

        Args:
            event_type: One of EVENT_TYPES
            details: Additional details about the event (optional, must not
                contain codes or secrets)

        Returns:
            bool: True if event was recorded, False otherwise
        """
        with self._lock:
            if event_type not in self._counts:
                logger.warning(f"Unknown security event type: {event_type}")
                return False

            self._counts[event_type] += 1

            log_message = f"Security event: {event_type}"
            if details:
                log_message += f", Details: {details}"
            if event_type in REJECTION_EVENTS or event_type == INVALID_TIMESTAMP:
                logger.warning(log_message)
            else:
                logger.info(log_message)

            if event_type in REJECTION_EVENTS:
                self._rejections_since_alert += 1
                if self._rejections_since_alert >= self._alert_threshold:
                    now = self._clock()
                    if self._last_alert_time is None or (now - self._last_alert_time) > self._cooldown_period:
                        self._last_alert_time = now
                        self._handle_security_alert(self._rejections_since_alert)
                        self._rejections_since_alert = 0

            return True

    def _handle_security_alert(self, count):
        self.alerts_raised += 1
        logger.critical(f"SECURITY ALERT: {count} rejected verification attempts")

    def get_event_count(self, event_type):
        """
        Get the count of a specific event type.

        Returns:
            int: Count of the specified event type, 0 for unknown types
        """
        with self._lock:
            return self._counts.get(event_type, 0)

    def reset_counters(self):
        """Reset all security event counters."""
        with self._lock:
            for key in self._counts:
                self._counts[key] = 0
            self._rejections_since_alert = 0
            self._last_alert_time = None
            self.alerts_raised = 0


# Create a global instance for convenience
tracker = SecurityEventTracker()


def record_security_event(event_type, details=None):
    """Convenience function to record a security event using the global tracker."""
    return tracker.record_event(event_type, details)


def get_security_event_count(event_type):
    """Convenience function to get a security event count using the global tracker."""
    return tracker.get_event_count(event_type)


def reset_security_counters():
    """Convenience function to reset security counters using the global tracker."""
    tracker.reset_counters()
