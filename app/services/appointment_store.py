"""
Appointment storage
"""
import threading
from typing import List, Protocol

from app.models import Appointment


class AppointmentStore(Protocol):
    """Append-only appointment storage"""

    def append(self, appointment: Appointment) -> None:
        ...

    def list(self) -> List[Appointment]:
        ...


class InMemoryAppointmentStore:
    """Process-lifetime store, ordered by booking time"""

    def __init__(self):
        self._appointments: List[Appointment] = []
        self._lock = threading.Lock()

    def append(self, appointment: Appointment) -> None:
        with self._lock:
            self._appointments.append(appointment)

    def list(self) -> List[Appointment]:
        """Return a snapshot of all appointments in insertion order"""
        with self._lock:
            return list(self._appointments)

    def __len__(self) -> int:
        with self._lock:
            return len(self._appointments)


# Global instance
_appointment_store = None


def get_appointment_store() -> InMemoryAppointmentStore:
    """Get or create the shared appointment store"""
    global _appointment_store
    if _appointment_store is None:
        _appointment_store = InMemoryAppointmentStore()
    return _appointment_store
