from .record import Estimate, Inspection, Minute, TripReport
from .user import User

__all__ = ["User", "Inspection", "TripReport", "Estimate", "Minute"]
