from tunerec.models.base import BaseModel
from tunerec.models.user import User
from tunerec.models.track import Track
from tunerec.models.recommendation import Recommendation

__all__ = [
    "BaseModel",
    "User",
    "Track",
    "Recommendation",
]
