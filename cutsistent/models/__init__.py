from .user import User
from .profile import Profile
from .food_entry import FoodEntry
from .daily_log import DailyLog

__all__ = ["User", "Profile", "FoodEntry", "DailyLog"]
