from enum import Enum
from typing import Any, Optional

class MealType(int, Enum):
    BREAKFAST = 1
    LUNCH = 2
    DINNER = 3
    SNACK = 4

    @classmethod
    def parse(cls, value: Any) -> Optional["MealType"]:
        """Convert a stored integer, a numeric string or a member name into a MealType.

        Returns None when the value does not name a known meal type.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                return None
        if isinstance(value, str):
            text = value.strip()
            if text.isascii() and text.isdigit():
                try:
                    return cls.parse(int(text))
                except ValueError:
                    return None
            return cls.__members__.get(text.upper())
        return None
