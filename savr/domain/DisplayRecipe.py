"""Recipe projection shown to the user and persisted as a generated meal."""


class DisplayRecipe:
    def __init__(self, id: str = "", emoji: str = "", name: str = "", calories: int = 0,
                 minutes: int = 0, match_badge: str = "", is_selected: bool = False):
        # Always the stable catalog id
        self.id = id
        self.emoji = emoji
        self.name = name
        self.calories = calories
        self.minutes = minutes
        self.match_badge = match_badge
        self.is_selected = is_selected

    def __str__(self) -> str:
        return f"{self.emoji} {self.name} - {self.calories} kcal - {self.minutes} min - {self.match_badge}"

    __repr__ = __str__

    def to_dict(self):
        return {
            "id": self.id,
            "emoji": self.emoji,
            "name": self.name,
            "calories": self.calories,
            "minutes": self.minutes,
            "match_badge": self.match_badge,
            "is_selected": self.is_selected,
        }
