from backend.models.leaderboard import LeaderboardEntry, LeaderboardStore, crowned
from backend.models.question import QUESTIONS_PER_ROUND, Difficulty, Question
from backend.models.savegame import SaveRecord, SaveStore

__all__ = [
    "QUESTIONS_PER_ROUND",
    "Difficulty",
    "LeaderboardEntry",
    "LeaderboardStore",
    "Question",
    "SaveRecord",
    "SaveStore",
    "crowned",
]
