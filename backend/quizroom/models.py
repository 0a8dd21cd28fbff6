import threading
import uuid
from typing import List, Optional


class Player:
    def __init__(self, name: str, token: Optional[str] = None, id: Optional[str] = None):
        self.id = id or str(uuid.uuid4())
        self.name = name
        self.token = token or str(uuid.uuid4())


class Score:
    def __init__(self, player: Player, points: int = 0):
        self.player = player
        self.points = points

    def to_dict(self):
        return {
            'id': self.player.id,
            'name': self.player.name,
            'points': self.points,
        }


class Scoreboard:
    """Scores for one room, kept in join order.

    Callers hold ``lock`` around anything that reads or mutates ``scores``.
    """

    def __init__(self):
        self.scores: List[Score] = []
        self.lock = threading.Lock()

    def find_or_create(self, player: Player) -> Score:
        for score in self.scores:
            if score.player.id == player.id:
                return score
        score = Score(player)
        self.scores.append(score)
        return score

    def snapshot(self) -> List[dict]:
        with self.lock:
            return [s.to_dict() for s in self.scores]


class Room:
    def __init__(self, name: str, slug: str, image: str = ''):
        self.name = name
        self.slug = slug
        self.image = image
        self.scoreboard = Scoreboard()

