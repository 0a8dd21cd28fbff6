import threading
from typing import Dict, Iterable, List, Optional

from quizroom.models import Player, Room, Score


class QuizState:
    """In-memory rooms, players and scores for one running app.

    Each room's scoreboard has its own lock; the player directory has one
    more. Locks are only held while a scoreboard or the directory is being
    read or changed, never while rendering or broadcasting.
    """

    def __init__(self, rooms: Iterable[dict]):
        self.rooms: List[Room] = [
            Room(name=r['name'], slug=r['slug'], image=r.get('image', '')) for r in rooms
        ]
        self._players_by_token: Dict[str, Player] = {}
        self._players_lock = threading.Lock()

    def find_room(self, slug: Optional[str]) -> Optional[Room]:
        if not slug:
            return None
        for room in self.rooms:
            if room.slug == slug:
                return room
        return None

    def find_or_create_score(self, room: Room, player: Player) -> Score:
        with room.scoreboard.lock:
            return room.scoreboard.find_or_create(player)

    def update_score(self, room: Room, player: Player, delta: int) -> Score:
        with room.scoreboard.lock:
            score = room.scoreboard.find_or_create(player)
            score.points += delta
            return score

    def register_player(self, room: Room, name: Optional[str], token: Optional[str] = None) -> Player:
        """Create a player with a fresh id and token and seat them in ``room``.

        A caller-supplied ``token`` is used as-is; it must not already belong
        to another player.
        """
        with self._players_lock:
            if token is not None and token in self._players_by_token:
                raise ValueError('token already issued')
            player = Player(name=name or '', token=token)
            while player.token in self._players_by_token:
                player = Player(name=player.name)
            self._players_by_token[player.token] = player
        self.find_or_create_score(room, player)
        return player

    def find_player_by_token(self, token: Optional[str]) -> Optional[Player]:
        if not token:
            return None
        with self._players_lock:
            return self._players_by_token.get(token)

    def player_count(self) -> int:
        with self._players_lock:
            return len(self._players_by_token)
