from enum import Enum

class GameState(Enum):
    LOADING = "LOADING"
    PLAYING = "PLAYING"
    RESULT = "RESULT"
