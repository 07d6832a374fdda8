from .joke import GeminiJokeGenerator, GenerationError, JokeGenerator, hit_me
from .prompt import JOKE_PROMPT, PROJECT_ID

__all__ = [
    "GeminiJokeGenerator",
    "GenerationError",
    "JokeGenerator",
    "hit_me",
    "JOKE_PROMPT",
    "PROJECT_ID",
]
