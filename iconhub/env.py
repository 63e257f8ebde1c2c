from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@lru_cache(maxsize=None)
def load_env(filename: str = ".env") -> bool:
    """Load ``filename`` from the project root into ``os.environ``.

    Variables already set in the environment win. Returns whether the file was found.
    """

    env_file = PROJECT_ROOT / filename
    if not env_file.is_file():
        return False
    return load_dotenv(env_file, override=False) or True
