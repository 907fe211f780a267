import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

class Settings:
    # Base directory for relative puzzle/grid paths given on the command line
    PUZZLE_DIR: Path = Path(os.getenv("PICROSS_PUZZLE_DIR", "puzzles"))

    # Display symbols
    FILLED_SYMBOL: str = os.getenv("PICROSS_FILLED_SYMBOL", "█ ")
    EMPTY_SYMBOL: str = os.getenv("PICROSS_EMPTY_SYMBOL", "· ")

settings = Settings()
