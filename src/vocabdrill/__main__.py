"""Allow `python -m vocabdrill FILE [LESSON_NUMBER] [LESSON_TYPE]`."""

from .main import main_entry

if __name__ == "__main__":
    main_entry()
