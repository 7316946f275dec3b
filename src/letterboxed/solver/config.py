"""Letter Boxed solver configuration."""

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class SolverConfig(BaseSettings):
    """Configuration settings for the Letter Boxed solver."""

    wall_count: int = 4
    """Number of walls (sides) the puzzle letters are split into. Default: 4."""

    min_word_length: int = 3
    """Shortest admissible word length. Default: 3."""

    deterministic: bool = True
    """Whether to iterate word sets in sorted order and sort the solutions found. Default: True."""

    max_workers: int | None = None
    """Maximum number of worker processes to use.

    If None (default), uses one worker per puzzle letter, capped at os.cpu_count().
    """

    use_parallelism: bool = True
    """Whether to search the branches in a process pool. Default: True.

    If False, each branch is searched in turn in the calling process.
    """

    word_list_path: str = "dictionary.txt"

    log_dir: str = "logs"
    """Directory in which per-run log files are written. Default: "logs"."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = SolverConfig()
