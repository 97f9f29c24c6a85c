import os
import sys
from typing import Optional

from fast_seed.utils.env_utils import configure_env
from fast_seed.utils.logging import setup_logging

_booted = False


def boot(*, env_file_name: Optional[str] = None, log_file_name: Optional[str] = None) -> None:
    """
    Prepare the process for seeding.
    - Makes the project root importable so `app.db.seeders.*` resolves
    - Loads environment variables
    - Sets up logging

    Args:
        env_file_name: Optional env file to load instead of `.env.<ENV>` / `.env`.
        log_file_name: Optional log file name (defaults to LOG_FILE_NAME or app.log).
    """
    global _booted

    project_root = os.environ.get("PROJECT_ROOT") or os.getcwd()
    if project_root and project_root not in sys.path:
        sys.path.insert(0, project_root)

    if _booted:
        return

    configure_env(env_file_name)
    setup_logging(log_file_name)
    _booted = True
