from pathlib import Path

from dotenv import load_dotenv


def pytest_configure(config):
    """
    Called before PyTest collects tests.

    Load environment variables from `.env.test.local` (preferred) or fall back to `.env`,
    so integration tests can find RAI_RPC_URL. Unit tests need neither file.
    """
    project_root = Path(__file__).resolve().parent.parent
    env_test_local = project_root / ".env.test.local"
    env_default = project_root / ".env"

    if env_test_local.exists():
        load_dotenv(env_test_local)
    elif env_default.exists():
        load_dotenv(env_default)
