import os
import platform

APP_NAME = "numask"


def _appdata_base() -> str:
    system = platform.system().lower()
    home = os.path.expanduser("~")
    if "windows" in system:
        return os.environ.get("APPDATA") or os.path.join(home, "AppData", "Roaming")
    if "darwin" in system:  # macOS
        return os.path.join(home, "Library", "Application Support")
    # linux/other
    return os.environ.get("XDG_CONFIG_HOME") or os.path.join(home, ".config")


def get_appdata_dir() -> str:
    """Return the per-user configuration directory, creating it if needed."""
    override = os.environ.get("NUMASK_CONFIG_DIR")
    path = override or os.path.join(_appdata_base(), APP_NAME)
    os.makedirs(path, exist_ok=True)
    return path
