import json
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "csvdesk")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# stands for the directory this program lives in
PROGRAM_DIR_TOKEN = "{CUR}"
PROGRAM_DIR = os.path.dirname(os.path.abspath(__file__))

# default settings
DEFAULT_CONFIG = {
    "master": {
        "directory": "{CUR}/data/master_csv/",
        "history": "{CUR}/data/history/",
    },
    "extension": "csv",
    "infer_sample_limit": 100,
}


class ConfigError(Exception):
    pass


def write_default_config(path: str) -> None:
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(DEFAULT_CONFIG, f, indent=2)
        f.write("\n")


def resolve_path(value: str, program_dir: str | None = None) -> str:
    base = program_dir if program_dir is not None else PROGRAM_DIR
    return os.path.normpath(value.replace(PROGRAM_DIR_TOKEN, base))


def load_config(path: str | None = None, program_dir: str | None = None) -> dict:
    """Read the settings file, writing the default one on first run.

    Anything other than a missing file (unreadable, invalid JSON, wrong
    shape) raises ConfigError.
    """
    path = path or CONFIG_JSON
    if not os.path.exists(path):
        try:
            write_default_config(path)
        except OSError as e:
            raise ConfigError(f"cannot create default config {path}: {e}") from e

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be an object")
    master = data.get("master")
    if not isinstance(master, dict):
        raise ConfigError(f"{path}: missing 'master' section")
    directory = master.get("directory")
    history = master.get("history")
    if not isinstance(directory, str) or not directory.strip():
        raise ConfigError(f"{path}: 'master.directory' must be a path string")
    if not isinstance(history, str) or not history.strip():
        raise ConfigError(f"{path}: 'master.history' must be a path string")

    extension = data.get("extension", DEFAULT_CONFIG["extension"])
    if not isinstance(extension, str) or not extension.strip(". "):
        raise ConfigError(f"{path}: 'extension' must be a non-empty string")

    limit = data.get("infer_sample_limit", DEFAULT_CONFIG["infer_sample_limit"])
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ConfigError(f"{path}: 'infer_sample_limit' must be a positive integer")

    return {
        "MASTER_DIRECTORY": resolve_path(directory, program_dir),
        "ARCHIVE_DIRECTORY": resolve_path(history, program_dir),
        "EXTENSION": extension.strip(". "),
        "INFER_SAMPLE_LIMIT": limit,
    }
