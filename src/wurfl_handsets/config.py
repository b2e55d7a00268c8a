import yaml
from importlib import resources
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_PATH = PROJECT_ROOT / "config" / "wurfl_handsets.yml"
DEFAULTS_RESOURCE = "defaults.yml"

class WHConfig:
    def __init__(self, data, base_dir: Path):
        self.logging = data.get("logging") or {}
        self.registry = data.get("registry") or {}
        self.debug = data.get("debug", False)
        # relative paths (log dir) resolve against this
        self.base_dir = base_dir

    @property
    def strict_links(self) -> bool:
        return bool(self.registry.get("strict_links", False))

def load_config(path: Path = CONFIG_PATH) -> 'WHConfig':
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return WHConfig(data, base_dir=path.resolve().parents[1])

def load_default_config() -> 'WHConfig':
    text = resources.files("wurfl_handsets").joinpath(DEFAULTS_RESOURCE).read_text(encoding="utf-8")
    return WHConfig(yaml.safe_load(text) or {}, base_dir=Path.cwd())

_config_cache = None

def get_config() -> 'WHConfig':
    """Project config when checked out, packaged defaults when installed."""
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config() if CONFIG_PATH.exists() else load_default_config()
    return _config_cache

def reset_config() -> None:
    global _config_cache
    _config_cache = None
