from __future__ import annotations
import logging, logging.config
from pathlib import Path
import yaml

_configured = False


def setup_logging(config_path: str | None = None, level: str | None = None) -> None:
    """
    Configure the "rentadvisor" loggers once per process.
    Search order for logging.yaml:
      1) explicit config_path arg (if provided)
      2) package folder (rentadvisor/logging.yaml)
      3) project root (../../logging.yaml)
      4) current working directory (logging.yaml)
    `level` (usually Settings.LOG_LEVEL) overrides the level of the
    "rentadvisor" logger after the file is loaded.
    """
    global _configured
    if _configured:
        return

    candidates: list[Path] = []
    if config_path:
        candidates.append(Path(config_path))

    here = Path(__file__).resolve().parent
    candidates.extend([
        here / "logging.yaml",
        here.parent.parent / "logging.yaml",
        Path.cwd() / "logging.yaml",
    ])

    loaded_from: Path | None = None
    for p in candidates:
        if not p.exists():
            continue
        try:
            with open(p, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
            logging.config.dictConfig(config)
            loaded_from = p
            break
        except (OSError, ValueError, TypeError, yaml.YAMLError):
            # broken file, try next candidate
            continue

    if loaded_from is None:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
        logging.getLogger("rentadvisor").warning("logging.yaml not found; using basicConfig")
    else:
        logging.getLogger("rentadvisor").debug("Loaded logging config from %s", loaded_from)

    if level:
        logging.getLogger("rentadvisor").setLevel(level.upper())
    _configured = True
