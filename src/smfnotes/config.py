# src/smfnotes/config.py
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Optional
import copy
import yaml

from .timeline import DEFAULT_BPM

# Paket-Root: .../src/smfnotes
PKG_ROOT = Path(__file__).resolve().parent
DEFAULT_CFG_PATH = PKG_ROOT / "config.default.yaml"
USER_CFG_PATH = Path.home() / ".config" / "smfnotes" / "config.yaml"

def _safe_load(path: Path) -> Dict[str, Any]:
    try:
        if path.exists():
            return yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        # Default-/User-Datei kaputt: mit leeren Werten weiter
        pass
    return {}

def _deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    out = copy.deepcopy(a)
    for k, v in (b or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out

def load_config(
    extra_path: Optional[Path] = None,
    user_path: Optional[Path] = None,
    default_path: Optional[Path] = None,
) -> Dict[str, Any]:
    """
    Lädt Default + User-Config und optional eine explizit angegebene Datei
    (--config). Die explizite Datei muss existieren und gültiges YAML sein,
    sonst fliegt OSError bzw. yaml.YAMLError.
    """
    dpath = Path(default_path) if default_path else DEFAULT_CFG_PATH
    upath = Path(user_path) if user_path else USER_CFG_PATH

    cfg = _deep_merge(_safe_load(dpath), _safe_load(upath))
    if extra_path is not None:
        extra = yaml.safe_load(Path(extra_path).read_text(encoding="utf-8")) or {}
        if not isinstance(extra, dict):
            raise yaml.YAMLError(f"{extra_path}: top level must be a mapping")
        cfg = _deep_merge(cfg, extra)

    cfg.setdefault("default_bpm", DEFAULT_BPM)
    cfg.setdefault("output", {})
    return cfg

def get_default_bpm(cfg: Dict[str, Any]) -> float:
    try:
        bpm = float(cfg.get("default_bpm", DEFAULT_BPM))
    except (TypeError, ValueError):
        return DEFAULT_BPM
    return bpm if bpm != 0 else DEFAULT_BPM

def get_output(cfg: Dict[str, Any]) -> Dict[str, Any]:
    out = cfg.get("output") or {}
    return {
        "separator": str(out.get("separator", "\t")),
        "header": bool(out.get("header", False)),
    }
