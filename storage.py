import os
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Iterable

from models import TagSummary

logger = logging.getLogger(__name__)


def ensure_dir(path: str):
    if path:
        Path(path).mkdir(parents=True, exist_ok=True)


def save_raw_json(data: Any, out_path: str) -> bool:
    try:
        ensure_dir(os.path.dirname(out_path))
        with open(out_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        return True
    except (OSError, TypeError, ValueError) as e:
        logger.error(f"Error saving JSON to {out_path}: {e}")
        return False


def save_tag_summaries(tags: Iterable[TagSummary], out_path: str) -> bool:
    """Write tag summaries as a JSON list of {"tag", "item_count"} objects."""
    return save_raw_json([asdict(tag) for tag in tags], out_path)
