from enum import Enum
from typing import Dict, Any, Optional, Type, TypeVar
from models import (
    AccessTokenResult,
    ItemImage,
    ItemStatus,
    ItemTag,
    ListResponse,
    MediaFlag,
    RequestTokenResult,
    SavedItem,
    SearchMeta,
)

E = TypeVar("E", bound=Enum)


def _get_str(raw: Dict[str, Any], name: str) -> Optional[str]:
    val = raw.get(name)
    return str(val) if val is not None else None


def _get_int(raw: Dict[str, Any], name: str) -> Optional[int]:
    val = raw.get(name)
    try:
        return int(val) if val is not None else None
    except (ValueError, TypeError):
        return None


def _get_epoch(raw: Dict[str, Any], name: str) -> Optional[int]:
    # Pocket sends "0" for events that never happened (not read, not favorited)
    val = _get_int(raw, name)
    return val if val else None


def _get_flag(raw: Dict[str, Any], name: str) -> bool:
    return _get_str(raw, name) == "1"


def _get_enum(enum_cls: Type[E], raw: Dict[str, Any], name: str) -> Optional[E]:
    val = _get_str(raw, name)
    try:
        return enum_cls(val) if val is not None else None
    except ValueError:
        return None


def _as_mapping(value: Any) -> Dict[str, Any]:
    # Empty collections come back as JSON arrays instead of objects
    return value if isinstance(value, dict) else {}


def _require_object(raw: Any, what: str) -> Dict[str, Any]:
    if not isinstance(raw, dict):
        raise ValueError(f"Expected a JSON object for {what}, got {type(raw).__name__}")
    return raw


def _require_str(raw: Dict[str, Any], name: str) -> str:
    val = raw.get(name)
    if not isinstance(val, str):
        raise ValueError(f"Missing or invalid '{name}' field")
    return val


def parse_request_token(raw: Any) -> RequestTokenResult:
    """Parse the body of /v3/oauth/request."""
    raw = _require_object(raw, "request token response")
    return RequestTokenResult(
        code=_require_str(raw, "code"),
        state=_get_str(raw, "state"),
    )


def parse_access_token(raw: Any) -> AccessTokenResult:
    """Parse the body of /v3/oauth/authorize."""
    raw = _require_object(raw, "access token response")
    return AccessTokenResult(
        access_token=_require_str(raw, "access_token"),
        username=_require_str(raw, "username"),
    )


def parse_item_tag(raw: Any, tag_name: str, item_id: Optional[str] = None) -> ItemTag:
    raw = _as_mapping(raw)
    return ItemTag(
        item_id=_get_str(raw, "item_id") or item_id,
        tag=_get_str(raw, "tag") or tag_name,
    )


def parse_item_image(raw: Any) -> Optional[ItemImage]:
    if not isinstance(raw, dict):
        return None
    return ItemImage(
        item_id=_get_str(raw, "item_id"),
        image_id=_get_str(raw, "image_id"),
        src=_get_str(raw, "src"),
        width=_get_int(raw, "width"),
        height=_get_int(raw, "height"),
        credit=_get_str(raw, "credit"),
        caption=_get_str(raw, "caption"),
    )


def parse_saved_item(raw: Any, item_id: Optional[str] = None) -> SavedItem:
    """
    Parse one entry of the ``list`` mapping into a SavedItem.

    String-encoded flags become booleans or enums, timestamps become epoch
    seconds (None for "0"), and missing or malformed optional fields become
    None. ``item_id`` is the mapping key and is used when the entry itself
    carries no id.
    """
    raw = _require_object(raw, f"item {item_id}")
    own_id = _get_str(raw, "item_id") or item_id

    tags = {
        str(name): parse_item_tag(tag, str(name), own_id)
        for name, tag in _as_mapping(raw.get("tags")).items()
    }
    images = {}
    for key, image in _as_mapping(raw.get("images")).items():
        parsed = parse_item_image(image)
        if parsed is not None:
            images[str(key)] = parsed

    return SavedItem(
        item_id=own_id,
        resolved_id=_get_str(raw, "resolved_id"),
        given_url=_get_str(raw, "given_url"),
        given_title=_get_str(raw, "given_title"),
        resolved_url=_get_str(raw, "resolved_url"),
        resolved_title=_get_str(raw, "resolved_title"),
        excerpt=_get_str(raw, "excerpt"),
        favorite=_get_flag(raw, "favorite"),
        status=_get_enum(ItemStatus, raw, "status"),
        is_article=_get_flag(raw, "is_article"),
        is_index=_get_flag(raw, "is_index"),
        has_image=_get_enum(MediaFlag, raw, "has_image"),
        has_video=_get_enum(MediaFlag, raw, "has_video"),
        time_added=_get_epoch(raw, "time_added"),
        time_updated=_get_epoch(raw, "time_updated"),
        time_read=_get_epoch(raw, "time_read"),
        time_favorited=_get_epoch(raw, "time_favorited"),
        sort_id=_get_int(raw, "sort_id"),
        word_count=_get_int(raw, "word_count"),
        listen_duration_estimate=_get_int(raw, "listen_duration_estimate"),
        lang=_get_str(raw, "lang"),
        top_image_url=_get_str(raw, "top_image_url"),
        tags=tags,
        image=parse_item_image(raw.get("image")),
        images=images,
        original=raw.copy(),
    )


def parse_list_response(raw: Any) -> ListResponse:
    """Parse the /v3/get envelope. Raises ValueError on an unexpected shape."""
    raw = _require_object(raw, "list response")

    items_raw = raw.get("list")
    if items_raw is None or isinstance(items_raw, list):
        items_raw = {}
    elif not isinstance(items_raw, dict):
        raise ValueError(f"Unexpected 'list' field of type {type(items_raw).__name__}")

    items = {
        str(key): parse_saved_item(item, str(key)) for key, item in items_raw.items()
    }
    search_meta = _as_mapping(raw.get("search_meta"))

    return ListResponse(
        status=_get_int(raw, "status"),
        complete=_get_int(raw, "complete"),
        items=items,
        error=_get_str(raw, "error"),
        search_meta=SearchMeta(search_type=_get_str(search_meta, "search_type")),
        since=_get_int(raw, "since"),
        original=raw.copy(),
    )
