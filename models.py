from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any, List


class ItemStatus(Enum):
    UNREAD = "0"
    ARCHIVED = "1"
    DELETED = "2"


class MediaFlag(Enum):
    """Value of ``has_image`` / ``has_video``: 2 means the item *is* one."""

    NONE = "0"
    HAS = "1"
    IS = "2"


@dataclass
class RequestTokenResult:
    code: str
    state: Optional[str] = None


@dataclass
class AccessTokenResult:
    access_token: str
    username: str


@dataclass
class ItemTag:
    item_id: Optional[str] = None
    tag: Optional[str] = None


@dataclass
class ItemImage:
    item_id: Optional[str] = None
    image_id: Optional[str] = None
    src: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    credit: Optional[str] = None
    caption: Optional[str] = None


@dataclass
class SavedItem:
    item_id: Optional[str]
    resolved_id: Optional[str] = None
    given_url: Optional[str] = None
    given_title: Optional[str] = None
    resolved_url: Optional[str] = None
    resolved_title: Optional[str] = None
    excerpt: Optional[str] = None
    favorite: bool = False
    status: Optional[ItemStatus] = None
    is_article: bool = False
    is_index: bool = False
    has_image: Optional[MediaFlag] = None
    has_video: Optional[MediaFlag] = None
    time_added: Optional[int] = None  # epoch seconds
    time_updated: Optional[int] = None
    time_read: Optional[int] = None
    time_favorited: Optional[int] = None
    sort_id: Optional[int] = None
    word_count: Optional[int] = None
    listen_duration_estimate: Optional[int] = None
    lang: Optional[str] = None
    top_image_url: Optional[str] = None
    tags: Dict[str, ItemTag] = field(default_factory=dict)
    image: Optional[ItemImage] = None
    images: Dict[str, ItemImage] = field(default_factory=dict)
    original: Dict[str, Any] = field(
        default_factory=dict
    )  # Preserve all original fields for auditing

    @property
    def url(self) -> Optional[str]:
        return self.resolved_url or self.given_url

    @property
    def title(self) -> Optional[str]:
        return self.resolved_title or self.given_title

    @property
    def tag_names(self) -> List[str]:
        return list(self.tags.keys())


@dataclass
class SearchMeta:
    search_type: Optional[str] = None


@dataclass
class ListResponse:
    status: Optional[int] = None
    complete: Optional[int] = None
    items: Dict[str, SavedItem] = field(default_factory=dict)  # wire key "list"
    error: Optional[str] = None
    search_meta: SearchMeta = field(default_factory=SearchMeta)
    since: Optional[int] = None
    original: Dict[str, Any] = field(default_factory=dict)


@dataclass
class TagSummary:
    tag: str
    item_count: int
