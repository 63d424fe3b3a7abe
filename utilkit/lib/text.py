"""
String, encoding and collection helpers.

Features:
- Slugs, truncation and whitespace checks
- JSON and base64 validation, base64 encode/decode
- Integer range strings ("1-3,7" style components)
- URL and route path cleanup
- Order-preserving de-duplication
- Deep copy between pydantic models via JSON serialization
"""

import base64
import binascii
import json
import re
from typing import Any, Final, Hashable, Iterable, TypeVar
from urllib.parse import unquote, urlsplit
from pydantic import BaseModel, TypeAdapter

T = TypeVar("T", bound=Hashable)
ModelT = TypeVar("ModelT", bound=BaseModel)

_nonword_re: Final[re.Pattern[str]] = re.compile(r"\W+", re.ASCII)
_whitespace_re: Final[re.Pattern[str]] = re.compile(r"\s")
_slashes_re: Final[re.Pattern[str]] = re.compile(r"/{2,}")
_any_adapter: Final[TypeAdapter[Any]] = TypeAdapter(Any)


def text_slug(text: str) -> str:
    """Convert text to a URL-friendly slug: "Hello, World!" -> "hello-world"."""
    return _nonword_re.sub("-", text.lower()).strip("-")


def text_truncate(text: str, limit: int) -> str:
    """Cut `text` to `limit` characters and append "..." if it was longer."""
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def whitespace_has(text: str) -> bool:
    return bool(_whitespace_re.search(text))


def _constant_reject(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {name}")


def json_isValid(text: str) -> bool:
    """True if `text` is a valid JSON document (NaN/Infinity are rejected)."""
    try:
        json.loads(text, parse_constant=_constant_reject)
    except ValueError:
        return False
    return True


def base64_encode(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def base64_decode(text: str) -> str:
    """Decode standard, padded base64 to a UTF-8 string.

    Raises:
        ValueError: If the input is not valid base64 or not UTF-8 once decoded
    """
    try:
        data: bytes = base64.b64decode(text, validate=True)
    except binascii.Error as e:
        raise ValueError(f"invalid base64: {e}") from e
    return data.decode("utf-8")


def base64_isValid(text: str) -> bool:
    """True if `text` is non-empty, standard, padded base64."""
    if not text:
        return False
    try:
        base64.b64decode(text, validate=True)
    except binascii.Error:
        return False
    return True


def range_parse(text: str) -> list[int]:
    """Expand "3-6" to [3, 4, 5, 6]; a single integer yields a one-item list.

    Raises:
        ValueError: On malformed bounds or when start > end
    """
    if "-" not in text:
        try:
            return [int(text.strip())]
        except ValueError:
            raise ValueError(f"invalid integer value: {text}") from None

    parts: list[str] = text.split("-")
    if len(parts) != 2:
        raise ValueError(f"invalid range format: {text}")
    try:
        start: int = int(parts[0].strip())
    except ValueError:
        raise ValueError(f"invalid start value in range: {text}") from None
    try:
        end: int = int(parts[1].strip())
    except ValueError:
        raise ValueError(f"invalid end value in range: {text}") from None
    if start > end:
        raise ValueError(f"start value is greater than end value in range: {text}")
    return list(range(start, end + 1))


def ranges_parse(texts: Iterable[str]) -> list[int]:
    """Expand and concatenate several range strings, in order."""
    result: list[int] = []
    for text in texts:
        result.extend(range_parse(text))
    return result


def duplicates_remove(elements: Iterable[T]) -> list[T]:
    """Remove duplicates, keeping the first occurrence of each element."""
    return list(dict.fromkeys(elements))


def slices_merge(first: Iterable[str], second: Iterable[str]) -> list[str]:
    return [*first, *second]


def urlPath_clean(path: str) -> str:
    """Collapse repeated slashes and ensure a single leading slash."""
    path = _slashes_re.sub("/", path)
    if not path.startswith("/"):
        path = "/" + path
    return path


def routePath_parse(path: str, blocked: str) -> str:
    """Join a base path and a blocked sub-path, dropping a trailing "/*" or "*"."""
    base: str = urlPath_clean(path)
    if not blocked:
        return base
    if blocked.endswith("/*"):
        return base + blocked[:-2]
    if blocked.endswith("*"):
        return base + blocked[:-1]
    return base + blocked


def url_parsePath(uri: str) -> str:
    """Return the decoded path component of a URL, or "" if it cannot be parsed."""
    try:
        return unquote(urlsplit(uri).path)
    except ValueError:
        return ""


def model_deepCopy(target: ModelT, source: Any) -> ModelT:
    """Copy matching fields from `source` into a copy of `target`.

    The source (a pydantic model, dataclass or mapping) is serialized to JSON
    and read back; fields the target does not declare are ignored and fields
    the source lacks keep the target's values.

    Args:
        target: Model instance providing the type and the fallback values
        source: Object to copy from

    Returns:
        A new instance of type(target)

    Raises:
        TypeError: If target is not a pydantic model instance
        ValueError: If the source cannot be serialized to a JSON object, or the
            merged data fails validation
    """
    if not isinstance(target, BaseModel):
        raise TypeError("target must be a pydantic model instance")

    data: Any = json.loads(_any_adapter.dump_json(source))
    if not isinstance(data, dict):
        raise ValueError("source must serialize to a JSON object")

    fields = type(target).model_fields
    merged: dict[str, Any] = target.model_dump()
    merged.update({name: value for name, value in data.items() if name in fields})
    return type(target).model_validate(merged)
