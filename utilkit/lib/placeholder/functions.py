"""
Function registry for `{{name(args)}}` placeholders.

The registry maps lowercase function names to generators. It is built once,
with an explicit clock and random byte source, and is read-only afterwards:

    registry = FunctionRegistry(clock=fixed_clock, random_source=seeded.randbytes)
    registry.call("randomHex", "8")

Available functions:
- randomString(n): n random alphanumeric characters (default 32, max 1024)
- randomHex(n):    n random lowercase hex characters (default 32, max 1024)
- uuid():          random version 4 UUID
- timestamp():     Unix time in seconds
- timestampMs():   Unix time in milliseconds
- now():           current time, RFC 3339
- date(layout):    current time in the given layout (see layouts.py)
"""

import re
import secrets
import string
import uuid
from datetime import datetime, timedelta, timezone
from types import MappingProxyType
from typing import Callable, Final, Mapping
from utilkit.lib.log import LOG
from utilkit.lib.placeholder.layouts import date_format, rfc3339_format
from utilkit.models.dataModel import ParseResult

Clock = Callable[[], datetime]
RandomSource = Callable[[int], bytes]
Generator = Callable[[str], ParseResult]

DEFAULT_LENGTH: Final[int] = 32
MAX_LENGTH: Final[int] = 1024
ALPHANUMERIC: Final[str] = string.ascii_letters + string.digits
EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=timezone.utc)

_length_re: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


def clock_local() -> datetime:
    """Current local time, timezone aware."""
    return datetime.now().astimezone()


def length_parse(args: str) -> int | None:
    """Parse a length argument.

    Returns:
        The length, DEFAULT_LENGTH for empty args, or None when the argument
        is not an integer in [1, MAX_LENGTH]
    """
    if not args:
        return DEFAULT_LENGTH
    if not _length_re.fullmatch(args):
        return None
    length: int = int(args)
    if length < 1 or length > MAX_LENGTH:
        return None
    return length


def resolved(text: str) -> ParseResult:
    return ParseResult(text=text, error=None, success=True)


def unresolved(error: str) -> ParseResult:
    return ParseResult(text="", error=error, success=False)


class FunctionRegistry:
    """Immutable registry of placeholder generator functions."""

    def __init__(
        self,
        clock: Clock = clock_local,
        random_source: RandomSource = secrets.token_bytes,
    ) -> None:
        """Build the registry.

        Args:
            clock: Returns the current (timezone aware) time
            random_source: Returns the requested number of random bytes
        """
        self._clock: Clock = clock
        self._random_source: RandomSource = random_source
        self._functions: Mapping[str, Generator] = MappingProxyType(
            {
                "randomstring": self.randomString_generate,
                "randomhex": self.randomHex_generate,
                "uuid": self.uuid_generate,
                "timestamp": self.timestamp_generate,
                "timestampms": self.timestampMs_generate,
                "now": self.now_generate,
                "date": self.date_generate,
            }
        )

    @property
    def names(self) -> list[str]:
        return sorted(self._functions)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._functions

    def call(self, name: str, args: str = "") -> ParseResult:
        """Invoke a registered function.

        Args:
            name: Function name, matched case-insensitively
            args: Trimmed argument text

        Returns:
            ParseResult with the generated text, or an unsuccessful result
            when the function is unknown, its argument is invalid, or it fails
        """
        generator: Generator | None = self._functions.get(name.lower())
        if generator is None:
            return unresolved(f"Unknown function: {name}")
        try:
            return generator(args)
        except Exception as e:
            return unresolved(f"Function {name} failed: {e}")

    def _bytes_draw(self, count: int) -> bytes | None:
        try:
            data: bytes = self._random_source(count)
        except Exception as e:
            LOG(f"Random source failure: {e}")
            return None
        if len(data) < count:
            LOG(f"Random source returned {len(data)} of {count} bytes")
            return None
        return data

    def randomString_generate(self, args: str) -> ParseResult:
        length: int | None = length_parse(args)
        if length is None:
            return unresolved(f"Invalid length for randomString: {args}")
        data: bytes | None = self._bytes_draw(length)
        if data is None:
            return resolved("")
        return resolved(
            "".join(ALPHANUMERIC[byte % len(ALPHANUMERIC)] for byte in data)
        )

    def randomHex_generate(self, args: str) -> ParseResult:
        length: int | None = length_parse(args)
        if length is None:
            return unresolved(f"Invalid length for randomHex: {args}")
        data: bytes | None = self._bytes_draw((length + 1) // 2)
        if data is None:
            return resolved("")
        return resolved(data.hex()[:length])

    def uuid_generate(self, args: str) -> ParseResult:
        data: bytes | None = self._bytes_draw(16)
        if data is None:
            return resolved("")
        return resolved(str(uuid.UUID(bytes=data[:16], version=4)))

    def timestamp_generate(self, args: str) -> ParseResult:
        elapsed: timedelta = self._clock() - EPOCH
        return resolved(str(elapsed // timedelta(seconds=1)))

    def timestampMs_generate(self, args: str) -> ParseResult:
        elapsed: timedelta = self._clock() - EPOCH
        return resolved(str(elapsed // timedelta(milliseconds=1)))

    def now_generate(self, args: str) -> ParseResult:
        return resolved(rfc3339_format(self._clock()))

    def date_generate(self, args: str) -> ParseResult:
        return resolved(date_format(self._clock(), args))
