import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Tuple

MAX_PORT = 65535

# Unsigned 16-bit text: ASCII digits, optional leading '+'. No whitespace, no sign '-'.
_U16_RE = re.compile(r"\+?[0-9]+")

# Unicode White_Space only. str.strip() with no argument also drops \x1c-\x1f.
_WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class PortRangeError(ValueError):
    """
    Base error for a port string that could not be parsed.
    `text` holds the offending input exactly as it was cited.
    """
    template = "Invalid port: {}"

    def __init__(self, text: str):
        self.text = text
        super().__init__(self.template.format(text))


class InvalidPort(PortRangeError):
    template = "Invalid port: {}"


class InvalidRangeFormat(PortRangeError):
    template = "Invalid port range: {}"


class InvalidRangeStart(PortRangeError):
    template = "Invalid start port: {}"


class InvalidRangeEnd(PortRangeError):
    template = "Invalid end port: {}"


class InvalidRangeOrder(PortRangeError):
    template = "Start port is greater than end port: {}"


def _check_port(port) -> None:
    if isinstance(port, bool) or not isinstance(port, int) or not 0 <= port <= MAX_PORT:
        raise ValueError(f"Port out of range 0-{MAX_PORT}: {port!r}")


class PortSelection(ABC):
    """
    Which ports a scan targets. Either a SinglePort or a PortRanges.
    """

    @abstractmethod
    def ports(self) -> Iterator[int]:
        """Yields every selected port in input order."""

    def __iter__(self) -> Iterator[int]:
        return self.ports()


@dataclass(frozen=True)
class SinglePort(PortSelection):
    port: int

    def __post_init__(self):
        _check_port(self.port)

    def ports(self) -> Iterator[int]:
        yield self.port

    def __len__(self) -> int:
        return 1

    def __str__(self) -> str:
        return str(self.port)


@dataclass(frozen=True)
class PortRanges(PortSelection):
    """
    Ordered (start, end) pairs, inclusive on both ends.
    Kept exactly as given: no sorting, merging or dedup.
    """
    ranges: Tuple[Tuple[int, int], ...]

    def __post_init__(self):
        ranges = tuple(tuple(pair) for pair in self.ranges)
        if not ranges:
            raise ValueError("Port range list must not be empty")
        for pair in ranges:
            if len(pair) != 2:
                raise ValueError(f"Port range must be a (start, end) pair: {pair!r}")
            start, end = pair
            _check_port(start)
            _check_port(end)
            if start > end:
                raise ValueError(f"Range start must be <= end: {start}-{end}")
        # frozen dataclass: normalise lists to tuples so the value stays hashable
        object.__setattr__(self, "ranges", ranges)

    def ports(self) -> Iterator[int]:
        for start, end in self.ranges:
            yield from range(start, end + 1)

    def __len__(self) -> int:
        return sum(end - start + 1 for start, end in self.ranges)

    def __str__(self) -> str:
        return ",".join(f"{start}-{end}" for start, end in self.ranges)


def _parse_u16(text: str):
    """Returns the port number, or None if `text` is not an unsigned 16-bit integer."""
    if not _U16_RE.fullmatch(text):
        return None
    value = int(text)
    if value > MAX_PORT:
        return None
    return value


def parse_port_range(target_ports: str) -> PortSelection:
    """
    Parses a port specification into a PortSelection.

    "8080"                -> SinglePort(8080)
    "8000-8080"           -> PortRanges(((8000, 8080),))
    "8000-8080,9000-9090" -> PortRanges(((8000, 8080), (9000, 9090)))

    Raises a PortRangeError subclass on the first bad segment.
    """
    # Single port
    if "-" not in target_ports and "," not in target_ports:
        port = _parse_u16(target_ports)
        if port is None:
            raise InvalidPort(target_ports)
        return SinglePort(port)

    port_ranges = []
    for segment in target_ports.split(","):
        parts = segment.split("-")
        if len(parts) != 2:
            raise InvalidRangeFormat(segment)

        start = _parse_u16(parts[0].strip(_WHITESPACE))
        if start is None:
            raise InvalidRangeStart(parts[0])
        end = _parse_u16(parts[1].strip(_WHITESPACE))
        if end is None:
            raise InvalidRangeEnd(parts[1])

        if start > end:
            raise InvalidRangeOrder(segment)

        port_ranges.append((start, end))

    return PortRanges(tuple(port_ranges))
