"""Free-text room measurement parser.

Turns quick-entry text such as::

    LR 11.6x13.6, BR 10.3*12
    Hall 5'6" x 8'0"

into pieces. Entries are separated by commas, semicolons, slashes or
newlines and may start with an alphabetic room label. A dimension is
written as feet with an optional inch part: ``11.6`` is 11ft 6in (the
digits after the point are inches, not a decimal fraction), ``12`` is
12ft, ``5'6"`` and ``5'`` use foot/inch marks. An inch part of 12 or
more (``11.15``) is an error rather than a carry into feet.

Malformed entries are reported individually and never abort the batch.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from carpets.domain.value_objects import INCHES_PER_FOOT, Piece

logger = logging.getLogger(__name__)

MAX_REASONABLE_FEET = 50

_ENTRY_SPLIT = re.compile(r"[,;/\n]+")
_LABEL = re.compile(r"^(?P<label>[A-Za-z][A-Za-z .&\-]*?)\s*(?=\d)")
_DIMENSION = r"\d+(?:\s*'\s*(?:\d{1,2}\s*(?:\"|'')?)?|\.\d{1,2})?"
_ENTRY = re.compile(
    rf"^(?P<width>{_DIMENSION})\s*(?P<sep>.*?)\s*(?P<length>{_DIMENSION})\s*$"
)
_ANY_DIMENSION = re.compile(r"\d")
_SEPARATORS = {"x", "*", "×", "by"}


@dataclass(frozen=True)
class BulkEntry:
    """One parsed entry.

    Attributes:
        raw: Entry text as typed.
        piece: Parsed piece, or None when the entry has an error.
        error: Reason the entry was skipped.
        warning: Note for a suspicious but accepted entry.
    """

    raw: str
    piece: Piece | None = None
    error: str | None = None
    warning: str | None = None


@dataclass(frozen=True)
class BulkParseResult:
    """All entries of a batch plus the usable pieces.

    Attributes:
        entries: Every non-empty entry, in input order.
        valid: Pieces from entries without errors (warnings included).
    """

    entries: tuple[BulkEntry, ...]
    valid: tuple[Piece, ...]

    @property
    def valid_count(self) -> int:
        return len(self.valid)

    @property
    def error_count(self) -> int:
        return sum(1 for entry in self.entries if entry.error)

    @property
    def warning_count(self) -> int:
        return sum(1 for entry in self.entries if entry.warning)


def parse_dimension(token: str) -> int:
    """Convert one dimension token to total inches.

    Args:
        token: ``11.6``, ``12``, ``5'6"`` or ``5'``.

    Returns:
        Total inches.

    Raises:
        ValueError: If the inch part is 12 or more.
    """
    token = token.strip()
    if "'" in token:
        feet, _, rest = token.partition("'")
        inches = re.sub(r"[^\d]", "", rest)
    elif "." in token:
        feet, _, inches = token.partition(".")
    else:
        feet, inches = token, ""

    inch_part = int(inches) if inches else 0
    if inch_part >= INCHES_PER_FOOT:
        raise ValueError(f"Inches must be under {INCHES_PER_FOOT} in '{token}'")
    return int(feet) * INCHES_PER_FOOT + inch_part


def _split_label(raw: str) -> tuple[str, str]:
    match = _LABEL.match(raw)
    if not match:
        return "", raw
    return match.group("label").strip(), raw[match.end():]


def parse_entry(raw: str, piece_id: int) -> BulkEntry:
    """Parse a single entry such as ``LR 11.6x13.6``.

    Args:
        raw: Entry text (already split from the batch).
        piece_id: Id to give the piece when the entry is valid.

    Returns:
        BulkEntry carrying either a piece or an error.
    """
    label, text = _split_label(raw)
    text = text.strip()

    if not _ANY_DIMENSION.search(text):
        return BulkEntry(raw=raw, error="No dimensions found")

    match = _ENTRY.match(text)
    if not match:
        return BulkEntry(raw=raw, error="Expected WIDTH x LENGTH")

    separator = match.group("sep").strip().lower()
    if separator not in _SEPARATORS:
        if separator:
            return BulkEntry(raw=raw, error=f"Unrecognised separator '{separator}'")
        return BulkEntry(raw=raw, error="Missing separator between dimensions")

    try:
        width = parse_dimension(match.group("width"))
        length = parse_dimension(match.group("length"))
    except ValueError as e:
        return BulkEntry(raw=raw, error=str(e))
    if width == 0 or length == 0:
        return BulkEntry(raw=raw, error="Width and length must be greater than zero")

    warning = None
    limit = MAX_REASONABLE_FEET * INCHES_PER_FOOT
    if width > limit or length > limit:
        warning = f"Dimension over {MAX_REASONABLE_FEET}ft, check the entry"

    piece = Piece.from_inches(piece_id, width, length, label=label)
    return BulkEntry(raw=raw, piece=piece, warning=warning)


def parse_bulk_measurements(text: str, next_id: int = 1) -> BulkParseResult:
    """Parse a batch of free-text measurements.

    Args:
        text: Entries separated by commas, semicolons, slashes or newlines.
        next_id: Id for the first valid piece; later pieces count up.

    Returns:
        BulkParseResult with every entry and the valid pieces.
    """
    entries: list[BulkEntry] = []
    valid: list[Piece] = []

    for raw in _ENTRY_SPLIT.split(text):
        raw = raw.strip()
        if not raw:
            continue
        entry = parse_entry(raw, next_id)
        entries.append(entry)
        if entry.error:
            logger.debug("Skipping entry %r: %s", raw, entry.error)
            continue
        if entry.warning:
            logger.warning("Entry %r: %s", raw, entry.warning)
        assert entry.piece is not None
        valid.append(entry.piece)
        next_id += 1

    return BulkParseResult(entries=tuple(entries), valid=tuple(valid))
