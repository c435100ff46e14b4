# sources.py — dictionary files -> (word, definition) pairs

# handles reading dictionary data for the Lexicon:
# - CSV: first field is the word, the remaining fields form the definition
# - JSON: [{"word": ..., "definition": ...}, ...]
# - merging per-letter CSV exports (A.csv .. Z.csv) into one file
# any read/parse failure is raised as LoadError

from __future__ import annotations
import csv
import json
import string
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from lexicon_engine.core.lexicon import Lexicon
from lexicon_engine.errors import LoadError
from lexicon_engine.utils.logger_utils import Log

PathLike = Union[str, Path]
Pair = Tuple[str, str]


@dataclass
class LoadReport:
    path: str
    total: int
    seconds: float


def _row_to_pair(row: List[str]) -> Optional[Pair]:
    if not row:
        return None
    word = row[0].strip()
    if not word:
        return None
    definition = " ".join(row[1:]).strip()
    return word, definition


def read_csv_pairs(path: PathLike) -> Iterator[Pair]:
    """
    Yield (word, definition) for each CSV row.
    Blank rows and rows whose first field is blank are skipped.
    """
    try:
        with open(path, "r", encoding="utf-8-sig", newline="") as f:
            for row in csv.reader(f):
                pair = _row_to_pair(row)
                if pair is not None:
                    yield pair
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise LoadError(path, str(e)) from e


def read_json_pairs(path: PathLike) -> Iterator[Pair]:
    """
    Yield (word, definition) from a JSON array of {"word", "definition"} objects.
    Items that are not objects or have a blank word are skipped.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        raise LoadError(path, str(e)) from e
    if not isinstance(data, list):
        raise LoadError(path, "expected a JSON array of entries")

    for item in data:
        if not isinstance(item, dict):
            continue
        word = str(item.get("word") or "").strip()
        if not word:
            continue
        definition = str(item.get("definition") or "").strip()
        yield word, definition


def read_pairs(path: PathLike) -> Iterator[Pair]:
    """Pick the reader from the file suffix (.json, everything else is CSV)."""
    if Path(path).suffix.lower() == ".json":
        return read_json_pairs(path)
    return read_csv_pairs(path)


def load_dictionary(lexicon: Lexicon, path: PathLike, log: Optional[Log] = None) -> LoadReport:
    """Bulk-load a dictionary file into `lexicon`."""
    log = log or Log()
    log.info(f"loading dictionary from {path}")
    try:
        with log.time_block(f"load {path}") as timer:
            total = lexicon.load(read_pairs(path))
    except LoadError as e:
        log.error(str(e))
        raise
    log.info(f"dictionary loaded: {total} entries, {len(lexicon)} unique words")
    return LoadReport(path=str(path), total=total, seconds=timer.elapsed)


def merge_letter_files(
    folder: PathLike, output: PathLike = "dictionary.csv", log: Optional[Log] = None
) -> List[str]:
    """
    Concatenate A.csv .. Z.csv from `folder` into `output`.
    Missing files are skipped with a warning, empty ones are ignored.
    Returns the names of the files that contributed content.
    """
    log = log or Log()
    folder = Path(folder)
    chunks: List[str] = []
    merged: List[str] = []
    for letter in string.ascii_uppercase:
        name = f"{letter}.csv"
        src = folder / name
        if not src.exists():
            log.warning(f"skipping missing file: {name}")
            continue
        try:
            content = src.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(src, str(e)) from e
        if content:
            chunks.append(content)
            merged.append(name)

    out = Path(output)
    try:
        out.write_text("\n".join(chunks), encoding="utf-8")
    except OSError as e:
        raise LoadError(out, str(e)) from e
    log.info(f"merged {len(merged)} files into {out}")
    return merged
