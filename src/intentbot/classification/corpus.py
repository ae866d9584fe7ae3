"""
Training corpus reader.

One record per line: the intent label, whitespace, then the sentence text.
Blank lines and '#' comments are ignored. A record without a label (line
starts with whitespace) or without text is logged and skipped.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Sequence, Tuple, Union

from intentbot.errors import MalformedTrainingRecord, TrainingDataInvalid

logger = logging.getLogger(__name__)

Tokenize = Callable[[str], Sequence[str]]


@dataclass(frozen=True)
class TrainingSample:
    """
    One labeled training example.

    Attributes:
        intent: Intent label
        tokens: Tokens (or lemmas) of the example sentence
        line_number: Corpus line the sample came from (0 if built in code)
    """
    intent: str
    tokens: Tuple[str, ...]
    line_number: int = 0


def parse_record(line: str, line_number: int, tokenize: Tokenize = str.split) -> TrainingSample:
    """
    Parse one corpus line.

    Raises:
        MalformedTrainingRecord: If the label or the text is missing
    """
    record = line.rstrip("\r\n")
    if record[:1].isspace():
        raise MalformedTrainingRecord(line_number, record, "missing intent label")
    parts = record.split(None, 1)
    if len(parts) < 2 or not parts[1].strip():
        raise MalformedTrainingRecord(line_number, record, "missing sentence text")
    intent, text = parts
    tokens = tuple(tokenize(text.strip()))
    if not tokens:
        raise MalformedTrainingRecord(line_number, record, "sentence text has no tokens")
    return TrainingSample(intent=intent, tokens=tokens, line_number=line_number)


def read_samples(lines: Iterable[str], tokenize: Tokenize = str.split) -> List[TrainingSample]:
    """Parse corpus lines, skipping malformed records with a warning."""
    samples = []
    skipped = 0
    for line_number, line in enumerate(lines, start=1):
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        try:
            samples.append(parse_record(line, line_number, tokenize))
        except MalformedTrainingRecord as e:
            skipped += 1
            logger.warning("Skipping training record: %s", e.message)
    logger.info("Read %d training samples (%d skipped)", len(samples), skipped)
    return samples


def load_corpus(path: Union[str, Path], tokenize: Tokenize = str.split) -> List[TrainingSample]:
    """
    Load training samples from a corpus file.

    Raises:
        TrainingDataInvalid: If the file cannot be read
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise TrainingDataInvalid(
            f"Unable to read training corpus {path}: {e}", details={"path": str(path)}
        ) from e
    return read_samples(text.splitlines(), tokenize)
