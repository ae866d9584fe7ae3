"""
Annotator and training corpus loading.

The tokenizer, tagger and lemmatizer share one spaCy pipeline, loaded by
package name or from a directory. A missing pipeline and every missing
component are collected and reported together, so a broken install names
everything that is wrong at once.
"""

import logging
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Dict, List, Optional, Union

import spacy
from spacy.language import Language

from intentbot.annotation.lemmatizer import Lemmatizer
from intentbot.annotation.segmenter import SentenceSegmenter
from intentbot.annotation.tagger import PosTagger
from intentbot.annotation.tokenizer import Tokenizer
from intentbot.classification.corpus import TrainingSample, Tokenize, load_corpus, read_samples
from intentbot.config.constants import (
    DEFAULT_SPACY_MODEL,
    EXCLUDED_PIPES,
    REQUIRED_PIPES,
    TRAINING_CORPUS_FILE,
)
from intentbot.errors import ResourceLoadFailure, TrainingDataInvalid

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class AnnotatorSuite:
    """The four loaded annotators."""
    segmenter: SentenceSegmenter
    tokenizer: Tokenizer
    tagger: PosTagger
    lemmatizer: Lemmatizer


def read_resource(name: str) -> str:
    """Read a text file shipped in package data."""
    return (resources.files("intentbot.resources") / "data" / name).read_text(encoding="utf-8")


def missing_components(nlp: Language) -> List[str]:
    return [name for name in REQUIRED_PIPES if not nlp.has_pipe(name)]


def load_annotators(model: Optional[PathLike] = None) -> AnnotatorSuite:
    """
    Load the spaCy pipeline and build every annotator on it.

    Args:
        model: Installed pipeline name or pipeline directory
            (DEFAULT_SPACY_MODEL if None)

    Returns:
        AnnotatorSuite with all four annotators

    Raises:
        ResourceLoadFailure: Naming the pipeline or every missing component
    """
    model = str(model or DEFAULT_SPACY_MODEL)
    failures: Dict[str, str] = {}

    try:
        nlp = spacy.load(model, exclude=list(EXCLUDED_PIPES))
    except (OSError, ValueError, ImportError) as e:
        logger.error("Exception while attempting to load %s: %s", model, e)
        failures[model] = f"{type(e).__name__}: {e}"
    else:
        for name in missing_components(nlp):
            logger.error("Pipeline %s has no %s component", model, name)
            failures[name] = f"Component {name!r} missing from pipeline {model!r}"

    if failures:
        logger.error("Not all models were loaded. Check model name/location.")
        raise ResourceLoadFailure(failures)

    suite = AnnotatorSuite(
        segmenter=SentenceSegmenter(nlp.lang),
        tokenizer=Tokenizer(nlp),
        tagger=PosTagger(nlp),
        lemmatizer=Lemmatizer(nlp),
    )
    logger.info("All models loaded successfully! (%s: %s)", model, ", ".join(nlp.pipe_names))
    return suite


def load_training_samples(
    corpus_path: Optional[PathLike] = None,
    tokenize: Tokenize = str.split,
) -> List[TrainingSample]:
    """
    Load the training corpus, from corpus_path or the packaged default.

    Raises:
        TrainingDataInvalid: If the corpus cannot be read
    """
    if corpus_path is not None:
        return load_corpus(corpus_path, tokenize)
    try:
        text = read_resource(TRAINING_CORPUS_FILE)
    except OSError as e:
        raise TrainingDataInvalid(f"Packaged training corpus is missing: {e}") from e
    return read_samples(text.splitlines(), tokenize)
