"""spaCy annotator loading and the training corpus shipped with the package."""

from intentbot.resources.loader import (
    AnnotatorSuite,
    load_annotators,
    load_training_samples,
    read_resource,
)

__all__ = [
    "AnnotatorSuite",
    "load_annotators",
    "load_training_samples",
    "read_resource",
]
