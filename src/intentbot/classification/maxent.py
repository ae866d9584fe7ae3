"""
Maximum-entropy intent classification.

A multinomial logistic model over bag-of-words counts:

    P(intent | x) = softmax(x . W + b)

Two trainers are available:
- "gis": Generalized Iterative Scaling. Each pass moves every observed
  (feature, intent) weight by log(observed / expected) / C, where C is the
  largest total feature count of any sample. Weights of pairs never seen
  together stay at zero.
- "lbfgs": scikit-learn's LogisticRegression, mapped onto the same model.

Intents are enumerated in the order they first appear in the training
samples; argmax ties resolve to the earliest intent.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
from sklearn.feature_extraction import DictVectorizer
from sklearn.linear_model import LogisticRegression
from sklearn.metrics import accuracy_score, classification_report

from intentbot.classification.corpus import TrainingSample
from intentbot.classification.features import BagOfWordsFeatureExtractor, FeatureVector
from intentbot.config.constants import (
    DEFAULT_ALGORITHM,
    DEFAULT_CUTOFF,
    DEFAULT_ITERATIONS,
    DEFAULT_REGULARIZATION,
    DEFAULT_TOLERANCE,
    TRAINING_ALGORITHMS,
)
from intentbot.errors import TrainingDataInvalid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrainingOptions:
    """
    Classifier training configuration.

    Attributes:
        cutoff: Features seen fewer times than this across the corpus are dropped
        iterations: Maximum optimization passes
        tolerance: GIS stops once a pass improves log-likelihood by less than this
        algorithm: "gis" or "lbfgs"
        regularization: Inverse L2 strength (lbfgs only)
    """
    cutoff: int = DEFAULT_CUTOFF
    iterations: int = DEFAULT_ITERATIONS
    tolerance: float = DEFAULT_TOLERANCE
    algorithm: str = DEFAULT_ALGORITHM
    regularization: float = DEFAULT_REGULARIZATION

    def __post_init__(self):
        if self.cutoff < 0:
            raise ValueError("cutoff must be non-negative")
        if self.iterations < 1:
            raise ValueError("iterations must be at least 1")
        if self.tolerance < 0:
            raise ValueError("tolerance must be non-negative")
        if self.algorithm not in TRAINING_ALGORITHMS:
            raise ValueError(f"Unknown training algorithm {self.algorithm!r}")
        if self.regularization <= 0:
            raise ValueError("regularization must be positive")


@dataclass(frozen=True)
class IntentResult:
    """Result of intent classification."""
    intent: str
    confidence: float
    probabilities: Dict[str, float] = field(default_factory=dict)

    def __repr__(self) -> str:
        return f"IntentResult({self.intent}, conf={self.confidence:.2f})"


@dataclass(frozen=True)
class MaxentModel:
    """
    Trained intent model. Read-only once returned by train().

    Attributes:
        labels: Intents in first-seen training order
        vectorizer: Fitted DictVectorizer mapping feature ids to columns
        weights: (n_features, n_labels) weight matrix
        bias: Per-intent bias
        iterations_run: Optimization passes actually performed
        log_likelihood: Training log-likelihood of the final weights
        converged: Whether training stopped before exhausting its budget
    """
    labels: Tuple[str, ...]
    vectorizer: DictVectorizer
    weights: np.ndarray
    bias: np.ndarray
    iterations_run: int = 0
    log_likelihood: float = float("nan")
    converged: bool = False

    def __post_init__(self):
        self.weights.setflags(write=False)
        self.bias.setflags(write=False)

    @property
    def feature_names(self) -> List[str]:
        return list(self.vectorizer.get_feature_names_out())

    def vectorize(self, features: FeatureVector) -> np.ndarray:
        """Dense row for one feature vector; unseen features are dropped."""
        return self.vectorizer.transform([features])[0]

    def scores(self, features: FeatureVector) -> np.ndarray:
        return self.vectorize(features) @ self.weights + self.bias

    def __repr__(self) -> str:
        return (
            f"MaxentModel(labels={len(self.labels)}, features={self.weights.shape[0]}, "
            f"iterations={self.iterations_run}, converged={self.converged})"
        )


def _softmax(scores: np.ndarray) -> np.ndarray:
    shifted = scores - scores.max(axis=-1, keepdims=True)
    exp = np.exp(shifted)
    return exp / exp.sum(axis=-1, keepdims=True)


def train(
    samples: Iterable[TrainingSample],
    options: Optional[TrainingOptions] = None,
    extractor: Optional[BagOfWordsFeatureExtractor] = None,
) -> MaxentModel:
    """
    Fit a maximum-entropy model to labeled samples.

    Args:
        samples: Training samples
        options: Training configuration (defaults if omitted)
        extractor: Feature extractor applied to each sample's tokens

    Returns:
        Trained MaxentModel

    Raises:
        TrainingDataInvalid: If there are no samples or fewer than two intents
    """
    options = options or TrainingOptions()
    extractor = extractor or BagOfWordsFeatureExtractor()
    samples = list(samples)

    if not samples:
        raise TrainingDataInvalid("Training corpus is empty")
    labels = tuple(dict.fromkeys(sample.intent for sample in samples))
    if len(labels) < 2:
        raise TrainingDataInvalid(
            f"Training corpus needs at least two intents, found {list(labels)}",
            details={"labels": list(labels)},
        )

    vectorizer = DictVectorizer(sparse=False)
    x = vectorizer.fit_transform([extractor.extract(sample.tokens) for sample in samples])
    if options.cutoff > 0:
        support = x.sum(axis=0) >= options.cutoff
        vectorizer.restrict(support)
        x = x[:, support]
    y = np.array([labels.index(sample.intent) for sample in samples])

    logger.info(
        "Training %s model: %d samples, %d features, %d intents",
        options.algorithm,
        len(samples),
        x.shape[1],
        len(labels),
    )

    if options.algorithm == "lbfgs":
        weights, bias, iterations_run, converged = _train_lbfgs(x, y, len(labels), options)
    else:
        weights, bias, iterations_run, converged = _train_gis(x, y, len(labels), options)

    log_likelihood = _log_likelihood(x @ weights + bias, y)
    logger.info(
        "Categorizer model trained after %d iterations (log-likelihood %.4f%s)",
        iterations_run,
        log_likelihood,
        ", converged" if converged else "",
    )
    return MaxentModel(
        labels=labels,
        vectorizer=vectorizer,
        weights=weights,
        bias=bias,
        iterations_run=iterations_run,
        log_likelihood=log_likelihood,
        converged=converged,
    )


def _log_likelihood(scores: np.ndarray, y: np.ndarray) -> float:
    probabilities = _softmax(scores)
    return float(np.log(probabilities[np.arange(len(y)), y]).sum())


def _train_gis(
    x: np.ndarray, y: np.ndarray, n_labels: int, options: TrainingOptions
) -> Tuple[np.ndarray, np.ndarray, int, bool]:
    n_samples, n_features = x.shape

    # Bias is an always-on feature in the last column
    design = np.hstack([x, np.ones((n_samples, 1))])
    targets = np.zeros((n_samples, n_labels))
    targets[np.arange(n_samples), y] = 1.0

    observed = design.T @ targets
    active = observed > 0
    log_observed = np.zeros_like(observed)
    log_observed[active] = np.log(observed[active])
    correction = design.sum(axis=1).max()

    params = np.zeros((n_features + 1, n_labels))
    previous = None
    converged = False
    iterations_run = 0

    for iteration in range(1, options.iterations + 1):
        probabilities = _softmax(design @ params)
        log_likelihood = float(np.log(probabilities[np.arange(n_samples), y]).sum())
        if previous is not None and log_likelihood - previous < options.tolerance:
            converged = True
            break

        expected = design.T @ probabilities
        params[active] += (log_observed[active] - np.log(expected[active])) / correction
        iterations_run = iteration
        previous = log_likelihood
        logger.debug("GIS iteration %d: log-likelihood %.6f", iteration, log_likelihood)

    return params[:-1].copy(), params[-1].copy(), iterations_run, converged


def _train_lbfgs(
    x: np.ndarray, y: np.ndarray, n_labels: int, options: TrainingOptions
) -> Tuple[np.ndarray, np.ndarray, int, bool]:
    classifier = LogisticRegression(
        C=options.regularization,
        max_iter=options.iterations,
        solver="lbfgs",
    )
    classifier.fit(x, y)

    # classes_ are the sorted label indices, i.e. first-seen order already
    coef = classifier.coef_
    intercept = classifier.intercept_
    if n_labels == 2:
        # Binary fit returns one logit; split it into a symmetric softmax pair
        coef = np.vstack([-coef[0] / 2.0, coef[0] / 2.0])
        intercept = np.array([-intercept[0] / 2.0, intercept[0] / 2.0])

    iterations_run = int(np.max(classifier.n_iter_))
    converged = iterations_run < options.iterations
    return coef.T.copy(), intercept.astype(float).copy(), iterations_run, converged


def classify(model: MaxentModel, features: FeatureVector) -> IntentResult:
    """
    Classify one feature vector.

    Args:
        model: Trained model
        features: Bag-of-words counts of one sentence

    Returns:
        IntentResult with the most probable intent, its probability and the
        full distribution over model.labels
    """
    probabilities = _softmax(model.scores(features))
    best = int(np.argmax(probabilities))
    result = IntentResult(
        intent=model.labels[best],
        confidence=float(probabilities[best]),
        probabilities={
            label: float(p) for label, p in zip(model.labels, probabilities)
        },
    )
    logger.debug("Category: %s (%.3f)", result.intent, result.confidence)
    return result


def evaluate(
    model: MaxentModel,
    samples: Sequence[TrainingSample],
    extractor: Optional[BagOfWordsFeatureExtractor] = None,
) -> Dict[str, object]:
    """
    Score a model against labeled samples.

    Returns:
        Dictionary with "accuracy" and a printable "report"
    """
    extractor = extractor or BagOfWordsFeatureExtractor()
    y_true = [sample.intent for sample in samples]
    y_pred = [classify(model, extractor.extract(sample.tokens)).intent for sample in samples]
    return {
        "accuracy": float(accuracy_score(y_true, y_pred)),
        "report": classification_report(
            y_true, y_pred, labels=list(model.labels), zero_division=0
        ),
    }
