"""
Pipeline and conversation constants.

Defaults for classifier training, spaCy components and the canned responses
of the insurance-agent persona.
"""

# ==============================================================================
# Intent Classifier Training
# ==============================================================================

DEFAULT_CUTOFF = 0
"""Minimum total occurrences of a feature across the corpus. The stock
maxent default is 5, which wipes out most words of a small chat corpus."""

DEFAULT_ITERATIONS = 100
"""Maximum training passes for GIS (and max_iter for lbfgs)."""

DEFAULT_TOLERANCE = 1e-4
"""Stop GIS once the log-likelihood gain of a pass drops below this."""

DEFAULT_ALGORITHM = "gis"
"""Training algorithm: "gis" (iterative scaling) or "lbfgs" (scikit-learn)."""

TRAINING_ALGORITHMS = ("gis", "lbfgs")

DEFAULT_REGULARIZATION = 1.0
"""Inverse L2 strength passed to LogisticRegression when algorithm is lbfgs."""

FEATURE_PREFIX = "bow="
"""Prefix of bag-of-words feature ids."""

# ==============================================================================
# Annotators (spaCy)
# ==============================================================================

DEFAULT_SPACY_MODEL = "en_core_web_sm"
"""spaCy pipeline providing the tagger and lemmatizer. A package name or a
path to a pipeline directory."""

DEFAULT_LANGUAGE = "en"
"""Language of the blank pipeline used for sentence segmentation."""

TAGGING_PIPES = ("transformer", "tok2vec", "tagger")
"""Components run to assign fine-grained tags."""

LEMMATIZING_PIPES = ("attribute_ruler", "lemmatizer")
"""Components run to map tags to lemmas."""

REQUIRED_PIPES = ("tagger", "attribute_ruler", "lemmatizer")
"""Components a loaded pipeline must provide."""

EXCLUDED_PIPES = ("parser", "ner")
"""Components never needed for intent classification."""

DEFAULT_POS_TAG = "NN"
"""Tag assigned to a word with no tag and no matching shape rule."""

PENN_TREEBANK_TAGS = (
    "$", "''", ",", "-LRB-", "-RRB-", ".", ":", "ADD", "AFX", "CC", "CD", "DT",
    "EX", "FW", "HYPH", "IN", "JJ", "JJR", "JJS", "LS", "MD", "NFP", "NN",
    "NNP", "NNPS", "NNS", "PDT", "POS", "PRP", "PRP$", "RB", "RBR", "RBS",
    "RP", "SYM", "TO", "UH", "VB", "VBD", "VBG", "VBN", "VBP", "VBZ", "WDT",
    "WP", "WP$", "WRB", "XX", "_SP", "``",
)
"""Tagset assumed when a pipeline has no tagger component."""

SUFFIX_TAGS = (
    ("ing", "VBG"),
    ("ed", "VBD"),
    ("ly", "RB"),
    ("s", "NNS"),
)
"""Suffix -> tag rules for untagged lowercase words, checked in order."""

TRAINING_CORPUS_FILE = "documentcategorizer.txt"

# ==============================================================================
# Conversation
# ==============================================================================

TERMINAL_INTENT = "conversation-complete"
"""Intent that ends the conversation."""

RESPONSE_SEPARATOR = " "

DEFAULT_RESPONSES = {
    "greeting": "Hello, my name is Stacy.  How may I help you today?",
    "product-inquiry": (
        "Our company sells Auto, Life, and Homeowners Insurance to help "
        "protect you, and your loved ones."
    ),
    "price-inquiry": (
        "The price is competitive, based on your specific needs, and "
        "coverage options."
    ),
    "contact-inquiry": "Please free to reach us via telephone at 1-800-555-sold.",
    "conversation-continue": "What else can I help you with?",
    "conversation-complete": "It was nice chatting with you. Goodbye!",
}

USER_PROMPT = "##### You:  "
AGENT_PREFIX = "##### Virtual Agent: "
