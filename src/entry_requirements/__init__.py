"""
Entry Requirements - country classification by visa, e-authorization and
vaccination rules.

Reads a dataset of per-country advisory snippets, infers missing facts from
the Italian text, and assigns each country one of five map colors.

Modules:
    tristate - Three-valued facts and trusted/inferred reconciliation
    categories - Color labels and legend metadata
    models - Dataclasses for the interchange document
    extractor - Ordered regex rules inferring facts from text
    classifier - Decision table from facts to color
    pipeline - Per-record and whole-dataset classification pass
    validation - Dataset loading, writing and JSON schema validation
    advisory - Record construction from saved advisory payloads
    report - Color distribution summary
    config - YAML settings
    cli - Command-line interface entrypoints
"""

from . import tristate
from . import categories
from . import models
from . import extractor
from . import classifier
from . import pipeline
from . import validation
from . import advisory
from . import report
from . import config
from . import cli

from .categories import Color
from .classifier import classify
from .extractor import extract_facts
from .pipeline import classify_dataset, process_entry
from .tristate import TriState

__version__ = "1.0.0"
