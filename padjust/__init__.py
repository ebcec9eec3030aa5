"""P-value adjustment for multiple hypothesis testing.

Bonferroni (FWER), Benjamini-Hochberg and Benjamini-Yekutieli (FDR)
corrections over unsorted input, returned in the caller's order.
"""

import logging

from .multiple_testing import (
    Bonferroni,
    BenjaminiHochberg,
    BenjaminiYekutieli,
    CorrectionResult,
    Procedure,
    adjust,
    annotate_adjusted_p_values,
    apply_multiple_testing_correction,
    multiple_testing_correction,
)

__version__ = "0.1.0"

# Library-friendly: leave handlers/levels to callers
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Bonferroni",
    "BenjaminiHochberg",
    "BenjaminiYekutieli",
    "CorrectionResult",
    "Procedure",
    "adjust",
    "annotate_adjusted_p_values",
    "apply_multiple_testing_correction",
    "multiple_testing_correction",
]
