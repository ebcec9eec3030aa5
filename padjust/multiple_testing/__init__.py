"""Multiple testing correction utilities for statistical hypothesis testing.

This package provides methods for controlling family-wise error rate (FWER)
and false discovery rate (FDR) when performing multiple hypothesis tests.

Modules
-------
bonferroni
    Bonferroni FWER correction
benjamini_hochberg
    Benjamini-Hochberg step-up FDR correction
benjamini_yekutieli
    Benjamini-Yekutieli FDR correction under arbitrary dependence
dispatcher
    Unified interface for selecting correction method
annotate
    DataFrame annotation with adjusted p-values
"""

from .bonferroni import Bonferroni
from .benjamini_hochberg import BenjaminiHochberg
from .benjamini_yekutieli import BenjaminiYekutieli, harmonic_number
from .dispatcher import (
    CorrectionResult,
    Procedure,
    adjust,
    apply_multiple_testing_correction,
    multiple_testing_correction,
)
from .annotate import annotate_adjusted_p_values

__all__ = [
    # Correctors
    "Bonferroni",
    "BenjaminiHochberg",
    "BenjaminiYekutieli",
    "harmonic_number",
    # Dispatcher
    "CorrectionResult",
    "Procedure",
    "adjust",
    "apply_multiple_testing_correction",
    "multiple_testing_correction",
    # DataFrame helpers
    "annotate_adjusted_p_values",
]
