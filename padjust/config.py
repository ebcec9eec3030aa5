"""
Central configuration for the padjust library.
"""

# --- Statistical Parameters ---

# Default significance level (alpha) used to turn adjusted p-values into
# rejection decisions.
SIGNIFICANCE_ALPHA: float = 0.05

# Procedure used when callers do not name one.
# Options: 'bonferroni', 'bh', 'by' (or any alias below)
DEFAULT_PROCEDURE: str = "bh"

# --- Input Validation ---

# Reject non-finite p-values and values outside [0, 1] before correcting.
# Set to False to pass values straight through to the correctors, which only
# refuse NaN (it cannot be ordered).
VALIDATE_P_VALUES: bool = True

# Number of offending entries previewed in validation error messages.
ERROR_PREVIEW_COUNT: int = 5

# --- Procedure Names ---

# Alternate spellings accepted by Procedure.from_name (matched lower-cased).
PROCEDURE_ALIASES: dict[str, str] = {
    "bonferroni": "bonferroni",
    "bonf": "bonferroni",
    "bh": "bh",
    "fdr": "bh",
    "fdr_bh": "bh",
    "benjamini-hochberg": "bh",
    "benjamini_hochberg": "bh",
    "by": "by",
    "fdr_by": "by",
    "benjamini-yekutieli": "by",
    "benjamini_yekutieli": "by",
}
