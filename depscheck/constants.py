"""Constants for depscheck."""

# Exit codes
EXIT_SUCCESS = 0  # All dependencies compatible
EXIT_VIOLATIONS = 1  # License violations found
EXIT_ERROR = 2  # Check failed due to error

# Legal disclaimer
LEGAL_DISCLAIMER = (
    "Compatibility verdicts are derived from declared license metadata and a "
    "fixed category matrix, for informational purposes only. They are not "
    "legal advice. Have a qualified attorney review any license decision "
    "that matters to your project."
)

# Short disclaimer for terminal display
LEGAL_DISCLAIMER_SHORT = (
    "Verdicts are informational only, based on declared license metadata. "
    "They are not legal advice."
)
