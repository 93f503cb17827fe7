"""Constants specific to Jira operations."""

# Page size used when a search asks for none or for an out-of-range value
DEFAULT_MAX_RESULTS = 50

# Largest page size passed through to Jira unchanged
MAX_RESULTS_LIMIT = 1000
