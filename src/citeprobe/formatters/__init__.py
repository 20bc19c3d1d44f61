"""Output formatters for probes, verdicts and summaries."""
