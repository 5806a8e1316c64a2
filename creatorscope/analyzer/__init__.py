"""Channel analysis: data collection, evaluation and orchestration."""
