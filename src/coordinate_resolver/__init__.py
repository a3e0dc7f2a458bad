"""Resolution of checkout locations to coordinates."""
