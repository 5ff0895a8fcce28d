"""Status line widgets."""
