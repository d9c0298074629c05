"""In-process sample services used by the demo views."""
