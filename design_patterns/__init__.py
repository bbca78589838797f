"""Classic object-oriented design patterns, one runnable module per pattern."""
