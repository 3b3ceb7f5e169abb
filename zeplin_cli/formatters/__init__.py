"""Text formatters for layer trees, style values and assets."""
