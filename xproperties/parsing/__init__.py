"""Low level codec for the .properties text format."""
