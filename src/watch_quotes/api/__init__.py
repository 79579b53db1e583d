"""HTTP service exposing the transcript pipeline."""
