"""HTTP service exposing htmltoc."""
