"""Small text and date helpers."""
