"""Tool wrappers exposing the content store."""
