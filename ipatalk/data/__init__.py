"""Static data shipped with ipatalk: combining-mark constants and settings."""
