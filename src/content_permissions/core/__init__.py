"""Core building blocks shared by content-permissions features."""
