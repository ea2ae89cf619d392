"""Core building blocks shared by all studio-commons features."""
