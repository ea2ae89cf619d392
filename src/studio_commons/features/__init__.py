"""Feature packages of studio-commons."""
