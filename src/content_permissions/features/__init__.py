"""Feature packages of content-permissions."""
