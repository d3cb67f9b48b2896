"""Mix session configuration."""
