"""Mix report generation."""
