"""Release build pipeline resolution for JavaScript projects."""
