"""Front ends for the investigation session."""
