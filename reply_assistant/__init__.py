"""Customer complaint reply assistant backed by Google Gemini."""
