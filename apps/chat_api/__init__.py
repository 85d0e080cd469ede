"""OpenNotionAI chat API."""
