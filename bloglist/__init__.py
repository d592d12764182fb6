"""Bloglist backend: a blog listing API with token-gated authoring."""
