"""Code & Coffee backend: developer quiz and coffee sommelier API."""
